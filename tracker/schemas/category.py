"""Category schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    """Create a new category."""

    name: str = Field(..., max_length=255)
    icon: str = Field("box", max_length=50)
    color: str = Field("blue", max_length=20)


class CategoryUpdate(BaseModel):
    """Update a category."""

    name: str | None = Field(None, max_length=255)
    icon: str | None = Field(None, max_length=50)
    color: str | None = Field(None, max_length=20)


class CategoryCheckedUpdate(BaseModel):
    """Check or uncheck every item in a category."""

    checked: bool


class CategoryResponse(BaseModel):
    """Category response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    icon: str
    color: str
    is_unsorted: bool
    created_at: datetime
    updated_at: datetime
