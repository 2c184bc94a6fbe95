"""Item schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ItemCreate(BaseModel):
    """Create a new item. Without a category the item goes to Unsorted."""

    name: str = Field(..., max_length=500)
    category_id: str | None = Field(None, max_length=36)
    checked: bool = False


class ItemUpdate(BaseModel):
    """Update an item."""

    name: str | None = Field(None, max_length=500)
    category_id: str | None = Field(None, max_length=36)
    checked: bool | None = None


class ItemResponse(BaseModel):
    """Item response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    category_id: str
    name: str
    checked: bool
    created_at: datetime
    updated_at: datetime
