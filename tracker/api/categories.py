"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from tracker.api.dependencies import get_category_manager
from tracker.schemas.category import (
    CategoryCheckedUpdate,
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
)
from tracker.schemas.item import ItemResponse
from tracker.services.consistency import CategoryManager

router = APIRouter(prefix="/api", tags=["categories"])


@router.get("/categories", response_model=list[CategoryResponse])
def get_categories(manager: Annotated[CategoryManager, Depends(get_category_manager)]):
    """Get all categories, Unsorted first."""
    return manager.list_categories()


@router.post(
    "/categories",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_category(
    category_data: CategoryCreate,
    manager: Annotated[CategoryManager, Depends(get_category_manager)],
):
    """Create a new category."""
    return manager.create_category(
        name=category_data.name,
        icon=category_data.icon,
        color=category_data.color,
    )


@router.put("/categories/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: str,
    category_data: CategoryUpdate,
    manager: Annotated[CategoryManager, Depends(get_category_manager)],
):
    """Update a category."""
    return manager.update_category(category_id, category_data.model_dump(exclude_unset=True))


@router.put("/categories/{category_id}/checked", response_model=list[ItemResponse])
def set_category_checked(
    category_id: str,
    checked_data: CategoryCheckedUpdate,
    manager: Annotated[CategoryManager, Depends(get_category_manager)],
):
    """Check or uncheck every item in a category."""
    return manager.set_category_checked(category_id, checked_data.checked)


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: str,
    manager: Annotated[CategoryManager, Depends(get_category_manager)],
):
    """Delete a category. Its items move to Unsorted."""
    manager.delete_category(category_id)


@router.delete("/categories", status_code=status.HTTP_204_NO_CONTENT)
def delete_all_categories(manager: Annotated[CategoryManager, Depends(get_category_manager)]):
    """Delete every category. All items move to Unsorted."""
    manager.delete_all_categories()
