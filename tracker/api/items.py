"""Item API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from tracker.api.dependencies import get_category_manager, get_reset_scheduler
from tracker.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from tracker.services.consistency import CategoryManager
from tracker.services.scheduler import ResetScheduler

router = APIRouter(prefix="/api", tags=["items"])


@router.get("/items", response_model=list[ItemResponse])
def get_items(manager: Annotated[CategoryManager, Depends(get_category_manager)]):
    """Get all items."""
    return manager.list_items()


@router.get("/items/category/{category_id}", response_model=list[ItemResponse])
def get_items_by_category(
    category_id: str,
    manager: Annotated[CategoryManager, Depends(get_category_manager)],
):
    """Get the items of one category."""
    return manager.list_items(category_id)


@router.post("/items", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def create_item(
    item_data: ItemCreate,
    manager: Annotated[CategoryManager, Depends(get_category_manager)],
):
    """Create a new item."""
    return manager.create_item(
        name=item_data.name,
        category_id=item_data.category_id,
        checked=item_data.checked,
    )


@router.post("/items/reset", status_code=status.HTTP_204_NO_CONTENT)
def reset_items(scheduler: Annotated[ResetScheduler, Depends(get_reset_scheduler)]):
    """Uncheck every item now and record today's reset."""
    scheduler.reset_now()


@router.put("/items/{item_id}", response_model=ItemResponse)
def update_item(
    item_id: str,
    item_data: ItemUpdate,
    manager: Annotated[CategoryManager, Depends(get_category_manager)],
):
    """Update an item."""
    return manager.update_item(item_id, item_data.model_dump(exclude_unset=True))


@router.post("/items/{item_id}/check", response_model=ItemResponse)
def check_item(
    item_id: str,
    manager: Annotated[CategoryManager, Depends(get_category_manager)],
):
    """Check off an item."""
    return manager.update_item(item_id, {"checked": True})


@router.post("/items/{item_id}/uncheck", response_model=ItemResponse)
def uncheck_item(
    item_id: str,
    manager: Annotated[CategoryManager, Depends(get_category_manager)],
):
    """Uncheck an item."""
    return manager.update_item(item_id, {"checked": False})


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(
    item_id: str,
    manager: Annotated[CategoryManager, Depends(get_category_manager)],
):
    """Delete an item."""
    manager.delete_item(item_id)


@router.delete("/items", status_code=status.HTTP_204_NO_CONTENT)
def delete_all_items(manager: Annotated[CategoryManager, Depends(get_category_manager)]):
    """Delete every item."""
    manager.delete_all_items()
