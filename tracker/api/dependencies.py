"""FastAPI dependencies for the tracker services."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from tracker.database import get_db
from tracker.services.consistency import CategoryManager
from tracker.services.notification_service import NotificationService
from tracker.services.scheduler import ResetScheduler, create_scheduler
from tracker.services.store import TrackerStore


def get_store(db: Annotated[Session, Depends(get_db)]) -> TrackerStore:
    """Get the persistence store bound to the request session."""
    return TrackerStore(db)


def get_category_manager(
    store: Annotated[TrackerStore, Depends(get_store)],
) -> CategoryManager:
    """Get the category/item consistency manager."""
    return CategoryManager(store)


def get_notification_service(
    store: Annotated[TrackerStore, Depends(get_store)],
) -> NotificationService:
    """Get notification service instance."""
    return NotificationService(store)


def get_reset_scheduler(db: Annotated[Session, Depends(get_db)]) -> ResetScheduler:
    """Get the reset scheduler."""
    return create_scheduler(db)
