"""SQLAlchemy models."""

from tracker.models.category import Category
from tracker.models.item import Item
from tracker.models.push_subscription import PushSubscription
from tracker.models.tracker_settings import TrackerSettings

__all__ = [
    "Category",
    "Item",
    "TrackerSettings",
    "PushSubscription",
]
