"""SQLAlchemy-backed persistence for categories, items and settings."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tracker.models import Category, Item, PushSubscription, TrackerSettings
from tracker.models.tracker_settings import SETTINGS_ID
from tracker.services.errors import PersistenceError

logger = logging.getLogger(__name__)

# Single writer: HTTP requests and the reset ticker all mutate through this lock
_write_lock = threading.RLock()


class TrackerStore:
    """Persistence collaborator used by the scheduler and the consistency manager.

    Mutating methods join the enclosing transaction when called inside
    ``transaction()``, so a composite operation commits exactly once.
    """

    def __init__(self, db: Session):
        self.db = db
        self._depth = 0

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Serialize a unit of work and commit it at the outermost level."""
        with _write_lock:
            self._depth += 1
            outermost = self._depth == 1
            try:
                yield self.db
                if outermost:
                    self.db.commit()
            except SQLAlchemyError as e:
                if outermost:
                    self.db.rollback()
                logger.error(f"Storage operation failed: {e}", exc_info=True)
                raise PersistenceError("Storage operation failed") from e
            except Exception:
                if outermost:
                    self.db.rollback()
                raise
            finally:
                self._depth -= 1

    # Categories

    def list_categories(self) -> list[Category]:
        return self.db.query(Category).order_by(Category.created_at).all()

    def get_category(self, category_id: str) -> Category | None:
        return self.db.get(Category, category_id)

    def find_category_by_name(self, name: str, exclude_id: str | None = None) -> Category | None:
        """Find a category by case-insensitive name."""
        wanted = name.lower()
        for category in self.list_categories():
            if category.id != exclude_id and category.name.lower() == wanted:
                return category
        return None

    def create_category(
        self,
        name: str,
        icon: str = "box",
        color: str = "blue",
        category_id: str | None = None,
    ) -> Category:
        fields: dict[str, Any] = {"name": name, "icon": icon, "color": color}
        if category_id is not None:
            fields["id"] = category_id
        with self.transaction():
            category = Category(**fields)
            self.db.add(category)
            self.db.flush()
        return category

    def update_category(self, category_id: str, **updates: Any) -> Category | None:
        with self.transaction():
            category = self.get_category(category_id)
            if category is None:
                return None
            for field, value in updates.items():
                setattr(category, field, value)
            self.db.flush()
        return category

    def delete_category(self, category_id: str) -> bool:
        """Remove a category row. Callers are responsible for its items."""
        with self.transaction():
            category = self.get_category(category_id)
            if category is None:
                return False
            self.db.delete(category)
            self.db.flush()
        return True

    # Items

    def list_items(self) -> list[Item]:
        return self.db.query(Item).order_by(Item.created_at, Item.name).all()

    def list_items_by_category(self, category_id: str) -> list[Item]:
        return (
            self.db.query(Item)
            .filter(Item.category_id == category_id)
            .order_by(Item.created_at, Item.name)
            .all()
        )

    def count_items_in_category(self, category_id: str) -> int:
        return self.db.query(Item).filter(Item.category_id == category_id).count()

    def get_item(self, item_id: str) -> Item | None:
        return self.db.get(Item, item_id)

    def create_item(self, name: str, category_id: str, checked: bool = False) -> Item:
        with self.transaction():
            item = Item(name=name, category_id=category_id, checked=checked)
            self.db.add(item)
            self.db.flush()
        return item

    def update_item(self, item_id: str, **updates: Any) -> Item | None:
        with self.transaction():
            item = self.get_item(item_id)
            if item is None:
                return None
            for field, value in updates.items():
                setattr(item, field, value)
            self.db.flush()
        return item

    def delete_item(self, item_id: str) -> bool:
        with self.transaction():
            item = self.get_item(item_id)
            if item is None:
                return False
            self.db.delete(item)
            self.db.flush()
        return True

    def delete_all_items(self) -> int:
        with self.transaction():
            count = self.db.query(Item).delete(synchronize_session="fetch")
        return count

    def reassign_items(self, to_category_id: str, from_category_id: str | None = None) -> int:
        """Point items at another category; all items when no source is given."""
        with self.transaction():
            query = self.db.query(Item)
            if from_category_id is not None:
                query = query.filter(Item.category_id == from_category_id)
            count = query.update({Item.category_id: to_category_id}, synchronize_session="fetch")
        return count

    def set_checked(self, checked: bool, category_id: str | None = None) -> int:
        """Set the checked flag on all items, optionally within one category."""
        with self.transaction():
            query = self.db.query(Item)
            if category_id is not None:
                query = query.filter(Item.category_id == category_id)
            count = query.update({Item.checked: checked}, synchronize_session="fetch")
        return count

    def reset_all_checked(self) -> int:
        return self.set_checked(False)

    # Settings

    def get_settings(self, refresh: bool = False) -> TrackerSettings:
        """Get the settings singleton, creating it with defaults on first use.

        ``refresh`` reloads the row from the database instead of trusting the
        session's copy, for callers deciding on it under the write lock.
        """
        settings = self.db.get(TrackerSettings, SETTINGS_ID)
        if settings is None:
            with self.transaction():
                # Another session may have created it while we waited for the lock
                settings = self.db.get(TrackerSettings, SETTINGS_ID)
                if settings is None:
                    settings = TrackerSettings(id=SETTINGS_ID)
                    self.db.add(settings)
                    self.db.flush()
        elif refresh:
            self.db.refresh(settings)
        return settings

    def update_settings(self, **updates: Any) -> TrackerSettings:
        with self.transaction():
            settings = self.get_settings()
            for field, value in updates.items():
                setattr(settings, field, value)
            self.db.flush()
        return settings

    def mark_reset(self, day: date) -> TrackerSettings:
        """Record a reset on ``day``; last_reset_date never moves backwards."""
        with self.transaction():
            settings = self.get_settings()
            if settings.last_reset_date is None or day > settings.last_reset_date:
                settings.last_reset_date = day
            elif day < settings.last_reset_date:
                logger.warning(
                    f"Clock reports {day} before last reset {settings.last_reset_date}, "
                    "keeping stored date"
                )
            self.db.flush()
        return settings

    # Push subscriptions

    def list_push_subscriptions(self) -> list[PushSubscription]:
        return self.db.query(PushSubscription).all()

    def upsert_push_subscription(
        self, endpoint: str, p256dh_key: str, auth_key: str
    ) -> PushSubscription:
        with self.transaction():
            subscription = (
                self.db.query(PushSubscription).filter(PushSubscription.endpoint == endpoint).first()
            )
            if subscription is None:
                subscription = PushSubscription(endpoint=endpoint)
                self.db.add(subscription)
            subscription.p256dh_key = p256dh_key
            subscription.auth_key = auth_key
            self.db.flush()
        return subscription

    def delete_push_subscription(self, endpoint: str) -> bool:
        with self.transaction():
            count = (
                self.db.query(PushSubscription)
                .filter(PushSubscription.endpoint == endpoint)
                .delete(synchronize_session="fetch")
            )
        return count > 0
