"""Category/item consistency rules.

Keeps the item -> category relation valid while both sides are created,
edited and deleted:

- category names are unique, compared case-insensitively;
- items whose category goes away fall back to the Unsorted category, which
  is created on demand and dropped again once nothing references it;
- Unsorted itself can be recolored but never renamed or deleted.

Every composite operation runs inside a single store transaction so no
reader ever observes an item pointing at a deleted category.
"""

import logging
from typing import Any

from tracker.models import Category, Item
from tracker.models.category import UNSORTED_COLOR, UNSORTED_ICON, UNSORTED_ID, UNSORTED_NAME
from tracker.services.errors import (
    DuplicateNameError,
    NotFoundError,
    ProtectedEntityError,
    ValidationError,
)
from tracker.services.store import TrackerStore

logger = logging.getLogger(__name__)


def _clean_name(field: str, value: str | None) -> str:
    name = (value or "").strip()
    if not name:
        raise ValidationError(field, f"{field.capitalize()} must not be empty")
    return name


class CategoryManager:
    """Service enforcing referential rules between items and categories."""

    def __init__(self, store: TrackerStore):
        self.store = store

    # Categories

    def list_categories(self) -> list[Category]:
        """List categories: Unsorted first, then by name (case-sensitive)."""
        self.collect_unsorted()
        categories = self.store.list_categories()
        return sorted(categories, key=lambda c: (not c.is_unsorted, c.name))

    def get_category(self, category_id: str) -> Category:
        category = self.store.get_category(category_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category

    def create_category(self, name: str, icon: str = "box", color: str = "blue") -> Category:
        name = _clean_name("name", name)
        with self.store.transaction():
            self._check_name_available(name)
            category = self.store.create_category(name=name, icon=icon, color=color)
        logger.info(f"Created category {category.id} ({name})")
        return category

    def update_category(self, category_id: str, updates: dict[str, Any]) -> Category:
        """Apply a partial update; renaming Unsorted is rejected."""
        changes = {k: v for k, v in updates.items() if v is not None}
        with self.store.transaction():
            category = self.get_category(category_id)
            if "name" in changes:
                name = _clean_name("name", changes["name"])
                if category.is_unsorted:
                    if name != category.name:
                        raise ProtectedEntityError("The Unsorted category cannot be renamed")
                    del changes["name"]
                else:
                    self._check_name_available(name, exclude_id=category_id)
                    changes["name"] = name
            category = self.store.update_category(category_id, **changes)
        return category

    def delete_category(self, category_id: str) -> int:
        """Delete a category, moving its items to Unsorted.

        Returns the number of reassigned items.
        """
        if category_id == UNSORTED_ID:
            raise ProtectedEntityError("The Unsorted category cannot be deleted")
        with self.store.transaction():
            self.get_category(category_id)
            moved = 0
            if self.store.count_items_in_category(category_id):
                self.ensure_unsorted()
                moved = self.store.reassign_items(UNSORTED_ID, from_category_id=category_id)
            self.store.delete_category(category_id)
        logger.info(f"Deleted category {category_id}, moved {moved} item(s) to Unsorted")
        return moved

    def delete_all_categories(self) -> int:
        """Delete every category; surviving items end up in a fresh Unsorted."""
        with self.store.transaction():
            has_items = bool(self.store.list_items())
            if has_items:
                self.ensure_unsorted()
                self.store.reassign_items(UNSORTED_ID)
            removed = 0
            for category in self.store.list_categories():
                if has_items and category.is_unsorted:
                    continue
                self.store.delete_category(category.id)
                removed += 1
        logger.info(f"Deleted {removed} category(ies)")
        return removed

    def ensure_unsorted(self) -> Category:
        """Return the Unsorted category, creating it if needed."""
        unsorted = self.store.get_category(UNSORTED_ID)
        if unsorted is None:
            unsorted = self.store.create_category(
                name=UNSORTED_NAME,
                icon=UNSORTED_ICON,
                color=UNSORTED_COLOR,
                category_id=UNSORTED_ID,
            )
            logger.info("Created Unsorted category")
        return unsorted

    def collect_unsorted(self) -> bool:
        """Drop Unsorted when no item references it. Returns True if dropped."""
        with self.store.transaction():
            if self.store.get_category(UNSORTED_ID) is None:
                return False
            if self.store.count_items_in_category(UNSORTED_ID):
                return False
            self.store.delete_category(UNSORTED_ID)
        logger.debug("Dropped empty Unsorted category")
        return True

    def set_category_checked(self, category_id: str, checked: bool) -> list[Item]:
        """Check or uncheck every item of a category."""
        with self.store.transaction():
            self.get_category(category_id)
            self.store.set_checked(checked, category_id=category_id)
        return self.store.list_items_by_category(category_id)

    def _check_name_available(self, name: str, exclude_id: str | None = None) -> None:
        if name.lower() == UNSORTED_NAME.lower():
            raise DuplicateNameError(f"'{UNSORTED_NAME}' is a reserved category name")
        if self.store.find_category_by_name(name, exclude_id=exclude_id) is not None:
            raise DuplicateNameError("Category with this name already exists")

    # Items

    def list_items(self, category_id: str | None = None) -> list[Item]:
        if category_id is None:
            return self.store.list_items()
        return self.store.list_items_by_category(category_id)

    def get_item(self, item_id: str) -> Item:
        item = self.store.get_item(item_id)
        if item is None:
            raise NotFoundError("Item not found")
        return item

    def create_item(self, name: str, category_id: str | None = None, checked: bool = False) -> Item:
        """Create an item; no category (or "unsorted") means the Unsorted bucket."""
        name = _clean_name("name", name)
        with self.store.transaction():
            target = self._resolve_category(category_id or UNSORTED_ID)
            item = self.store.create_item(name=name, category_id=target, checked=checked)
        return item

    def update_item(self, item_id: str, updates: dict[str, Any]) -> Item:
        changes = {k: v for k, v in updates.items() if v is not None}
        with self.store.transaction():
            self.get_item(item_id)
            if "name" in changes:
                changes["name"] = _clean_name("name", changes["name"])
            if "category_id" in changes:
                changes["category_id"] = self._resolve_category(changes["category_id"])
            item = self.store.update_item(item_id, **changes)
        return item

    def delete_item(self, item_id: str) -> None:
        with self.store.transaction():
            self.get_item(item_id)
            self.store.delete_item(item_id)

    def delete_all_items(self) -> int:
        count = self.store.delete_all_items()
        logger.info(f"Deleted {count} item(s)")
        return count

    def _resolve_category(self, category_id: str) -> str:
        if category_id == UNSORTED_ID:
            return self.ensure_unsorted().id
        return self.get_category(category_id).id
