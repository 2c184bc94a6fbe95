"""Starter categories and items for a fresh install."""

import logging

from tracker.services.consistency import CategoryManager
from tracker.services.store import TrackerStore

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    {"name": "Devices", "icon": "laptop", "color": "blue"},
    {"name": "Food", "icon": "utensils", "color": "green"},
    {"name": "Keys", "icon": "key", "color": "yellow"},
    {"name": "Miscellaneous", "icon": "box", "color": "purple"},
]

DEFAULT_ITEMS = {
    "Devices": ["Laptop", "Phone Charger", "Headphones"],
    "Food": ["Rice", "Curry", "Snacks", "Water Bottle"],
    "Keys": ["House Keys", "Car Keys", "Office Keys"],
    "Miscellaneous": ["Wallet", "Sunglasses"],
}


def seed_default_data(store: TrackerStore) -> bool:
    """Create the starter checklist if the database holds no data yet.

    Returns True if anything was created.
    """
    if store.list_categories() or store.list_items():
        return False

    manager = CategoryManager(store)
    with store.transaction():
        for category_data in DEFAULT_CATEGORIES:
            category = manager.create_category(**category_data)
            for item_name in DEFAULT_ITEMS.get(category_data["name"], []):
                manager.create_item(item_name, category.id)

    logger.info(f"Seeded {len(DEFAULT_CATEGORIES)} default categories")
    return True
