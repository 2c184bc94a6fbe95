"""Tests for the category/item consistency manager."""

import pytest

from tracker.models.category import UNSORTED_COLOR, UNSORTED_ID, UNSORTED_NAME
from tracker.services.defaults import DEFAULT_CATEGORIES, DEFAULT_ITEMS, seed_default_data
from tracker.services.errors import (
    DuplicateNameError,
    NotFoundError,
    ProtectedEntityError,
    ValidationError,
)


def _assert_no_dangling_items(store):
    category_ids = {c.id for c in store.list_categories()}
    for item in store.list_items():
        assert item.category_id in category_ids


def test_create_category(manager):
    """Test creating a category assigns a fresh id."""
    first = manager.create_category("Devices", icon="laptop", color="blue")
    second = manager.create_category("Food")

    assert first.id != second.id
    assert first.icon == "laptop"
    assert second.icon == "box"
    assert second.color == "blue"


def test_create_category_strips_name(manager):
    """Test that surrounding whitespace is dropped from names."""
    category = manager.create_category("  Keys  ")
    assert category.name == "Keys"


def test_create_category_empty_name(manager):
    """Test that an empty name is rejected with field detail."""
    with pytest.raises(ValidationError) as exc_info:
        manager.create_category("   ")
    assert exc_info.value.field == "name"


def test_create_category_case_insensitive_duplicate(manager, store):
    """Test that "Keys" and "keys" collide."""
    manager.create_category("Keys")

    with pytest.raises(DuplicateNameError):
        manager.create_category("keys")

    assert [c.name for c in store.list_categories()] == ["Keys"]


def test_create_category_reserved_name(manager):
    """Test that nobody can create a second "Unsorted"."""
    with pytest.raises(DuplicateNameError):
        manager.create_category("unsorted")


def test_create_item_in_category(manager):
    """Test creating an item in an existing category."""
    devices = manager.create_category("Devices")
    item = manager.create_item("Laptop", devices.id)

    assert item.category_id == devices.id
    assert item.checked is False


def test_create_item_unknown_category(manager, store):
    """Test that items cannot point at a category that does not exist."""
    with pytest.raises(NotFoundError):
        manager.create_item("Laptop", "no-such-category")
    assert store.list_items() == []


def test_create_item_empty_name(manager):
    """Test that an item needs a name."""
    with pytest.raises(ValidationError):
        manager.create_item("", None)


def test_create_unsorted_item_creates_unsorted_category(manager, store):
    """Test that the Unsorted category appears on demand."""
    assert store.get_category(UNSORTED_ID) is None

    item = manager.create_item("Wallet", UNSORTED_ID)

    unsorted = store.get_category(UNSORTED_ID)
    assert item.category_id == UNSORTED_ID
    assert unsorted.name == UNSORTED_NAME
    assert unsorted.color == UNSORTED_COLOR


def test_create_item_without_category_goes_to_unsorted(manager):
    """Test that omitting the category means Unsorted."""
    item = manager.create_item("Sunglasses")
    assert item.category_id == UNSORTED_ID


def test_second_unsorted_item_reuses_category(manager, store):
    """Test that Unsorted is only created once."""
    manager.create_item("Wallet", UNSORTED_ID)
    manager.create_item("Sunglasses", UNSORTED_ID)

    assert len(store.list_categories()) == 1
    assert store.count_items_in_category(UNSORTED_ID) == 2


def test_delete_category_moves_items_to_unsorted(manager, store):
    """Test the cascade: Devices is deleted and Laptop lands in Unsorted."""
    devices = manager.create_category("Devices")
    manager.create_category("Food")
    laptop = manager.create_item("Laptop", devices.id, checked=True)

    moved = manager.delete_category(devices.id)

    assert moved == 1
    laptop = store.get_item(laptop.id)
    assert laptop.category_id == UNSORTED_ID
    assert laptop.checked is True
    assert [c.name for c in manager.list_categories()] == ["Unsorted", "Food"]
    assert store.list_items_by_category(devices.id) == []
    _assert_no_dangling_items(store)


def test_delete_category_reassigns_every_item(manager, store):
    """Test that all N items of a deleted category are reassigned."""
    keys = manager.create_category("Keys")
    for name in ["House Keys", "Car Keys", "Office Keys"]:
        manager.create_item(name, keys.id)
    manager.create_item("Wallet", UNSORTED_ID)

    moved = manager.delete_category(keys.id)

    assert moved == 3
    assert store.count_items_in_category(UNSORTED_ID) == 4
    assert store.count_items_in_category(keys.id) == 0


def test_delete_empty_category_does_not_create_unsorted(manager, store):
    """Test that deleting an empty category leaves no Unsorted behind."""
    food = manager.create_category("Food")

    assert manager.delete_category(food.id) == 0
    assert store.list_categories() == []


def test_delete_unsorted_is_protected(manager, store):
    """Test that the sentinel cannot be deleted directly."""
    manager.create_item("Wallet", UNSORTED_ID)

    with pytest.raises(ProtectedEntityError):
        manager.delete_category(UNSORTED_ID)

    assert store.get_category(UNSORTED_ID) is not None


def test_delete_unknown_category(manager):
    """Test deleting a category that does not exist."""
    with pytest.raises(NotFoundError):
        manager.delete_category("missing")


def test_rename_category(manager):
    """Test renaming a category."""
    category = manager.create_category("Snacks")
    updated = manager.update_category(category.id, {"name": "Food"})
    assert updated.name == "Food"


def test_rename_category_collision(manager):
    """Test that renaming onto another category's name fails."""
    manager.create_category("Devices")
    food = manager.create_category("Food")

    with pytest.raises(DuplicateNameError):
        manager.update_category(food.id, {"name": "DEVICES"})


def test_rename_category_case_only(manager):
    """Test that a category can change the case of its own name."""
    food = manager.create_category("food")
    assert manager.update_category(food.id, {"name": "Food"}).name == "Food"


def test_rename_unsorted_rejected(manager, store):
    """Test that Unsorted keeps its name."""
    manager.create_item("Wallet", UNSORTED_ID)

    with pytest.raises(ProtectedEntityError):
        manager.update_category(UNSORTED_ID, {"name": "Misc"})

    assert store.get_category(UNSORTED_ID).name == UNSORTED_NAME


def test_recolor_unsorted_allowed(manager):
    """Test that Unsorted accepts color changes, even with its name resubmitted."""
    manager.create_item("Wallet", UNSORTED_ID)

    updated = manager.update_category(UNSORTED_ID, {"name": "Unsorted", "color": "#ff0000"})

    assert updated.color == "#ff0000"
    assert updated.name == UNSORTED_NAME


def test_update_unknown_category(manager):
    """Test updating a category that does not exist."""
    with pytest.raises(NotFoundError):
        manager.update_category("missing", {"color": "red"})


def test_delete_all_categories(manager, store):
    """Test that all items survive in a fresh Unsorted category."""
    devices = manager.create_category("Devices")
    food = manager.create_category("Food")
    manager.create_item("Laptop", devices.id)
    manager.create_item("Rice", food.id)

    manager.delete_all_categories()

    categories = store.list_categories()
    assert [c.id for c in categories] == [UNSORTED_ID]
    assert store.count_items_in_category(UNSORTED_ID) == 2
    _assert_no_dangling_items(store)


def test_delete_all_categories_without_items(manager, store):
    """Test that no Unsorted is left when there are no items."""
    manager.create_category("Devices")
    manager.create_item("Wallet", UNSORTED_ID)
    manager.delete_item(store.list_items()[0].id)

    manager.delete_all_categories()

    assert store.list_categories() == []


def test_list_categories_order(manager):
    """Test Unsorted first, then case-sensitive name order."""
    manager.create_category("keys")
    manager.create_category("Food")
    manager.create_category("Devices")
    manager.create_item("Wallet", UNSORTED_ID)

    names = [c.name for c in manager.list_categories()]

    # Plain string comparison puts upper case before lower case
    assert names == ["Unsorted", "Devices", "Food", "keys"]


def test_list_categories_collects_empty_unsorted(manager, store):
    """Test that an unreferenced Unsorted disappears on listing."""
    wallet = manager.create_item("Wallet", UNSORTED_ID)
    manager.delete_item(wallet.id)
    assert store.get_category(UNSORTED_ID) is not None

    assert manager.list_categories() == []
    assert store.get_category(UNSORTED_ID) is None


def test_move_item_between_categories(manager):
    """Test moving an item to another category."""
    devices = manager.create_category("Devices")
    food = manager.create_category("Food")
    item = manager.create_item("Water Bottle", devices.id)

    updated = manager.update_item(item.id, {"category_id": food.id})
    assert updated.category_id == food.id


def test_move_item_to_unsorted(manager, store):
    """Test that moving to Unsorted creates the bucket."""
    food = manager.create_category("Food")
    item = manager.create_item("Curry", food.id)

    updated = manager.update_item(item.id, {"category_id": UNSORTED_ID})

    assert updated.category_id == UNSORTED_ID
    assert store.get_category(UNSORTED_ID) is not None


def test_move_item_to_unknown_category(manager, store):
    """Test that an item cannot be moved to a missing category."""
    food = manager.create_category("Food")
    item = manager.create_item("Curry", food.id)

    with pytest.raises(NotFoundError):
        manager.update_item(item.id, {"category_id": "missing"})

    assert store.get_item(item.id).category_id == food.id


def test_update_item_checked_and_name(manager):
    """Test toggling and renaming an item."""
    item = manager.create_item("Snaks")

    updated = manager.update_item(item.id, {"name": "Snacks", "checked": True})

    assert updated.name == "Snacks"
    assert updated.checked is True


def test_update_unknown_item(manager):
    """Test updating an item that does not exist."""
    with pytest.raises(NotFoundError):
        manager.update_item("missing", {"checked": True})


def test_delete_unknown_item(manager):
    """Test deleting an item that does not exist."""
    with pytest.raises(NotFoundError):
        manager.delete_item("missing")


def test_set_category_checked(manager, store):
    """Test checking all items of one category only."""
    food = manager.create_category("Food")
    keys = manager.create_category("Keys")
    manager.create_item("Rice", food.id)
    manager.create_item("Curry", food.id)
    car_keys = manager.create_item("Car Keys", keys.id)

    items = manager.set_category_checked(food.id, True)

    assert len(items) == 2
    assert all(item.checked for item in items)
    assert store.get_item(car_keys.id).checked is False


def test_delete_all_items(manager, store):
    """Test deleting every item."""
    manager.create_item("Wallet")
    manager.create_item("Sunglasses")

    assert manager.delete_all_items() == 2
    assert store.list_items() == []


def test_rename_category_to_unsorted_rejected(manager):
    """Test that no category can take the Unsorted name."""
    food = manager.create_category("Food")

    with pytest.raises(DuplicateNameError):
        manager.update_category(food.id, {"name": "Unsorted"})


def test_seed_default_data(store):
    """Test the starter checklist on an empty database."""
    assert seed_default_data(store) is True

    names = sorted(c.name for c in store.list_categories())
    assert names == [c["name"] for c in DEFAULT_CATEGORIES]
    assert len(store.list_items()) == sum(len(items) for items in DEFAULT_ITEMS.values())
    assert not any(item.checked for item in store.list_items())


def test_seed_default_data_skips_existing_data(manager, store):
    """Test that seeding never touches a database in use."""
    manager.create_item("Wallet")

    assert seed_default_data(store) is False
    assert [c.id for c in store.list_categories()] == [UNSORTED_ID]
