"""Pydantic schemas for API requests and responses."""

from tracker.schemas.category import (
    CategoryCheckedUpdate,
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
)
from tracker.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from tracker.schemas.settings import NextResetResponse, SettingsResponse, SettingsUpdate

__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryCheckedUpdate",
    "CategoryResponse",
    "ItemCreate",
    "ItemUpdate",
    "ItemResponse",
    "SettingsUpdate",
    "SettingsResponse",
    "NextResetResponse",
]
