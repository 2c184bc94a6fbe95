"""Enums for model fields."""

from enum import Enum


class Theme(str, Enum):
    """Color themes offered by the client."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"
