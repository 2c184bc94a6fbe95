"""Tracker settings schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tracker.models.enums import Theme
from tracker.services.scheduler import parse_notification_time


class SettingsUpdate(BaseModel):
    """Partial update of user preferences.

    last_reset_date is owned by the reset scheduler and cannot be set here.
    """

    notification_time: str | None = Field(None, examples=["08:00"])
    is_24_hour_format: bool | None = None
    notifications: bool | None = None
    animations: bool | None = None
    theme: Theme | None = None

    @field_validator("notification_time")
    @classmethod
    def validate_notification_time(cls, value: str | None) -> str | None:
        if value is None:
            return value
        parse_notification_time(value)
        return value


class SettingsResponse(BaseModel):
    """Settings response."""

    model_config = ConfigDict(from_attributes=True)

    notification_time: str
    is_24_hour_format: bool
    last_reset_date: date | None
    notifications: bool
    animations: bool
    theme: Theme


class NextResetResponse(BaseModel):
    """Countdown to the next scheduled reset."""

    next_reset_at: datetime
    seconds_remaining: int
