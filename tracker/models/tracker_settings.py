"""Tracker settings model."""

from sqlalchemy import Boolean, Column, Date, Enum, Integer, String

from tracker.database import Base
from tracker.models.enums import Theme

SETTINGS_ID = 1
DEFAULT_NOTIFICATION_TIME = "08:00"


class TrackerSettings(Base):
    """Singleton row holding user preferences and the reset bookkeeping."""

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, default=SETTINGS_ID)
    notification_time = Column(String(5), nullable=False, default=DEFAULT_NOTIFICATION_TIME)
    is_24_hour_format = Column(Boolean, nullable=False, default=True)
    # None until the first reset ever runs
    last_reset_date = Column(Date, nullable=True)
    notifications = Column(Boolean, nullable=False, default=True)
    animations = Column(Boolean, nullable=False, default=False)
    theme = Column(
        Enum(Theme, name="theme", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=Theme.LIGHT,
    )
