"""Push subscription model for web push notifications."""

from sqlalchemy import Column, Integer, String

from tracker.database import Base
from tracker.models.mixins import TimestampMixin


class PushSubscription(Base, TimestampMixin):
    """Stores web push notification subscriptions."""

    __tablename__ = "push_subscriptions"

    id = Column(Integer, primary_key=True, index=True)
    endpoint = Column(String(500), nullable=False, unique=True)
    p256dh_key = Column(String(200), nullable=False)
    auth_key = Column(String(100), nullable=False)
