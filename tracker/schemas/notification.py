"""Notification-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel


class PushSubscriptionCreate(BaseModel):
    """Schema for creating a push subscription."""

    endpoint: str
    p256dh_key: str
    auth_key: str


class PushSubscriptionResponse(BaseModel):
    """Schema for push subscription response."""

    id: int
    endpoint: str
    created_at: datetime

    model_config = {"from_attributes": True}


class VapidPublicKeyResponse(BaseModel):
    """Schema for VAPID public key response."""

    public_key: str | None


class NotificationTestResult(BaseModel):
    """Schema for the result of a test notification."""

    sent: bool
