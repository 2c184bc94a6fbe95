"""Notification API endpoints for push subscriptions."""

from typing import Annotated

from fastapi import APIRouter, Depends

from tracker.api.dependencies import get_notification_service, get_store
from tracker.config import get_settings
from tracker.models import PushSubscription
from tracker.schemas.notification import (
    NotificationTestResult,
    PushSubscriptionCreate,
    PushSubscriptionResponse,
    VapidPublicKeyResponse,
)
from tracker.services.notification_service import NotificationService
from tracker.services.store import TrackerStore

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("/vapid-public-key", response_model=VapidPublicKeyResponse)
def get_vapid_public_key() -> VapidPublicKeyResponse:
    """Get the VAPID public key for push notification subscription."""
    settings = get_settings()
    return VapidPublicKeyResponse(public_key=settings.vapid_public_key)


@router.post("/subscribe", response_model=PushSubscriptionResponse)
def subscribe_push(
    subscription: PushSubscriptionCreate,
    store: Annotated[TrackerStore, Depends(get_store)],
) -> PushSubscription:
    """Subscribe to push notifications, refreshing keys of a known endpoint."""
    return store.upsert_push_subscription(
        endpoint=subscription.endpoint,
        p256dh_key=subscription.p256dh_key,
        auth_key=subscription.auth_key,
    )


@router.delete("/subscribe")
def unsubscribe_push(
    endpoint: str,
    store: Annotated[TrackerStore, Depends(get_store)],
) -> dict:
    """Unsubscribe from push notifications."""
    if store.delete_push_subscription(endpoint):
        return {"message": "Unsubscribed successfully"}
    return {"message": "Subscription not found"}


@router.post("/test", response_model=NotificationTestResult)
def send_test_notification(
    store: Annotated[TrackerStore, Depends(get_store)],
    notification_service: Annotated[NotificationService, Depends(get_notification_service)],
) -> NotificationTestResult:
    """Send the daily reminder right away, if notifications are enabled."""
    if not store.get_settings().notifications:
        return NotificationTestResult(sent=False)
    return NotificationTestResult(sent=notification_service.notify_reset())
