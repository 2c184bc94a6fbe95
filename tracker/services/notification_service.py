"""Notification service for web push."""

import json
import logging

from pywebpush import WebPushException, webpush

from tracker.config import get_settings
from tracker.services.store import TrackerStore

logger = logging.getLogger(__name__)

RESET_NOTIFICATION_TITLE = "Essential Tracker"
RESET_NOTIFICATION_BODY = "Time to check your daily essentials!"

# Subscriptions answering with these statuses are gone for good
EXPIRED_STATUSES = (404, 410)


class NotificationService:
    """Delivers notifications to every subscribed browser.

    Whether a notification should be sent at all (the ``notifications``
    setting) is decided by the caller; this service only handles delivery.
    """

    def __init__(self, store: TrackerStore) -> None:
        self.store = store
        self.settings = get_settings()
        self._webpush_available = self.settings.push_configured
        if not self._webpush_available:
            logger.info("VAPID credentials not configured, push disabled")

    @property
    def available(self) -> bool:
        return self._webpush_available

    def notify(self, title: str, body: str, url: str | None = None) -> bool:
        """
        Send a push notification to all subscribed devices.

        Returns True if at least one notification was sent successfully.
        """
        if not self._webpush_available:
            logger.warning("Push notifications not available")
            return False

        subscriptions = self.store.list_push_subscriptions()
        if not subscriptions:
            logger.info("No push subscriptions registered")
            return False

        data = json.dumps({"title": title, "body": body, "tag": "daily-reset", "url": url or "/"})

        success_count = 0
        expired = []
        for sub in subscriptions:
            try:
                webpush(
                    subscription_info={
                        "endpoint": sub.endpoint,
                        "keys": {
                            "p256dh": sub.p256dh_key,
                            "auth": sub.auth_key,
                        },
                    },
                    data=data,
                    vapid_private_key=self.settings.vapid_private_key,
                    vapid_claims={
                        "sub": f"mailto:{self.settings.vapid_email}",
                    },
                )
                success_count += 1
            except WebPushException as e:
                logger.error(f"Push failed for subscription {sub.id}: {e}")
                if e.response is not None and e.response.status_code in EXPIRED_STATUSES:
                    expired.append(sub.endpoint)

        for endpoint in expired:
            logger.info(f"Removing expired subscription {endpoint}")
            self.store.delete_push_subscription(endpoint)

        logger.info(f"Sent push to {success_count}/{len(subscriptions)} devices")
        return success_count > 0

    def notify_reset(self) -> bool:
        """Send the daily "check your essentials" reminder."""
        return self.notify(RESET_NOTIFICATION_TITLE, RESET_NOTIFICATION_BODY)
