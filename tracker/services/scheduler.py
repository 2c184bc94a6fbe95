"""Daily reset scheduling.

Once per calendar day, at or after the configured notification time, every
item is unchecked and a reminder is pushed. ``tick()`` is driven
periodically by a ticker (see ``tracker.services.ticker`` and
``tracker.tasks.daily_reset``); ``catch_up()`` runs once at startup and
``reset_now()`` backs the manual reset endpoint.
"""

import logging
from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from enum import StrEnum

from sqlalchemy.orm import Session

from tracker.config import get_settings
from tracker.models import TrackerSettings
from tracker.services.errors import PersistenceError
from tracker.services.notification_service import NotificationService
from tracker.services.store import TrackerStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class SchedulerState(StrEnum):
    """Where the scheduler is within a tick."""

    IDLE = "idle"
    DUE_CHECK = "due_check"
    RESET = "reset"


class ResetPolicy(StrEnum):
    """When a scheduled reset counts as due."""

    # Due any time after the scheduled minute until the day's reset happened
    CATCH_UP = "catch_up"
    # Due only during the scheduled minute; a missed minute skips the day
    EXACT_MINUTE = "exact_minute"


def parse_notification_time(value: str) -> time:
    """Parse an "HH:MM" string into a time."""
    hours, _, minutes = value.partition(":")
    if len(hours) != 2 or len(minutes) != 2 or not (hours + minutes).isdigit():
        raise ValueError(f"Invalid notification time: {value!r}")
    return time(int(hours), int(minutes))


def next_reset_at(now: datetime, notification_time: str) -> datetime:
    """Next occurrence of the notification time strictly after ``now``."""
    candidate = datetime.combine(now.date(), parse_notification_time(notification_time))
    if candidate <= now:
        candidate += timedelta(days=1)
    return candidate


class ResetScheduler:
    """Decides when the daily reset is due and applies it."""

    def __init__(
        self,
        store: TrackerStore,
        notifier: NotificationService | None = None,
        clock: Clock | None = None,
        policy: ResetPolicy | str = ResetPolicy.CATCH_UP,
    ):
        self.store = store
        self.notifier = notifier
        self.clock = clock or datetime.now
        self.policy = ResetPolicy(policy)
        self.state = SchedulerState.IDLE

    def is_due(self, settings: TrackerSettings, now: datetime) -> bool:
        """Check whether the scheduled reset should fire at ``now``."""
        if not self._needs_reset(settings, now.date()):
            return False
        scheduled = parse_notification_time(settings.notification_time)
        if self.policy is ResetPolicy.EXACT_MINUTE:
            return (now.hour, now.minute) == (scheduled.hour, scheduled.minute)
        return now.time() >= scheduled

    def tick(self) -> bool:
        """Evaluate the schedule once. Returns True if a reset was applied.

        The due check and the reset share one locked transaction, so a reset
        committed by another writer in between is always seen. Storage
        failures are logged and swallowed; since last_reset_date is only
        written together with the reset, the next tick retries.
        """
        now = self.clock()
        self.state = SchedulerState.DUE_CHECK
        try:
            with self.store.transaction():
                settings = self.store.get_settings(refresh=True)
                if not self.is_due(settings, now):
                    return False
                send_notification = settings.notifications
                self.state = SchedulerState.RESET
                cleared = self._apply_reset(now.date())
        except PersistenceError:
            logger.error("Scheduled reset failed, retrying on next tick")
            return False
        except ValueError as e:
            logger.error(f"Cannot evaluate reset schedule: {e}")
            return False
        finally:
            self.state = SchedulerState.IDLE

        logger.info(f"Scheduled reset applied for {now.date()}, unchecked {cleared} item(s)")
        if send_notification:
            self._notify()
        return True

    def catch_up(self) -> bool:
        """Reset immediately if no reset happened yet today (startup path)."""
        now = self.clock()
        try:
            with self.store.transaction():
                settings = self.store.get_settings(refresh=True)
                if not self._needs_reset(settings, now.date()):
                    return False
                previous = settings.last_reset_date
                cleared = self._apply_reset(now.date())
        except PersistenceError:
            logger.error("Startup catch-up reset failed, retrying on next tick")
            return False

        logger.info(
            f"Catch-up reset applied (last reset {previous or 'never'}), "
            f"unchecked {cleared} item(s)"
        )
        return True

    def reset_now(self) -> int:
        """Manual reset. Leaves the notification time alone; raises on storage failure."""
        now = self.clock()
        self.state = SchedulerState.RESET
        try:
            cleared = self._apply_reset(now.date())
        finally:
            self.state = SchedulerState.IDLE
        logger.info(f"Manual reset applied, unchecked {cleared} item(s)")
        return cleared

    def next_reset_at(self) -> datetime:
        settings = self.store.get_settings()
        return next_reset_at(self.clock(), settings.notification_time)

    def _needs_reset(self, settings: TrackerSettings, today: date) -> bool:
        return settings.last_reset_date is None or settings.last_reset_date < today

    def _apply_reset(self, today: date) -> int:
        with self.store.transaction():
            cleared = self.store.reset_all_checked()
            self.store.mark_reset(today)
        return cleared

    def _notify(self) -> bool:
        if self.notifier is None:
            return False
        try:
            return self.notifier.notify_reset()
        except Exception as e:
            # Delivery problems never undo a reset
            logger.error(f"Failed to send reset notification: {e}", exc_info=True)
            return False


def create_scheduler(db: Session, clock: Clock | None = None) -> ResetScheduler:
    """Build a scheduler wired to the configured policy and push delivery."""
    store = TrackerStore(db)
    return ResetScheduler(
        store,
        notifier=NotificationService(store),
        clock=clock,
        policy=get_settings().reset_policy,
    )
