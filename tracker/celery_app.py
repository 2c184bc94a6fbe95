"""Celery application configuration."""

from celery import Celery

from tracker.config import get_settings

settings = get_settings()

app = Celery(
    "essential_tracker",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["tracker.tasks.daily_reset"],
)

# Celery configuration
app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    # Resets follow the local clock
    enable_utc=False,
    task_track_started=True,
    task_time_limit=60,
    task_soft_time_limit=45,
    beat_schedule={
        "check-daily-reset": {
            "task": "tracker.tasks.daily_reset.check_daily_reset",
            "schedule": float(settings.reset_check_interval_seconds),
        },
    },
)
