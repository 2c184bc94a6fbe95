"""Celery tasks for the daily reset.

Use these instead of the in-process ticker when a celery-beat process drives
the schedule (set RESET_TICKER_ENABLED=false on the API).
"""

import logging

from sqlalchemy.orm import Session

from tracker.celery_app import app as celery_app
from tracker.database import SessionLocal
from tracker.services.scheduler import create_scheduler

logger = logging.getLogger(__name__)


@celery_app.task
def check_daily_reset() -> dict:
    """Evaluate the daily reset schedule once.

    This task runs every few seconds via celery-beat. It never raises, so a
    failed attempt is simply retried by the next beat.

    Returns:
        dict with the outcome
    """
    db: Session = SessionLocal()

    try:
        reset = create_scheduler(db).tick()
        return {"reset": reset}

    except Exception as e:
        logger.error(f"Error checking daily reset: {e}", exc_info=True)
        db.rollback()
        return {"error": str(e)}

    finally:
        db.close()

