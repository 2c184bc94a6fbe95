"""In-process ticker that drives the reset scheduler."""

import asyncio
import contextlib
import logging
from collections.abc import Callable

from sqlalchemy.orm import Session

from tracker.database import SessionLocal
from tracker.services.scheduler import Clock, create_scheduler

logger = logging.getLogger(__name__)


class ResetTicker:
    """Periodically evaluates the daily reset from the application's event loop.

    Each tick opens its own session and runs in a worker thread, so a slow
    database never blocks request handling.
    """

    def __init__(
        self,
        interval_seconds: float = 30,
        session_factory: Callable[[], Session] = SessionLocal,
        clock: Clock | None = None,
    ):
        self.interval_seconds = interval_seconds
        self.session_factory = session_factory
        self.clock = clock
        self._task: asyncio.Task | None = None

    def run_once(self) -> bool:
        """Run a single tick. Returns True if a reset was applied."""
        db = self.session_factory()
        try:
            return create_scheduler(db, clock=self.clock).tick()
        except Exception as e:
            logger.error(f"Reset tick failed: {e}", exc_info=True)
            return False
        finally:
            db.close()

    def catch_up(self) -> bool:
        """Run the startup catch-up reset."""
        db = self.session_factory()
        try:
            return create_scheduler(db, clock=self.clock).catch_up()
        except Exception as e:
            logger.error(f"Catch-up reset failed: {e}", exc_info=True)
            return False
        finally:
            db.close()

    async def _run(self) -> None:
        while True:
            await asyncio.to_thread(self.run_once)
            await asyncio.sleep(self.interval_seconds)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run())
        logger.info(f"Reset ticker started (every {self.interval_seconds}s)")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Reset ticker stopped")
