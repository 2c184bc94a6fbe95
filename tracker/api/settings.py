"""Settings API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from tracker.api.dependencies import get_reset_scheduler, get_store
from tracker.schemas.settings import NextResetResponse, SettingsResponse, SettingsUpdate
from tracker.services.scheduler import ResetScheduler
from tracker.services.store import TrackerStore

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=SettingsResponse)
def get_tracker_settings(store: Annotated[TrackerStore, Depends(get_store)]):
    """Get the tracker settings."""
    return store.get_settings()


@router.put("", response_model=SettingsResponse)
def update_tracker_settings(
    settings_update: SettingsUpdate,
    store: Annotated[TrackerStore, Depends(get_store)],
):
    """Update the tracker settings.

    A new notification time only applies from the next schedule check on; it
    neither triggers nor suppresses a reset by itself.
    """
    update_data = settings_update.model_dump(exclude_unset=True, exclude_none=True)
    return store.update_settings(**update_data)


@router.get("/next-reset", response_model=NextResetResponse)
def get_next_reset(scheduler: Annotated[ResetScheduler, Depends(get_reset_scheduler)]):
    """Get the time remaining until the next scheduled reset."""
    next_reset = scheduler.next_reset_at()
    remaining = next_reset - scheduler.clock()
    return NextResetResponse(
        next_reset_at=next_reset,
        seconds_remaining=max(0, int(remaining.total_seconds())),
    )
