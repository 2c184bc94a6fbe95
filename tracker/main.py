"""FastAPI application entry point."""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tracker.api import categories, items, notifications
from tracker.api import settings as settings_api
from tracker.config import get_settings
from tracker.database import SessionLocal, init_db
from tracker.services.defaults import seed_default_data
from tracker.services.errors import PersistenceError, TrackerError
from tracker.services.store import TrackerStore
from tracker.services.ticker import ResetTicker

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def _seed() -> None:
    db = SessionLocal()
    try:
        seed_default_data(TrackerStore(db))
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    if settings.seed_default_data:
        _seed()

    ticker = ResetTicker(interval_seconds=settings.reset_check_interval_seconds)
    # The app may not have been running at the scheduled minute
    await asyncio.to_thread(ticker.catch_up)
    if settings.reset_ticker_enabled:
        ticker.start()
    app.state.reset_ticker = ticker

    yield

    await ticker.stop()


app = FastAPI(
    title="Essential Tracker API",
    description="Daily checklist of essentials that resets itself every morning",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(TrackerError)
async def tracker_error_handler(request: Request, exc: TrackerError) -> JSONResponse:
    """Translate domain errors into HTTP responses."""
    if isinstance(exc, PersistenceError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": "Storage is temporarily unavailable, please retry"},
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 with field-level errors."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


# Register routers
app.include_router(categories.router)
app.include_router(items.router)
app.include_router(settings_api.router)
app.include_router(notifications.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    ticker = getattr(app.state, "reset_ticker", None)
    return {
        "status": "healthy",
        "environment": settings.environment,
        "reset_ticker": bool(ticker and ticker.running),
    }
