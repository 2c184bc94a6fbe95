"""Configuration management for the application."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./essential_tracker.db")

    # Redis (Celery broker and result backend)
    redis_url: str = Field(default="redis://localhost:6379/0")

    # Logging
    log_level: str = Field(default="INFO")

    # Daily reset
    reset_policy: Literal["catch_up", "exact_minute"] = Field(default="catch_up")
    reset_check_interval_seconds: int = Field(default=30, ge=1, le=60)
    reset_ticker_enabled: bool = Field(default=True)
    seed_default_data: bool = Field(default=True)

    # Web push (VAPID)
    vapid_public_key: str | None = Field(default=None)
    vapid_private_key: str | None = Field(default=None)
    vapid_email: str | None = Field(default=None)

    # API
    environment: str = Field(default="development")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5000", "http://localhost:5173"]
    )

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has sane settings."""
        if self.environment == "production":
            if "localhost" in self.database_url:
                raise ValueError("DATABASE_URL should not use localhost in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def push_configured(self) -> bool:
        """Check if VAPID credentials for web push are present."""
        return bool(self.vapid_public_key and self.vapid_private_key and self.vapid_email)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
