"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    limits = settings.splitter_limits
"""

import logging
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import (
    DEFAULT_PROGRAM_DURATION_WEEKS,
    EXERCISES_PER_MUSCLE,
    MAX_EXERCISES_PER_SESSION,
    MIN_EXERCISES_PER_SESSION,
    MINIMUM_FILL_MAX_ITERATIONS,
    REBALANCE_MAX_ITERATIONS,
)
from services.day_splitter import SplitterLimits


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level used by the CLI",
    )

    # -------------------------------------------------------------------------
    # Exercise Catalog
    # -------------------------------------------------------------------------
    exercise_catalog_path: Optional[str] = Field(
        default=None,
        description="YAML exercise catalog. Defaults to the bundled seed data.",
    )

    # -------------------------------------------------------------------------
    # Program Generation
    # -------------------------------------------------------------------------
    max_exercises_per_session: int = Field(default=MAX_EXERCISES_PER_SESSION, ge=1)
    min_exercises_per_session: int = Field(default=MIN_EXERCISES_PER_SESSION, ge=0)
    rebalance_max_iterations: int = Field(default=REBALANCE_MAX_ITERATIONS, ge=0)
    minimum_fill_max_iterations: int = Field(default=MINIMUM_FILL_MAX_ITERATIONS, ge=0)
    exercises_per_muscle: int = Field(default=EXERCISES_PER_MUSCLE, ge=1)
    program_duration_weeks: int = Field(default=DEFAULT_PROGRAM_DURATION_WEEKS, ge=1, le=52)

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------
    cors_allowed_origins: str = Field(
        default="",
        description="Comma-separated extra origins allowed by CORS",
    )

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is one the logging module knows."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level '{v}'")
        return level

    @model_validator(mode="after")
    def validate_session_bounds(self) -> "Settings":
        if self.min_exercises_per_session > self.max_exercises_per_session:
            raise ValueError(
                "min_exercises_per_session cannot exceed max_exercises_per_session"
            )
        return self

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def splitter_limits(self) -> SplitterLimits:
        """Session bounds and iteration caps for the day splitter."""
        return SplitterLimits(
            max_per_session=self.max_exercises_per_session,
            min_per_session=self.min_exercises_per_session,
            rebalance_max_iterations=self.rebalance_max_iterations,
            minimum_fill_max_iterations=self.minimum_fill_max_iterations,
        )

    @property
    def cors_origins(self) -> List[str]:
        """Extra CORS origins parsed from the comma-separated setting."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
