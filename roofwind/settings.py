"""Application settings using pydantic-settings.

All configuration is centralized here. Values can be overridden
via environment variables prefixed with ``ROOFWIND_``.

Example:
    export ROOFWIND_DEFAULT_WIND_SPEED_MPH=140
    export ROOFWIND_PORT=8080

The calculation core never reads settings; the API and CLI read them
and pass explicit values in.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from roofwind.asce7 import ASCE7_EDITION
from roofwind.schemas import DEFAULT_WIND_SPEED_MPH
from roofwind.validation import DEFAULT_TOLERANCE


class Settings(BaseSettings):
    """Roofwind application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ROOFWIND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Calculation defaults supplied by the outer surfaces
    default_wind_speed_mph: float = Field(default=DEFAULT_WIND_SPEED_MPH, gt=0)
    default_asce_edition: str = ASCE7_EDITION
    validation_tolerance: float = Field(default=DEFAULT_TOLERANCE, ge=0)

    # CORS origins (JSON list in env var)
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8000",
    ]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
