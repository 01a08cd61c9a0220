"""Runtime settings for caches created without explicit arguments."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CacheSettings(BaseModel):
    """Defaults applied when callers leave capacity or log level unspecified."""

    default_capacity: int = Field(default=3, ge=1)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the level name and reject unknown levels."""
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(_LOG_LEVELS)}")
        return normalized


def load_settings() -> CacheSettings:
    """Build settings from RECENCY_CACHE_* environment variables."""
    raw: dict[str, str] = {}
    capacity = os.getenv("RECENCY_CACHE_DEFAULT_CAPACITY")
    if capacity is not None and capacity.strip():
        raw["default_capacity"] = capacity.strip()
    log_level = os.getenv("RECENCY_CACHE_LOG_LEVEL")
    if log_level is not None and log_level.strip():
        raw["log_level"] = log_level
    return CacheSettings(**raw)
