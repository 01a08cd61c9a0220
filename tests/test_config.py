"""Tests for environment-backed cache settings."""

import pytest
from pydantic import ValidationError

from recency_cache.config import CacheSettings, load_settings


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should fall back to model defaults."""
    monkeypatch.delenv("RECENCY_CACHE_DEFAULT_CAPACITY", raising=False)
    monkeypatch.delenv("RECENCY_CACHE_LOG_LEVEL", raising=False)

    settings = load_settings()

    assert settings.default_capacity == 3
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment values should be parsed and normalized."""
    monkeypatch.setenv("RECENCY_CACHE_DEFAULT_CAPACITY", " 16 ")
    monkeypatch.setenv("RECENCY_CACHE_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.default_capacity == 16
    assert settings.log_level == "DEBUG"


def test_non_positive_capacity_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    """A zero capacity from the environment should fail validation."""
    monkeypatch.setenv("RECENCY_CACHE_DEFAULT_CAPACITY", "0")

    with pytest.raises(ValidationError):
        load_settings()


def test_unknown_log_level_rejected() -> None:
    """Log level names outside the logging module's set are rejected."""
    with pytest.raises(ValidationError, match="log_level"):
        CacheSettings(log_level="chatty")
