"""Unit tests for configuration management.

Tests verify:
- Default values
- Environment variable overrides
- Validation of log level and nesting depth
- Singleton pattern behavior
"""

import pytest
from pydantic import ValidationError

from norm.config.settings import Settings, get_settings


@pytest.mark.unit
def test_defaults():
    """Settings load with defaults when no environment is set."""
    settings = Settings()

    assert settings.LOG_LEVEL == "INFO"
    assert settings.max_nesting_depth == 64
    assert settings.log_sql is False


@pytest.mark.unit
def test_environment_overrides(monkeypatch):
    """NORM_ prefixed variables override settings, LOG_LEVEL has no prefix."""
    monkeypatch.setenv("NORM_MAX_NESTING_DEPTH", "8")
    monkeypatch.setenv("NORM_LOG_SQL", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.max_nesting_depth == 8
    assert settings.log_sql is True
    assert settings.LOG_LEVEL == "DEBUG"


@pytest.mark.unit
def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError) as exc_info:
        Settings()

    assert "LOG_LEVEL" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.parametrize("depth", ["0", "-1", "many"])
def test_invalid_nesting_depth(monkeypatch, depth):
    monkeypatch.setenv("NORM_MAX_NESTING_DEPTH", depth)

    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.unit
def test_get_settings_cached(monkeypatch):
    """get_settings returns the same instance until the cache is cleared."""
    first = get_settings()
    monkeypatch.setenv("NORM_MAX_NESTING_DEPTH", "3")

    assert get_settings() is first
    assert get_settings().max_nesting_depth == 64

    get_settings.cache_clear()
    assert get_settings().max_nesting_depth == 3
