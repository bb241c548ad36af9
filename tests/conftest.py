"""Pytest configuration shared by the norm test suite."""

from __future__ import annotations

from typing import Generator

import pytest

from norm.config import get_settings

SETTINGS_ENV = ("LOG_LEVEL", "NORM_MAX_NESTING_DEPTH", "NORM_LOG_SQL")


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Start every test from default settings and an empty settings cache."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
