"""Configuration management for norm.

This module provides centralized configuration loaded from environment variables
with validation using Pydantic BaseSettings.

Usage:
    >>> from norm.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.max_nesting_depth)
"""

from norm.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
