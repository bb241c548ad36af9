"""
Configuration management for norm.

This module provides environment-based configuration using Pydantic BaseSettings,
so the statement renderer and its logging can be tuned per deployment without
code changes.
"""

import os
from functools import lru_cache
from pathlib import Path

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("NORM_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the NORM_ prefix. For example,
    NORM_MAX_NESTING_DEPTH overrides the max_nesting_depth setting.

    Fields without prefix:
    - LOG_LEVEL: Logging level (uppercase)
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    max_nesting_depth: int = Field(
        default=64,
        ge=1,
        description=(
            "Maximum depth of nested statements (subqueries, CTEs, unions) "
            "allowed while rendering"
        ),
    )

    log_sql: bool = Field(
        default=False,
        description="Include the rendered SQL text in debug log events",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Uppercase the log level and reject unknown names."""
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            logger.error("configuration.invalid_log_level", value=value)
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got: {value!r}"
            )
        return level

    model_config = SettingsConfigDict(
        env_prefix="NORM_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused, so the renderer does not touch the
    environment on every nested build.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
