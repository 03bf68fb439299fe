"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated defaults for retry sessions and logging, read
from environment variables (and an optional .env file).

Example:
    >>> from retrycase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.retry.max_retries
    3

    # Or with environment variables:
    # RETRYCASE_RETRY_MAX_RETRIES=7
    # RETRYCASE_RETRY_INITIAL_DELAY=0.25
    # RETRYCASE_LOG_FORMAT=json
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import (
    Field,
    NonNegativeFloat,
    PositiveFloat,
    computed_field,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

LevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _upper(v: object) -> object:
    return v.upper() if isinstance(v, str) else v


class RetrySettings(BaseSettings):
    """Defaults for error types that do not override their retry configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RETRYCASE_RETRY_",
        extra="ignore",
    )

    max_retries: Annotated[int, Field(ge=0)] = 3
    initial_delay: NonNegativeFloat = Field(default=1.0, description="First default delay in seconds")
    max_delay: PositiveFloat | None = Field(default=None, description="Cap on the doubling sequence in seconds")
    log_level: LevelName | None = Field(default="INFO", description="Level for retry notifications, unset disables")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: object) -> object:
        """Accept lowercase level names; empty string means disabled."""
        return None if v == "" else _upper(v)

    @computed_field
    @property
    def level(self) -> int | None:
        """Notification level as a logging integer."""
        return None if self.log_level is None else getattr(logging, self.log_level)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RETRYCASE_LOG_",
        extra="ignore",
    )

    level: LevelName = "INFO"
    format: Literal["json", "text"] = "text"
    include_timestamps: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: object) -> object:
        return _upper(v)


class RetrycaseSettings(BaseSettings):
    """Root settings.

    Example environment variables:
        RETRYCASE_DEBUG=true
        RETRYCASE_RETRY_MAX_RETRIES=5
        RETRYCASE_RETRY_LOG_LEVEL=WARNING
        RETRYCASE_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="RETRYCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    environment: Literal["development", "staging", "production"] = "development"

    retry: RetrySettings = Field(default_factory=RetrySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("environment", mode="before")
    @classmethod
    def _normalize_env(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


@lru_cache(maxsize=1)
def get_settings() -> RetrycaseSettings:
    """Get the global settings instance (cached)."""
    return RetrycaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
