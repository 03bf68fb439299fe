"""Configuration: pydantic-settings models loaded from RETRYCASE_* variables."""

from .settings import (
    LoggingSettings,
    RetrycaseSettings,
    RetrySettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "RetrycaseSettings",
    "RetrySettings",
    "LoggingSettings",
    "get_settings",
    "clear_settings_cache",
]
