"""Foundation layer: Result type and settings."""

from .config import RetrycaseSettings, clear_settings_cache, get_settings
from .errors import Err, Ok, Result, try_async

__all__ = [
    "Result", "Ok", "Err", "try_async",
    "RetrycaseSettings", "get_settings", "clear_settings_cache",
]
