"""Retrycase - retry-with-backoff for async operations with typed errors.

Error types declare their own retry behavior; the engine re-runs an operation
factory until it succeeds, runs out of retries, or the error says stop.

Quick Start:
    >>> import logging
    >>> from retrycase import Delay, Err, Ok, Result, Retryable, STOP, retry_future, retrying
    >>>
    >>> class FetchError(Retryable, Exception):
    ...     def __init__(self, status: int) -> None:
    ...         super().__init__(status)
    ...         self.status = status
    ...
    ...     @classmethod
    ...     def max_retries(cls) -> int:
    ...         return 7
    ...
    ...     @classmethod
    ...     def default_initial_delay(cls) -> float:
    ...         return 0.25
    ...
    ...     @classmethod
    ...     def log_level(cls) -> int | None:
    ...         return logging.WARNING
    ...
    ...     def custom_retry_policy(self):
    ...         if self.status == 404:
    ...             return STOP          # never retry
    ...         if self.status == 429:
    ...             return Delay(5.0)    # fixed cooldown, doubling untouched
    ...         return None              # 0.25s, 0.5s, 1s, ...
    >>>
    >>> async def fetch() -> Result[bytes, FetchError]:
    ...     resp = await client.get(url)
    ...     return Ok(resp.content) if resp.ok else Err(FetchError(resp.status))
    >>>
    >>> result = await retry_future(fetch, FetchError)

Exception-raising code:
    >>> from retrycase import try_async
    >>> result = await retry_future(lambda: try_async(download, FetchError), FetchError)

Decorator:
    >>> @retrying(FetchError)
    ... async def fetch(url: str) -> Result[bytes, FetchError]: ...
"""

from .foundation import (
    Err,
    Ok,
    Result,
    RetrycaseSettings,
    clear_settings_cache,
    get_settings,
    try_async,
)
from .runtime import (
    STOP,
    Delay,
    ErrorBackoff,
    LogOnRetry,
    OnRetry,
    Retryable,
    RetryConfig,
    RetryExecutor,
    RetryPolicy,
    Stop,
    configure_logging,
    get_logger,
    retry_future,
    retrying,
)

__version__ = "0.1.0"

__all__ = [
    # Result
    "Result", "Ok", "Err", "try_async",
    # Policy
    "RetryPolicy", "Delay", "Stop", "STOP",
    # Configuration
    "Retryable", "RetryConfig",
    "RetrycaseSettings", "get_settings", "clear_settings_cache",
    # Engine
    "ErrorBackoff", "OnRetry", "LogOnRetry",
    "RetryExecutor", "retry_future", "retrying",
    # Logging
    "configure_logging", "get_logger",
]
