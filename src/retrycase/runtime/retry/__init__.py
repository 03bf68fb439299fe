"""Retry-with-backoff for Result-returning coroutines.

Retry behavior is declared on the error type: a budget, a doubling initial
delay and a log level per type, plus an optional per-value override that can
pick a custom delay or stop immediately.

Example:
    >>> import logging
    >>> from retrycase import Delay, RetryPolicy, Retryable, STOP, retry_future
    >>>
    >>> class ApiError(Retryable):
    ...     def __init__(self, status: int) -> None:
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
    ...     def custom_retry_policy(self) -> RetryPolicy | None:
    ...         return STOP if self.status == 401 else None
    >>>
    >>> result = await retry_future(lambda: call_api(), ApiError)
"""

from .backoff import DELAY_CEILING, ErrorBackoff
from .config import RetryConfig
from .executor import RetryExecutor, retry_future, retrying
from .notify import LogOnRetry, OnRetry, format_delay
from .policy import STOP, Delay, RetryPolicy, Stop
from .retryable import Retryable

__all__ = [
    # Policy
    "RetryPolicy",
    "Delay",
    "Stop",
    "STOP",
    # Configuration
    "Retryable",
    "RetryConfig",
    # Backoff
    "ErrorBackoff",
    "DELAY_CEILING",
    # Notification
    "OnRetry",
    "LogOnRetry",
    "format_delay",
    # Execution
    "RetryExecutor",
    "retry_future",
    "retrying",
]
