"""Runtime: the retry engine and its logging."""

from .observability import configure_logging, get_logger
from .retry import (
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
    retry_future,
    retrying,
)

__all__ = [
    "RetryPolicy", "Delay", "Stop", "STOP",
    "Retryable", "RetryConfig", "ErrorBackoff",
    "OnRetry", "LogOnRetry",
    "RetryExecutor", "retry_future", "retrying",
    "configure_logging", "get_logger",
]
