"""Retry notification hooks.

A hook runs between a failed attempt and the delay before the next one. It is
awaited by the executor, so a hook may itself suspend. Each call returns a new
coroutine; awaiting one twice raises RuntimeError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from retrycase.runtime.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger = get_logger("retry")


@runtime_checkable
class OnRetry(Protocol):
    """Protocol for retry notification hooks.

    Args:
        attempt: 1-based number of the attempt that just failed
        next_delay: Seconds until the next attempt, None if none follows
        previous_error: Error returned by the failed attempt
    """

    def __call__(self, attempt: int, next_delay: float | None, previous_error: object) -> Awaitable[None]: ...


@dataclass(frozen=True, slots=True)
class LogOnRetry:
    """Log each retry at a fixed level.

    Attributes:
        level: logging level, None disables logging entirely
        logger: Destination logger (default: "retrycase.retry")

    Example:
        >>> hook = LogOnRetry(logging.WARNING)
        >>> await hook(1, 0.25, TimeoutError("read"))
        # => WARNING retrycase.retry: Retry 1; waiting 250ms after error: TimeoutError('read')
    """

    level: int | None = None
    logger: logging.Logger = field(default=logger, repr=False)

    async def __call__(self, attempt: int, next_delay: float | None, previous_error: object) -> None:
        if self.level is None or next_delay is None:
            return
        self.logger.log(
            self.level,
            "Retry %d; waiting %s after error: %r",
            attempt, format_delay(next_delay), previous_error,
        )


def format_delay(seconds: float) -> str:
    """Compact duration: 250ms, 1s, 2.5s."""
    if seconds < 1:
        return f"{seconds * 1000:g}ms"
    return f"{seconds:g}s"
