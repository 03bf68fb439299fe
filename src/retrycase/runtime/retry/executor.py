"""Retry loop for Result-returning coroutines.

Runs an operation factory until it returns Ok, the retry budget is spent, or
the failed attempt's policy says Stop. Errors are returned unchanged; the
caller cannot tell exhaustion from Stop without inspecting its own error.

Suspension order within a session: attempt, notification, delay, next attempt.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from functools import wraps
from typing import TYPE_CHECKING, Generic, ParamSpec, TypeAlias, TypeVar

from retrycase.foundation.errors import Result
from retrycase.runtime.observability import get_logger

from .backoff import ErrorBackoff
from .config import RetryConfig
from .notify import LogOnRetry, OnRetry
from .policy import Delay, Stop

if TYPE_CHECKING:
    from .retryable import Retryable

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E")

Sleep: TypeAlias = Callable[[float], Awaitable[object]]
Factory: TypeAlias = Callable[[], Awaitable[Result[T, E]]]

logger = get_logger("executor")


@dataclass(slots=True)
class RetryExecutor(Generic[T, E]):
    """Drive attempts of one operation to success or give-up.

    Each run() is an independent session with its own attempt counter and
    backoff state, so an executor can be run repeatedly.

    Attributes:
        factory: Zero-arg callable returning a fresh attempt awaitable
        config: Static retry inputs, read once per executor (default: RETRYCASE_RETRY_* settings)
        on_retry: Hook awaited before each delay (default: LogOnRetry at config.log_level)
        sleep: Timer used for delays (default: asyncio.sleep)

    Example:
        >>> executor = RetryExecutor.for_error(FetchError, lambda: fetch(url))
        >>> result = await executor.run()
        >>> result.unwrap()
    """

    factory: Factory[T, E]
    config: RetryConfig = field(default_factory=RetryConfig.from_settings)
    on_retry: OnRetry | None = None
    sleep: Sleep = asyncio.sleep

    def __post_init__(self) -> None:
        if self.on_retry is None:
            self.on_retry = LogOnRetry(self.config.log_level)

    @classmethod
    def for_error(
        cls,
        error_type: type[Retryable],
        factory: Factory[T, E],
        *,
        on_retry: OnRetry | None = None,
        sleep: Sleep | None = None,
        log: logging.Logger | None = None,
    ) -> RetryExecutor[T, E]:
        """Build an executor from an error type's retry configuration.

        Args:
            error_type: Retryable type whose classmethods supply the config
            factory: Operation factory
            on_retry: Custom notification hook (overrides log)
            sleep: Custom timer
            log: Logger for the default LogOnRetry hook
        """
        config = error_type.retry_config()
        if on_retry is None and log is not None:
            on_retry = LogOnRetry(config.log_level, log)
        return cls(factory, config, on_retry, sleep or asyncio.sleep)

    async def run(self) -> Result[T, E]:
        """Run one retry session and return the last attempt's Result."""
        backoff = ErrorBackoff.from_config(self.config)
        attempt = 1
        while True:
            result = await self.factory()
            if result.is_ok():
                return result

            error = result.unwrap_err()
            if attempt > self.config.max_retries:
                logger.debug("Giving up after %d attempt(s): retries exhausted", attempt)
                return result

            match backoff.next(error):
                case Stop():
                    logger.debug("Giving up after %d attempt(s): policy stop for %r", attempt, error)
                    return result
                case Delay(seconds):
                    await self.on_retry(attempt, seconds, error)  # type: ignore[misc]
                    await self.sleep(seconds)
            attempt += 1


async def retry_future(
    factory: Factory[T, E],
    error_type: type[Retryable],
    *,
    on_retry: OnRetry | None = None,
    sleep: Sleep | None = None,
) -> Result[T, E]:
    """Execute factory with retries configured by error_type.

    Example:
        >>> result = await retry_future(lambda: client.get(url), FetchError)
    """
    return await RetryExecutor.for_error(error_type, factory, on_retry=on_retry, sleep=sleep).run()


def retrying(
    error_type: type[Retryable],
    *,
    on_retry: OnRetry | None = None,
    sleep: Sleep | None = None,
) -> Callable[[Callable[P, Awaitable[Result[T, E]]]], Callable[P, Awaitable[Result[T, E]]]]:
    """Decorator retrying an async function that returns a Result.

    Every call starts a new session; each attempt re-invokes the wrapped
    function with the original arguments.

    Example:
        >>> @retrying(FetchError)
        ... async def fetch(url: str) -> Result[bytes, FetchError]:
        ...     ...
        >>> (await fetch("https://example.com")).unwrap()
    """

    def decorator(func: Callable[P, Awaitable[Result[T, E]]]) -> Callable[P, Awaitable[Result[T, E]]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
            return await retry_future(lambda: func(*args, **kwargs), error_type, on_retry=on_retry, sleep=sleep)

        return wrapper

    return decorator
