"""Retry capability attached to error types.

An error type opts in by mixing in Retryable. Configuration that belongs to
the type as a whole (budget, initial delay, log level) lives in classmethods
and is read once per session; the per-value override lives on the instance,
so variants of one error type can retry differently.

Example:
    >>> from dataclasses import dataclass
    >>> from retrycase import STOP, Delay, RetryPolicy, Retryable
    >>>
    >>> @dataclass(frozen=True)
    ... class FetchError(Retryable):
    ...     status: int
    ...
    ...     @classmethod
    ...     def max_retries(cls) -> int:
    ...         return 5
    ...
    ...     @classmethod
    ...     def default_initial_delay(cls) -> float:
    ...         return 0.25
    ...
    ...     def custom_retry_policy(self) -> RetryPolicy | None:
    ...         if self.status == 404:
    ...             return STOP
    ...         if self.status == 429:
    ...             return Delay(5.0)
    ...         return None

Type-level methods not overridden fall back to the RETRYCASE_RETRY_*
settings.
"""

from __future__ import annotations

from retrycase.foundation.config import get_settings

from .backoff import ErrorBackoff
from .config import RetryConfig
from .policy import RetryPolicy


class Retryable:
    """Mixin declaring how failures of this type are retried."""

    __slots__ = ()

    @classmethod
    def max_retries(cls) -> int:
        """Retries allowed after the first attempt."""
        return get_settings().retry.max_retries

    @classmethod
    def default_initial_delay(cls) -> float:
        """First delay (seconds) of the doubling sequence."""
        return get_settings().retry.initial_delay

    @classmethod
    def log_level(cls) -> int | None:
        """Level used to log retries; None disables logging."""
        return get_settings().retry.level

    @classmethod
    def max_delay(cls) -> float | None:
        """Cap for the doubling sequence; None leaves it unbounded."""
        return get_settings().retry.max_delay

    def custom_retry_policy(self) -> RetryPolicy | None:
        """Policy for this error value, or None to use the default backoff."""
        return None

    @classmethod
    def retry_config(cls) -> RetryConfig:
        """Snapshot the type-level configuration for one session."""
        return RetryConfig(
            max_retries=cls.max_retries(),
            initial_delay=cls.default_initial_delay(),
            max_delay=cls.max_delay(),
            log_level=cls.log_level(),
        )

    @classmethod
    def new_backoff(cls) -> ErrorBackoff:
        """Fresh backoff state starting at the default initial delay."""
        return ErrorBackoff.from_config(cls.retry_config())
