"""Test support: retryable error types, scripted operations, fake timers."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Literal

from retrycase import STOP, Delay, Err, Ok, Result, Retryable, RetryPolicy


@dataclass(frozen=True)
class ApiError(Retryable):
    """Test error: transient uses the default backoff, throttled a fixed delay, fatal stops."""

    kind: Literal["transient", "throttled", "fatal"] = "transient"
    detail: str = ""

    @classmethod
    def max_retries(cls) -> int:
        return 7

    @classmethod
    def default_initial_delay(cls) -> float:
        return 0.25

    @classmethod
    def log_level(cls) -> int | None:
        return None

    def custom_retry_policy(self) -> RetryPolicy | None:
        match self.kind:
            case "throttled": return Delay(0.1)
            case "fatal": return STOP
            case _: return None


@dataclass(frozen=True)
class LoudError(ApiError):
    """ApiError that logs its retries at WARNING."""

    @classmethod
    def log_level(cls) -> int | None:
        return logging.WARNING


@dataclass(frozen=True)
class OneShotError(ApiError):
    """ApiError with no retry budget."""

    @classmethod
    def max_retries(cls) -> int:
        return 0


@dataclass(frozen=True)
class MistypedError(ApiError):
    """ApiError whose override returns a timedelta instead of a policy."""

    def custom_retry_policy(self) -> RetryPolicy | None:
        return timedelta(seconds=5)  # type: ignore[return-value]


class ScriptedOperation:
    """Operation factory replaying scripted outcomes; the last outcome repeats.

    Every awaited attempt is counted and appended to `events`.
    """

    def __init__(self, *outcomes: Result[str, ApiError], events: list[tuple[str, object]] | None = None) -> None:
        self.outcomes = list(outcomes)
        self.calls = 0
        self.events = events if events is not None else []

    def __call__(self) -> Awaitable[Result[str, ApiError]]:
        async def attempt() -> Result[str, ApiError]:
            self.calls += 1
            self.events.append(("attempt", self.calls))
            return self.outcomes[min(self.calls, len(self.outcomes)) - 1]
        return attempt()


@dataclass
class RecordingSleep:
    """Fake timer recording requested delays without waiting."""

    delays: list[float] = field(default_factory=list)
    events: list[tuple[str, object]] = field(default_factory=list)

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
        self.events.append(("sleep", seconds))


@dataclass
class RecordingHook:
    """OnRetry hook recording every notification."""

    calls: list[tuple[int, float | None, object]] = field(default_factory=list)
    events: list[tuple[str, object]] = field(default_factory=list)

    async def __call__(self, attempt: int, next_delay: float | None, previous_error: object) -> None:
        self.calls.append((attempt, next_delay, previous_error))
        self.events.append(("notify", attempt))

    @property
    def delays(self) -> list[float | None]:
        return [d for _, d, _ in self.calls]


def failing(n: int, kind: str = "transient") -> Result[str, ApiError]:
    return Err(ApiError(kind, detail=f"attempt {n}"))  # type: ignore[arg-type]


def succeeding(value: str = "foo") -> Result[str, ApiError]:
    return Ok(value)
