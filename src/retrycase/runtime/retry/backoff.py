"""Default delay calculation for retry sessions.

ErrorBackoff doubles its delay after every default decision. An error value
that supplies its own policy bypasses the sequence for that attempt only, and
the doubling state is left where it was.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, Final

from .policy import Delay, RetryPolicy, Stop

if TYPE_CHECKING:
    from .config import RetryConfig

# Doubling saturates here when no max_delay is configured
DELAY_CEILING: Final[float] = timedelta.max.total_seconds()


@dataclass(slots=True)
class ErrorBackoff:
    """Stateful doubling backoff owned by a single retry session.

    Attributes:
        current_delay: Delay returned by the next default decision, in seconds
        max_delay: Cap for the sequence (None = DELAY_CEILING)

    Example:
        >>> backoff = ErrorBackoff(current_delay=0.25)
        >>> [backoff.next(ValueError()) for _ in range(3)]
        [Delay(seconds=0.25), Delay(seconds=0.5), Delay(seconds=1.0)]
    """

    current_delay: float
    max_delay: float | None = None

    @classmethod
    def from_config(cls, config: RetryConfig) -> ErrorBackoff:
        return cls(current_delay=config.initial_delay, max_delay=config.max_delay)

    @property
    def ceiling(self) -> float:
        return DELAY_CEILING if self.max_delay is None else min(self.max_delay, DELAY_CEILING)

    def next(self, error: object) -> RetryPolicy:
        """Decide what follows the failed attempt that produced `error`.

        Raises:
            TypeError: If custom_retry_policy() returns anything but Delay, Stop or None
        """
        custom = getattr(error, "custom_retry_policy", None)
        if custom is not None and (policy := custom()) is not None:
            if not isinstance(policy, (Delay, Stop)):
                raise TypeError(f"custom_retry_policy() must return Delay, Stop or None, got {policy!r}")
            return policy
        delay = min(self.current_delay, self.ceiling)
        self.current_delay = min(delay * 2, self.ceiling)
        return Delay(delay)
