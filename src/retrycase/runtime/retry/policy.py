"""Retry decisions produced after a failed attempt.

A RetryPolicy is either Delay (wait, then retry) or Stop (give up now,
whatever budget remains). Values are immutable and compare structurally,
so they work directly in match statements:

    >>> match policy:
    ...     case Delay(seconds): await sleep(seconds)
    ...     case Stop(): return result
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final, TypeAlias


@dataclass(frozen=True, slots=True)
class Delay:
    """Wait `seconds` before the next attempt."""

    seconds: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.seconds) or self.seconds < 0:
            raise ValueError(f"Delay must be a finite, non-negative number of seconds, got {self.seconds!r}")


@dataclass(frozen=True, slots=True)
class Stop:
    """Abandon the session immediately."""


RetryPolicy: TypeAlias = Delay | Stop

STOP: Final = Stop()
