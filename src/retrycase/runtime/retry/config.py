"""Per-session snapshot of an error type's retry configuration.

Optimizations:
- Frozen for immutability and hashability
- Built once per session, never re-read per attempt
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, PositiveFloat, computed_field

from retrycase.foundation.config import get_settings


class RetryConfig(BaseModel):
    """Static retry inputs for one session.

    Attributes:
        max_retries: Retries allowed after the first attempt (0 = single attempt)
        initial_delay: First delay of the doubling sequence, in seconds
        max_delay: Cap on the doubling sequence (None = saturate at a finite ceiling)
        log_level: logging level for retry notifications (None = silent)

    Example:
        >>> RetryConfig(max_retries=7, initial_delay=0.25).max_attempts
        8
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        revalidate_instances="never",
        json_schema_extra={
            "title": "Retry Config",
            "description": "Static retry configuration for one retry session",
            "examples": [{"max_retries": 7, "initial_delay": 0.25, "log_level": 30}],
        },
    )

    max_retries: Annotated[int, Field(ge=0)] = 3
    initial_delay: NonNegativeFloat = 1.0
    max_delay: PositiveFloat | None = None
    log_level: Annotated[int, Field(ge=0)] | None = None

    @computed_field
    @property
    def max_attempts(self) -> int:
        """Total invocations a permanently failing operation receives."""
        return self.max_retries + 1

    @classmethod
    def from_settings(cls) -> RetryConfig:
        """Configuration from the RETRYCASE_RETRY_* settings alone."""
        retry = get_settings().retry
        return cls(
            max_retries=retry.max_retries,
            initial_delay=retry.initial_delay,
            max_delay=retry.max_delay,
            log_level=retry.level,
        )
