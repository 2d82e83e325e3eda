"""Retry policy model for pending remote operations."""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class RetryPolicy(BaseModel):
    """Bounded exponential backoff settings.

    Delays are in milliseconds: ``min(base_delay_ms * multiplier ** retries, max_delay_ms)``.

    Example:
        >>> policy = RetryPolicy()
        >>> [policy.delay_ms(n) for n in range(5)]
        [100, 200, 400, 800, 1000]
    """

    model_config = ConfigDict(frozen=True)

    max_retries: int = Field(default=5, ge=0, description="Retries allowed per walk step")
    base_delay_ms: int = Field(default=100, gt=0, description="Delay before the first retry")
    multiplier: int = Field(default=2, ge=1, description="Backoff growth factor per attempt")
    max_delay_ms: int = Field(default=1000, gt=0, description="Upper bound for any single delay")

    def delay_ms(self, retries: int) -> int:
        return min(self.base_delay_ms * self.multiplier**retries, self.max_delay_ms)


DEFAULT_RETRY_POLICY = RetryPolicy()
