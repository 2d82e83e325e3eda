"""Retry governor for pending remote operations.

Decides whether a step that answered STATUS_PENDING may be re-issued and
waits out the backoff delay before it is.

Contract:
- Inputs: Walk cursor, the pending error
- Outputs: None (returns once the step may be retried)
- Side Effects: Suspends the calling task for the backoff delay
"""

import asyncio
import logging
from collections.abc import Awaitable
from collections.abc import Callable

from ..models.retry import DEFAULT_RETRY_POLICY
from ..models.retry import RetryPolicy
from ..models.walk import WalkCursor

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class RetryGovernor:
    """Bounded exponential backoff for one walk.

    The sleep function is injectable so tests can record delays instead of
    waiting them out. It receives seconds, like ``asyncio.sleep``.
    """

    def __init__(self, policy: RetryPolicy = DEFAULT_RETRY_POLICY, sleep: Sleep = asyncio.sleep) -> None:
        self.policy = policy
        self._sleep = sleep

    def allows(self, retries: int) -> bool:
        return retries < self.policy.max_retries

    def delay_ms(self, retries: int) -> int:
        return self.policy.delay_ms(retries)

    async def backoff(self, cursor: WalkCursor, error: BaseException) -> None:
        """Wait before retrying the current step, or give up.

        Args:
            cursor: Walk position; its retry count is incremented on success
            error: The pending error that triggered the retry

        Raises:
            The pending error itself when the retry budget is spent
        """
        if not self.allows(cursor.retries):
            logger.warning(
                f"Giving up on step {cursor.index} after {cursor.retries} retries: {getattr(error, 'code', error)}"
            )
            raise error

        delay = self.delay_ms(cursor.retries)
        logger.debug(f"Step {cursor.index} pending, retry {cursor.retries + 1} in {delay}ms")
        await self._sleep(delay / 1000)
        cursor.retries += 1
