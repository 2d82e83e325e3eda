"""Directory walker: ensure every ancestor of a path exists.

Processes the ancestor sequence strictly in order, one outstanding request
at a time. Each step opens the directory to see whether it exists and
creates it only when the share reports it missing.

Contract:
- Inputs: Ancestor sequence, creation mode
- Outputs: None on success; raises the dispatcher's error on failure
- Side Effects: Creates missing directories on the share (no rollback)
"""

import logging
from typing import Any

from ..errors import ErrorKind
from ..errors import classify_error
from ..models.paths import DEFAULT_MODE
from ..models.walk import WalkCursor
from ..models.walk import WalkState
from .dispatcher import RequestDispatcher
from .retry import RetryGovernor

logger = logging.getLogger(__name__)


class DirectoryWalker:
    """Check-then-create state machine over an ancestor sequence.

    State transitions per step:
    - CHECKING -> CHECKING (next step) when the directory exists
    - CHECKING -> CREATING when the share reports it missing
    - CREATING -> CHECKING (next step) once created
    - CHECKING/CREATING -> same state after a pending backoff
    - CHECKING/CREATING -> FAILED on any other error or spent retries
    - CHECKING -> DONE when no steps remain

    A walker holds no per-walk state, so one instance may run several walks
    concurrently.
    """

    def __init__(self, dispatcher: RequestDispatcher, governor: RetryGovernor | None = None) -> None:
        self.dispatcher = dispatcher
        self.governor = governor or RetryGovernor()

    async def walk(self, ancestors: list[str], mode: int = DEFAULT_MODE) -> None:
        """Make sure every path in ``ancestors`` exists.

        Args:
            ancestors: Paths ordered shallowest first
            mode: Creation mode for missing directories

        Raises:
            Exception: The dispatcher error that stopped the walk, unmodified
        """
        cursor = WalkCursor()
        state = WalkState.CHECKING

        while cursor.index < len(ancestors):
            path = ancestors[cursor.index]
            try:
                if state is WalkState.CHECKING:
                    state = await self._check(path)
                else:
                    await self._create(path, mode)
                    state = WalkState.CHECKING
            except Exception as e:
                if classify_error(e) is ErrorKind.PENDING and self.governor.allows(cursor.retries):
                    await self.governor.backoff(cursor, e)
                    continue
                logger.error(f"{WalkState.FAILED.value} while {state.value} {path!r}: {e}")
                raise

            if state is WalkState.CHECKING:
                cursor.advance()

        logger.debug(f"{WalkState.DONE.value}: all {len(ancestors)} directories present")

    async def _check(self, path: str) -> WalkState:
        """Open ``path``; return the next state for this step.

        Raises any error other than "missing" to the walk loop.
        """
        logger.debug(f"Checking {path!r}")
        try:
            handle = await self.dispatcher.open_folder(path)
        except Exception as e:
            if classify_error(e) is ErrorKind.MISSING:
                logger.debug(f"{path!r} does not exist ({getattr(e, 'code', e)})")
                return WalkState.CREATING
            raise

        await self._release(handle)
        return WalkState.CHECKING

    async def _create(self, path: str, mode: int) -> None:
        logger.debug(f"Creating {path!r} with mode {oct(mode)}")
        handle = await self.dispatcher.create_folder(path, mode)
        logger.info(f"Created directory {path!r}")
        await self._release(handle)

    async def _release(self, handle: Any) -> None:
        """Close a handle; failures are logged and ignored."""
        try:
            await self.dispatcher.close(handle)
        except Exception as e:
            logger.debug(f"Ignoring close failure: {e}")
