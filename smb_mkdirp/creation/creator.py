"""Recursive directory creation on a connected share.

Public entry point of the library. Combines the path decomposer, the
directory walker and the retry governor behind one method on a share
object.

Contract:
- Inputs: Path (either separator style), optional creation mode
- Outputs: None on success; the classified error on failure
- Side Effects: Creates missing directories on the share

Concurrency:
    Several mkdirp calls may run at once against the same share. Nothing is
    shared between them; the dispatcher is assumed to multiplex concurrent
    requests safely, or the caller serializes calls itself.

Example:
    >>> share = RemoteShare(dispatcher)
    >>> await share.mkdirp("reports/2024/q1")
"""

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..models.paths import DEFAULT_MODE
from ..models.paths import RequestedPath
from ..models.retry import DEFAULT_RETRY_POLICY
from ..models.retry import RetryPolicy
from ..paths.decomposer import decompose_path
from .dispatcher import RequestDispatcher
from .retry import RetryGovernor
from .retry import Sleep
from .walker import DirectoryWalker

if TYPE_CHECKING:
    from ..config.settings import MkdirpSettings

logger = logging.getLogger(__name__)

Callback = Callable[[BaseException | None], None]


class RemoteShare:
    """A connected share that can create directory trees.

    Attributes:
        dispatcher: Request dispatcher bound to the connection
        policy: Retry policy for pending operations
        default_mode: Mode used when mkdirp is called without one
    """

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        policy: RetryPolicy = DEFAULT_RETRY_POLICY,
        default_mode: int = DEFAULT_MODE,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.dispatcher = dispatcher
        self.policy = policy
        self.default_mode = default_mode
        self._walker = DirectoryWalker(dispatcher, RetryGovernor(policy, sleep))

    @classmethod
    def from_settings(
        cls,
        dispatcher: RequestDispatcher,
        settings: "MkdirpSettings",
        sleep: Sleep = asyncio.sleep,
    ) -> "RemoteShare":
        """Build a share using configured retry policy and default mode.

        Example:
            >>> from smb_mkdirp.config import load_config
            >>> share = RemoteShare.from_settings(dispatcher, load_config())
        """
        return cls(dispatcher, policy=settings.retry_policy(), default_mode=settings.default_mode, sleep=sleep)

    async def mkdirp(self, path: str, mode: int | str | None = None) -> None:
        """Create ``path`` and every missing ancestor.

        Directories created before a failure are left in place.

        Args:
            path: Directory path, forward or back slashes
            mode: Creation mode; strings are read as octal (default: share default, 0o777)

        Raises:
            InvalidPathError: If the path has no components (nothing is sent)
            Exception: The dispatcher's error, unmodified, when a step fails
                or stays pending past the retry limit
        """
        ancestors = decompose_path(path)
        request = RequestedPath(path=path, mode=self.default_mode if mode is None else mode)

        logger.debug(f"mkdirp {request.path!r}: {len(ancestors)} directories to ensure")
        await self._walker.walk(ancestors, request.mode)
        logger.info(f"Ensured directory {ancestors[-1]!r}")

    def mkdirp_nowait(
        self,
        path: str,
        mode: int | str | None = None,
        callback: Callback | None = None,
    ) -> asyncio.Task[None]:
        """Schedule mkdirp on the running loop and report through a callback.

        The callback is invoked exactly once, with None on success or the
        error on failure. Without a callback, failures are only logged.
        Exceptions raised by the callback are logged and do not fail the task.
        Cancelling the returned task cancels any pending retry delay; the
        callback is not invoked in that case.

        Args:
            path: Directory path, forward or back slashes
            mode: Creation mode, as for mkdirp (default: share default)
            callback: Completion callback taking the error or None

        Returns:
            Task running the walk
        """

        async def run() -> None:
            error: BaseException | None = None
            try:
                await self.mkdirp(path, mode)
            except Exception as e:
                error = e

            if callback is None:
                if error is not None:
                    logger.warning(f"mkdirp {path!r} failed with no callback to report to: {error}")
                return

            try:
                callback(error)
            except Exception:
                logger.exception(f"mkdirp {path!r} completion callback raised")

        return asyncio.get_running_loop().create_task(run())
