"""Request dispatcher contract consumed by the directory walker.

The dispatcher serializes protocol commands, sends them over an established
connection and resolves their responses. It is supplied by the caller.
Errors must carry a ``code`` attribute with the status name (see
``smb_mkdirp.errors``).
"""

from typing import Any
from typing import Protocol


class RequestDispatcher(Protocol):
    """Async folder operations against a connected share."""

    async def open_folder(self, path: str) -> Any:
        """Open an existing directory and return its handle."""
        ...

    async def create_folder(self, path: str, mode: int) -> Any:
        """Create a directory and return its handle."""
        ...

    async def close(self, handle: Any) -> None:
        """Release a handle returned by open_folder or create_folder."""
        ...
