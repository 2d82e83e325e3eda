"""Remote directory creation.

Public Interface:
    - RemoteShare: Share object exposing mkdirp
    - DirectoryWalker: Check-then-create walk over ancestors
    - RetryGovernor: Backoff for pending operations
    - RequestDispatcher: Dispatcher contract (Protocol)
"""

from .creator import RemoteShare
from .dispatcher import RequestDispatcher
from .retry import RetryGovernor
from .walker import DirectoryWalker

__all__ = [
    "RemoteShare",
    "RequestDispatcher",
    "RetryGovernor",
    "DirectoryWalker",
]
