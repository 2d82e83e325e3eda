"""smb_mkdirp: recursive directory creation on SMB-style shares.

Creates a path and all of its missing ancestors over an asynchronous,
session-based file-sharing protocol, retrying operations the server reports
as pending.

Public Interface:
    Modules:
    - creation: RemoteShare, walker, retry governor, dispatcher contract
    - paths: Path decomposition
    - models: Shared data structures
    - config: Configuration loading
    - errors: Error types and status classification
"""

from .creation import RemoteShare
from .creation import RequestDispatcher
from .errors import InvalidPathError
from .errors import StatusError
from .models import DEFAULT_MODE
from .models import RetryPolicy
from .paths import decompose_path

__all__ = [
    "DEFAULT_MODE",
    "InvalidPathError",
    "RemoteShare",
    "RequestDispatcher",
    "RetryPolicy",
    "StatusError",
    "decompose_path",
]
