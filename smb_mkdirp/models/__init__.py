"""Models for smb_mkdirp."""

from .paths import ALTERNATE_SEPARATOR
from .paths import CANONICAL_SEPARATOR
from .paths import DEFAULT_MODE
from .paths import RequestedPath
from .retry import DEFAULT_RETRY_POLICY
from .retry import RetryPolicy
from .walk import WalkCursor
from .walk import WalkState

__all__ = [
    "ALTERNATE_SEPARATOR",
    "CANONICAL_SEPARATOR",
    "DEFAULT_MODE",
    "DEFAULT_RETRY_POLICY",
    "RequestedPath",
    "RetryPolicy",
    "WalkCursor",
    "WalkState",
]
