"""Error types and status classification for remote directory creation.

Dispatcher errors are identified by their ``code`` attribute (an SMB2 status
name such as ``STATUS_PENDING``). They are classified here but never wrapped,
so callers keep the dispatcher's native error objects.

Contract:
- Inputs: Exceptions raised by a request dispatcher
- Outputs: ErrorKind classification
- Side Effects: None
"""

from enum import Enum

STATUS_PENDING = "STATUS_PENDING"
STATUS_OBJECT_NAME_NOT_FOUND = "STATUS_OBJECT_NAME_NOT_FOUND"
STATUS_OBJECT_PATH_NOT_FOUND = "STATUS_OBJECT_PATH_NOT_FOUND"

MISSING_STATUSES = frozenset({STATUS_OBJECT_NAME_NOT_FOUND, STATUS_OBJECT_PATH_NOT_FOUND})


class InvalidPathError(ValueError):
    """Raised when a path has no usable components."""

    pass


class StatusError(RuntimeError):
    """Error reported by the remote side, carrying its status code.

    Attributes:
        code: Status name (e.g. "STATUS_PENDING")
    """

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or code)


class ErrorKind(str, Enum):
    """How the walker reacts to a dispatcher error.

    - MISSING: directory does not exist yet, create it
    - PENDING: request still being processed, retry with backoff
    - FATAL: anything else, abort the walk
    """

    MISSING = "missing"
    PENDING = "pending"
    FATAL = "fatal"


def classify_error(error: BaseException) -> ErrorKind:
    """Classify a dispatcher error by its status code.

    Args:
        error: Exception raised by open_folder or create_folder

    Returns:
        ErrorKind for the error (FATAL when it carries no known code)

    Example:
        >>> classify_error(StatusError(STATUS_PENDING))
        <ErrorKind.PENDING: 'pending'>
    """
    code = getattr(error, "code", None)
    if code in MISSING_STATUSES:
        return ErrorKind.MISSING
    if code == STATUS_PENDING:
        return ErrorKind.PENDING
    return ErrorKind.FATAL
