"""Walk progress state for one mkdirp invocation."""

from dataclasses import dataclass
from enum import Enum


class WalkState(str, Enum):
    """Directory walker state.

    State transitions:
    - CHECKING: open the current path to see whether it exists
    - CREATING: create the current path
    - DONE: every ancestor exists (terminal)
    - FAILED: unrecoverable error (terminal)
    """

    CHECKING = "checking"
    CREATING = "creating"
    DONE = "done"
    FAILED = "failed"


@dataclass
class WalkCursor:
    """Position in the ancestor sequence and retries spent on that step."""

    index: int = 0
    retries: int = 0

    def advance(self) -> None:
        self.index += 1
        self.retries = 0
