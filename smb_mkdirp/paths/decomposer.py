"""Path decomposition into ancestor directories.

Turns a user-supplied path into the ordered list of directories that must
exist for the path itself to exist, using the share's backslash separator.

Contract:
- Inputs: Raw path string (forward or back slashes, absolute or relative)
- Outputs: Ancestor paths, shallowest first, target last
- Side Effects: None (pure)
"""

from ..errors import InvalidPathError
from ..models.paths import ALTERNATE_SEPARATOR
from ..models.paths import CANONICAL_SEPARATOR


def normalize_path(path: str) -> str:
    """Convert every forward slash to the canonical backslash.

    Example:
        >>> normalize_path("a/b\\\\c")
        'a\\\\b\\\\c'
    """
    return path.replace(ALTERNATE_SEPARATOR, CANONICAL_SEPARATOR)


def split_components(path: str) -> list[str]:
    """Split a path into its non-empty components.

    Empty components are dropped, which collapses duplicate separators and
    strips leading and trailing ones.
    """
    return [part for part in normalize_path(path).split(CANONICAL_SEPARATOR) if part]


def decompose_path(path: str) -> list[str]:
    """Build the ancestor sequence for a path.

    Args:
        path: Directory path to create

    Returns:
        Every ancestor path from the first component alone up to the full path

    Raises:
        InvalidPathError: If the path has no non-empty components

    Example:
        >>> decompose_path("/a/b/c")
        ['a', 'a\\\\b', 'a\\\\b\\\\c']
    """
    if not isinstance(path, str):
        raise InvalidPathError(f"Invalid path: expected str, got {type(path).__name__}")

    components = split_components(path)
    if not components:
        raise InvalidPathError(f"Invalid path: {path!r}")

    ancestors: list[str] = []
    current = ""
    for component in components:
        current = f"{current}{CANONICAL_SEPARATOR}{component}" if current else component
        ancestors.append(current)
    return ancestors
