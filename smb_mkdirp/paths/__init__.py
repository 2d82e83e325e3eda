"""Path handling for smb_mkdirp.

Public Interface:
    - decompose_path: Build the ancestor sequence for a path
    - normalize_path: Convert separators to the canonical backslash
    - split_components: Non-empty components of a path
"""

from .decomposer import decompose_path
from .decomposer import normalize_path
from .decomposer import split_components

__all__ = [
    "decompose_path",
    "normalize_path",
    "split_components",
]
