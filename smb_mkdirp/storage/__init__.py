"""Local storage locations for smb_mkdirp.

Public Interface:
    - get_home_dir: Get SMB_MKDIRP_HOME
    - get_config_dir: Get config directory
"""

from .paths import get_config_dir
from .paths import get_home_dir

__all__ = [
    "get_home_dir",
    "get_config_dir",
]
