"""Local file locations for smb_mkdirp.

Lookups only: nothing here touches the filesystem. Directories are created
by whoever writes into them (see config.loader.create_default_config).

Contract:
- Inputs: Environment variables (SMB_MKDIRP_HOME, SMB_MKDIRP_CONFIG_DIR)
- Outputs: Resolved Path objects
- Side Effects: None
"""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Root of local smb_mkdirp files ($SMB_MKDIRP_HOME, default ~/.smb_mkdirp)."""
    root = os.environ.get("SMB_MKDIRP_HOME")
    if root is None:
        return Path.home() / ".smb_mkdirp"
    return Path(root).expanduser().resolve()


def get_config_dir() -> Path:
    """Directory holding mkdirp.yaml.

    Environment Variables:
        SMB_MKDIRP_CONFIG_DIR: Override config directory location
        (falls back to $SMB_MKDIRP_HOME/config if not set)
    """
    env_override = os.environ.get("SMB_MKDIRP_CONFIG_DIR")
    if env_override is not None:
        return Path(env_override).expanduser().resolve()
    return get_home_dir() / "config"
