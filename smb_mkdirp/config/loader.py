"""Configuration loading for smb_mkdirp.

Settings come from built-in defaults, an optional YAML file and
SMB_MKDIRP_* environment variables, in increasing order of precedence.

Contract:
- Inputs: Config file path, environment variables
- Outputs: MkdirpSettings objects
- Side Effects: None when loading; create_default_config writes the file
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from ..storage.paths import get_config_dir
from .settings import MkdirpSettings

logger = logging.getLogger(__name__)

ENV_PREFIX = "SMB_MKDIRP_"

DEFAULT_CONFIG = """# smb_mkdirp configuration
# Environment variables (SMB_MKDIRP_<NAME>) override these values

# Backoff for STATUS_PENDING responses, per directory step
max_retries: 5
base_delay_ms: 100
multiplier: 2
max_delay_ms: 1000

# Mode passed to create_folder when the caller gives none
default_mode: "0777"

log_level: "info"
"""


def get_config_path() -> Path:
    """Default config file location ($SMB_MKDIRP_HOME/config/mkdirp.yaml)."""
    return get_config_dir() / "mkdirp.yaml"


def create_default_config(config_path: Path | None = None) -> Path:
    """Write the commented default config unless a file is already there.

    Args:
        config_path: Target file (default: get_config_path())

    Returns:
        Path of the config file
    """
    config_path = config_path or get_config_path()

    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return config_path

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    logger.info(f"Created default config: {config_path}")
    return config_path


def _read_yaml(config_path: Path) -> dict[str, Any]:
    """Mapping stored in ``config_path``; empty when absent or unreadable."""
    if not config_path.is_file():
        logger.debug(f"No config file at {config_path}, using defaults")
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config {config_path}: expected a mapping")
        return {}
    return data


def load_config(config_path: Path | None = None) -> MkdirpSettings:
    """Load settings from YAML and environment.

    A missing file is not an error and is not created.

    Args:
        config_path: Optional config file path (default: get_config_path())

    Returns:
        Validated settings

    Example:
        >>> settings = load_config()
        >>> assert settings.max_retries >= 0
    """
    config_path = config_path or get_config_path()

    # Environment variables win over YAML keys
    overrides = {
        key: value
        for key, value in _read_yaml(config_path).items()
        if f"{ENV_PREFIX}{str(key).upper()}" not in os.environ
    }
    settings = MkdirpSettings(**overrides)

    logger.debug(
        f"Configuration loaded from {config_path}: max_retries={settings.max_retries}, "
        f"base_delay_ms={settings.base_delay_ms}, max_delay_ms={settings.max_delay_ms}"
    )
    return settings
