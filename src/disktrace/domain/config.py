from __future__ import annotations

"""
Configuration Domain Management.

Dict-based run configuration. Values come from the built-in defaults,
optionally overlaid with a persistent JSON file and finally with
command-line overrides.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from disktrace.domain.constants import (
    DEFAULT_DISK_CAPACITY,
    DEFAULT_INPUT_FILE,
    DEFAULT_NEEDED_FREE_SPACE,
    DEFAULT_SIZE_THRESHOLD,
)
from disktrace.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO
        "input_path": DEFAULT_INPUT_FILE,

        # Query A
        "threshold": DEFAULT_SIZE_THRESHOLD,

        # Query B
        "disk_capacity": DEFAULT_DISK_CAPACITY,
        "needed_free_space": DEFAULT_NEEDED_FREE_SPACE,

        # Presentation
        "show_tree": False,
    }


def get_default_config_path() -> str:
    """Resolve the persistent configuration file inside the user data dir."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from a JSON file merged over the defaults.

    A missing file silently yields the defaults; a corrupted one is logged
    and ignored.

    Args:
        path: JSON file to read. Defaults to the user data config file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    config_path = path or get_default_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    config.update(data)
    logger.debug(f"Configuration loaded from {config_path}")
    return config
