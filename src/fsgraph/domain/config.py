from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences as JSON in the user data
directory, with fallback to defaults for missing or corrupted files.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from fsgraph.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"
START_POLICIES = ("lexicographic", "insertion")


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Graph construction
        "root_path": os.getcwd(),
        "follow_symlinks": True,

        # Queries & output
        "start_policy": "lexicographic",
        "show_graph": False,
        "short_names": True,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk merged over the defaults.

    Unknown keys are dropped. A missing, unreadable or malformed file
    yields the defaults.

    Args:
        path: Explicit config file. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    config_path = path or get_config_path()
    defaults = get_default_config()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    settings = data.get("settings", {})
    if not isinstance(settings, dict):
        logger.warning("Config 'settings' section is not an object. Ignoring it.")
        return defaults

    for key in defaults:
        if key in settings:
            defaults[key] = settings[key]
    return defaults


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist the configuration to disk.

    Args:
        config: Settings to store (only known keys are written).
        path: Explicit config file. Defaults to the user data directory.
    """
    config_path = path or get_config_path()
    known = get_default_config()
    payload = {
        "version": CURRENT_CONFIG_VERSION,
        "settings": {k: v for k, v in config.items() if k in known},
    }
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
