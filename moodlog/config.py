"""Configuration loading for moodlog.

Settings live in a TOML file, by default ~/.config/moodlog/config.toml.
The MOODLOG_CONFIG environment variable points at a different file.

Example:
    [filter]
    default_days = 14

    [display]
    percent_decimals = 0
"""

import copy
import logging
import os
from pathlib import Path
from typing import Optional

import toml

logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    "filter": {
        "default_days": 7,
    },
    "display": {
        "percent_decimals": 1,
    },
}


def get_config_path() -> Path:
    """Get the configuration file path."""
    env = os.environ.get("MOODLOG_CONFIG")
    if env:
        return Path(env).expanduser()
    return Path.home() / ".config" / "moodlog" / "config.toml"


def load_config(path: Optional[Path] = None) -> dict:
    """Load configuration merged over the defaults.

    A missing or unreadable file yields the defaults.

    Args:
        path: Config file to read. Uses get_config_path() if not provided.

    Returns:
        Configuration dictionary with every default section present.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = path or get_config_path()

    if not config_path.exists():
        return config

    try:
        loaded = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return config

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config
