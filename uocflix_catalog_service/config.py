"""Application configuration"""

import json
import logging
import os
from pathlib import Path

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _get_config_value(key: str, default: str | None = None) -> str | None:
    """
    Get configuration value from environment or local.settings.json.

    Priority:
    1. Environment variable
    2. local.settings.json (Values.key)
    3. Default value

    Args:
        key: Configuration key name
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    value = os.getenv(key)
    if value:
        return value

    project_root = Path(__file__).resolve().parent.parent
    local_settings_path = project_root / "local.settings.json"

    if local_settings_path.exists():
        try:
            with open(local_settings_path) as f:
                settings = json.load(f)
                value = settings.get("Values", {}).get(key)
                if value:
                    return value
        except (json.JSONDecodeError, KeyError):
            pass

    return default


def get_log_level() -> str:
    """
    Get logging level name from config.

    Returns:
        Level name (default: INFO)
    """
    return (_get_config_value("LOG_LEVEL", default="INFO") or "INFO").upper()


def get_name_blank_chars() -> str:
    """
    Get the characters treated as blanks when normalizing names.

    Returns:
        Blank characters (default: space and tab)
    """
    return _get_config_value("NAME_BLANK_CHARS", default=" \t") or " \t"


def configure_logging() -> None:
    """Configure root logging with the configured level."""
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
