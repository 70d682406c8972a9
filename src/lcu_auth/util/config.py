# (c) Copyright IBM Corp. 2025

import os
from typing import Any, Dict, Optional

from lcu_auth.log import logger
from lcu_auth.util.config_reader import ConfigReader

# Root key of the authentication settings in the YAML configuration file
CONFIG_ROOT_KEY = "authentication"


def is_truthy(value: Any) -> bool:
    """
    Check if a value is truthy, accepting various formats.

    @param value: The value to check
    @return: True if the value is considered truthy, False otherwise

    Accepts the following as True:
    - True (Python boolean)
    - "True", "true", "yes" (case-insensitive string)
    - "1" (string)
    - 1 (integer)
    """
    if value is None:
        return False

    if isinstance(value, bool):
        return value

    if isinstance(value, int):
        return value == 1

    if isinstance(value, str):
        value_lower = value.strip().lower()
        return value_lower in ("true", "yes") or value_lower == "1"

    return False


def parse_poll_interval(value: Any) -> Optional[float]:
    """
    Parses a poll interval given in seconds.

    @param value: a number or a numeric string
    @return: the interval, or None if the value is not a positive number
    """
    if isinstance(value, bool):
        return None

    try:
        interval = float(value)
    except (TypeError, ValueError):
        return None

    if interval <= 0:
        return None
    return interval


def get_authentication_config_from_yaml() -> Dict[str, Any]:
    """
    Reads the authentication section of the YAML file named by LCU_AUTH_CONFIG_PATH.

    @return: the settings found, empty if there is no file or section
    """
    path = os.environ.get("LCU_AUTH_CONFIG_PATH", "")
    if not path:
        return {}

    config_reader = ConfigReader(path)
    section = config_reader.data.get(CONFIG_ROOT_KEY)

    if section is None:
        return {}
    if not isinstance(section, dict):
        logger.warning(
            f"Ignoring '{CONFIG_ROOT_KEY}' in {path}: expected a mapping, got {type(section).__name__}"
        )
        return {}
    return section
