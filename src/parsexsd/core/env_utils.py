#!/usr/bin/env python3
"""
Helpers for reading PARSEXSD_* environment variables.

Values are cleaned of trailing whitespace and CRLF line endings, which show up
when an .env file is edited on Windows and then sourced on Linux.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off", "")


def getenv_clean(key: str, default: str = None, strip: bool = True) -> Optional[str]:
    """Get environment variable with line endings and whitespace removed.

    Args:
        key: Environment variable name
        default: Default value if variable is not set
        strip: If True, strip whitespace and line endings (default: True)

    Returns:
        Cleaned value, or default if not set

    Example:
        >>> # .env file has: PARSEXSD_RESPONSE_SUFFIX=Response\r\n
        >>> getenv_clean("PARSEXSD_RESPONSE_SUFFIX")
        'Response'
    """
    raw_value = os.getenv(key, default)

    if raw_value is None:
        return None

    if not strip:
        return raw_value

    cleaned = raw_value.strip().rstrip("\r\n")

    if raw_value != cleaned:
        logger.warning(
            f"Environment variable {key} had trailing whitespace/line endings: "
            f"raw={repr(raw_value)}, cleaned={repr(cleaned)}"
        )

    return cleaned


def getenv_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean.

    "true"/"1"/"yes"/"on" map to True, "false"/"0"/"no"/"off"/"" to False
    (case-insensitive). Anything else logs a warning and returns the default.
    """
    raw_value = getenv_clean(key, None)

    if raw_value is None:
        return default

    cleaned_lower = raw_value.lower()
    if cleaned_lower in _TRUE_VALUES:
        return True
    elif cleaned_lower in _FALSE_VALUES:
        return False
    else:
        logger.warning(
            f"Environment variable {key} has unexpected boolean value: {repr(raw_value)}. "
            f"Using default: {default}"
        )
        return default


def getenv_int(key: str, default: int) -> int:
    """Get environment variable as integer, falling back to default when invalid."""
    raw_value = getenv_clean(key, None)

    if raw_value is None:
        return default

    try:
        return int(raw_value)
    except ValueError:
        logger.warning(
            f"Environment variable {key} is not a valid integer: {repr(raw_value)}. "
            f"Using default: {default}"
        )
        return default


def getenv_list(key: str, default: list[str] = None, separator: str = ",") -> list[str]:
    """Get environment variable as a list of cleaned, non-empty items.

    Example:
        >>> # .env file has: PARSEXSD_COLUMNS=name,type,desc\r\n
        >>> getenv_list("PARSEXSD_COLUMNS")
        ['name', 'type', 'desc']
    """
    if default is None:
        default = []

    raw_value = getenv_clean(key, None)

    if raw_value is None or raw_value == "":
        return default

    items = [item.strip() for item in raw_value.split(separator) if item.strip()]
    return items if items else default
