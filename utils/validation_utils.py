"""
utils/validation_utils.py

Purpose: Input validation

- Required-field checks for request payloads
"""

from typing import Any


def is_blank(value: Any) -> bool:
    """
    True when value is not a string or holds only whitespace.

    Args:
        value: Raw request field

    Returns:
        True if the field should be treated as missing
    """
    return not isinstance(value, str) or not value.strip()
