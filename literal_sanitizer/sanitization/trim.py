"""
Trimming of invalid-character runs at the ends of a string.

trim_left and trim_right are independent; BOTH is simply one after the other.
"""

import re
from enum import Enum
from typing import Any

from literal_sanitizer.sanitization.errors import InvalidTrimModeError


class TrimMode(str, Enum):
    """Which ends of the string lose their invalid-character runs."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"

    @classmethod
    def coerce(cls, value: Any) -> "TrimMode":
        """
        Convert a member, its string value or None into a TrimMode.

        None means "skip trimming" and maps to NONE.

        Raises:
            InvalidTrimModeError: For anything else
        """
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                raise InvalidTrimModeError(value) from None
        raise InvalidTrimModeError(value)


def trim_left(text: str, valid: re.Pattern) -> str:
    """Drop everything before the first valid character ("" if there is none)."""
    match = valid.search(text)
    if match is None:
        return ""
    return text[match.start():]


def trim_right(text: str, valid: re.Pattern) -> str:
    """Drop everything after the last valid character ("" if there is none)."""
    for index in range(len(text) - 1, -1, -1):
        if valid.match(text, index):
            return text[:index + 1]
    return ""


def apply_trim(text: str, valid: re.Pattern, mode: TrimMode) -> str:
    """
    Trim `text` according to `mode`.

    Args:
        text: String to trim
        valid: Pattern matching one allowed character
        mode: Trim mode (already coerced)

    Returns:
        The trimmed string
    """
    if mode is TrimMode.LEFT:
        return trim_left(text, valid)
    if mode is TrimMode.RIGHT:
        return trim_right(text, valid)
    if mode is TrimMode.BOTH:
        return trim_right(trim_left(text, valid), valid)
    return text
