"""
Charset sanitization module.

Restricts values to an allowed set of characters, trimming invalid runs from
the ends and replacing whatever invalid characters remain.
"""

from .character_sanitizer import CharsetSanitizer, sanitize, sanitize_literal, stringify
from .charset import PARSEABLE_RANGES, ParsedCharset, parse_charset, validate_charset
from .errors import (
    InvalidCharsetError,
    InvalidReplacementError,
    InvalidTrimModeError,
    SanitizationError,
    UnsanitizableError,
)
from .trim import TrimMode, trim_left, trim_right

__all__ = [
    "CharsetSanitizer",
    "sanitize",
    "sanitize_literal",
    "stringify",
    "PARSEABLE_RANGES",
    "ParsedCharset",
    "parse_charset",
    "validate_charset",
    "TrimMode",
    "trim_left",
    "trim_right",
    "SanitizationError",
    "InvalidCharsetError",
    "InvalidReplacementError",
    "InvalidTrimModeError",
    "UnsanitizableError",
]
