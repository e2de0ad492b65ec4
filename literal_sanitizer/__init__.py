"""
Literal Sanitizer

Sanitize values down to a chosen set of characters:

    from literal_sanitizer import sanitize

    sanitize("fooBar3", "A-Z0-9")        # 'FOOBAR3'
    sanitize("fooBar3", "a-z", "z")      # 'foobarz'
    sanitize(None)                       # None
"""

from literal_sanitizer.sanitization import (
    PARSEABLE_RANGES,
    CharsetSanitizer,
    InvalidCharsetError,
    InvalidReplacementError,
    InvalidTrimModeError,
    ParsedCharset,
    SanitizationError,
    TrimMode,
    UnsanitizableError,
    parse_charset,
    sanitize,
    sanitize_literal,
)

__version__ = "1.2.0"

__all__ = [
    "sanitize",
    "sanitize_literal",
    "CharsetSanitizer",
    "PARSEABLE_RANGES",
    "ParsedCharset",
    "parse_charset",
    "TrimMode",
    "SanitizationError",
    "InvalidCharsetError",
    "InvalidReplacementError",
    "InvalidTrimModeError",
    "UnsanitizableError",
]
