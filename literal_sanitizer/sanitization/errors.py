"""
Sanitization error types.

Configuration problems (charset, replacement, trim mode) are ValueErrors so
callers validating user input can treat them like any other bad argument.
UnsanitizableError is raised when a value has nothing left after sanitization.
"""

from typing import Any


class SanitizationError(Exception):
    """Base class for every error raised by the sanitizer."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidCharsetError(SanitizationError, ValueError):
    """Charset contains a range other than a-z, A-Z, 0-9 or ---."""

    def __init__(self, charset: str, token: str | None = None, reason: str | None = None):
        if token is not None:
            reason = f"unsupported range \"{token}\""
        message = f"Unrecognized charset: \"{charset}\""
        if reason:
            message += f" ({reason})"
        super().__init__(message, charset)
        self.charset = charset
        self.token = token


class InvalidReplacementError(SanitizationError, ValueError):
    """Replacement is not exactly one character."""

    def __init__(self, replacement: Any):
        super().__init__(
            f"Parameter 'replacement' should be a valid character, got {replacement!r}",
            replacement,
        )
        self.replacement = replacement


class InvalidTrimModeError(SanitizationError, ValueError):
    """Trim mode is not one of none, left, right or both."""

    def __init__(self, trim_mode: Any):
        super().__init__(f"Invalid trim mode: {trim_mode!r}", trim_mode)
        self.trim_mode = trim_mode


class UnsanitizableError(SanitizationError):
    """Nothing of the value survived trimming and replacement."""

    def __init__(self, value: Any):
        super().__init__(f"Value {value!r} is not sanitizable", value)
