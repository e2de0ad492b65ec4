"""
Charset sanitizer: restrict a value to an allowed set of characters.

Given a value, a charset spec, a replacement character and a trim mode, the
sanitizer produces a string made only of charset characters (plus the
replacement character):

1. None passes through untouched (no validation at all)
2. Validate the charset spec and the replacement character
3. Stringify the value
4. Fast path: nothing invalid and no leading replacement -> return as-is
5. Normalize case (lowercase / uppercase / preserve) from the charset letters
6. Trim invalid runs from the ends according to the trim mode
7. Replace every remaining invalid character with the replacement
8. Reject an empty result

Example:
    >>> sanitize("fooBar3", "A-Z0-9")
    'FOOBAR3'
    >>> sanitize("fooBar3", "acdeghijklmnopqrstuvwxyz0-9", "_")
    'oo_ar3'

CharsetSanitizer validates a configuration once and can then be reused for
many values. It can also repair mojibake (ftfy) and fold accents to ASCII
(unidecode) before sanitizing, so "Café" becomes "cafe" instead of "caf-".
"""

import math
import re
from typing import Any, Iterable

import ftfy
from unidecode import unidecode

from literal_sanitizer.config import (
    DEFAULT_CHARSET,
    DEFAULT_REPLACEMENT,
    DEFAULT_TRIM_MODE,
    get_preset,
)
from literal_sanitizer.logging_config import Timer, debug_log
from literal_sanitizer.sanitization.charset import (
    ParsedCharset,
    build_matchers,
    parse_charset,
)
from literal_sanitizer.sanitization.errors import (
    InvalidCharsetError,
    InvalidReplacementError,
    InvalidTrimModeError,
    UnsanitizableError,
)
from literal_sanitizer.sanitization.trim import TrimMode, apply_trim


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text

    # repr switches to exponent form below 1e-4; plain decimals go down to 1e-6
    mantissa, exponent = text.split("e")
    exponent = int(exponent)
    if -7 < exponent < 0:
        sign = "-" if mantissa.startswith("-") else ""
        digits = mantissa.lstrip("-").replace(".", "")
        return f"{sign}0.{'0' * (-exponent - 1)}{digits}"
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def stringify(value: Any) -> str:
    """
    Convert a non-string value to its canonical text form.

    Booleans render as "true"/"false". Floats use JavaScript number text:
    integral floats drop the ".0" (3.0 and 3 both become "3"), non-finite
    values become "NaN", "Infinity" and "-Infinity", and exponents carry no
    zero padding ("1e-7", "1e+21"). Everything else goes through str().
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_text(value)
    return str(value)



def _parse_charset_logged(charset: str) -> ParsedCharset:
    try:
        return parse_charset(charset)
    except InvalidCharsetError as e:
        debug_log(f"[SANITIZER] Rejected charset: {e}")
        raise


def _validate_replacement(replacement: Any) -> str:
    if not isinstance(replacement, str) or len(replacement) != 1:
        debug_log(f"[SANITIZER] Rejected replacement {replacement!r}")
        raise InvalidReplacementError(replacement)
    return replacement


def _coerce_trim_mode(trim_mode: Any) -> TrimMode:
    try:
        return TrimMode.coerce(trim_mode)
    except InvalidTrimModeError:
        debug_log(f"[SANITIZER] Rejected trim mode {trim_mode!r}")
        raise


def _normalize_case(text: str, parsed: ParsedCharset) -> str:
    policy = parsed.case_policy()
    if policy == "lower":
        return text.lower()
    if policy == "upper":
        return text.upper()
    return text


def _sanitize_text(
    text: str,
    parsed: ParsedCharset,
    replacement: str,
    valid: re.Pattern,
    invalid: re.Pattern,
    trim_mode: Any,
    stats: dict | None = None,
) -> str:
    """
    Run the fast path, case, trim, replace and empty-result steps on `text`.

    `trim_mode` is coerced here rather than up front, so already-valid text
    never trips over an unknown trim mode.
    """
    original = text

    if invalid.search(text) is None and not text.startswith(replacement):
        if stats is not None:
            stats["fast_path"] = True
            stats["steps"].append("fast path: already valid")
    else:
        cased = _normalize_case(text, parsed)
        mode = _coerce_trim_mode(trim_mode)
        trimmed = apply_trim(cased, valid, mode)
        text, replaced = invalid.subn(replacement, trimmed)

        if stats is not None:
            stats["case_changed"] = cased != original
            stats["chars_trimmed"] = len(cased) - len(trimmed)
            stats["replaced"] = replaced
            stats["steps"].append(f"case: {parsed.case_policy()}")
            stats["steps"].append(f"trim {mode.value}: removed {stats['chars_trimmed']} chars")
            stats["steps"].append(f"replace: {replaced} chars -> {replacement!r}")

    if not text:
        debug_log(f"[SANITIZER] Nothing left of {original!r} with charset \"{parsed.spec}\"")
        raise UnsanitizableError(original)

    return text


def sanitize(
    value: Any,
    charset: str = DEFAULT_CHARSET,
    replacement: str = DEFAULT_REPLACEMENT,
    trim_mode: Any = DEFAULT_TRIM_MODE,
) -> Any:
    """
    Sanitize a value so it only contains characters from `charset`.

    Args:
        value: Value to sanitize. None is returned unchanged; anything else is
               stringified first.
        charset: Allowed characters. Literal chars plus the ranges "a-z",
                 "A-Z", "0-9" and "---" (a literal hyphen).
        replacement: Single character used in place of invalid characters.
                     It is never itself treated as invalid.
        trim_mode: "left" (default), "right", "both", "none" or None. Controls
                   which ends lose their invalid runs before replacement.

    Returns:
        None for None input, otherwise the sanitized, non-empty string.

    Raises:
        InvalidCharsetError: Charset has an unsupported range or is empty
        InvalidReplacementError: Replacement is not exactly one character
        InvalidTrimModeError: Trim mode is unknown (only checked when trimming
                              is needed)
        UnsanitizableError: Nothing of the value survived
    """
    if value is None:
        return value

    parsed = _parse_charset_logged(charset)
    _validate_replacement(replacement)
    text = stringify(value)
    valid, invalid = build_matchers(parsed, replacement)

    return _sanitize_text(text, parsed, replacement, valid, invalid, trim_mode)


# Historical export name
sanitize_literal = sanitize


class CharsetSanitizer:
    """
    A validated, reusable sanitizer configuration.

    The charset, replacement and trim mode are all checked once, at
    construction, so a bad configuration fails before any value is processed.
    Instances hold no per-call state and can be shared between threads.

    Example:
        slugify = CharsetSanitizer("a-z0-9", "-", "both", transliterate=True)
        slugify.sanitize("  Crème Brûlée!  ")   # 'creme-brulee'
    """

    def __init__(
        self,
        charset: str = DEFAULT_CHARSET,
        replacement: str = DEFAULT_REPLACEMENT,
        trim_mode: Any = DEFAULT_TRIM_MODE,
        fix_encoding: bool = False,
        transliterate: bool = False,
    ):
        """
        Initialize the sanitizer.

        Args:
            charset: Allowed characters (see sanitize())
            replacement: Single replacement character
            trim_mode: TrimMode, its string value, or None for no trimming
            fix_encoding: If True, repair mojibake with ftfy before sanitizing
            transliterate: If True, convert accented chars (é/ñ) to ASCII
                           equivalents with unidecode before sanitizing
        """
        self.parsed = _parse_charset_logged(charset)
        self.replacement = _validate_replacement(replacement)
        self.trim_mode = _coerce_trim_mode(trim_mode)
        self.fix_encoding = fix_encoding
        self.transliterate = transliterate
        self._valid, self._invalid = build_matchers(self.parsed, self.replacement)

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "CharsetSanitizer":
        """
        Build a sanitizer from a named preset in data/presets.yaml.

        Args:
            name: Preset name (e.g. 'slug')
            **overrides: Constructor arguments that replace the preset's values

        Raises:
            KeyError: If the preset does not exist
        """
        settings = get_preset(name)
        settings.update(overrides)
        debug_log(f"[SANITIZER] Using preset '{name}': {settings}")
        return cls(**settings)

    @property
    def charset(self) -> str:
        return self.parsed.spec

    def _prepare(self, text: str, stats: dict | None) -> str:
        if self.fix_encoding:
            fixed = ftfy.fix_text(text)
            if stats is not None and fixed != text:
                stats["steps"].append("fixed text encoding")
            text = fixed
        if self.transliterate:
            folded = unidecode(text)
            if stats is not None and folded != text:
                stats["steps"].append("transliterated to ASCII")
            text = folded
        return text

    def _run(self, value: Any, stats: dict | None) -> Any:
        if value is None:
            return value
        text = self._prepare(stringify(value), stats)
        return _sanitize_text(
            text, self.parsed, self.replacement,
            self._valid, self._invalid, self.trim_mode, stats,
        )

    def sanitize(self, value: Any) -> Any:
        """Sanitize one value with this configuration (None passes through)."""
        return self._run(value, None)

    def sanitize_with_stats(self, value: Any) -> tuple[Any, dict]:
        """
        Sanitize a value and report what was done.

        Returns:
            (result, stats_dict) where stats_dict contains:
            - fast_path: True if the value was already valid
            - case_changed: True if case normalization altered the text
            - chars_trimmed: Count of characters removed by trimming
            - replaced: Count of characters substituted with the replacement
            - steps: Human-readable list of the actions taken
        """
        stats = {
            "fast_path": False,
            "case_changed": False,
            "chars_trimmed": 0,
            "replaced": 0,
            "steps": [],
        }
        if value is None:
            stats["steps"].append("passthrough: None")
        return self._run(value, stats), stats

    def sanitize_many(self, values: Iterable[Any]) -> list:
        """
        Sanitize a batch of values, stopping at the first error.

        Raises:
            UnsanitizableError: For the first value with nothing left
        """
        with Timer(f"[SANITIZER] Batch sanitize (charset \"{self.charset}\")"):
            return [self._run(value, None) for value in values]

    def __call__(self, value: Any) -> Any:
        return self.sanitize(value)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(charset={self.charset!r}, "
                f"replacement={self.replacement!r}, trim_mode={self.trim_mode.value!r})")
