"""
Charset parsing.

A charset spec is a string of literal characters and range tokens. Only four
ranges are understood (see PARSEABLE_RANGES); every "X-Y" occurrence in a spec
must be one of them. "---" is the range from "-" to "-", i.e. a literal hyphen.
"""

import re
import string
from dataclasses import dataclass

from literal_sanitizer.sanitization.errors import InvalidCharsetError

PARSEABLE_RANGES = ("a-z", "A-Z", "0-9", "---")

_RANGE_EXPANSIONS = {
    "a-z": string.ascii_lowercase,
    "A-Z": string.ascii_uppercase,
    "0-9": string.digits,
    "---": "-",
}

# Any char, hyphen, any char. Matches are non-overlapping, scanned left to right.
_RANGE_TOKEN_RE = re.compile(r"(.)-(.)", re.DOTALL)

_ASCII_LOWER = frozenset(string.ascii_lowercase)
_ASCII_UPPER = frozenset(string.ascii_uppercase)

# Characters that change meaning inside a [...] class in Python's re module
_CLASS_SPECIALS = frozenset("]^\\-[&~|")


@dataclass(frozen=True)
class ParsedCharset:
    """
    The expanded set of characters denoted by a charset spec.

    Attributes:
        spec: The charset spec as given
        chars: Every allowed character, ranges expanded
    """
    spec: str
    chars: frozenset

    @property
    def has_lowercase(self) -> bool:
        return not self.chars.isdisjoint(_ASCII_LOWER)

    @property
    def has_uppercase(self) -> bool:
        return not self.chars.isdisjoint(_ASCII_UPPER)

    def case_policy(self) -> str:
        """
        Decide how input case is normalized for this charset.

        Returns:
            "lower" when the charset has no uppercase letters, "upper" when it
            has uppercase but no lowercase letters, "preserve" otherwise.
        """
        if not self.has_uppercase:
            return "lower"
        if not self.has_lowercase:
            return "upper"
        return "preserve"

    def __contains__(self, char: str) -> bool:
        return char in self.chars

    def __len__(self) -> int:
        return len(self.chars)


def find_range_tokens(spec: str) -> list[str]:
    """Return every "X-Y" occurrence in the spec, left to right."""
    return [match.group(0) for match in _RANGE_TOKEN_RE.finditer(spec)]


def validate_charset(spec: str) -> None:
    """
    Check that every range in the spec is supported.

    Raises:
        InvalidCharsetError: On the first unsupported range, or an empty spec.
    """
    if not isinstance(spec, str):
        raise InvalidCharsetError(repr(spec), reason="charset must be a string")
    if not spec:
        raise InvalidCharsetError(spec, reason="charset must not be empty")

    for token in find_range_tokens(spec):
        if token not in PARSEABLE_RANGES:
            raise InvalidCharsetError(spec, token)


def parse_charset(spec: str) -> ParsedCharset:
    """
    Validate a charset spec and expand it into individual characters.

    Args:
        spec: Charset spec such as "a-z0-9" or "acdeg0-9_"

    Returns:
        ParsedCharset with ranges expanded and literals kept

    Raises:
        InvalidCharsetError: If the spec has an unsupported range or is empty

    Example:
        >>> sorted(parse_charset("x0-2").chars)
        ['0', '1', '2', 'x']
    """
    validate_charset(spec)

    chars = set()
    i = 0
    while i < len(spec):
        # After validation, an "X-Y" here is always one of the supported ranges
        token = spec[i:i + 3]
        if token in _RANGE_EXPANSIONS:
            chars.update(_RANGE_EXPANSIONS[token])
            i += 3
        else:
            chars.add(spec[i])
            i += 1

    return ParsedCharset(spec=spec, chars=frozenset(chars))


def escape_for_class(chars) -> str:
    """
    Escape characters so they can be placed inside a regex character class.

    Args:
        chars: Iterable of single characters

    Returns:
        The characters concatenated in sorted order, specials backslash-escaped
    """
    return "".join(
        "\\" + char if char in _CLASS_SPECIALS else char
        for char in sorted(chars)
    )


def build_matchers(parsed: ParsedCharset, replacement: str) -> tuple[re.Pattern, re.Pattern]:
    """
    Compile the valid/invalid single-character matchers for a charset.

    Args:
        parsed: Parsed charset
        replacement: Replacement character, never matched as invalid

    Returns:
        (valid, invalid) compiled patterns. `valid` matches one charset char;
        `invalid` matches one char outside the charset that is not `replacement`.
    """
    escaped = escape_for_class(parsed.chars)
    excluded = escape_for_class(parsed.chars | {replacement})
    valid = re.compile(f"[{escaped}]")
    invalid = re.compile(f"[^{excluded}]")
    return valid, invalid
