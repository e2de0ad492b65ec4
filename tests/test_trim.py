"""
Tests for trim modes and the trim operations.
"""

import re

import pytest

from literal_sanitizer.sanitization.errors import InvalidTrimModeError
from literal_sanitizer.sanitization.trim import TrimMode, apply_trim, trim_left, trim_right

VALID = re.compile("[a-z]")


class TestTrimMode:
    """Test coercion of user-supplied trim modes."""

    @pytest.mark.parametrize("value, expected", [
        ("none", TrimMode.NONE),
        ("left", TrimMode.LEFT),
        ("right", TrimMode.RIGHT),
        ("both", TrimMode.BOTH),
        (None, TrimMode.NONE),
        (TrimMode.BOTH, TrimMode.BOTH),
    ])
    def test_coerce_accepted_values(self, value, expected):
        assert TrimMode.coerce(value) is expected

    @pytest.mark.parametrize("value", ["LEFT", "middle", "", 1, ["left"]])
    def test_coerce_rejects_unknown(self, value):
        with pytest.raises(InvalidTrimModeError) as exc_info:
            TrimMode.coerce(value)
        assert exc_info.value.trim_mode == value

    def test_members_compare_to_strings(self):
        assert TrimMode.LEFT == "left"


class TestTrimOperations:
    """Test trim_left / trim_right in isolation."""

    def test_trim_left(self):
        assert trim_left("  ab  ", VALID) == "ab  "

    def test_trim_right(self):
        assert trim_right("  ab  ", VALID) == "  ab"

    def test_nothing_to_trim(self):
        assert trim_left("ab", VALID) == "ab"
        assert trim_right("ab", VALID) == "ab"

    def test_no_valid_char_removes_everything(self):
        assert trim_left("!!!", VALID) == ""
        assert trim_right("!!!", VALID) == ""

    def test_inner_invalid_chars_kept(self):
        assert trim_left("..a.b..", VALID) == "a.b.."
        assert trim_right("..a.b..", VALID) == "..a.b"

    def test_empty_string(self):
        assert trim_left("", VALID) == ""
        assert trim_right("", VALID) == ""


class TestApplyTrim:
    """Test trim mode dispatch."""

    def test_both_trims_each_end(self):
        assert apply_trim("--a-b--", VALID, TrimMode.BOTH) == "a-b"

    def test_none_leaves_text(self):
        assert apply_trim("--a-b--", VALID, TrimMode.NONE) == "--a-b--"

    def test_left_and_right(self):
        assert apply_trim("--a-b--", VALID, TrimMode.LEFT) == "a-b--"
        assert apply_trim("--a-b--", VALID, TrimMode.RIGHT) == "--a-b"

    def test_both_on_all_invalid(self):
        assert apply_trim("----", VALID, TrimMode.BOTH) == ""
