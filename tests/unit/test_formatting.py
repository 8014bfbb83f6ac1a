"""Tests for the text formatting helpers."""

import pytest

from detailed_errors.utils.formatting import (
    indent_continuation_lines,
    join_nonempty,
    pluralize,
    split_lines,
)


class TestPluralize:
    """Tests for pluralize."""

    @pytest.mark.parametrize(
        "count,expected",
        [
            (0, ""),
            (1, "1 cause"),
            (2, "2 causes"),
            (17, "17 causes"),
        ],
    )
    def test_counts(self, count, expected):
        """Zero is empty, one is singular, more is plural."""
        assert pluralize(count, "cause") == expected

    def test_on_empty_text(self):
        """A custom text can stand in for zero."""
        assert pluralize(0, "cause", "no causes") == "no causes"

    def test_multi_word(self):
        """Only the last word gets the plural suffix."""
        assert pluralize(3, "explained cause") == "3 explained causes"


class TestJoinNonempty:
    """Tests for join_nonempty."""

    def test_skips_empty_strings(self):
        assert join_nonempty(" and ", ["", "1 cause", "", "2 causes"]) == "1 cause and 2 causes"

    def test_all_empty(self):
        assert join_nonempty(", ", ["", ""]) == ""

    def test_accepts_generators(self):
        assert join_nonempty("-", (s for s in "abc")) == "a-b-c"


class TestIndentContinuationLines:
    """Tests for indent_continuation_lines."""

    def test_first_line_untouched(self):
        assert indent_continuation_lines("Error: a\nb\nc", 7) == "Error: a\n       b\n       c"

    def test_single_line(self):
        assert indent_continuation_lines("Error: a", 7) == "Error: a"

    def test_blank_lines_are_indented(self):
        assert indent_continuation_lines("a\n\nb", 2) == "a\n  \n  b"

    def test_zero_width(self):
        assert indent_continuation_lines("a\nb", 0) == "a\nb"

    def test_empty_text(self):
        assert indent_continuation_lines("", 4) == ""

    def test_crlf_line_endings(self):
        assert indent_continuation_lines("a\r\nb", 2) == "a\n  b"

    def test_other_separators_stay_inline(self):
        """Test that only newlines start a new line."""
        text = "a\x0cb c\x1ed\re"
        assert indent_continuation_lines(text, 4) == text


class TestSplitLines:
    """Tests for split_lines."""

    def test_newlines(self):
        assert split_lines("a\nb\r\nc") == ["a", "b", "c"]

    def test_trailing_newline_keeps_empty_line(self):
        assert split_lines("a\n") == ["a", ""]

    def test_empty_text(self):
        assert split_lines("") == [""]

    def test_unicode_separators(self):
        assert split_lines("a\u2028b\x0bc") == ["a\u2028b\x0bc"]
