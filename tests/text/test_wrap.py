"""
Unit tests for the greedy line-wrap primitive.

Widths use len() so one character is one point.
"""

import math

import pytest

from flexpdf.text.wrap import break_text_into_lines


class TestBreakTextIntoLines:

    def test_wrap_when_each_word_fits_alone_only_then_one_line_per_word(self):
        lines = break_text_into_lines("aaaa bbbb cccc", 5, len)

        assert lines == ["aaaa", "bbbb", "cccc"]

    def test_wrap_when_everything_fits_then_single_line(self):
        assert break_text_into_lines("a b c", 100, len) == ["a b c"]

    def test_wrap_when_exact_fit_including_space_then_same_line(self):
        assert break_text_into_lines("aa bb", 5, len) == ["aa bb"]

    def test_wrap_when_word_wider_than_limit_then_own_line(self):
        lines = break_text_into_lines("tiny enormousword tiny", 6, len)

        assert lines == ["tiny", "enormousword", "tiny"]

    def test_wrap_when_explicit_newlines_then_always_break(self):
        assert break_text_into_lines("one\ntwo", math.inf, len) == ["one", "two"]

    def test_wrap_when_blank_paragraph_then_empty_line_kept(self):
        assert break_text_into_lines("a\n\nb", math.inf, len) == ["a", "", "b"]

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_wrap_when_empty_then_single_empty_line(self, text):
        assert break_text_into_lines(text, 10, len) == [""]

    def test_wrap_when_repeated_whitespace_then_collapsed(self):
        assert break_text_into_lines("a   b\tc", 100, len) == ["a b c"]

    def test_wrap_when_rewrapped_at_measured_width_then_unchanged(self):
        # Arrange: fractional widths that do not sum exactly in floating point
        def width_of(value):
            return len(value) * 0.1

        first = break_text_into_lines("abc def ghi jkl", 0.75, width_of)
        widest = max(width_of(line) for line in first)

        # Act
        second = break_text_into_lines("abc def ghi jkl", widest, width_of)

        # Assert
        assert second == first
