"""Unit tests for ErrorExplanation and the ErrorDetail base class."""

import pytest

from detailed_errors.styling.source import SourceText
from detailed_errors.styling.style import Color, Style
from detailed_errors.tree.error import DetailedError
from detailed_errors.tree.explanation import ErrorDetail, ErrorExplanation


class TestErrorExplanation:
    """Tests for ErrorExplanation."""

    def test_text_is_trimmed(self):
        explanation = ErrorExplanation("  the reason \n", "  ")
        assert explanation.explanation == "the reason"
        assert explanation.solution is None

    def test_defaults(self):
        explanation = ErrorExplanation()
        assert explanation.explanation is None
        assert explanation.solution is None
        assert explanation.whole_style is None
        assert explanation.markers == []

    def test_explains_itself(self):
        explanation = ErrorExplanation("reason")
        assert explanation.explain() is explanation

    def test_builder(self):
        source = SourceText("if a==1")
        red = Style(Color.RED)
        blue = Style(Color.BLUE)
        explanation = (
            ErrorExplanation()
            .with_explanation(" reason ")
            .with_solution("solution")
            .with_whole_style(blue)
            .mark(source[3:4], red)
            .mark_all([(source[4:6], blue)])
        )
        assert explanation.explanation == "reason"
        assert explanation.solution == "solution"
        assert explanation.whole_style == blue
        assert explanation.markers == [(source[3:4], red), (source[4:6], blue)]

    def test_blank_text_clears(self):
        explanation = ErrorExplanation("reason", "solution")
        explanation.with_explanation("   ").with_solution(None)
        assert explanation.explanation is None
        assert explanation.solution is None

    def test_markers_are_copied(self):
        source = SourceText("abc")
        markers = ((source[0:1], Style(Color.RED)),)
        explanation = ErrorExplanation(markers=markers)
        explanation.mark(source[1:2], Style(Color.BLUE))
        assert len(markers) == 1
        assert len(explanation.markers) == 2


class TestErrorDetail:
    """Tests for the ErrorDetail convenience methods."""

    def test_explain_is_abstract(self):
        class Incomplete(ErrorDetail):
            pass

        with pytest.raises(TypeError):
            Incomplete()

    def test_to_error(self):
        detail = ErrorExplanation("reason")
        error = detail.to_error()
        assert isinstance(error, DetailedError)
        assert error.detail is detail

    def test_fluent_wrapping(self):
        source = SourceText("if a==1")
        cause = ErrorExplanation("cause")
        error = ErrorExplanation("reason").at(source.whole).start_point(1, 1)
        assert error.location == source.whole
        assert error.start == (1, 1)

        error = ErrorExplanation("reason").with_cause(cause)
        assert error.causes[0].detail is cause

        error = ErrorExplanation("reason").end_point(2, 3)
        assert error.end == (2, 3)

    def test_display_info(self):
        info = ErrorExplanation("reason", "solution").display_info(colorize=False)
        assert info.to_text() == "Error: reason\nSolution: solution"
