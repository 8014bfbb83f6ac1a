"""
Unit tests for DisplayInfo text layout and serialization.

Tests cover:
- Field order and labels
- The Has summary and the Cause/Causes block
- Indentation of multi-line content, at the top level and nested
- The unexplained error fallback
- Dict and JSON round trips
"""

import json

import pytest

from detailed_errors.tree.display import UNEXPLAINED_ERROR_TEXT, DisplayInfo


class TestFields:
    """Tests for the fields of a single node."""

    def test_at_and_error(self):
        info = DisplayInfo(at="if x > 0", reason="x doesn't exist")
        assert info.to_text() == "At: if x > 0\nError: x doesn't exist"

    def test_field_order(self):
        info = DisplayInfo(
            at="if a==1",
            reason="broken",
            solution="fix it",
            start=(1, 4),
            end=(1, 8),
        )
        assert info.to_text() == (
            "Position: On line 1 and column 4 up to line 1 and column 8\n"
            "At: if a==1\n"
            "Error: broken\n"
            "Solution: fix it"
        )

    def test_position_without_end(self):
        info = DisplayInfo(start=(3, 1), reason="r")
        assert info.to_text() == "Position: On line 3 and column 1\nError: r"

    def test_end_without_start_is_not_shown(self):
        assert DisplayInfo(reason="r", end=(1, 2)).to_text() == "Error: r"

    def test_error_defaults_to_unexplained(self):
        """Test that a node explained by other fields still gets an Error line."""
        info = DisplayInfo(solution="try again")
        assert info.to_text() == "Error: Unexplained error\nSolution: try again"

    def test_nothing_to_show_falls_back(self):
        info = DisplayInfo()
        assert not info.is_explained()
        assert info.to_text() == UNEXPLAINED_ERROR_TEXT == "Error: Unexplained error"

    def test_only_unexplained_causes_falls_back(self):
        info = DisplayInfo(unexplained_cause_count=3)
        assert not info.is_explained()
        assert info.to_text() == "Error: Unexplained error"

    def test_str_is_text(self):
        info = DisplayInfo(reason="r")
        assert str(info) == info.to_text()


class TestIndentation:
    """Tests for multi-line field content."""

    def test_error_aligns_under_label(self):
        info = DisplayInfo(reason="line one\nline two")
        assert info.to_text() == "Error: line one\n       line two"

    def test_solution_aligns_under_label(self):
        info = DisplayInfo(reason="r", solution="a\nb")
        assert info.to_text() == "Error: r\nSolution: a\n          b"

    def test_at_is_capped(self):
        """Test that location continuation lines indent by two only."""
        info = DisplayInfo(at="first\nsecond", reason="r")
        assert info.to_text() == "At: first\n  second\nError: r"

    def test_position_is_capped(self):
        info = DisplayInfo(start=(1, 1), reason="r")
        assert info.to_text().startswith("Position: On line 1 and column 1\n")

    def test_nested_fields(self):
        cause = DisplayInfo(at="a\nb", reason="x\ny")
        info = DisplayInfo(reason="r", explained_causes=(cause,))
        assert info.to_text() == (
            "Error: r\n"
            "Cause: \n"
            "  - At: a\n"
            "      b\n"
            "  - Error: x\n"
            "           y"
        )


class TestCauses:
    """Tests for the Has summary and the cause block."""

    def test_single_explained_cause(self):
        """Test that a lone explained cause gets no Has line."""
        info = DisplayInfo(reason="root", explained_causes=(DisplayInfo(reason="leaf"),))
        assert info.to_text() == "Error: root\nCause: \n  - Error: leaf"

    def test_tally(self):
        info = DisplayInfo(
            unexplained_cause_count=1,
            explained_causes=(DisplayInfo(reason="boom"),),
        )
        assert info.to_text() == (
            "Error: Unexplained error\n"
            "Has: 1 unexplained cause and 1 explained cause.\n"
            "Cause: \n"
            "  - Error: boom"
        )

    def test_only_unexplained_causes(self):
        info = DisplayInfo(reason="r", unexplained_cause_count=2)
        assert info.to_text() == "Error: r\nHas: 2 unexplained causes."

    def test_numbered_causes(self):
        info = DisplayInfo(
            reason="root",
            explained_causes=(
                DisplayInfo(reason="a"),
                DisplayInfo(reason="b", solution="s"),
            ),
        )
        assert info.to_text() == (
            "Error: root\n"
            "Has: 2 explained causes.\n"
            "Causes: \n"
            "  - Cause nº 1 -\n"
            "  - Error: a\n"
            "  \n"
            "  - Cause nº 2 -\n"
            "  - Error: b\n"
            "  - Solution: s"
        )

    def test_deep_nesting(self):
        leaf = DisplayInfo(reason="leaf")
        middle = DisplayInfo(reason="middle", explained_causes=(leaf,))
        root = DisplayInfo(reason="root", explained_causes=(middle,))
        assert root.to_text() == (
            "Error: root\n"
            "Cause: \n"
            "  - Error: middle\n"
            "  - Cause: \n"
            "      - Error: leaf"
        )

    def test_complexity(self):
        leaf = DisplayInfo(reason="leaf")
        middle = DisplayInfo(reason="middle", explained_causes=(leaf, leaf))
        root = DisplayInfo(reason="root", explained_causes=(middle, leaf))
        assert leaf.complexity() == 1
        assert middle.complexity() == 3
        assert root.complexity() == 5

    def test_explained_through_causes(self):
        info = DisplayInfo(explained_causes=(DisplayInfo(reason="leaf"),))
        assert info.is_explained()
        assert info.to_text() == "Error: Unexplained error\nCause: \n  - Error: leaf"


class TestSerialization:
    """Tests for dict and JSON conversion."""

    @pytest.fixture
    def info(self):
        return DisplayInfo(
            at="if a==1",
            reason="Déjà vu",
            start=(1, 4),
            end=(1, 8),
            unexplained_cause_count=1,
            explained_causes=(DisplayInfo(reason="leaf", solution="fix"),),
        )

    def test_to_dict(self, info):
        data = info.to_dict()
        assert data["at"] == "if a==1"
        assert data["start"] == [1, 4]
        assert data["end"] == [1, 8]
        assert data["unexplained_cause_count"] == 1
        assert data["explained_causes"][0]["solution"] == "fix"
        assert data["explained_causes"][0]["start"] is None

    def test_dict_round_trip(self, info):
        assert DisplayInfo.from_dict(info.to_dict()) == info

    def test_json_round_trip(self, info):
        text = info.to_json()
        assert "Déjà vu" in text
        restored = DisplayInfo.from_json(text)
        assert restored == info
        assert restored.to_text() == info.to_text()

    def test_json_kwargs(self, info):
        assert info.to_json(indent=2) == json.dumps(info.to_dict(), indent=2, ensure_ascii=False)

    def test_missing_keys_are_unset(self):
        info = DisplayInfo.from_dict({"reason": "r"})
        assert info == DisplayInfo(reason="r")
