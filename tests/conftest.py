"""
Pytest configuration and shared fixtures for detailed-errors tests.
"""

import re
from dataclasses import dataclass
from typing import Optional

import pytest

from detailed_errors import DetailedError, ErrorDetail, ErrorExplanation, SourceText

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove terminal escape codes from text."""
    return ANSI_ESCAPE.sub("", text)


@dataclass(frozen=True)
class Explained(ErrorDetail):
    """Error detail with a fixed reason and solution, for building test trees."""

    reason: Optional[str] = None
    solution: Optional[str] = None

    def explain(self) -> ErrorExplanation:
        return ErrorExplanation(self.reason, self.solution)


class FailingDetail(ErrorDetail):
    """Error detail whose explain() blows up."""

    def explain(self) -> ErrorExplanation:
        raise RuntimeError("explain exploded")


@pytest.fixture
def strip():
    """Fixture returning the ANSI stripping helper."""
    return strip_ansi


@pytest.fixture
def source_factory():
    """Factory fixture for creating source texts."""

    def _create_source(text: str, name: str = "test.src") -> SourceText:
        return SourceText(text, name)

    return _create_source


@pytest.fixture
def explained_error():
    """Factory fixture for errors with a reason and optional extras."""

    def _create_error(
        reason: Optional[str] = "boom",
        solution: Optional[str] = None,
        causes: tuple = (),
    ) -> DetailedError:
        return DetailedError(Explained(reason, solution), causes=causes)

    return _create_error


@pytest.fixture
def failing_detail():
    """An error detail that raises from explain()."""
    return FailingDetail()


@pytest.fixture
def empty_error():
    """Factory fixture for errors with nothing to show."""

    def _create_error(causes: tuple = ()) -> DetailedError:
        return DetailedError(causes=causes)

    return _create_error
