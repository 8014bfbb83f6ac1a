"""
Explanations supplied by application error types.

Application errors describe themselves by implementing
:meth:`ErrorDetail.explain`, returning an :class:`ErrorExplanation` with the
reason, an optional solution and the styling of the error's location.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

from detailed_errors.styling.highlighter import Marker
from detailed_errors.styling.source import SourceSpan
from detailed_errors.styling.style import Style

if TYPE_CHECKING:
    from detailed_errors.tree.display import DisplayInfo
    from detailed_errors.tree.error import DetailedError


def _clean_text(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    text = str(text).strip()
    return text or None


class ErrorDetail(ABC):
    """
    Base class for application errors that can explain themselves.

    Subclasses implement :meth:`explain`; the remaining methods wrap the
    detail into a :class:`DetailedError` so trees can be built fluently:

        UndefinedVariable("x").at(source.whole).with_cause(other)
    """

    @abstractmethod
    def explain(self) -> ErrorExplanation:
        """Describe this error."""

    def to_error(self) -> DetailedError:
        """Wrap this detail into a DetailedError."""
        from detailed_errors.tree.error import DetailedError

        return DetailedError(self)

    def at(self, location: Union[str, SourceSpan]) -> DetailedError:
        return self.to_error().at(location)

    def start_point(self, line: int, column: int) -> DetailedError:
        return self.to_error().start_point(line, column)

    def end_point(self, line: int, column: int) -> DetailedError:
        return self.to_error().end_point(line, column)

    def with_cause(self, cause: object) -> DetailedError:
        return self.to_error().with_cause(cause)

    def display_info(self, colorize: Optional[bool] = None) -> DisplayInfo:
        return self.to_error().display_info(colorize)


@dataclass
class ErrorExplanation(ErrorDetail):
    """
    What went wrong, how to fix it, and how to highlight where.

    Attributes:
        explanation: Why the error happened
        solution: How to solve it
        whole_style: Style for the whole location text
        markers: (span, style) pairs highlighting parts of the location; spans
            must be sliced from the same SourceText as the location
    """

    explanation: Optional[str] = None
    solution: Optional[str] = None
    whole_style: Optional[Style] = None
    markers: list[Marker] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.explanation = _clean_text(self.explanation)
        self.solution = _clean_text(self.solution)
        self.markers = list(self.markers)

    def explain(self) -> ErrorExplanation:
        return self

    def with_explanation(self, explanation: Optional[str]) -> ErrorExplanation:
        """Set the explanation; blank text clears it."""
        self.explanation = _clean_text(explanation)
        return self

    def with_solution(self, solution: Optional[str]) -> ErrorExplanation:
        """Set the solution; blank text clears it."""
        self.solution = _clean_text(solution)
        return self

    def with_whole_style(self, style: Optional[Style]) -> ErrorExplanation:
        self.whole_style = style
        return self

    def mark(self, span: SourceSpan, style: Style) -> ErrorExplanation:
        """Highlight part of the location."""
        self.markers.append((span, style))
        return self

    def mark_all(self, markers: Iterable[Marker]) -> ErrorExplanation:
        self.markers.extend(markers)
        return self
