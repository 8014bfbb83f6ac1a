"""
Detailed errors: explainable errors arranged in causal trees.

A :class:`DetailedError` wraps an application error detail (anything with
an ``explain()`` method) together with where it happened and the errors
that caused it. Trees are built bottom-up, leaves first:

    source = SourceText("if a==1")
    undefined = UndefinedVariable(source[3:4]).at(source.whole)
    error = NotABoolean(source[3:7]).at(source.whole).with_cause(undefined)
    print(error)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Optional, Union

from detailed_errors.styling.source import SourceSpan

if TYPE_CHECKING:
    from detailed_errors.tree.display import DisplayInfo
    from detailed_errors.tree.explanation import ErrorDetail


class DetailedError(Exception):
    """
    An error with an explanation, a location and its causes.

    Converting it to a string renders the whole causal tree.

    Attributes:
        detail: The application error explaining this one, if any
        location: The text where the error happened
        start: 1-indexed (line, column) where the error starts
        end: 1-indexed (line, column) where the error ends
        causes: The errors that caused this one
    """

    def __init__(
        self,
        detail: Optional[ErrorDetail] = None,
        *,
        at: Union[str, SourceSpan, None] = None,
        start: Optional[tuple[int, int]] = None,
        end: Optional[tuple[int, int]] = None,
        causes: Iterable[object] = (),
    ) -> None:
        super().__init__()
        self._detail: Optional[ErrorDetail] = None
        self._location: Optional[SourceSpan] = None
        self._start: Optional[tuple[int, int]] = None
        self._end: Optional[tuple[int, int]] = None
        self._causes: list[DetailedError] = []
        self._parents: list[DetailedError] = []

        if detail is not None:
            self.with_detail(detail)
        if at is not None:
            self.at(at)
        if start is not None:
            self.start_point(*start)
        if end is not None:
            self.end_point(*end)
        for cause in causes:
            self.add_cause(cause)

    @classmethod
    def coerce(cls, value: object) -> DetailedError:
        """Return ``value`` as a DetailedError, wrapping explainable objects."""
        if isinstance(value, DetailedError):
            return value
        if callable(getattr(value, "explain", None)):
            return cls(value)
        raise TypeError(
            f"expected a DetailedError or an object with explain(), got {type(value).__name__}"
        )

    @property
    def detail(self) -> Optional[ErrorDetail]:
        return self._detail

    @property
    def location(self) -> Optional[SourceSpan]:
        return self._location

    @property
    def start(self) -> Optional[tuple[int, int]]:
        return self._start

    @property
    def end(self) -> Optional[tuple[int, int]]:
        return self._end

    @property
    def causes(self) -> tuple[DetailedError, ...]:
        return tuple(self._causes)

    # -------------------------------------------------------------------------
    # Builder
    # -------------------------------------------------------------------------

    def with_detail(self, detail: ErrorDetail) -> DetailedError:
        """Set the application error that explains this one."""
        if not callable(getattr(detail, "explain", None)):
            raise TypeError(f"{type(detail).__name__} has no explain() method")
        self._detail = detail
        return self

    def at(self, location: Union[str, SourceSpan]) -> DetailedError:
        """
        Set where the error happened.

        Markers of the explanation only apply when they were sliced from
        the same SourceText as this location; a plain str gets a SourceText
        of its own.
        """
        if isinstance(location, str):
            location = SourceSpan.of(location)
        if not isinstance(location, SourceSpan):
            raise TypeError(f"locations are str or SourceSpan, not {type(location).__name__}")
        self._location = location
        return self

    def start_point(self, line: int, column: int) -> DetailedError:
        self._start = (line, column)
        return self

    def end_point(self, line: int, column: int) -> DetailedError:
        self._end = (line, column)
        return self

    def with_cause(self, cause: object) -> DetailedError:
        self.add_cause(cause)
        return self

    def add_cause(self, cause: object) -> None:
        """
        Append a cause.

        Raises:
            TypeError: If the cause is neither a DetailedError nor explainable
            ValueError: If the cause is this error or one of its ancestors
        """
        cause = DetailedError.coerce(cause)
        if cause is self or any(node is cause for node in self._ancestors()):
            raise ValueError("an error cannot be a cause of itself")
        self._causes.append(cause)
        cause._parents.append(self)

    def without_causes(self) -> DetailedError:
        """A copy of this error with no causes."""
        copy = DetailedError(self._detail)
        copy._location = self._location
        copy._start = self._start
        copy._end = self._end
        return copy

    # -------------------------------------------------------------------------
    # Tree queries
    # -------------------------------------------------------------------------

    def _ancestors(self) -> Iterator[DetailedError]:
        """Every error this one is a cause of, directly or not."""
        seen: set[int] = set()
        stack = list(self._parents)
        while stack:
            node = stack.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            yield node
            stack.extend(node._parents)

    def walk(self) -> Iterator[DetailedError]:
        """Every error of the tree, depth-first, this one first."""
        stack: list[DetailedError] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._causes))

    def leaf_errors(self) -> list[DetailedError]:
        """The errors of the tree that have no causes, depth-first."""
        return [node for node in self.walk() if not node._causes]

    def _paths(self) -> Iterator[list[DetailedError]]:
        """Every path from this error down to a leaf, depth-first."""
        path: list[DetailedError] = []
        stack: list[tuple[DetailedError, int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            del path[depth:]
            path.append(node)
            if not node._causes:
                yield list(path)
            else:
                stack.extend((cause, depth + 1) for cause in reversed(node._causes))

    def inverted_error_tree(self) -> list[DetailedError]:
        """
        Turn the tree upside down, one chain per leaf.

        Each chain starts at a leaf error, whose only cause is its parent,
        whose only cause is the grandparent, and so on up to this error.
        The nodes are copies; this tree is left untouched.
        """
        inverted = []
        for path in self._paths():
            chain: Optional[DetailedError] = None
            for node in path:
                link = node.without_causes()
                if chain is not None:
                    link.add_cause(chain)
                chain = link
            inverted.append(chain)
        return inverted

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def display_info(self, colorize: Optional[bool] = None) -> DisplayInfo:
        """Render this error tree into a DisplayInfo snapshot."""
        from detailed_errors.tree.renderer import render

        return render(self, colorize)

    def to_text(self, colorize: Optional[bool] = None) -> str:
        return self.display_info(colorize).to_text()

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        location = self._location.text if self._location is not None else None
        return (
            f"DetailedError(detail={self._detail!r}, at={location!r}, "
            f"causes={len(self._causes)})"
        )
