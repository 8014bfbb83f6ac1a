"""
Source texts and the spans sliced from them.

A :class:`SourceSpan` remembers which :class:`SourceText` it was cut from.
Two spans can only be compared or nested when they share that text, which
is how markers pointing into unrelated strings are told apart from markers
pointing into the location being displayed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from detailed_errors.utils.errors import SpanError


def _resolve_key(key: Union[int, slice], length: int) -> tuple[int, int]:
    """Turn an index or slice into (start, end) offsets, str-style."""
    if isinstance(key, slice):
        if key.step not in (None, 1):
            raise SpanError("spans cannot be sliced with a step")
        start, end, _ = key.indices(length)
        return start, max(start, end)
    if isinstance(key, int):
        index = key + length if key < 0 else key
        if not 0 <= index < length:
            raise IndexError("span index out of range")
        return index, index + 1
    raise TypeError(f"span indices must be integers or slices, not {type(key).__name__}")


class SourceText:
    """
    A base string that spans can be taken from.

    Usage:
        source = SourceText("if a==1")
        variable = source[3:4]          # SourceSpan over "a"
        comparison = source.find("a==1")
    """

    __slots__ = ("text", "name")

    def __init__(self, text: str, name: str = "<input>") -> None:
        self.text = text
        self.name = name

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SourceText({self.text!r}, name={self.name!r})"

    def __getitem__(self, key: Union[int, slice]) -> SourceSpan:
        start, end = _resolve_key(key, len(self.text))
        return SourceSpan(self, start, end)

    @property
    def whole(self) -> SourceSpan:
        """A span covering the entire text."""
        return SourceSpan(self, 0, len(self.text))

    def span(self, start: int = 0, end: Optional[int] = None) -> SourceSpan:
        """
        Take the span between two offsets.

        Raises:
            SpanError: If the offsets are reversed or fall outside the text
        """
        if end is None:
            end = len(self.text)
        if not 0 <= start <= end <= len(self.text):
            raise SpanError("span does not fit in source", self.name, (start, end))
        return SourceSpan(self, start, end)

    def find(self, needle: str, start: int = 0) -> Optional[SourceSpan]:
        """Span of the first occurrence of ``needle`` at or after ``start``."""
        index = self.text.find(needle, start)
        if index < 0:
            return None
        return SourceSpan(self, index, index + len(needle))

    def line_and_column(self, offset: int) -> tuple[int, int]:
        """1-indexed (line, column) of an offset."""
        offset = max(0, min(offset, len(self.text)))
        line = self.text.count("\n", 0, offset) + 1
        line_start = self.text.rfind("\n", 0, offset) + 1
        return line, offset - line_start + 1


@dataclass(frozen=True, slots=True, repr=False)
class SourceSpan:
    """
    A half-open range [start, end) of a SourceText.

    Attributes:
        source: The text this span was taken from
        start: 0-indexed start offset into source
        end: 0-indexed end offset into source (exclusive)
    """

    source: SourceText
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.source):
            raise SpanError(
                "span does not fit in source", self.source.name, (self.start, self.end)
            )

    @classmethod
    def of(cls, text: str, name: str = "<input>") -> SourceSpan:
        """A span over a fresh SourceText holding ``text``."""
        return SourceText(text, name).whole

    @property
    def text(self) -> str:
        return self.source.text[self.start : self.end]

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    @property
    def start_point(self) -> tuple[int, int]:
        """1-indexed (line, column) where this span starts."""
        return self.source.line_and_column(self.start)

    @property
    def end_point(self) -> tuple[int, int]:
        """1-indexed (line, column) where this span ends."""
        return self.source.line_and_column(self.end)

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SourceSpan({self.text!r}, {self.start}..{self.end} of {self.source.name!r})"

    def __getitem__(self, key: Union[int, slice]) -> SourceSpan:
        start, end = _resolve_key(key, len(self))
        return SourceSpan(self.source, self.start + start, self.start + end)

    def find(self, needle: str, start: int = 0) -> Optional[SourceSpan]:
        """Span of the first occurrence of ``needle`` inside this span."""
        index = self.source.text.find(needle, self.start + max(0, start), self.end)
        if index < 0:
            return None
        return SourceSpan(self.source, index, index + len(needle))

    def contains(self, other: SourceSpan) -> bool:
        """Whether ``other`` comes from the same text and lies within this span."""
        return (
            other.source is self.source
            and self.start <= other.start
            and other.end <= self.end
        )

    def relative_to(self, base: SourceSpan) -> Optional[tuple[int, int]]:
        """
        Offsets of this span relative to ``base``.

        Returns None when this span was not taken from base's text or
        does not lie within base.
        """
        if not base.contains(self):
            return None
        return self.start - base.start, self.end - base.start
