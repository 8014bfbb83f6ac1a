"""
Range styling: applying overlapping styles to parts of one string.

Markers may overlap or nest in any way. The base string is cut at every
marker edge into elementary segments, each segment gets the merge of every
marker covering it (in the order the markers were given), and the segments
are styled independently and glued back together.

Example:
    source = SourceText("if x > 0")
    styler = RangeStyler(source.whole, whole_style=Style(Color.BLUE))
    styler.mark(source[3:4], Style(Color.RED, attributes={Attribute.BOLD}))
    print(styler.apply(colorize=True))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional, Union

from detailed_errors.styling.source import SourceSpan
from detailed_errors.styling.style import Style

logger = logging.getLogger("detailed-errors")

Marker = tuple[SourceSpan, Style]


@dataclass(frozen=True, slots=True)
class Segment:
    """
    A maximal stretch of the base string with one merged style.

    Attributes:
        start: Offset relative to the base string
        end: Exclusive end offset relative to the base string
        style: The merged style of every marker covering the segment
    """

    start: int
    end: int
    style: Style


def _as_span(base: Union[str, SourceSpan]) -> SourceSpan:
    if isinstance(base, SourceSpan):
        return base
    return SourceSpan.of(base)


class RangeStyler:
    """
    Collects style markers for one base span and renders the styled text.

    Only markers sliced from the same SourceText as the base, and lying
    within the base span, take effect. Others are dropped without error,
    since spans often come from unrelated slicing.
    """

    def __init__(
        self,
        base: Union[str, SourceSpan],
        whole_style: Optional[Style] = None,
        markers: Iterable[Marker] = (),
    ) -> None:
        """
        Initialize the styler.

        Args:
            base: The text to style; a plain str gets its own SourceText
            whole_style: Style for the whole base, overridden by every marker
            markers: Initial (span, style) markers, in priority order
        """
        self.base = _as_span(base)
        self.whole_style = whole_style
        self._markers: list[Marker] = []
        self.mark_all(markers)

    @property
    def markers(self) -> list[Marker]:
        return list(self._markers)

    def mark(self, span: SourceSpan, style: Style) -> "RangeStyler":
        """Add a marker; later markers win over earlier ones."""
        self._markers.append((span, style))
        return self

    def mark_all(self, markers: Iterable[Marker]) -> "RangeStyler":
        """Add several markers in order."""
        for span, style in markers:
            self.mark(span, style)
        return self

    def _resolved_markers(self) -> list[tuple[int, int, Style]]:
        """Markers that apply to the base, as base-relative offsets."""
        resolved: list[tuple[int, int, Style]] = []

        if self.whole_style is not None:
            resolved.append((0, len(self.base), self.whole_style))

        for span, style in self._markers:
            offsets = span.relative_to(self.base) if isinstance(span, SourceSpan) else None
            if offsets is None:
                logger.debug("Discarding marker %r: not inside %r", span, self.base)
                continue
            resolved.append((offsets[0], offsets[1], style))

        # Zero-length markers cover no text
        return [(start, end, style) for start, end, style in resolved if end > start]

    def segments(self) -> list[Segment]:
        """
        Cut the base into elementary segments.

        The segments cover the base exactly, without gaps or overlaps, and
        no marker edge falls strictly inside a segment.
        """
        length = len(self.base)
        if length == 0:
            return []

        resolved = self._resolved_markers()
        bounds = sorted({0, length, *(edge for start, end, _ in resolved for edge in (start, end))})

        segments = []
        for start, end in zip(bounds, bounds[1:]):
            style = Style()
            for marker_start, marker_end, marker_style in resolved:
                if marker_start <= start and end <= marker_end:
                    style = style.join(marker_style)
            segments.append(Segment(start, end, style))

        logger.debug(
            "Split %d characters into %d segments from %d markers",
            length,
            len(segments),
            len(resolved),
        )
        return segments

    def apply(self, colorize: Optional[bool] = None) -> str:
        """
        Render the base text with every applicable marker.

        Args:
            colorize: Force (True) or suppress (False) escape codes; None
                defers to the active override, then to termcolor

        Returns:
            The styled text
        """
        text = self.base.text
        if self.whole_style is None and not self._markers:
            return text

        return "".join(
            segment.style.apply(text[segment.start : segment.end], colorize)
            for segment in self.segments()
        )


def apply_styles(
    base: Union[str, SourceSpan],
    whole_style: Optional[Style] = None,
    markers: Iterable[Marker] = (),
    colorize: Optional[bool] = None,
) -> str:
    """
    Convenience function to style a base text with markers.

    Args:
        base: The text to style
        whole_style: Lowest-priority style covering the whole base
        markers: (span, style) pairs, later ones winning on overlaps
        colorize: Force or suppress escape codes (None: automatic)

    Returns:
        The styled text
    """
    return RangeStyler(base, whole_style, markers).apply(colorize)
