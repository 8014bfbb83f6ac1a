"""
Styling of source locations.

Spans with provenance, partial text styles and the range styler that
applies overlapping styles to one string.
"""

from detailed_errors.styling.highlighter import Marker, RangeStyler, Segment, apply_styles
from detailed_errors.styling.source import SourceSpan, SourceText
from detailed_errors.styling.style import (
    ATTRIBUTE_ORDER,
    Attribute,
    Color,
    Style,
    join_styles,
    paint,
)

__all__ = [
    "SourceText",
    "SourceSpan",
    "Color",
    "Attribute",
    "ATTRIBUTE_ORDER",
    "Style",
    "join_styles",
    "paint",
    "Marker",
    "Segment",
    "RangeStyler",
    "apply_styles",
]
