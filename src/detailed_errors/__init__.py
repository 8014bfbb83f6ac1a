"""
detailed-errors - Hierarchical, human-readable error explanations.

Errors carry an explanation, a solution, a highlighted location in the
source they refer to, and the errors that caused them. Rendering walks the
causal tree and prints every explained error, simplest causes first, with
the location styled for the terminal.
"""

from detailed_errors.config import ColorMode, RenderConfig, colorization
from detailed_errors.styling import (
    Attribute,
    Color,
    RangeStyler,
    SourceSpan,
    SourceText,
    Style,
    apply_styles,
    join_styles,
    paint,
)
from detailed_errors.tree import (
    DetailedError,
    DisplayInfo,
    ErrorDetail,
    ErrorExplanation,
    ErrorTreeRenderer,
    render,
    render_text,
)
from detailed_errors.utils.errors import DetailedErrorsError, SpanError, StyleError

__version__ = "0.1.0"
__all__ = [
    # Errors and trees
    "DetailedError",
    "ErrorDetail",
    "ErrorExplanation",
    "DisplayInfo",
    "ErrorTreeRenderer",
    "render",
    "render_text",
    # Styling
    "SourceText",
    "SourceSpan",
    "Color",
    "Attribute",
    "Style",
    "join_styles",
    "paint",
    "RangeStyler",
    "apply_styles",
    # Configuration
    "ColorMode",
    "RenderConfig",
    "colorization",
    # Exceptions
    "DetailedErrorsError",
    "StyleError",
    "SpanError",
]
