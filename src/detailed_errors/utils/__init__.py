"""
detailed-errors Utilities Package.

Error types raised by the building API and text formatting helpers.
"""

from detailed_errors.utils.errors import (
    DetailedErrorsError,
    SpanError,
    StyleError,
)
from detailed_errors.utils.formatting import (
    indent_continuation_lines,
    join_nonempty,
    pluralize,
    split_lines,
)

__all__ = [
    # Errors
    "DetailedErrorsError",
    "StyleError",
    "SpanError",
    # Formatting
    "pluralize",
    "join_nonempty",
    "indent_continuation_lines",
    "split_lines",
]
