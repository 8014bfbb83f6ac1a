"""
Causal error trees and their rendering.
"""

from detailed_errors.tree.display import UNEXPLAINED_ERROR_TEXT, DisplayInfo
from detailed_errors.tree.error import DetailedError
from detailed_errors.tree.explanation import ErrorDetail, ErrorExplanation
from detailed_errors.tree.renderer import ErrorTreeRenderer, render, render_text

__all__ = [
    "DetailedError",
    "ErrorDetail",
    "ErrorExplanation",
    "DisplayInfo",
    "UNEXPLAINED_ERROR_TEXT",
    "ErrorTreeRenderer",
    "render",
    "render_text",
]
