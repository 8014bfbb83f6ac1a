"""
Error types raised when the detailed-errors building API is misused.

Rendering itself never raises; these only surface while styles, spans and
error trees are being put together.
"""

from typing import Optional


class DetailedErrorsError(Exception):
    """Base exception for all detailed-errors building failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class StyleError(DetailedErrorsError, ValueError):
    """Raised when a style names an unknown color or attribute."""

    def __init__(self, message: str, value: object = None) -> None:
        self.value = value
        super().__init__(message)

    def _format_message(self) -> str:
        if self.value is None:
            return self.message
        return f"{self.message}: {self.value!r}"


class SpanError(DetailedErrorsError, ValueError):
    """
    Raised when a span cannot be taken from a source text.

    This error is raised when:
    - The offsets fall outside the source text
    - The end offset comes before the start offset
    - A slice with a step other than 1 is requested
    """

    def __init__(
        self,
        message: str,
        source_name: Optional[str] = None,
        offsets: Optional[tuple[int, int]] = None,
    ) -> None:
        """
        Initialize the error.

        Args:
            message: Error message
            source_name: Display name of the source text, if known
            offsets: The rejected (start, end) offsets
        """
        self.source_name = source_name
        self.offsets = offsets
        super().__init__(message)

    def _format_message(self) -> str:
        parts = []

        if self.source_name:
            parts.append(f"[{self.source_name}]")

        parts.append(self.message)

        if self.offsets is not None:
            start, end = self.offsets
            parts.append(f"(offsets {start}..{end})")

        return " ".join(parts)
