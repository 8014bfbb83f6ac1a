"""
Rendering configuration for detailed-errors.

Colorization is the only setting that changes rendered output. It can be
given explicitly per call, or set for the duration of a block with
:func:`colorization`; when neither is done termcolor decides on its own
(``NO_COLOR``, ``FORCE_COLOR`` and whether stdout is a terminal).
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ColorMode(Enum):
    """When to emit terminal styling."""

    AUTO = "auto"  # let termcolor inspect the terminal
    ALWAYS = "always"
    NEVER = "never"

    @property
    def flag(self) -> Optional[bool]:
        """The explicit colorize flag this mode stands for (None for AUTO)."""
        if self is ColorMode.ALWAYS:
            return True
        if self is ColorMode.NEVER:
            return False
        return None

    @classmethod
    def from_flag(cls, colorize: Optional[bool]) -> "ColorMode":
        """Map an optional colorize flag back to a mode."""
        if colorize is None:
            return cls.AUTO
        return cls.ALWAYS if colorize else cls.NEVER


@dataclass
class RenderConfig:
    """Configuration for the error tree renderer."""

    color: ColorMode = ColorMode.AUTO

    @classmethod
    def from_flag(cls, colorize: Optional[bool]) -> "RenderConfig":
        return cls(color=ColorMode.from_flag(colorize))

    @property
    def colorize(self) -> Optional[bool]:
        return self.color.flag


_colorize_override: ContextVar[Optional[bool]] = ContextVar(
    "detailed_errors_colorize", default=None
)


@contextmanager
def colorization(enabled: Optional[bool]) -> Iterator[None]:
    """
    Override colorization for the duration of a ``with`` block.

    Styling calls made inside the block without an explicit flag follow
    ``enabled``. Passing None restores automatic detection inside the
    block. The previous setting is restored on exit, even on error.
    """
    token = _colorize_override.set(enabled)
    try:
        yield
    finally:
        _colorize_override.reset(token)


def resolve_colorize(explicit: Optional[bool] = None) -> Optional[bool]:
    """Pick the effective colorize flag: explicit first, then the override."""
    if explicit is not None:
        return explicit
    return _colorize_override.get()
