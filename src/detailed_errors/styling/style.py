"""
Text styles and the terminal styling primitive.

A :class:`Style` is a semantic, partial description of how text should look:
an optional foreground, an optional background and a set of attributes.
Styles are merged with :func:`join_styles` and turned into escape codes by
termcolor, one property at a time and always in the same order so that the
composed output is stable.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union

from termcolor import colored

from detailed_errors.config import resolve_colorize
from detailed_errors.utils.errors import StyleError


class Color(Enum):
    """Terminal colors, named the way termcolor names them."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    LIGHT_GREY = "light_grey"
    DARK_GREY = "dark_grey"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_CYAN = "light_cyan"

    @property
    def highlight(self) -> str:
        """termcolor name of this color used as a background."""
        return f"on_{self.value}"


class Attribute(Enum):
    """
    Text attributes.

    CLEAR is not a visual attribute: a style carrying it discards whatever
    style it is merged over.
    """

    CLEAR = "clear"
    BOLD = "bold"
    DARK = "dark"
    ITALIC = "italic"
    UNDERLINE = "underline"
    BLINK = "blink"
    REVERSE = "reverse"
    CONCEALED = "concealed"
    STRIKE = "strike"


# Emission order for attributes, CLEAR emits nothing
ATTRIBUTE_ORDER: tuple[Attribute, ...] = (
    Attribute.BOLD,
    Attribute.DARK,
    Attribute.ITALIC,
    Attribute.UNDERLINE,
    Attribute.BLINK,
    Attribute.REVERSE,
    Attribute.CONCEALED,
    Attribute.STRIKE,
)

RGB = tuple[int, int, int]
ColorValue = Union[Color, RGB]


def _normalize_color(value: object) -> Optional[ColorValue]:
    if value is None or isinstance(value, Color):
        return value
    if isinstance(value, str):
        try:
            return Color(value.strip().lower())
        except ValueError:
            raise StyleError("unknown color", value) from None
    if isinstance(value, tuple) and len(value) == 3:
        if all(isinstance(c, int) and 0 <= c <= 255 for c in value):
            return (value[0], value[1], value[2])
    raise StyleError("colors are Color members, color names or (r, g, b) tuples", value)


def _normalize_attribute(value: object) -> Attribute:
    if isinstance(value, Attribute):
        return value
    if isinstance(value, str):
        try:
            return Attribute(value.strip().lower())
        except ValueError:
            raise StyleError("unknown attribute", value) from None
    raise StyleError("attributes are Attribute members or attribute names", value)


def _color_flags(colorize: Optional[bool]) -> dict[str, bool]:
    """termcolor keyword arguments for a resolved colorize flag."""
    if colorize is None:
        return {}
    return {"force_color": True} if colorize else {"no_color": True}


@dataclass(frozen=True, slots=True)
class Style:
    """
    A partial text style.

    Attributes:
        foreground: Text color, or None to inherit
        background: Background color, or None to inherit
        attributes: Attributes to add; Attribute.CLEAR resets inherited style
    """

    foreground: Optional[ColorValue] = None
    background: Optional[ColorValue] = None
    attributes: frozenset[Attribute] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "foreground", _normalize_color(self.foreground))
        object.__setattr__(self, "background", _normalize_color(self.background))
        if isinstance(self.attributes, (str, Attribute)):
            attributes: Iterable[object] = (self.attributes,)
        else:
            attributes = self.attributes
        object.__setattr__(
            self, "attributes", frozenset(_normalize_attribute(a) for a in attributes)
        )

    @property
    def clear(self) -> bool:
        """Whether this style discards the style it is merged over."""
        return Attribute.CLEAR in self.attributes

    @property
    def is_plain(self) -> bool:
        """Whether applying this style leaves text untouched."""
        return (
            self.foreground is None
            and self.background is None
            and not (self.attributes - {Attribute.CLEAR})
        )

    def fg(self, color: object) -> Style:
        """Copy of this style with another foreground."""
        return replace(self, foreground=color)

    def bg(self, color: object) -> Style:
        """Copy of this style with another background."""
        return replace(self, background=color)

    def with_attributes(self, *attributes: object) -> Style:
        """Copy of this style with extra attributes."""
        extra = {_normalize_attribute(a) for a in attributes}
        return replace(self, attributes=self.attributes | extra)

    def cleared(self) -> Style:
        """Copy of this style that discards inherited styling."""
        return self.with_attributes(Attribute.CLEAR)

    def join(self, overlay: Style) -> Style:
        """Merge ``overlay`` on top of this style, see :func:`join_styles`."""
        return join_styles(self, overlay)

    def emitted_attributes(self) -> list[Attribute]:
        """Visual attributes of this style in emission order."""
        return [a for a in ATTRIBUTE_ORDER if a in self.attributes]

    def apply(self, text: str, colorize: Optional[bool] = None) -> str:
        """
        Wrap text in the escape codes for this style.

        Background goes first, then foreground, then each attribute in
        ATTRIBUTE_ORDER. A plain style returns the text unchanged.

        Args:
            text: The text to style
            colorize: Force (True) or suppress (False) styling; None defers to
                the active colorization override, then to termcolor

        Returns:
            The styled text
        """
        if self.is_plain or not text:
            return text

        flags = _color_flags(resolve_colorize(colorize))
        styled = text

        if self.background is not None:
            on_color = (
                self.background.highlight
                if isinstance(self.background, Color)
                else self.background
            )
            styled = colored(styled, on_color=on_color, **flags)

        if self.foreground is not None:
            color = (
                self.foreground.value
                if isinstance(self.foreground, Color)
                else self.foreground
            )
            styled = colored(styled, color, **flags)

        for attribute in self.emitted_attributes():
            styled = colored(styled, attrs=[attribute.value], **flags)

        return styled


def join_styles(base: Style, overlay: Style) -> Style:
    """
    Merge two styles, ``overlay`` winning.

    A clearing overlay replaces ``base`` entirely. Otherwise the overlay's
    colors replace the base colors they are set for, and attributes are
    united (a clearing base stays clearing, which keeps the merge
    associative).
    """
    if overlay.clear:
        return overlay
    return Style(
        foreground=overlay.foreground if overlay.foreground is not None else base.foreground,
        background=overlay.background if overlay.background is not None else base.background,
        attributes=base.attributes | overlay.attributes,
    )


def paint(
    text: str,
    foreground: object = None,
    background: object = None,
    attributes: Iterable[object] = (),
    colorize: Optional[bool] = None,
) -> str:
    """
    Style a piece of text in one call.

    Meant for ``explain()`` implementations that emphasize parts of their
    own wording; inside a render call it follows the render's colorize flag.
    """
    return Style(foreground, background, attributes).apply(text, colorize)
