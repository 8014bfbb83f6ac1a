"""
Small text helpers shared by the error renderer.
"""

from collections.abc import Iterable


def pluralize(n: int, word: str, on_empty: str = "") -> str:
    """
    Describe a count of things in English.

    Args:
        n: How many there are
        word: Singular form of the thing being counted
        on_empty: Text returned when there are none

    Returns:
        ``on_empty`` for 0, ``"1 word"`` for 1, ``"n words"`` otherwise
    """
    if n == 0:
        return on_empty
    if n == 1:
        return f"1 {word}"
    return f"{n} {word}s"


def join_nonempty(separator: str, items: Iterable[str]) -> str:
    """Join strings with a separator, leaving out the empty ones."""
    return separator.join(item for item in items if item)


def split_lines(text: str) -> list[str]:
    """
    Split text on ``\\n`` and ``\\r\\n`` only.

    Other characters ``str.splitlines`` breaks on (form feeds, ``\\u2028``
    and the like) stay inside their line.
    """
    return [line.removesuffix("\r") for line in text.split("\n")]


def indent_continuation_lines(text: str, width: int) -> str:
    """
    Prefix every line but the first with ``width`` spaces.

    Used to keep the wrapped content of a labelled field aligned under
    its label.
    """
    spacing = " " * max(0, width)
    lines = split_lines(text)
    return "\n".join(
        line if index == 0 else spacing + line for index, line in enumerate(lines)
    )
