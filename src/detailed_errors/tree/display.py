"""
Rendering-ready snapshots of error trees.

A :class:`DisplayInfo` holds everything needed to print one error and its
explained causes. It is plain data: it can be turned into text with
:meth:`DisplayInfo.to_text`, or into a dict/JSON for audit logs and back.

Text layout, for a node with two explained causes:

    At: if a==b
    Error: This if predicate (a==b) doesn't return a bool value
    Has: 2 explained causes.
    Causes:
      - Cause nº 1 -
      - At: if a==b
      - Error: The variable a does not exist

      - Cause nº 2 -
      ...
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from detailed_errors.utils.formatting import (
    indent_continuation_lines,
    join_nonempty,
    pluralize,
    split_lines,
)

UNEXPLAINED_ERROR = "Unexplained error"
UNEXPLAINED_ERROR_TEXT = f"Error: {UNEXPLAINED_ERROR}"

# Indentation cap for fields whose content should not follow the label width
CAPPED_INDENT = 2
# Extra indentation for the capped fields of a node shown as a cause
NESTED_EXTRA_INDENT = 2

Point = tuple[int, int]


def _as_point(value: Any) -> Optional[Point]:
    if value is None:
        return None
    line, column = value
    return int(line), int(column)


@dataclass(frozen=True, slots=True)
class DisplayInfo:
    """
    Displayable information about one error and its explained causes.

    Attributes:
        at: Styled location text where the error happened
        reason: What went wrong
        solution: How to solve it
        start: 1-indexed (line, column) where the error starts
        end: 1-indexed (line, column) where the error ends
        unexplained_cause_count: Causes that had nothing to show
        explained_causes: Causes that had something to show, simplest first
    """

    at: Optional[str] = None
    reason: Optional[str] = None
    solution: Optional[str] = None
    start: Optional[Point] = None
    end: Optional[Point] = None
    unexplained_cause_count: int = 0
    explained_causes: tuple[DisplayInfo, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _as_point(self.start))
        object.__setattr__(self, "end", _as_point(self.end))
        object.__setattr__(self, "explained_causes", tuple(self.explained_causes))

    def complexity(self) -> int:
        """Number of nodes in this subtree, this one included."""
        count = 0
        stack: list[DisplayInfo] = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.explained_causes)
        return count

    def is_explained(self) -> bool:
        """Whether this error has anything to show, itself or through its causes."""
        return (
            self.at is not None
            or self.reason is not None
            or self.solution is not None
            or self.start is not None
            or bool(self.explained_causes)
        )

    def to_text(self) -> str:
        """
        Display this error as text.

        Fields, each on its own line when present: Position, At, Error,
        Solution, Has (cause counts) and Cause/Causes. An error with nothing
        to show is displayed as "Error: Unexplained error".
        """
        if not self.is_explained():
            return UNEXPLAINED_ERROR_TEXT
        return "\n".join(self._lines())

    def __str__(self) -> str:
        return self.to_text()

    def _position(self) -> Optional[str]:
        if self.start is None:
            return None
        line, column = self.start
        position = f"On line {line} and column {column}"
        if self.end is not None:
            end_line, end_column = self.end
            position += f" up to line {end_line} and column {end_column}"
        return position

    def _cause_summary(self) -> Optional[str]:
        explained = len(self.explained_causes)
        if explained == 1 and self.unexplained_cause_count == 0:
            return None
        summary = join_nonempty(
            " and ",
            [
                pluralize(self.unexplained_cause_count, "unexplained cause"),
                pluralize(explained, "explained cause"),
            ],
        )
        return f"{summary}." if summary else None

    def _fields(self) -> list[tuple[str, Optional[int], Optional[str]]]:
        """(label, indentation cap or None to align under the label, content)."""
        return [
            ("Position", CAPPED_INDENT, self._position()),
            ("At", CAPPED_INDENT, self.at),
            ("Error", None, self.reason or UNEXPLAINED_ERROR),
            ("Solution", None, self.solution),
            ("Has", None, self._cause_summary()),
        ]

    def _lines(self) -> list[str]:
        """
        Lay out this error and its causes line by line.

        Causes are expanded from an explicit stack, and every line gets the
        indentation of all the cause blocks around it at once, so the cost
        does not depend on re-indenting nested text.
        """
        lines: list[str] = []
        # Pending work: a finished line, or (info, indentation, nested)
        stack: list[Union[str, tuple[DisplayInfo, int, bool]]] = [(self, 0, False)]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                lines.append(item)
                continue

            info, indent, nested = item
            margin = " " * indent
            bullet = "- " if nested else ""
            if not info.is_explained():
                lines.append(f"{margin}{bullet}{UNEXPLAINED_ERROR_TEXT}")
                continue

            extra = NESTED_EXTRA_INDENT if nested else 0
            for label, cap, content in info._fields():
                if content is None:
                    continue
                prefix = f"{bullet}{label}: "
                width = len(prefix) if cap is None else min(len(prefix), cap + extra)
                block = indent_continuation_lines(prefix + content, width)
                lines.extend(margin + line for line in split_lines(block))

            causes = info.explained_causes
            if not causes:
                continue
            prefix = f"{bullet}{'Cause' if len(causes) == 1 else 'Causes'}: "
            lines.append(margin + prefix)

            cause_indent = indent + min(len(prefix), CAPPED_INDENT + extra)
            cause_margin = " " * cause_indent
            pending: list[Union[str, tuple[DisplayInfo, int, bool]]] = []
            for number, cause in enumerate(causes, start=1):
                if len(causes) > 1:
                    if number > 1:
                        pending.append(cause_margin)
                    pending.append(f"{cause_margin}- Cause nº {number} -")
                pending.append((cause, cause_indent, True))
            stack.extend(reversed(pending))

        return lines

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def _own_fields(self) -> dict[str, Any]:
        return {
            "at": self.at,
            "reason": self.reason,
            "solution": self.solution,
            "start": list(self.start) if self.start is not None else None,
            "end": list(self.end) if self.end is not None else None,
            "unexplained_cause_count": self.unexplained_cause_count,
            "explained_causes": [],
        }

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form mirroring the fields one to one."""
        data = self._own_fields()
        stack = [(self, data)]
        while stack:
            info, info_data = stack.pop()
            for cause in info.explained_causes:
                cause_data = cause._own_fields()
                info_data["explained_causes"].append(cause_data)
                stack.append((cause, cause_data))
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DisplayInfo:
        """Rebuild a snapshot from :meth:`to_dict` output; missing keys are unset."""
        built: dict[int, DisplayInfo] = {}
        stack: list[tuple[Mapping[str, Any], bool]] = [(data, False)]
        while stack:
            node, causes_done = stack.pop()
            causes = node.get("explained_causes") or ()
            if not causes_done:
                stack.append((node, True))
                stack.extend((cause, False) for cause in causes)
                continue
            built[id(node)] = cls(
                at=node.get("at"),
                reason=node.get("reason"),
                solution=node.get("solution"),
                start=node.get("start"),
                end=node.get("end"),
                unexplained_cause_count=int(node.get("unexplained_cause_count") or 0),
                explained_causes=tuple(built[id(cause)] for cause in causes),
            )
        return built[id(data)]

    def to_json(self, **kwargs: Any) -> str:
        """Serialize to JSON; keyword arguments go to :func:`json.dumps`."""
        kwargs.setdefault("ensure_ascii", False)
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_json(cls, text: str) -> DisplayInfo:
        return cls.from_dict(json.loads(text))
