"""
A toy checker for ``if`` predicates, used by the command-line demo.

It understands exactly one shape, ``if <value> <comparator> <value>``, where
values are integer literals, quoted strings or variable names, and reports
problems as a tree of detailed errors. ``if a=="x"`` gives:

    Position: On line 1 and column 4 up to line 1 and column 10
    At: if a=="x"
    Error: This if predicate (a=="x") doesn't return a bool value
    Cause:
      - Position: On line 1 and column 4 up to line 1 and column 5
      - At: if a=="x"
      - Error: The variable a does not exist
      - Solution: Define a before using it
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from detailed_errors.styling.source import SourceSpan, SourceText
from detailed_errors.styling.style import Attribute, Color, Style, paint
from detailed_errors.tree.error import DetailedError
from detailed_errors.tree.explanation import ErrorDetail, ErrorExplanation

PREDICATE_PATTERN = re.compile(
    r"^\s*if\s+(?P<lhs>\S+?)\s*(?P<op>==|!=|<=|>=|<|>)\s*(?P<rhs>\S+)\s*$"
)
INT_PATTERN = re.compile(r"^-?\d+$")
STRING_PATTERN = re.compile(r'^"[^"]*"$')
NAME_PATTERN = re.compile(r"^[A-Za-z_]\w*$")

# Faded style for the whole predicate, so highlighted operands stand out
FADED = Style(Color.BLUE, attributes={Attribute.DARK})
EMPHASIS = frozenset({Attribute.CLEAR, Attribute.ITALIC, Attribute.BOLD})


def _points(error: DetailedError, span: SourceSpan) -> DetailedError:
    return error.start_point(*span.start_point).end_point(*span.end_point)


@dataclass(frozen=True)
class MalformedPredicate(ErrorDetail):
    """The text is not of the form ``if <value> <comparator> <value>``."""

    predicate: SourceSpan

    def explain(self) -> ErrorExplanation:
        return ErrorExplanation(
            f"{paint(self.predicate.text.strip(), attributes=[Attribute.ITALIC])} "
            "is not a predicate",
            "Write it as: if <value> <comparator> <value>",
        )


@dataclass(frozen=True)
class UndefinedVariable(ErrorDetail):
    """A variable used in the predicate was never defined."""

    variable: SourceSpan

    def explain(self) -> ErrorExplanation:
        name = self.variable.text
        return ErrorExplanation(
            f"The variable {paint(name, attributes=[Attribute.BOLD])} does not exist",
            f"Define {name} before using it",
            whole_style=FADED,
        ).mark(self.variable, Style(Color.RED, attributes=EMPHASIS))


@dataclass(frozen=True)
class IncomparableValues(ErrorDetail):
    """Both sides of the comparison have different types."""

    left: SourceSpan
    comparator: SourceSpan
    right: SourceSpan
    left_type: str
    right_type: str

    def explain(self) -> ErrorExplanation:
        comparator = paint(self.comparator.text, attributes=[Attribute.ITALIC])
        return (
            ErrorExplanation(
                f"Values {self.left.text} ({self.left_type}) and {self.right.text} "
                f"({self.right_type}) cannot be compared due to different types "
                f"(Comparator used {comparator})"
            )
            .with_whole_style(FADED)
            .mark(self.left, Style(Color.BLUE, attributes=EMPHASIS))
            .mark(self.right, Style(Color.RED, attributes=EMPHASIS))
        )


@dataclass(frozen=True)
class NonBooleanPredicate(ErrorDetail):
    """The predicate as a whole cannot be evaluated to a bool."""

    predicate: SourceSpan

    def explain(self) -> ErrorExplanation:
        predicate = paint(self.predicate.text, attributes=[Attribute.ITALIC])
        return ErrorExplanation(
            f"This if predicate ({predicate}) doesn't return a bool value",
            whole_style=FADED,
        ).mark(self.predicate, Style(Color.BLUE, attributes=EMPHASIS))


def value_type(value: str, variables: Mapping[str, str]) -> Optional[str]:
    """Type of a literal or defined variable, None when it is unknown."""
    if INT_PATTERN.match(value):
        return "Int"
    if STRING_PATTERN.match(value):
        return "String"
    return variables.get(value)


def check_predicate(
    predicate: str,
    variables: Optional[Mapping[str, str]] = None,
    name: str = "<predicate>",
) -> Optional[DetailedError]:
    """
    Check an ``if`` predicate.

    Args:
        predicate: Text such as ``if a==1``
        variables: Defined variable names mapped to their type names
        name: Display name of the predicate source

    Returns:
        The error tree describing every problem, or None if the predicate
        is fine
    """
    variables = dict(variables or {})
    source = SourceText(predicate, name)

    match = PREDICATE_PATTERN.match(predicate)
    if match is None:
        return MalformedPredicate(source.whole).at(source.whole)

    lhs = source.span(*match.span("lhs"))
    op = source.span(*match.span("op"))
    rhs = source.span(*match.span("rhs"))
    comparison = source.span(lhs.start, rhs.end)

    causes: list[DetailedError] = []
    for operand in (lhs, rhs):
        if NAME_PATTERN.match(operand.text) and operand.text not in variables:
            causes.append(_points(UndefinedVariable(operand).at(source.whole), operand))

    left_type = value_type(lhs.text, variables)
    right_type = value_type(rhs.text, variables)
    if left_type and right_type and left_type != right_type:
        causes.append(
            _points(
                IncomparableValues(lhs, op, rhs, left_type, right_type).at(comparison),
                comparison,
            )
        )

    if not causes:
        return None

    error = DetailedError(NonBooleanPredicate(comparison), at=source.whole, causes=causes)
    return _points(error, comparison)
