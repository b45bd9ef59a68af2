"""AST nodes produced by virtual row resolution."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

from vrow.virtual_row.errors import (
    InvalidExpression,
    InvalidFunctionArgs,
    InvalidOperatorArity,
    InvalidQualifiedName,
)
from vrow.virtual_row.markers import Marker
from vrow.virtual_row.names import QUALIFIER_SEPARATOR


ARITHMETIC_OPERATORS = frozenset({"+", "-", "*", "/"})
COMPARISON_OPERATORS = frozenset({">", "<", ">=", "<="})


@dataclass(frozen=True, slots=True)
class Expr:
    """Base AST expression type."""


type Value = (
    Expr
    | Marker
    | Mapping[object, object]
    | list[object]
    | tuple[object, ...]
    | str
    | int
    | float
    | bool
    | None
)


def _check_segment(segment: str, label: str) -> None:
    if not segment:
        raise InvalidQualifiedName(f"{label} must not be empty")
    if QUALIFIER_SEPARATOR in segment:
        raise InvalidQualifiedName(
            f"{label} {segment!r} must not contain {QUALIFIER_SEPARATOR!r}"
        )


@dataclass(frozen=True, slots=True)
class Identifier(Expr):
    """Unqualified column or name reference."""

    name: str

    def __post_init__(self) -> None:
        _check_segment(self.name, "Identifier")


@dataclass(frozen=True, slots=True)
class QualifiedIdentifier(Expr):
    """Column reference qualified by a table or source name."""

    table: str
    column: str

    def __post_init__(self) -> None:
        _check_segment(self.table, "Table")
        _check_segment(self.column, "Column")


@dataclass(frozen=True, slots=True)
class WindowSpec:
    """Partition and order metadata of a windowed function call."""

    partition: Value = None
    order: Value = None


@dataclass(frozen=True, slots=True)
class FunctionCall(Expr):
    """Named function invocation, optionally distinct, wildcard or windowed."""

    name: str
    args: tuple[Value, ...] = ()
    distinct: bool = False
    wildcard: bool = False
    window: WindowSpec | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidFunctionArgs("Function name must not be empty")
        if self.wildcard and self.args:
            raise InvalidFunctionArgs(
                f"Function {self.name!r} can not combine a wildcard with arguments"
            )
        if self.distinct and not self.args:
            raise InvalidFunctionArgs(
                f"Function {self.name!r} requires arguments when distinct"
            )


@dataclass(frozen=True, slots=True)
class ArithmeticOp(Expr):
    """Arithmetic operation over two or more operands."""

    operator: str
    operands: tuple[Value, ...]

    def __post_init__(self) -> None:
        if self.operator not in ARITHMETIC_OPERATORS:
            raise InvalidOperatorArity(f"Unknown arithmetic operator: {self.operator}")
        if len(self.operands) < 2:
            raise InvalidOperatorArity(
                f"Operator {self.operator!r} expects at least 2 operands, "
                f"got {len(self.operands)}"
            )


class BooleanKind(StrEnum):
    """Boolean connective kinds."""

    AND = "AND"
    OR = "OR"


@dataclass(frozen=True, slots=True)
class BooleanOp(Expr):
    """AND/OR over one or more operands."""

    kind: BooleanKind
    operands: tuple[Value, ...]

    def __post_init__(self) -> None:
        if not self.operands:
            raise InvalidOperatorArity(f"{self.kind} expects at least 1 operand")


@dataclass(frozen=True, slots=True)
class Negation(Expr):
    """Negation wrapping exactly one expression."""

    operand: Value


@dataclass(frozen=True, slots=True)
class Comparison(Expr):
    """Ordering comparison over two or more operands."""

    operator: str
    operands: tuple[Value, ...]

    def __post_init__(self) -> None:
        if self.operator not in COMPARISON_OPERATORS:
            raise InvalidOperatorArity(f"Unknown comparison operator: {self.operator}")
        if len(self.operands) < 2:
            raise InvalidOperatorArity(
                f"Operator {self.operator!r} expects at least 2 operands, "
                f"got {len(self.operands)}"
            )


@dataclass(frozen=True, slots=True)
class LiteralString(Expr):
    """Raw SQL text inserted verbatim by the renderer."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise InvalidOperatorArity("Literal string text must be a str")


@dataclass(frozen=True, slots=True)
class Sequence(Expr):
    """Ordered expressions produced from a collection result."""

    items: tuple[Expr, ...]

    def __post_init__(self) -> None:
        for index, item in enumerate(self.items):
            if isinstance(item, Sequence):
                raise InvalidExpression(f"Item {index} is a nested sequence")
            if not isinstance(item, Expr):
                raise InvalidExpression(
                    f"Item {index} is not an expression: {item!r}"
                )
