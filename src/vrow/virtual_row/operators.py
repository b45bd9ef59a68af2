"""Operator shortcuts resolved ahead of generic dispatch."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from vrow.virtual_row.ast import (
    ArithmeticOp,
    BooleanKind,
    BooleanOp,
    Comparison,
    Expr,
    LiteralString,
    Negation,
    Value,
)
from vrow.virtual_row.errors import InvalidOperatorArity


LITERAL_STRING_NAME = "lit"

type OperatorBuilder = Callable[[tuple[Value, ...]], Expr]


def _require_at_least(name: str, args: tuple[Value, ...], minimum: int) -> None:
    if len(args) < minimum:
        raise InvalidOperatorArity(
            f"Operator {name!r} expects at least {minimum} operand(s), got {len(args)}"
        )


def _arithmetic(operator: str) -> OperatorBuilder:
    def build(args: tuple[Value, ...]) -> Expr:
        _require_at_least(operator, args, 2)
        return ArithmeticOp(operator, args)

    return build


def _comparison(operator: str) -> OperatorBuilder:
    def build(args: tuple[Value, ...]) -> Expr:
        _require_at_least(operator, args, 2)
        return Comparison(operator, args)

    return build


def _boolean(operator: str, kind: BooleanKind) -> OperatorBuilder:
    def build(args: tuple[Value, ...]) -> Expr:
        _require_at_least(operator, args, 1)
        return BooleanOp(kind, args)

    return build


def _negation(args: tuple[Value, ...]) -> Expr:
    if len(args) != 1:
        raise InvalidOperatorArity(f"Operator '~' expects exactly 1 operand, got {len(args)}")
    return Negation(args[0])


def _literal_string(args: tuple[Value, ...]) -> Expr:
    match args:
        case (str() as text,):
            return LiteralString(text)
    raise InvalidOperatorArity(
        f"{LITERAL_STRING_NAME!r} expects exactly 1 string argument, got {args!r}"
    )


OPERATORS: Mapping[str, OperatorBuilder] = MappingProxyType(
    {
        "+": _arithmetic("+"),
        "-": _arithmetic("-"),
        "*": _arithmetic("*"),
        "/": _arithmetic("/"),
        "&": _boolean("&", BooleanKind.AND),
        "|": _boolean("|", BooleanKind.OR),
        "~": _negation,
        ">": _comparison(">"),
        "<": _comparison("<"),
        ">=": _comparison(">="),
        "<=": _comparison("<="),
        LITERAL_STRING_NAME: _literal_string,
    }
)


def is_operator(name: str) -> bool:
    """Return whether name is reserved by the operator shortcut table."""
    return name in OPERATORS
