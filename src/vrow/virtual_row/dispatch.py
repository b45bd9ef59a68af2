"""Generic resolution of virtual row invocations into AST nodes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from vrow.virtual_row.ast import (
    Expr,
    FunctionCall,
    Identifier,
    QualifiedIdentifier,
    Value,
    WindowSpec,
)
from vrow.virtual_row.errors import (
    InvalidFunctionArgs,
    InvalidQualifiedName,
    InvalidWindowSpec,
)
from vrow.virtual_row.markers import Marker, is_marker
from vrow.virtual_row.names import split_name


WINDOW_OPTION_KEYS = frozenset({"wildcard", "args", "partition", "order"})


@dataclass(frozen=True, slots=True)
class Invocation:
    """One captured virtual row call: name, positional args and block flag."""

    name: str
    args: tuple[Value, ...] = ()
    block: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidQualifiedName("Invocation name must not be empty")


def _window_function(name: str, rest: tuple[Value, ...]) -> FunctionCall:
    """Build a windowed function call from the values following OVER."""
    if not rest:
        return FunctionCall(name, window=WindowSpec())
    if len(rest) > 1:
        raise InvalidFunctionArgs(
            f"Window function {name!r} accepts one options mapping after OVER, "
            f"got {len(rest)} values"
        )

    options = rest[0]
    if not isinstance(options, Mapping):
        raise InvalidFunctionArgs(
            f"Window options for {name!r} must be a mapping, got {type(options).__name__}"
        )

    unknown = sorted(str(key) for key in options if key not in WINDOW_OPTION_KEYS)
    if unknown:
        raise InvalidWindowSpec(
            f"Unknown window options for {name!r}: {', '.join(unknown)}"
        )

    wildcard = options.get("wildcard", False)
    if not isinstance(wildcard, bool):
        raise InvalidWindowSpec(f"Window option 'wildcard' for {name!r} must be a bool")

    raw_args = options.get("args")
    if raw_args is None:
        args: tuple[Value, ...] = ()
    elif isinstance(raw_args, list | tuple):
        args = tuple(raw_args)
    else:
        args = (raw_args,)

    if wildcard and args:
        raise InvalidWindowSpec(
            f"Window function {name!r} can not combine 'wildcard' with 'args'"
        )

    partition = options.get("partition")
    order = options.get("order")
    for key, option in (("partition", partition), ("order", order)):
        if is_marker(option):
            raise InvalidWindowSpec(
                f"Window option {key!r} for {name!r} can not be a marker, got {option!r}"
            )

    window = WindowSpec(partition=partition, order=order)
    return FunctionCall(name, args, wildcard=wildcard, window=window)


def _block_call(name: str, args: tuple[Value, ...]) -> FunctionCall:
    """Resolve a call made with a block, where the first arg selects the mode."""
    match args:
        case ():
            return FunctionCall(name)
        case (Marker.WILDCARD,):
            return FunctionCall(name, wildcard=True)
        case (Marker.WILDCARD, *extra):
            raise InvalidFunctionArgs(
                f"Function {name!r} got {len(extra)} unexpected argument(s) after the wildcard"
            )
        case (Marker.DISTINCT,):
            raise InvalidFunctionArgs(f"Distinct function {name!r} requires arguments")
        case (Marker.DISTINCT, *rest):
            return FunctionCall(name, tuple(rest), distinct=True)
        case (Marker.OVER, *rest):
            return _window_function(name, tuple(rest))

    raise InvalidFunctionArgs(
        f"Function {name!r} called with a block expects WILDCARD, DISTINCT or OVER "
        f"as its first argument, got {args[0]!r}"
    )


def dispatch(invocation: Invocation) -> Expr:
    """Resolve an invocation into an identifier or function call node.

    Args:
        invocation: Captured name, args and block flag

    Returns:
        The AST node for the call shape

    Raises:
        InvalidFunctionArgs: If the args do not fit a block call shape
        InvalidWindowSpec: If window options are unknown or conflicting
        InvalidQualifiedName: If an argument-less name can not be split
    """
    name = invocation.name
    if invocation.block:
        return _block_call(name, invocation.args)
    if invocation.args:
        return FunctionCall(name, invocation.args)

    match split_name(name):
        case (table, column):
            return QualifiedIdentifier(table, column)
        case _:
            return Identifier(name)
