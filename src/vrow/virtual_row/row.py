"""Evaluation context capturing attribute access and calls as invocations."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from vrow.virtual_row.ast import Expr, Value
from vrow.virtual_row.collector import collect
from vrow.virtual_row.resolver import resolve


class PendingCall:
    """Name taken from a virtual row that has not been called yet.

    Calling it resolves a function call (or operator shortcut); using it as a
    value resolves it as a plain or qualified identifier.
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __call__(self, *args: object, block: bool = False) -> Expr:
        return resolve(self.name, tuple(finalize(arg) for arg in args), block)

    def __repr__(self) -> str:
        return f"PendingCall({self.name!r})"

    def resolve(self) -> Expr:
        """Resolve the name without arguments or block."""
        return resolve(self.name)


class VirtualRow:
    """Row proxy handed to expression-building callables.

    ``row.name`` and ``row["name"]`` both capture ``name``; the subscript form
    reaches operator names (``row["+"]``) and names starting with ``_``.
    """

    __slots__ = ()

    def __getattr__(self, name: str) -> PendingCall:
        if name.startswith("_"):
            raise AttributeError(name)
        return PendingCall(name)

    def __getitem__(self, name: str) -> PendingCall:
        return PendingCall(name)

    def __repr__(self) -> str:
        return "VirtualRow()"


def finalize(value: object) -> Value:
    """Resolve pending names left in a value, recursing into containers."""
    if isinstance(value, PendingCall):
        return value.resolve()
    if isinstance(value, Mapping):
        return {finalize(key): finalize(item) for key, item in value.items()}
    if isinstance(value, list):
        return [finalize(item) for item in value]
    if isinstance(value, tuple):
        return tuple(finalize(item) for item in value)
    return value


def evaluate(fn: Callable[[VirtualRow], object]) -> object:
    """Run an expression-building callable against a fresh virtual row.

    Returns the resulting expression, or a ``Sequence`` when the callable
    returns a list or tuple of expressions.
    """
    return collect(finalize(fn(VirtualRow())))
