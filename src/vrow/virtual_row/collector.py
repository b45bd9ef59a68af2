"""Flattening of collection results into sibling expressions."""

from __future__ import annotations

from vrow.virtual_row.ast import Sequence


def collect(value: object) -> object:
    """Wrap a list or tuple result into a Sequence, leave other values alone.

    Items are not resolved further; each must already be an expression node,
    otherwise ``InvalidExpression`` is raised by ``Sequence``.
    """
    if isinstance(value, list | tuple):
        return Sequence(tuple(value))
    return value
