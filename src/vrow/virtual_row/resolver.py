"""Entrypoints resolving invocations through operators and dispatch."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from vrow.virtual_row.ast import Expr, Value
from vrow.virtual_row.dispatch import Invocation, dispatch
from vrow.virtual_row.operators import OPERATORS


logger = logging.getLogger("vrow")


def resolve_invocation(invocation: Invocation) -> Expr:
    """Resolve one invocation, giving operator shortcuts precedence."""
    builder = OPERATORS.get(invocation.name)
    if builder is not None:
        node = builder(invocation.args)
    else:
        node = dispatch(invocation)
    logger.debug("Resolved %r -> %r", invocation, node)
    return node


def resolve(name: str, args: Iterable[Value] = (), block: bool = False) -> Expr:
    """Resolve a call given as name, positional args and block flag."""
    return resolve_invocation(Invocation(name, tuple(args), block))
