"""vrow - Resolve virtual row calls into query expression AST nodes."""

from vrow.virtual_row import (
    DISTINCT,
    OVER,
    WILDCARD,
    Expr,
    Invocation,
    Marker,
    VirtualRow,
    VirtualRowError,
    evaluate,
    evaluate_call_text,
    resolve,
    resolve_invocation,
)


__version__ = "0.1.0"

__all__ = [
    "DISTINCT",
    "OVER",
    "WILDCARD",
    "Expr",
    "Invocation",
    "Marker",
    "VirtualRow",
    "VirtualRowError",
    "__version__",
    "evaluate",
    "evaluate_call_text",
    "resolve",
    "resolve_invocation",
]
