"""Public API for virtual row call resolution."""

from vrow.virtual_row.ast import (
    ArithmeticOp,
    BooleanKind,
    BooleanOp,
    Comparison,
    Expr,
    FunctionCall,
    Identifier,
    LiteralString,
    Negation,
    QualifiedIdentifier,
    Sequence,
    WindowSpec,
)
from vrow.virtual_row.collector import collect
from vrow.virtual_row.dispatch import Invocation, dispatch
from vrow.virtual_row.errors import (
    CallSyntaxError,
    InvalidExpression,
    InvalidFunctionArgs,
    InvalidOperatorArity,
    InvalidQualifiedName,
    InvalidWindowSpec,
    VirtualRowError,
)
from vrow.virtual_row.evaluator import evaluate_call_text
from vrow.virtual_row.markers import DISTINCT, OVER, WILDCARD, Marker
from vrow.virtual_row.names import split_name
from vrow.virtual_row.operators import is_operator
from vrow.virtual_row.parser import parse_call_text
from vrow.virtual_row.resolver import resolve, resolve_invocation
from vrow.virtual_row.row import PendingCall, VirtualRow, evaluate
from vrow.virtual_row.serialize import to_payload


__all__ = [
    "DISTINCT",
    "OVER",
    "WILDCARD",
    "ArithmeticOp",
    "BooleanKind",
    "BooleanOp",
    "CallSyntaxError",
    "Comparison",
    "Expr",
    "FunctionCall",
    "Identifier",
    "InvalidExpression",
    "InvalidFunctionArgs",
    "InvalidOperatorArity",
    "InvalidQualifiedName",
    "InvalidWindowSpec",
    "Invocation",
    "LiteralString",
    "Marker",
    "Negation",
    "PendingCall",
    "QualifiedIdentifier",
    "Sequence",
    "VirtualRow",
    "VirtualRowError",
    "WindowSpec",
    "collect",
    "dispatch",
    "evaluate",
    "evaluate_call_text",
    "is_operator",
    "parse_call_text",
    "resolve",
    "resolve_invocation",
    "split_name",
    "to_payload",
]
