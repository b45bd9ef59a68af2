"""Resolution of parsed call text into AST nodes."""

from __future__ import annotations

from vrow.virtual_row.ast import Value
from vrow.virtual_row.collector import collect
from vrow.virtual_row.dispatch import Invocation
from vrow.virtual_row.parser import CallTree, parse_call_text
from vrow.virtual_row.resolver import resolve_invocation


def evaluate_tree(tree: CallTree | object) -> Value:
    """Resolve a call tree bottom-up, arguments before their call."""
    if isinstance(tree, Invocation):
        args = tuple(evaluate_tree(arg) for arg in tree.args)
        return resolve_invocation(Invocation(tree.name, args, tree.block))
    if isinstance(tree, dict):
        return {key: evaluate_tree(item) for key, item in tree.items()}
    if isinstance(tree, list):
        return [evaluate_tree(item) for item in tree]
    return tree


def evaluate_call_text(text: str) -> object:
    """Parse and resolve call text.

    A single top-level value is returned as-is (a list is collected into a
    ``Sequence``); several comma-separated top-level values always become a
    ``Sequence``.
    """
    values = [evaluate_tree(tree) for tree in parse_call_text(text)]
    if len(values) == 1:
        return collect(values[0])
    return collect(values)
