"""Conversion of AST nodes into JSON-ready payloads."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields

from vrow.virtual_row.ast import Expr, WindowSpec
from vrow.virtual_row.markers import Marker


def to_payload(value: object) -> object:
    """Convert a node or argument value into plain dicts, lists and scalars.

    Nodes become dicts tagged with ``"type"``; markers become
    ``{"marker": "<name>"}``.
    """
    if isinstance(value, Expr | WindowSpec):
        payload: dict[str, object] = {"type": type(value).__name__}
        for field in fields(value):
            payload[field.name] = to_payload(getattr(value, field.name))
        return payload
    if isinstance(value, Marker):
        return {"marker": value.value}
    if isinstance(value, Mapping):
        return {_payload_key(key): to_payload(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [to_payload(item) for item in value]
    return value


def _payload_key(key: object) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, Expr):
        return repr(key)
    return str(key)
