"""Tests for AST payload serialization."""

from __future__ import annotations

import json

from vrow.virtual_row import OVER, evaluate_call_text, resolve, to_payload
from vrow.virtual_row.ast import BooleanKind, BooleanOp, Identifier, Sequence


def test_identifier_payload() -> None:
    """Identifiers serialize with their type tag."""
    assert to_payload(Identifier("a")) == {"type": "Identifier", "name": "a"}


def test_window_call_payload() -> None:
    """Nested window specs and args are serialized recursively."""
    node = resolve("sum", (OVER, {"args": "col1", "partition": "col2"}), True)
    assert to_payload(node) == {
        "type": "FunctionCall",
        "name": "sum",
        "args": ["col1"],
        "distinct": False,
        "wildcard": False,
        "window": {"type": "WindowSpec", "partition": "col2", "order": None},
    }


def test_marker_payload() -> None:
    """Markers serialize as marker objects."""
    assert to_payload(resolve("count", (OVER,))) == {
        "type": "FunctionCall",
        "name": "count",
        "args": [{"marker": "over"}],
        "distinct": False,
        "wildcard": False,
        "window": None,
    }


def test_mapping_keys_become_strings() -> None:
    """Mapping keys are converted to strings."""
    node = BooleanOp(BooleanKind.OR, ({Identifier("a"): 1, 2: "b"},))
    payload = to_payload(node)
    assert payload == {
        "type": "BooleanOp",
        "kind": "OR",
        "operands": [{"Identifier(name='a')": 1, "2": "b"}],
    }


def test_sequence_payload_is_json_serializable() -> None:
    """Payloads should be accepted by json.dumps."""
    value = evaluate_call_text("a, count(*){}")
    assert isinstance(value, Sequence)
    decoded = json.loads(json.dumps(to_payload(value)))
    assert decoded["type"] == "Sequence"
    assert [item["type"] for item in decoded["items"]] == ["Identifier", "FunctionCall"]
