"""Tests for reserved marker tokens."""

from __future__ import annotations

import pytest

from vrow.virtual_row.markers import DISTINCT, OVER, WILDCARD, Marker, is_marker


def test_markers_are_distinct_members() -> None:
    """The three markers are separate enum members."""
    assert {WILDCARD, DISTINCT, OVER} == set(Marker)
    assert WILDCARD is Marker.WILDCARD


@pytest.mark.parametrize("value", ["wildcard", "distinct", "over", "*", 0, 1, None, True])
def test_markers_never_equal_literals(value: object) -> None:
    """Markers must not compare equal to plain data values."""
    assert all(marker != value for marker in Marker)
    assert is_marker(value) is False


def test_is_marker() -> None:
    """is_marker recognizes marker members."""
    assert all(is_marker(marker) for marker in Marker)


def test_marker_repr() -> None:
    """Marker repr names the enum member."""
    assert repr(OVER) == "Marker.OVER"
