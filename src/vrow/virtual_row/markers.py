"""Reserved marker tokens selecting function call sub-modes."""

from __future__ import annotations

from enum import Enum


class Marker(Enum):
    """Sentinel passed as the first argument of a block call.

    Members never compare equal to strings or numbers, so a column that
    happens to be called ``distinct`` can not be mistaken for a marker.
    """

    WILDCARD = "wildcard"
    DISTINCT = "distinct"
    OVER = "over"

    def __repr__(self) -> str:
        return f"Marker.{self.name}"


WILDCARD = Marker.WILDCARD
DISTINCT = Marker.DISTINCT
OVER = Marker.OVER


def is_marker(value: object) -> bool:
    """Return whether value is one of the reserved markers."""
    return isinstance(value, Marker)
