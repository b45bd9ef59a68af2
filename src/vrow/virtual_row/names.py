"""Splitting of virtual row names into identifier segments."""

from __future__ import annotations

from vrow.virtual_row.errors import InvalidQualifiedName


QUALIFIER_SEPARATOR = "__"


def split_name(name: str) -> tuple[str] | tuple[str, str]:
    """Split a name into one plain or two qualified segments.

    Args:
        name: Name captured from the virtual row (``column`` or ``table__column``)

    Returns:
        ``(name,)`` for plain names, ``(table, column)`` for qualified names

    Raises:
        InvalidQualifiedName: If the name is empty, has more than one
            separator, an underscore run that could split two ways, or a
            separator leaving an empty segment
    """
    if not name:
        raise InvalidQualifiedName("Name must not be empty")

    if QUALIFIER_SEPARATOR + "_" in name:
        raise InvalidQualifiedName(
            f"Name {name!r} has a {QUALIFIER_SEPARATOR!r} separator next to another underscore"
        )

    segments = name.split(QUALIFIER_SEPARATOR)
    if len(segments) == 1:
        return (name,)
    if len(segments) > 2:
        raise InvalidQualifiedName(
            f"Name {name!r} has more than one {QUALIFIER_SEPARATOR!r} separator"
        )

    table, column = segments
    if not table or not column:
        raise InvalidQualifiedName(f"Name {name!r} has an empty segment")
    return (table, column)
