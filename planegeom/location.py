"""Topological locations relative to a geometry."""

from __future__ import annotations

from enum import IntEnum


class Location(IntEnum):
    """Topological location; also the DE-9IM row and column index."""

    INTERIOR = 0
    BOUNDARY = 1
    EXTERIOR = 2
    NONE = 3

    def __str__(self) -> str:
        return _LABELS[self]

    def symbol(self) -> str:
        """Return the one-character symbol: 'i', 'b', 'e' or '-'."""
        return _SYMBOLS[self]


_LABELS = {
    Location.INTERIOR: "Interior",
    Location.BOUNDARY: "Boundary",
    Location.EXTERIOR: "Exterior",
    Location.NONE: "None",
}

_SYMBOLS = {
    Location.INTERIOR: "i",
    Location.BOUNDARY: "b",
    Location.EXTERIOR: "e",
    Location.NONE: "-",
}