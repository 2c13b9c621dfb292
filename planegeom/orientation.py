"""Angular relationship between a vector and a point."""

from __future__ import annotations

from enum import IntEnum
from fractions import Fraction
from typing import Sequence


class Orientation(IntEnum):
    """Orientation of a point relative to a base vector."""

    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTER_CLOCKWISE = 1

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    Orientation.CLOCKWISE: "Clockwise",
    Orientation.COLLINEAR: "Collinear",
    Orientation.COUNTER_CLOCKWISE: "CounterClockwise",
}


def orientation_index(
    vector_origin: Sequence[float],
    vector_end: Sequence[float],
    point: Sequence[float],
) -> Orientation:
    """Return the orientation of ``point`` relative to the vector origin->end.

    The determinant is evaluated with exact rational arithmetic, so the
    result is not affected by floating point round-off.  Raises ValueError
    for NaN ordinates and OverflowError for infinite ones.
    """
    ox, oy = Fraction(vector_origin[0]), Fraction(vector_origin[1])
    ex, ey = Fraction(vector_end[0]), Fraction(vector_end[1])
    px, py = Fraction(point[0]), Fraction(point[1])

    dx1 = ex - ox
    dy1 = ey - oy
    dx2 = px - ex
    dy2 = py - ey
    det = dx1 * dy2 - dy1 * dx2
    return Orientation((det > 0) - (det < 0))