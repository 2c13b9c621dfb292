"""Vector and distance operations in 3D space.

Coordinates hold X, Y and Z at indexes 0, 1 and 2.
"""

from __future__ import annotations

import math
from typing import List, Sequence


def _div(numerator: float, denominator: float) -> float:
    """Floating point division that yields inf or nan instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def vector_dot(
    v1_start: Sequence[float],
    v1_end: Sequence[float],
    v2_start: Sequence[float],
    v2_end: Sequence[float],
) -> float:
    """Return the dot product of the vectors v1_start->v1_end and v2_start->v2_end."""
    ax = v1_end[0] - v1_start[0]
    ay = v1_end[1] - v1_start[1]
    az = v1_end[2] - v1_start[2]
    bx = v2_end[0] - v2_start[0]
    by = v2_end[1] - v2_start[1]
    bz = v2_end[2] - v2_start[2]
    return ax * bx + ay * by + az * bz


def vector_length(vector: Sequence[float]) -> float:
    """Return the length of the vector from the origin to ``vector``."""
    return math.sqrt(vector[0] * vector[0] + vector[1] * vector[1] + vector[2] * vector[2])


def vector_normalize(vector: Sequence[float]) -> List[float]:
    """Return the unit vector pointing from the origin towards ``vector``."""
    length = vector_length(vector)
    return [_div(vector[0], length), _div(vector[1], length), _div(vector[2], length)]


def distance(point1: Sequence[float], point2: Sequence[float]) -> float:
    """Return the 3D distance, falling back to 2D when either Z is NaN."""
    if math.isnan(point1[2]) or math.isnan(point2[2]):
        dx = point1[0] - point2[0]
        dy = point1[1] - point2[1]
        return math.sqrt(dx * dx + dy * dy)

    dx = point1[0] - point2[0]
    dy = point1[1] - point2[1]
    dz = point1[2] - point2[2]
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def equals(point1: Sequence[float], point2: Sequence[float]) -> bool:
    """Return True if the coordinates are equal in 3D; two NaN Zs count as equal."""
    return (
        point1[0] == point2[0]
        and point1[1] == point2[1]
        and (point1[2] == point2[2] or (math.isnan(point1[2]) and math.isnan(point2[2])))
    )


def distance_point_to_line(
    point: Sequence[float], line_start: Sequence[float], line_end: Sequence[float]
) -> float:
    """Return the distance from ``point`` to the segment line_start->line_end.

    Raises ValueError if the segment's ordinates make its length NaN.
    """
    if equals(line_start, line_end):
        return distance(point, line_start)

    len2 = (
        (line_end[0] - line_start[0]) * (line_end[0] - line_start[0])
        + (line_end[1] - line_start[1]) * (line_end[1] - line_start[1])
        + (line_end[2] - line_start[2]) * (line_end[2] - line_start[2])
    )
    if math.isnan(len2):
        raise ValueError("Ordinates must not be NaN")

    # r is the position of the projection of point along the segment:
    # 0 at line_start, 1 at line_end.
    r = _div(
        (point[0] - line_start[0]) * (line_end[0] - line_start[0])
        + (point[1] - line_start[1]) * (line_end[1] - line_start[1])
        + (point[2] - line_start[2]) * (line_end[2] - line_start[2]),
        len2,
    )

    if r <= 0.0:
        return distance(point, line_start)
    if r >= 1.0:
        return distance(point, line_end)

    qx = line_start[0] + r * (line_end[0] - line_start[0])
    qy = line_start[1] + r * (line_end[1] - line_start[1])
    qz = line_start[2] + r * (line_end[2] - line_start[2])
    dx = point[0] - qx
    dy = point[1] - qy
    dz = point[2] - qz
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def distance_line_to_line(
    line1_start: Sequence[float],
    line1_end: Sequence[float],
    line2_start: Sequence[float],
    line2_end: Sequence[float],
) -> float:
    """Return the distance between two 3D segments.

    Raises ValueError if any ordinate is NaN.  Large ordinate values are
    subject to round-off error.
    """
    if equals(line1_start, line1_end):
        return distance_point_to_line(line1_start, line2_start, line2_end)
    if equals(line2_start, line1_end):
        return distance_point_to_line(line2_start, line1_start, line1_end)

    a = vector_dot(line1_start, line1_end, line1_start, line1_end)
    b = vector_dot(line1_start, line1_end, line2_start, line2_end)
    c = vector_dot(line2_start, line2_end, line2_start, line2_end)
    d = vector_dot(line1_start, line1_end, line2_start, line1_start)
    e = vector_dot(line2_start, line2_end, line2_start, line1_start)

    denom = a * c - b * b
    if math.isnan(denom):
        raise ValueError("Ordinates must not be NaN")

    if denom <= 0.0:
        # Parallel lines: fix s at 0 and use the larger denominator for t.
        s = 0.0
        t = _div(d, b) if b > c else _div(e, c)
    else:
        s = (b * e - c * d) / denom
        t = (a * e - b * d) / denom

    if s < 0:
        return distance_point_to_line(line1_start, line2_start, line2_end)
    if s > 1:
        return distance_point_to_line(line1_end, line2_start, line2_end)
    if t < 0:
        return distance_point_to_line(line2_start, line1_start, line1_end)
    if t > 1:
        return distance_point_to_line(line2_end, line1_start, line1_end)

    x1 = line1_start[0] + s * (line1_end[0] - line1_start[0])
    y1 = line1_start[1] + s * (line1_end[1] - line1_start[1])
    z1 = line1_start[2] + s * (line1_end[2] - line1_start[2])

    x2 = line2_start[0] + t * (line2_end[0] - line2_start[0])
    y2 = line2_start[1] + t * (line2_end[1] - line2_start[1])
    z2 = line2_start[2] + t * (line2_end[2] - line2_start[2])

    return distance([x1, y1, z1], [x2, y2, z2])