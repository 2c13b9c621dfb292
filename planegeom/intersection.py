"""Intersection of points and line segments in the plane."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple

Coord = Sequence[float]


class IntersectionType(IntEnum):
    """Kind of intersection found between two segments."""

    NO_INTERSECTION = 0
    POINT_INTERSECTION = 1
    COLLINEAR_INTERSECTION = 2

    def __str__(self) -> str:
        return _TYPE_LABELS[self]


_TYPE_LABELS = {
    IntersectionType.NO_INTERSECTION: "NoIntersection",
    IntersectionType.POINT_INTERSECTION: "PointIntersection",
    IntersectionType.COLLINEAR_INTERSECTION: "CollinearIntersection",
}


@dataclass(frozen=True)
class IntersectionResult:
    """Outcome of intersecting two segments.

    A point intersection holds one coordinate; a collinear intersection holds
    the two end points of the overlap; no intersection holds none.
    """

    intersection_type: IntersectionType
    intersections: Tuple[Tuple[float, ...], ...] = ()

    def __init__(
        self,
        intersection_type: IntersectionType,
        intersections: Iterable[Coord] = (),
    ) -> None:
        object.__setattr__(self, "intersection_type", IntersectionType(intersection_type))
        object.__setattr__(
            self, "intersections", tuple(tuple(coord) for coord in intersections)
        )

    @property
    def has_intersection(self) -> bool:
        """True unless the segments do not intersect."""
        return self.intersection_type is not IntersectionType.NO_INTERSECTION


@dataclass
class _IntersectionData:
    """Working state shared by the intersection strategies."""

    input_lines: Tuple[Tuple[Coord, ...], Tuple[Coord, ...]]
    intersection_points: List[List[float]] = field(
        default_factory=lambda: [[0.0, 0.0], [0.0, 0.0]]
    )
    intersection_type: IntersectionType = IntersectionType.NO_INTERSECTION
    is_proper: bool = False


class Strategy(ABC):
    """An algorithm for computing segment intersections."""

    @abstractmethod
    def _point_on_line(
        self, data: _IntersectionData, point: Coord, line_start: Coord, line_end: Coord
    ) -> None:
        """Fill ``data`` with the intersection of a point and a segment."""

    @abstractmethod
    def _line_on_line(
        self,
        data: _IntersectionData,
        line1_start: Coord,
        line1_end: Coord,
        line2_start: Coord,
        line2_end: Coord,
    ) -> None:
        """Fill ``data`` with the intersection of two segments."""


def point_intersects_line(
    strategy: Strategy, point: Coord, line_start: Coord, line_end: Coord
) -> bool:
    """Return True if ``point`` lies on the segment line_start->line_end."""
    data = _IntersectionData(input_lines=((line_start, line_end), ()))
    strategy._point_on_line(data, point, line_start, line_end)
    return data.intersection_type is not IntersectionType.NO_INTERSECTION


def line_intersects_line(
    strategy: Strategy,
    line1_start: Coord,
    line1_end: Coord,
    line2_start: Coord,
    line2_end: Coord,
) -> IntersectionResult:
    """Intersect the segment line1_start->line1_end with line2_start->line2_end."""
    data = _IntersectionData(
        input_lines=((line2_start, line2_end), (line1_start, line1_end))
    )
    strategy._line_on_line(data, line1_start, line1_end, line2_start, line2_end)

    if data.intersection_type is IntersectionType.POINT_INTERSECTION:
        points = data.intersection_points[:1]
    elif data.intersection_type is IntersectionType.COLLINEAR_INTERSECTION:
        points = data.intersection_points[:2]
    else:
        points = []
    return IntersectionResult(data.intersection_type, points)


def _div(numerator: float, denominator: float) -> float:
    """Floating point division that yields inf or nan instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _r_parameter(p1: Coord, p2: Coord, p: Coord) -> float:
    """Return the position of ``p`` along p1->p2: 0 at p1, 1 at p2."""
    # The larger delta is used for numerical stability and to cope with
    # vertical and horizontal segments.
    if abs(p2[0] - p1[0]) > abs(p2[1] - p1[1]):
        return _div(p[0] - p1[0], p2[0] - p1[0])
    return _div(p[1] - p1[1], p2[1] - p1[1])


def _same_xy(c1: Coord, c2: Coord) -> bool:
    return c1[0] == c2[0] and c1[1] == c2[1]


def _same_sign_nonzero(a: float, b: float) -> bool:
    return (a > 0 and b > 0) or (a < 0 and b < 0)


class NonRobustLineIntersector(Strategy):
    """Fast intersection computation that may misbehave in extreme cases."""

    def _point_on_line(
        self, data: _IntersectionData, point: Coord, line_start: Coord, line_end: Coord
    ) -> None:
        data.is_proper = False

        # Line through the segment as a*x + b*y + c = 0.
        a1 = line_end[1] - line_start[1]
        b1 = line_start[0] - line_end[0]
        c1 = line_end[0] * line_start[1] - line_start[0] * line_end[1]

        if a1 * point[0] + b1 * point[1] + c1 != 0:
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        dist = _r_parameter(line_start, line_end, point)
        if dist < 0.0 or dist > 1.0:
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        data.is_proper = not (_same_xy(point, line_start) or _same_xy(point, line_end))
        data.intersection_type = IntersectionType.POINT_INTERSECTION

    def _line_on_line(
        self,
        data: _IntersectionData,
        line1_start: Coord,
        line1_end: Coord,
        line2_start: Coord,
        line2_end: Coord,
    ) -> None:
        data.is_proper = False

        a1 = line1_end[1] - line1_start[1]
        b1 = line1_start[0] - line1_end[0]
        c1 = line1_end[0] * line1_start[1] - line1_start[0] * line1_end[1]

        r3 = a1 * line2_start[0] + b1 * line2_start[1] + c1
        r4 = a1 * line2_end[0] + b1 * line2_end[1] + c1

        # Both ends of line 2 on the same side of line 1: no intersection.
        if _same_sign_nonzero(r3, r4):
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        a2 = line2_end[1] - line2_start[1]
        b2 = line2_start[0] - line2_end[0]
        c2 = line2_end[0] * line2_start[1] - line2_start[0] * line2_end[1]

        r1 = a2 * line1_start[0] + b2 * line1_start[1] + c2
        r2 = a2 * line1_end[0] + b2 * line1_end[1] + c2

        if _same_sign_nonzero(r1, r2):
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        denom = a1 * b2 - a2 * b1
        if denom == 0:
            self._collinear(data, line1_start, line1_end, line2_start, line2_end)
            return

        point = [(b1 * c2 - b2 * c1) / denom, (a2 * c1 - a1 * c2) / denom]
        data.intersection_points[0] = point

        data.is_proper = not any(
            _same_xy(point, end) for end in (line1_start, line1_end, line2_start, line2_end)
        )
        data.intersection_type = IntersectionType.POINT_INTERSECTION

    @staticmethod
    def _collinear(
        data: _IntersectionData,
        line1_start: Coord,
        line1_end: Coord,
        line2_start: Coord,
        line2_end: Coord,
    ) -> None:
        r3 = _r_parameter(line1_start, line1_end, line2_start)
        r4 = _r_parameter(line1_start, line1_end, line2_end)
        # Orient line 2 in the same direction as line 1.
        if r3 < r4:
            q3, t3, q4, t4 = line2_start, r3, line2_end, r4
        else:
            q3, t3, q4, t4 = line2_end, r4, line2_start, r3

        if t3 > 1.0 or t4 < 0.0:
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        start = q3 if t3 > 0.0 else line1_start
        end = q4 if t4 < 1.0 else line1_end
        data.intersection_points[0] = [start[0], start[1]]
        data.intersection_points[1] = [end[0], end[1]]
        data.intersection_type = IntersectionType.COLLINEAR_INTERSECTION