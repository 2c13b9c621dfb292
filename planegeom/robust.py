"""Robust intersection of points and line segments in the plane."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from planegeom.intersection import IntersectionType, Strategy, _IntersectionData
from planegeom.orientation import Orientation, orientation_index

Coord = Sequence[float]


def _same_xy(c1: Coord, c2: Coord) -> bool:
    return c1[0] == c2[0] and c1[1] == c2[1]


def _within_bounds(point: Coord, line_start: Coord, line_end: Coord) -> bool:
    """Return True if ``point`` lies inside the envelope of the segment."""
    min_x, max_x = sorted((line_start[0], line_end[0]))
    min_y, max_y = sorted((line_start[1], line_end[1]))
    return min_x <= point[0] <= max_x and min_y <= point[1] <= max_y


def _envelopes_overlap(
    line1_start: Coord, line1_end: Coord, line2_start: Coord, line2_end: Coord
) -> bool:
    """Return True if the envelopes of the two segments intersect."""
    min1_x, max1_x = sorted((line1_start[0], line1_end[0]))
    min1_y, max1_y = sorted((line1_start[1], line1_end[1]))
    min2_x, max2_x = sorted((line2_start[0], line2_end[0]))
    min2_y, max2_y = sorted((line2_start[1], line2_end[1]))
    return not (
        min2_x > max1_x or max2_x < min1_x or min2_y > max1_y or max2_y < min1_y
    )


def _hcoords_intersection(
    line1_start: Coord, line1_end: Coord, line2_start: Coord, line2_end: Coord
) -> Optional[List[float]]:
    """Intersect the two lines using homogeneous coordinates.

    Returns None when round-off makes the result undefined.
    """
    p_x = line1_start[1] - line1_end[1]
    p_y = line1_end[0] - line1_start[0]
    p_w = line1_start[0] * line1_end[1] - line1_end[0] * line1_start[1]

    q_x = line2_start[1] - line2_end[1]
    q_y = line2_end[0] - line2_start[0]
    q_w = line2_start[0] * line2_end[1] - line2_end[0] * line2_start[1]

    x = p_y * q_w - q_y * p_w
    y = q_x * p_w - p_x * q_w
    w = p_x * q_y - q_x * p_y

    if w == 0:
        return None
    x_int = x / w
    y_int = y / w
    if not (math.isfinite(x_int) and math.isfinite(y_int)):
        return None
    return [x_int, y_int]


def _central_endpoint_intersection(
    line1_start: Coord, line1_end: Coord, line2_start: Coord, line2_end: Coord
) -> List[float]:
    """Return the input endpoint closest to the average of all four endpoints."""
    points = (line1_start, line1_end, line2_start, line2_end)
    centre_x = sum(p[0] for p in points) / len(points)
    centre_y = sum(p[1] for p in points) / len(points)
    nearest = min(
        points, key=lambda p: math.hypot(p[0] - centre_x, p[1] - centre_y)
    )
    return [nearest[0], nearest[1]]


def _point_or_collinear(
    line_start: Coord, line_end: Coord, intersection1: bool, intersection2: bool
) -> IntersectionType:
    if _same_xy(line_start, line_end) and not intersection1 and not intersection2:
        return IntersectionType.POINT_INTERSECTION
    return IntersectionType.COLLINEAR_INTERSECTION


def _collinear_intersection(
    data: _IntersectionData,
    line1_start: Coord,
    line1_end: Coord,
    line2_start: Coord,
    line2_end: Coord,
) -> IntersectionType:
    l2s_in_l1 = _within_bounds(line2_start, line1_start, line1_end)
    l2e_in_l1 = _within_bounds(line2_end, line1_start, line1_end)
    l1s_in_l2 = _within_bounds(line1_start, line2_start, line2_end)
    l1e_in_l2 = _within_bounds(line1_end, line2_start, line2_end)

    points = data.intersection_points
    if l1s_in_l2 and l1e_in_l2:
        points[0], points[1] = list(line1_start), list(line1_end)
        return IntersectionType.COLLINEAR_INTERSECTION
    if l2s_in_l1 and l2e_in_l1:
        points[0], points[1] = list(line2_start), list(line2_end)
        return IntersectionType.COLLINEAR_INTERSECTION
    if l2s_in_l1 and l1s_in_l2:
        points[0], points[1] = list(line2_start), list(line1_start)
        return _point_or_collinear(line2_start, line1_start, l2e_in_l1, l1e_in_l2)
    if l2s_in_l1 and l1e_in_l2:
        points[0], points[1] = list(line2_start), list(line1_end)
        return _point_or_collinear(line2_start, line1_end, l2e_in_l1, l1s_in_l2)
    if l2e_in_l1 and l1s_in_l2:
        points[0], points[1] = list(line2_end), list(line1_start)
        return _point_or_collinear(line2_end, line1_start, l2s_in_l1, l1e_in_l2)
    if l2e_in_l1 and l1e_in_l2:
        points[0], points[1] = list(line2_end), list(line1_end)
        return _point_or_collinear(line2_end, line1_end, l2s_in_l1, l1s_in_l2)
    return IntersectionType.NO_INTERSECTION


def _normalize_to_env_centre(
    line1_start: List[float],
    line1_end: List[float],
    line2_start: List[float],
    line2_end: List[float],
) -> List[float]:
    """Shift the coordinates in place so their common envelope is centred on
    the origin, and return the shift."""
    l1_min_x, l1_max_x = sorted((line1_start[0], line1_end[0]))
    l1_min_y, l1_max_y = sorted((line1_start[1], line1_end[1]))
    l2_min_x, l2_max_x = sorted((line2_start[0], line2_end[0]))
    l2_min_y, l2_max_y = sorted((line2_start[1], line2_end[1]))

    int_min_x = l1_min_x if l1_min_x > l2_min_x else l2_min_x
    int_max_x = l1_max_x if l1_max_x < l2_max_x else l2_max_x
    int_min_y = l1_min_y if l1_min_y > l2_min_y else l2_min_y
    int_max_y = l1_max_y if l1_max_y < l2_max_y else l2_max_y

    norm = [(int_min_x + int_max_x) / 2.0, (int_min_y + int_max_y) / 2.0]
    for coord in (line1_start, line1_end, line2_start, line2_end):
        coord[0] -= norm[0]
        coord[1] -= norm[1]
    return norm


def _intersection_with_normalization(
    line1_start: Coord, line1_end: Coord, line2_start: Coord, line2_end: Coord
) -> List[float]:
    n1s = [line1_start[0], line1_start[1]]
    n1e = [line1_end[0], line1_end[1]]
    n2s = [line2_start[0], line2_start[1]]
    n2e = [line2_end[0], line2_end[1]]
    norm = _normalize_to_env_centre(n1s, n1e, n2s, n2e)

    point = _hcoords_intersection(n1s, n1e, n2s, n2e)
    if point is None:
        point = _central_endpoint_intersection(n1s, n1e, n2s, n2e)
    point[0] += norm[0]
    point[1] += norm[1]
    return point


def _in_segment_envelopes(data: _IntersectionData, point: Coord) -> bool:
    (a_start, a_end), (b_start, b_end) = data.input_lines
    return _within_bounds(point, a_start, a_end) and _within_bounds(
        point, b_start, b_end
    )


def _intersection(
    data: _IntersectionData,
    line1_start: Coord,
    line1_end: Coord,
    line2_start: Coord,
    line2_end: Coord,
) -> List[float]:
    point = _intersection_with_normalization(line1_start, line1_end, line2_start, line2_end)
    # Round-off may place the point outside the segments' envelopes.
    if not _in_segment_envelopes(data, point):
        point = _central_endpoint_intersection(
            line1_start, line1_end, line2_start, line2_end
        )
    return point


class RobustLineIntersector(Strategy):
    """Slower intersection computation giving consistent results in extreme cases."""

    def _point_on_line(
        self, data: _IntersectionData, point: Coord, line_start: Coord, line_end: Coord
    ) -> None:
        data.is_proper = False
        # The envelope test is cheaper than the orientation test, so do it first.
        if (
            _within_bounds(point, line_start, line_end)
            and orientation_index(line_start, line_end, point) is Orientation.COLLINEAR
            and orientation_index(line_end, line_start, point) is Orientation.COLLINEAR
        ):
            data.is_proper = not (
                _same_xy(point, line_start) or _same_xy(point, line_end)
            )
            data.intersection_type = IntersectionType.POINT_INTERSECTION
            return
        data.intersection_type = IntersectionType.NO_INTERSECTION

    def _line_on_line(
        self,
        data: _IntersectionData,
        line1_start: Coord,
        line1_end: Coord,
        line2_start: Coord,
        line2_end: Coord,
    ) -> None:
        data.is_proper = False

        if not _envelopes_overlap(line1_start, line1_end, line2_start, line2_end):
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        o2s = orientation_index(line1_start, line1_end, line2_start)
        o2e = orientation_index(line1_start, line1_end, line2_end)
        if (o2s > 0 and o2e > 0) or (o2s < 0 and o2e < 0):
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        o1s = orientation_index(line2_start, line2_end, line1_start)
        o1e = orientation_index(line2_start, line2_end, line1_end)
        if (o1s > 0 and o1e > 0) or (o1s < 0 and o1e < 0):
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        collinear = Orientation.COLLINEAR
        if o2s == collinear and o2e == collinear and o1s == collinear and o1e == collinear:
            data.intersection_type = _collinear_intersection(
                data, line1_start, line1_end, line2_start, line2_end
            )
            return

        # Not collinear, so there is a single intersection point.  If it is an
        # endpoint, copy that endpoint exactly rather than computing it.
        if collinear in (o2s, o2e, o1s, o1e):
            data.is_proper = False
            if _same_xy(line1_start, line2_start) or _same_xy(line1_start, line2_end):
                chosen = line1_start
            elif _same_xy(line1_end, line2_start) or _same_xy(line1_end, line2_end):
                chosen = line1_end
            elif o2s == collinear:
                chosen = line2_start
            elif o2e == collinear:
                chosen = line2_end
            elif o1s == collinear:
                chosen = line1_start
            else:
                chosen = line1_end
            data.intersection_points[0] = [chosen[0], chosen[1]]
        else:
            data.is_proper = True
            data.intersection_points[0] = _intersection(
                data, line1_start, line1_end, line2_start, line2_end
            )

        data.intersection_type = IntersectionType.POINT_INTERSECTION