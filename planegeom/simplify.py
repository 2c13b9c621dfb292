"""Douglas-Peucker simplification of flat coordinate arrays."""

from __future__ import annotations

from typing import List, Sequence


def simplify_flat_coords(
    flat_coords: Sequence[float], threshold: float, stride: int
) -> List[int]:
    """Simplify a 2D line with the Douglas-Peucker algorithm.

    Returns the indexes of the kept points (point ``i`` starts at
    ``flat_coords[i * stride]``).  ``threshold`` is the largest distance a
    point may lie from the segment joining its kept neighbours and still be
    dropped.  The first and last points are always kept.
    """
    size = len(flat_coords) // stride
    if size < 3:
        return list(range(size))

    points = [flat_coords[start:start + stride] for start in range(0, size * stride, stride)]
    keep = [False] * size
    keep[0] = keep[-1] = True

    stack = [(0, size - 1)]
    while stack:
        start, end = stack.pop()
        a, b = points[start], points[end]

        max_dist = 0.0
        max_index = 0
        for index in range(start + 1, end):
            dist = _distance_from_segment_squared(a, b, points[index])
            if dist > max_dist:
                max_dist = dist
                max_index = index

        if max_dist > threshold * threshold:
            keep[max_index] = True
            stack.append((start, max_index))
            stack.append((max_index, end))

    return [index for index, kept in enumerate(keep) if kept]


def _distance_from_segment_squared(
    a: Sequence[float], b: Sequence[float], point: Sequence[float]
) -> float:
    x, y = a[0], a[1]
    dx = b[0] - x
    dy = b[1] - y

    if dx != 0 or dy != 0:
        t = ((point[0] - x) * dx + (point[1] - y) * dy) / (dx * dx + dy * dy)
        if t > 1:
            x, y = b[0], b[1]
        elif t > 0:
            x += dx * t
            y += dy * t

    dx = point[0] - x
    dy = point[1] - y
    return dx * dx + dy * dy