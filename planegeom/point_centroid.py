"""Centroid of a set of points: the average of their X and Y ordinates."""

from __future__ import annotations

from typing import Iterable, List, Sequence


class PointCentroidCalculator:
    """Accumulates points and reports their centroid at any time."""

    def __init__(self) -> None:
        self._count = 0
        self._sum_x = 0.0
        self._sum_y = 0.0

    def add_point(self, point: Sequence[float]) -> None:
        """Add a point given as a coordinate sequence."""
        self.add_coord(point)

    def add_coord(self, coord: Sequence[float]) -> None:
        """Add a coordinate; only the first two ordinates are used."""
        self._count += 1
        self._sum_x += coord[0]
        self._sum_y += coord[1]

    def centroid(self) -> List[float]:
        """Return the current centroid, or ``[nan, nan]`` if nothing was added."""
        if self._count == 0:
            return [float("nan"), float("nan")]
        return [self._sum_x / self._count, self._sum_y / self._count]


def points_centroid(point: Sequence[float], *args: Sequence[float]) -> List[float]:
    """Return the centroid of one or more points."""
    calc = PointCentroidCalculator()
    calc.add_coord(point)
    for extra in args:
        calc.add_coord(extra)
    return calc.centroid()


def multi_point_centroid(points: Iterable[Sequence[float]]) -> List[float]:
    """Return the centroid of a collection of points."""
    calc = PointCentroidCalculator()
    for point in points:
        calc.add_coord(point)
    return calc.centroid()


def points_centroid_flat(stride: int, point_data: Sequence[float]) -> List[float]:
    """Return the centroid of the points held in a flat coordinate array.

    ``stride`` is the number of ordinates per point; X and Y are taken to be
    the first two ordinates of each.
    """
    calc = PointCentroidCalculator()
    for start in range(0, len(point_data), stride):
        calc.add_coord(point_data[start:start + 2])
    return calc.centroid()