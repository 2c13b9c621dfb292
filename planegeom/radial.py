"""Radial ordering of coordinates around a focal point."""

from __future__ import annotations

from typing import List, Sequence

from planegeom.orientation import Orientation, orientation_index


def radial_less(
    focal_point: Sequence[float], v1: Sequence[float], v2: Sequence[float]
) -> bool:
    """Return True if ``v1`` sorts before ``v2`` radially around ``focal_point``.

    The angle is checked first: counter-clockwise is greater and clockwise
    is lesser.  Collinear coordinates are ordered by distance from the
    focal point, the nearer one being lesser.
    """
    orient = orientation_index(focal_point, v1, v2)
    if orient is Orientation.COUNTER_CLOCKWISE:
        return False
    if orient is Orientation.CLOCKWISE:
        return True

    dxp = v1[0] - focal_point[0]
    dyp = v1[1] - focal_point[1]
    dxq = v2[0] - focal_point[0]
    dyq = v2[1] - focal_point[1]
    return dxp * dxp + dyp * dyp < dxq * dxq + dyq * dyq


class _RadialKey:
    __slots__ = ("focal", "coord")

    def __init__(self, focal: Sequence[float], coord: Sequence[float]) -> None:
        self.focal = focal
        self.coord = coord

    def __lt__(self, other: "_RadialKey") -> bool:
        return radial_less(self.focal, self.coord, other.coord)


def radial_sort(
    coord_data: Sequence[float], focal_point: Sequence[float], stride: int = 2
) -> List[float]:
    """Return the flat coordinates sorted radially around ``focal_point``."""
    if stride < 2:
        raise ValueError(f"stride must be at least 2, got {stride}")
    if len(coord_data) % stride:
        raise ValueError("coordinate data length is not a multiple of the stride")
    coords = [list(coord_data[start:start + stride]) for start in range(0, len(coord_data), stride)]
    coords.sort(key=lambda coord: _RadialKey(focal_point, coord))
    return [ordinate for coord in coords for ordinate in coord]