import math

import pytest

from planegeom.point_centroid import (
    PointCentroidCalculator,
    multi_point_centroid,
    points_centroid,
    points_centroid_flat,
)

CASES = [
    ([[0.0, 0.0], [2.0, 2.0]], [1.0, 1.0]),
    ([[0.0, 0.0], [2.0, 0.0]], [1.0, 0.0]),
    ([[0.0, 0.0], [2.0, 0.0], [2.0, 2.0], [0.0, 2.0]], [1.0, 1.0]),
]


def test_no_coords_added_gives_nan():
    centroid = PointCentroidCalculator().centroid()
    assert len(centroid) == 2
    assert all(math.isnan(v) for v in centroid)


@pytest.mark.parametrize("points, expected", CASES)
def test_points_centroid(points, expected):
    assert points_centroid(points[0], *points[1:]) == expected


@pytest.mark.parametrize("points, expected", CASES)
def test_points_centroid_flat(points, expected):
    flat = [ordinate for point in points for ordinate in point]
    assert points_centroid_flat(2, flat) == expected


@pytest.mark.parametrize("points, expected", CASES)
def test_multi_point_centroid(points, expected):
    assert multi_point_centroid(points) == expected


@pytest.mark.parametrize("points, expected", CASES)
def test_add_each_point(points, expected):
    calc = PointCentroidCalculator()
    for point in points:
        calc.add_point(point)
    assert calc.centroid() == expected


def test_example_points_centroid():
    assert points_centroid([0, 0], [2, 0], [2, 2], [0, 2]) == [1.0, 1.0]


def test_example_calculator_over_flat_polygon():
    coords = [0, 0, 2, 0, 2, 2, 0, 2]
    calc = PointCentroidCalculator()
    for start in range(0, len(coords), 2):
        calc.add_coord(coords[start:start + 2])
    assert calc.centroid() == [1.0, 1.0]


def test_flat_with_wider_stride_ignores_extra_ordinates():
    data = [0.0, 0.0, 100.0, 2.0, 2.0, -50.0]
    assert points_centroid_flat(3, data) == [1.0, 1.0]