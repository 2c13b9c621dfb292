# planegeom

Small, dependency-free computational geometry routines. Coordinates are plain
sequences (`(x, y)` or `(x, y, z)`); some functions take flat lists of
ordinates with a fixed stride instead.

## Installation

```
pip install planegeom
```

## Modules

- `planegeom.orientation` – the `Orientation` enum (`CLOCKWISE`, `COLLINEAR`,
  `COUNTER_CLOCKWISE`) and `orientation_index(vector_origin, vector_end, point)`,
  which evaluates the determinant exactly with rational arithmetic. NaN
  ordinates raise `ValueError`, infinite ones `OverflowError`.
- `planegeom.location` – the `Location` enum (`INTERIOR`, `BOUNDARY`,
  `EXTERIOR`, `NONE`); `symbol()` gives `'i'`, `'b'`, `'e'` or `'-'`.
- `planegeom.point_centroid` – `PointCentroidCalculator` (`add_point`,
  `add_coord`, `centroid`), plus `points_centroid(point, *others)`,
  `multi_point_centroid(points)` and `points_centroid_flat(stride, point_data)`.
  The centroid is the average of the X and Y ordinates; with no points it is
  `[nan, nan]`.
- `planegeom.radial` – `radial_less(focal_point, v1, v2)` and
  `radial_sort(coord_data, focal_point, stride=2)`, ordering coordinates by
  angle around a focal point (clockwise first) and, when collinear, by
  distance from it.
- `planegeom.simplify` – `simplify_flat_coords(flat_coords, threshold, stride)`,
  Douglas–Peucker simplification returning the indexes of the kept points.
- `planegeom.xyz` – 3D helpers: `vector_dot`, `vector_length`,
  `vector_normalize`, `distance` (2D when either Z is NaN), `equals`,
  `distance_point_to_line` and `distance_line_to_line`. The segment distances
  raise `ValueError` when NaN ordinates make the computation undefined.
- `planegeom.intersection` – `point_intersects_line` and
  `line_intersects_line`, which take a `Strategy` and return an
  `IntersectionResult` (`intersection_type`, `intersections`,
  `has_intersection`). `NonRobustLineIntersector` is the fast strategy.
- `planegeom.robust` – `RobustLineIntersector`, a slower strategy that gives
  consistent answers in near-degenerate cases.

## Examples

Centroid of a set of points:

```python
from planegeom.point_centroid import points_centroid_flat

points_centroid_flat(2, [0, 0, 2, 0, 2, 2, 0, 2])   # [1.0, 1.0]
```

Simplifying a polyline:

```python
from planegeom.simplify import simplify_flat_coords

coords = [0, 0, 0, 1, -1, 2, 0, 3, 0, 4, 1, 4, 2, 4.5, 3, 4, 3.5, 4, 4, 4]
simplify_flat_coords(coords, 0.5, 2)   # [0, 2, 4, 9]
```

Radial sorting around a focal point (a new list is returned):

```python
from planegeom.radial import radial_sort

coords = [10, 10, 20, 20, 20, 0, 30, 10, 0, 0, 1, 1]
radial_sort(coords, (10, 10), 2)
# [10, 10, 20, 20, 30, 10, 20, 0, 1, 1, 0, 0]
```

Segment intersection:

```python
from planegeom.intersection import IntersectionType, line_intersects_line
from planegeom.robust import RobustLineIntersector

result = line_intersects_line(RobustLineIntersector(), (10, 10), (20, 20), (10, 20), (20, 10))
result.intersection_type is IntersectionType.POINT_INTERSECTION   # True
result.intersections                                              # ((15.0, 15.0),)
```

3D distances:

```python
from planegeom.xyz import distance_line_to_line

distance_line_to_line((10, 0, 10), (10, 0, -10), (0, 0, 10), (0, 0, -10))   # 10.0
```

## What it does not do

There are no geometry classes (points, line strings, polygons) and no
reading or writing of geometry formats: every function works on plain
coordinate sequences or flat ordinate lists. The package is a library only
and has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```