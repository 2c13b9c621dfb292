"""Planar and 3D geometry: orientation, centroids, radial sorting, simplification, distances and segment intersection."""

__version__ = "0.1.0"