"""Reprojection core: dispatcher, spatial references, coordinate transform."""

from shapeproj.core.dispatch import transform_geometry
from shapeproj.core.srs import SpatialReference, UnitSystem
from shapeproj.core.transform import CoordinateTransform

__all__ = ["transform_geometry", "SpatialReference", "UnitSystem", "CoordinateTransform"]
