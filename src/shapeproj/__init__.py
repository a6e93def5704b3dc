"""shapeproj — reproject shapely geometries between spatial references."""

from shapeproj._version import __version__
from shapeproj.core.dispatch import transform_geometry
from shapeproj.core.srs import SpatialReference, UnitSystem
from shapeproj.core.transform import CoordinateTransform
from shapeproj.errors import (
    ProjectionDomainError,
    ShapeprojError,
    SpatialReferenceError,
    StreamReadError,
    UnsupportedGeometryError,
)
from shapeproj.io.prj import read_prj
from shapeproj.utils.srs import parse_srs, reproject

__all__ = [
    "__version__",
    "CoordinateTransform",
    "SpatialReference",
    "UnitSystem",
    "transform_geometry",
    "read_prj",
    "parse_srs",
    "reproject",
    "ShapeprojError",
    "UnsupportedGeometryError",
    "SpatialReferenceError",
    "ProjectionDomainError",
    "StreamReadError",
]
