"""Spatial reference helpers and one-shot reprojection."""

from __future__ import annotations

from typing import Any

from pyproj import CRS
from shapely.geometry.base import BaseGeometry

from shapeproj.core.srs import SpatialReference
from shapeproj.core.transform import CoordinateTransform


def parse_srs(srs_input: Any) -> SpatialReference | None:
    """Parse a spatial reference from various input formats.

    Args:
        srs_input: EPSG string ("EPSG:25832") or integer code, WKT string,
                   proj4 string, a pyproj.CRS or a SpatialReference.

    Returns:
        SpatialReference or None.
    """
    if srs_input is None:
        return None
    if isinstance(srs_input, SpatialReference):
        return srs_input
    if isinstance(srs_input, CRS):
        return SpatialReference(srs_input)
    return SpatialReference.from_user_input(srs_input)


def reproject(
    geom: BaseGeometry | None,
    src_srs: Any,
    dst_srs: Any,
) -> BaseGeometry | None:
    """Reproject a single geometry from one spatial reference to another.

    Builds a throwaway CoordinateTransform; keep one around instead when
    reprojecting many geometries between the same pair.

    Args:
        geom: Geometry to reproject.
        src_srs: Source spatial reference (anything parse_srs accepts).
        dst_srs: Target spatial reference.

    Returns:
        Reprojected geometry.
    """
    src = parse_srs(src_srs)
    dst = parse_srs(dst_srs)
    if src is None or dst is None:
        raise ValueError("reproject requires both a source and a target spatial reference")
    return CoordinateTransform(src, dst).reproject(geom)
