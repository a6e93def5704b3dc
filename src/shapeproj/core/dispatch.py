"""Geometry transform dispatcher — rebuild a geometry with new coordinates.

Walks a shapely geometry of one of the supported 2D types, passes each
coordinate sequence through a coordinate function and assembles a new
geometry of the same shape. Part order, ring order and point counts are
preserved exactly.
"""

from __future__ import annotations

from functools import singledispatch
from typing import Callable

import numpy as np
import shapely
from shapely.geometry import (
    LinearRing,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)
from shapely.geometry.base import BaseGeometry

from shapeproj.errors import UnsupportedGeometryError

# func(x, y) -> (x, y); x and y are float64 arrays of equal length.
CoordFunc = Callable[[np.ndarray, np.ndarray], tuple[np.ndarray, np.ndarray]]

_SUPPORTED = (Point, LineString, MultiLineString, Polygon, MultiPolygon)


def transform_geometry(
    geom: BaseGeometry | None, func: CoordFunc
) -> BaseGeometry | None:
    """Apply a coordinate function to every vertex of a geometry.

    Args:
        geom: Point, LineString, MultiLineString, Polygon or MultiPolygon
            (2D). ``None`` and empty geometries are returned unchanged.
        func: Called once per coordinate sequence with X and Y arrays;
            must return X and Y arrays of the same length. Exceptions it
            raises propagate to the caller.

    Returns:
        New geometry of the same type and structure.

    Raises:
        UnsupportedGeometryError: For any other type, or for geometries
            with Z or M coordinates. Nothing is transformed in that case.
    """
    if geom is None:
        return None
    _check_supported(geom)
    if geom.is_empty:
        return geom
    return _transform(geom, func)


def _check_supported(geom: object) -> None:
    # LinearRing subclasses LineString but is not a standalone value here.
    if not isinstance(geom, _SUPPORTED) or isinstance(geom, LinearRing):
        raise UnsupportedGeometryError(_type_name(geom))
    if geom.has_z or geom.has_m:
        raise UnsupportedGeometryError(_type_name(geom))


def _type_name(geom: object) -> str:
    if not isinstance(geom, BaseGeometry):
        return type(geom).__name__
    suffix = ("Z" if geom.has_z else "") + ("M" if geom.has_m else "")
    return f"{geom.geom_type} {suffix}" if suffix else geom.geom_type


def _transform_coords(coords, func: CoordFunc) -> np.ndarray:
    """Transform one coordinate sequence into an (N, 2) array."""
    xy = np.asarray(coords, dtype=np.float64).reshape(-1, 2)
    new_x, new_y = func(xy[:, 0].copy(), xy[:, 1].copy())
    new_x = np.asarray(new_x, dtype=np.float64).reshape(-1)
    new_y = np.asarray(new_y, dtype=np.float64).reshape(-1)
    if len(new_x) != len(xy) or len(new_y) != len(xy):
        raise ValueError(
            f"Coordinate function returned {len(new_x)}/{len(new_y)} values "
            f"for {len(xy)} coordinates"
        )
    return np.column_stack([new_x, new_y])


@singledispatch
def _sequence_lengths(geom) -> list[int]:
    raise UnsupportedGeometryError(_type_name(geom))


@_sequence_lengths.register
def _(geom: Point) -> list[int]:
    return [len(geom.coords)]


@_sequence_lengths.register
def _(geom: LineString) -> list[int]:
    return [len(geom.coords)]


@_sequence_lengths.register
def _(geom: Polygon) -> list[int]:
    if geom.is_empty:
        return []
    rings = [geom.exterior, *geom.interiors]
    return [len(ring.coords) for ring in rings]


@_sequence_lengths.register
def _(geom: MultiLineString) -> list[int]:
    return [n for part in geom.geoms for n in _sequence_lengths(part)]


@_sequence_lengths.register
def _(geom: MultiPolygon) -> list[int]:
    return [n for part in geom.geoms for n in _sequence_lengths(part)]


def _transform(geom: BaseGeometry, func: CoordFunc) -> BaseGeometry:
    # shapely hands over every coordinate in part/ring order; split it back
    # into sequences so func sees one ring or line at a time. Empty parts
    # hold no coordinates and stay in place.
    lengths = [n for n in _sequence_lengths(geom) if n]

    def apply(coords: np.ndarray) -> np.ndarray:
        if sum(lengths) != len(coords):
            raise ValueError(
                f"Expected {sum(lengths)} coordinates, shapely supplied {len(coords)}"
            )
        out = np.empty((len(coords), 2), dtype=np.float64)
        start = 0
        for n in lengths:
            out[start:start + n] = _transform_coords(coords[start:start + n], func)
            start += n
        return out

    return shapely.transform(geom, apply)
