"""CoordinateTransform — reproject geometries between two spatial references."""

from __future__ import annotations

import logging

import numpy as np
from pyproj import CRS, Transformer
from pyproj.exceptions import ProjError
from shapely.geometry.base import BaseGeometry

from shapeproj.core.dispatch import transform_geometry
from shapeproj.core.srs import SpatialReference
from shapeproj.errors import ProjectionDomainError, SpatialReferenceError

logger = logging.getLogger(__name__)


class CoordinateTransform:
    """Reprojection from one spatial reference to another.

    Built once per pair of spatial references and reused for any number
    of geometries. When both sides describe the same coordinate system the
    transform is the identity: no projection handles are created and
    ``reproject`` hands back its input.

    The projection engine works in radians for geographic systems, so
    coordinates on a degrees side are converted on the way in and out.

    Examples:
        >>> from shapely.geometry import Point
        >>> wgs84 = SpatialReference.from_epsg(4326)
        >>> utm15 = SpatialReference.from_epsg(32615)
        >>> ct = CoordinateTransform(wgs84, utm15)
        >>> p = ct.reproject(Point(-93.09, 44.94))
    """

    def __init__(self, src: SpatialReference, dst: SpatialReference) -> None:
        self.src = src
        self.dst = dst
        self.is_identity = src.is_same(dst)
        self.input_degrees = False
        self.output_degrees = False
        self._transformer: Transformer | None = None

        if self.is_identity:
            logger.debug("Identity transform for %s", src.name)
            return

        src_proj, self.input_degrees = _projection_handle(src)
        dst_proj, self.output_degrees = _projection_handle(dst)
        try:
            self._transformer = Transformer.from_crs(
                src_proj, dst_proj, always_xy=True
            )
        except ProjError as e:
            raise SpatialReferenceError(str(e)) from e

        logger.debug(
            "Transform %s (degrees=%s) -> %s (degrees=%s)",
            src.name,
            self.input_degrees,
            dst.name,
            self.output_degrees,
        )

    def reproject(self, geom: BaseGeometry | None) -> BaseGeometry | None:
        """Reproject one geometry.

        Args:
            geom: Point, LineString, MultiLineString, Polygon or
                MultiPolygon, or ``None``.

        Returns:
            The input itself for an identity transform, otherwise a new
            geometry of the same shape.

        Raises:
            UnsupportedGeometryError: Geometry type not supported.
            ProjectionDomainError: A coordinate is outside the domain of
                the projection. No partial result is produced.
        """
        if self.is_identity:
            return geom
        return transform_geometry(geom, self.transform_coords)

    def transform_coords(
        self, x: np.ndarray, y: np.ndarray
    ) -> tuple[np.ndarray, np.ndarray]:
        """Transform coordinate arrays, in source units, to destination units."""
        if self.is_identity:
            return np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)

        in_x = np.asarray(x, dtype=np.float64)
        in_y = np.asarray(y, dtype=np.float64)
        if self.input_degrees:
            in_x, in_y = np.radians(in_x), np.radians(in_y)

        try:
            out_x, out_y = self._transformer.transform(
                in_x, in_y, radians=True, errcheck=True
            )
        except ProjError as e:
            # A batch failure only pins down the coordinate when there is one
            if in_x.size == 1:
                raise ProjectionDomainError(
                    str(e), x=float(np.ravel(x)[0]), y=float(np.ravel(y)[0])
                ) from e
            raise ProjectionDomainError(str(e)) from e

        out_x = np.asarray(out_x, dtype=np.float64)
        out_y = np.asarray(out_y, dtype=np.float64)
        bad = ~(np.isfinite(out_x) & np.isfinite(out_y))
        if bad.any():
            i = int(np.argmax(bad))
            raise ProjectionDomainError(
                "Coordinate outside the projection domain",
                x=float(np.ravel(x)[i]),
                y=float(np.ravel(y)[i]),
            )

        if self.output_degrees:
            out_x, out_y = np.degrees(out_x), np.degrees(out_y)
        return out_x, out_y

    def inverse(self) -> CoordinateTransform:
        """Transform in the opposite direction (dst -> src)."""
        return CoordinateTransform(self.dst, self.src)

    def __repr__(self) -> str:
        return f"CoordinateTransform({self.src.name!r} -> {self.dst.name!r})"


def _projection_handle(sr: SpatialReference) -> tuple[CRS, bool]:
    """Build the engine-side handle for one side and its degrees flag."""
    proj4 = sr.to_proj4()
    try:
        handle = CRS.from_proj4(proj4)
    except ProjError as e:
        raise SpatialReferenceError(str(e)) from e
    return handle, sr.is_degrees
