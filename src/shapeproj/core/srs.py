"""SpatialReference — thin wrapper around pyproj.CRS.

Keeps the quirks of the CRS library (warnings on PROJ string export,
its own exception types) out of the reprojection core.
"""

from __future__ import annotations

import enum
import warnings
from typing import Any

from pyproj import CRS
from pyproj.exceptions import CRSError

from shapeproj.errors import SpatialReferenceError

# Emitted by pyproj on every PROJ string export; not a failure.
_PROJ4_EXPORT_WARNING = "You will likely lose important projection information"


class UnitSystem(enum.Enum):
    """Native unit of a spatial reference's horizontal axes."""

    DEGREES = "degrees"
    RADIANS = "radians"
    LINEAR = "linear"


def proj4_is_degrees(proj4: str) -> bool:
    """Legacy unit check on a PROJ string: geographic means degrees."""
    return "longlat" in proj4 or "latlong" in proj4


class SpatialReference:
    """Immutable description of a coordinate system.

    Examples:
        >>> wgs84 = SpatialReference.from_epsg(4326)
        >>> wgs84.is_degrees
        True
        >>> wgs84.is_same(SpatialReference.from_user_input("EPSG:4326"))
        True
    """

    __slots__ = ("_crs",)

    def __init__(self, crs: CRS) -> None:
        if not isinstance(crs, CRS):
            raise TypeError(f"Expected pyproj.CRS, got {type(crs).__name__}")
        self._crs = crs

    # ── Constructors ────────────────────────────────────────────────

    @classmethod
    def from_wkt(cls, wkt: str) -> SpatialReference:
        """Build from well-known text."""
        try:
            return cls(CRS.from_wkt(wkt))
        except CRSError as e:
            raise SpatialReferenceError(str(e)) from e

    @classmethod
    def from_proj4(cls, proj4: str) -> SpatialReference:
        """Build from a PROJ string such as "+proj=longlat +datum=WGS84"."""
        try:
            return cls(CRS.from_proj4(proj4))
        except CRSError as e:
            raise SpatialReferenceError(str(e)) from e

    @classmethod
    def from_epsg(cls, code: int | str) -> SpatialReference:
        try:
            return cls(CRS.from_epsg(code))
        except CRSError as e:
            raise SpatialReferenceError(str(e)) from e

    @classmethod
    def from_user_input(cls, value: Any) -> SpatialReference:
        """Build from anything pyproj understands (EPSG string, WKT, PROJ, ...)."""
        if isinstance(value, SpatialReference):
            return value
        try:
            return cls(CRS.from_user_input(value))
        except CRSError as e:
            raise SpatialReferenceError(str(e)) from e

    # ── Accessors ───────────────────────────────────────────────────

    @property
    def crs(self) -> CRS:
        """The underlying pyproj CRS."""
        return self._crs

    @property
    def name(self) -> str:
        return self._crs.name

    def is_same(self, other: SpatialReference) -> bool:
        """Semantic equality of the two coordinate systems."""
        return self._crs.equals(other._crs)

    def to_proj4(self) -> str:
        """Serialize to PROJ string form.

        Raises:
            SpatialReferenceError: If the CRS has no PROJ string equivalent.
        """
        with warnings.catch_warnings():
            warnings.filterwarnings(
                "ignore", message=_PROJ4_EXPORT_WARNING, category=UserWarning
            )
            try:
                return self._crs.to_proj4()
            except CRSError as e:
                raise SpatialReferenceError(str(e)) from e

    def to_wkt(self) -> str:
        try:
            return self._crs.to_wkt()
        except CRSError as e:
            raise SpatialReferenceError(str(e)) from e

    @property
    def unit_system(self) -> UnitSystem:
        """Unit of the horizontal axes.

        Read from the CRS axis metadata; CRS definitions without axis
        metadata fall back to matching "longlat"/"latlong" in the PROJ
        string.
        """
        axes = self._crs.axis_info[:2]
        if axes:
            unit = axes[0].unit_name.lower()
            if unit.startswith("degree"):
                return UnitSystem.DEGREES
            if unit.startswith("radian"):
                return UnitSystem.RADIANS
            return UnitSystem.LINEAR
        if proj4_is_degrees(self.to_proj4()):
            return UnitSystem.DEGREES
        return UnitSystem.LINEAR

    @property
    def is_degrees(self) -> bool:
        return self.unit_system is UnitSystem.DEGREES

    # ── Dunder methods ──────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpatialReference):
            return NotImplemented
        return self.is_same(other)

    def __repr__(self) -> str:
        return f"SpatialReference({self._crs.to_string()!r})"
