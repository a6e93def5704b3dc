"""Exception hierarchy for shapeproj."""

from __future__ import annotations


class ShapeprojError(Exception):
    """Base class for all shapeproj errors."""


class UnsupportedGeometryError(ShapeprojError, TypeError):
    """Geometry type outside the supported 2D set.

    Attributes:
        geom_type: Name of the offending type, e.g. "GeometryCollection"
            or "LineString Z".
    """

    def __init__(self, geom_type: str) -> None:
        self.geom_type = geom_type
        super().__init__(f"unsupported geometry type: {geom_type}")


class SpatialReferenceError(ShapeprojError, ValueError):
    """A spatial reference could not be built, parsed or serialized."""


class ProjectionDomainError(ShapeprojError, ValueError):
    """The projection engine rejected a coordinate.

    Attributes:
        x, y: First input coordinate that failed, if known.
    """

    def __init__(
        self, message: str, x: float | None = None, y: float | None = None
    ) -> None:
        self.x = x
        self.y = y
        if x is not None and y is not None:
            message = f"{message} (at x={x!r}, y={y!r})"
        super().__init__(message)


class StreamReadError(ShapeprojError, OSError):
    """Reading a projection definition stream failed."""
