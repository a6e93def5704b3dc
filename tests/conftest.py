"""Shared test fixtures."""

import pytest
from shapely.geometry import (
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)

from shapeproj.core.srs import SpatialReference

# Saint Paul / Minneapolis area, lon/lat degrees
MSP_SHELL = [
    (-93.30, 44.90),
    (-93.00, 44.90),
    (-93.00, 45.05),
    (-93.30, 45.05),
    (-93.30, 44.90),
]
MSP_HOLE = [
    (-93.20, 44.95),
    (-93.10, 44.95),
    (-93.10, 45.00),
    (-93.20, 44.95),
]


@pytest.fixture
def wgs84() -> SpatialReference:
    return SpatialReference.from_epsg(4326)


@pytest.fixture
def utm15() -> SpatialReference:
    """WGS 84 / UTM zone 15N (metres)."""
    return SpatialReference.from_epsg(32615)


@pytest.fixture
def point() -> Point:
    return Point(-93.09, 44.94)


@pytest.fixture
def line() -> LineString:
    return LineString([(-93.09, 44.94), (-93.26, 44.98)])


@pytest.fixture
def polygon() -> Polygon:
    return Polygon(MSP_SHELL, [MSP_HOLE])


@pytest.fixture
def multi_line() -> MultiLineString:
    return MultiLineString([
        [(-93.09, 44.94), (-93.26, 44.98)],
        [(-93.10, 45.00), (-93.15, 45.02), (-93.20, 45.04)],
    ])


@pytest.fixture
def multi_polygon() -> MultiPolygon:
    return MultiPolygon([
        Polygon(MSP_SHELL, [MSP_HOLE]),
        Polygon([(-92.9, 44.8), (-92.8, 44.8), (-92.8, 44.9), (-92.9, 44.8)]),
    ])


@pytest.fixture(params=["point", "line", "polygon", "multi_line", "multi_polygon"])
def any_geom(request):
    """Each of the supported geometry types in turn."""
    return request.getfixturevalue(request.param)
