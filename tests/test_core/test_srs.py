"""Tests for SpatialReference and unit detection."""

import warnings

import pytest
from pyproj import CRS
from pyproj.exceptions import CRSError

from shapeproj.core.srs import SpatialReference, UnitSystem, proj4_is_degrees
from shapeproj.errors import SpatialReferenceError


class TestProj4IsDegrees:
    @pytest.mark.parametrize(
        "proj4",
        [
            "+proj=longlat +datum=WGS84 +no_defs",
            "+proj=latlong +ellps=GRS80",
        ],
    )
    def test_geographic(self, proj4):
        assert proj4_is_degrees(proj4)

    @pytest.mark.parametrize(
        "proj4",
        [
            "+proj=utm +zone=15 +datum=WGS84 +units=m",
            "+proj=merc +lon_0=0 +ellps=WGS84",
        ],
    )
    def test_projected(self, proj4):
        assert not proj4_is_degrees(proj4)


class TestConstructors:
    def test_from_epsg(self):
        sr = SpatialReference.from_epsg(4326)
        assert sr.crs == CRS.from_epsg(4326)

    def test_from_proj4(self):
        sr = SpatialReference.from_proj4("+proj=utm +zone=15 +datum=WGS84")
        assert sr.crs.is_projected

    def test_from_wkt(self):
        wkt = CRS.from_epsg(32615).to_wkt()
        sr = SpatialReference.from_wkt(wkt)
        assert sr.is_same(SpatialReference.from_epsg(32615))

    def test_from_user_input_passthrough(self, wgs84):
        assert SpatialReference.from_user_input(wgs84) is wgs84

    def test_from_user_input_string(self):
        sr = SpatialReference.from_user_input("EPSG:32615")
        assert sr.is_same(SpatialReference.from_epsg(32615))

    def test_malformed_wkt(self):
        with pytest.raises(SpatialReferenceError):
            SpatialReference.from_wkt("PROJCS[not really")

    def test_malformed_proj4(self):
        with pytest.raises(SpatialReferenceError):
            SpatialReference.from_proj4("+proj=nonsense_projection")

    def test_unknown_epsg(self):
        with pytest.raises(SpatialReferenceError):
            SpatialReference.from_epsg(999999)

    def test_requires_crs(self):
        with pytest.raises(TypeError, match="pyproj.CRS"):
            SpatialReference("EPSG:4326")


class TestEquality:
    def test_same(self, wgs84):
        assert wgs84.is_same(SpatialReference.from_user_input("EPSG:4326"))
        assert wgs84 == SpatialReference.from_epsg(4326)

    def test_different(self, wgs84, utm15):
        assert not wgs84.is_same(utm15)
        assert wgs84 != utm15

    def test_not_equal_to_other_types(self, wgs84):
        assert wgs84 != "EPSG:4326"


class TestProj4Export:
    def test_to_proj4(self, utm15):
        proj4 = utm15.to_proj4()
        assert "+proj=utm" in proj4
        assert "+zone=15" in proj4

    def test_export_warning_suppressed(self, utm15):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            utm15.to_proj4()

    def test_export_failure(self, wgs84, monkeypatch):
        def fail(self, *args, **kwargs):
            raise CRSError("CRS cannot be converted to a PROJ string.")

        monkeypatch.setattr(CRS, "to_proj4", fail)
        with pytest.raises(SpatialReferenceError, match="PROJ string"):
            wgs84.to_proj4()

    def test_engineering_crs_has_no_proj4(self):
        site = SpatialReference.from_wkt(
            'ENGCRS["Site grid",EDATUM["Site datum"],CS[Cartesian,2],'
            'AXIS["easting (X)",east,LENGTHUNIT["metre",1]],'
            'AXIS["northing (Y)",north,LENGTHUNIT["metre",1]]]'
        )
        with pytest.raises(SpatialReferenceError, match="PROJ string"):
            site.to_proj4()


class TestUnitSystem:
    def test_geographic_degrees(self, wgs84):
        assert wgs84.unit_system is UnitSystem.DEGREES
        assert wgs84.is_degrees

    def test_geographic_from_proj4(self):
        sr = SpatialReference.from_proj4("+proj=longlat +ellps=GRS80 +no_defs")
        assert sr.is_degrees

    def test_projected_linear(self, utm15):
        assert utm15.unit_system is UnitSystem.LINEAR
        assert not utm15.is_degrees

    def test_projected_feet(self):
        # NAD83 / New York Long Island (ftUS)
        sr = SpatialReference.from_epsg(2263)
        assert sr.unit_system is UnitSystem.LINEAR
