"""Tests for bounding box computation."""

import math

import pytest
from pydantic import ValidationError

from geobounds.geo import (
    EARTH_RADIUS_KM,
    DegenerateGeometryError,
    DomainError,
    bounding_box,
    bounds_for_query,
    compute_bounds,
)
from geobounds.models import BoundingBox, BoundsFailure, BoundsQuery, BoundsResult, Location

SF_LAT = 37.7749295
SF_LON = -122.4194155


class TestBoundingBox:
    """Tests for bounding box computation."""

    def test_small_radius_at_origin(self):
        """A 1km box at (0, 0) should be symmetric with the expected span."""
        bbox = bounding_box(0, 0, 1)

        expected_span = 2 * 1 / EARTH_RADIUS_KM * (180 / math.pi)
        assert bbox.north - bbox.south == pytest.approx(expected_span)
        assert bbox.north == pytest.approx(-bbox.south)
        assert bbox.east == pytest.approx(-bbox.west)
        # At the equator a degree of longitude is as long as one of latitude
        assert bbox.east - bbox.west == pytest.approx(expected_span)

    def test_san_francisco_100km(self):
        """100km around San Francisco spans a degree or two on each axis."""
        bbox = bounding_box(SF_LAT, SF_LON, 100)

        assert bbox.south < SF_LAT < bbox.north
        assert bbox.west < SF_LON < bbox.east
        assert 1 < bbox.north - bbox.south < 2.5
        assert 1 < bbox.east - bbox.west < 2.5

    def test_longitude_span_wider_than_latitude_away_from_equator(self):
        bbox = bounding_box(SF_LAT, SF_LON, 10)

        lat_span = bbox.north - bbox.south
        lon_span = bbox.east - bbox.west
        assert lon_span == pytest.approx(lat_span / math.cos(math.radians(SF_LAT)))

    def test_near_pole(self):
        """Bounding box near a pole should have a wide longitude range."""
        bbox = bounding_box(89, 0, 10)

        assert bbox.east - bbox.west > 1

    @pytest.mark.parametrize(
        "lat,lon,radius",
        [
            (0, 0, 0.01),
            (SF_LAT, SF_LON, 1),
            (-33.8568, 151.2153, 50),
            (60, 10, 500),
            (-45, -170, 100),
            (85, 0, 100),
        ],
    )
    def test_center_inside_box(self, lat, lon, radius):
        bbox = bounding_box(lat, lon, radius)
        assert bbox.contains(lat, lon)

    @pytest.mark.parametrize("lat,lon", [(0, 0), (SF_LAT, SF_LON), (-60, 120)])
    def test_doubling_radius_doubles_spans(self, lat, lon):
        small = bounding_box(lat, lon, 25)
        large = bounding_box(lat, lon, 50)

        assert large.north - large.south == pytest.approx(2 * (small.north - small.south))
        assert large.east - large.west == pytest.approx(2 * (small.east - small.west))

    def test_deterministic(self):
        assert bounding_box(SF_LAT, SF_LON, 100) == bounding_box(SF_LAT, SF_LON, 100)


class TestDegenerateGeometry:
    """Inputs whose box cannot be a plain rectangle."""

    @pytest.mark.parametrize("lat", [90, -90])
    @pytest.mark.parametrize("radius", [0.01, 1, 1000])
    def test_pole_fails(self, lat, radius):
        with pytest.raises(DegenerateGeometryError):
            bounding_box(lat, 0, radius)

    def test_south_pole_at_antimeridian_fails(self):
        result = compute_bounds(-90, -180, 0.01)
        assert not result.ok
        assert result.failure.kind == "degenerate"

    def test_box_past_pole_fails(self):
        """A circle reaching over the pole cannot be a rectangle."""
        with pytest.raises(DegenerateGeometryError):
            bounding_box(89.999, 0, 1)

    def test_east_past_antimeridian_fails(self):
        """(0, 180) with 1000km would need east > 180; this is rejected, not clamped."""
        result = compute_bounds(0, 180, 1000)
        assert not result.ok
        assert result.failure.kind == "degenerate"
        assert "antimeridian" in result.failure.detail

    def test_west_past_antimeridian_fails(self):
        with pytest.raises(DegenerateGeometryError):
            bounding_box(0, -180, 1)


class TestDomain:
    """Inputs outside their valid range."""

    @pytest.mark.parametrize(
        "lat,lon,radius",
        [
            (90.5, 0, 1),
            (-91, 0, 1),
            (0, 180.1, 1),
            (0, -181, 1),
            (0, 0, 0),
            (0, 0, -5),
            (math.nan, 0, 1),
            (0, math.inf, 1),
            (0, 0, math.inf),
            ("37.7", 0, 1),
            (True, 0, 1),
            (0, 0, None),
        ],
    )
    def test_out_of_domain_raises(self, lat, lon, radius):
        with pytest.raises(DomainError):
            bounding_box(lat, lon, radius)

    def test_compute_bounds_reports_domain_failure(self):
        result = compute_bounds(0, 0, -1)
        assert not result.ok
        assert result.box is None
        assert result.failure.kind == "domain"

    def test_compute_bounds_never_raises_for_garbage(self):
        result = compute_bounds("north", None, object())
        assert result.failure.kind == "domain"


class TestBoundsResult:
    """Tests for the result and box value types."""

    def test_success(self):
        result = compute_bounds(SF_LAT, SF_LON, 10)
        assert result.ok
        assert result.failure is None
        assert isinstance(result.box, BoundingBox)

    def test_query(self):
        query = BoundsQuery(location=Location(lat=SF_LAT, lon=SF_LON), radius_km=10)
        assert bounds_for_query(query) == compute_bounds(SF_LAT, SF_LON, 10)

    def test_requires_exactly_one_outcome(self):
        with pytest.raises(ValidationError):
            BoundsResult()
        with pytest.raises(ValidationError):
            BoundsResult(
                box=BoundingBox(south=0, west=0, north=1, east=1),
                failure=BoundsFailure(kind="domain", detail="x"),
            )

    def test_box_rejects_inverted_ranges(self):
        with pytest.raises(ValidationError):
            BoundingBox(south=1, west=0, north=0, east=1)
        with pytest.raises(ValidationError):
            BoundingBox(south=0, west=10, north=1, east=-10)

    def test_geojson_ordering(self):
        box = BoundingBox(south=1, west=2, north=3, east=4)

        assert box.bbox == [2, 1, 4, 3]
        assert box.ring() == [[2, 1], [2, 3], [4, 3], [4, 1], [2, 1]]
