"""Tests for the RT90 2.5 gon V projection."""

import math

import pytest

from skane_departures.adapters.skanetrafiken_api.rt90 import (
    RT90_CENTRAL_MERIDIAN,
    RT90_FALSE_EASTING,
    RT90_FALSE_NORTHING,
    GridPoint,
    geodetic_to_grid,
    grid_to_geodetic,
    grid_to_point,
    point_to_grid,
)
from skane_departures.domain.models import Point

METERS_PER_DEGREE = 111_320.0

SAMPLE_POSITIONS = [
    pytest.param(55.6090, 13.0002, id="malmo-c"),
    pytest.param(55.7047, 13.1910, id="lund"),
    pytest.param(56.0465, 12.6945, id="helsingborg"),
    pytest.param(55.4295, 13.8200, id="ystad"),
    pytest.param(56.0294, 14.1567, id="kristianstad"),
    pytest.param(59.3293, 18.0686, id="stockholm"),
    pytest.param(67.8558, 20.2253, id="kiruna"),
]

SAMPLE_GRID_POINTS = [
    pytest.param(6167946.0, 1323245.0, id="malmo-c"),
    pytest.param(6178000.5, 1335000.25, id="near-lund"),
    pytest.param(6213000.0, 1395000.0, id="central-skane"),
    pytest.param(6580822.0, 1628182.0, id="stockholm"),
]


def _ground_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Approximate distance in meters between two nearby positions."""
    d_north = (lat2 - lat1) * METERS_PER_DEGREE
    d_east = (lon2 - lon1) * METERS_PER_DEGREE * math.cos(math.radians(lat1))
    return math.hypot(d_north, d_east)


class TestForwardProjection:
    """Tests for WGS84 to grid."""

    def test_when_on_central_meridian_then_easting_is_false_easting(self) -> None:
        """Given a point on the central meridian, when projecting, then easting is the offset."""
        grid = geodetic_to_grid(56.0, RT90_CENTRAL_MERIDIAN)

        assert grid.easting == pytest.approx(RT90_FALSE_EASTING, abs=0.001)

    def test_when_on_equator_at_central_meridian_then_northing_is_false_northing(self) -> None:
        """Given the grid origin, when projecting, then northing is the false northing."""
        grid = geodetic_to_grid(0.0, RT90_CENTRAL_MERIDIAN)

        assert grid.northing == pytest.approx(RT90_FALSE_NORTHING, abs=0.001)

    def test_when_projecting_malmo_c_then_lands_near_published_grid_position(self) -> None:
        """Given Malmö C in WGS84, when projecting, then it is close to the feed's X/Y."""
        grid = geodetic_to_grid(55.6090, 13.0002)

        assert grid.northing == pytest.approx(6167946, abs=500)
        assert grid.easting == pytest.approx(1323245, abs=500)

    def test_when_west_of_central_meridian_then_easting_is_smaller(self) -> None:
        """Given points either side of the central meridian, then eastings are ordered."""
        west = geodetic_to_grid(56.0, 13.0)
        east = geodetic_to_grid(56.0, 18.0)

        assert west.easting < RT90_FALSE_EASTING < east.easting

    def test_result_is_rounded_to_millimeters(self) -> None:
        """Given any position, when projecting, then coordinates have millimeter resolution."""
        grid = geodetic_to_grid(55.7047, 13.1910)

        assert round(grid.northing, 3) == grid.northing
        assert round(grid.easting, 3) == grid.easting


class TestReferencePositions:
    """Tests pinning the projection to independently computed grid positions."""

    @pytest.mark.parametrize(
        ("latitude", "longitude", "northing", "easting"),
        [
            pytest.param(55.609, 13.0002, 6167970.821, 1323245.978, id="malmo"),
            pytest.param(67.85, 20.22, 7535154.213, 1685716.406, id="kiruna"),
        ],
    )
    def test_forward_matches_reference(
        self, latitude: float, longitude: float, northing: float, easting: float
    ) -> None:
        """Given a WGS84 position, when projecting, then the reference X/Y is hit to 1 mm."""
        grid = geodetic_to_grid(latitude, longitude)

        assert grid.northing == pytest.approx(northing, abs=0.0015)
        assert grid.easting == pytest.approx(easting, abs=0.0015)

    @pytest.mark.parametrize(
        ("latitude", "longitude", "northing", "easting"),
        [
            pytest.param(55.609, 13.0002, 6167970.821, 1323245.978, id="malmo"),
            pytest.param(67.85, 20.22, 7535154.213, 1685716.406, id="kiruna"),
        ],
    )
    def test_inverse_matches_reference(
        self, latitude: float, longitude: float, northing: float, easting: float
    ) -> None:
        """Given a reference X/Y, when converting back, then the WGS84 position is recovered."""
        result = grid_to_geodetic(GridPoint(northing=northing, easting=easting))

        assert result[0] == pytest.approx(latitude, abs=1e-7)
        assert result[1] == pytest.approx(longitude, abs=1e-7)


class TestRoundTrip:
    """Round trips must agree within 0.3 m inside the projection's region."""

    @pytest.mark.parametrize(("latitude", "longitude"), SAMPLE_POSITIONS)
    def test_forward_then_inverse_recovers_position(
        self, latitude: float, longitude: float
    ) -> None:
        """Given a WGS84 position, when projecting and back, then it is recovered."""
        grid = geodetic_to_grid(latitude, longitude)
        lat2, lon2 = grid_to_geodetic(grid)

        assert _ground_distance(latitude, longitude, lat2, lon2) < 0.3

    @pytest.mark.parametrize(("northing", "easting"), SAMPLE_GRID_POINTS)
    def test_inverse_then_forward_recovers_grid_point(
        self, northing: float, easting: float
    ) -> None:
        """Given a grid position, when converting to WGS84 and back, then it is recovered."""
        latitude, longitude = grid_to_geodetic(GridPoint(northing=northing, easting=easting))
        grid = geodetic_to_grid(latitude, longitude)

        assert math.hypot(grid.northing - northing, grid.easting - easting) < 0.3

    @pytest.mark.parametrize(("latitude", "longitude"), SAMPLE_POSITIONS)
    def test_round_trip_through_micro_degree_points(
        self, latitude: float, longitude: float
    ) -> None:
        """Given a micro-degree point, when going through the grid, then it is recovered."""
        point = Point.from_degrees(latitude, longitude)

        recovered = grid_to_point(point_to_grid(point))

        assert (
            _ground_distance(
                point.latitude, point.longitude, recovered.latitude, recovered.longitude
            )
            < 0.3
        )

    @pytest.mark.parametrize(("northing", "easting"), SAMPLE_GRID_POINTS)
    def test_round_trip_of_integer_wire_values(self, northing: float, easting: float) -> None:
        """Given feed integer X/Y, when converted to a point and back, then within 0.3 m."""
        x, y = GridPoint(northing=northing, easting=easting).to_wire()

        grid = point_to_grid(grid_to_point(GridPoint(northing=float(x), easting=float(y))))

        assert math.hypot(grid.northing - x, grid.easting - y) < 0.3


class TestGridPoint:
    """Tests for the wire quantization boundary."""

    def test_to_wire_rounds_to_nearest_meter(self) -> None:
        """Given sub-meter grid values, when quantizing, then they round to whole meters."""
        grid = GridPoint(northing=6167946.6, easting=1323245.4)

        assert grid.to_wire() == (6167947, 1323245)

    def test_projection_keeps_sub_meter_precision(self) -> None:
        """Given a projected point, then the fractional meters are not discarded."""
        grid = geodetic_to_grid(55.6090, 13.0002)
        x, y = grid.to_wire()

        assert abs(grid.northing - x) <= 0.5
        assert abs(grid.easting - y) <= 0.5
        assert isinstance(grid.northing, float)
