import pytest

from src.pricing_core.models.domain import Coordinate
from src.pricing_core.services.geospatial import (
    haversine_km,
    point_in_polygon,
    polygon_bounds,
    within_radius,
)

SQUARE = (
    Coordinate(0.0, 0.0),
    Coordinate(0.0, 10.0),
    Coordinate(10.0, 10.0),
    Coordinate(10.0, 0.0),
)


def test_haversine_zero_distance():
    assert haversine_km(51.5, -0.12, 51.5, -0.12) == pytest.approx(0.0)


def test_haversine_one_degree_of_latitude():
    assert haversine_km(50.0, -1.0, 51.0, -1.0) == pytest.approx(111.195, abs=0.01)


def test_haversine_london_to_edinburgh():
    assert haversine_km(51.5074, -0.1278, 55.9533, -3.1883) == pytest.approx(534, abs=5)


def test_within_radius_is_inclusive():
    center = Coordinate(50.0, -1.0)
    edge = Coordinate(51.0, -1.0)
    radius = haversine_km(50.0, -1.0, 51.0, -1.0)
    assert within_radius(edge, center, radius)
    assert not within_radius(edge, center, radius - 0.001)


@pytest.mark.parametrize(
    ("lat", "lon", "expected"),
    [
        (5.0, 5.0, True),
        (0.5, 9.5, True),
        (15.0, 5.0, False),
        (5.0, -1.0, False),
        (-5.0, -5.0, False),
    ],
)
def test_point_in_polygon_square(lat, lon, expected):
    assert point_in_polygon(lat, lon, SQUARE) is expected


def test_point_in_polygon_concave_notch():
    # U shape opening to the north; the notch is outside.
    ring = (
        Coordinate(0.0, 0.0),
        Coordinate(10.0, 0.0),
        Coordinate(10.0, 3.0),
        Coordinate(2.0, 3.0),
        Coordinate(2.0, 7.0),
        Coordinate(10.0, 7.0),
        Coordinate(10.0, 10.0),
        Coordinate(0.0, 10.0),
    )
    assert point_in_polygon(5.0, 1.5, ring)
    assert point_in_polygon(1.0, 5.0, ring)
    assert not point_in_polygon(5.0, 5.0, ring)


def test_closed_ring_matches_open_ring():
    closed = SQUARE + (SQUARE[0],)
    assert point_in_polygon(5.0, 5.0, closed) is point_in_polygon(5.0, 5.0, SQUARE)
    assert point_in_polygon(11.0, 5.0, closed) is point_in_polygon(11.0, 5.0, SQUARE)


def test_polygon_bounds():
    box = polygon_bounds(SQUARE)
    assert (box.north, box.south, box.east, box.west) == (10.0, 0.0, 10.0, 0.0)
