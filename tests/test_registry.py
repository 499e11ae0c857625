import pytest

from src.pricing_core.data.registry import AreaRegistry, build_default_registry, get_registry
from src.pricing_core.models.domain import (
    Airport,
    AirportFees,
    BoundaryBox,
    Coordinate,
    Holiday,
    PolygonExclusionZone,
    RadiusExclusionZone,
)


def test_get_registry_is_cached():
    assert get_registry() is get_registry()


def test_default_registry_contents():
    registry = build_default_registry()
    assert len(registry.airports) == 16
    assert len(registry.zones) == 8
    assert registry.max_service_distance_miles == 300
    assert [zone.name for zone in registry.exclusion_zones] == [
        "Northern Scotland Highlands",
        "Outer Hebrides",
        "Orkney Islands",
        "Shetland Islands",
    ]


def test_region_indexes():
    registry = get_registry()
    assert registry.airport_codes("London") == ("LHR", "LGW", "LTN", "STN", "LCY")
    assert registry.airport_codes("Northern Ireland") == ("BFS", "BHD")
    assert registry.zone_keys("London") == ("CONGESTION_CHARGE", "ULEZ", "DARTFORD_CROSSING")
    assert registry.zone_keys("Birmingham") == ("BIRMINGHAM_CLEAN_AIR", "M6_TOLL")
    assert registry.zone_keys("Scotland") == ()
    assert registry.airport_codes() == tuple(registry.airports)


def test_polygon_bounds_precomputed():
    bounds = get_registry().polygon_bounds["Northern Scotland Highlands"]
    assert (bounds.north, bounds.south, bounds.east, bounds.west) == (58.7, 57.2, -2.8, -6.0)


def test_lookup_misses_return_none():
    registry = get_registry()
    assert registry.get_airport("ZZZ") is None
    assert registry.get_zone("NOPE") is None
    assert registry.get_equipment_fee("jetpack") is None


def test_equipment_fees():
    registry = get_registry()
    assert registry.get_equipment_fee("baby_seat") == pytest.approx(5.0)
    assert registry.get_equipment_fee("WHEELCHAIR") == pytest.approx(10.0)


def test_registry_tables_are_read_only():
    registry = get_registry()
    with pytest.raises(TypeError):
        registry.airports["NEW"] = registry.airports["LHR"]


def test_duplicate_airport_codes_rejected():
    airport = Airport(
        name="Somewhere",
        code="SMW",
        boundaries=BoundaryBox(north=51.1, south=51.0, east=0.1, west=0.0),
        fees=AirportFees(pickup=1.0, dropoff=1.0),
    )
    with pytest.raises(ValueError):
        AreaRegistry(
            national_boundary=BoundaryBox(north=52.0, south=50.0, east=1.0, west=-1.0),
            serviced_islands=(),
            exclusion_zones=(),
            airports=(airport, airport),
            zones={},
            max_service_distance_miles=300,
        )


@pytest.mark.parametrize(
    ("north", "south", "east", "west"),
    [(50.0, 51.0, 1.0, 0.0), (51.0, 51.0, 1.0, 0.0), (51.0, 50.0, 0.0, 1.0)],
)
def test_boundary_box_invariants(north, south, east, west):
    with pytest.raises(ValueError):
        BoundaryBox(north=north, south=south, east=east, west=west)


def test_exclusion_zone_invariants():
    with pytest.raises(ValueError):
        PolygonExclusionZone(name="Line", ring=(Coordinate(0, 0), Coordinate(1, 1)), message="")
    with pytest.raises(ValueError):
        RadiusExclusionZone(name="Negative", center=Coordinate(0, 0), radius_km=-1, message="")


def test_non_fixed_holiday_needs_year():
    with pytest.raises(ValueError):
        Holiday(name="Floating", month=4, day=1, fixed_date=False)
