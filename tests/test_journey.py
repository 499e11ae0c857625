from datetime import datetime

import pytest

from src.pricing_core.models.domain import Coordinate
from src.pricing_core.services.journey import assess_journey
from src.pricing_core.services.time_pricing import PricingClass

WESTMINSTER = Coordinate(51.4995, -0.1248)
HEATHROW = Coordinate(51.47, -0.44)
PARIS = Coordinate(48.8566, 2.3522)

ROUTE = [
    {
        "distance": 25000.0,
        "steps": [
            {"geometry": {"coordinates": [[-0.1248, 51.4995], [-0.13, 51.50]]}},
            {"geometry": {"coordinates": [[-0.30, 51.48], [-0.44, 51.47]]}},
        ],
    }
]


def test_weekday_peak_journey_to_heathrow():
    result = assess_journey(
        WESTMINSTER,
        HEATHROW,
        datetime(2026, 10, 20, 8, 15),
        route_legs=ROUTE,
        distance_miles=16,
        vehicle_class="standard-saloon",
    )

    assert result.serviceable
    assert result.zones == ["CONGESTION_CHARGE", "ULEZ"]
    assert result.chargeable_zones == ["CONGESTION_CHARGE", "ULEZ"]
    assert result.pickup_airport is None
    assert result.dropoff_airport == "LHR"
    assert result.time_factor.pricing_class is PricingClass.WEEKDAY_PEAK
    assert result.time_factor.multiplier == pytest.approx(1.5)
    assert result.time_factor.surcharge == pytest.approx(3.54)


def test_saturday_electric_journey_has_no_chargeable_zones():
    result = assess_journey(
        HEATHROW,
        WESTMINSTER,
        datetime(2026, 10, 24, 9, 0),
        route_legs=ROUTE,
        vehicle_class="electric",
    )

    assert result.zones == ["CONGESTION_CHARGE", "ULEZ"]
    assert result.chargeable_zones == []
    assert result.pickup_airport == "LHR"
    assert result.time_factor.pricing_class is PricingClass.WEEKEND_STANDARD


def test_unserviceable_journey_stops_early():
    result = assess_journey(PARIS, HEATHROW, datetime(2026, 10, 20, 8), route_legs=ROUTE)

    assert not result.serviceable
    assert result.serviceability.message.startswith("Pickup location: ")
    assert result.zones == []
    assert result.time_factor is None


def test_journey_over_distance_cap():
    result = assess_journey(WESTMINSTER, HEATHROW, datetime(2026, 10, 20, 8), distance_miles=420.4)

    assert not result.serviceable
    assert "approximately 420 miles" in result.serviceability.message
