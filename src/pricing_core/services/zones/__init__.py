"""Airport and special-zone services."""

from .service import (
    get_airport_fee,
    get_airports_near,
    get_zones_for_route,
    is_at_airport,
    is_zone_active,
    is_zone_chargeable,
    is_zone_exempt,
    iter_route_coordinates,
)

__all__ = [
    "is_at_airport",
    "get_airports_near",
    "get_airport_fee",
    "is_zone_active",
    "is_zone_exempt",
    "is_zone_chargeable",
    "iter_route_coordinates",
    "get_zones_for_route",
]
