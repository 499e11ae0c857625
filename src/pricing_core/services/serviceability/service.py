"""Location and route serviceability checks."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ...data.registry import AreaRegistry, get_registry
from ...data.service_area import OUTSIDE_SERVICE_AREA_MESSAGE
from ...models.domain import (
    Coordinate,
    ExclusionResult,
    ExclusionZone,
    PolygonExclusionZone,
    RadiusExclusionZone,
    ServiceabilityResult,
)
from ..geospatial import point_in_polygon, within_radius

logger = logging.getLogger(__name__)


def is_in_national_boundary(coord: Coordinate, *, registry: Optional[AreaRegistry] = None) -> bool:
    registry = registry or get_registry()
    return registry.national_boundary.contains(coord.latitude, coord.longitude)


def _zone_contains(zone: ExclusionZone, coord: Coordinate, registry: AreaRegistry) -> bool:
    match zone:
        case PolygonExclusionZone():
            bounds = registry.polygon_bounds.get(zone.name)
            if bounds is not None and not bounds.contains(coord.latitude, coord.longitude):
                return False
            return point_in_polygon(coord.latitude, coord.longitude, zone.ring)
        case RadiusExclusionZone():
            return within_radius(coord, zone.center, zone.radius_km)
        case _:
            raise TypeError(f"Unsupported exclusion zone type '{type(zone).__name__}'.")


def is_in_excluded_area(coord: Coordinate, *, registry: Optional[AreaRegistry] = None) -> ExclusionResult:
    """Return the first exclusion zone (in declaration order) containing ``coord``."""

    registry = registry or get_registry()
    for zone in registry.exclusion_zones:
        if _zone_contains(zone, coord, registry):
            return ExclusionResult(excluded=True, message=zone.message, zone_name=zone.name)
    return ExclusionResult(excluded=False)


def _on_serviced_island(coord: Coordinate, registry: AreaRegistry) -> bool:
    return any(within_radius(coord, island.center, island.radius_km) for island in registry.serviced_islands)


def is_location_serviceable(coord: Coordinate, *, registry: Optional[AreaRegistry] = None) -> ServiceabilityResult:
    """Decide whether a single coordinate can be booked.

    Points outside the national rectangle are only accepted on a serviced
    island. Inside the rectangle, exclusion zones override acceptance.
    """

    registry = registry or get_registry()
    if not is_in_national_boundary(coord, registry=registry):
        if _on_serviced_island(coord, registry):
            return ServiceabilityResult(serviceable=True)
        logger.debug("Rejected (%s, %s): outside service area", coord.latitude, coord.longitude)
        return ServiceabilityResult(serviceable=False, message=OUTSIDE_SERVICE_AREA_MESSAGE)

    excluded = is_in_excluded_area(coord, registry=registry)
    if excluded.excluded:
        logger.debug("Rejected (%s, %s): inside '%s'", coord.latitude, coord.longitude, excluded.zone_name)
        return ServiceabilityResult(serviceable=False, message=excluded.message)
    return ServiceabilityResult(serviceable=True)


def _round_miles(distance_miles: float) -> int:
    return int(Decimal(str(distance_miles)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def is_route_serviceable(
    pickup: Coordinate,
    dropoff: Coordinate,
    distance_miles: Optional[float] = None,
    *,
    registry: Optional[AreaRegistry] = None,
) -> ServiceabilityResult:
    """Check both endpoints and, when a distance is supplied, the journey length cap.

    With ``distance_miles`` omitted the cap is not checked at all.
    """

    registry = registry or get_registry()
    pickup_check = is_location_serviceable(pickup, registry=registry)
    if not pickup_check.serviceable:
        return ServiceabilityResult(serviceable=False, message=f"Pickup location: {pickup_check.message}")

    dropoff_check = is_location_serviceable(dropoff, registry=registry)
    if not dropoff_check.serviceable:
        return ServiceabilityResult(serviceable=False, message=f"Dropoff location: {dropoff_check.message}")

    limit = registry.max_service_distance_miles
    if distance_miles is not None and distance_miles > limit:
        logger.debug("Rejected route of %.1f miles (limit %s)", distance_miles, limit)
        return ServiceabilityResult(
            serviceable=False,
            message=(
                f"We don't currently support journeys longer than {limit:,.0f} miles. "
                f"Your journey is approximately {_round_miles(distance_miles)} miles."
            ),
        )
    return ServiceabilityResult(serviceable=True)
