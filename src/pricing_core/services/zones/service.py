"""Airport and special-zone lookups for locations and routes."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterator, Literal, Optional, Sequence

from ...data.registry import AreaRegistry, get_registry
from ...models.domain import Coordinate
from ...schemas.route import RouteLeg, route_legs_adapter

logger = logging.getLogger(__name__)


def is_at_airport(coord: Coordinate, code: str, *, registry: Optional[AreaRegistry] = None) -> bool:
    airport = (registry or get_registry()).get_airport(code)
    if airport is None:
        return False
    return airport.boundaries.contains(coord.latitude, coord.longitude)


def get_airports_near(
    coord: Coordinate,
    region_filter: Optional[str] = None,
    *,
    registry: Optional[AreaRegistry] = None,
) -> list[str]:
    """Codes of every airport whose box contains ``coord``."""

    registry = registry or get_registry()
    return [
        code
        for code in registry.airport_codes(region_filter)
        if is_at_airport(coord, code, registry=registry)
    ]


def get_airport_fee(
    code: str,
    direction: Literal["pickup", "dropoff"],
    *,
    registry: Optional[AreaRegistry] = None,
) -> float:
    airport = (registry or get_registry()).get_airport(code)
    if airport is None:
        return 0.0
    return airport.fees.pickup if direction == "pickup" else airport.fees.dropoff


def is_zone_active(zone_key: str, when: datetime, *, registry: Optional[AreaRegistry] = None) -> bool:
    """Zones without operating hours are always active.

    Uses the wall-clock weekday and hour of ``when`` as given; no timezone
    conversion happens here. Unknown keys are never active.
    """

    zone = (registry or get_registry()).get_zone(zone_key)
    if zone is None:
        return False
    if zone.operating_hours is None:
        return True
    return zone.operating_hours.covers(when.weekday(), when.hour)


def is_zone_exempt(
    zone_key: str,
    vehicle_class: Optional[str],
    when: Optional[datetime] = None,
    *,
    registry: Optional[AreaRegistry] = None,
) -> bool:
    zone = (registry or get_registry()).get_zone(zone_key)
    if zone is None or zone.exemptions is None:
        return False
    if vehicle_class and vehicle_class.lower() in zone.exemptions.vehicles:
        return True
    if when is not None:
        return any(window.covers(when.weekday(), when.hour) for window in zone.exemptions.times)
    return False


def is_zone_chargeable(
    zone_key: str,
    when: datetime,
    vehicle_class: Optional[str] = None,
    *,
    registry: Optional[AreaRegistry] = None,
) -> bool:
    registry = registry or get_registry()
    return is_zone_active(zone_key, when, registry=registry) and not is_zone_exempt(
        zone_key, vehicle_class, when, registry=registry
    )


def iter_route_coordinates(route_legs: Sequence[RouteLeg | dict[str, Any]]) -> Iterator[Coordinate]:
    """Yield route points as ``Coordinate`` from provider ``[lng, lat]`` geometry."""

    legs = route_legs_adapter.validate_python(list(route_legs))
    for leg in legs:
        for step in leg.steps:
            for lng, lat, *_ in step.geometry.coordinates:
                yield Coordinate(latitude=lat, longitude=lng)


def get_zones_for_route(
    route_legs: Sequence[RouteLeg | dict[str, Any]],
    region_filter: Optional[str] = None,
    *,
    registry: Optional[AreaRegistry] = None,
) -> list[str]:
    """Keys of special zones any route point falls inside, each reported once.

    Operating hours and exemptions are not considered here.
    """

    registry = registry or get_registry()
    points = list(iter_route_coordinates(route_legs))
    matched: list[str] = []
    for zone_key in registry.zone_keys(region_filter):
        box = registry.zones[zone_key].boundaries
        if any(box.contains(point.latitude, point.longitude) for point in points):
            matched.append(zone_key)
    if matched:
        logger.debug("Route passes through zones: %s", ", ".join(matched))
    return matched
