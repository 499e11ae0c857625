"""Combined eligibility, zone and time-factor assessment for a single journey."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Sequence

from ..data.registry import AreaRegistry, get_registry
from ..models.domain import Coordinate, ServiceabilityResult
from ..schemas.route import RouteLeg
from .serviceability import is_route_serviceable
from .time_pricing import TimeFactor, get_time_factor
from .zones import get_airports_near, get_zones_for_route, is_zone_chargeable

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class JourneyAssessment:
    serviceability: ServiceabilityResult
    zones: list[str] = field(default_factory=list)
    chargeable_zones: list[str] = field(default_factory=list)
    pickup_airport: Optional[str] = None
    dropoff_airport: Optional[str] = None
    time_factor: Optional[TimeFactor] = None

    @property
    def serviceable(self) -> bool:
        return self.serviceability.serviceable


def assess_journey(
    pickup: Coordinate,
    dropoff: Coordinate,
    when: datetime,
    route_legs: Sequence[RouteLeg | dict[str, Any]] = (),
    distance_miles: Optional[float] = None,
    vehicle_class: Optional[str] = None,
    *,
    registry: Optional[AreaRegistry] = None,
) -> JourneyAssessment:
    """Run serviceability, zone, airport and time-factor checks in booking order.

    Unserviceable journeys stop after the first check. ``zones`` lists every
    zone the route geometry enters; ``chargeable_zones`` is the subset that is
    active at ``when`` and not exempt for ``vehicle_class``.
    """

    registry = registry or get_registry()
    verdict = is_route_serviceable(pickup, dropoff, distance_miles, registry=registry)
    if not verdict.serviceable:
        logger.info("Journey rejected: %s", verdict.message)
        return JourneyAssessment(serviceability=verdict)

    zones = get_zones_for_route(route_legs, registry=registry)
    chargeable = [
        key for key in zones if is_zone_chargeable(key, when, vehicle_class, registry=registry)
    ]
    pickup_airports = get_airports_near(pickup, registry=registry)
    dropoff_airports = get_airports_near(dropoff, registry=registry)

    return JourneyAssessment(
        serviceability=verdict,
        zones=zones,
        chargeable_zones=chargeable,
        pickup_airport=pickup_airports[0] if pickup_airports else None,
        dropoff_airport=dropoff_airports[0] if dropoff_airports else None,
        time_factor=get_time_factor(when),
    )
