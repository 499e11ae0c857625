"""Read-only registry of service-area, airport and special-zone data."""

from __future__ import annotations

import functools
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from ..config import settings
from ..models.domain import (
    Airport,
    BoundaryBox,
    ExclusionZone,
    PolygonExclusionZone,
    Region,
    ServicedIsland,
    SpecialZone,
)
from ..services.geospatial import polygon_bounds
from . import service_area, special_zones


def _group_by_region(items: Iterable[tuple[str, Region]]) -> Mapping[str, tuple[str, ...]]:
    grouped: dict[str, list[str]] = {}
    for key, region in items:
        grouped.setdefault(region, []).append(key)
    return MappingProxyType({region: tuple(keys) for region, keys in grouped.items()})


class AreaRegistry:
    """Lookup tables keyed by airport code, zone key and region.

    Region indexes and polygon bounding boxes are derived once here so that
    lookups never rebuild them.
    """

    def __init__(
        self,
        *,
        national_boundary: BoundaryBox,
        serviced_islands: Iterable[ServicedIsland],
        exclusion_zones: Iterable[ExclusionZone],
        airports: Iterable[Airport],
        zones: Mapping[str, SpecialZone],
        max_service_distance_miles: float,
        equipment_fees: Optional[Mapping[str, float]] = None,
    ) -> None:
        self.national_boundary = national_boundary
        self.serviced_islands: tuple[ServicedIsland, ...] = tuple(serviced_islands)
        self.exclusion_zones: tuple[ExclusionZone, ...] = tuple(exclusion_zones)
        self.max_service_distance_miles = max_service_distance_miles
        self.equipment_fees = MappingProxyType(dict(equipment_fees or {}))

        airport_map: dict[str, Airport] = {}
        for airport in airports:
            if airport.code in airport_map:
                raise ValueError(f"duplicate airport code '{airport.code}'")
            airport_map[airport.code] = airport
        self.airports: Mapping[str, Airport] = MappingProxyType(airport_map)
        self.zones: Mapping[str, SpecialZone] = MappingProxyType(dict(zones))

        self.airports_by_region = _group_by_region((a.code, a.region) for a in self.airports.values())
        self.zones_by_region = _group_by_region((key, z.region) for key, z in self.zones.items())

        names = [zone.name for zone in self.exclusion_zones]
        if len(set(names)) != len(names):
            raise ValueError("exclusion zone names must be unique")
        self.polygon_bounds: Mapping[str, BoundaryBox] = MappingProxyType(
            {
                zone.name: polygon_bounds(zone.ring)
                for zone in self.exclusion_zones
                if isinstance(zone, PolygonExclusionZone)
            }
        )

    def get_airport(self, code: str) -> Optional[Airport]:
        return self.airports.get(code)

    def get_zone(self, zone_key: str) -> Optional[SpecialZone]:
        return self.zones.get(zone_key)

    def airport_codes(self, region: Optional[str] = None) -> tuple[str, ...]:
        """Airport codes in declaration order, optionally narrowed to one region."""
        if not region:
            return tuple(self.airports)
        return self.airports_by_region.get(region, ())

    def zone_keys(self, region: Optional[str] = None) -> tuple[str, ...]:
        if not region:
            return tuple(self.zones)
        return self.zones_by_region.get(region, ())

    def get_equipment_fee(self, kind: str) -> Optional[float]:
        return self.equipment_fees.get(kind.upper())


def build_default_registry() -> AreaRegistry:
    return AreaRegistry(
        national_boundary=service_area.UK_BOUNDARY,
        serviced_islands=service_area.SERVICED_ISLANDS,
        exclusion_zones=service_area.EXCLUDED_AREAS,
        airports=special_zones.AIRPORTS,
        zones=special_zones.SPECIAL_ZONES,
        max_service_distance_miles=settings.max_service_distance_miles,
        equipment_fees=service_area.EQUIPMENT_FEES,
    )


@functools.lru_cache(maxsize=1)
def get_registry() -> AreaRegistry:
    """Process-wide registry built from the static tables on first use."""
    return build_default_registry()
