"""Static service-area tables for the United Kingdom."""

from __future__ import annotations

from ..models.domain import (
    BoundaryBox,
    Coordinate,
    ExclusionZone,
    PolygonExclusionZone,
    RadiusExclusionZone,
    ServicedIsland,
)

# Mainland bounding rectangle.
UK_BOUNDARY = BoundaryBox(north=58.7, south=49.9, east=1.76, west=-8.65)

SERVICED_ISLANDS: tuple[ServicedIsland, ...] = (
    ServicedIsland(name="Isle of Wight", center=Coordinate(50.67, -1.31), radius_km=15.0),
    ServicedIsland(name="Anglesey", center=Coordinate(53.27, -4.32), radius_km=20.0),
)

# Declaration order decides which message wins when zones overlap.
EXCLUDED_AREAS: tuple[ExclusionZone, ...] = (
    PolygonExclusionZone(
        name="Northern Scotland Highlands",
        ring=(
            Coordinate(57.5, -6.0),
            Coordinate(58.7, -5.0),
            Coordinate(58.7, -3.0),
            Coordinate(57.5, -2.8),
            Coordinate(57.2, -4.5),
        ),
        message=(
            "We don't currently service the remote Scottish Highlands. "
            "Please select a location further south."
        ),
    ),
    RadiusExclusionZone(
        name="Outer Hebrides",
        center=Coordinate(57.76, -7.01),
        radius_km=60.0,
        message="We don't currently service the Outer Hebrides islands.",
    ),
    RadiusExclusionZone(
        name="Orkney Islands",
        center=Coordinate(59.0, -3.0),
        radius_km=50.0,
        message="We don't currently service the Orkney Islands.",
    ),
    RadiusExclusionZone(
        name="Shetland Islands",
        center=Coordinate(60.5, -1.2),
        radius_km=80.0,
        message="We don't currently service the Shetland Islands.",
    ),
)

OUTSIDE_SERVICE_AREA_MESSAGE = (
    "We don't currently service this location. "
    "Please select a location on the UK mainland or a major island."
)

# Passenger equipment fees (GBP).
EQUIPMENT_FEES: dict[str, float] = {
    "BABY_SEAT": 5.00,
    "CHILD_SEAT": 7.50,
    "BOOSTER_SEAT": 5.50,
    "WHEELCHAIR": 10.00,
}
