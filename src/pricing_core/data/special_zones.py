"""Airport and special charging zone tables."""

from __future__ import annotations

import calendar

from ..models.domain import (
    Airport,
    AirportFees,
    BoundaryBox,
    OperatingHours,
    Region,
    SpecialZone,
    ZoneExemptions,
)

REGIONS: tuple[Region, ...] = (
    "London",
    "Manchester",
    "Birmingham",
    "Scotland",
    "Wales",
    "Northern Ireland",
    "Other",
)

WORKING_WEEK = frozenset(
    {calendar.MONDAY, calendar.TUESDAY, calendar.WEDNESDAY, calendar.THURSDAY, calendar.FRIDAY}
)

_LOW_EMISSION_EXEMPT = frozenset({"electric", "euro6-diesel", "euro4-petrol"})


def _airport(
    name: str,
    code: str,
    box: tuple[float, float, float, float],
    pickup: float,
    dropoff: float,
    region: Region,
) -> Airport:
    north, south, east, west = box
    return Airport(
        name=name,
        code=code,
        boundaries=BoundaryBox(north=north, south=south, east=east, west=west),
        fees=AirportFees(pickup=pickup, dropoff=dropoff),
        region=region,
    )


# Boxes are (north, south, east, west).
AIRPORTS: tuple[Airport, ...] = (
    # London
    _airport("Heathrow Airport", "LHR", (51.490746, 51.453873, -0.414696, -0.461946), 7.5, 6.0, "London"),
    _airport("Gatwick Airport", "LGW", (51.167842, 51.141653, -0.156885, -0.190532), 8.0, 6.0, "London"),
    _airport("Luton Airport", "LTN", (51.886328, 51.868648, -0.360506, -0.389516), 6.0, 6.0, "London"),
    _airport("Stansted Airport", "STN", (51.895683, 51.875186, 0.251262, 0.225384), 10.0, 7.0, "London"),
    _airport("London City Airport", "LCY", (51.508354, 51.500822, 0.058022, 0.042487), 6.5, 6.5, "London"),
    # North West
    _airport("Manchester Airport", "MAN", (53.372, 53.358, -2.265, -2.288), 5.0, 4.0, "Manchester"),
    _airport("Liverpool John Lennon Airport", "LPL", (53.341, 53.329, -2.839, -2.858), 4.0, 3.0, "Manchester"),
    # Midlands
    _airport("Birmingham Airport", "BHX", (52.461, 52.445, -1.724, -1.749), 5.0, 4.0, "Birmingham"),
    # Scotland
    _airport("Edinburgh Airport", "EDI", (55.957, 55.939, -3.351, -3.373), 5.0, 4.0, "Scotland"),
    _airport("Glasgow Airport", "GLA", (55.876, 55.858, -4.416, -4.44), 4.5, 3.5, "Scotland"),
    # Wales
    _airport("Cardiff Airport", "CWL", (51.405, 51.39, -3.333, -3.355), 4.0, 3.0, "Wales"),
    # Northern Ireland
    _airport("Belfast International Airport", "BFS", (54.673, 54.645, -6.205, -6.235), 4.0, 3.0, "Northern Ireland"),
    _airport("George Best Belfast City Airport", "BHD", (54.623, 54.61, -5.865, -5.885), 4.0, 3.0, "Northern Ireland"),
    # Elsewhere
    _airport("Bristol Airport", "BRS", (51.391, 51.377, -2.71, -2.728), 4.5, 3.5, "Other"),
    _airport("East Midlands Airport", "EMA", (52.84, 52.825, -1.318, -1.338), 4.0, 3.0, "Other"),
    _airport("Newcastle Airport", "NCL", (55.045, 55.032, -1.685, -1.71), 4.0, 3.0, "Other"),
)

_CENTRAL_LONDON = BoundaryBox(north=51.530918, south=51.498929, east=-0.080392, west=-0.144839)

SPECIAL_ZONES: dict[str, SpecialZone] = {
    "CONGESTION_CHARGE": SpecialZone(
        name="London Congestion Charge Zone",
        boundaries=_CENTRAL_LONDON,
        fee=7.5,
        operating_hours=OperatingHours(days=WORKING_WEEK, start_hour=7, end_hour=18),
        exemptions=ZoneExemptions(vehicles=frozenset({"electric", "hybrid"})),
        region="London",
    ),
    "ULEZ": SpecialZone(
        name="London Ultra Low Emission Zone",
        boundaries=_CENTRAL_LONDON,
        fee=12.5,
        exemptions=ZoneExemptions(vehicles=_LOW_EMISSION_EXEMPT),
        region="London",
    ),
    "DARTFORD_CROSSING": SpecialZone(
        name="Dartford Crossing",
        boundaries=BoundaryBox(north=51.47544, south=51.457114, east=0.27271, west=0.247647),
        fee=4.0,
        region="London",
    ),
    "MANCHESTER_CLEAN_AIR": SpecialZone(
        name="Manchester Clean Air Zone",
        boundaries=BoundaryBox(north=53.51, south=53.39, east=-2.15, west=-2.32),
        fee=8.0,
        exemptions=ZoneExemptions(vehicles=_LOW_EMISSION_EXEMPT),
        region="Manchester",
    ),
    "BIRMINGHAM_CLEAN_AIR": SpecialZone(
        name="Birmingham Clean Air Zone",
        boundaries=BoundaryBox(north=52.49, south=52.465, east=-1.875, west=-1.92),
        fee=8.0,
        exemptions=ZoneExemptions(vehicles=_LOW_EMISSION_EXEMPT),
        region="Birmingham",
    ),
    "MERSEY_GATEWAY": SpecialZone(
        name="Mersey Gateway Bridge",
        boundaries=BoundaryBox(north=53.37, south=53.35, east=-2.73, west=-2.76),
        fee=2.0,
        region="Manchester",
    ),
    "SEVERN_BRIDGE": SpecialZone(
        name="Severn Bridge",
        boundaries=BoundaryBox(north=51.625, south=51.605, east=-2.635, west=-2.655),
        fee=5.5,
        region="Wales",
    ),
    "M6_TOLL": SpecialZone(
        name="M6 Toll Road",
        boundaries=BoundaryBox(north=52.689, south=52.556, east=-1.691, west=-2.004),
        fee=6.9,
        region="Birmingham",
    ),
}
