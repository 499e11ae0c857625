"""Domain models for service-area, airport, zone and holiday records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Union

Region = Literal[
    "London",
    "Manchester",
    "Birmingham",
    "Scotland",
    "Wales",
    "Northern Ireland",
    "Other",
]

DEFAULT_REGION: Region = "Other"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A WGS84 point in (latitude, longitude) order."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class BoundaryBox:
    """Axis-aligned latitude/longitude rectangle, inclusive on every edge."""

    north: float
    south: float
    east: float
    west: float

    def __post_init__(self) -> None:
        if self.north <= self.south:
            raise ValueError(f"north ({self.north}) must be greater than south ({self.south})")
        if self.east <= self.west:
            raise ValueError(f"east ({self.east}) must be greater than west ({self.west})")

    def contains(self, latitude: float, longitude: float) -> bool:
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east


@dataclass(frozen=True, slots=True)
class PolygonExclusionZone:
    """Exclusion area described by an implicitly closed ring of vertices."""

    name: str
    ring: tuple[Coordinate, ...]
    message: str

    def __post_init__(self) -> None:
        if len(self.ring) < 3:
            raise ValueError(f"exclusion polygon '{self.name}' needs at least 3 vertices")


@dataclass(frozen=True, slots=True)
class RadiusExclusionZone:
    """Exclusion area described by a great-circle radius around a centre."""

    name: str
    center: Coordinate
    radius_km: float
    message: str

    def __post_init__(self) -> None:
        if self.radius_km < 0:
            raise ValueError(f"exclusion radius for '{self.name}' must be >= 0")


ExclusionZone = Union[PolygonExclusionZone, RadiusExclusionZone]


@dataclass(frozen=True, slots=True)
class ServicedIsland:
    """Island served despite lying outside the national rectangle test."""

    name: str
    center: Coordinate
    radius_km: float


@dataclass(frozen=True, slots=True)
class AirportFees:
    pickup: float
    dropoff: float


@dataclass(frozen=True, slots=True)
class Airport:
    name: str
    code: str
    boundaries: BoundaryBox
    fees: AirportFees
    region: Region = DEFAULT_REGION


@dataclass(frozen=True, slots=True)
class OperatingHours:
    """Weekday set (Monday=0) plus a half-open ``[start_hour, end_hour)`` window."""

    days: frozenset[int]
    start_hour: int
    end_hour: int

    def covers(self, weekday: int, hour: int) -> bool:
        return weekday in self.days and self.start_hour <= hour < self.end_hour


@dataclass(frozen=True, slots=True)
class ZoneExemptions:
    vehicles: frozenset[str] = frozenset()
    times: tuple[OperatingHours, ...] = ()


@dataclass(frozen=True, slots=True)
class SpecialZone:
    """Toll, congestion or clean-air area carrying a fixed fee."""

    name: str
    boundaries: BoundaryBox
    fee: float
    operating_hours: Optional[OperatingHours] = None
    exemptions: Optional[ZoneExemptions] = None
    region: Region = DEFAULT_REGION


@dataclass(frozen=True, slots=True)
class Holiday:
    """A bank holiday; non-fixed entries only match in their stamped ``year``."""

    name: str
    month: int
    day: int
    fixed_date: bool
    year: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.fixed_date and self.year is None:
            raise ValueError(f"non-fixed holiday '{self.name}' requires a year")


@dataclass(frozen=True, slots=True)
class ExclusionResult:
    excluded: bool
    message: Optional[str] = None
    zone_name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ServiceabilityResult:
    serviceable: bool
    message: Optional[str] = None


@dataclass(frozen=True, slots=True)
class HolidaySnapshot:
    """Immutable view of the holiday table with precomputed lookup keys."""

    holidays: tuple[Holiday, ...]
    fixed_dates: frozenset[tuple[int, int]] = field(init=False)
    dated: frozenset[tuple[int, int, int]] = field(init=False)

    def __post_init__(self) -> None:
        fixed = frozenset((h.month, h.day) for h in self.holidays if h.fixed_date)
        dated = frozenset(
            (h.year, h.month, h.day) for h in self.holidays if not h.fixed_date and h.year is not None
        )
        object.__setattr__(self, "fixed_dates", fixed)
        object.__setattr__(self, "dated", dated)
