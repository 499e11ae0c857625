"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Sequence

from shapely.geometry import Polygon

from ..models.domain import BoundaryBox, Coordinate

EARTH_RADIUS_KM = 6371.0
KM_PER_MILE = 1.609344


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(a: Coordinate, b: Coordinate) -> float:
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def within_radius(point: Coordinate, center: Coordinate, radius_km: float) -> bool:
    """Return True if ``point`` lies within ``radius_km`` of ``center`` (inclusive)."""

    return distance_km(point, center) <= radius_km


def point_in_polygon(lat: float, lon: float, ring: Sequence[Coordinate]) -> bool:
    """Even-odd ray cast against an implicitly closed ring.

    The ray runs along the latitude axis from the point; an edge counts when
    its endpoints strictly straddle the point's longitude and the
    interpolated crossing latitude lies beyond the point.
    """

    inside = False
    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i].latitude, ring[i].longitude
        xj, yj = ring[j].latitude, ring[j].longitude
        if (yi > lon) != (yj > lon):
            crossing = (xj - xi) * (lon - yi) / (yj - yi) + xi
            if lat < crossing:
                inside = not inside
        j = i
    return inside


def polygon_bounds(ring: Sequence[Coordinate]) -> BoundaryBox:
    """Bounding box of a ring, used to reject far-away points before ray casting."""

    min_lon, min_lat, max_lon, max_lat = Polygon([(c.longitude, c.latitude) for c in ring]).bounds
    return BoundaryBox(north=max_lat, south=min_lat, east=max_lon, west=min_lon)
