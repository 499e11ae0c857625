"""Serviceability services."""

from .service import (
    is_in_excluded_area,
    is_in_national_boundary,
    is_location_serviceable,
    is_route_serviceable,
)

__all__ = [
    "is_in_national_boundary",
    "is_in_excluded_area",
    "is_location_serviceable",
    "is_route_serviceable",
]
