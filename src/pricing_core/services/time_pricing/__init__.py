"""Time-based pricing services."""

from .holiday_calendar import HolidayCalendar, easter_sunday, uk_moveable_holidays
from .service import (
    PricingClass,
    TimeFactor,
    current_holidays,
    get_holiday_calendar,
    get_pricing_class,
    get_time_factor,
    get_time_multiplier,
    get_time_surcharge,
    is_holiday,
    is_peak_hour,
    is_weekend,
    update_holidays,
)

__all__ = [
    "HolidayCalendar",
    "PricingClass",
    "TimeFactor",
    "current_holidays",
    "easter_sunday",
    "get_holiday_calendar",
    "get_pricing_class",
    "get_time_factor",
    "get_time_multiplier",
    "get_time_surcharge",
    "is_holiday",
    "is_peak_hour",
    "is_weekend",
    "uk_moveable_holidays",
    "update_holidays",
]
