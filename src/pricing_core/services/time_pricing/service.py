"""Time-of-day pricing factors: weekend, peak-hour and holiday classification."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from ...config import TimeMultipliers, TimeSurcharges, settings
from ...models.domain import Holiday, HolidaySnapshot
from ...schemas.holidays import HolidayUpdate
from .holiday_calendar import HolidayCalendar, default_calendar


# Half-open [start, end) hour windows.
WEEKDAY_PEAK_HOURS: tuple[tuple[int, int], ...] = ((7, 10), (16, 19))
WEEKEND_PEAK_HOURS: tuple[tuple[int, int], ...] = ((10, 14), (17, 22))

WEEKEND_DAYS = frozenset({calendar.SATURDAY, calendar.SUNDAY})
FRIDAY_EVENING_START_HOUR = 18


class PricingClass(str, Enum):
    STANDARD = "standard"
    WEEKDAY_PEAK = "weekday_peak"
    WEEKDAY_OFF_PEAK = "weekday_off_peak"
    WEEKEND_PEAK = "weekend_peak"
    WEEKEND_STANDARD = "weekend_standard"
    HOLIDAY = "holiday"


@dataclass(frozen=True, slots=True)
class TimeFactor:
    pricing_class: PricingClass
    multiplier: float
    surcharge: float


_calendar = default_calendar(settings.default_holiday_year or date.today().year)


def get_holiday_calendar() -> HolidayCalendar:
    return _calendar


def current_holidays() -> tuple[Holiday, ...]:
    return _calendar.holidays()


def is_holiday(day: date) -> bool:
    return _calendar.is_holiday(day)


def is_weekend(when: datetime) -> bool:
    """Saturday, Sunday, or Friday from 18:00 onwards."""

    weekday = when.weekday()
    if weekday in WEEKEND_DAYS:
        return True
    return weekday == calendar.FRIDAY and when.hour >= FRIDAY_EVENING_START_HOUR


def _in_windows(hour: int, windows: Iterable[tuple[int, int]]) -> bool:
    return any(start <= hour < end for start, end in windows)


def is_peak_hour(when: datetime) -> bool:
    # The window table depends on the calendar day alone; Friday evening keeps weekday peaks.
    windows = WEEKEND_PEAK_HOURS if when.weekday() in WEEKEND_DAYS else WEEKDAY_PEAK_HOURS
    return _in_windows(when.hour, windows)


def get_pricing_class(when: datetime) -> PricingClass:
    if is_holiday(when):
        return PricingClass.HOLIDAY
    peak = is_peak_hour(when)
    if is_weekend(when):
        return PricingClass.WEEKEND_PEAK if peak else PricingClass.WEEKEND_STANDARD
    return PricingClass.WEEKDAY_PEAK if peak else PricingClass.WEEKDAY_OFF_PEAK


def get_time_multiplier(when: datetime, *, multipliers: Optional[TimeMultipliers] = None) -> float:
    table = multipliers or settings.multipliers
    return getattr(table, get_pricing_class(when).value)


def get_time_surcharge(when: datetime, *, surcharges: Optional[TimeSurcharges] = None) -> float:
    table = surcharges or settings.surcharges
    return getattr(table, get_pricing_class(when).value)


def get_time_factor(
    when: datetime,
    *,
    multipliers: Optional[TimeMultipliers] = None,
    surcharges: Optional[TimeSurcharges] = None,
) -> TimeFactor:
    pricing_class = get_pricing_class(when)
    return TimeFactor(
        pricing_class=pricing_class,
        multiplier=getattr(multipliers or settings.multipliers, pricing_class.value),
        surcharge=getattr(surcharges or settings.surcharges, pricing_class.value),
    )


def _coerce_update(entry: Holiday | HolidayUpdate | Mapping[str, Any], year: int) -> HolidayUpdate:
    if isinstance(entry, (Holiday, HolidayUpdate)):
        entry = {"name": entry.name, "month": entry.month, "day": entry.day}
    return HolidayUpdate.model_validate(entry, context={"year": year})


def update_holidays(
    year: int,
    holidays: Iterable[Holiday | HolidayUpdate | Mapping[str, Any]],
) -> HolidaySnapshot:
    """Replace every non-fixed holiday with ``holidays`` stamped to ``year``.

    Fixed-date holidays are kept as they are; entries supplied here are
    always stored as non-fixed.
    """

    updates = [_coerce_update(entry, year) for entry in holidays]
    return _calendar.replace_year(
        year,
        (Holiday(name=u.name, month=u.month, day=u.day, fixed_date=False, year=year) for u in updates),
    )
