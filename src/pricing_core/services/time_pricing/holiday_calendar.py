"""UK bank holiday table with snapshot replacement."""

from __future__ import annotations

import logging
import threading
from datetime import date, timedelta
from typing import Iterable

from ...models.domain import Holiday, HolidaySnapshot

logger = logging.getLogger(__name__)

FIXED_HOLIDAYS: tuple[Holiday, ...] = (
    Holiday(name="New Year's Day", month=1, day=1, fixed_date=True),
    Holiday(name="Early May Bank Holiday", month=5, day=1, fixed_date=True),
    Holiday(name="Christmas Day", month=12, day=25, fixed_date=True),
    Holiday(name="Boxing Day", month=12, day=26, fixed_date=True),
)


def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday (anonymous Gregorian algorithm)."""

    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    r = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * r) // 451
    month, day = divmod(h + r - 7 * m + 114, 31)
    return date(year, month, day + 1)


def _last_monday(year: int, month: int) -> date:
    last_day = (date(year + month // 12, month % 12 + 1, 1)) - timedelta(days=1)
    return last_day - timedelta(days=last_day.weekday())


def uk_moveable_holidays(year: int) -> tuple[Holiday, ...]:
    easter = easter_sunday(year)
    dates = (
        ("Good Friday", easter - timedelta(days=2)),
        ("Easter Monday", easter + timedelta(days=1)),
        ("Spring Bank Holiday", _last_monday(year, 5)),
        ("Summer Bank Holiday", _last_monday(year, 8)),
    )
    return tuple(
        Holiday(name=name, month=when.month, day=when.day, fixed_date=False, year=year)
        for name, when in dates
    )


class HolidayCalendar:
    """Holds the current holiday snapshot behind a single reference.

    Readers take ``snapshot`` once and keep using it; writers build a new
    snapshot and swap the reference, so a reader never sees a half-built table.
    """

    def __init__(self, holidays: Iterable[Holiday]) -> None:
        self._snapshot = HolidaySnapshot(tuple(holidays))
        self._write_lock = threading.Lock()

    @property
    def snapshot(self) -> HolidaySnapshot:
        return self._snapshot

    def holidays(self) -> tuple[Holiday, ...]:
        return self._snapshot.holidays

    def is_holiday(self, day: date) -> bool:
        snapshot = self._snapshot
        return (day.month, day.day) in snapshot.fixed_dates or (
            day.year,
            day.month,
            day.day,
        ) in snapshot.dated

    def replace_year(self, year: int, holidays: Iterable[Holiday]) -> HolidaySnapshot:
        """Keep fixed-date entries, drop every non-fixed one, add ``holidays`` stamped to ``year``."""

        stamped = tuple(
            Holiday(name=h.name, month=h.month, day=h.day, fixed_date=False, year=year) for h in holidays
        )
        with self._write_lock:
            fixed = tuple(h for h in self._snapshot.holidays if h.fixed_date)
            snapshot = HolidaySnapshot(fixed + stamped)
            self._snapshot = snapshot
        logger.info("Holiday table replaced for %s: %d fixed, %d dated", year, len(fixed), len(stamped))
        return snapshot

    def restore(self, snapshot: HolidaySnapshot) -> None:
        with self._write_lock:
            self._snapshot = snapshot


def default_calendar(year: int) -> HolidayCalendar:
    return HolidayCalendar(FIXED_HOLIDAYS + uk_moveable_holidays(year))
