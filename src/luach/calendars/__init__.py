"""
Luach Calendars

Holiday schedules keyed by ``datetime.date``.

Provides:
- JewishHolidayCalendar for Israel or the Diaspora
- Pre-built calendars and quick-check functions

Usage:
    from luach.calendars import JewishHolidayCalendar, is_yom_tov

    if is_yom_tov(date(2024, 10, 3)):
        print("Rosh Hashanah")

    calendar = JewishHolidayCalendar(locale=Locale.ISRAEL)
    for d, occurrence in calendar.get_holidays_in_range(date(2024, 4, 1), date(2024, 4, 30)):
        print(d, occurrence.identifier)
"""
from __future__ import annotations

from .jewish import (
    DIASPORA_CALENDAR,
    ISRAEL_CALENDAR,
    JewishHolidayCalendar,
    get_jewish_holidays,
    is_yom_tov,
)

__all__ = [
    "JewishHolidayCalendar",
    "DIASPORA_CALENDAR",
    "ISRAEL_CALENDAR",
    "get_jewish_holidays",
    "is_yom_tov",
]
