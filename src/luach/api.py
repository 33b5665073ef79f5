"""
Luach Library API

Module-level functions over a default calendar and the standard holiday
pack. Callers needing isolation (for example a fresh cache in tests)
construct their own HebrewCalendar or HolidayResolver.
"""
from __future__ import annotations

from typing import Optional, Union

from .engine import HebrewCalendar, HolidayResolver
from .models import GregorianDate, HebrewDate, HolidayOccurrence, Locale
from .packs import load_standard_pack

DEFAULT_CALENDAR = HebrewCalendar()

_default_resolver: Optional[HolidayResolver] = None


def get_default_resolver() -> HolidayResolver:
    """Resolver over the standard pack and the default calendar, built on first use."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = HolidayResolver(pack=load_standard_pack(), calendar=DEFAULT_CALENDAR)
    return _default_resolver


def gregorian_to_hebrew(year: int, month: int, day: int) -> HebrewDate:
    """
    Convert a proleptic Gregorian date to a Hebrew date.

    Raises:
        InvalidDateError: If the fields do not form a Gregorian date
        UnsupportedYearError: If the date precedes 1 Tishrei AM 1
    """
    return DEFAULT_CALENDAR.gregorian_to_hebrew(GregorianDate(year, month, day))


def hebrew_to_gregorian(hebrew_date: HebrewDate) -> GregorianDate:
    """
    Convert a Hebrew date to a proleptic Gregorian date.

    Raises:
        InvalidMonthError: If the year has no such month
        InvalidDayError: If the month has no such day
    """
    return DEFAULT_CALENDAR.hebrew_to_gregorian(hebrew_date)


def is_leap_year(hebrew_year: int) -> bool:
    return DEFAULT_CALENDAR.is_leap_year(hebrew_year)


def months_in_year(hebrew_year: int) -> int:
    return DEFAULT_CALENDAR.months_in_year(hebrew_year)


def days_in_month(hebrew_year: int, month_index: int) -> int:
    """
    Days in a month of a Hebrew year (Tishrei = 1).

    Raises:
        InvalidMonthError: If the year has no such month
    """
    return DEFAULT_CALENDAR.days_in_month(hebrew_year, month_index)


def holidays_for_year(
    hebrew_year: int,
    locale: Union[Locale, str],
) -> list[HolidayOccurrence]:
    """
    Holiday schedule of a Hebrew year from the standard pack.

    Raises:
        UnsupportedLocaleError: Unless locale is Israel or Diaspora
    """
    return get_default_resolver().holidays_for_year(hebrew_year, locale)
