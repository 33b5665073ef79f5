"""
Luach - Hebrew Calendar Engine

Converts between the Hebrew and proleptic Gregorian calendars and derives
the yearly holiday schedule.

Key Features:
- Exact arithmetic calendar: molad, postponement rules, year lengths
- Conversion through Julian Day Numbers for any Hebrew year from AM 1
- Declarative holiday packs (YAML) with Israel and Diaspora schedules
- Injectable per-year cache; everything else is pure

Quick Start:
    import luach
    from luach import HebrewDate, Locale

    # 16 September 2023 is Rosh Hashanah 5784
    hd = luach.gregorian_to_hebrew(2023, 9, 16)

    # And back
    gd = luach.hebrew_to_gregorian(HebrewDate(5784, 8, 15))

    # Holidays
    for occurrence in luach.holidays_for_year(5784, Locale.DIASPORA):
        print(occurrence.hebrew_date, occurrence.identifier)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    GregorianDate,
    HebrewDate,
    HolidayCategory,
    HolidayOccurrence,
    HolidayPack,
    HolidayRule,
    Locale,
    MonthKey,
    MoladAnnouncement,
    MoladRecord,
    Weekday,
    YearInfo,
    YearLengthCategory,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    CalendarInvariantError,
    HolidayPackLoadError,
    HolidayPackValidationError,
    HolidayPackVersionMismatch,
    HolidayRuleError,
    InvalidDateError,
    InvalidDayError,
    InvalidMonthError,
    LuachError,
    PostponementError,
    UnsupportedLocaleError,
    UnsupportedYearError,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import HebrewCalendar, HolidayResolver, YearCache

# =============================================================================
# API
# =============================================================================
from .api import (
    days_in_month,
    gregorian_to_hebrew,
    hebrew_to_gregorian,
    holidays_for_year,
    is_leap_year,
    months_in_year,
)

__all__ = [
    "__version__",
    # Models
    "GregorianDate",
    "HebrewDate",
    "HolidayCategory",
    "HolidayOccurrence",
    "HolidayPack",
    "HolidayRule",
    "Locale",
    "MonthKey",
    "MoladAnnouncement",
    "MoladRecord",
    "Weekday",
    "YearInfo",
    "YearLengthCategory",
    # Exceptions
    "LuachError",
    "InvalidDateError",
    "InvalidMonthError",
    "InvalidDayError",
    "UnsupportedYearError",
    "UnsupportedLocaleError",
    "PostponementError",
    "CalendarInvariantError",
    "HolidayRuleError",
    "HolidayPackLoadError",
    "HolidayPackValidationError",
    "HolidayPackVersionMismatch",
    # Engine
    "HebrewCalendar",
    "HolidayResolver",
    "YearCache",
    # API
    "gregorian_to_hebrew",
    "hebrew_to_gregorian",
    "is_leap_year",
    "months_in_year",
    "days_in_month",
    "holidays_for_year",
]
