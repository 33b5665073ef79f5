"""
Luach Models

Value types for Hebrew/Gregorian conversion and holiday resolution.

    from luach.models import (
        # Enums
        Weekday, YearLengthCategory, MonthKey, HolidayCategory, Locale,
        # Dates
        GregorianDate, HebrewDate, MoladRecord, MoladAnnouncement,
        # Years
        MonthSpec, MonthTable, YearInfo,
        # Holidays
        HolidayRule, HolidayPack, HolidayOccurrence,
    )
"""
from __future__ import annotations

# =============================================================================
# Enums
# =============================================================================
from .enums import (
    HolidayCategory,
    Locale,
    MonthKey,
    Weekday,
    WeekdayDirection,
    YearFilter,
    YearLengthCategory,
)

# =============================================================================
# Dates
# =============================================================================
from .dates import (
    HOURS_PER_DAY,
    PARTS_PER_DAY,
    PARTS_PER_HOUR,
    PARTS_PER_MINUTE,
    GregorianDate,
    HebrewDate,
    MoladAnnouncement,
    MoladRecord,
    gregorian_month_length,
    is_gregorian_leap_year,
)

# =============================================================================
# Years
# =============================================================================
from .year import (
    MonthSpec,
    MonthTable,
    YearInfo,
)

# =============================================================================
# Holidays
# =============================================================================
from .holidays import (
    Anchor,
    AnchorOffset,
    DateRule,
    FixedHebrewDate,
    HolidayOccurrence,
    HolidayPack,
    HolidayRule,
    MonthDay,
    NearestWeekday,
    WeekdayShift,
)

__all__ = [
    # Enums
    "HolidayCategory",
    "Locale",
    "MonthKey",
    "Weekday",
    "WeekdayDirection",
    "YearFilter",
    "YearLengthCategory",
    # Dates
    "HOURS_PER_DAY",
    "PARTS_PER_DAY",
    "PARTS_PER_HOUR",
    "PARTS_PER_MINUTE",
    "GregorianDate",
    "HebrewDate",
    "MoladAnnouncement",
    "MoladRecord",
    "gregorian_month_length",
    "is_gregorian_leap_year",
    # Years
    "MonthSpec",
    "MonthTable",
    "YearInfo",
    # Holidays
    "Anchor",
    "AnchorOffset",
    "DateRule",
    "FixedHebrewDate",
    "HolidayOccurrence",
    "HolidayPack",
    "HolidayRule",
    "MonthDay",
    "NearestWeekday",
    "WeekdayShift",
]
