"""
Luach Enumerations

All enumeration types used throughout the Luach system.
Organized by domain area for clarity.

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Weekdays
# =============================================================================

class Weekday(str, Enum):
    """
    Day of the week.

    Indexed Hebrew-style: Sunday is day 0 and Shabbat (Saturday) is day 6.
    """
    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @property
    def number(self) -> int:
        """Day number, 0 = Sunday ... 6 = Saturday."""
        return _WEEKDAY_ORDER.index(self)

    @classmethod
    def from_number(cls, number: int) -> Weekday:
        """Weekday for a day number; any integer is reduced modulo 7."""
        return _WEEKDAY_ORDER[number % 7]

    @classmethod
    def from_python(cls, weekday: int) -> Weekday:
        """Weekday for a ``datetime.date.weekday()`` value (0 = Monday)."""
        return _WEEKDAY_ORDER[(weekday + 1) % 7]


_WEEKDAY_ORDER = (
    Weekday.SUNDAY,
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
)


# =============================================================================
# Year Classification
# =============================================================================

class YearLengthCategory(str, Enum):
    """
    Length classification of a Hebrew year.

    Determines the lengths of Cheshvan and Kislev.
    """
    CHASERIM = "chaserim"    # deficient: 353 / 383 days
    KESIDRAH = "kesidrah"    # regular: 354 / 384 days
    SHLEIMAH = "shleimah"    # complete: 355 / 385 days

    @property
    def excess_days(self) -> int:
        """Days above the 353 (common) or 383 (leap) baseline."""
        return _CATEGORY_EXCESS[self]

    @classmethod
    def from_excess_days(cls, excess: int) -> YearLengthCategory:
        """Category for a number of days above the baseline."""
        for category, days in _CATEGORY_EXCESS.items():
            if days == excess:
                return category
        raise ValueError(f"No year length category has {excess} excess days")


_CATEGORY_EXCESS = {
    YearLengthCategory.CHASERIM: 0,
    YearLengthCategory.KESIDRAH: 1,
    YearLengthCategory.SHLEIMAH: 2,
}


# =============================================================================
# Months
# =============================================================================

class MonthKey(str, Enum):
    """
    Symbolic Hebrew month, independent of a year's leap status.

    ADAR is the Adar that holds Purim: plain Adar in a common year and
    Adar II in a leap year. ADAR_I only exists in leap years.
    """
    TISHREI = "tishrei"
    CHESHVAN = "cheshvan"
    KISLEV = "kislev"
    TEVET = "tevet"
    SHEVAT = "shevat"
    ADAR_I = "adar_i"
    ADAR = "adar"
    NISAN = "nisan"
    IYAR = "iyar"
    SIVAN = "sivan"
    TAMMUZ = "tammuz"
    AV = "av"
    ELUL = "elul"


# =============================================================================
# Holidays
# =============================================================================

class HolidayCategory(str, Enum):
    """Kind of a holiday occurrence."""
    MAJOR = "major"                  # Yom tov, Yom Kippur
    MINOR = "minor"                  # Chanukah, Purim, modern days, special Shabbatot
    FAST = "fast"                    # Minor fasts and Tisha B'Av
    ROSH_CHODESH = "rosh_chodesh"    # Start of a new month
    SHABBAT_MEVARCHIM = "shabbat_mevarchim"    # Shabbat that blesses the coming month
    INTERMEDIATE = "intermediate"    # Chol HaMoed, Hoshana Rabbah


class Locale(str, Enum):
    """
    Where a holiday is observed.

    Rules are tagged with any of the three values; callers request a
    schedule for ISRAEL or DIASPORA only.
    """
    ISRAEL = "israel"
    DIASPORA = "diaspora"
    BOTH = "both"


class YearFilter(str, Enum):
    """Which years a holiday rule applies to."""
    ANY = "any"
    LEAP = "leap"
    COMMON = "common"


class WeekdayDirection(str, Enum):
    """How a NearestWeekday rule searches from its anchor."""
    NEAREST = "nearest"
    ON_OR_BEFORE = "on_or_before"
    BEFORE = "before"
    ON_OR_AFTER = "on_or_after"
    AFTER = "after"
