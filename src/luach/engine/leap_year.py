"""
Luach Leap Year Oracle

Leap years follow the 19-year Metonic cycle: years 3, 6, 8, 11, 14, 17
and 19 of each cycle have a thirteenth month.

Year lengths come from consecutive Rosh Hashanah days, so the length
functions defer to the epoch calculator.
"""
from __future__ import annotations

from ..exceptions import CalendarInvariantError
from ..models import YearLengthCategory

COMMON_YEAR_BASE_DAYS = 353
LEAP_YEAR_BASE_DAYS = 383


def is_leap_year(year: int) -> bool:
    """Check if a Hebrew year has 13 months."""
    return (7 * year + 1) % 19 < 7


def months_in_year(year: int) -> int:
    """12 or 13."""
    return 13 if is_leap_year(year) else 12


def days_in_year(year: int) -> int:
    """Days from Rosh Hashanah of ``year`` to the next Rosh Hashanah."""
    from .epoch import rosh_hashanah_jdn

    return rosh_hashanah_jdn(year + 1) - rosh_hashanah_jdn(year)


def category_for_length(year: int, length: int) -> YearLengthCategory:
    """
    Classify a year of known length.

    Raises:
        CalendarInvariantError: If the length is not one of the six
            possible year lengths
    """
    base = LEAP_YEAR_BASE_DAYS if is_leap_year(year) else COMMON_YEAR_BASE_DAYS
    try:
        return YearLengthCategory.from_excess_days(length - base)
    except ValueError:
        raise CalendarInvariantError(
            message=f"Year {year} has {length} days, outside {base}-{base + 2}",
            details={"year": year, "length": length, "leap": is_leap_year(year)},
        )


def year_length_category(year: int) -> YearLengthCategory:
    """Classify a year by the number of days above its baseline."""
    return category_for_length(year, days_in_year(year))
