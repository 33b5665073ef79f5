"""
Luach Julian Day Converter

Converts proleptic Gregorian dates to and from Julian Day Numbers.

Both directions use the fixed-day count of the Gregorian cycles (400, 100,
4 and 1 years) with floor division, so they are exact for any signed year.
Day 1 of that count (1 January of year 1) is JDN 1721426.
"""
from __future__ import annotations

from datetime import date
from typing import Union

from ..models import GregorianDate, Weekday, is_gregorian_leap_year

# JDN of fixed day 0 (31 December of year 0)
JDN_OF_FIXED_ZERO = 1721425

_DAYS_IN_400_YEARS = 146097
_DAYS_IN_100_YEARS = 36524
_DAYS_IN_4_YEARS = 1461


def _fixed_from_gregorian(year: int, month: int, day: int) -> int:
    prior = year - 1
    days = 365 * prior + prior // 4 - prior // 100 + prior // 400
    days += (367 * month - 362) // 12
    if month > 2:
        days -= 1 if is_gregorian_leap_year(year) else 2
    return days + day


def _gregorian_year_from_fixed(fixed: int) -> int:
    d0 = fixed - 1
    n400, d1 = divmod(d0, _DAYS_IN_400_YEARS)
    n100, d2 = divmod(d1, _DAYS_IN_100_YEARS)
    n4, d3 = divmod(d2, _DAYS_IN_4_YEARS)
    n1 = d3 // 365
    year = 400 * n400 + 100 * n100 + 4 * n4 + n1
    # Last day of a leap cycle belongs to the year already counted
    if n100 == 4 or n1 == 4:
        return year
    return year + 1


def gregorian_to_jdn(value: Union[GregorianDate, date]) -> int:
    """
    Get the Julian Day Number of a Gregorian date.

    Args:
        value: A GregorianDate, or a ``datetime.date``

    Returns:
        Julian Day Number
    """
    if isinstance(value, date):
        value = GregorianDate.from_date(value)
    return _fixed_from_gregorian(value.year, value.month, value.day) + JDN_OF_FIXED_ZERO


def jdn_to_gregorian(jdn: int) -> GregorianDate:
    """
    Get the Gregorian date of a Julian Day Number.

    Every integer maps to exactly one date; years before 1 come out as
    zero or negative (astronomical numbering).
    """
    fixed = jdn - JDN_OF_FIXED_ZERO
    year = _gregorian_year_from_fixed(fixed)
    prior_days = fixed - _fixed_from_gregorian(year, 1, 1)
    if fixed < _fixed_from_gregorian(year, 3, 1):
        correction = 0
    elif is_gregorian_leap_year(year):
        correction = 1
    else:
        correction = 2
    month = (12 * (prior_days + correction) + 373) // 367
    day = fixed - _fixed_from_gregorian(year, month, 1) + 1
    return GregorianDate(year, month, day)


def weekday_of(jdn: int) -> Weekday:
    """Day of the week of a Julian Day Number (JDN 0 is a Monday)."""
    return Weekday.from_number(jdn + 1)


def fixed_day(value: Union[GregorianDate, date]) -> int:
    """Fixed day count (1 January of year 1 is day 1) of a Gregorian date."""
    return gregorian_to_jdn(value) - JDN_OF_FIXED_ZERO
