"""
Luach Engine

Calendar arithmetic and holiday resolution.

Services:
- julian_day: Gregorian <-> Julian Day Number
- epoch: Molad and Rosh Hashanah with postponement rules
- leap_year: Metonic leap years and year lengths
- month_table: Month lengths of a year
- HebrewCalendar: Hebrew <-> JDN <-> Gregorian conversion over a YearCache
- HolidayResolver: Yearly holiday schedule from a holiday pack

Usage:
    from luach.engine import HebrewCalendar, HolidayResolver, YearCache
"""
from __future__ import annotations

from .cache import YearCache
from .converter import HebrewCalendar, compute_year_info
from .epoch import (
    LUNATION_PARTS,
    MAX_POSTPONEMENT_PASSES,
    MOLAD_TOHU,
    POSTPONEMENT_RULES,
    REFERENCE_EPOCH_JDN,
    PostponementRule,
    apply_postponements,
    elapsed_days,
    molad,
    molad_for_month,
    months_elapsed,
    rosh_hashanah_jdn,
)
from .holiday_resolver import HolidayResolver, find_weekday, parse_locale
from .julian_day import (
    JDN_OF_FIXED_ZERO,
    fixed_day,
    gregorian_to_jdn,
    jdn_to_gregorian,
    weekday_of,
)
from .leap_year import (
    category_for_length,
    days_in_year,
    is_leap_year,
    months_in_year,
    year_length_category,
)
from .month_table import build_month_table, month_index, month_table

__all__ = [
    # Cache
    "YearCache",
    # Converter
    "HebrewCalendar",
    "compute_year_info",
    # Epoch
    "LUNATION_PARTS",
    "MAX_POSTPONEMENT_PASSES",
    "MOLAD_TOHU",
    "POSTPONEMENT_RULES",
    "REFERENCE_EPOCH_JDN",
    "PostponementRule",
    "apply_postponements",
    "elapsed_days",
    "molad",
    "molad_for_month",
    "months_elapsed",
    "rosh_hashanah_jdn",
    # Holidays
    "HolidayResolver",
    "find_weekday",
    "parse_locale",
    # Julian day
    "JDN_OF_FIXED_ZERO",
    "fixed_day",
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "weekday_of",
    # Leap years
    "category_for_length",
    "days_in_year",
    "is_leap_year",
    "months_in_year",
    "year_length_category",
    # Month table
    "build_month_table",
    "month_index",
    "month_table",
]
