"""
Luach Hebrew Date Converter

Converts between Hebrew dates, Julian Day Numbers and Gregorian dates.

Key features:
- Year records (Rosh Hashanah, length, month table) computed once per
  year and kept in an injectable YearCache
- Year-aware validation of Hebrew dates
- Monotone day-number to Hebrew date search around a mean-year estimate
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Union

from ..exceptions import InvalidDayError, InvalidMonthError, UnsupportedYearError
from ..models import (
    GregorianDate,
    HebrewDate,
    MoladAnnouncement,
    MoladRecord,
    MonthSpec,
    MonthTable,
    Weekday,
    YearInfo,
    YearLengthCategory,
)
from .cache import YearCache
from .epoch import REFERENCE_EPOCH_JDN, molad, molad_for_month, rosh_hashanah_jdn
from .julian_day import gregorian_to_jdn, jdn_to_gregorian, weekday_of
from .leap_year import category_for_length
from .month_table import build_month_table

# Mean Hebrew year: 235 lunations / 19 years, in days
MEAN_YEAR_NUMERATOR = 35975351
MEAN_YEAR_DENOMINATOR = 98496

FIRST_DAY_JDN = REFERENCE_EPOCH_JDN + 1


def compute_year_info(year: int) -> YearInfo:
    """Compute the calendar record of a Hebrew year from first principles."""
    start = rosh_hashanah_jdn(year)
    length = rosh_hashanah_jdn(year + 1) - start
    return YearInfo(
        year=year,
        rosh_hashanah_jdn=start,
        year_length=length,
        category=category_for_length(year, length),
        month_table=build_month_table(year, length),
    )


@dataclass
class HebrewCalendar:
    """
    Hebrew calendar arithmetic over an injectable year cache.

    Usage:
        calendar = HebrewCalendar()

        # 16 September 2023 is 1 Tishrei 5784
        hd = calendar.gregorian_to_hebrew(date(2023, 9, 16))

        # Back again
        gd = calendar.hebrew_to_gregorian(HebrewDate(5784, 1, 1))

        # Isolated cache, e.g. in tests
        calendar = HebrewCalendar(cache=YearCache())
    """

    cache: YearCache = field(default_factory=YearCache)

    # =========================================================================
    # Year Queries
    # =========================================================================

    def year_info(self, year: int) -> YearInfo:
        """
        Get the calendar record of a Hebrew year.

        Raises:
            UnsupportedYearError: If year < 1
        """
        if year < 1:
            raise UnsupportedYearError(
                message=f"Hebrew year {year} precedes the epoch (year 1)",
                details={"year": year},
            )
        return self.cache.get_or_compute(year, compute_year_info)

    def is_leap_year(self, year: int) -> bool:
        return self.year_info(year).is_leap

    def months_in_year(self, year: int) -> int:
        return len(self.year_info(year).month_table)

    def days_in_year(self, year: int) -> int:
        return self.year_info(year).year_length

    def year_length_category(self, year: int) -> YearLengthCategory:
        return self.year_info(year).category

    def month_table(self, year: int) -> MonthTable:
        return self.year_info(year).month_table

    def month(self, year: int, month: int) -> MonthSpec:
        """
        Get one month of a year.

        Raises:
            InvalidMonthError: If the year has no such month
        """
        return self.month_table(year).month(month)

    def days_in_month(self, year: int, month: int) -> int:
        return self.month(year, month).days

    def month_name(self, year: int, month: int) -> str:
        """Display name; month 7 is "Adar II" in a leap year and "Nisan" otherwise."""
        return self.month(year, month).name

    def rosh_hashanah(self, year: int) -> int:
        """JDN of 1 Tishrei."""
        return self.year_info(year).rosh_hashanah_jdn

    def molad(self, year: int) -> MoladRecord:
        return molad(year)

    def molad_for_month(self, year: int, month: int) -> MoladAnnouncement:
        return molad_for_month(year, month)

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self, hebrew_date: HebrewDate) -> YearInfo:
        """
        Check that a Hebrew date exists in its year.

        Returns:
            The year's record

        Raises:
            InvalidMonthError: Month 13 in a common year
            InvalidDayError: Day beyond the month's length (e.g. 30 Tevet)
        """
        info = self.year_info(hebrew_date.year)
        table = info.month_table
        if hebrew_date.month > len(table):
            raise InvalidMonthError(
                message=(
                    f"Year {hebrew_date.year} has {len(table)} months, "
                    f"month {hebrew_date.month} does not exist"
                ),
                details={"year": hebrew_date.year, "month": hebrew_date.month},
            )
        spec = table.month(hebrew_date.month)
        if hebrew_date.day > spec.days:
            raise InvalidDayError(
                message=(
                    f"{spec.name} {hebrew_date.year} has {spec.days} days, "
                    f"day {hebrew_date.day} does not exist"
                ),
                details={
                    "year": hebrew_date.year,
                    "month": hebrew_date.month,
                    "day": hebrew_date.day,
                    "days_in_month": spec.days,
                },
            )
        return info

    def is_valid(self, hebrew_date: HebrewDate) -> bool:
        try:
            self.validate(hebrew_date)
        except (InvalidMonthError, InvalidDayError):
            return False
        return True

    # =========================================================================
    # Conversion
    # =========================================================================

    def hebrew_to_jdn(self, hebrew_date: HebrewDate) -> int:
        """Julian Day Number of a Hebrew date."""
        info = self.validate(hebrew_date)
        return (
            info.rosh_hashanah_jdn
            + info.month_table.days_before(hebrew_date.month)
            + hebrew_date.day
            - 1
        )

    def _year_containing(self, jdn: int) -> YearInfo:
        elapsed = jdn - REFERENCE_EPOCH_JDN
        year = max(1, elapsed * MEAN_YEAR_DENOMINATOR // MEAN_YEAR_NUMERATOR + 1)
        info = self.year_info(year)
        while info.rosh_hashanah_jdn > jdn:
            info = self.year_info(info.year - 1)
        while info.next_rosh_hashanah_jdn <= jdn:
            info = self.year_info(info.year + 1)
        return info

    def jdn_to_hebrew(self, jdn: int) -> HebrewDate:
        """
        Hebrew date of a Julian Day Number.

        Raises:
            UnsupportedYearError: If the day precedes 1 Tishrei AM 1
        """
        if jdn < FIRST_DAY_JDN:
            raise UnsupportedYearError(
                message=f"JDN {jdn} precedes the Hebrew epoch (JDN {FIRST_DAY_JDN})",
                details={"jdn": jdn},
                field_name="jdn",
            )
        info = self._year_containing(jdn)
        remaining = jdn - info.rosh_hashanah_jdn
        for spec in info.month_table:
            if remaining < spec.days:
                return HebrewDate(info.year, spec.index, remaining + 1)
            remaining -= spec.days
        # _year_containing guarantees jdn is inside the year
        raise AssertionError(f"JDN {jdn} not placed in year {info.year}")

    def gregorian_to_hebrew(self, value: Union[GregorianDate, date]) -> HebrewDate:
        return self.jdn_to_hebrew(gregorian_to_jdn(value))

    def hebrew_to_gregorian(self, hebrew_date: HebrewDate) -> GregorianDate:
        return jdn_to_gregorian(self.hebrew_to_jdn(hebrew_date))

    def weekday(self, hebrew_date: HebrewDate) -> Weekday:
        return weekday_of(self.hebrew_to_jdn(hebrew_date))

    def add_days(self, hebrew_date: HebrewDate, days: int) -> HebrewDate:
        """Hebrew date ``days`` after (or before, if negative) a date."""
        return self.jdn_to_hebrew(self.hebrew_to_jdn(hebrew_date) + days)
