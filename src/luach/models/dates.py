"""
Luach Date Models

Immutable value types for both calendars and for the mean conjunction.

Key components:
- GregorianDate: Proleptic Gregorian date, years may be zero or negative
- HebrewDate: Tishrei-first Hebrew date
- MoladRecord: Mean conjunction of Tishrei, in days/hours/parts
- MoladAnnouncement: Mean conjunction of a month, in clock terms

A Julian Day Number is a plain ``int`` throughout the package.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..exceptions import (
    InvalidDateError,
    InvalidDayError,
    InvalidMonthError,
    UnsupportedYearError,
)
from .enums import Weekday


# =============================================================================
# Time Units
# =============================================================================

PARTS_PER_HOUR = 1080
HOURS_PER_DAY = 24
PARTS_PER_DAY = PARTS_PER_HOUR * HOURS_PER_DAY
PARTS_PER_MINUTE = 18


# =============================================================================
# Gregorian Rules
# =============================================================================

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap_year(year: int) -> bool:
    """Check if a proleptic Gregorian year has 366 days."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_month_length(year: int, month: int) -> int:
    """
    Get the number of days in a Gregorian month.

    Raises:
        InvalidDateError: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise InvalidDateError(
            message=f"Gregorian month {month} is not in range 1-12",
            details={"year": year, "month": month},
            field_name="month",
        )
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


# =============================================================================
# Gregorian Date
# =============================================================================

@dataclass(frozen=True, order=True)
class GregorianDate:
    """
    A proleptic Gregorian calendar date.

    Uses astronomical year numbering: year 0 is 1 BCE, year -1 is 2 BCE.
    Construction fails with InvalidDateError for an impossible date.

    Attributes:
        year: Gregorian year (any integer)
        month: Month, 1-12
        day: Day of month, 1-28..31
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        length = gregorian_month_length(self.year, self.month)
        if not 1 <= self.day <= length:
            raise InvalidDateError(
                message=(
                    f"Day {self.day} is not valid for {self.year:04d}-{self.month:02d} "
                    f"(1-{length})"
                ),
                details={"year": self.year, "month": self.month, "day": self.day},
                field_name="day",
            )

    @classmethod
    def from_date(cls, d: date) -> GregorianDate:
        """Create from a ``datetime.date``."""
        return cls(d.year, d.month, d.day)

    def to_date(self) -> date:
        """
        Convert to a ``datetime.date``.

        Raises:
            InvalidDateError: If the year is outside the 1-9999 range
                ``datetime.date`` supports
        """
        try:
            return date(self.year, self.month, self.day)
        except ValueError as e:
            raise InvalidDateError(
                message=f"{self} cannot be represented as datetime.date: {e}",
                details={"year": self.year},
                field_name="year",
            ) from e

    def isoformat(self) -> str:
        """ISO 8601 style string; negative years keep their sign."""
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


# =============================================================================
# Hebrew Date
# =============================================================================

@dataclass(frozen=True, order=True)
class HebrewDate:
    """
    A date in the Hebrew calendar.

    Months are numbered from Tishrei (1). In a leap year month 6 is Adar I
    and month 7 is Adar II; in a common year month 6 is Adar and there is
    no month 13.

    Only structural ranges are checked here. Whether the month exists in
    the year and whether the day fits the month depends on the year's
    classification and is checked by the converter.

    Attributes:
        year: Hebrew year (AM), 1 or later
        month: Month ordinal, 1-13
        day: Day of month, 1-30
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if self.year < 1:
            raise UnsupportedYearError(
                message=f"Hebrew year {self.year} precedes the epoch (year 1)",
                details={"year": self.year},
            )
        if not 1 <= self.month <= 13:
            raise InvalidMonthError(
                message=f"Hebrew month {self.month} is not in range 1-13",
                details={"year": self.year, "month": self.month},
            )
        if not 1 <= self.day <= 30:
            raise InvalidDayError(
                message=f"Hebrew day {self.day} is not in range 1-30",
                details={"year": self.year, "month": self.month, "day": self.day},
            )

    def replace(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> HebrewDate:
        """Return a copy with some fields replaced."""
        return HebrewDate(
            self.year if year is None else year,
            self.month if month is None else month,
            self.day if day is None else day,
        )

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}-{self.day:02d}"


# =============================================================================
# Molad
# =============================================================================

@dataclass(frozen=True)
class MoladRecord:
    """
    Mean conjunction (molad) of Tishrei for a Hebrew year.

    Time is counted the traditional way: days since the reference epoch,
    hours since the preceding sunset (taken as 18:00), and parts
    (chalakim) of which 1080 make an hour.

    Attributes:
        year: Hebrew year the molad opens
        day_offset: Days since the reference epoch (a Sunday)
        hours_after_sunset: 0-23
        parts: 0-1079
    """
    year: int
    day_offset: int
    hours_after_sunset: int
    parts: int

    def __post_init__(self) -> None:
        if not 0 <= self.hours_after_sunset < HOURS_PER_DAY:
            raise ValueError(
                f"hours_after_sunset must be in 0-23, got {self.hours_after_sunset}"
            )
        if not 0 <= self.parts < PARTS_PER_HOUR:
            raise ValueError(f"parts must be in 0-1079, got {self.parts}")

    @classmethod
    def from_total_parts(cls, year: int, total_parts: int) -> MoladRecord:
        """Build a record from parts elapsed since the reference epoch."""
        day_offset, parts_of_day = divmod(total_parts, PARTS_PER_DAY)
        hours, parts = divmod(parts_of_day, PARTS_PER_HOUR)
        return cls(year=year, day_offset=day_offset, hours_after_sunset=hours, parts=parts)

    @property
    def parts_of_day(self) -> int:
        """Parts elapsed since the sunset that began the molad day."""
        return self.hours_after_sunset * PARTS_PER_HOUR + self.parts

    @property
    def total_parts(self) -> int:
        """Parts elapsed since the reference epoch."""
        return self.day_offset * PARTS_PER_DAY + self.parts_of_day

    @property
    def weekday(self) -> Weekday:
        """Day of the week of the molad."""
        return Weekday.from_number(self.day_offset)

    def at_or_after(self, hours: int, parts: int = 0) -> bool:
        """Check if the molad falls at or after a time of day."""
        return self.parts_of_day >= hours * PARTS_PER_HOUR + parts

    def shifted(self, parts: int) -> MoladRecord:
        """Return the record moved by a number of parts, carrying into days."""
        return MoladRecord.from_total_parts(self.year, self.total_parts + parts)


@dataclass(frozen=True)
class MoladAnnouncement:
    """
    Mean conjunction of a month as announced in synagogue.

    Clock hours run from midnight, so hour 16 is 4 p.m. on ``weekday``.

    Attributes:
        year: Hebrew year of the month
        month: Month ordinal (Tishrei = 1)
        weekday: Day of the week
        hour: Clock hour, 0-23
        minutes: Minutes past the hour, 0-59
        chalakim: Remaining parts, 0-17
    """
    year: int
    month: int
    weekday: Weekday
    hour: int
    minutes: int
    chalakim: int
