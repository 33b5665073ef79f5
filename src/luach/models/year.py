"""
Luach Year Models

Per-year calendar structure: the month table and the cached year record.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from ..exceptions import CalendarInvariantError, InvalidMonthError
from .enums import MonthKey, YearLengthCategory


@dataclass(frozen=True)
class MonthSpec:
    """
    One month of a specific Hebrew year.

    Attributes:
        index: Month ordinal within the year (Tishrei = 1)
        key: Symbolic month key
        name: Display name ("Adar II" in a leap year, "Adar" otherwise)
        days: 29 or 30
    """
    index: int
    key: MonthKey
    name: str
    days: int

    def __post_init__(self) -> None:
        if self.days not in (29, 30):
            raise ValueError(f"Month {self.name} must have 29 or 30 days, got {self.days}")


@dataclass(frozen=True)
class MonthTable:
    """
    Ordered months of a Hebrew year.

    The month lengths must add up to the year length; a table that does
    not is rejected with CalendarInvariantError.

    Attributes:
        year: Hebrew year
        year_length: Days in the year
        months: Months in Tishrei-first order
    """
    year: int
    year_length: int
    months: tuple[MonthSpec, ...]

    def __post_init__(self) -> None:
        if self.total_days != self.year_length:
            raise CalendarInvariantError(
                message=(
                    f"Month lengths of year {self.year} sum to {self.total_days}, "
                    f"expected {self.year_length}"
                ),
                details={"year": self.year, "total_days": self.total_days,
                         "year_length": self.year_length},
            )

    @property
    def total_days(self) -> int:
        return sum(m.days for m in self.months)

    @property
    def is_leap(self) -> bool:
        return len(self.months) == 13

    def __len__(self) -> int:
        return len(self.months)

    def __iter__(self) -> Iterator[MonthSpec]:
        return iter(self.months)

    def month(self, index: int) -> MonthSpec:
        """
        Get a month by ordinal.

        Raises:
            InvalidMonthError: If the year has no such month
        """
        if not 1 <= index <= len(self.months):
            raise InvalidMonthError(
                message=(
                    f"Year {self.year} has {len(self.months)} months, "
                    f"month {index} does not exist"
                ),
                details={"year": self.year, "month": index},
            )
        return self.months[index - 1]

    def find(self, key: MonthKey) -> Optional[MonthSpec]:
        """Month for a symbolic key, or None if the year lacks it."""
        for spec in self.months:
            if spec.key == key:
                return spec
        return None

    def days_before(self, index: int) -> int:
        """Days in the months that precede ``index``."""
        return sum(m.days for m in self.months[: index - 1])


@dataclass(frozen=True)
class YearInfo:
    """
    Everything the converter needs about a Hebrew year.

    Attributes:
        year: Hebrew year
        rosh_hashanah_jdn: JDN of 1 Tishrei
        year_length: Days from this Rosh Hashanah to the next
        category: Deficient / regular / complete
        month_table: Month lengths for the year
    """
    year: int
    rosh_hashanah_jdn: int
    year_length: int
    category: YearLengthCategory
    month_table: MonthTable

    @property
    def is_leap(self) -> bool:
        return self.month_table.is_leap

    @property
    def next_rosh_hashanah_jdn(self) -> int:
        return self.rosh_hashanah_jdn + self.year_length

    def contains(self, jdn: int) -> bool:
        """Check if a day number falls inside this year."""
        return self.rosh_hashanah_jdn <= jdn < self.next_rosh_hashanah_jdn
