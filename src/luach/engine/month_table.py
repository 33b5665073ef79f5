"""
Luach Month Length Table

Builds the Tishrei-first month table of a Hebrew year.

Only Cheshvan and Kislev vary with the year's length category; a leap year
inserts a 30-day Adar I before the 29-day Adar (then called Adar II).
"""
from __future__ import annotations

from ..exceptions import InvalidMonthError
from ..models import MonthKey, MonthSpec, MonthTable, YearLengthCategory
from .leap_year import category_for_length, days_in_year, is_leap_year

# (key, common-year name, days); None marks the variable months
_MONTHS_BEFORE_ADAR = (
    (MonthKey.TISHREI, "Tishrei", 30),
    (MonthKey.CHESHVAN, "Cheshvan", None),
    (MonthKey.KISLEV, "Kislev", None),
    (MonthKey.TEVET, "Tevet", 29),
    (MonthKey.SHEVAT, "Shevat", 30),
)

_MONTHS_FROM_NISAN = (
    (MonthKey.NISAN, "Nisan", 30),
    (MonthKey.IYAR, "Iyar", 29),
    (MonthKey.SIVAN, "Sivan", 30),
    (MonthKey.TAMMUZ, "Tammuz", 29),
    (MonthKey.AV, "Av", 30),
    (MonthKey.ELUL, "Elul", 29),
)


def _variable_days(key: MonthKey, category: YearLengthCategory) -> int:
    if key == MonthKey.CHESHVAN:
        return 30 if category == YearLengthCategory.SHLEIMAH else 29
    return 29 if category == YearLengthCategory.CHASERIM else 30


def build_month_table(year: int, year_length: int) -> MonthTable:
    """
    Build the month table for a year of known length.

    Raises:
        CalendarInvariantError: If the length is impossible for the year
    """
    category = category_for_length(year, year_length)
    leap = is_leap_year(year)

    rows: list[tuple[MonthKey, str, int]] = []
    for key, name, days in _MONTHS_BEFORE_ADAR:
        rows.append((key, name, days if days is not None else _variable_days(key, category)))
    if leap:
        rows.append((MonthKey.ADAR_I, "Adar I", 30))
        rows.append((MonthKey.ADAR, "Adar II", 29))
    else:
        rows.append((MonthKey.ADAR, "Adar", 29))
    rows.extend(_MONTHS_FROM_NISAN)

    months = tuple(
        MonthSpec(index=i, key=key, name=name, days=days)
        for i, (key, name, days) in enumerate(rows, start=1)
    )
    return MonthTable(year=year, year_length=year_length, months=months)


def month_table(year: int) -> MonthTable:
    """Month table of a Hebrew year, computed from its Rosh Hashanah days."""
    return build_month_table(year, days_in_year(year))


def month_index(table: MonthTable, key: MonthKey) -> int:
    """
    Ordinal of a symbolic month in a year's table.

    Raises:
        InvalidMonthError: If the year has no such month (Adar I in a
            common year)
    """
    spec = table.find(key)
    if spec is None:
        raise InvalidMonthError(
            message=f"Year {table.year} has no month {key.value}",
            details={"year": table.year, "month": key.value},
        )
    return spec.index
