"""
Luach Hebrew Epoch Calculator

Computes the mean conjunction (molad) of Tishrei and the day of Rosh
Hashanah for any Hebrew year.

Time is counted in parts (chalakim) since the reference epoch, the Sunday
JDN 347997. The first molad (BaHaRaD) falls on day 1, a Monday, at 5 hours
and 204 parts after sunset; each later molad adds one mean lunation.

Rosh Hashanah starts on the molad day and is moved by the postponement
rules (dechiyot). The rules are data: an ordered tuple of predicates that
is applied to a fixpoint, one rule per pass.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from ..exceptions import InvalidMonthError, PostponementError, UnsupportedYearError
from ..models import (
    PARTS_PER_DAY,
    PARTS_PER_HOUR,
    PARTS_PER_MINUTE,
    MoladAnnouncement,
    MoladRecord,
    Weekday,
)
from .leap_year import is_leap_year, months_in_year

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

# The Sunday before 1 Tishrei AM 1
REFERENCE_EPOCH_JDN = 347997

# 29 days, 12 hours, 793 parts
LUNATION_PARTS = 29 * PARTS_PER_DAY + 12 * PARTS_PER_HOUR + 793

# BaHaRaD: day 1 (Monday), 5 hours, 204 parts
MOLAD_TOHU = MoladRecord(year=1, day_offset=1, hours_after_sunset=5, parts=204)

# Hours from sunset (taken as 18:00) to midnight
SUNSET_TO_MIDNIGHT_HOURS = 6

MAX_POSTPONEMENT_PASSES = 8


def months_elapsed(year: int) -> int:
    """Lunar months from the first molad to the molad of Tishrei of ``year``."""
    return (235 * year - 234) // 19


# =============================================================================
# Molad
# =============================================================================

def _check_year(year: int) -> None:
    if year < 1:
        raise UnsupportedYearError(
            message=f"Hebrew year {year} precedes the epoch (year 1)",
            details={"year": year},
        )


def molad(year: int) -> MoladRecord:
    """
    Get the molad of Tishrei for a Hebrew year.

    Raises:
        UnsupportedYearError: If year < 1
    """
    _check_year(year)
    total = MOLAD_TOHU.total_parts + months_elapsed(year) * LUNATION_PARTS
    return MoladRecord.from_total_parts(year, total)


def molad_for_month(year: int, month: int) -> MoladAnnouncement:
    """
    Get the molad of any month, as announced: weekday and clock time.

    Args:
        year: Hebrew year
        month: Month ordinal (Tishrei = 1)

    Raises:
        UnsupportedYearError: If year < 1
        InvalidMonthError: If the year has no such month
    """
    _check_year(year)
    if not 1 <= month <= months_in_year(year):
        raise InvalidMonthError(
            message=f"Year {year} has {months_in_year(year)} months, month {month} does not exist",
            details={"year": year, "month": month},
        )

    months = months_elapsed(year) + month - 1
    total = (
        MOLAD_TOHU.total_parts
        + months * LUNATION_PARTS
        - SUNSET_TO_MIDNIGHT_HOURS * PARTS_PER_HOUR
    )
    day, parts_of_day = divmod(total, PARTS_PER_DAY)
    hour, parts = divmod(parts_of_day, PARTS_PER_HOUR)
    minutes, chalakim = divmod(parts, PARTS_PER_MINUTE)
    return MoladAnnouncement(
        year=year,
        month=month,
        weekday=Weekday.from_number(day),
        hour=hour,
        minutes=minutes,
        chalakim=chalakim,
    )


# =============================================================================
# Postponement Rules
# =============================================================================

@dataclass(frozen=True)
class PostponementRule:
    """
    One postponement rule.

    Attributes:
        name: Traditional name of the rule
        description: What the rule checks
        applies: Predicate over the molad and the candidate day offset
        days: Days to postpone when the rule applies
    """
    name: str
    description: str
    applies: Callable[[MoladRecord, int], bool]
    days: int = 1


_ADU_DAYS = frozenset({Weekday.SUNDAY, Weekday.WEDNESDAY, Weekday.FRIDAY})


def _lo_adu_rosh(m: MoladRecord, day: int) -> bool:
    return Weekday.from_number(day) in _ADU_DAYS


def _molad_zaken(m: MoladRecord, day: int) -> bool:
    return day == m.day_offset and m.at_or_after(18)


def _gatarad(m: MoladRecord, day: int) -> bool:
    return (
        day == m.day_offset
        and not is_leap_year(m.year)
        and m.weekday == Weekday.TUESDAY
        and m.at_or_after(9, 204)
    )


def _betutakpat(m: MoladRecord, day: int) -> bool:
    return (
        day == m.day_offset
        and is_leap_year(m.year - 1)
        and m.weekday == Weekday.MONDAY
        and m.at_or_after(15, 589)
    )


POSTPONEMENT_RULES: tuple[PostponementRule, ...] = (
    PostponementRule(
        name="lo_adu_rosh",
        description="Rosh Hashanah never falls on Sunday, Wednesday or Friday",
        applies=_lo_adu_rosh,
    ),
    PostponementRule(
        name="molad_zaken",
        description="Molad at or after noon (18 hours after sunset)",
        applies=_molad_zaken,
    ),
    PostponementRule(
        name="gatarad",
        description="Common year, molad on Tuesday at or after 9h 204p",
        applies=_gatarad,
    ),
    PostponementRule(
        name="betutakpat",
        description="Year after a leap year, molad on Monday at or after 15h 589p",
        applies=_betutakpat,
    ),
)


def apply_postponements(
    m: MoladRecord,
    rules: tuple[PostponementRule, ...] = POSTPONEMENT_RULES,
) -> tuple[int, tuple[str, ...]]:
    """
    Apply postponement rules to the molad day until none applies.

    Each pass applies the first rule (in order) that holds for the current
    candidate day.

    Returns:
        Tuple of (day offset of Rosh Hashanah, names of the rules applied)

    Raises:
        PostponementError: If the rules have not settled after
            MAX_POSTPONEMENT_PASSES passes
    """
    day = m.day_offset
    applied: list[str] = []
    for _ in range(MAX_POSTPONEMENT_PASSES):
        rule = next((r for r in rules if r.applies(m, day)), None)
        if rule is None:
            return day, tuple(applied)
        day += rule.days
        applied.append(rule.name)

    raise PostponementError(
        message=(
            f"Postponement rules for year {m.year} did not settle after "
            f"{MAX_POSTPONEMENT_PASSES} passes"
        ),
        details={"year": m.year, "applied": applied},
    )


# =============================================================================
# Rosh Hashanah
# =============================================================================

def elapsed_days(year: int) -> int:
    """Days from the reference epoch to Rosh Hashanah of ``year``."""
    m = molad(year)
    day, applied = apply_postponements(m)
    if applied:
        logger.debug("Year %d: Rosh Hashanah postponed by %s", year, ", ".join(applied))
    return day


def rosh_hashanah_jdn(year: int) -> int:
    """
    Get the JDN of 1 Tishrei of a Hebrew year.

    Raises:
        UnsupportedYearError: If year < 1
    """
    return REFERENCE_EPOCH_JDN + elapsed_days(year)
