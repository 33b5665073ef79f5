"""
Pytest configuration and fixtures for Luach tests.

Provides helper factories for holiday rules and packs, and fixtures that
give each test its own year cache.
"""
import pytest

from luach.engine import HebrewCalendar, HolidayResolver, YearCache
from luach.models import (
    AnchorOffset,
    FixedHebrewDate,
    HolidayCategory,
    HolidayPack,
    HolidayRule,
    Locale,
    MonthKey,
    NearestWeekday,
    Weekday,
    WeekdayDirection,
    WeekdayShift,
    YearFilter,
)
from luach.packs import load_standard_pack


# Offset between Rata Die (fixed day) numbers and Julian Day Numbers
RD_TO_JDN = 1721425


# =============================================================================
# Factory Helpers
# =============================================================================

def make_fixed_rule(
    key: str,
    month: MonthKey,
    day: int,
    defer: tuple[WeekdayShift, ...] = (),
    category: HolidayCategory = HolidayCategory.MINOR,
    locale: Locale = Locale.BOTH,
    years: YearFilter = YearFilter.ANY,
    name: str = None,
) -> HolidayRule:
    """Create a HolidayRule on a fixed Hebrew date."""
    return HolidayRule(
        key=key,
        name=name or key.replace("_", " ").title(),
        rule=FixedHebrewDate(month=month, day=day, defer=defer),
        category=category,
        locale=locale,
        years=years,
    )


def make_offset_rule(
    key: str,
    anchor,
    offset: int,
    category: HolidayCategory = HolidayCategory.MINOR,
    locale: Locale = Locale.BOTH,
) -> HolidayRule:
    """Create a HolidayRule a number of days from an anchor."""
    return HolidayRule(
        key=key,
        name=key.replace("_", " ").title(),
        rule=AnchorOffset(anchor=anchor, offset=offset),
        category=category,
        locale=locale,
    )


def make_weekday_rule(
    key: str,
    anchor,
    weekday: Weekday = Weekday.SATURDAY,
    direction: WeekdayDirection = WeekdayDirection.NEAREST,
) -> HolidayRule:
    """Create a HolidayRule on a weekday searched from an anchor."""
    return HolidayRule(
        key=key,
        name=key.replace("_", " ").title(),
        rule=NearestWeekday(anchor=anchor, weekday=weekday, direction=direction),
        category=HolidayCategory.MINOR,
    )


def make_pack(*rules: HolidayRule, pack_id: str = "test") -> HolidayPack:
    """Create a HolidayPack from rules, in the given order."""
    return HolidayPack(id=pack_id, name="Test Pack", version="1", rules=tuple(rules))


def make_resolver(*rules: HolidayRule, **kwargs) -> HolidayResolver:
    """Create a resolver over a test pack with a fresh cache."""
    kwargs.setdefault("include_shabbat_mevarchim", False)
    return HolidayResolver(
        pack=make_pack(*rules),
        calendar=HebrewCalendar(cache=YearCache()),
        **kwargs,
    )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def calendar() -> HebrewCalendar:
    """Calendar with its own empty cache."""
    return HebrewCalendar(cache=YearCache())


@pytest.fixture
def standard_pack() -> HolidayPack:
    return load_standard_pack()


@pytest.fixture
def resolver(standard_pack, calendar) -> HolidayResolver:
    """Resolver over the standard pack."""
    return HolidayResolver(pack=standard_pack, calendar=calendar)


def find(occurrences, identifier: str):
    """Occurrences with a given identifier."""
    return [o for o in occurrences if o.identifier == identifier]
