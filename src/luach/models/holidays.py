"""
Luach Holiday Models

Declarative holiday rules and the occurrences they resolve to.

Key components:
- MonthDay: A day in a symbolic month
- FixedHebrewDate / AnchorOffset / NearestWeekday: Date rule variants
- HolidayRule: A date rule plus the occurrence it produces
- HolidayPack: An ordered, hashable set of rules
- HolidayOccurrence: A resolved holiday in a specific year

Date rules form a closed union; the resolver dispatches on the variant
with ``match``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .dates import HebrewDate
from .enums import (
    HolidayCategory,
    Locale,
    MonthKey,
    Weekday,
    WeekdayDirection,
    YearFilter,
)


# =============================================================================
# Date Rule Variants
# =============================================================================

@dataclass(frozen=True)
class MonthDay:
    """A day of a symbolic month, e.g. 15 Nisan."""
    month: MonthKey
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.day <= 30:
            raise ValueError(f"Day must be in 1-30, got {self.day}")


@dataclass(frozen=True)
class WeekdayShift:
    """
    Deferral applied when a fixed date lands on a given weekday.

    Attributes:
        weekday: Weekday that triggers the shift
        days: Days to move (negative moves earlier)
    """
    weekday: Weekday
    days: int


@dataclass(frozen=True)
class FixedHebrewDate:
    """
    A fixed day of a month, optionally deferred off certain weekdays.

    At most one shift applies: the first whose weekday matches the
    original date. The shifted date is not re-checked.
    """
    month: MonthKey
    day: int
    defer: tuple[WeekdayShift, ...] = ()

    def __post_init__(self) -> None:
        if not 1 <= self.day <= 30:
            raise ValueError(f"Day must be in 1-30, got {self.day}")
        weekdays = [s.weekday for s in self.defer]
        if len(weekdays) != len(set(weekdays)):
            raise ValueError("Deferral weekdays must be unique")


Anchor = Union[str, MonthDay]


@dataclass(frozen=True)
class AnchorOffset:
    """
    A fixed number of days from an anchor.

    The anchor is either the key of another rule in the same pack or an
    inline month/day.
    """
    anchor: Anchor
    offset: int


@dataclass(frozen=True)
class NearestWeekday:
    """
    The given weekday found by searching from an anchor.

    ``before`` and ``after`` exclude the anchor itself. ``nearest`` returns
    the anchor when it already falls on the weekday, otherwise the closer
    of the previous and next occurrence.
    """
    anchor: Anchor
    weekday: Weekday
    direction: WeekdayDirection = WeekdayDirection.NEAREST


DateRule = Union[FixedHebrewDate, AnchorOffset, NearestWeekday]


# =============================================================================
# Holiday Rule
# =============================================================================

@dataclass(frozen=True)
class HolidayRule:
    """
    A holiday definition.

    Attributes:
        key: Unique key within the pack; other rules anchor on it
        name: Identifier of the resulting occurrence ("Pesach I")
        rule: How the date is computed
        category: Kind of day
        locale: Where it is observed
        years: Which years it applies to
        group: Configuration group used to include or exclude rules
        description: Free text
    """
    key: str
    name: str
    rule: DateRule
    category: HolidayCategory
    locale: Locale = Locale.BOTH
    years: YearFilter = YearFilter.ANY
    group: str = "core"
    description: str = ""

    @property
    def anchor_key(self) -> Optional[str]:
        """Key of the rule this one depends on, if any."""
        anchor = getattr(self.rule, "anchor", None)
        return anchor if isinstance(anchor, str) else None

    def applies_to(self, is_leap: bool) -> bool:
        """Check the year filter against a year's leap status."""
        if self.years == YearFilter.LEAP:
            return is_leap
        if self.years == YearFilter.COMMON:
            return not is_leap
        return True


# =============================================================================
# Holiday Pack
# =============================================================================

@dataclass(frozen=True)
class HolidayPack:
    """
    An ordered set of holiday rules.

    Declaration order is significant: it breaks ties between occurrences
    on the same date.
    """
    id: str
    name: str
    version: str
    rules: tuple[HolidayRule, ...]
    description: str = ""
    _by_key: dict[str, HolidayRule] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._by_key.update((r.key, r) for r in self.rules)

    def get_rule(self, key: str) -> Optional[HolidayRule]:
        return self._by_key.get(key)

    @property
    def keys(self) -> list[str]:
        return [r.key for r in self.rules]

    @property
    def pack_hash(self) -> str:
        """SHA-256 of the pack's canonical JSON form."""
        from ..canon import compute_holiday_pack_hash
        return compute_holiday_pack_hash(self)


# =============================================================================
# Holiday Occurrence
# =============================================================================

@dataclass(frozen=True)
class HolidayOccurrence:
    """
    A holiday as it falls in a specific Hebrew year.

    Attributes:
        identifier: Display identifier, from the rule's name
        hebrew_date: Date of the occurrence
        category: Kind of day
        locale: Where it is observed
        key: Key of the rule that produced it
        jdn: Julian Day Number of the date
    """
    identifier: str
    hebrew_date: HebrewDate
    category: HolidayCategory
    locale: Locale
    key: str = ""
    jdn: Optional[int] = None

    @property
    def observed_in_israel(self) -> bool:
        return self.locale in (Locale.ISRAEL, Locale.BOTH)

    @property
    def observed_in_diaspora(self) -> bool:
        return self.locale in (Locale.DIASPORA, Locale.BOTH)

    def observed_in(self, locale: Locale) -> bool:
        """Check if observed in Israel or the Diaspora."""
        if locale == Locale.ISRAEL:
            return self.observed_in_israel
        if locale == Locale.DIASPORA:
            return self.observed_in_diaspora
        return True

    @property
    def is_rest_day(self) -> bool:
        """Yom tov and Yom Kippur, where work is prohibited."""
        return self.category == HolidayCategory.MAJOR
