"""
Luach Holiday Resolver

Evaluates a holiday pack against one Hebrew year and produces the year's
schedule for Israel or the Diaspora.

Evaluation is total: a rule whose month or day does not exist in the year
(30 Cheshvan in a deficient year, Adar I in a common year) simply yields
nothing, and so do rules anchored on it. Anchors are resolved on demand,
memoized per year, with cycle detection.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from ..exceptions import HolidayRuleError, UnsupportedLocaleError
from ..models import (
    Anchor,
    AnchorOffset,
    DateRule,
    FixedHebrewDate,
    HebrewDate,
    HolidayCategory,
    HolidayOccurrence,
    HolidayPack,
    HolidayRule,
    Locale,
    MonthDay,
    MonthSpec,
    NearestWeekday,
    Weekday,
    WeekdayDirection,
    YearInfo,
)
from .converter import HebrewCalendar
from .julian_day import weekday_of

logger = logging.getLogger(__name__)


def parse_locale(locale: Union[Locale, str]) -> Locale:
    """
    Normalize a requested locale.

    Raises:
        UnsupportedLocaleError: Unless the locale is Israel or Diaspora
    """
    # Names are matched case-insensitively
    name = locale
    if isinstance(locale, str) and not isinstance(locale, Locale):
        name = locale.lower()
    try:
        value = Locale(name)
    except ValueError:
        value = None
    if value not in (Locale.ISRAEL, Locale.DIASPORA):
        raise UnsupportedLocaleError(
            message=f"Holidays can be resolved for israel or diaspora, not {locale!r}",
            details={"locale": str(getattr(locale, "value", locale))},
        )
    return value


def find_weekday(jdn: int, weekday_number: int, direction: WeekdayDirection) -> int:
    """Day number of a weekday searched from ``jdn`` in a direction."""
    forward = (weekday_number - weekday_of(jdn).number) % 7
    backward = (7 - forward) % 7
    if direction == WeekdayDirection.ON_OR_AFTER:
        return jdn + forward
    if direction == WeekdayDirection.AFTER:
        return jdn + (forward or 7)
    if direction == WeekdayDirection.ON_OR_BEFORE:
        return jdn - backward
    if direction == WeekdayDirection.BEFORE:
        return jdn - (backward or 7)
    return jdn + forward if forward <= backward else jdn - backward


# =============================================================================
# Year Evaluation
# =============================================================================

class _YearEvaluation:
    """Memoized rule dates for a single year."""

    def __init__(self, pack: HolidayPack, info: YearInfo) -> None:
        self.pack = pack
        self.info = info
        self._dates: dict[str, Optional[int]] = {}
        self._resolving: list[str] = []

    def month_day_jdn(self, month_day: MonthDay) -> Optional[int]:
        spec = self.info.month_table.find(month_day.month)
        if spec is None or month_day.day > spec.days:
            return None
        return (
            self.info.rosh_hashanah_jdn
            + self.info.month_table.days_before(spec.index)
            + month_day.day
            - 1
        )

    def anchor_jdn(self, anchor: Anchor) -> Optional[int]:
        if isinstance(anchor, MonthDay):
            return self.month_day_jdn(anchor)
        rule = self.pack.get_rule(anchor)
        if rule is None:
            raise HolidayRuleError(
                message=f"Unknown anchor rule {anchor!r}",
                details={"anchor": anchor, "chain": list(self._resolving)},
            )
        return self.rule_jdn(rule)

    def rule_jdn(self, rule: HolidayRule) -> Optional[int]:
        if rule.key in self._dates:
            return self._dates[rule.key]
        if rule.key in self._resolving:
            cycle = self._resolving[self._resolving.index(rule.key):] + [rule.key]
            raise HolidayRuleError(
                message=f"Anchor cycle: {' -> '.join(cycle)}",
                details={"cycle": cycle},
            )

        self._resolving.append(rule.key)
        try:
            jdn = self._evaluate(rule) if rule.applies_to(self.info.is_leap) else None
        finally:
            self._resolving.pop()
        self._dates[rule.key] = jdn
        return jdn

    def _evaluate(self, rule: HolidayRule) -> Optional[int]:
        date_rule: DateRule = rule.rule
        match date_rule:
            case FixedHebrewDate(month=month, day=day, defer=defer):
                jdn = self.month_day_jdn(MonthDay(month, day))
                if jdn is None:
                    return None
                weekday = weekday_of(jdn)
                for shift in defer:
                    if shift.weekday == weekday:
                        return jdn + shift.days
                return jdn
            case AnchorOffset(anchor=anchor, offset=offset):
                base = self._anchored(rule, anchor)
                return None if base is None else base + offset
            case NearestWeekday(anchor=anchor, weekday=weekday, direction=direction):
                base = self._anchored(rule, anchor)
                return None if base is None else find_weekday(base, weekday.number, direction)
            case _:
                raise HolidayRuleError(
                    message=f"Rule {rule.key!r} has unsupported type {type(date_rule).__name__}",
                    details={"key": rule.key},
                )

    def _anchored(self, rule: HolidayRule, anchor: Anchor) -> Optional[int]:
        base = self.anchor_jdn(anchor)
        if base is None:
            logger.warning(
                "Skipping %s in year %d: anchor %s has no date",
                rule.key, self.info.year, anchor,
            )
        return base


# =============================================================================
# Holiday Resolver
# =============================================================================

@dataclass
class HolidayResolver:
    """
    Resolves the holidays of a Hebrew year.

    Usage:
        resolver = HolidayResolver(pack=load_standard_pack())

        for occurrence in resolver.holidays_for_year(5784, Locale.DIASPORA):
            print(occurrence.hebrew_date, occurrence.identifier)

        # Only the major days and fasts, no Rosh Chodesh
        resolver = HolidayResolver(
            pack=pack,
            include_groups=frozenset({"core", "fast"}),
            include_rosh_chodesh=False,
            include_shabbat_mevarchim=False,
        )
    """

    pack: HolidayPack
    calendar: HebrewCalendar = field(default_factory=HebrewCalendar)

    # None includes every group
    include_groups: Optional[frozenset[str]] = None
    include_rosh_chodesh: bool = True
    include_shabbat_mevarchim: bool = True

    def _included(self, rule: HolidayRule) -> bool:
        return self.include_groups is None or rule.group in self.include_groups

    def rule_dates(self, year: int) -> dict[str, Optional[HebrewDate]]:
        """
        Date of every rule in the pack for a year, before locale filtering.

        Rules with no date in the year map to None.
        """
        info = self.calendar.year_info(year)
        evaluation = _YearEvaluation(self.pack, info)
        return {
            rule.key: self._to_hebrew(evaluation.rule_jdn(rule))
            for rule in self.pack.rules
        }

    def _to_hebrew(self, jdn: Optional[int]) -> Optional[HebrewDate]:
        return None if jdn is None else self.calendar.jdn_to_hebrew(jdn)

    def _rule_occurrences(self, info: YearInfo) -> Iterable[HolidayOccurrence]:
        evaluation = _YearEvaluation(self.pack, info)
        for rule in self.pack.rules:
            jdn = evaluation.rule_jdn(rule)
            if jdn is None or not self._included(rule):
                continue
            if not info.contains(jdn):
                logger.debug("Rule %s falls outside year %d", rule.key, info.year)
                continue
            yield HolidayOccurrence(
                identifier=rule.name,
                hebrew_date=self.calendar.jdn_to_hebrew(jdn),
                category=rule.category,
                locale=rule.locale,
                key=rule.key,
                jdn=jdn,
            )

    def rosh_chodesh(self, year: int) -> list[HolidayOccurrence]:
        """
        Rosh Chodesh days of a year.

        A month that follows a 30-day month has two: day 30 of the previous
        month and day 1 of the month itself. Tishrei has none.
        """
        occurrences: list[HolidayOccurrence] = []
        for spec, days in self._rosh_chodesh_days(year):
            for hebrew_date, jdn in days:
                occurrences.append(HolidayOccurrence(
                    identifier=f"Rosh Chodesh {spec.name}",
                    hebrew_date=hebrew_date,
                    category=HolidayCategory.ROSH_CHODESH,
                    locale=Locale.BOTH,
                    key=f"rosh_chodesh_{spec.key.value}",
                    jdn=jdn,
                ))
        return occurrences

    def shabbat_mevarchim(self, year: int) -> list[HolidayOccurrence]:
        """
        The Shabbat before each Rosh Chodesh, on which the coming month is
        announced.

        Searched strictly before the first Rosh Chodesh day, so a Rosh
        Chodesh on Shabbat is blessed the week before. The month of Tishrei
        is not announced.
        """
        occurrences: list[HolidayOccurrence] = []
        for spec, days in self._rosh_chodesh_days(year):
            _, first_jdn = days[0]
            jdn = find_weekday(first_jdn, Weekday.SATURDAY.number, WeekdayDirection.BEFORE)
            occurrences.append(HolidayOccurrence(
                identifier=f"Shabbat Mevarchim {spec.name}",
                hebrew_date=self.calendar.jdn_to_hebrew(jdn),
                category=HolidayCategory.SHABBAT_MEVARCHIM,
                locale=Locale.BOTH,
                key=f"shabbat_mevarchim_{spec.key.value}",
                jdn=jdn,
            ))
        return occurrences

    def _rosh_chodesh_days(
        self,
        year: int,
    ) -> Iterable[tuple[MonthSpec, list[tuple[HebrewDate, int]]]]:
        """Every month after Tishrei with its Rosh Chodesh dates and day numbers."""
        info = self.calendar.year_info(year)
        previous = None
        for spec in info.month_table:
            if previous is not None:
                first_jdn = info.rosh_hashanah_jdn + info.month_table.days_before(spec.index)
                days = [
                    (HebrewDate(year, previous.index, 30), first_jdn - 1),
                    (HebrewDate(year, spec.index, 1), first_jdn),
                ]
                if previous.days == 29:
                    days = days[1:]
                yield spec, days
            previous = spec

    def holidays_for_year(
        self,
        year: int,
        locale: Union[Locale, str],
    ) -> list[HolidayOccurrence]:
        """
        Holiday schedule of a Hebrew year for Israel or the Diaspora.

        Sorted by (month, day); occurrences on the same date keep pack
        declaration order, followed by Rosh Chodesh and then Shabbat
        Mevarchim.

        Raises:
            UnsupportedLocaleError: If locale is not Israel or Diaspora
            UnsupportedYearError: If year < 1
            HolidayRuleError: If the pack has an unknown anchor or a cycle
        """
        requested = parse_locale(locale)
        info = self.calendar.year_info(year)

        occurrences = list(self._rule_occurrences(info))
        if self.include_rosh_chodesh:
            occurrences.extend(self.rosh_chodesh(year))
        if self.include_shabbat_mevarchim:
            occurrences.extend(self.shabbat_mevarchim(year))

        schedule = [o for o in occurrences if o.observed_in(requested)]
        schedule.sort(key=lambda o: (o.hebrew_date.month, o.hebrew_date.day))
        logger.debug(
            "Resolved %d holidays for year %d (%s) from pack %s",
            len(schedule), year, requested.value, self.pack.id,
        )
        return schedule
