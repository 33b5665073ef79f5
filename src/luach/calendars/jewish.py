"""
Jewish Holiday Calendar

Gregorian-date view of the Hebrew holiday schedule.

Holidays are resolved per Hebrew year and indexed by ``datetime.date``;
a Gregorian year spans two Hebrew years. Occurrences whose Gregorian date
falls outside the years ``datetime.date`` can represent (Hebrew years
3761 and 13760 reach into 0 and 10000) are left out of the view.

Yom tov days are the holidays whose category is listed in
``rest_categories``, by default ``major``: Rosh Hashanah, Yom Kippur, the
first and last days of Sukkot and Passover, Shemini Atzeret/Simchat
Torah and Shavuot.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import MAXYEAR, MINYEAR, date
from functools import lru_cache
from typing import Optional

from ..engine import HolidayResolver, jdn_to_gregorian, parse_locale
from ..models import HolidayCategory, HolidayOccurrence, Locale, Weekday
from ..packs import load_standard_pack

# Hebrew year in which 1 January of a Gregorian year falls, minus that year
HEBREW_YEAR_OFFSET = 3760


@dataclass
class JewishHolidayCalendar:
    """
    Holidays of Israel or the Diaspora by Gregorian date.

    Usage:
        calendar = JewishHolidayCalendar(locale=Locale.ISRAEL)

        calendar.is_yom_tov(date(2024, 4, 23))         # Passover (first day)
        calendar.get_holiday_names(date(2024, 4, 23))  # ["Passover (first day)"]

        # Every holiday in the week of Sukkot
        calendar.get_holidays_in_range(date(2024, 10, 17), date(2024, 10, 23))
    """

    locale: Locale = Locale.DIASPORA

    # Holiday categories that count as yom tov
    rest_categories: frozenset[HolidayCategory] = field(
        default_factory=lambda: frozenset({HolidayCategory.MAJOR})
    )

    # Built from the standard pack on first use when not given
    resolver: Optional[HolidayResolver] = None

    # Hebrew year -> Gregorian date -> occurrences
    _by_hebrew_year: dict[int, dict[date, list[HolidayOccurrence]]] = field(
        default_factory=dict, repr=False
    )

    def __post_init__(self) -> None:
        self.locale = parse_locale(self.locale)

    def _get_resolver(self) -> HolidayResolver:
        if self.resolver is None:
            self.resolver = HolidayResolver(pack=load_standard_pack())
        return self.resolver

    def _index_hebrew_year(self, hebrew_year: int) -> dict[date, list[HolidayOccurrence]]:
        by_date: dict[date, list[HolidayOccurrence]] = {}
        for occurrence in self._get_resolver().holidays_for_year(hebrew_year, self.locale):
            gregorian = jdn_to_gregorian(occurrence.jdn)
            if not MINYEAR <= gregorian.year <= MAXYEAR:
                continue
            by_date.setdefault(gregorian.to_date(), []).append(occurrence)
        return by_date

    def _hebrew_year(self, hebrew_year: int) -> dict[date, list[HolidayOccurrence]]:
        if hebrew_year not in self._by_hebrew_year:
            self._by_hebrew_year[hebrew_year] = self._index_hebrew_year(hebrew_year)
        return self._by_hebrew_year[hebrew_year]

    def _hebrew_year_of(self, d: date) -> int:
        return self._get_resolver().calendar.gregorian_to_hebrew(d).year

    def occurrences_on(self, d: date) -> list[HolidayOccurrence]:
        """Every holiday occurrence on a date, in schedule order."""
        return list(self._hebrew_year(self._hebrew_year_of(d)).get(d, []))

    def is_yom_tov(self, d: date) -> bool:
        """Check if a yom tov (or Yom Kippur) falls on a date."""
        return any(o.category in self.rest_categories for o in self.occurrences_on(d))

    def is_rest_day(self, d: date) -> bool:
        """Shabbat or yom tov."""
        return Weekday.from_python(d.weekday()) == Weekday.SATURDAY or self.is_yom_tov(d)

    def get_holiday_names(self, d: date) -> list[str]:
        return [o.identifier for o in self.occurrences_on(d)]

    def get_holiday_name(self, d: date) -> Optional[str]:
        """First holiday on a date, or None."""
        names = self.get_holiday_names(d)
        return names[0] if names else None

    def get_holidays_for_year(self, year: int) -> list[tuple[date, str]]:
        """
        Every holiday of a Gregorian year with its name.

        Returns list of (date, name) tuples sorted by date.
        """
        holidays = []
        for hebrew_year in (year + HEBREW_YEAR_OFFSET, year + HEBREW_YEAR_OFFSET + 1):
            for d, occurrences in self._hebrew_year(hebrew_year).items():
                if d.year == year:
                    holidays.extend((d, o.identifier) for o in occurrences)
        return sorted(holidays, key=lambda x: x[0])

    def get_holidays_in_range(self, start: date, end: date) -> list[tuple[date, HolidayOccurrence]]:
        """Occurrences between two dates, both inclusive, sorted by date."""
        if start > end:
            return []
        found = []
        for hebrew_year in range(self._hebrew_year_of(start), self._hebrew_year_of(end) + 1):
            for d, occurrences in self._hebrew_year(hebrew_year).items():
                if start <= d <= end:
                    found.extend((d, o) for o in occurrences)
        return sorted(found, key=lambda x: x[0])

    def get_yom_tov_in_range(self, start: date, end: date) -> list[date]:
        """Yom tov dates between two dates, both inclusive."""
        return sorted({
            d for d, o in self.get_holidays_in_range(start, end)
            if o.category in self.rest_categories
        })


DIASPORA_CALENDAR = JewishHolidayCalendar()
ISRAEL_CALENDAR = JewishHolidayCalendar(locale=Locale.ISRAEL)


def _calendar_for(locale: Locale) -> JewishHolidayCalendar:
    return ISRAEL_CALENDAR if parse_locale(locale) == Locale.ISRAEL else DIASPORA_CALENDAR


@lru_cache(maxsize=128)
def get_jewish_holidays(year: int, locale: Locale = Locale.DIASPORA) -> tuple[tuple[date, str], ...]:
    """Holidays of a Gregorian year as (date, name) pairs, cached."""
    return tuple(_calendar_for(locale).get_holidays_for_year(year))


def is_yom_tov(d: date, locale: Locale = Locale.DIASPORA) -> bool:
    return _calendar_for(locale).is_yom_tov(d)
