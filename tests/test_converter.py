"""
Tests for Hebrew date conversion.
"""
from __future__ import annotations

from datetime import date

import pytest

from luach.engine import HebrewCalendar, YearCache, rosh_hashanah_jdn
from luach.exceptions import InvalidDayError, InvalidMonthError, UnsupportedYearError
from luach.models import GregorianDate, HebrewDate, Weekday, YearLengthCategory
from tests.conftest import RD_TO_JDN


# (year, month, day, fixed day number)
KNOWN_HEBREW_DATES = [
    (3762, 1, 1, 249),
    (3849, 5, 1, 32141),
    (5708, 9, 6, 711262),      # 6 Iyar 5708, 15 May 1948
    (5765, 1, 1, 731840),
    (5765, 7, 22, 732038),     # 22 Adar II 5765, 2 April 2005
    (5769, 2, 15, 733359),
    (5778, 4, 4, 736685),
    (5781, 7, 23, 737885),
]


class TestHebrewToJdn:
    """Tests for hebrew_to_jdn."""

    @pytest.mark.parametrize("year,month,day,rd", KNOWN_HEBREW_DATES)
    def test_known_dates(
        self, calendar: HebrewCalendar, year: int, month: int, day: int, rd: int
    ) -> None:
        assert calendar.hebrew_to_jdn(HebrewDate(year, month, day)) == rd + RD_TO_JDN

    def test_first_of_tishrei_is_rosh_hashanah(self, calendar: HebrewCalendar) -> None:
        assert calendar.hebrew_to_jdn(HebrewDate(5784, 1, 1)) == rosh_hashanah_jdn(5784)

    def test_last_day_of_year(self, calendar: HebrewCalendar) -> None:
        assert calendar.hebrew_to_jdn(HebrewDate(5784, 13, 29)) == rosh_hashanah_jdn(5785) - 1

    def test_month_13_in_common_year(self, calendar: HebrewCalendar) -> None:
        with pytest.raises(InvalidMonthError) as exc_info:
            calendar.hebrew_to_jdn(HebrewDate(5783, 13, 1))
        assert exc_info.value.field_name == "month"

    def test_day_30_of_short_month(self, calendar: HebrewCalendar) -> None:
        with pytest.raises(InvalidDayError) as exc_info:
            calendar.hebrew_to_jdn(HebrewDate(5784, 4, 30))
        assert exc_info.value.field_name == "day"
        assert exc_info.value.details["days_in_month"] == 29

    def test_cheshvan_30_depends_on_year(self, calendar: HebrewCalendar) -> None:
        assert calendar.is_valid(HebrewDate(5783, 2, 30))
        assert not calendar.is_valid(HebrewDate(5784, 2, 30))


class TestJdnToHebrew:
    """Tests for jdn_to_hebrew."""

    @pytest.mark.parametrize("year,month,day,rd", KNOWN_HEBREW_DATES)
    def test_known_dates(
        self, calendar: HebrewCalendar, year: int, month: int, day: int, rd: int
    ) -> None:
        assert calendar.jdn_to_hebrew(rd + RD_TO_JDN) == HebrewDate(year, month, day)

    def test_first_day(self, calendar: HebrewCalendar) -> None:
        assert calendar.jdn_to_hebrew(347998) == HebrewDate(1, 1, 1)

    def test_before_epoch(self, calendar: HebrewCalendar) -> None:
        with pytest.raises(UnsupportedYearError):
            calendar.jdn_to_hebrew(347997)

    def test_year_boundaries(self, calendar: HebrewCalendar) -> None:
        for year in range(5700, 5800):
            start = rosh_hashanah_jdn(year)
            assert calendar.jdn_to_hebrew(start) == HebrewDate(year, 1, 1)
            assert calendar.jdn_to_hebrew(start - 1).year == year - 1
            assert calendar.jdn_to_hebrew(start - 1).day == 29

    def test_round_trip_days(self, calendar: HebrewCalendar) -> None:
        start = rosh_hashanah_jdn(5700)
        for jdn in range(start, start + 40 * 365, 7):
            assert calendar.hebrew_to_jdn(calendar.jdn_to_hebrew(jdn)) == jdn

    def test_round_trip_early_years(self, calendar: HebrewCalendar) -> None:
        for jdn in range(347998, 347998 + 20 * 365, 11):
            assert calendar.hebrew_to_jdn(calendar.jdn_to_hebrew(jdn)) == jdn

    def test_monotone(self, calendar: HebrewCalendar) -> None:
        start = rosh_hashanah_jdn(5783)
        dates = [calendar.jdn_to_hebrew(jdn) for jdn in range(start, start + 800)]
        assert dates == sorted(dates)
        assert len(set(dates)) == len(dates)


class TestGregorianConversion:
    """Tests for conversion through Gregorian dates."""

    def test_rosh_hashanah_5784(self, calendar: HebrewCalendar) -> None:
        hd = calendar.gregorian_to_hebrew(GregorianDate(2023, 9, 16))
        assert hd == HebrewDate(5784, 1, 1)
        assert calendar.weekday(hd) == Weekday.SATURDAY

    def test_accepts_datetime_date(self, calendar: HebrewCalendar) -> None:
        assert calendar.gregorian_to_hebrew(date(2024, 4, 23)) == HebrewDate(5784, 8, 15)

    def test_hebrew_to_gregorian(self, calendar: HebrewCalendar) -> None:
        assert calendar.hebrew_to_gregorian(HebrewDate(5765, 7, 22)) == GregorianDate(2005, 4, 2)

    def test_gregorian_round_trip(self, calendar: HebrewCalendar) -> None:
        d = GregorianDate(1900, 1, 1)
        for _ in range(400):
            assert calendar.hebrew_to_gregorian(calendar.gregorian_to_hebrew(d)) == d
            d = calendar.hebrew_to_gregorian(calendar.add_days(calendar.gregorian_to_hebrew(d), 113))

    def test_add_days_crosses_year(self, calendar: HebrewCalendar) -> None:
        assert calendar.add_days(HebrewDate(5784, 13, 29), 1) == HebrewDate(5785, 1, 1)
        assert calendar.add_days(HebrewDate(5785, 1, 1), -1) == HebrewDate(5784, 13, 29)


class TestYearQueries:
    """Tests for per-year queries."""

    def test_year_info(self, calendar: HebrewCalendar) -> None:
        info = calendar.year_info(5784)
        assert info.rosh_hashanah_jdn == 2460204
        assert info.year_length == 383
        assert info.category == YearLengthCategory.CHASERIM
        assert info.is_leap
        assert info.contains(2460204)
        assert not info.contains(info.next_rosh_hashanah_jdn)

    def test_days_in_month(self, calendar: HebrewCalendar) -> None:
        assert calendar.days_in_month(5784, 6) == 30
        assert calendar.days_in_month(5783, 6) == 29

    def test_days_in_missing_month(self, calendar: HebrewCalendar) -> None:
        with pytest.raises(InvalidMonthError):
            calendar.days_in_month(5783, 13)

    def test_month_names(self, calendar: HebrewCalendar) -> None:
        assert calendar.month_name(5784, 7) == "Adar II"
        assert calendar.month_name(5783, 6) == "Adar"
        assert calendar.month_name(5783, 7) == "Nisan"

    def test_year_zero_rejected(self, calendar: HebrewCalendar) -> None:
        with pytest.raises(UnsupportedYearError):
            calendar.months_in_year(0)

    def test_fresh_cache_is_isolated(self) -> None:
        cache = YearCache()
        HebrewCalendar(cache=cache).year_info(5784)
        assert 5784 in cache
        assert 5784 not in YearCache()


class TestHebrewDateValidation:
    """Tests for HebrewDate construction."""

    @pytest.mark.parametrize("year,month,day,error", [
        (0, 1, 1, UnsupportedYearError),
        (5784, 0, 1, InvalidMonthError),
        (5784, 14, 1, InvalidMonthError),
        (5784, 1, 0, InvalidDayError),
        (5784, 1, 31, InvalidDayError),
    ])
    def test_structural_checks(self, year: int, month: int, day: int, error: type) -> None:
        with pytest.raises(error):
            HebrewDate(year, month, day)

    def test_ordering_is_chronological(self) -> None:
        assert HebrewDate(5783, 12, 29) < HebrewDate(5784, 1, 1) < HebrewDate(5784, 13, 1)

    def test_replace(self) -> None:
        assert HebrewDate(5784, 1, 1).replace(day=10) == HebrewDate(5784, 1, 10)
