"""
Tests for the molad and Rosh Hashanah calculation.
"""
from __future__ import annotations

import pytest

from luach.engine import (
    MOLAD_TOHU,
    POSTPONEMENT_RULES,
    REFERENCE_EPOCH_JDN,
    PostponementRule,
    apply_postponements,
    elapsed_days,
    molad,
    molad_for_month,
    rosh_hashanah_jdn,
    weekday_of,
)
from luach.exceptions import InvalidMonthError, PostponementError, UnsupportedYearError
from luach.models import MoladRecord, Weekday


# (year, days from the reference epoch to Rosh Hashanah)
KNOWN_ELAPSED_DAYS = [
    (1, 1),
    (2, 356),
    (123, 44563),
    (1234, 450344),
    (3762, 1373677),
    (5708, 2084447),
    (5762, 2104174),
    (5763, 2104528),
    (5764, 2104913),
    (5765, 2105268),
    (5766, 2105651),
    (5780, 2110760),
]


class TestMolad:
    """Tests for the molad of Tishrei."""

    def test_first_molad_is_baharad(self) -> None:
        m = molad(1)
        assert m == MOLAD_TOHU
        assert m.weekday == Weekday.MONDAY
        assert (m.hours_after_sunset, m.parts) == (5, 204)

    def test_molad_5784(self) -> None:
        """Thursday night, 11 hours 882 parts after sunset: a Friday molad."""
        m = molad(5784)
        assert m.day_offset == 2112206
        assert m.weekday == Weekday.FRIDAY
        assert (m.hours_after_sunset, m.parts) == (11, 882)

    def test_consecutive_molads_one_year_apart(self) -> None:
        """A common year is 12 lunations, a leap year 13."""
        lunation = 29 * 25920 + 12 * 1080 + 793
        assert molad(5784).total_parts - molad(5783).total_parts == 12 * lunation
        assert molad(5785).total_parts - molad(5784).total_parts == 13 * lunation

    @pytest.mark.parametrize("year", [0, -1])
    def test_year_before_epoch_rejected(self, year: int) -> None:
        with pytest.raises(UnsupportedYearError):
            molad(year)


class TestMoladForMonth:
    """Tests for the announced molad of a month."""

    def test_tevet_5769(self) -> None:
        """Shabbat, 4:10 p.m. and 16 chalakim."""
        announcement = molad_for_month(5769, 4)
        assert announcement.weekday == Weekday.SATURDAY
        assert (announcement.hour, announcement.minutes, announcement.chalakim) == (16, 10, 16)

    def test_tishrei_matches_year_molad(self) -> None:
        """Clock time is six hours behind the evening-based count."""
        announcement = molad_for_month(5784, 1)
        assert announcement.weekday == Weekday.FRIDAY
        assert (announcement.hour, announcement.minutes, announcement.chalakim) == (5, 49, 0)

    def test_month_13_in_common_year_rejected(self) -> None:
        with pytest.raises(InvalidMonthError):
            molad_for_month(5783, 13)

    def test_month_13_in_leap_year(self) -> None:
        assert molad_for_month(5784, 13).month == 13


class TestRoshHashanah:
    """Tests for rosh_hashanah_jdn."""

    @pytest.mark.parametrize("year,days", KNOWN_ELAPSED_DAYS)
    def test_known_years(self, year: int, days: int) -> None:
        assert elapsed_days(year) == days
        assert rosh_hashanah_jdn(year) == REFERENCE_EPOCH_JDN + days

    def test_5784_is_16_september_2023(self) -> None:
        assert rosh_hashanah_jdn(5784) == 2460204

    def test_first_rosh_hashanah(self) -> None:
        assert rosh_hashanah_jdn(1) == 347998
        assert weekday_of(347998) == Weekday.MONDAY

    def test_never_sunday_wednesday_or_friday(self) -> None:
        forbidden = {Weekday.SUNDAY, Weekday.WEDNESDAY, Weekday.FRIDAY}
        for year in range(1, 6200):
            assert weekday_of(rosh_hashanah_jdn(year)) not in forbidden, year

    def test_strictly_increasing(self) -> None:
        previous = rosh_hashanah_jdn(1)
        for year in range(2, 6200):
            current = rosh_hashanah_jdn(year)
            assert current > previous
            previous = current

    def test_never_before_molad_day(self) -> None:
        for year in range(5700, 5900):
            assert 0 <= elapsed_days(year) - molad(year).day_offset <= 2


class TestPostponementRules:
    """Rule-by-rule tests of the postponement fixpoint."""

    def test_rule_order(self) -> None:
        assert [r.name for r in POSTPONEMENT_RULES] == [
            "lo_adu_rosh", "molad_zaken", "gatarad", "betutakpat",
        ]

    def test_no_postponement(self) -> None:
        m = MoladRecord(year=5784, day_offset=1, hours_after_sunset=3, parts=0)
        assert apply_postponements(m) == (1, ())

    @pytest.mark.parametrize("day_offset", [0, 3, 5])
    def test_lo_adu_rosh(self, day_offset: int) -> None:
        m = MoladRecord(year=5784, day_offset=day_offset, hours_after_sunset=1, parts=0)
        assert apply_postponements(m) == (day_offset + 1, ("lo_adu_rosh",))

    def test_molad_zaken_on_monday(self) -> None:
        m = MoladRecord(year=5784, day_offset=1, hours_after_sunset=18, parts=0)
        assert apply_postponements(m) == (2, ("molad_zaken",))

    def test_molad_zaken_then_lo_adu(self) -> None:
        """Tuesday noon molad moves to Wednesday, then on to Thursday."""
        m = MoladRecord(year=5784, day_offset=2, hours_after_sunset=18, parts=0)
        assert apply_postponements(m) == (4, ("molad_zaken", "lo_adu_rosh"))

    def test_molad_zaken_boundary(self) -> None:
        m = MoladRecord(year=5784, day_offset=1, hours_after_sunset=17, parts=1079)
        assert apply_postponements(m) == (1, ())

    def test_lo_adu_before_molad_zaken(self) -> None:
        """A late Sunday molad is postponed once, to Monday."""
        m = MoladRecord(year=5784, day_offset=7, hours_after_sunset=20, parts=0)
        assert apply_postponements(m) == (8, ("lo_adu_rosh",))

    def test_gatarad_in_common_year(self) -> None:
        m = MoladRecord(year=5781, day_offset=2, hours_after_sunset=9, parts=204)
        assert apply_postponements(m) == (4, ("gatarad", "lo_adu_rosh"))

    def test_gatarad_boundary(self) -> None:
        m = MoladRecord(year=5781, day_offset=2, hours_after_sunset=9, parts=203)
        assert apply_postponements(m) == (2, ())

    def test_gatarad_not_in_leap_year(self) -> None:
        m = MoladRecord(year=5784, day_offset=2, hours_after_sunset=9, parts=204)
        assert apply_postponements(m) == (2, ())

    def test_betutakpat_after_leap_year(self) -> None:
        """5785 follows the leap year 5784."""
        m = MoladRecord(year=5785, day_offset=1, hours_after_sunset=15, parts=589)
        assert apply_postponements(m) == (2, ("betutakpat",))

    def test_betutakpat_boundary(self) -> None:
        m = MoladRecord(year=5785, day_offset=1, hours_after_sunset=15, parts=588)
        assert apply_postponements(m) == (1, ())

    def test_betutakpat_not_after_common_year(self) -> None:
        """5784 follows the common year 5783."""
        m = MoladRecord(year=5784, day_offset=1, hours_after_sunset=15, parts=589)
        assert apply_postponements(m) == (1, ())

    def test_rules_that_never_settle(self) -> None:
        always = PostponementRule(name="always", description="", applies=lambda m, day: True)
        m = MoladRecord(year=5784, day_offset=1, hours_after_sunset=0, parts=0)
        with pytest.raises(PostponementError) as exc_info:
            apply_postponements(m, rules=(always,))
        assert exc_info.value.details["year"] == 5784


class TestMoladRecord:
    """Tests for MoladRecord arithmetic."""

    def test_from_total_parts_carries(self) -> None:
        m = MoladRecord.from_total_parts(1, 25920 + 5 * 1080 + 204)
        assert m == MOLAD_TOHU

    def test_shifted_carries_into_next_day(self) -> None:
        m = MoladRecord(year=1, day_offset=1, hours_after_sunset=23, parts=1079)
        shifted = m.shifted(1)
        assert (shifted.day_offset, shifted.hours_after_sunset, shifted.parts) == (2, 0, 0)

    @pytest.mark.parametrize("hours,parts", [(24, 0), (-1, 0), (0, 1080), (0, -1)])
    def test_out_of_range_fields_rejected(self, hours: int, parts: int) -> None:
        with pytest.raises(ValueError):
            MoladRecord(year=1, day_offset=0, hours_after_sunset=hours, parts=parts)
