"""
Tests for the Luach models, exceptions and canonical hashing.
"""
import pytest

from luach.canon import canonical_json, content_hash, content_hash_short
from luach.exceptions import (
    HolidayPackLoadError,
    InvalidDayError,
    LuachError,
    UnsupportedLocaleError,
)
from luach.models import (
    FixedHebrewDate,
    HebrewDate,
    HolidayCategory,
    HolidayOccurrence,
    HolidayPack,
    Locale,
    MonthDay,
    MonthKey,
    Weekday,
    WeekdayShift,
)
from tests.conftest import make_fixed_rule, make_offset_rule, make_pack


class TestWeekday:
    """Tests for weekday numbering."""

    def test_numbering_starts_on_sunday(self):
        assert Weekday.SUNDAY.number == 0
        assert Weekday.SATURDAY.number == 6

    def test_from_number_wraps(self):
        assert Weekday.from_number(7) == Weekday.SUNDAY
        assert Weekday.from_number(-1) == Weekday.SATURDAY

    def test_from_python(self):
        assert Weekday.from_python(0) == Weekday.MONDAY
        assert Weekday.from_python(6) == Weekday.SUNDAY


class TestHolidayOccurrence:
    """Tests for observance flags."""

    def _occurrence(self, locale, category=HolidayCategory.MAJOR):
        return HolidayOccurrence(
            identifier="Test",
            hebrew_date=HebrewDate(5784, 1, 1),
            category=category,
            locale=locale,
        )

    def test_both(self):
        o = self._occurrence(Locale.BOTH)
        assert o.observed_in_israel and o.observed_in_diaspora

    def test_israel_only(self):
        o = self._occurrence(Locale.ISRAEL)
        assert o.observed_in(Locale.ISRAEL)
        assert not o.observed_in(Locale.DIASPORA)

    def test_rest_day(self):
        assert self._occurrence(Locale.BOTH).is_rest_day
        assert not self._occurrence(Locale.BOTH, HolidayCategory.FAST).is_rest_day


class TestDateRules:
    """Tests for date rule construction."""

    def test_duplicate_deferral_weekday(self):
        with pytest.raises(ValueError):
            FixedHebrewDate(MonthKey.TISHREI, 3, defer=(
                WeekdayShift(Weekday.SATURDAY, 1),
                WeekdayShift(Weekday.SATURDAY, 2),
            ))

    @pytest.mark.parametrize("day", [0, 31])
    def test_day_range(self, day):
        with pytest.raises(ValueError):
            MonthDay(MonthKey.NISAN, day)

    def test_anchor_key(self):
        assert make_offset_rule("b", "a", 1).anchor_key == "a"
        assert make_offset_rule("b", MonthDay(MonthKey.NISAN, 1), 1).anchor_key is None
        assert make_fixed_rule("a", MonthKey.NISAN, 1).anchor_key is None


class TestPackHash:
    """Tests for canonical pack hashing."""

    def test_same_rules_same_hash(self):
        a = make_pack(make_fixed_rule("x", MonthKey.AV, 9))
        b = make_pack(make_fixed_rule("x", MonthKey.AV, 9))
        assert a.pack_hash == b.pack_hash

    def test_rule_variant_changes_hash(self):
        fixed = make_pack(make_fixed_rule("x", MonthKey.AV, 9))
        deferred = make_pack(make_fixed_rule(
            "x", MonthKey.AV, 9, defer=(WeekdayShift(Weekday.SATURDAY, 1),)
        ))
        assert fixed.pack_hash != deferred.pack_hash

    def test_description_not_hashed(self):
        rules = (make_fixed_rule("x", MonthKey.AV, 9),)
        a = HolidayPack(id="test", name="A", version="1", rules=rules)
        b = HolidayPack(id="test", name="B", version="1", rules=rules, description="changed")
        assert a.pack_hash == b.pack_hash

    def test_canonical_json(self):
        assert canonical_json({"b": 1, "a": Locale.ISRAEL}) == '{"a":"israel","b":1}'

    def test_short_hash(self):
        assert content_hash_short({"a": 1}) == content_hash({"a": 1})[:12]


class TestExceptions:
    """Tests for the error hierarchy."""

    def test_codes(self):
        assert InvalidDayError(message="x").code == "LU_HEBREW_INVALID_DAY"
        assert HolidayPackLoadError(message="x").code == "LU_PACK_LOAD_ERROR"

    def test_is_luach_error(self):
        assert isinstance(UnsupportedLocaleError(message="x"), LuachError)

    def test_str_includes_field(self):
        error = InvalidDayError(message="30 Tevet does not exist")
        assert str(error) == "[LU_HEBREW_INVALID_DAY] 30 Tevet does not exist (field: day)"

    def test_to_dict(self):
        error = UnsupportedLocaleError(message="bad", details={"locale": "both"})
        assert error.to_dict() == {
            "code": "LU_HOLIDAY_UNSUPPORTED_LOCALE",
            "message": "bad",
            "details": {"locale": "both"},
            "field": "locale",
        }
