"""
Luach Holiday Pack Schemas

Pydantic models for validating holiday pack YAML/JSON files.

A pack is an ordered list of rules. Each rule names the occurrence it
produces and carries one date rule, selected by its ``type`` field:

    date:
      type: fixed              # FixedHebrewDate
      month: tishrei
      day: 3
      defer:
        - {weekday: saturday, days: 1}

    date:
      type: offset             # AnchorOffset
      anchor: pesach_2         # another rule's key, or {month: nisan, day: 16}
      offset: 32

    date:
      type: weekday            # NearestWeekday
      anchor: {month: nisan, day: 1}
      weekday: saturday
      direction: on_or_before

Schema versioning:
- schema_version field tracks breaking changes
- Loaders check that the major version matches
"""
from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

MonthKeyValue = Literal[
    "tishrei", "cheshvan", "kislev", "tevet", "shevat", "adar_i", "adar",
    "nisan", "iyar", "sivan", "tammuz", "av", "elul"
]

WeekdayValue = Literal[
    "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"
]

HolidayCategoryValue = Literal[
    "major", "minor", "fast", "rosh_chodesh", "shabbat_mevarchim", "intermediate"
]

LocaleValue = Literal["israel", "diaspora", "both"]

YearFilterValue = Literal["any", "leap", "common"]

WeekdayDirectionValue = Literal[
    "nearest", "on_or_before", "before", "on_or_after", "after"
]

GroupValue = Literal["core", "fast", "minor", "modern", "erev", "shabbat"]


# =============================================================================
# Date Rule Schemas
# =============================================================================

class MonthDaySchema(BaseModel):
    """Schema for an inline month/day anchor."""
    month: MonthKeyValue = Field(..., description="Symbolic month")
    day: int = Field(..., ge=1, le=30, description="Day of month")

    model_config = {"extra": "forbid"}


AnchorValue = Union[str, MonthDaySchema]


class WeekdayShiftSchema(BaseModel):
    """Schema for a weekday deferral."""
    weekday: WeekdayValue = Field(..., description="Weekday that triggers the shift")
    days: int = Field(..., ge=-6, le=6, description="Days to move; negative is earlier")

    @field_validator("days")
    @classmethod
    def validate_nonzero(cls, v: int) -> int:
        if v == 0:
            raise ValueError("A deferral must move the date")
        return v

    model_config = {"extra": "forbid"}


class FixedDateSchema(BaseModel):
    """Schema for a fixed Hebrew date."""
    type: Literal["fixed"]
    month: MonthKeyValue = Field(..., description="Symbolic month")
    day: int = Field(..., ge=1, le=30, description="Day of month")
    defer: list[WeekdayShiftSchema] = Field(
        default_factory=list, description="Weekday deferrals, at most one applies"
    )

    @model_validator(mode="after")
    def validate_unique_weekdays(self) -> "FixedDateSchema":
        weekdays = [s.weekday for s in self.defer]
        if len(weekdays) != len(set(weekdays)):
            raise ValueError("Deferral weekdays must be unique")
        return self

    model_config = {"extra": "forbid"}


class AnchorOffsetSchema(BaseModel):
    """Schema for a date a fixed number of days from an anchor."""
    type: Literal["offset"]
    anchor: AnchorValue = Field(..., description="Rule key or inline month/day")
    offset: int = Field(..., description="Days from the anchor; negative is earlier")

    model_config = {"extra": "forbid"}


class NearestWeekdaySchema(BaseModel):
    """Schema for a weekday found by searching from an anchor."""
    type: Literal["weekday"]
    anchor: AnchorValue = Field(..., description="Rule key or inline month/day")
    weekday: WeekdayValue = Field(..., description="Weekday to find")
    direction: WeekdayDirectionValue = Field("nearest", description="Search direction")

    model_config = {"extra": "forbid"}


DateRuleSchema = Annotated[
    Union[FixedDateSchema, AnchorOffsetSchema, NearestWeekdaySchema],
    Field(discriminator="type"),
]


# =============================================================================
# Rule and Pack Schemas
# =============================================================================

class HolidayRuleSchema(BaseModel):
    """Schema for one holiday rule."""
    key: str = Field(..., min_length=1, pattern=r"^[a-z0-9_]+$", description="Unique rule key")
    name: str = Field(..., min_length=1, description="Occurrence identifier")
    category: HolidayCategoryValue = Field(..., description="Kind of day")
    locale: LocaleValue = Field("both", description="Where the day is observed")
    years: YearFilterValue = Field("any", description="Which years the rule applies to")
    group: GroupValue = Field("core", description="Configuration group")
    description: str = Field("", description="Free text")
    date: DateRuleSchema

    model_config = {"extra": "forbid"}


class HolidayPackSchema(BaseModel):
    """
    Schema for a complete holiday pack.

    Rule order is significant: it breaks ties between occurrences on the
    same date.
    """
    schema_version: str = Field(SCHEMA_VERSION, description="Pack schema version")
    id: str = Field(..., min_length=1, description="Pack identifier")
    name: str = Field(..., description="Display name")
    version: str = Field(..., description="Pack content version")
    description: str = Field("", description="Free text")
    rules: list[HolidayRuleSchema] = Field(..., min_length=1, description="Holiday rules")

    model_config = {
        "extra": "forbid",  # Reject unknown fields
    }


# =============================================================================
# Validation Functions
# =============================================================================

def validate_holiday_pack(data: dict[str, Any]) -> HolidayPackSchema:
    """
    Validate a holiday pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return HolidayPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """
    Check if a holiday pack's schema version is compatible.

    Only the major version has to match.
    """
    pack_version: Optional[str] = data.get("schema_version", SCHEMA_VERSION)
    pack_major = str(pack_version).split(".")[0]
    expected_major = SCHEMA_VERSION.split(".")[0]
    return pack_major == expected_major
