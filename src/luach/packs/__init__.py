"""
Luach Holiday Packs

Schema validation and loading for holiday packs.

Holiday packs are YAML or JSON files listing the holiday rules a resolver
evaluates: fixed dates with weekday deferrals, offsets from other holidays
and Shabbatot found from an anchor. The standard pack ships with the
package.

Usage:
    from luach.packs import load_holiday_pack, load_standard_pack

    # The pack shipped with the package
    pack = load_standard_pack()

    # A custom pack
    pack = load_holiday_pack("path/to/community_holidays.yaml")
    print(pack.pack_hash)
"""
from __future__ import annotations

from .loader import (
    STANDARD_PACK_PATH,
    HolidayPackLoader,
    load_holiday_pack,
    load_holiday_pack_from_string,
    load_standard_pack,
    validate_reference_integrity,
)
from .schema import (
    SCHEMA_VERSION,
    AnchorOffsetSchema,
    FixedDateSchema,
    HolidayPackSchema,
    HolidayRuleSchema,
    MonthDaySchema,
    NearestWeekdaySchema,
    WeekdayShiftSchema,
    check_schema_version,
    validate_holiday_pack,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Loader
    "STANDARD_PACK_PATH",
    "HolidayPackLoader",
    "load_holiday_pack",
    "load_holiday_pack_from_string",
    "load_standard_pack",
    # Validation
    "validate_holiday_pack",
    "validate_reference_integrity",
    "check_schema_version",
    # Schemas (for advanced usage)
    "HolidayPackSchema",
    "HolidayRuleSchema",
    "FixedDateSchema",
    "AnchorOffsetSchema",
    "NearestWeekdaySchema",
    "MonthDaySchema",
    "WeekdayShiftSchema",
]
