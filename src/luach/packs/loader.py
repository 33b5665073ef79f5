"""
Luach Holiday Pack Loader

Loads and validates holiday packs from YAML or JSON files.

Converts Pydantic schema models to Luach domain models and checks the
references between rules (unique keys, known anchors, no anchor cycles).
"""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import (
    HolidayPackLoadError,
    HolidayPackValidationError,
    HolidayPackVersionMismatch,
)
from ..models import (
    AnchorOffset,
    DateRule,
    FixedHebrewDate,
    HolidayCategory,
    HolidayPack,
    HolidayRule,
    Locale,
    MonthDay,
    MonthKey,
    NearestWeekday,
    Weekday,
    WeekdayDirection,
    WeekdayShift,
    YearFilter,
)
from .schema import (
    SCHEMA_VERSION,
    AnchorOffsetSchema,
    FixedDateSchema,
    HolidayPackSchema,
    HolidayRuleSchema,
    MonthDaySchema,
    NearestWeekdaySchema,
    check_schema_version,
    validate_holiday_pack,
)

logger = logging.getLogger(__name__)

STANDARD_PACK_PATH = Path(__file__).parent / "data" / "standard_holidays.yaml"


# =============================================================================
# Reference Integrity Validation
# =============================================================================

def _find_cycle(anchors: dict[str, str]) -> Optional[list[str]]:
    """First anchor cycle in a key -> anchor-key mapping, if any."""
    done: set[str] = set()
    for start in anchors:
        chain: list[str] = []
        key: Optional[str] = start
        while key is not None and key not in done:
            if key in chain:
                return chain[chain.index(key):] + [key]
            chain.append(key)
            key = anchors.get(key)
        done.update(chain)
    return None


def validate_reference_integrity(pack: HolidayPack, path: str = "") -> None:
    """
    Validate that rules reference each other consistently.

    Catches:
    - Duplicate rule keys
    - Anchors naming a rule that is not in the pack
    - Anchor cycles

    Raises:
        ValueError: If reference integrity errors are found
    """
    errors = []

    seen: set[str] = set()
    for rule in pack.rules:
        if rule.key in seen:
            errors.append(f"Duplicate rule key: '{rule.key}'")
        seen.add(rule.key)

    anchors: dict[str, str] = {}
    for rule in pack.rules:
        anchor = rule.anchor_key
        if anchor is None:
            continue
        if anchor not in seen:
            errors.append(f"Rule '{rule.key}' anchors on non-existent rule '{anchor}'")
        else:
            anchors[rule.key] = anchor

    cycle = _find_cycle(anchors)
    if cycle:
        errors.append(f"Anchor cycle: {' -> '.join(cycle)}")

    if errors:
        path_str = f" in {path}" if path else ""
        raise ValueError(
            f"Reference integrity errors{path_str}:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_anchor(anchor: Union[str, MonthDaySchema]) -> Union[str, MonthDay]:
    if isinstance(anchor, MonthDaySchema):
        return MonthDay(MonthKey(anchor.month), anchor.day)
    return anchor


def _convert_date_rule(
    schema: Union[FixedDateSchema, AnchorOffsetSchema, NearestWeekdaySchema],
) -> DateRule:
    """Convert a date rule schema to its model variant."""
    if isinstance(schema, FixedDateSchema):
        return FixedHebrewDate(
            month=MonthKey(schema.month),
            day=schema.day,
            defer=tuple(
                WeekdayShift(weekday=Weekday(s.weekday), days=s.days)
                for s in schema.defer
            ),
        )
    if isinstance(schema, AnchorOffsetSchema):
        return AnchorOffset(anchor=_convert_anchor(schema.anchor), offset=schema.offset)
    return NearestWeekday(
        anchor=_convert_anchor(schema.anchor),
        weekday=Weekday(schema.weekday),
        direction=WeekdayDirection(schema.direction),
    )


def _convert_rule(schema: HolidayRuleSchema) -> HolidayRule:
    """Convert HolidayRuleSchema to HolidayRule model."""
    return HolidayRule(
        key=schema.key,
        name=schema.name,
        rule=_convert_date_rule(schema.date),
        category=HolidayCategory(schema.category),
        locale=Locale(schema.locale),
        years=YearFilter(schema.years),
        group=schema.group,
        description=schema.description,
    )


def _convert_holiday_pack(schema: HolidayPackSchema) -> HolidayPack:
    """Convert HolidayPackSchema to HolidayPack model."""
    return HolidayPack(
        id=schema.id,
        name=schema.name,
        version=schema.version,
        description=schema.description,
        rules=tuple(_convert_rule(r) for r in schema.rules),
    )


# =============================================================================
# Holiday Pack Loader
# =============================================================================

class HolidayPackLoader:
    """
    Loads holiday packs from YAML or JSON files.

    Usage:
        loader = HolidayPackLoader()
        pack = loader.load("path/to/holidays.yaml")
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject packs with incompatible schema versions
        """
        self.strict_version = strict_version
        self._packs: dict[str, HolidayPack] = {}

    def load(self, path: Union[str, Path]) -> HolidayPack:
        """
        Load a holiday pack from a file.

        Raises:
            HolidayPackLoadError: If file cannot be read
            HolidayPackValidationError: If validation fails
            HolidayPackVersionMismatch: If schema version incompatible
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise HolidayPackLoadError(
                message=f"Failed to load holiday pack: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        pack = self.load_data(data, source=str(path))
        logger.debug("Loaded holiday pack %s (%d rules) from %s", pack.id, len(pack.rules), path)
        return pack

    def load_data(self, data: Any, source: str = "") -> HolidayPack:
        """
        Validate and convert already-parsed pack data.

        Raises:
            HolidayPackValidationError: If validation fails
            HolidayPackVersionMismatch: If schema version incompatible
        """
        if not isinstance(data, dict):
            raise HolidayPackValidationError(
                message="Holiday pack must be a mapping",
                details={"path": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise HolidayPackVersionMismatch(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                },
            )

        try:
            schema = validate_holiday_pack(data)
        except ValidationError as e:
            raise HolidayPackValidationError(
                message=f"Holiday pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(), "path": source},
            ) from e

        pack = _convert_holiday_pack(schema)

        try:
            validate_reference_integrity(pack, source)
        except ValueError as e:
            raise HolidayPackValidationError(
                message="Reference integrity validation failed",
                details={"errors": str(e), "path": source},
            ) from e

        self._packs[pack.id] = pack
        return pack

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def get_pack(self, pack_id: str) -> Optional[HolidayPack]:
        """Get a loaded pack by ID."""
        return self._packs.get(pack_id)

    def list_packs(self) -> list[str]:
        """List IDs of all loaded packs."""
        return list(self._packs.keys())


# =============================================================================
# Convenience Functions
# =============================================================================

def load_holiday_pack(path: Union[str, Path]) -> HolidayPack:
    """Load a holiday pack from a file with a temporary loader."""
    return HolidayPackLoader().load(path)


def load_holiday_pack_from_string(
    content: str,
    format: str = "yaml",
) -> HolidayPack:
    """
    Load a holiday pack from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"

    Raises:
        HolidayPackLoadError: If the string cannot be parsed
        HolidayPackValidationError: If validation fails
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise HolidayPackLoadError(
            message=f"Failed to parse holiday pack: {e}",
            details={"format": format, "error": str(e)},
        ) from e
    return HolidayPackLoader().load_data(data, source=f"<{format} string>")


@lru_cache(maxsize=1)
def load_standard_pack() -> HolidayPack:
    """The holiday pack shipped with the package, loaded once."""
    return load_holiday_pack(STANDARD_PACK_PATH)
