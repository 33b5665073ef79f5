"""
Luach Exception Hierarchy

Domain-specific exceptions for calendar conversion and holiday resolution.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: LU_<CATEGORY>_<SPECIFIC>

Every error is a deterministic function of its input: nothing here is
transient, so nothing is retried.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class LuachError(Exception):
    """
    Base exception for all Luach errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (LU_*)
        details: Additional context about the error
        field_name: The input field that was rejected, if applicable
    """
    message: str
    code: str = "LU_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    field_name: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.field_name:
            parts.append(f"(field: {self.field_name})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.field_name:
            result["field"] = self.field_name
        return result


# =============================================================================
# Date Errors
# =============================================================================

@dataclass
class InvalidDateError(LuachError):
    """Gregorian date fields do not form a valid date."""
    code: str = "LU_DATE_INVALID"


@dataclass
class InvalidMonthError(LuachError):
    """Hebrew month is out of range for its year."""
    code: str = "LU_HEBREW_INVALID_MONTH"
    field_name: Optional[str] = "month"


@dataclass
class InvalidDayError(LuachError):
    """Hebrew day exceeds the length of its month."""
    code: str = "LU_HEBREW_INVALID_DAY"
    field_name: Optional[str] = "day"


@dataclass
class UnsupportedYearError(LuachError):
    """Hebrew year (or day number) precedes the calendar epoch."""
    code: str = "LU_HEBREW_UNSUPPORTED_YEAR"
    field_name: Optional[str] = "year"


# =============================================================================
# Calendar Computation Errors
# =============================================================================

@dataclass
class PostponementError(LuachError):
    """Postponement rules did not settle within the pass limit."""
    code: str = "LU_EPOCH_POSTPONEMENT"


@dataclass
class CalendarInvariantError(LuachError):
    """A computed year violates a structural invariant of the calendar."""
    code: str = "LU_CALENDAR_INVARIANT"


# =============================================================================
# Holiday Errors
# =============================================================================

@dataclass
class UnsupportedLocaleError(LuachError):
    """Locale tag is not Israel or Diaspora."""
    code: str = "LU_HOLIDAY_UNSUPPORTED_LOCALE"
    field_name: Optional[str] = "locale"


@dataclass
class HolidayRuleError(LuachError):
    """Holiday rule set is structurally invalid (unknown anchor, cycle)."""
    code: str = "LU_HOLIDAY_RULE_ERROR"


# =============================================================================
# Holiday Pack Errors
# =============================================================================

@dataclass
class HolidayPackLoadError(LuachError):
    """Failed to load holiday pack from file."""
    code: str = "LU_PACK_LOAD_ERROR"


@dataclass
class HolidayPackValidationError(LuachError):
    """Holiday pack schema validation failed."""
    code: str = "LU_PACK_VALIDATION_ERROR"


@dataclass
class HolidayPackVersionMismatch(LuachError):
    """Holiday pack schema version doesn't match expected version."""
    code: str = "LU_PACK_VERSION_MISMATCH"
