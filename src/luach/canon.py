"""
Canonical JSON Serialization

Deterministic JSON serialization for hashing holiday packs:
- Sorted keys (lexicographic)
- No whitespace
- Enums as their values, dataclasses as dicts
- UTF-8 encoding

The same pack always produces the same hash, so a schedule can be traced
back to the exact rule set that produced it.
"""
from __future__ import annotations

import hashlib
import json
from dataclasses import asdict, is_dataclass
from datetime import date
from enum import Enum
from typing import Any


def _default_serializer(obj: Any) -> Any:
    """
    Custom JSON serializer for non-standard types.

    Handles:
    - date: ISO 8601 format
    - Enum: value
    - dataclass: dict
    - set/frozenset: sorted list
    """
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=str)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def canonical_json(obj: Any) -> str:
    """
    Serialize object to canonical JSON string.

    Example:
        >>> canonical_json({"b": 1, "a": 2})
        '{"a":2,"b":1}'
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        default=_default_serializer,
        ensure_ascii=False,
    )


def content_hash(obj: Any) -> str:
    """
    Compute SHA-256 hash of canonical JSON representation.

    Returns:
        Hex-encoded SHA-256 hash string (64 characters)
    """
    return hashlib.sha256(canonical_json(obj).encode("utf-8")).hexdigest()


def content_hash_short(obj: Any, length: int = 12) -> str:
    """Truncated content hash for display and log lines."""
    return content_hash(obj)[:length]


def _rule_type(rule: Any) -> str:
    return type(rule).__name__


def compute_holiday_pack_hash(pack: Any) -> str:
    """
    Compute SHA-256 hash of a holiday pack in canonical JSON form.

    Only rule-bearing fields are hashed: pack identity, version and every
    rule in declaration order (order matters, it breaks ties in the
    resolved schedule). Each rule's date rule is tagged with its variant
    name so that variants with the same fields hash differently.

    Args:
        pack: A HolidayPack instance

    Returns:
        Hex-encoded SHA-256 hash string (64 characters)
    """
    pack_dict = {
        "id": pack.id,
        "version": pack.version,
        "rules": [
            {
                "key": r.key,
                "name": r.name,
                "category": r.category,
                "locale": r.locale,
                "years": r.years,
                "group": r.group,
                "rule": {"type": _rule_type(r.rule), **asdict(r.rule)},
            }
            for r in pack.rules
        ],
    }
    return content_hash(pack_dict)
