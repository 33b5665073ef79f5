"""
Luach Year Cache

Memoizes per-year calendar records. The cache is the only mutable state
in the engine and is always injectable.

Entries are immutable and a deterministic function of the year, so
concurrent fills are harmless: ``dict.setdefault`` keeps the first value
stored and every caller gets that same object.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..models import YearInfo

logger = logging.getLogger(__name__)


@dataclass
class YearCache:
    """
    Hebrew year -> YearInfo.

    Usage:
        cache = YearCache()
        info = cache.get_or_compute(5784, compute_year_info)
    """
    _entries: dict[int, YearInfo] = field(default_factory=dict)

    def get(self, year: int) -> Optional[YearInfo]:
        return self._entries.get(year)

    def get_or_compute(self, year: int, compute: Callable[[int], YearInfo]) -> YearInfo:
        """Return the cached record, computing and storing it if absent."""
        info = self._entries.get(year)
        if info is not None:
            return info
        logger.debug("Computing year record for %d", year)
        return self._entries.setdefault(year, compute(year))

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, year: object) -> bool:
        return year in self._entries

    def __len__(self) -> int:
        return len(self._entries)
