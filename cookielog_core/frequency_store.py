"""Per-day cookie hit counts and the most-active query."""
from __future__ import annotations
import logging
from collections import Counter, defaultdict
from datetime import date
from typing import DefaultDict, Dict, FrozenSet, List

from .records import ValidRecord

logger = logging.getLogger(__name__)


class FrequencyStore:
    """Counts cookie occurrences per UTC calendar day.

    The maximum is found at query time by scanning the requested day's counts.
    """

    def __init__(self):
        self._counts: DefaultDict[date, Counter] = defaultdict(Counter)

    def add_record(self, record: ValidRecord) -> None:
        """Count one occurrence of ``record.identifier`` on the record's day.

        Only valid records may be passed in.
        """
        day = record.day
        self._counts[day][record.identifier] += 1
        logger.debug("Added %s for %s (count now %d)", record.identifier, day,
                     self._counts[day][record.identifier])

    def most_frequent_for(self, day: date) -> FrozenSet[str]:
        """Return every cookie tied for the highest count on ``day``.

        Empty when nothing was recorded for that day. Does not modify the store.
        """
        counts = self._counts.get(day)
        if not counts:
            logger.debug("No cookies recorded for %s", day)
            return frozenset()
        max_cnt = max(counts.values())
        return frozenset(cookie for cookie, cnt in counts.items() if cnt == max_cnt)

    def counts_for(self, day: date) -> Dict[str, int]:
        """Copy of the cookie counts recorded for ``day``."""
        return dict(self._counts.get(day, {}))

    def days(self) -> List[date]:
        """Days with at least one record, newest first."""
        return sorted(self._counts, reverse=True)

    def __len__(self) -> int:
        return sum(sum(c.values()) for c in self._counts.values())
