"""Per-day total of completed work time."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from .storage import JsonRecord

logger = logging.getLogger(__name__)


@dataclass
class DailyStats:
    """Work seconds completed on a single calendar day."""
    date: str
    total_work_seconds: int = 0


class DailyLedger:
    """Accumulates completed work seconds for the current day.

    Only today's total is kept. When the stored date is not today the
    record is replaced by a fresh one; earlier days are not archived.
    """

    def __init__(self, record: JsonRecord, today: Callable[[], date] = date.today) -> None:
        self.record = record
        self._today = today

    def record_work_seconds(self, seconds: int, today: Optional[date] = None) -> int:
        """Add completed work seconds to today's total.

        Returns:
            Today's total after the addition.
        """
        stats = self._load_current(today)
        stats.total_work_seconds += max(0, int(seconds))
        self._save(stats)
        logger.info("Recorded %ss of work, %ss today", seconds, stats.total_work_seconds)
        return stats.total_work_seconds

    def current_total(self, today: Optional[date] = None) -> int:
        """Today's total, rolling over a stale record first."""
        return self._load_current(today).total_work_seconds

    def _load_current(self, today: Optional[date]) -> DailyStats:
        day = (today or self._today()).isoformat()
        data = self.record.load()
        if data.get("date") != day:
            if data:
                logger.info("Daily stats rolled over from %s to %s", data.get("date"), day)
            stats = DailyStats(date=day)
            self._save(stats)
            return stats
        total = data.get("totalSeconds", 0)
        if isinstance(total, bool) or not isinstance(total, int) or total < 0:
            logger.warning("Ignoring invalid totalSeconds %r", total)
            total = 0
        return DailyStats(date=day, total_work_seconds=total)

    def _save(self, stats: DailyStats) -> None:
        self.record.save({"date": stats.date, "totalSeconds": stats.total_work_seconds})
