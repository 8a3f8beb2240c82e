"""Unit tests for stats.py."""

from datetime import date

import pytest
from focusflow.stats import DailyLedger
from focusflow.storage import JsonRecord

TODAY = date(2026, 10, 19)
YESTERDAY = date(2026, 10, 18)


@pytest.fixture
def record(tmp_path):
    return JsonRecord(tmp_path / "stats.json")


@pytest.fixture
def ledger(record):
    return DailyLedger(record, today=lambda: TODAY)


class TestDailyLedger:
    """Test the per-day work total."""

    def test_empty_total_is_zero(self, ledger):
        """No record means nothing focused yet."""
        assert ledger.current_total() == 0

    def test_record_adds(self, ledger, record):
        """Each completed session adds its seconds and is persisted."""
        assert ledger.record_work_seconds(1500) == 1500
        assert ledger.record_work_seconds(1500) == 3000
        assert record.load() == {"date": "2026-10-19", "totalSeconds": 3000}

    def test_rollover_drops_previous_day(self, ledger, record):
        """Yesterday's total does not show today."""
        record.save({"date": YESTERDAY.isoformat(), "totalSeconds": 100})
        assert ledger.current_total() == 0
        assert record.load() == {"date": "2026-10-19", "totalSeconds": 0}

    def test_record_after_rollover_starts_fresh(self, ledger, record):
        """Recording on a new day starts from zero."""
        record.save({"date": YESTERDAY.isoformat(), "totalSeconds": 100})
        assert ledger.record_work_seconds(60) == 60

    def test_rollover_is_idempotent(self, ledger, record):
        """Checking the total twice on a new day gives the same fresh state."""
        record.save({"date": YESTERDAY.isoformat(), "totalSeconds": 100})
        ledger.current_total()
        first = record.load()
        ledger.current_total()
        assert record.load() == first

    def test_explicit_day_argument(self, ledger):
        """The day can be passed in instead of read from the clock."""
        ledger.record_work_seconds(30, today=YESTERDAY)
        assert ledger.current_total(today=YESTERDAY) == 30
        assert ledger.current_total(today=TODAY) == 0

    def test_invalid_total_is_zero(self, ledger, record):
        """A malformed stored total is treated as zero."""
        record.save({"date": TODAY.isoformat(), "totalSeconds": "lots"})
        assert ledger.current_total() == 0
        assert ledger.record_work_seconds(10) == 10
