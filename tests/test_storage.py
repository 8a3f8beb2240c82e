"""Unit tests for storage.py."""

import json

from focusflow.storage import JsonRecord


class TestJsonRecord:
    """Test loading and saving flat JSON records."""

    def test_missing_file_loads_empty(self, tmp_path):
        """A record that was never written is empty."""
        assert JsonRecord(tmp_path / "none.json").load() == {}

    def test_save_then_load(self, tmp_path):
        """Saved values come back unchanged."""
        record = JsonRecord(tmp_path / "nested" / "stats.json")
        assert record.save({"date": "2026-10-19", "totalSeconds": 60}) is True
        assert record.load() == {"date": "2026-10-19", "totalSeconds": 60}

    def test_corrupt_file_loads_empty(self, tmp_path):
        """Malformed JSON is treated as no record."""
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        assert JsonRecord(path).load() == {}

    def test_non_object_loads_empty(self, tmp_path):
        """Only JSON objects count as records."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
        assert JsonRecord(path).load() == {}

    def test_save_failure_returns_false(self, tmp_path):
        """A write that cannot happen is reported, not raised."""
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory", encoding="utf-8")
        record = JsonRecord(blocker / "stats.json")
        assert record.save({"totalSeconds": 1}) is False

    def test_save_leaves_no_temp_files(self, tmp_path):
        """Only the record itself remains after a save."""
        record = JsonRecord(tmp_path / "stats.json")
        record.save({"a": 1})
        record.save({"a": 2})
        assert [p.name for p in tmp_path.iterdir()] == ["stats.json"]
