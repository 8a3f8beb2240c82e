"""Duration settings for work and break sessions."""

import logging
import re
from dataclasses import dataclass, fields
from typing import Any, Dict

from .scheduler import Mode
from .storage import JsonRecord

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*[+-]?\d+")

# Attribute name -> persisted key.
RECORD_KEYS = {
    "work_hours": "workHours",
    "work_minutes": "workMinutes",
    "work_seconds": "workSeconds",
    "break_hours": "breakHours",
    "break_minutes": "breakMinutes",
    "break_seconds": "breakSeconds",
}

HOURS_MAX = 23
MINUTES_MAX = 59


def parse_field(value: Any) -> int:
    """Parse a duration field, coercing blank or invalid input to 0.

    Leading digits are honoured ("12abc" -> 12), like a lenient form field.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, value)
    if isinstance(value, float):
        return max(0, int(value))
    if not isinstance(value, str):
        return 0
    match = _LEADING_INT.match(value)
    if not match:
        return 0
    return max(0, int(match.group()))


def field_max(name: str) -> int:
    """Upper bound used when stepping a field."""
    return HOURS_MAX if name.endswith("_hours") else MINUTES_MAX


@dataclass
class Settings:
    """The six duration fields, each a non-negative integer."""
    work_hours: int = 0
    work_minutes: int = 25
    work_seconds: int = 0
    break_hours: int = 0
    break_minutes: int = 5
    break_seconds: int = 0

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Settings":
        if not record:
            return cls()
        values = {
            name: parse_field(record.get(key))
            for name, key in RECORD_KEYS.items()
        }
        return cls(**values)

    def to_record(self) -> Dict[str, int]:
        return {key: getattr(self, name) for name, key in RECORD_KEYS.items()}

    def duration_seconds(self, mode: Mode) -> int:
        """Total configured seconds for a mode."""
        prefix = "work" if mode == Mode.WORK else "break"
        return (
            getattr(self, f"{prefix}_hours") * 3600
            + getattr(self, f"{prefix}_minutes") * 60
            + getattr(self, f"{prefix}_seconds")
        )


class SettingsStore:
    """Persisted settings that also serve as the timer's duration source."""

    def __init__(self, record: JsonRecord) -> None:
        self.record = record
        self.settings = Settings()

    def load(self) -> Settings:
        """Read settings from disk, falling back to defaults."""
        self.settings = Settings.from_record(self.record.load())
        return self.settings

    def save(self) -> bool:
        return self.record.save(self.settings.to_record())

    def duration_seconds(self, mode: Mode) -> int:
        return self.settings.duration_seconds(mode)

    def get_field(self, name: str) -> int:
        self._check_name(name)
        return getattr(self.settings, name)

    def set_field(self, name: str, value: Any) -> int:
        """Normalize and store a field value.

        Returns:
            The stored integer.
        """
        self._check_name(name)
        parsed = parse_field(value)
        setattr(self.settings, name, parsed)
        self.save()
        return parsed

    def step_field(self, name: str, delta: int) -> int:
        """Nudge a field up or down, clamped to its range."""
        current = self.get_field(name)
        stepped = min(max(current + delta, 0), field_max(name))
        return self.set_field(name, stepped)

    def set_minutes(self, mode: Mode, minutes: int) -> None:
        """Replace a mode's duration with a whole number of minutes."""
        prefix = "work" if mode == Mode.WORK else "break"
        hours, mins = divmod(max(0, minutes), 60)
        setattr(self.settings, f"{prefix}_hours", hours)
        setattr(self.settings, f"{prefix}_minutes", mins)
        setattr(self.settings, f"{prefix}_seconds", 0)
        self.save()

    @staticmethod
    def _check_name(name: str) -> None:
        if name not in RECORD_KEYS:
            raise KeyError(f"Unknown settings field: {name}")


SETTINGS_FIELDS = tuple(f.name for f in fields(Settings))
