"""Best-effort JSON records on disk."""

import json
import logging
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, Dict

logger = logging.getLogger(__name__)


class JsonRecord:
    """A flat key-value record persisted as one JSON file.

    Reads never fail: a missing, unreadable or malformed file loads as an
    empty record. Writes replace the file atomically and report failure
    through the return value and the log instead of raising.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> Dict[str, Any]:
        """Load the record, or an empty dict if it cannot be read."""
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as exc:
            logger.warning("Ignoring unreadable record %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring non-object record %s", self.path)
            return {}
        return data

    def save(self, data: Dict[str, Any]) -> bool:
        """Write the record.

        Returns:
            True if the file was written, False otherwise.
        """
        payload = json.dumps(data, ensure_ascii=True, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                "w", delete=False, encoding="utf-8", dir=str(self.path.parent)
            ) as handle:
                handle.write(payload)
                tmp_path = Path(handle.name)
            tmp_path.replace(self.path)
        except OSError as exc:
            logger.warning("Could not write record %s: %s", self.path, exc)
            return False
        return True
