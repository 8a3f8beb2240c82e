"""Data locations and logging setup."""

import logging
import os
from pathlib import Path
from typing import Optional

ENV_HOME = "FOCUSFLOW_HOME"
SETTINGS_FILE = "settings.json"
STATS_FILE = "stats.json"
LOG_FILE = "focusflow.log"


def data_dir(override: Optional[str] = None) -> Path:
    """Directory holding settings, stats and the log file.

    Order: explicit override, then $FOCUSFLOW_HOME, then ~/.focusflow.
    """
    if override:
        return Path(override).expanduser()
    env = os.environ.get(ENV_HOME)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".focusflow"


def configure_logging(directory: Path, verbose: bool = False) -> Path:
    """Send logs to a file; the terminal belongs to the UI.

    Returns:
        Path of the log file.
    """
    directory.mkdir(parents=True, exist_ok=True)
    log_path = directory / LOG_FILE
    logging.basicConfig(
        filename=str(log_path),
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return log_path
