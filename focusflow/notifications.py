"""Completion notifications for the focus timer."""

import logging
import platform
import subprocess
import sys

from .scheduler import Mode

logger = logging.getLogger(__name__)

MESSAGES = {
    Mode.WORK: ("Focus session complete!", "Time for a break."),
    Mode.BREAK: ("Break over", "Ready to focus?"),
}


def _send_bell(count: int = 1) -> None:
    """Ring the terminal bell."""
    sys.stdout.write("\a" * count)
    sys.stdout.flush()


def _run_quietly(command: list) -> bool:
    """Run a notifier command, returning False if it is unavailable."""
    try:
        subprocess.run(command, capture_output=True, timeout=5)
        return True
    except (subprocess.SubprocessError, FileNotFoundError, OSError) as exc:
        logger.debug("Notifier %s unavailable: %s", command[0], exc)
        return False


def _send_native(title: str, message: str) -> bool:
    """Send a desktop notification where the platform supports one."""
    system = platform.system()
    if system == "Darwin":
        script = f'display notification "{message}" with title "{title}"'
        return _run_quietly(["osascript", "-e", script])
    if system == "Linux":
        return _run_quietly(["notify-send", title, message])
    # Windows and other platforms: bell only
    return False


class NotificationSink:
    """Announces the end of a session.

    Every failure is swallowed here so completion never depends on the
    notification subsystem.
    """

    def __init__(self, enabled: bool = True, bell: bool = True) -> None:
        self.enabled = enabled
        self.bell = bell

    def notify(self, mode: Mode) -> None:
        """Announce that a session of ``mode`` has just completed."""
        if not self.enabled:
            return

        title, message = MESSAGES[mode]
        try:
            if self.bell:
                # Two rings after work, one after a break.
                _send_bell(2 if mode == Mode.WORK else 1)
            _send_native(title, message)
        except Exception:
            logger.debug("Notification for %s failed", mode.name.lower(), exc_info=True)
