"""Entry point for python -m focusflow."""

import argparse
import logging
import sys
from typing import List, Optional

from . import config
from .notifications import NotificationSink
from .scheduler import Mode
from .settings import SettingsStore
from .stats import DailyLedger
from .storage import JsonRecord
from .ui import run_ui

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="focusflow",
        description="Terminal work/break focus timer with a daily focus total",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls:
  Space    Start/Pause
  s        Start or resume
  p        Pause
  r        Reset current mode
  m        Switch between focus and break (when not running)
  Esc      Leave a duration field
  q        Quit

Durations can be edited in the fields below the timer; arrow keys and the
mouse wheel step them. Edits apply to the next countdown.

Examples:
  focusflow                       # Stored durations (default 25/5)
  focusflow --work 50 --break 10  # Save new durations in minutes
  focusflow --no-notify           # Silent completion
""",
    )

    parser.add_argument(
        "--work",
        type=int,
        default=None,
        metavar="MINS",
        help="Set and save the focus duration in minutes",
    )
    parser.add_argument(
        "--break",
        type=int,
        default=None,
        dest="break_mins",
        metavar="MINS",
        help="Set and save the break duration in minutes",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help=f"Where settings, stats and logs live (default: ${config.ENV_HOME} or ~/.focusflow)",
    )
    parser.add_argument(
        "--no-notify",
        action="store_true",
        help="Disable notifications (bell and system)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Debug logging to the log file",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    directory = config.data_dir(args.data_dir)
    log_path = config.configure_logging(directory, verbose=args.verbose)
    logger.info("Starting focusflow, data in %s", directory)

    settings = SettingsStore(JsonRecord(directory / config.SETTINGS_FILE))
    settings.load()
    if args.work is not None:
        settings.set_minutes(Mode.WORK, args.work)
    if args.break_mins is not None:
        settings.set_minutes(Mode.BREAK, args.break_mins)

    ledger = DailyLedger(JsonRecord(directory / config.STATS_FILE))
    notifier = NotificationSink(enabled=not args.no_notify)

    try:
        run_ui(settings, ledger, notifier)
    except KeyboardInterrupt:
        pass

    logger.info("Exiting, log at %s", log_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
