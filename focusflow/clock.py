"""Time sources for the focus timer."""

import time
from typing import Callable

# A clock returns integer milliseconds and never goes backwards.
Clock = Callable[[], int]


def monotonic_ms() -> int:
    """Current monotonic time in milliseconds."""
    return int(time.monotonic() * 1000)
