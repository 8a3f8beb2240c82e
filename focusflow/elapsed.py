"""Remaining-time accounting against an absolute clock."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .scheduler import Session


def remaining_seconds(session: "Session", now_ms: int) -> int:
    """Compute whole seconds left in the session at ``now_ms``.

    The value is recomputed from the session anchor on every call instead of
    decremented per tick, so late or skipped ticks never drift the countdown.
    Partial seconds round up: the countdown only shows 0 once it is over.

    Args:
        session: Session whose countdown is being sampled.
        now_ms: Current clock reading in milliseconds.

    Returns:
        Seconds remaining, clamped to [0, configured duration]. A session
        without a start anchor (not running) returns its frozen value.
    """
    if session.started_at_ms is None:
        return session.remaining_seconds

    total_ms = session.configured_duration_seconds * 1000
    elapsed_ms = max(0, now_ms - session.started_at_ms)
    remaining_ms = max(0, total_ms - elapsed_ms)
    seconds = (remaining_ms + 999) // 1000
    return min(seconds, session.configured_duration_seconds)
