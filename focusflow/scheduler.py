"""Pure logic for the focus timer state machine."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional, Protocol

from .clock import Clock, monotonic_ms
from .display import format_clock
from .elapsed import remaining_seconds

logger = logging.getLogger(__name__)

TICK_INTERVAL = 0.1  # seconds between samples while running


class Mode(Enum):
    """Session modes."""
    WORK = auto()
    BREAK = auto()

    @property
    def other(self) -> "Mode":
        return Mode.BREAK if self is Mode.WORK else Mode.WORK


class RunState(Enum):
    """Timer running status."""
    IDLE = auto()
    RUNNING = auto()
    PAUSED = auto()


class DurationSource(Protocol):
    def duration_seconds(self, mode: Mode) -> int: ...


class Ledger(Protocol):
    def record_work_seconds(self, seconds: int) -> int: ...


class Notifier(Protocol):
    def notify(self, mode: Mode) -> None: ...


class TickHandle(Protocol):
    def stop(self) -> None: ...


class Scheduler(Protocol):
    def arm(self, interval: float, callback: Callable[[], None]) -> TickHandle: ...


@dataclass
class Session:
    """Mutable state of the current countdown."""
    mode: Mode = Mode.WORK
    run_state: RunState = RunState.IDLE
    configured_duration_seconds: int = 0
    remaining_seconds: int = 0
    started_at_ms: Optional[int] = None
    pause_offset_ms: int = 0


@dataclass(frozen=True)
class TimerEvent:
    """State change published to subscribers."""
    run_state: RunState
    mode: Mode
    remaining_seconds: int
    just_completed: bool = False


Listener = Callable[[TimerEvent], None]


class FocusTimer:
    """Work/break timer state machine.

    Remaining time is derived from an absolute clock anchor, so pausing,
    resuming and irregular ticks never accumulate drift. Invalid transition
    requests are ignored rather than raised.
    """

    def __init__(
        self,
        durations: DurationSource,
        clock: Clock = monotonic_ms,
        scheduler: Optional[Scheduler] = None,
        ledger: Optional[Ledger] = None,
        notifier: Optional[Notifier] = None,
    ):
        """Initialize the timer.

        Args:
            durations: Supplies the configured seconds for each mode.
            clock: Returns the current time in milliseconds.
            scheduler: Arms the periodic tick while running. Without one,
                the caller drives ``tick()`` directly.
            ledger: Credited with the work duration on work completion.
            notifier: Told which mode just completed.
        """
        self.durations = durations
        self.clock = clock
        self.scheduler = scheduler
        self.ledger = ledger
        self.notifier = notifier

        self._session = Session()
        self._tick_handle: Optional[TickHandle] = None
        self._listeners: List[Listener] = []
        self._arm_duration()

    @property
    def session(self) -> Session:
        """The live session aggregate."""
        return self._session

    @property
    def mode(self) -> Mode:
        """Current mode."""
        return self._session.mode

    @property
    def run_state(self) -> RunState:
        """Current run state."""
        return self._session.run_state

    @property
    def remaining_seconds(self) -> int:
        """Seconds remaining as of the last sample."""
        return self._session.remaining_seconds

    @property
    def configured_duration_seconds(self) -> int:
        """Duration snapshot of the current countdown."""
        return self._session.configured_duration_seconds

    @property
    def pause_offset_ms(self) -> int:
        """Milliseconds elapsed at the most recent pause."""
        return self._session.pause_offset_ms

    @property
    def is_ticking(self) -> bool:
        """Whether a periodic tick is currently armed."""
        return self._tick_handle is not None

    @property
    def progress(self) -> float:
        """Progress through the current countdown (0.0 to 1.0)."""
        total = self._session.configured_duration_seconds
        if total == 0:
            return 1.0
        return 1.0 - (self._session.remaining_seconds / total)

    @property
    def mode_label(self) -> str:
        """Human-readable mode label."""
        return "Focus" if self._session.mode == Mode.WORK else "Break"

    @property
    def next_mode_label(self) -> str:
        """Label for the mode a switch would move to."""
        return "Focus" if self._session.mode == Mode.BREAK else "Break"

    @property
    def status_label(self) -> str:
        """Human-readable run state label."""
        return self._session.run_state.name

    @property
    def can_toggle(self) -> bool:
        """Whether toggle() would do anything."""
        return (
            self._session.run_state != RunState.IDLE
            or self._session.remaining_seconds > 0
        )

    @property
    def display(self) -> str:
        """Remaining time as MM:SS or HH:MM:SS."""
        return format_clock(self._session.remaining_seconds)

    def subscribe(self, listener: Listener) -> None:
        """Register a callback for state changes."""
        self._listeners.append(listener)

    def start(self) -> None:
        """Start a fresh countdown or resume a paused one."""
        session = self._session
        if session.run_state == RunState.RUNNING:
            logger.debug("start ignored: already running")
            return

        if session.remaining_seconds == 0:
            self._arm_duration()
            if session.configured_duration_seconds == 0:
                self._complete()
                return

        session.started_at_ms = self.clock() - session.pause_offset_ms
        session.run_state = RunState.RUNNING
        self._start_ticking()
        logger.info(
            "%s session running, %ss left", session.mode.name.lower(), session.remaining_seconds
        )
        self._emit()

    def pause(self) -> None:
        """Freeze the running countdown."""
        session = self._session
        if session.run_state != RunState.RUNNING:
            logger.debug("pause ignored: %s", session.run_state.name)
            return

        now = self.clock()
        remaining = remaining_seconds(session, now)
        if remaining == 0:
            self._complete()
            return

        session.pause_offset_ms = now - session.started_at_ms
        session.remaining_seconds = remaining
        session.started_at_ms = None
        session.run_state = RunState.PAUSED
        self._stop_ticking()
        logger.info("Paused with %ss left", remaining)
        self._emit()

    def toggle(self) -> None:
        """Pause if running, otherwise start when there is time to count."""
        if self._session.run_state == RunState.RUNNING:
            self.pause()
        elif self.can_toggle:
            self.start()

    def reset(self) -> None:
        """Stop and restore the full duration of the current mode."""
        self._stop_ticking()
        self._session.run_state = RunState.IDLE
        self._arm_duration()
        self._emit()

    def switch_mode(self) -> None:
        """Flip between work and break. Ignored while running."""
        session = self._session
        if session.run_state == RunState.RUNNING:
            logger.debug("switch_mode ignored: running")
            return

        self._stop_ticking()
        session.mode = session.mode.other
        session.run_state = RunState.IDLE
        self._arm_duration()
        logger.info("Switched to %s mode", session.mode.name.lower())
        self._emit()

    def refresh_duration(self) -> None:
        """Pick up edited durations while idle.

        A running or paused countdown keeps its snapshot; the new value
        applies from the next reset, switch or completed session.
        """
        if self._session.run_state != RunState.IDLE:
            return
        self._arm_duration()
        self._emit()

    def tick(self) -> None:
        """Sample the clock while running and complete at zero."""
        session = self._session
        if session.run_state != RunState.RUNNING:
            return

        remaining = remaining_seconds(session, self.clock())
        if remaining == 0:
            self._complete()
            return

        session.remaining_seconds = remaining
        self._emit()

    def _complete(self) -> None:
        session = self._session
        self._stop_ticking()
        session.run_state = RunState.IDLE
        session.started_at_ms = None
        session.pause_offset_ms = 0
        session.remaining_seconds = 0
        completed = session.mode
        logger.info("%s session complete", completed.name.lower())

        if completed == Mode.WORK and self.ledger is not None:
            self.ledger.record_work_seconds(session.configured_duration_seconds)

        if self.notifier is not None:
            try:
                self.notifier.notify(completed)
            except Exception:
                logger.exception("Notifier failed for %s", completed.name.lower())

        self._emit(just_completed=True)

    def _arm_duration(self) -> None:
        """Snapshot the current mode's duration and clear the anchors."""
        session = self._session
        duration = max(0, int(self.durations.duration_seconds(session.mode)))
        session.configured_duration_seconds = duration
        session.remaining_seconds = duration
        session.started_at_ms = None
        session.pause_offset_ms = 0

    def _start_ticking(self) -> None:
        self._stop_ticking()
        if self.scheduler is not None:
            self._tick_handle = self.scheduler.arm(TICK_INTERVAL, self.tick)

    def _stop_ticking(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.stop()
            self._tick_handle = None

    def _emit(self, just_completed: bool = False) -> None:
        event = TimerEvent(
            run_state=self._session.run_state,
            mode=self._session.mode,
            remaining_seconds=self._session.remaining_seconds,
            just_completed=just_completed,
        )
        for listener in self._listeners:
            listener(event)
