"""Textual-based UI for the focus timer."""

from typing import Callable

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.timer import Timer
from textual.widgets import Footer, Input, Label, ProgressBar, Static

from .clock import Clock, monotonic_ms
from .display import format_daily_total, render_big_time
from .notifications import NotificationSink
from .scheduler import FocusTimer, Mode, RunState, TimerEvent
from .settings import SETTINGS_FIELDS, SettingsStore
from .stats import DailyLedger

APP_CSS = """
Screen {
    align: center middle;
}

#timer-container {
    width: auto;
    height: auto;
    padding: 1 4;
    border: round $accent;
}

#timer-container.work {
    border: round $error;
}

#timer-container.break {
    border: round $success;
}

#mode-label, #status-badge, #daily-stats {
    width: 100%;
    content-align: center middle;
}

#big-timer {
    width: auto;
    padding: 1 0;
}

.running {
    color: $success;
}

.paused {
    color: $warning;
}

.durations {
    height: auto;
    width: auto;
}

.durations Label {
    width: 7;
    padding: 1 0;
}

DurationInput {
    width: 8;
}
"""


class TextualScheduler:
    """Arms the timer's periodic tick on the app's event loop."""

    def __init__(self, app: App) -> None:
        self.app = app

    def arm(self, interval: float, callback: Callable[[], None]) -> Timer:
        return self.app.set_interval(interval, callback)


class DurationInput(Input):
    """Integer field that also steps with arrow keys and the mouse wheel."""

    BINDINGS = [
        Binding("up", "step(1)", "Increase", show=False),
        Binding("down", "step(-1)", "Decrease", show=False),
    ]

    class Stepped(Message):
        """Posted when the field is nudged up or down."""

        def __init__(self, field: "DurationInput", delta: int) -> None:
            super().__init__()
            self.field = field
            self.delta = delta

    def action_step(self, delta: int) -> None:
        self.post_message(self.Stepped(self, delta))

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        event.stop()
        self.post_message(self.Stepped(self, 1))

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        event.stop()
        self.post_message(self.Stepped(self, -1))


class BigTimer(Static):
    """Big block-digit timer display."""

    def __init__(self, timer: FocusTimer, **kwargs) -> None:
        super().__init__(**kwargs)
        self.focus_timer = timer

    def on_mount(self) -> None:
        self.update_display()

    def update_display(self) -> None:
        self.update(render_big_time(self.focus_timer.remaining_seconds))


class ModeLabel(Static):
    """Current mode label."""

    def __init__(self, timer: FocusTimer, **kwargs) -> None:
        super().__init__(**kwargs)
        self.focus_timer = timer

    def on_mount(self) -> None:
        self.update_display()

    def update_display(self) -> None:
        self.update(f"─── {self.focus_timer.mode_label} ───")


class StatusBadge(Static):
    """Run state indicator badge."""

    def __init__(self, timer: FocusTimer, **kwargs) -> None:
        super().__init__(**kwargs)
        self.focus_timer = timer

    def on_mount(self) -> None:
        self.update_display()

    def update_display(self) -> None:
        state = self.focus_timer.run_state
        self.remove_class("running", "paused")
        if state == RunState.RUNNING:
            self.update("▶ RUNNING")
            self.add_class("running")
        elif state == RunState.PAUSED:
            self.update("⏸ PAUSED")
            self.add_class("paused")
        else:
            self.update(f"■ READY · m: switch to {self.focus_timer.next_mode_label}")


class FocusFlowApp(App):
    """Focus timer application."""

    CSS = APP_CSS
    AUTO_FOCUS = None

    BINDINGS = [
        Binding("space", "toggle", "Start/Pause"),
        Binding("s", "start", "Start"),
        Binding("p", "pause", "Pause"),
        Binding("r", "reset", "Reset"),
        Binding("m", "switch_mode", "Switch mode"),
        Binding("escape", "leave_input", "Timer keys", show=False),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        settings: SettingsStore,
        ledger: DailyLedger,
        notifier: NotificationSink,
        clock: Clock = monotonic_ms,
    ) -> None:
        super().__init__()
        self.settings = settings
        self.ledger = ledger
        self.focus_timer = FocusTimer(
            durations=settings,
            clock=clock,
            scheduler=TextualScheduler(self),
            ledger=ledger,
            notifier=notifier,
        )
        self.focus_timer.subscribe(self._on_timer_event)

    def compose(self) -> ComposeResult:
        with Container(id="main"):
            with Vertical(id="timer-container"):
                yield ModeLabel(self.focus_timer, id="mode-label")
                yield BigTimer(self.focus_timer, id="big-timer")
                yield StatusBadge(self.focus_timer, id="status-badge")
                yield ProgressBar(id="progress", show_eta=False, show_percentage=False)
                yield Static(id="daily-stats")
                for prefix in ("work", "break"):
                    with Horizontal(classes="durations"):
                        yield Label(prefix.capitalize())
                        for name in SETTINGS_FIELDS:
                            if name.startswith(prefix):
                                yield DurationInput(
                                    value=str(self.settings.get_field(name)),
                                    placeholder=name.split("_")[1][0],
                                    type="integer",
                                    id=name,
                                )
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_stats()
        self._refresh_display()

    def _on_timer_event(self, event: TimerEvent) -> None:
        self._refresh_display()
        if event.just_completed:
            self._refresh_stats()
            finished = "Focus" if event.mode == Mode.WORK else "Break"
            self.notify(
                f"{finished} finished. Press m to switch to {self.focus_timer.next_mode_label}.",
                title="Session complete",
            )

    def _refresh_display(self) -> None:
        """Update all display elements."""
        self.query_one("#big-timer", BigTimer).update_display()
        self.query_one("#mode-label", ModeLabel).update_display()
        self.query_one("#status-badge", StatusBadge).update_display()
        self._update_progress()
        self._update_mode_class()

    def _refresh_stats(self) -> None:
        total = self.ledger.current_total()
        self.query_one("#daily-stats", Static).update(format_daily_total(total))

    def _update_progress(self) -> None:
        progress_bar = self.query_one("#progress", ProgressBar)
        progress_bar.update(total=100, progress=self.focus_timer.progress * 100)

    def _update_mode_class(self) -> None:
        container = self.query_one("#timer-container")
        container.remove_class("work", "break")
        container.add_class("work" if self.focus_timer.mode == Mode.WORK else "break")

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id not in SETTINGS_FIELDS:
            return
        self.settings.set_field(event.input.id, event.value)
        self.focus_timer.refresh_duration()

    def on_input_blurred(self, event: Input.Blurred) -> None:
        if event.input.id in SETTINGS_FIELDS and not event.value.strip():
            event.input.value = "0"

    def on_duration_input_stepped(self, event: DurationInput.Stepped) -> None:
        value = self.settings.step_field(event.field.id, event.delta)
        event.field.value = str(value)

    def action_toggle(self) -> None:
        self.focus_timer.toggle()

    def action_start(self) -> None:
        self.focus_timer.start()

    def action_pause(self) -> None:
        self.focus_timer.pause()

    def action_reset(self) -> None:
        self.focus_timer.reset()

    def action_switch_mode(self) -> None:
        self.focus_timer.switch_mode()

    def action_leave_input(self) -> None:
        self.set_focus(None)


def run_ui(settings: SettingsStore, ledger: DailyLedger, notifier: NotificationSink) -> None:
    """Run the focus timer UI."""
    app = FocusFlowApp(settings, ledger, notifier)
    app.run()
