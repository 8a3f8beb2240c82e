"""Headless tests for the Textual UI."""

import asyncio

import pytest
from textual.widgets import Input

from focusflow.notifications import NotificationSink
from focusflow.scheduler import Mode, RunState
from focusflow.settings import SettingsStore
from focusflow.stats import DailyLedger
from focusflow.storage import JsonRecord
from focusflow.ui import FocusFlowApp


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def app(tmp_path, clock):
    settings = SettingsStore(JsonRecord(tmp_path / "settings.json"))
    settings.load()
    ledger = DailyLedger(JsonRecord(tmp_path / "stats.json"))
    return FocusFlowApp(settings, ledger, NotificationSink(enabled=False), clock=clock)


def run(app, scenario):
    async def _run():
        async with app.run_test() as pilot:
            await scenario(pilot)

    asyncio.run(_run())


class TestFocusFlowApp:
    """Test key bindings and widgets driving the timer."""

    def test_start_and_pause_keys(self, app, clock):
        async def scenario(pilot):
            await pilot.press("s")
            assert app.focus_timer.run_state == RunState.RUNNING
            clock.now = 2000
            await pilot.press("p")
            assert app.focus_timer.run_state == RunState.PAUSED
            assert app.focus_timer.remaining_seconds == 25 * 60 - 2

        run(app, scenario)

    def test_space_toggles(self, app):
        async def scenario(pilot):
            await pilot.press("space")
            assert app.focus_timer.run_state == RunState.RUNNING
            await pilot.press("space")
            assert app.focus_timer.run_state == RunState.PAUSED

        run(app, scenario)

    def test_switch_mode_key(self, app):
        async def scenario(pilot):
            await pilot.press("m")
            assert app.focus_timer.mode == Mode.BREAK
            assert app.focus_timer.remaining_seconds == 5 * 60

        run(app, scenario)

    def test_editing_a_field_updates_idle_timer(self, app):
        async def scenario(pilot):
            app.query_one("#work_minutes", Input).value = "1"
            await pilot.pause()
            assert app.settings.get_field("work_minutes") == 1
            assert app.focus_timer.remaining_seconds == 60

        run(app, scenario)

    def test_completion_updates_daily_total(self, app, clock):
        async def scenario(pilot):
            app.query_one("#work_minutes", Input).value = "1"
            await pilot.pause()
            await pilot.press("s")
            clock.now = 60000
            app.focus_timer.tick()
            await pilot.pause()

            assert app.focus_timer.run_state == RunState.IDLE
            assert app.ledger.current_total() == 60

        run(app, scenario)
