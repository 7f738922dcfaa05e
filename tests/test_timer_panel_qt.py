import pytest

from pomodoro_deck.panels_qt.timer_panel_qt import TimerPanel
from pomodoro_deck.utils.pomodoro_timer_qt import PomodoroTimer
from pomodoro_deck.utils.timer_engine import Mode, Settings

from conftest import wait_until


class StubApp:
    def mode_color(self, mode):
        return "#bc4749"


@pytest.fixture
def timer(qapp):
    settings = Settings(work_minutes=1, short_break_minutes=1, long_break_minutes=1, sessions_before_long_break=2)
    return PomodoroTimer(settings, tick_interval_ms=1)


@pytest.fixture
def panel(timer):
    return TimerPanel(StubApp(), timer)


def checked_modes(panel):
    return [mode for mode, button in panel.mode_buttons.items() if button.isChecked()]


def test_initial_controls(panel):
    assert panel.start_button.isEnabled()
    assert not panel.pause_button.isEnabled()
    assert panel.reset_button.isEnabled()
    assert checked_modes(panel) == [Mode.WORK]
    assert panel.time_display.label.text() == "01:00"
    assert panel.mode_label.text() == "Current mode: Work"
    assert panel.sessions_label.text() == "Completed sessions: 0"


def test_start_and_pause_toggle_buttons(panel, timer):
    timer.start()
    assert not panel.start_button.isEnabled()
    assert panel.pause_button.isEnabled()

    timer.pause()
    assert panel.start_button.isEnabled()
    assert not panel.pause_button.isEnabled()


def test_buttons_drive_the_timer(panel, timer):
    panel.start_button.click()
    assert timer.snapshot().is_active is True

    panel.pause_button.click()
    assert timer.snapshot().is_active is False

    panel.reset_button.click()
    assert timer.snapshot().seconds_remaining == 60


def test_change_mode_checks_only_that_button(panel, timer):
    timer.start()
    timer.change_mode(Mode.LONG_BREAK)

    assert checked_modes(panel) == [Mode.LONG_BREAK]
    assert panel.mode_label.text() == "Current mode: Long Break"
    assert panel.start_button.isEnabled()
    assert not panel.pause_button.isEnabled()


def test_mode_button_click_selects_mode(panel, timer):
    panel.mode_buttons[Mode.SHORT_BREAK].click()
    assert timer.snapshot().mode == Mode.SHORT_BREAK
    assert checked_modes(panel) == [Mode.SHORT_BREAK]


def test_clicking_current_mode_keeps_it_checked(panel, timer):
    panel.mode_buttons[Mode.WORK].click()
    assert timer.snapshot().mode == Mode.WORK
    assert checked_modes(panel) == [Mode.WORK]


def test_completed_interval_updates_panel(panel, timer):
    timer.start()
    wait_until(lambda: timer.snapshot().mode == Mode.SHORT_BREAK)

    assert checked_modes(panel) == [Mode.SHORT_BREAK]
    assert panel.start_button.isEnabled()
    assert not panel.pause_button.isEnabled()
    assert panel.time_display.label.text() == "01:00"
    assert panel.sessions_label.text() == "Completed sessions: 1"
