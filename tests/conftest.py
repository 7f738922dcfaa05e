import os
import time

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QEventLoop, QTimer
from PyQt6.QtWidgets import QApplication

from pomodoro_deck.utils.timer_engine import Settings, TimerEngine


class ManualScheduler:
    """Delivers tick callbacks only when the test calls advance()."""

    def __init__(self):
        self.live = {}
        self.callbacks = {}
        self.delivered = 0
        self.cancelled = []
        self._next_handle = 0

    def schedule(self, interval_ms, callback):
        self._next_handle += 1
        self.live[self._next_handle] = callback
        self.callbacks[self._next_handle] = callback
        return self._next_handle

    def cancel(self, handle):
        self.live.pop(handle, None)
        self.cancelled.append(handle)

    def live_count(self):
        return len(self.live)

    def advance(self, seconds):
        for _ in range(seconds):
            for handle, callback in list(self.live.items()):
                # an earlier callback in this round may have cancelled it
                if handle in self.live:
                    self.delivered += 1
                    callback()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def engine(scheduler):
    return TimerEngine(scheduler)


@pytest.fixture
def short_settings():
    return Settings(work_minutes=1, short_break_minutes=2, long_break_minutes=3, sessions_before_long_break=2)


@pytest.fixture(scope="session")
def qapp():
    return QApplication.instance() or QApplication([])


def spin(ms):
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    loop.exec()


def wait_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not met before timeout")
        spin(5)
