import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .timer_engine import TimerEngine

logger = logging.getLogger(__name__)


class QtTickScheduler(QObject):
    """
    Periodic callbacks on the Qt event loop, one QTimer per registration.
    Emits tick_delivered after each callback so the host can refresh.
    """
    tick_delivered = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._timers = []

    def schedule(self, interval_ms, callback):
        def deliver():
            # tick_delivered must still fire when callback() cancels this timer
            callback()
            self.tick_delivered.emit()

        timer = QTimer(self)
        timer.setInterval(interval_ms)
        timer.timeout.connect(deliver)
        timer.start()
        self._timers.append(timer)
        logger.debug("Armed %d ms tick (%d live)", interval_ms, len(self._timers))
        return timer

    def cancel(self, timer):
        if timer not in self._timers:
            return
        self._timers.remove(timer)
        timer.stop()
        timer.timeout.disconnect()
        timer.deleteLater()

    def live_count(self):
        return len(self._timers)


class PomodoroTimer(QObject):
    """
    Hosts a TimerEngine on the Qt event loop.
    Emits signals after every command and every delivered tick so the UI
    can re-read the current state.
    """
    # Signal arguments: (time_str, mode_value, is_running)
    time_updated = pyqtSignal(str, str, bool)
    state_changed = pyqtSignal(object)
    # Signal arguments: (finished_mode_value, next_mode_value)
    interval_completed = pyqtSignal(str, str)

    def __init__(self, settings=None, tick_interval_ms=TimerEngine.TICK_INTERVAL_MS, parent=None):
        super().__init__(parent)
        self.scheduler = QtTickScheduler(self)
        self.engine = TimerEngine(self.scheduler, settings, tick_interval_ms)
        self.scheduler.tick_delivered.connect(self._on_tick_delivered)
        self._last_mode = self.engine.mode

    @property
    def settings(self):
        return self.engine.settings

    def snapshot(self):
        return self.engine.snapshot()

    def start(self):
        self.engine.start()
        self.emit_update()

    def pause(self):
        self.engine.pause()
        self.emit_update()

    def start_stop(self):
        """Toggles the timer on and off."""
        if self.engine.is_active:
            self.pause()
        else:
            self.start()

    def reset(self):
        self.engine.reset()
        self.emit_update()

    def change_mode(self, mode):
        self.engine.change_mode(mode)
        self.emit_update()

    def _on_tick_delivered(self):
        # only a tick can finish an interval, so a mode change seen here is a completion
        mode = self.engine.mode
        if mode != self._last_mode:
            self.interval_completed.emit(self._last_mode.value, mode.value)
        self.emit_update()

    def emit_update(self):
        """Publishes the current state to the UI."""
        snap = self.engine.snapshot()
        self._last_mode = snap.mode
        self.time_updated.emit(snap.time_display, snap.mode.value, snap.is_active)
        self.state_changed.emit(snap)
