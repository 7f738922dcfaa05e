# pomodoro_deck/utils/timer_engine.py
import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised at startup when the timer settings are unusable."""


class Mode(enum.Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def label(self):
        return {
            Mode.WORK: "Work",
            Mode.SHORT_BREAK: "Short Break",
            Mode.LONG_BREAK: "Long Break",
        }[self]


@dataclass(frozen=True)
class Settings:
    """
    Interval lengths in minutes and the number of work sessions before a
    long break. Fixed for the lifetime of an engine.
    """
    work_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 15
    sessions_before_long_break: int = 4

    def __post_init__(self):
        for name in ("work_minutes", "short_break_minutes", "long_break_minutes", "sessions_before_long_break"):
            value = getattr(self, name)
            # bool is an int subclass; "True minutes" is still a config mistake
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")

    def duration_seconds(self, mode):
        minutes = {
            Mode.WORK: self.work_minutes,
            Mode.SHORT_BREAK: self.short_break_minutes,
            Mode.LONG_BREAK: self.long_break_minutes,
        }[mode]
        return minutes * 60


@dataclass
class TimerState:
    mode: Mode
    seconds_remaining: int
    is_active: bool = False
    sessions_completed: int = 0


@dataclass(frozen=True)
class TimerSnapshot:
    mode: Mode
    seconds_remaining: int
    is_active: bool
    sessions_completed: int

    @property
    def time_display(self):
        return format_time(self.seconds_remaining)

    @property
    def mode_label(self):
        return self.mode.label


def format_time(seconds):
    """Formats a second count as zero-padded mm:ss."""
    minutes, seconds = divmod(seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


class TimerEngine:
    """
    Pomodoro state machine.

    The engine owns a TimerState and is the only thing that writes to it.
    Time only advances through tick(), which the injected scheduler calls
    once per interval while the timer is active. A scheduler is any object
    with schedule(interval_ms, callback) -> handle and cancel(handle).

    At most one scheduler registration is live at a time: every arm is
    preceded by a cancel, and callbacks from a registration that is no
    longer current are dropped.
    """
    TICK_INTERVAL_MS = 1000

    def __init__(self, scheduler, settings=None, tick_interval_ms=TICK_INTERVAL_MS):
        self.settings = settings if settings is not None else Settings()
        self.tick_interval_ms = tick_interval_ms
        self._scheduler = scheduler
        self._registration = None  # (token, handle)

        self.state = TimerState(
            mode=Mode.WORK,
            seconds_remaining=self.settings.duration_seconds(Mode.WORK),
        )

    # ----- Read interface -----
    @property
    def mode(self):
        return self.state.mode

    @property
    def seconds_remaining(self):
        return self.state.seconds_remaining

    @property
    def is_active(self):
        return self.state.is_active

    @property
    def sessions_completed(self):
        return self.state.sessions_completed

    @property
    def time_display(self):
        return format_time(self.state.seconds_remaining)

    def snapshot(self):
        return TimerSnapshot(
            mode=self.state.mode,
            seconds_remaining=self.state.seconds_remaining,
            is_active=self.state.is_active,
            sessions_completed=self.state.sessions_completed,
        )

    # ----- Commands -----
    def start(self):
        if self.state.is_active:
            return
        self.state.is_active = True
        self._arm()
        logger.info("Started %s with %s remaining", self.state.mode.label, self.time_display)

    def pause(self):
        if not self.state.is_active:
            return
        self.state.is_active = False
        self._disarm()
        logger.info("Paused %s at %s", self.state.mode.label, self.time_display)

    def reset(self):
        self.state.is_active = False
        self._disarm()
        self.state.seconds_remaining = self.settings.duration_seconds(self.state.mode)
        logger.info("Reset %s to %s", self.state.mode.label, self.time_display)

    def change_mode(self, new_mode):
        if new_mode == self.state.mode:
            return
        self.state.mode = new_mode
        self.state.is_active = False
        self._disarm()
        self.state.seconds_remaining = self.settings.duration_seconds(new_mode)
        logger.info("Switched to %s", new_mode.label)

    def tick(self):
        """Advances the countdown by one second."""
        if not self.state.is_active:
            return

        if self.state.seconds_remaining <= 1:
            self.state.seconds_remaining = 0
            self.state.is_active = False
            self._disarm()
            self._complete_interval()
        else:
            self.state.seconds_remaining -= 1

    # ----- Internals -----
    def _complete_interval(self):
        finished = self.state.mode
        if finished == Mode.WORK:
            self.state.sessions_completed += 1
            if self.state.sessions_completed % self.settings.sessions_before_long_break == 0:
                next_mode = Mode.LONG_BREAK
            else:
                next_mode = Mode.SHORT_BREAK
        else:
            next_mode = Mode.WORK

        self.state.mode = next_mode
        self.state.seconds_remaining = self.settings.duration_seconds(next_mode)
        logger.info(
            "%s complete (%d sessions), next up: %s",
            finished.label, self.state.sessions_completed, next_mode.label,
        )

    def _arm(self):
        self._disarm()
        token = object()
        handle = self._scheduler.schedule(self.tick_interval_ms, lambda: self._on_scheduled_tick(token))
        self._registration = (token, handle)

    def _disarm(self):
        if self._registration is None:
            return
        _, handle = self._registration
        self._registration = None
        self._scheduler.cancel(handle)

    def _on_scheduled_tick(self, token):
        if self._registration is None or self._registration[0] is not token:
            logger.debug("Dropped tick from a cancelled registration")
            return
        self.tick()
