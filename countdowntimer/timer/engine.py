"""Countdown timer state machine.

States
------
IDLE      Value sits at ``TIME_LIMIT`` waiting for the user to start.
RUNNING   The owned ``QTimer`` fires every ``TICK_INTERVAL_MS``.
PAUSED    Ticking stopped; value and threshold frozen for resume.

Transitions
-----------
IDLE | PAUSED → RUNNING     (play / resume)
RUNNING → PAUSED           (pause)
Any → IDLE                 (stop — resets, never relaunches)
RUNNING → IDLE             (value reaches ``TIMER_LOW_RESET``)

Units
-----
The countdown value is measured in half-seconds and carries a constant
offset of 2, so ``TIME_LIMIT`` (362) displays as 03:00 and the floor
``TIMER_LOW_RESET`` (2) displays as 00:00.
"""

from __future__ import annotations

import logging
import math
from enum import Enum

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


log = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class ThresholdState(Enum):
    """Display band of the remaining time, used for text colour."""

    NONE = ""
    WARNING = "warning"
    ALERT = "alert"


class ButtonState(Enum):
    """What the primary control button offers next."""

    PLAY = "play"
    PAUSE = "pause"
    RESUME = "resume"


# ── constants ─────────────────────────────────────────────────────────────

TIME_LIMIT = 362.0
WARNING_LIMIT = 12
ALERT_LIMIT = 6
TIMER_LOW_RESET = 2
TICK_INTERVAL_MS = 500

DISPLAY_OFFSET = 2
UNITS_PER_SECOND = 2
UNITS_PER_MINUTE = 60 * UNITS_PER_SECOND

_BUTTON_FOR_STATE: dict[TimerState, ButtonState] = {
    TimerState.IDLE: ButtonState.PLAY,
    TimerState.RUNNING: ButtonState.PAUSE,
    TimerState.PAUSED: ButtonState.RESUME,
}


# ── display arithmetic ────────────────────────────────────────────────────


def threshold_for(value: float) -> ThresholdState:
    if value <= ALERT_LIMIT:
        return ThresholdState.ALERT
    if value <= WARNING_LIMIT:
        return ThresholdState.WARNING
    return ThresholdState.NONE


def seconds_for(value: float) -> int:
    """Seconds part of the clock face for a countdown *value*."""
    return math.floor(((value - DISPLAY_OFFSET) % UNITS_PER_MINUTE) / UNITS_PER_SECOND)


def minutes_for(value: float) -> int:
    """Minutes part of the clock face for a countdown *value*."""
    return math.floor((value - DISPLAY_OFFSET) / UNITS_PER_MINUTE)


def format_time(value: float) -> str:
    return f"{minutes_for(value):02d}:{seconds_for(value):02d}"


def button_state_for(state: TimerState) -> ButtonState:
    return _BUTTON_FOR_STATE[state]


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based countdown with play / pause / resume / stop controls.

    The engine owns exactly one ``QTimer``; every transition starts or
    stops that timer, so at most one tick loop can ever be active.

    Signals
    -------
    tick(value: float)
        Emitted after every tick and after any reset of the value.
    state_changed(new_state: TimerState)
        Emitted on every state transition.
    threshold_changed(new_threshold: ThresholdState)
        Emitted when the display band changes.
    finished()
        Emitted when the countdown hits the floor and auto-resets.
    """

    tick = pyqtSignal(float)
    state_changed = pyqtSignal(object)
    threshold_changed = pyqtSignal(object)
    finished = pyqtSignal()

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)

        # ── countdown state ───────────────────────────────────────────
        self._state: TimerState = TimerState.IDLE
        self._value: float = TIME_LIMIT
        self._threshold: ThresholdState = ThresholdState.NONE

        # ── Qt timer ──────────────────────────────────────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def value(self) -> float:
        """Current countdown value in half-second units."""
        return self._value

    @property
    def threshold(self) -> ThresholdState:
        return self._threshold

    @property
    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    @property
    def button_state(self) -> ButtonState:
        return button_state_for(self._state)

    @property
    def minutes(self) -> int:
        return minutes_for(self._value)

    @property
    def seconds(self) -> int:
        return seconds_for(self._value)

    @property
    def time_text(self) -> str:
        return format_time(self._value)

    @property
    def sweep(self) -> float:
        """Raw value read as arc degrees (362 for a full countdown).

        ``ProgressRing`` draws ``fraction`` instead, so a full countdown
        closes at exactly 360 degrees.
        """
        return self._value

    @property
    def fraction(self) -> float:
        """1.0 → 0.0 share of the countdown still remaining."""
        return max(0.0, min(1.0, self._value / TIME_LIMIT))

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def play(self) -> None:
        """Start counting, or continue from a pause."""
        if self.is_running:
            log.debug("play() ignored: tick loop already active")
            return
        verb = "resumed" if self._state == TimerState.PAUSED else "started"
        log.info("Countdown %s at %s", verb, format_time(self._value))
        self._set_state(TimerState.RUNNING)
        self._qt_timer.start()

    def pause(self) -> None:
        """Freeze the countdown.  Value and threshold are kept for resume."""
        if not self.is_running:
            return
        self._qt_timer.stop()
        log.info("Countdown paused at %s", format_time(self._value))
        self._set_state(TimerState.PAUSED)

    def resume(self) -> None:
        self.play()

    def stop(self) -> None:
        """Cancel and reset to the full duration.  Does not restart."""
        self._qt_timer.stop()
        log.info("Countdown stopped")
        self._reset_value()
        self._set_state(TimerState.IDLE)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        self._value -= 1
        log.debug("tick %s", self._value)

        if self._value <= TIMER_LOW_RESET:
            self._finish()
            return

        self._set_threshold(threshold_for(self._value))
        self.tick.emit(self._value)

    def _finish(self) -> None:
        # Floor reached: full reset within the same tick.
        self._qt_timer.stop()
        log.info("Countdown finished, resetting")
        self._reset_value()
        self._set_state(TimerState.IDLE)
        self.finished.emit()

    def _reset_value(self) -> None:
        self._value = TIME_LIMIT
        self._set_threshold(ThresholdState.NONE)
        self.tick.emit(self._value)

    def _set_threshold(self, threshold: ThresholdState) -> None:
        if threshold == self._threshold:
            return
        self._threshold = threshold
        self.threshold_changed.emit(threshold)

    def _set_state(self, new_state: TimerState) -> None:
        self._state = new_state
        self.state_changed.emit(new_state)
