"""Timer package."""

from .engine import (
    TimerEngine,
    TimerState,
    ThresholdState,
    ButtonState,
    TIME_LIMIT,
    WARNING_LIMIT,
    ALERT_LIMIT,
    TIMER_LOW_RESET,
    TICK_INTERVAL_MS,
    button_state_for,
    format_time,
    minutes_for,
    seconds_for,
    threshold_for,
)

__all__ = [
    "TimerEngine",
    "TimerState",
    "ThresholdState",
    "ButtonState",
    "TIME_LIMIT",
    "WARNING_LIMIT",
    "ALERT_LIMIT",
    "TIMER_LOW_RESET",
    "TICK_INTERVAL_MS",
    "button_state_for",
    "format_time",
    "minutes_for",
    "seconds_for",
    "threshold_for",
]
