"""UI package."""

from .timer_widget import TimerWidget
from .progress_ring import ProgressRing

__all__ = [
    "TimerWidget",
    "ProgressRing",
]
