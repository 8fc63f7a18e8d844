"""Timer package."""

from .progress import fraction
from .state import (
    TimerState,
    TimerSnapshot,
    Phase,
    Event,
    Effect,
    DEFAULT_TASK_DURATION,
    DEFAULT_BREAK_DURATION,
)
from .engine import TimerEngine, TICK_INTERVAL

__all__ = [
    "fraction",
    "TimerState",
    "TimerSnapshot",
    "Phase",
    "Event",
    "Effect",
    "DEFAULT_TASK_DURATION",
    "DEFAULT_BREAK_DURATION",
    "TimerEngine",
    "TICK_INTERVAL",
]
