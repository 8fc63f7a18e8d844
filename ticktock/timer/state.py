"""Countdown state machine for TickTock.

Phases
------
IDLE          Not running — waiting for the user to press start.
RUNNING       Counting ticks towards the configured duration.
COMPLETE      Elapsed reached the duration.  Terminal: the next tick
              asks the host to quit.

Transitions
-----------
IDLE → RUNNING          (toggle; always a fresh session)
RUNNING → IDLE          (toggle; progress is discarded)
RUNNING → COMPLETE      (tick reaching the duration)
COMPLETE → quit         (any further tick)

There is no pause/resume.  Stopping throws the session away and the
next start begins again from zero with the full duration.

Nothing here knows about Qt or the terminal.  Every transition returns
an ``Effect`` telling the host what to do with its tick source.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .progress import fraction


# ── enums ─────────────────────────────────────────────────────────────────


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETE = "complete"


class Event(Enum):
    """Incoming signals the host delivers, one at a time."""

    TICK = "tick"
    TOGGLE = "toggle"
    QUIT = "quit"


class Effect(Enum):
    """What the host must do after a transition."""

    NONE = "none"
    START_TICKS = "start_ticks"
    STOP_TICKS = "stop_ticks"
    QUIT = "quit"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_TASK_DURATION = 25 * 60
DEFAULT_BREAK_DURATION = 5 * 60


# ── snapshot ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerSnapshot:
    """Read-only view of a ``TimerState`` for renderers."""

    elapsed_seconds: int
    total_seconds: int
    running: bool
    fraction: float
    phase: Phase


# ── state ─────────────────────────────────────────────────────────────────


class TimerState:
    """Single source of truth for an active countdown.

    ``duration`` is fixed for the lifetime of the object; it is copied
    into ``total_seconds`` every time a session starts.
    """

    def __init__(self, duration: int = DEFAULT_TASK_DURATION) -> None:
        self._duration: int = max(0, int(duration))

        self._total: int = 0
        self._elapsed: int = 0
        self._running: bool = False
        # Value last set by a transition; what the progress bar shows.
        self._fraction: float = 0.0

        self._handlers = {
            Event.TICK: self.on_tick,
            Event.TOGGLE: self.toggle_start_stop,
            Event.QUIT: self._on_quit,
        }

    # ── read-only views ───────────────────────────────────────────────

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def total_seconds(self) -> int:
        return self._total

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed

    @property
    def running(self) -> bool:
        return self._running

    @property
    def phase(self) -> Phase:
        if not self._running:
            return Phase.IDLE
        if self.is_complete():
            return Phase.COMPLETE
        return Phase.RUNNING

    def current_fraction(self) -> float:
        return self._fraction

    def is_complete(self) -> bool:
        return self._fraction == 1.0

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            elapsed_seconds=self._elapsed,
            total_seconds=self._total,
            running=self._running,
            fraction=self._fraction,
            phase=self.phase,
        )

    # ── transitions ───────────────────────────────────────────────────

    def dispatch(self, event: Event) -> Effect:
        """Apply *event* and return the effect the host should carry out."""
        return self._handlers[event]()

    def toggle_start_stop(self) -> Effect:
        """Start a fresh session, or stop the running one.

        Valid from every state.  Starting always resets elapsed time and
        reloads the full duration; stopping zeroes the displayed
        fraction straight away.
        """
        if not self._running:
            self._running = True
            self._total = self._duration
            self._elapsed = 0
            self._fraction = 0.0
            return Effect.START_TICKS

        self._running = False
        self._fraction = 0.0
        return Effect.STOP_TICKS

    def on_tick(self) -> Effect:
        """Account for one second.

        A completed session does not change any more; the returned
        ``Effect.QUIT`` is the host's cue to shut down.
        """
        if self.is_complete():
            return Effect.QUIT
        if not self._running:
            return Effect.NONE

        self._elapsed += 1
        if self._elapsed >= self._total:
            # Snap to exactly 1.0 however far past the total we are.
            self._fraction = 1.0
        else:
            self._fraction = fraction(self._elapsed, self._total)
        return Effect.NONE

    def _on_quit(self) -> Effect:
        return Effect.QUIT
