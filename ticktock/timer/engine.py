"""Signal-emitting driver around ``TimerState``.

The engine is the only thing that feeds events into the state machine.
The host calls ``tick()`` once a second while ``is_ticking`` is true and
forwards user commands to ``toggle()`` and ``quit()``.  All of them run
on the host's event-loop thread, so each event is fully applied before
the next is looked at.
"""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal

from ..logger import log
from .state import (
    TimerState,
    TimerSnapshot,
    Phase,
    Event,
    Effect,
    DEFAULT_TASK_DURATION,
)


TICK_INTERVAL = 1.0  # seconds between ticks


class TimerEngine(QObject):
    """Owns one ``TimerState`` and tells the host when to tick it.

    Signals
    -------
    ticked(elapsed_seconds: int)
        Emitted after every tick that advanced the countdown.
    state_changed(new_phase: Phase)
        Emitted whenever the phase changes.
    updated(snapshot: TimerSnapshot)
        Emitted after any event that changed the timer.
    ticking_changed(ticking: bool)
        Emitted when the host should start or stop its one-second
        tick source.
    quit_requested()
        Emitted when the session is over or the user asked to quit.
        The host is expected to shut down.
    """

    ticked = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    updated = pyqtSignal(object)
    ticking_changed = pyqtSignal(bool)
    quit_requested = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        duration: int = DEFAULT_TASK_DURATION,
    ) -> None:
        super().__init__(parent)

        self._state = TimerState(duration)
        self._quitting: bool = False
        self._ticking: bool = False

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def duration(self) -> int:
        """Seconds loaded into every new session."""
        return self._state.duration

    @property
    def elapsed(self) -> int:
        return self._state.elapsed_seconds

    @property
    def total(self) -> int:
        return self._state.total_seconds

    @property
    def is_running(self) -> bool:
        return self._state.running

    @property
    def is_ticking(self) -> bool:
        """True while the host should be delivering ticks."""
        return self._ticking

    @property
    def percent_complete(self) -> float:
        """0.0 → 1.0 progress through the current session."""
        return self._state.current_fraction()

    @property
    def quitting(self) -> bool:
        return self._quitting

    def snapshot(self) -> TimerSnapshot:
        return self._state.snapshot()

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def toggle(self) -> None:
        """Start a fresh session, or stop (and discard) the running one."""
        self._handle(Event.TOGGLE)

    def quit(self) -> None:
        self._handle(Event.QUIT)

    def tick(self) -> None:
        """Account for one second.  Called by the host's interval timer."""
        self._handle(Event.TICK)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _handle(self, event: Event) -> None:
        if self._quitting:
            return

        before = self._state.snapshot()
        effect = self._state.dispatch(event)
        after = self._state.snapshot()

        self._apply(effect)

        if event == Event.TICK and after.elapsed_seconds != before.elapsed_seconds:
            self.ticked.emit(after.elapsed_seconds)
        if after.phase != before.phase:
            log.debug("Timer %s → %s on %s", before.phase.value, after.phase.value, event.value)
            if after.phase == Phase.COMPLETE:
                log.info("Session complete after %ds", after.elapsed_seconds)
            self.state_changed.emit(after.phase)
        if after != before:
            self.updated.emit(after)

        if effect == Effect.QUIT:
            log.info("Quit requested (%s)", event.value)
            self.quit_requested.emit()

    def _apply(self, effect: Effect) -> None:
        if effect == Effect.START_TICKS:
            self._set_ticking(True)
        elif effect == Effect.STOP_TICKS:
            self._set_ticking(False)
        elif effect == Effect.QUIT:
            self._set_ticking(False)
            self._quitting = True

    def _set_ticking(self, ticking: bool) -> None:
        # Re-announce a start so the host re-phases its interval to the press.
        if ticking or self._ticking:
            self._ticking = ticking
            self.ticking_changed.emit(ticking)
