"""Textual host: wires key bindings, the screen and a ``TimerEngine``.

The app owns the terminal for the lifetime of the program.  Textual's
driver decodes key presses and restores the terminal on exit; this
module only maps bindings onto engine commands, runs the one-second
interval while the engine asks for ticks, and redraws on every update.
"""

from __future__ import annotations

import sys
from typing import IO, Callable

from textual.app import App, ComposeResult
from textual.timer import Timer
from textual.widgets import Static

from ..errors import StartupError
from ..logger import log
from ..timer.engine import TimerEngine, TICK_INTERVAL
from ..timer.state import TimerSnapshot
from .keys import DEFAULT_BINDINGS
from .renderer import render
from .styles import Theme, DEFAULT_THEME


class TickTockApp(App):
    """Single-screen countdown timer."""

    CSS = """
    #screen { height: auto; }
    """

    BINDINGS = list(DEFAULT_BINDINGS)

    def __init__(
        self,
        engine: TimerEngine,
        *,
        view_theme: Theme = DEFAULT_THEME,
        tick_interval: float = TICK_INTERVAL,
    ) -> None:
        super().__init__()
        self._engine = engine
        self._view_theme = view_theme
        self._tick_interval = tick_interval
        self._tick_timer: Timer | None = None

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def tick_timer(self) -> Timer | None:
        """The running one-second interval, or None while stopped."""
        return self._tick_timer

    # ── lifecycle ─────────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        yield Static(id="screen")

    def on_mount(self) -> None:
        self._engine.updated.connect(self._redraw)
        self._engine.ticking_changed.connect(self._on_ticking_changed)
        self._engine.quit_requested.connect(self._on_quit_requested)
        self._redraw()
        log.debug("Timer app mounted")

    # ── actions ───────────────────────────────────────────────────────

    def action_toggle(self) -> None:
        self._engine.toggle()

    async def action_quit(self) -> None:
        if self._engine.quitting:
            self.exit()
        else:
            self._engine.quit()

    # ── engine slots ──────────────────────────────────────────────────

    def _on_ticking_changed(self, ticking: bool) -> None:
        if self._tick_timer is not None:
            self._tick_timer.stop()
            self._tick_timer = None
        if ticking:
            self._tick_timer = self.set_interval(self._tick_interval, self._engine.tick)

    def _on_quit_requested(self) -> None:
        self.exit()

    def _redraw(self, snapshot: TimerSnapshot | None = None) -> None:
        screen = self.query_one("#screen", Static)
        screen.update(render(snapshot or self._engine.snapshot(), self._view_theme))


def check_terminal(stdin: IO[str] | None = None, stdout: IO[str] | None = None) -> None:
    """Raise ``StartupError`` unless both ends are attached to a terminal."""
    for name, stream in (("stdin", stdin or sys.stdin), ("stdout", stdout or sys.stdout)):
        isatty = getattr(stream, "isatty", None)
        if isatty is None or not isatty():
            raise StartupError(f"{name} is not a terminal")


def install_excepthook(app: App) -> Callable:
    """Route unhandled exceptions to a clean, non-zero app exit.

    Exceptions raised inside engine signal slots never reach textual's
    own handler; without a hook PyQt aborts the process and the terminal
    is left in application mode.  Returns the previous hook.
    """
    previous = sys.excepthook

    def hook(exc_type, exc, tb) -> None:
        log.error("Unhandled exception", exc_info=(exc_type, exc, tb))
        app.exit(return_code=1, message=f"{exc_type.__name__}: {exc}")

    sys.excepthook = hook
    return previous
