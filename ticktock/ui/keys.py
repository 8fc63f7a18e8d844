"""Key bindings for the timer app.

The descriptions double as the help lines drawn under the progress bar.
"""

from __future__ import annotations

from textual.binding import Binding


START_STOP_KEYS = Binding("s", "toggle", "press s to start/stop timer")
QUIT_KEYS = Binding("q,escape,ctrl+c", "quit", "press q to quit", priority=True)

# Order is the order the help lines are drawn in.
DEFAULT_BINDINGS: tuple[Binding, ...] = (START_STOP_KEYS, QUIT_KEYS)
