"""Snapshot → rich renderable.

Layout (top → bottom):
    - blank line
    - progress bar            (only while a session is running)
    - "elapsed s / total s"   (only while a session is running)
    - two blank lines
    - one help line per key binding
"""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.progress_bar import ProgressBar
from rich.style import Style
from rich.text import Text
from textual.binding import Binding

from ..timer.state import TimerSnapshot
from .keys import DEFAULT_BINDINGS
from .styles import Theme, DEFAULT_THEME


def format_counter(snapshot: TimerSnapshot) -> str:
    return f"{snapshot.elapsed_seconds}s / {snapshot.total_seconds}s"


def render(
    snapshot: TimerSnapshot,
    theme: Theme = DEFAULT_THEME,
    bindings: tuple[Binding, ...] = DEFAULT_BINDINGS,
) -> RenderableType:
    """Build the whole screen for *snapshot*."""
    rows: list[RenderableType] = [Text("")]

    if snapshot.running:
        bar = ProgressBar(
            total=1.0,
            completed=snapshot.fraction,
            width=theme.bar_width,
            style=Style(color=theme.bar_back_color),
            complete_style=Style(color=theme.running_color),
            finished_style=Style(color=theme.complete_color),
        )
        pad = (0, 0, 0, theme.padding)
        rows.append(Padding(bar, pad, expand=False))
        rows.append(Padding(Text(format_counter(snapshot)), pad, expand=False))

    rows.append(Text(""))
    rows.append(Text(""))

    help_style = Style(color=theme.help_color)
    for binding in bindings:
        rows.append(Text(binding.description, style=help_style))

    return Group(*rows)
