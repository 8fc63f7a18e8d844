"""Colours and layout constants for the terminal view."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Immutable view configuration handed to the renderer."""

    padding: int = 2                # spaces left of the bar and counter
    bar_width: int = 40
    help_color: str = "#626262"
    bar_back_color: str = "#3A3A4E"
    running_color: str = "#EE6FF8"   # pink end of the gradient
    complete_color: str = "#5A56E0"  # purple end of the gradient


DEFAULT_THEME = Theme()
