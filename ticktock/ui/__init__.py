"""UI package."""

from .keys import QUIT_KEYS, START_STOP_KEYS, DEFAULT_BINDINGS
from .styles import Theme, DEFAULT_THEME
from .renderer import render
from .app import TickTockApp, check_terminal, install_excepthook

__all__ = [
    "QUIT_KEYS",
    "START_STOP_KEYS",
    "DEFAULT_BINDINGS",
    "Theme",
    "DEFAULT_THEME",
    "render",
    "TickTockApp",
    "check_terminal",
    "install_excepthook",
]
