"""Exception types raised by TickTock's host layer.

The timer core never raises; these cover the terminal/event-loop side.
"""


class TickTockError(Exception):
    """Base class for all TickTock errors."""


class StartupError(TickTockError):
    """The terminal host could not take over the terminal."""
