"""Elapsed/total → completion fraction."""

from __future__ import annotations


def fraction(elapsed: int, total: int) -> float:
    """Return how much of *total* has elapsed, clamped to ``0.0 … 1.0``.

    A non-positive *total* (no session started yet, or a zero-length
    duration) maps to ``0.0`` rather than dividing by zero.
    """
    if total <= 0:
        return 0.0
    return max(0.0, min(1.0, elapsed / total))
