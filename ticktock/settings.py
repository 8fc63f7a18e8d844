"""User preferences with JSON persistence.

Settings are stored at:
    ~/.ticktock/settings.json

Only preferences live here.  Nothing about a running countdown is ever
written to disk.

Usage::

    settings = load_settings()
    settings.task_duration = 50 * 60
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .logger import log
from .timer.state import DEFAULT_TASK_DURATION, DEFAULT_BREAK_DURATION


APP_DIR = Path.home() / ".ticktock"
SETTINGS_PATH = APP_DIR / "settings.json"
LOG_DIR = APP_DIR / "logs"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    task_duration: int = DEFAULT_TASK_DURATION     # seconds
    break_duration: int = DEFAULT_BREAK_DURATION

    # ── display ───────────────────────────────────────────────────────
    bar_width: int = 40

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.task_duration = max(0, int(self.task_duration))
        self.break_duration = max(0, int(self.break_duration))
        self.bar_width = max(1, int(self.bar_width))
        level = str(self.log_level).upper()
        if level not in logging.getLevelNamesMapping():
            log.warning("Unknown log level %r, using INFO", self.log_level)
            level = "INFO"
        self.log_level = level


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        log.warning("Ignoring unreadable settings file %s: %s", SETTINGS_PATH, exc)
        return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
