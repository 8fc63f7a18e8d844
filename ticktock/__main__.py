"""Allow running TickTock as a module: python -m ticktock."""

from __future__ import annotations

import argparse
import logging
import sys

from .errors import StartupError
from .logger import configure_logging, log
from .settings import LOG_DIR, Settings, load_settings
from .timer.engine import TimerEngine
from .ui.styles import Theme
from .ui.app import TickTockApp, check_terminal, install_excepthook


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ticktock",
        description="Terminal countdown timer. Press s to start/stop, q to quit.",
    )
    parser.add_argument(
        "--break",
        dest="use_break",
        action="store_true",
        help="time a break instead of a task",
    )
    parser.add_argument(
        "--seconds",
        type=int,
        default=None,
        metavar="N",
        help="override the duration for this run only",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="write DEBUG-level entries to the log file",
    )
    return parser.parse_args(argv)


def resolve_duration(args: argparse.Namespace, settings: Settings) -> int:
    """Pick the run length: explicit override, else break or task duration."""
    if args.seconds is not None:
        return max(0, args.seconds)
    if args.use_break:
        return settings.break_duration
    return settings.task_duration


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = load_settings()
    level = logging.DEBUG if args.debug else settings.log_level
    configure_logging(LOG_DIR, level)

    duration = resolve_duration(args, settings)
    log.info("Starting with a %ds duration", duration)

    engine = TimerEngine(duration=duration)
    app = TickTockApp(engine, view_theme=Theme(bar_width=settings.bar_width))
    previous_hook = install_excepthook(app)
    try:
        check_terminal()
        app.run()
    except (StartupError, OSError) as exc:
        log.error("Startup failed: %s", exc)
        print(exc, file=sys.stderr)
        sys.exit(1)
    finally:
        sys.excepthook = previous_hook
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
