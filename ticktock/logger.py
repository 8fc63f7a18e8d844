"""Logging setup for TickTock.

The terminal belongs to the UI, so log output goes to a rotating file
only::

    ~/.ticktock/logs/ticktock.log

Modules share the package logger::

    from ticktock.logger import log
    log.debug("...")

Nothing is written until ``configure_logging`` attaches a handler.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "ticktock"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

log = logging.getLogger(LOGGER_NAME)
log.addHandler(logging.NullHandler())


def configure_logging(
    log_dir: Path,
    level: int | str = logging.INFO,
    *,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Attach the rotating file handler to the ``ticktock`` logger.

    Safe to call more than once: the handler is looked up by name and
    only its level is updated on repeat calls.
    """
    log.propagate = False
    log.setLevel(level)

    handler_name = f"{LOGGER_NAME}:file"
    for handler in log.handlers:
        if handler.get_name() == handler_name:
            handler.setLevel(level)
            return log

    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=log_dir / f"{LOGGER_NAME}.log",
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    handler.set_name(handler_name)
    log.addHandler(handler)
    return log
