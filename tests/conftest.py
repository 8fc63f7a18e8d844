"""Shared pytest fixtures for TickTock tests."""

import pytest

from ticktock.logger import log, LOGGER_NAME
from ticktock.timer.engine import TimerEngine
from ticktock.timer.state import TimerState


SHORT_DURATION = 5


@pytest.fixture(autouse=True)
def clean_log_handlers():
    """Drop any file handler a test attached to the shared logger."""
    yield
    for handler in list(log.handlers):
        if handler.get_name() == f"{LOGGER_NAME}:file":
            log.removeHandler(handler)
            handler.close()


@pytest.fixture
def state():
    """Plain state machine with a five-second duration."""
    return TimerState(SHORT_DURATION)


@pytest.fixture
def engine():
    """Fresh TimerEngine with a five-second duration."""
    return TimerEngine(parent=None, duration=SHORT_DURATION)


@pytest.fixture
def engine_default():
    """Fresh TimerEngine with the default 25-minute duration."""
    return TimerEngine(parent=None)
