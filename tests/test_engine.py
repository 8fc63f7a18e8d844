"""Tests for the signal-emitting timer engine.

Covers: tick source arming/disarming, signal emission on transitions,
completion followed by the quit request, the quit command, and the
ordering guarantee that a stop takes effect before the next tick.
"""

import pytest

from ticktock.timer.engine import TimerEngine, TICK_INTERVAL
from ticktock.timer.state import Phase, TimerSnapshot, DEFAULT_TASK_DURATION

from helpers import SignalCollector, run_ticks


# ═══════════════════════════════════════════════════════════════════════════
#  TICK SOURCE
# ═══════════════════════════════════════════════════════════════════════════


class TestTickSource:

    def test_interval_is_one_second(self):
        assert TICK_INTERVAL == 1.0

    def test_not_ticking_until_started(self, engine):
        assert engine.is_ticking is False

    def test_start_arms_timer(self, engine):
        engine.toggle()
        assert engine.is_ticking is True

    def test_stop_disarms_timer(self, engine):
        engine.toggle()
        engine.toggle()
        assert engine.is_ticking is False

    def test_quit_disarms_timer(self, engine):
        engine.toggle()
        engine.quit()
        assert engine.is_ticking is False

    def test_ticking_changed_follows_commands(self, engine):
        c = SignalCollector()
        engine.ticking_changed.connect(c)

        engine.toggle()
        engine.toggle()
        engine.toggle()
        engine.quit()
        assert c.items == [True, False, True, False]

    def test_quit_while_idle_does_not_announce_stop(self, engine):
        c = SignalCollector()
        engine.ticking_changed.connect(c)
        engine.quit()
        assert len(c) == 0


# ═══════════════════════════════════════════════════════════════════════════
#  STATE PASS-THROUGH
# ═══════════════════════════════════════════════════════════════════════════


class TestProperties:

    def test_default_duration(self, engine_default):
        assert engine_default.duration == DEFAULT_TASK_DURATION

    def test_initial_values(self, engine):
        assert engine.phase == Phase.IDLE
        assert engine.elapsed == 0
        assert engine.total == 0
        assert engine.is_running is False
        assert engine.percent_complete == 0.0

    def test_start_then_ticks(self, engine):
        engine.toggle()
        run_ticks(engine, 2)
        assert engine.elapsed == 2
        assert engine.total == 5
        assert engine.percent_complete == pytest.approx(0.4)

    def test_stop_discards_progress(self, engine):
        engine.toggle()
        run_ticks(engine, 2)
        engine.toggle()
        assert engine.percent_complete == 0.0
        engine.toggle()
        engine.tick()
        assert engine.elapsed == 1

    def test_tick_after_stop_is_ignored(self, engine):
        engine.toggle()
        engine.tick()
        engine.toggle()
        engine.tick()  # a stale timeout must not count
        assert engine.elapsed == 1
        assert engine.is_running is False


# ═══════════════════════════════════════════════════════════════════════════
#  SIGNALS
# ═══════════════════════════════════════════════════════════════════════════


class TestSignals:

    def test_ticked_emits_elapsed(self, engine):
        c = SignalCollector()
        engine.ticked.connect(c)

        engine.toggle()
        run_ticks(engine, 3)
        assert c.items == [1, 2, 3]

    def test_ticked_not_emitted_on_restart(self, engine):
        c = SignalCollector()
        engine.toggle()
        run_ticks(engine, 2)
        engine.ticked.connect(c)
        engine.toggle()
        engine.toggle()
        assert len(c) == 0

    def test_state_changed_fires_on_transitions(self, engine):
        c = SignalCollector()
        engine.state_changed.connect(c)

        engine.toggle()
        assert c.last == Phase.RUNNING
        engine.toggle()
        assert c.last == Phase.IDLE
        engine.toggle()
        run_ticks(engine, 5)
        assert c.last == Phase.COMPLETE
        assert c.items == [Phase.RUNNING, Phase.IDLE, Phase.RUNNING, Phase.COMPLETE]

    def test_updated_carries_snapshot(self, engine):
        c = SignalCollector()
        engine.updated.connect(c)

        engine.toggle()
        engine.tick()
        assert isinstance(c.last, TimerSnapshot)
        assert c.last.elapsed_seconds == 1
        assert c.last.running is True

    def test_updated_silent_for_idle_tick(self, engine):
        c = SignalCollector()
        engine.updated.connect(c)
        engine.tick()
        assert len(c) == 0


# ═══════════════════════════════════════════════════════════════════════════
#  COMPLETION / QUIT
# ═══════════════════════════════════════════════════════════════════════════


class TestCompletionAndQuit:

    def test_completion_does_not_quit_immediately(self, engine):
        c = SignalCollector()
        engine.quit_requested.connect(c)

        engine.toggle()
        run_ticks(engine, 5)
        assert engine.phase == Phase.COMPLETE
        assert len(c) == 0

    def test_tick_after_completion_requests_quit(self, engine):
        c = SignalCollector()
        engine.quit_requested.connect(c)

        engine.toggle()
        run_ticks(engine, 6)
        assert len(c) == 1
        assert engine.quitting is True
        assert engine.elapsed == 5
        assert engine.percent_complete == 1.0

    def test_quit_command_requests_quit(self, engine):
        c = SignalCollector()
        engine.quit_requested.connect(c)
        engine.quit()
        assert len(c) == 1

    def test_events_ignored_once_quitting(self, engine):
        c = SignalCollector()
        engine.quit_requested.connect(c)
        engine.quit()
        engine.toggle()
        engine.quit()
        assert engine.is_running is False
        assert len(c) == 1
