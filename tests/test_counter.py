"""Tests for the active counter state machine."""

import pytest
from conftest import T0, StubClock

from termtrack.model.counter import CounterState
from termtrack.repository.counter import COUNTER_REPO
from termtrack.repository.entry import ENTRY_REPO
from termtrack.repository.slot import StorageWriteError
from termtrack.service.counter import (
    CounterAlreadyActiveError,
    CounterAlreadyPausedError,
    CounterAlreadyRunningError,
    NoActiveCounterError,
    apply_pause,
    apply_resume,
    calculate_elapsed_ms,
    get_counter_state,
    get_counter_status,
    pause_counter,
    resume_counter,
    start_counter,
    stop_counter,
)
from termtrack.template.counter import get_counter_template
from termtrack.validate import EntryValidationError


class TestTransitions:
    def test_start_creates_running_counter(self):
        counter = start_counter("proj", "task", clock=StubClock(T0))

        stored = COUNTER_REPO.get_counter()
        assert stored == counter
        assert get_counter_state(stored) == CounterState.RUNNING
        assert stored["start_time"] == T0
        assert stored["last_start_time"] == T0
        assert stored["accumulated_ms"] == 0

    def test_pause_accumulates_running_segment(self):
        start_counter("proj", "task", clock=StubClock(T0))
        counter = pause_counter(clock=StubClock(T0.add(minutes=10)))

        assert counter["paused"] is True
        assert counter["last_start_time"] is None
        assert counter["accumulated_ms"] == 10 * 60_000
        assert get_counter_state(COUNTER_REPO.get_counter()) == CounterState.PAUSED

    def test_resume_restarts_segment(self):
        start_counter("proj", "task", clock=StubClock(T0))
        pause_counter(clock=StubClock(T0.add(minutes=10)))
        counter = resume_counter(clock=StubClock(T0.add(minutes=30)))

        assert counter["paused"] is False
        assert counter["last_start_time"] == T0.add(minutes=30)
        assert counter["accumulated_ms"] == 10 * 60_000

    def test_stop_appends_entry_and_removes_counter(self):
        start_counter("proj", "task", clock=StubClock(T0))
        pause_counter(clock=StubClock(T0.add(minutes=10)))
        resume_counter(clock=StubClock(T0.add(minutes=30)))
        stopped = stop_counter(clock=StubClock(T0.add(minutes=50)))

        assert stopped["duration_minutes"] == 30
        assert COUNTER_REPO.get_counter() is None
        entries = ENTRY_REPO.list_entries()
        assert len(entries) == 1
        assert entries[0]["project"] == "proj"
        assert entries[0]["description"] == "task"
        assert entries[0]["duration_minutes"] == 30
        assert entries[0]["date"] == T0.add(minutes=50).in_tz("local").to_date_string()

    def test_stop_reports_entry_recorded_when_counter_removal_fails(
        self, store, monkeypatch
    ):
        start_counter("proj", "task", clock=StubClock(T0))

        def failing_remove(slot):
            raise StorageWriteError("disk full")

        monkeypatch.setattr(store, "remove", failing_remove)
        with pytest.raises(StorageWriteError, match="entry was recorded"):
            stop_counter(clock=StubClock(T0.add(minutes=5)))

        assert len(ENTRY_REPO.list_entries()) == 1
        assert COUNTER_REPO.get_counter() is not None

    def test_stop_while_paused_ignores_time_since_pause(self):
        start_counter("proj", "task", clock=StubClock(T0))
        pause_counter(clock=StubClock(T0.add(minutes=20)))
        stopped = stop_counter(clock=StubClock(T0.add(hours=5)))
        assert stopped["duration_minutes"] == 20

    def test_status_is_read_only(self):
        start_counter("proj", "task", clock=StubClock(T0))
        before = COUNTER_REPO.get_counter()

        status = get_counter_status(clock=StubClock(T0.add(seconds=150)))

        assert status["state"] == CounterState.RUNNING
        assert status["elapsed_ms"] == 150_000
        assert status["elapsed_minutes"] == 3
        assert COUNTER_REPO.get_counter() == before


class TestInvalidTransitions:
    def test_start_while_active_keeps_original(self):
        original = start_counter("proj", "task", clock=StubClock(T0))

        with pytest.raises(CounterAlreadyActiveError) as excinfo:
            start_counter("other", "other task", clock=StubClock(T0.add(hours=1)))

        assert excinfo.value.counter["project"] == "proj"
        assert COUNTER_REPO.get_counter() == original

    def test_start_while_paused_conflicts(self):
        start_counter("proj", "task", clock=StubClock(T0))
        pause_counter(clock=StubClock(T0.add(minutes=1)))
        with pytest.raises(CounterAlreadyActiveError):
            start_counter("other", "other task")

    def test_pause_twice(self):
        start_counter("proj", "task", clock=StubClock(T0))
        paused = pause_counter(clock=StubClock(T0.add(minutes=1)))
        with pytest.raises(CounterAlreadyPausedError):
            pause_counter(clock=StubClock(T0.add(minutes=2)))
        assert COUNTER_REPO.get_counter() == paused

    def test_resume_while_running(self):
        counter = start_counter("proj", "task", clock=StubClock(T0))
        with pytest.raises(CounterAlreadyRunningError):
            resume_counter(clock=StubClock(T0.add(minutes=2)))
        assert COUNTER_REPO.get_counter() == counter

    @pytest.mark.parametrize(
        "operation",
        [pause_counter, resume_counter, stop_counter, get_counter_status],
    )
    def test_operations_without_counter(self, operation):
        with pytest.raises(NoActiveCounterError):
            operation()
        assert ENTRY_REPO.list_entries() == []

    def test_start_requires_description(self):
        with pytest.raises(EntryValidationError):
            start_counter("proj", "  ")
        assert COUNTER_REPO.get_counter() is None


class TestElapsedTime:
    def test_immediate_stop_rounds_to_zero(self):
        clock = StubClock(T0, T0.add(microseconds=1_500_000))
        start_counter("proj", "task", clock=clock)
        stopped = stop_counter(clock=clock)

        assert stopped["elapsed_ms"] == 1500
        assert stopped["entry"]["duration_minutes"] == 0
        assert ENTRY_REPO.list_entries()[0]["duration_minutes"] == 0

    def test_half_minute_rounds_up(self):
        start_counter("proj", "task", clock=StubClock(T0))
        stopped = stop_counter(clock=StubClock(T0.add(seconds=90)))
        assert stopped["duration_minutes"] == 2

    def test_rounding_applied_once_at_stop(self):
        # Three 40 second segments: 2 minutes total, although each rounds to 1
        start_counter("proj", "task", clock=StubClock(T0))
        instant = T0
        for _ in range(2):
            instant = instant.add(seconds=40)
            pause_counter(clock=StubClock(instant))
            instant = instant.add(minutes=5)
            resume_counter(clock=StubClock(instant))
        stopped = stop_counter(clock=StubClock(instant.add(seconds=40)))

        assert stopped["elapsed_ms"] == 120_000
        assert stopped["duration_minutes"] == 2

    def test_elapsed_never_decreases_across_cycles(self):
        counter = get_counter_template(T0)
        instant = T0
        last_elapsed = 0
        for step_seconds in (5, 0, 17, 3600, 1):
            instant = instant.add(seconds=step_seconds)
            counter = apply_pause(counter, instant)
            assert calculate_elapsed_ms(counter, instant) >= last_elapsed
            last_elapsed = calculate_elapsed_ms(counter, instant)

            instant = instant.add(seconds=step_seconds * 2)
            assert calculate_elapsed_ms(counter, instant) == last_elapsed
            counter = apply_resume(counter, instant)

    def test_clock_moving_backwards_counts_as_zero(self):
        counter = get_counter_template(T0)
        assert calculate_elapsed_ms(counter, T0.subtract(minutes=5)) == 0

    def test_counter_survives_reload(self):
        start_counter("proj", "task", clock=StubClock(T0.add(microseconds=123_000)))
        pause_counter(clock=StubClock(T0.add(seconds=61)))

        reloaded = COUNTER_REPO.get_counter()
        assert reloaded is not None
        assert reloaded["start_time"] == T0.add(microseconds=123_000)
        assert reloaded["accumulated_ms"] == 60_877
