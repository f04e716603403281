"""
Unit tests for ProcessTracker.

Run with: pytest tests/test_process_tracker.py -v
"""

import asyncio

import pytest
from discoverzim.domain.services.process_tracker import ProcessTracker

STEPS = ["Validate", "Create", "Pay", "Email"]


class ManualScheduler:
    """Captures scheduled callbacks so tests decide when time passes."""

    def __init__(self):
        self.scheduled = []

    def __call__(self, delay, callback):
        handle = ManualHandle(delay, callback)
        self.scheduled.append(handle)
        return handle

    def fire_all(self):
        for handle in self.scheduled:
            if not handle.cancelled:
                handle.callback()


class ManualHandle:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


@pytest.fixture()
def scheduler():
    return ManualScheduler()


@pytest.fixture()
def tracker(scheduler):
    return ProcessTracker(complete_delay=1.0, scheduler=scheduler)


class TestLifecycle:
    def test_start_opens_at_first_step(self, tracker):
        tracker.start("Booking", STEPS, "Two nights")

        snapshot = tracker.snapshot()
        assert snapshot.is_open
        assert snapshot.title == "Booking"
        assert snapshot.description == "Two nights"
        assert snapshot.progress == 0
        assert snapshot.current_step == 0
        assert snapshot.current_label == "Validate"

    def test_advance_derives_progress_from_step(self, tracker):
        tracker.start("Booking", STEPS)
        tracker.advance(1)

        assert tracker.current_step == 1
        assert tracker.progress == 50

    def test_advance_uses_explicit_progress(self, tracker):
        tracker.start("Booking", STEPS)
        tracker.advance(2, 42)

        assert tracker.current_step == 2
        assert tracker.progress == 42

    def test_advance_may_move_backwards(self, tracker):
        tracker.start("Booking", STEPS)
        tracker.advance(3)
        tracker.advance(0)

        assert tracker.progress == 25

    def test_out_of_range_values_are_clamped(self, tracker):
        tracker.start("Booking", STEPS)
        tracker.advance(10, 250)
        assert tracker.current_step == 3
        assert tracker.progress == 100

        tracker.advance(-1, -5)
        assert tracker.current_step == 0
        assert tracker.progress == 0

    def test_complete_fills_bar_and_hides_after_delay(self, tracker, scheduler):
        tracker.start("Booking", STEPS)
        tracker.complete()

        assert tracker.progress == 100
        assert tracker.current_step == 3
        assert tracker.is_open
        assert scheduler.scheduled[0].delay == 1.0

        scheduler.fire_all()
        assert not tracker.is_open

    def test_close_hides_but_keeps_position(self, tracker):
        tracker.start("Booking", STEPS)
        tracker.advance(1)
        tracker.close()

        assert not tracker.is_open
        assert tracker.progress == 50
        assert tracker.current_step == 1

    def test_restart_cancels_pending_hide(self, tracker, scheduler):
        tracker.start("First", STEPS)
        tracker.complete()
        tracker.start("Second", STEPS)

        scheduler.fire_all()
        assert tracker.is_open
        assert tracker.title == "Second"
        assert tracker.progress == 0

    def test_no_steps(self, tracker):
        tracker.start("Empty", [])
        tracker.advance(3)

        assert tracker.current_step == 0
        assert tracker.progress == 0
        assert tracker.snapshot().current_label is None


class TestDefaultScheduler:
    def test_hides_on_running_loop(self):
        async def scenario():
            tracker = ProcessTracker(complete_delay=0.01)
            tracker.start("Booking", STEPS)
            tracker.complete()
            assert tracker.is_open
            await asyncio.sleep(0.05)
            return tracker.is_open

        assert asyncio.run(scenario()) is False
