"""Tests for Clock and TickScheduler."""
import pytest

from tickdown.clock import Clock
from tickdown.scheduler import BLINK_MS, SECOND_MS, TickScheduler
from tickdown.types import BlinkTick, KeyPress, SecondTick


class TestClock:
    """The virtual millisecond clock."""

    def test_starts_at_zero(self):
        """A new clock reads zero."""
        assert Clock().now == 0

    def test_advance_returns_new_time(self):
        """advance() adds the step and returns the new time."""
        clock = Clock()
        assert clock.advance(250) == 250
        assert clock.advance(750) == 1000
        assert clock.now == 1000

    def test_advance_backwards_rejected(self):
        """The clock never moves backwards."""
        with pytest.raises(ValueError):
            Clock().advance(-1)

    def test_negative_start_rejected(self):
        """A clock cannot start before zero."""
        with pytest.raises(ValueError):
            Clock(now=-5)

    def test_reset(self):
        """reset() returns the clock to zero."""
        clock = Clock()
        clock.advance(500)
        clock.reset()
        assert clock.now == 0


class TestSchedule:
    """Queueing events."""

    def test_intervals(self):
        """Second and blink ticks run at 1000ms and 500ms."""
        assert SECOND_MS == 1000
        assert BLINK_MS == 500

    def test_schedule_returns_due_time(self):
        """schedule() reports when the event will fire."""
        sched = TickScheduler()
        assert sched.schedule(SecondTick(), 1000) == 1000
        assert sched.pending() == 1
        assert sched.next_due() == 1000

    def test_due_time_relative_to_now(self):
        """Delays count from the current clock time."""
        sched = TickScheduler(Clock(now=2000))
        assert sched.schedule(BlinkTick(), 500) == 2500

    def test_negative_delay_rejected(self):
        """Events cannot be scheduled in the past."""
        with pytest.raises(ValueError):
            TickScheduler().schedule(SecondTick(), -1)

    def test_empty_next_due(self):
        """An empty queue has no next due time."""
        assert TickScheduler().next_due() is None

    def test_clear(self):
        """clear() drops every pending event."""
        sched = TickScheduler()
        sched.schedule(SecondTick(), 10)
        sched.clear()
        assert sched.pending() == 0


class TestAdvance:
    """Delivering due events."""

    def test_nothing_before_due(self):
        """Advancing short of the due time yields nothing."""
        sched = TickScheduler()
        sched.schedule(SecondTick(), 1000)
        assert list(sched.advance(999)) == []
        assert sched.now == 999
        assert sched.pending() == 1

    def test_due_order(self):
        """Events come out ordered by due time."""
        sched = TickScheduler()
        sched.schedule(SecondTick(), 1000)
        sched.schedule(BlinkTick(), 500)
        assert list(sched.advance(1000)) == [BlinkTick(), SecondTick()]

    def test_ties_keep_schedule_order(self):
        """Events due together come out in scheduling order."""
        sched = TickScheduler()
        sched.schedule(KeyPress("a"), 100)
        sched.schedule(KeyPress("b"), 100)
        sched.schedule(KeyPress("c"), 100)
        assert [e.key for e in sched.advance(100)] == ["a", "b", "c"]

    def test_clock_at_due_time_while_handling(self):
        """The clock reads each event's due time as it is yielded."""
        sched = TickScheduler()
        sched.schedule(BlinkTick(), 500)
        sched.schedule(SecondTick(), 1000)
        seen = [sched.now for _ in sched.advance(1200)]
        assert seen == [500, 1000]
        assert sched.now == 1200

    def test_rescheduling_inside_window(self):
        """A handler that reschedules itself keeps firing without drift."""
        sched = TickScheduler()
        sched.schedule(SecondTick(), SECOND_MS)
        fired = []
        for event in sched.advance(3500):
            fired.append(sched.now)
            sched.schedule(event, SECOND_MS)
        assert fired == [1000, 2000, 3000]
        assert sched.next_due() == 4000

    def test_unrescheduled_source_stops(self):
        """Nothing repeats on its own."""
        sched = TickScheduler()
        sched.schedule(SecondTick(), SECOND_MS)
        assert len(list(sched.advance(5000))) == 1
        assert sched.pending() == 0

    def test_negative_advance_rejected(self):
        """advance() refuses a negative step."""
        with pytest.raises(ValueError):
            list(TickScheduler().advance(-1))
