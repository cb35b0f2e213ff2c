"""Tests for TimerRegistry."""
from datetime import timedelta

import pytest

from tickdown.registry import TimerRegistry

SEC = timedelta(seconds=1)


class TestCreate:
    """Timer creation and ID assignment."""

    def test_first_id_is_one(self):
        """The first timer is #1."""
        reg = TimerRegistry()
        assert reg.create(3 * SEC).id == 1

    def test_ids_increase(self):
        """Each new timer gets max(id) + 1."""
        reg = TimerRegistry()
        ids = [reg.create(SEC * n).id for n in (1, 2, 3)]
        assert ids == [1, 2, 3]

    def test_new_timer_fields(self):
        """A new timer is running with remaining == duration."""
        reg = TimerRegistry()
        t = reg.create(3 * SEC)
        assert t.duration == 3 * SEC
        assert t.remaining == t.duration
        assert t.running is True
        assert t.finished is False
        assert t.alarming is False

    def test_insertion_order_kept(self):
        """Iteration follows creation order."""
        reg = TimerRegistry()
        reg.create(30 * SEC)
        reg.create(10 * SEC)
        reg.create(20 * SEC)
        assert [t.duration.seconds for t in reg] == [30, 10, 20]

    @pytest.mark.parametrize("seconds", [0, -5])
    def test_non_positive_rejected(self, seconds):
        """Zero and negative durations create nothing."""
        reg = TimerRegistry()
        with pytest.raises(ValueError):
            reg.create(timedelta(seconds=seconds))
        assert len(reg) == 0


class TestGlobalControls:
    """resume_all / pause_all / clear."""

    def test_pause_all_stops_everything(self):
        """pause_all stops every timer."""
        reg = TimerRegistry()
        reg.create(SEC)
        reg.create(2 * SEC)
        reg.pause_all()
        assert all(not t.running for t in reg)

    def test_resume_all_restarts_unfinished(self):
        """resume_all restarts paused timers."""
        reg = TimerRegistry()
        reg.create(5 * SEC)
        reg.pause_all()
        reg.resume_all()
        assert all(t.running for t in reg)

    def test_finished_never_resumes(self):
        """No number of resume_all calls restarts a finished timer."""
        reg = TimerRegistry()
        done = reg.create(SEC)
        other = reg.create(10 * SEC)
        reg.count_down(SEC)
        assert done.finished
        for _ in range(5):
            reg.resume_all()
        assert done.running is False
        assert other.running is True

    def test_clear_empties_and_resets_ids(self):
        """After clear the next timer is #1 again."""
        reg = TimerRegistry()
        reg.create(SEC)
        reg.create(SEC)
        reg.clear()
        assert len(reg) == 0
        assert reg.next_id() == 1
        assert reg.create(SEC).id == 1


class TestCountDown:
    """Per-second countdown."""

    def test_decrements_running(self):
        """A running timer loses one step."""
        reg = TimerRegistry()
        t = reg.create(3 * SEC)
        reg.count_down(SEC)
        assert t.remaining == 2 * SEC

    def test_paused_untouched(self):
        """A paused timer keeps its remaining time."""
        reg = TimerRegistry()
        t = reg.create(3 * SEC)
        reg.pause_all()
        reg.count_down(SEC)
        assert t.remaining == 3 * SEC

    def test_finishes_at_zero(self):
        """Reaching zero stops, finishes and starts alarming."""
        reg = TimerRegistry()
        t = reg.create(2 * SEC)
        assert reg.count_down(SEC) == []
        assert reg.count_down(SEC) == [t]
        assert t.remaining == timedelta(0)
        assert (t.running, t.finished, t.alarming) == (False, True, True)

    def test_fractional_clamps_to_zero(self):
        """Remaining never goes negative."""
        reg = TimerRegistry()
        t = reg.create(timedelta(milliseconds=1500))
        reg.count_down(SEC)
        reg.count_down(SEC)
        assert t.remaining == timedelta(0)
        assert t.finished

    def test_simultaneous_finish_reported_together(self):
        """Timers finishing on one step come back in display order."""
        reg = TimerRegistry()
        a = reg.create(SEC)
        b = reg.create(5 * SEC)
        c = reg.create(SEC)
        assert reg.count_down(SEC) == [a, c]
        assert not b.finished

    def test_finished_not_reported_again(self):
        """A finished timer is reported only once."""
        reg = TimerRegistry()
        reg.create(SEC)
        reg.count_down(SEC)
        assert reg.count_down(SEC) == []

    def test_alarming_lists_only_alarming(self):
        """alarming() skips timers that are still counting."""
        reg = TimerRegistry()
        a = reg.create(SEC)
        reg.create(5 * SEC)
        reg.count_down(SEC)
        assert reg.alarming() == [a]
