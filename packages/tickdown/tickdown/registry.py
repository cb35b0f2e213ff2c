"""TimerRegistry - ordered storage for the active timers."""
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Iterator

from tickdown.components import Timer

logger = logging.getLogger(__name__)

_ZERO = timedelta(0)


class TimerRegistry:
    """Owns every timer in display (insertion) order.

    Start and stop are global: there is no per-timer pause. Timers are
    only ever removed all at once by :meth:`clear`.
    """

    def __init__(self) -> None:
        self._timers: list[Timer] = []

    def __iter__(self) -> Iterator[Timer]:
        return iter(self._timers)

    def __len__(self) -> int:
        return len(self._timers)

    def next_id(self) -> int:
        """Return ``max(id) + 1``, or 1 when the registry is empty."""
        if not self._timers:
            return 1
        return max(t.id for t in self._timers) + 1

    def create(self, duration: timedelta) -> Timer:
        """Append a new running timer for *duration*."""
        if duration <= _ZERO:
            raise ValueError(f"duration must be positive, got {duration!r}")
        timer = Timer(id=self.next_id(), duration=duration, remaining=duration)
        self._timers.append(timer)
        logger.debug("created timer #%d for %s", timer.id, duration)
        return timer

    def resume_all(self) -> None:
        """Mark every unfinished timer running. Finished timers never resume."""
        for t in self._timers:
            if not t.finished:
                t.running = True

    def pause_all(self) -> None:
        for t in self._timers:
            t.running = False

    def clear(self) -> None:
        self._timers = []

    def count_down(self, step: timedelta) -> list[Timer]:
        """Subtract *step* from every running timer.

        Timers reaching zero stop, finish and start alarming. Returns the
        timers that finished during this call, in display order.
        """
        finished: list[Timer] = []
        for t in self._timers:
            if not t.running or t.remaining <= _ZERO:
                continue
            t.remaining -= step
            if t.remaining <= _ZERO:
                t.remaining = _ZERO
                t.running = False
                t.finished = True
                t.alarming = True
                finished.append(t)
                logger.info("timer #%d finished", t.id)
        return finished

    def alarming(self) -> list[Timer]:
        return [t for t in self._timers if t.alarming]
