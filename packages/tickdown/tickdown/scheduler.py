"""TickScheduler - delayed delivery of tick events on a virtual clock."""
from __future__ import annotations

import heapq
from typing import Generator

from tickdown.clock import Clock
from tickdown.types import Event

SECOND_MS = 1000
BLINK_MS = 500


class TickScheduler:
    """Queue of events keyed by due time.

    Periodic sources are built by rescheduling from inside the handler
    of each delivered event. Nothing repeats on its own: a source that
    is not rescheduled stops.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock if clock is not None else Clock()
        self._queue: list[tuple[int, int, Event]] = []
        self._seq = 0

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def now(self) -> int:
        return self._clock.now

    def schedule(self, event: Event, delay_ms: int) -> int:
        """Queue *event* at ``now + delay_ms``. Returns the due time."""
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        due = self._clock.now + delay_ms
        heapq.heappush(self._queue, (due, self._seq, event))
        self._seq += 1
        return due

    def pending(self) -> int:
        return len(self._queue)

    def next_due(self) -> int | None:
        return self._queue[0][0] if self._queue else None

    def advance(self, ms: int) -> Generator[Event, None, None]:
        """Move the clock forward *ms*, yielding each event as it falls due.

        The clock sits at an event's due time while the caller handles
        it, so anything scheduled from that handler is anchored there.
        Equal due times come out in scheduling order.
        """
        if ms < 0:
            raise ValueError("cannot advance the clock backwards")
        target = self._clock.now + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, event = heapq.heappop(self._queue)
            if due > self._clock.now:
                self._clock.advance(due - self._clock.now)
            yield event
        if target > self._clock.now:
            self._clock.advance(target - self._clock.now)

    def clear(self) -> None:
        self._queue.clear()
