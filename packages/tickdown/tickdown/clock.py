"""Clock - virtual time in whole milliseconds."""


class Clock:
    def __init__(self, now: int = 0) -> None:
        if now < 0:
            raise ValueError("now must be >= 0")
        self._now = now

    @property
    def now(self) -> int:
        return self._now

    def advance(self, ms: int) -> int:
        if ms < 0:
            raise ValueError("cannot advance the clock backwards")
        self._now += ms
        return self._now

    def reset(self, now: int = 0) -> None:
        self._now = now
