"""EventLoop - feeds events to the machine one at a time."""
from __future__ import annotations

from typing import Callable

from tickdown.machine import TimerMachine
from tickdown.scheduler import TickScheduler
from tickdown.types import Effect, Event, Exit, Schedule


class EventLoop:
    """Single-threaded driver binding a :class:`TimerMachine` to a scheduler.

    Every event is processed completely before the next one is taken.
    After an :class:`Exit` effect the loop is stopped and further events
    are dropped.
    """

    def __init__(self, machine: TimerMachine, scheduler: TickScheduler | None = None) -> None:
        self._machine = machine
        self._scheduler = scheduler if scheduler is not None else TickScheduler()
        self._stop_hooks: list[Callable[[int], None]] = []
        self._exit_code: int | None = None

    @property
    def machine(self) -> TimerMachine:
        return self._machine

    @property
    def scheduler(self) -> TickScheduler:
        return self._scheduler

    @property
    def stopped(self) -> bool:
        return self._exit_code is not None

    @property
    def exit_code(self) -> int | None:
        return self._exit_code

    def on_stop(self, hook: Callable[[int], None]) -> None:
        """Register ``hook(exit_code)``, called once when the loop stops."""
        self._stop_hooks.append(hook)

    def start(self) -> None:
        self._apply(self._machine.start())

    def dispatch(self, event: Event) -> bool:
        """Handle one event. Returns True if the loop is now stopped."""
        if self.stopped:
            return True
        self._apply(self._machine.handle(event))
        return self.stopped

    def advance(self, ms: int) -> bool:
        """Let *ms* of virtual time pass, handling every tick that falls due."""
        for event in self._scheduler.advance(ms):
            if self.dispatch(event):
                break
        return self.stopped

    def advance_to(self, now_ms: int) -> bool:
        """Catch the scheduler up with a real-time clock reading."""
        delta = now_ms - self._scheduler.now
        if delta > 0:
            return self.advance(delta)
        return self.stopped

    def _apply(self, effects: list[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, Schedule):
                self._scheduler.schedule(effect.event, effect.delay_ms)
            elif isinstance(effect, Exit):
                self._stop(effect.code)
                return
            else:
                raise TypeError(f"Unhandled effect type {type(effect).__qualname__}")

    def _stop(self, code: int) -> None:
        if self.stopped:
            return
        self._exit_code = code
        for hook in self._stop_hooks:
            hook(code)
