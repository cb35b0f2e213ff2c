"""TimerMachine - the interaction state machine.

Each event is handled to completion against the mutable
:class:`AppState` and answered with a list of effects for the event
loop to carry out.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Protocol

from tickdown.alarm import AlarmManager
from tickdown.duration import parse_duration
from tickdown.focus import NAVIGATION_KEYS, FocusController
from tickdown.registry import TimerRegistry
from tickdown.scheduler import BLINK_MS, SECOND_MS
from tickdown.types import (
    BlinkTick,
    DurationError,
    Effect,
    Event,
    Exit,
    Focus,
    KeyPress,
    Resize,
    Schedule,
    SecondTick,
)

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"ctrl+c", "q"})

_ONE_SECOND = timedelta(seconds=1)


class TextField(Protocol):
    """The text-input widget, seen from the core."""

    @property
    def value(self) -> str:
        ...

    def set_value(self, value: str) -> None:
        ...

    def focus(self) -> None:
        ...

    def blur(self) -> None:
        ...

    def handle_key(self, key: str, character: str | None) -> None:
        ...


@dataclass
class AppState:
    """Everything the renderer needs. Lives as long as the process."""

    text_input: TextField
    registry: TimerRegistry = field(default_factory=TimerRegistry)
    focus: FocusController = field(default_factory=FocusController)
    blink: bool = False
    width: int = 0
    height: int = 0


class TimerMachine:
    def __init__(self, state: AppState, alarms: AlarmManager) -> None:
        self._state = state
        self._alarms = alarms

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def alarms(self) -> AlarmManager:
        return self._alarms

    def start(self) -> list[Effect]:
        """Effects that bring both tick sources to life."""
        self._state.text_input.focus()
        return [
            Schedule(SecondTick(), SECOND_MS),
            Schedule(BlinkTick(), BLINK_MS),
        ]

    def handle(self, event: Event) -> list[Effect]:
        if isinstance(event, KeyPress):
            return self._on_key(event)
        if isinstance(event, SecondTick):
            return self._on_second()
        if isinstance(event, BlinkTick):
            return self._on_blink()
        if isinstance(event, Resize):
            self._state.width = event.width
            self._state.height = event.height
            return []
        raise TypeError(f"Unhandled event type {type(event).__qualname__}")

    # -- Ticks --

    def _on_second(self) -> list[Effect]:
        finished = self._state.registry.count_down(_ONE_SECOND)
        if finished:
            # One sound per tick, however many timers hit zero together.
            self._alarms.start()
        return [Schedule(SecondTick(), SECOND_MS)]

    def _on_blink(self) -> list[Effect]:
        self._state.blink = not self._state.blink
        return [Schedule(BlinkTick(), BLINK_MS)]

    # -- Keys --

    def _on_key(self, event: KeyPress) -> list[Effect]:
        state = self._state
        # A key press that dismisses an alarm does nothing else.
        if self._alarms.dismiss(state.registry):
            return []

        key = event.key
        if key in QUIT_KEYS:
            return self._quit()
        if key in NAVIGATION_KEYS:
            if state.focus.navigate(key) == Focus.INPUT:
                state.text_input.focus()
            else:
                state.text_input.blur()
            return []
        if key == "enter":
            return self._select()
        if state.focus.on_input:
            state.text_input.handle_key(key, event.character)
        return []

    def _select(self) -> list[Effect]:
        state = self._state
        focus = state.focus.index
        if focus in (Focus.INPUT, Focus.ADD):
            self._add_timer()
        elif focus == Focus.START:
            state.registry.resume_all()
        elif focus == Focus.STOP:
            state.registry.pause_all()
        elif focus == Focus.RESET:
            self._alarms.cancel()
            state.registry.clear()
        elif focus == Focus.QUIT:
            return self._quit()
        return []

    def _add_timer(self) -> None:
        text = self._state.text_input.value
        try:
            duration = parse_duration(text)
        except DurationError as exc:
            logger.debug("rejected duration input: %s", exc)
            return
        self._state.registry.create(duration)
        self._state.text_input.set_value("")

    def _quit(self) -> list[Effect]:
        self._alarms.cancel()
        return [Exit(0)]
