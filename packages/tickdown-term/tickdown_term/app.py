"""Terminal front end built on Textual.

The app owns no timer logic: it turns terminal input and wall-clock
time into events for the :class:`~tickdown.EventLoop` and repaints the
view after each one.
"""
from __future__ import annotations

import time
from concurrent.futures import Executor
from typing import Callable

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widget import Widget

from tickdown import (
    AlarmManager,
    AlarmPlayer,
    AppState,
    EventLoop,
    KeyPress,
    Resize,
    TimerConfig,
    TimerMachine,
)
from tickdown_term.render import render_view
from tickdown_term.sound import make_player, terminal_bell
from tickdown_term.textinput import LineInput

# Keys Textual would otherwise claim for its own focus handling or quit.
ROUTED_KEYS = ("tab", "shift+tab", "left", "right", "up", "down", "enter", "ctrl+c", "q")


class TimerView(Widget):
    """Full-screen widget that paints the current state."""

    DEFAULT_CSS = """
    TimerView {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(self, state: AppState, text_input: LineInput) -> None:
        super().__init__(id="view")
        self._state = state
        self._text_input = text_input

    def render(self) -> Text:
        return render_view(self._state, self._text_input.render())


class TimerApp(App[int]):
    ENABLE_COMMAND_PALETTE = False
    BINDINGS = [
        Binding(key, f"route_key({key!r})", show=False, priority=True)
        for key in ROUTED_KEYS
    ]

    def __init__(
        self,
        config: TimerConfig | None = None,
        player: AlarmPlayer | None = None,
        bell: Callable[[], None] = terminal_bell,
        executor: Executor | None = None,
    ) -> None:
        super().__init__()
        self.timer_config = config if config is not None else TimerConfig()
        self.text_input = LineInput(
            placeholder=self.timer_config.placeholder,
            char_limit=self.timer_config.char_limit,
            width=self.timer_config.input_width,
        )
        alarms = AlarmManager(
            player if player is not None else make_player(self.timer_config),
            bell,
            executor,
        )
        self.timer_state = AppState(text_input=self.text_input)
        self.timer_loop = EventLoop(TimerMachine(self.timer_state, alarms))
        self.timer_loop.on_stop(lambda code: alarms.shutdown())
        self._view = TimerView(self.timer_state, self.text_input)
        self._epoch = 0.0

    def compose(self) -> ComposeResult:
        yield self._view

    def on_mount(self) -> None:
        self._epoch = time.monotonic()
        self.timer_loop.dispatch(Resize(self.size.width, self.size.height))
        self.timer_loop.start()
        self.set_interval(self.timer_config.poll_interval, self._poll)

    def on_resize(self, event: events.Resize) -> None:
        self.timer_loop.dispatch(Resize(event.size.width, event.size.height))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self._settle(self.timer_loop.dispatch(KeyPress(event.key, event.character)))

    def action_route_key(self, key: str) -> None:
        self._settle(self.timer_loop.dispatch(KeyPress(key)))

    def _poll(self) -> None:
        if self.timer_loop.stopped:
            return
        elapsed_ms = int((time.monotonic() - self._epoch) * 1000)
        self._settle(self.timer_loop.advance_to(elapsed_ms))

    def _settle(self, stopped: bool) -> None:
        if stopped:
            code = self.timer_loop.exit_code
            self.exit(code, return_code=code)
        else:
            self._view.refresh()
