"""tickdown-term - Textual front end for the tickdown timer core."""

from tickdown_term.app import TimerApp, TimerView
from tickdown_term.render import render_view
from tickdown_term.sound import (
    BellPlayer,
    CommandPlayer,
    PygamePlayer,
    make_player,
    terminal_bell,
)
from tickdown_term.textinput import LineInput

__all__ = [
    "BellPlayer",
    "CommandPlayer",
    "LineInput",
    "PygamePlayer",
    "TimerApp",
    "TimerView",
    "make_player",
    "render_view",
    "terminal_bell",
]
