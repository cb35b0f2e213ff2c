"""tickdown - interaction core of a terminal multi-timer."""

from tickdown.alarm import AlarmManager, AlarmPlayer, CancelToken
from tickdown.clock import Clock
from tickdown.components import Timer
from tickdown.config import TimerConfig
from tickdown.duration import format_duration, parse_duration
from tickdown.focus import FocusController
from tickdown.loop import EventLoop
from tickdown.machine import AppState, TextField, TimerMachine
from tickdown.registry import TimerRegistry
from tickdown.scheduler import TickScheduler
from tickdown.types import (
    BlinkTick,
    DurationError,
    Exit,
    Focus,
    KeyPress,
    Resize,
    Schedule,
    SecondTick,
)

__all__ = [
    "AlarmManager",
    "AlarmPlayer",
    "AppState",
    "BlinkTick",
    "CancelToken",
    "Clock",
    "DurationError",
    "EventLoop",
    "Exit",
    "Focus",
    "FocusController",
    "KeyPress",
    "Resize",
    "Schedule",
    "SecondTick",
    "TextField",
    "Timer",
    "TimerConfig",
    "TimerMachine",
    "TimerRegistry",
    "TickScheduler",
    "format_duration",
    "parse_duration",
]
