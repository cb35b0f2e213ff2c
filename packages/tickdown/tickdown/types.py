"""Shared enums, event and effect variants for the countdown core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class Focus(IntEnum):
    """Focusable controls in tab order."""

    INPUT = 0
    ADD = 1
    START = 2
    STOP = 3
    RESET = 4
    QUIT = 5


# -- Events --


@dataclass(frozen=True, slots=True)
class KeyPress:
    key: str
    character: str | None = None


@dataclass(frozen=True, slots=True)
class SecondTick:
    pass


@dataclass(frozen=True, slots=True)
class BlinkTick:
    pass


@dataclass(frozen=True, slots=True)
class Resize:
    width: int
    height: int


Event = Union[KeyPress, SecondTick, BlinkTick, Resize]


# -- Effects --


@dataclass(frozen=True, slots=True)
class Schedule:
    """Request that *event* be delivered again after *delay_ms*."""

    event: Event
    delay_ms: int


@dataclass(frozen=True, slots=True)
class Exit:
    """Request that the application terminate with *code*."""

    code: int = 0


Effect = Union[Schedule, Exit]


class DurationError(ValueError):
    """Raised when duration text is malformed or not positive."""

    def __init__(self, text: str, message: str) -> None:
        self.text = text
        super().__init__(message)
