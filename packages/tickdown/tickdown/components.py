"""Timer record."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass
class Timer:
    """One countdown. ``remaining`` runs from ``duration`` down to zero.

    ``finished`` implies ``remaining == 0`` and ``running is False``;
    ``alarming`` implies ``finished``.
    """

    id: int
    duration: timedelta
    remaining: timedelta
    running: bool = True
    finished: bool = False
    alarming: bool = False
