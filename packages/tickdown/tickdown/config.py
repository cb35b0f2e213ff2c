"""Timer application configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SOUND_FILES: tuple[str, ...] = (
    "/usr/share/sounds/freedesktop/stereo/alarm-clock-elapsed.oga",
    "/usr/share/sounds/freedesktop/stereo/complete.oga",
)

SOUND_BACKENDS = ("pygame", "command", "bell")


@dataclass(frozen=True)
class TimerConfig:
    """Immutable settings for the timer application.

    Attributes:
        placeholder: Hint shown in the empty duration input.
        char_limit: Maximum characters accepted by the input.
        input_width: Display width of the input, in cells.
        sound_backend: One of ``pygame``, ``command`` or ``bell``.
        sound_command: Argv prefix for the ``command`` backend.
        sound_files: Candidate alarm sounds; the first that exists wins.
        poll_interval: Seconds between real-time scheduler polls.
    """

    placeholder: str = "10s (e.g. 5m, 1h30m)"
    char_limit: int = 20
    input_width: int = 30
    sound_backend: str = "pygame"
    sound_command: tuple[str, ...] = ("paplay",)
    sound_files: tuple[str, ...] = DEFAULT_SOUND_FILES
    poll_interval: float = 0.05

    def __post_init__(self) -> None:
        if self.char_limit <= 0:
            raise ValueError("char_limit must be positive")
        if self.input_width <= 0:
            raise ValueError("input_width must be positive")
        if self.sound_backend not in SOUND_BACKENDS:
            raise ValueError(
                f"sound_backend must be one of {', '.join(SOUND_BACKENDS)}, "
                f"got {self.sound_backend!r}"
            )
        if not self.sound_command:
            raise ValueError("sound_command must not be empty")
        if not 0 < self.poll_interval <= 0.5:
            raise ValueError("poll_interval must be in (0, 0.5]")
