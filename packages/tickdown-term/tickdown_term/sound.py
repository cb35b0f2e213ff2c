"""Alarm players: pygame mixer, external command, or bell only."""
from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Iterable, TextIO

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from tickdown import AlarmPlayer, CancelToken, TimerConfig  # noqa: E402

BELL = "\a"


def find_sound_file(paths: Iterable[str]) -> Path | None:
    """Return the first of *paths* that exists as a file."""
    for p in paths:
        path = Path(p)
        if path.is_file():
            return path
    return None


def terminal_bell(stream: TextIO | None = None) -> None:
    """Ring the terminal bell on the real stdout."""
    out = stream if stream is not None else sys.__stdout__
    if out is None:
        return
    out.write(BELL)
    out.flush()


class BellPlayer:
    """Never plays anything; the alarm task always falls back to the bell."""

    def play(self, token: CancelToken) -> bool:
        return False


class PygamePlayer:
    """Plays the first available sound file through ``pygame.mixer``."""

    def __init__(self, sound_files: Iterable[str], poll: float = 0.05) -> None:
        self._sound_files = tuple(sound_files)
        self._poll = poll

    def play(self, token: CancelToken) -> bool:
        path = find_sound_file(self._sound_files)
        if path is None:
            return False
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        sound = pygame.mixer.Sound(str(path))
        channel = sound.play()
        if channel is None:
            return False
        while channel.get_busy():
            if token.wait(self._poll):
                channel.stop()
                break
        return True


class CommandPlayer:
    """Runs an external player (``paplay`` by default) on a sound file.

    The process is terminated as soon as the token is cancelled.
    """

    def __init__(
        self,
        command: Iterable[str] = ("paplay",),
        sound_files: Iterable[str] = (),
        poll: float = 0.05,
    ) -> None:
        self._command = tuple(command)
        self._sound_files = tuple(sound_files)
        self._poll = poll

    def play(self, token: CancelToken) -> bool:
        path = find_sound_file(self._sound_files)
        if path is None:
            return False
        proc = subprocess.Popen(
            [*self._command, str(path)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        try:
            while proc.poll() is None:
                if token.wait(self._poll):
                    proc.terminate()
                    break
        finally:
            try:
                proc.wait(timeout=1.0)
            except subprocess.TimeoutExpired:
                proc.kill()
                proc.wait()
        return True


def make_player(config: TimerConfig) -> AlarmPlayer:
    """Build the player selected by ``config.sound_backend``."""
    if config.sound_backend == "pygame":
        return PygamePlayer(config.sound_files, poll=config.poll_interval)
    if config.sound_backend == "command":
        return CommandPlayer(config.sound_command, config.sound_files, poll=config.poll_interval)
    return BellPlayer()
