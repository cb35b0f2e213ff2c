"""AlarmManager - lifecycle of the background alarm-sound task.

At most one sound task is live at a time. The task runs on an executor
thread, never touches timer state, and stops when its
:class:`CancelToken` is cancelled.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Protocol, runtime_checkable

from tickdown.registry import TimerRegistry

logger = logging.getLogger(__name__)


class CancelToken:
    """One-way cancellation flag shared with a running task."""

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Signal cancellation. Safe to call any number of times."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block up to *timeout* seconds; True once cancelled."""
        return self._event.wait(timeout)


@runtime_checkable
class AlarmPlayer(Protocol):
    """Sound backend used by the alarm task.

    ``play`` blocks until the sound ends or *token* is cancelled. It
    returns False when no backend or sound is available and may raise
    on backend failure; both cases fall back to the bell.
    """

    def play(self, token: CancelToken) -> bool:
        ...


def play_alarm(player: AlarmPlayer, token: CancelToken, bell: Callable[[], None]) -> None:
    """Body of the alarm task: play the sound, or ring the bell instead."""
    if token.cancelled:
        return
    try:
        played = player.play(token)
    except Exception as exc:
        logger.warning("alarm playback failed, using bell: %s", exc)
        played = False
    else:
        if not played:
            logger.info("no alarm sound available, using bell")
    if not played and not token.cancelled:
        bell()


class AlarmManager:
    """Starts, replaces and cancels the alarm task; dismisses alarms."""

    def __init__(
        self,
        player: AlarmPlayer,
        bell: Callable[[], None],
        executor: Executor | None = None,
    ) -> None:
        self._player = player
        self._bell = bell
        self._owns_executor = executor is None
        self._executor = executor if executor is not None else ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="alarm",
        )
        self._token: CancelToken | None = None
        self._future: Future[None] | None = None
        self._started = 0

    @property
    def active(self) -> bool:
        """True while a task handle is held (started and not cancelled)."""
        return self._token is not None

    @property
    def started(self) -> int:
        """Number of alarm tasks started so far."""
        return self._started

    @property
    def future(self) -> Future[None] | None:
        return self._future

    def start(self) -> CancelToken:
        """Cancel any in-flight task, then start a fresh one."""
        self.cancel()
        token = CancelToken()
        self._token = token
        self._started += 1
        self._future = self._executor.submit(play_alarm, self._player, token, self._bell)
        logger.debug("alarm task %d started", self._started)
        return token

    def cancel(self) -> None:
        """Cancel the in-flight task, if any. Idempotent."""
        token = self._token
        if token is None:
            return
        self._token = None
        token.cancel()
        if self._future is not None:
            self._future.cancel()
        logger.debug("alarm task cancelled")

    def dismiss(self, registry: TimerRegistry) -> bool:
        """Clear ``alarming`` on every timer and silence the sound.

        Returns True if any timer was alarming.
        """
        ringing = registry.alarming()
        if not ringing:
            return False
        for t in ringing:
            t.alarming = False
        self.cancel()
        logger.debug("dismissed %d alarm(s)", len(ringing))
        return True

    def shutdown(self) -> None:
        """Cancel the task and release the executor if we created it."""
        self.cancel()
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
