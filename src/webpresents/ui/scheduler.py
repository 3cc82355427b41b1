"""Scheduler backed by single-shot QTimers on the Qt event loop."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Set

from PyQt5.QtCore import QObject, QTimer

from webpresents.services import Scheduler, TimerHandle

logger = logging.getLogger("ui.scheduler")


class _QtTimerHandle(TimerHandle):
    def __init__(self, timer: QTimer, on_done: Callable[["_QtTimerHandle"], None]) -> None:
        self._timer = timer
        self._on_done = on_done
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._timer.stop()
        self._release()

    def _release(self) -> None:
        self._active = False
        self._timer.deleteLater()
        self._on_done(self)


class QtScheduler(Scheduler):
    """Runs callbacks on the GUI thread via QTimer.

    Only timers that are still pending are held; a handle is released as soon as
    it fires or is cancelled.
    """

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent
        self._handles: Set[_QtTimerHandle] = set()

    @property
    def pending(self) -> int:
        return len(self._handles)

    def schedule_once(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        handle = _QtTimerHandle(timer, self._handles.discard)

        def _fire() -> None:
            if not handle.active:
                return
            handle._release()
            callback()

        timer.timeout.connect(_fire)
        self._handles.add(handle)
        timer.start(max(0, int(round(delay_ms))))
        logger.debug("QTimer scheduled in %dms", int(round(delay_ms)))
        return handle

    def shutdown(self) -> None:
        for handle in list(self._handles):
            handle.cancel()
        self._handles.clear()
