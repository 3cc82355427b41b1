"""Error types and global exception handling for the presentation runtime."""

from __future__ import annotations

import logging
import sys
import threading
import traceback
from dataclasses import dataclass
from typing import Iterable, Optional

logger = logging.getLogger("app.exceptions")


class WebPresentsError(Exception):
    """Base class for errors raised by the slideshow runtime."""


class ConfigurationError(WebPresentsError, ValueError):
    """A deck could not be built from the supplied configuration."""


class UnknownTransitionError(ConfigurationError):
    """A transition was referenced by a name nobody registered."""

    def __init__(self, name: str, known: Iterable[str] = ()) -> None:
        self.name = name
        self.known = tuple(known)
        available = ", ".join(self.known) or "none registered"
        super().__init__(f"Unknown transition '{name}' (available: {available})")


class LifecycleError(WebPresentsError):
    """A slide received a lifecycle event that is out of cycle order."""


def install_exception_hook(show_dialog: bool = True) -> None:
    """Install global exception handlers for main thread and other threads."""

    hook = _ExceptionHook(show_dialog=show_dialog)
    hook.install()


@dataclass
class _ExceptionHook:
    show_dialog: bool = True
    _original_excepthook: Optional[callable] = None
    _original_thread_excepthook: Optional[callable] = None

    def install(self) -> None:
        self._original_excepthook = sys.excepthook
        sys.excepthook = self._handle_exception

        if hasattr(threading, "excepthook"):
            self._original_thread_excepthook = threading.excepthook
            threading.excepthook = self._handle_thread_exception  # type: ignore[assignment]

    def _handle_exception(self, exc_type, exc_value, exc_traceback) -> None:
        logger.critical(
            "Unhandled exception: %s",
            exc_value,
            exc_info=(exc_type, exc_value, exc_traceback),
        )
        self._show_dialog(exc_type, exc_value, exc_traceback)
        if self._original_excepthook:
            self._original_excepthook(exc_type, exc_value, exc_traceback)

    def _handle_thread_exception(self, args: "threading.ExceptHookArgs") -> None:
        # Logged only: Qt widgets cannot be created from a worker thread, and a QTimer
        # started here would belong to a thread without an event loop.
        logger.critical(
            "Unhandled thread exception in %s: %s",
            args.thread.name,
            args.exc_value,
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )
        if self._original_thread_excepthook:
            self._original_thread_excepthook(args)

    def _show_dialog(self, exc_type, exc_value, exc_traceback) -> None:
        if not self.show_dialog:
            return

        try:
            from PyQt5.QtCore import QTimer
            from PyQt5.QtWidgets import QApplication, QMessageBox
        except ImportError:
            return

        app = QApplication.instance()
        if app is None:
            return

        message = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))

        def _show():
            QMessageBox.critical(
                None,
                "Presentation error",
                f"An unexpected error stopped the presentation:\n\n{exc_value}\n\nDetails:\n{message}",
            )

        QTimer.singleShot(0, _show)
