"""Application controller wiring the window, the slideshow and Qt services."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from PyQt5 import QtCore, QtWidgets

from webpresents.config.models import Config
from webpresents.core import BEHAVIOURS, TRANSITIONS, Slideshow
from webpresents.infra.logging import route_qt_messages

from .behaviours import register_qt_behaviours
from .main_window import PresentationWindow
from .scheduler import QtScheduler
from .slide_widget import build_slide_source
from .transitions import register_qt_transitions

logger = logging.getLogger("ui.controller")


class PresentationController(QtCore.QObject):
    """High level orchestrator creating and wiring the presentation."""

    def __init__(self, config: Config, argv: Optional[list[str]] = None) -> None:
        super().__init__()
        self._config = config
        self._app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(argv or sys.argv)
        route_qt_messages()

        # Module registries stay toolkit-independent; Qt entries live in private copies.
        self._transitions = register_qt_transitions(TRANSITIONS.copy())
        self._behaviours = register_qt_behaviours(BEHAVIOURS.copy())

        self._scheduler = QtScheduler(self)
        self._window = PresentationWindow(config.window, full_screen=config.deck.full_screen)
        sources = [build_slide_source(definition, self._window.stage) for definition in config.slides]
        self._slideshow = Slideshow(
            sources,
            config.deck,
            scheduler=self._scheduler,
            transitions=self._transitions,
            behaviours=self._behaviours,
        )
        for slide in self._slideshow.slides:
            self._window.stage.track(slide.view)

        self._window.next_requested.connect(self._on_next_requested)
        self._window.prev_requested.connect(self._on_prev_requested)

    @property
    def slideshow(self) -> Slideshow:
        return self._slideshow

    @property
    def window(self) -> PresentationWindow:
        return self._window

    @QtCore.pyqtSlot()
    def _on_next_requested(self) -> None:
        self._slideshow.next()

    @QtCore.pyqtSlot()
    def _on_prev_requested(self) -> None:
        self._slideshow.prev()

    def run(self) -> int:
        """Show the window, start the slideshow and block in the event loop."""
        logger.info("Starting presentation '%s' (%d slides)", self._config.window.title, len(self._slideshow))
        self._window.present()
        self._slideshow.start()
        exit_code = self._app.exec_()
        self._scheduler.shutdown()
        logger.info("Presentation closed (exit code %d)", exit_code)
        return exit_code
