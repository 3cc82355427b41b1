"""Main window hosting the slide stage."""

from __future__ import annotations

from typing import List, Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QAbstractButton,
    QAbstractSlider,
    QAbstractSpinBox,
    QApplication,
    QComboBox,
    QLineEdit,
    QMainWindow,
    QPlainTextEdit,
    QTextEdit,
    QWidget,
)

from webpresents.config.models import WindowConfig

from .scaling import fit_rect

NEXT_KEYS = frozenset({Qt.Key_Space, Qt.Key_Right})
PREV_KEYS = frozenset({Qt.Key_Left})

# Widgets that keep their own key handling.
INTERACTIVE_WIDGETS = (
    QAbstractButton,
    QAbstractSlider,
    QAbstractSpinBox,
    QComboBox,
    QLineEdit,
    QPlainTextEdit,
    QTextEdit,
)


def command_for_key(key: int) -> Optional[str]:
    if key in NEXT_KEYS:
        return "next"
    if key in PREV_KEYS:
        return "prev"
    return None


def is_interactive(widget: Optional[QWidget]) -> bool:
    while widget is not None:
        if isinstance(widget, INTERACTIVE_WIDGETS):
            return True
        widget = widget.parentWidget()
    return False


class SlideStage(QWidget):
    """Fixed design-size surface; every tracked slide view fills it."""

    def __init__(self, width: int, height: int, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.design_width = width
        self.design_height = height
        self._views: List[QWidget] = []
        self.resize(width, height)

    def track(self, view: QWidget) -> None:
        if view not in self._views:
            self._views.append(view)
            view.setGeometry(self.rect())

    def views(self) -> List[QWidget]:
        return list(self._views)

    def resizeEvent(self, event) -> None:
        for view in self._views:
            view.setGeometry(self.rect())
        super().resizeEvent(event)


class _Backdrop(QWidget):
    resized = pyqtSignal()

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self.resized.emit()


class PresentationWindow(QMainWindow):
    """Window showing the stage; arrow keys and space drive navigation."""

    next_requested = pyqtSignal()
    prev_requested = pyqtSignal()

    def __init__(self, config: WindowConfig, full_screen: bool = False, parent=None) -> None:
        super().__init__(parent)
        self._config = config
        self._full_screen = full_screen
        self.setWindowTitle(config.title)

        self._backdrop = _Backdrop()
        self._backdrop.setObjectName("backdrop")
        self._backdrop.setAttribute(Qt.WA_StyledBackground, True)
        self._backdrop.setStyleSheet(f"#backdrop {{ background-color: {config.background}; }}")
        self.stage = SlideStage(config.width, config.height, self._backdrop)
        self._backdrop.resized.connect(self._fit_stage)
        self.setCentralWidget(self._backdrop)
        self.resize(config.width, config.height)
        self.setFocusPolicy(Qt.StrongFocus)

    @property
    def full_screen(self) -> bool:
        return self._full_screen

    def present(self) -> None:
        if self._full_screen:
            self.showFullScreen()
        else:
            self.show()
        self.activateWindow()

    def keyPressEvent(self, event) -> None:
        command = command_for_key(event.key())
        if command is None or is_interactive(QApplication.focusWidget()):
            super().keyPressEvent(event)
            return
        if command == "next":
            self.next_requested.emit()
        else:
            self.prev_requested.emit()
        event.accept()

    def _fit_stage(self) -> None:
        if not self._full_screen:
            self.stage.setGeometry(0, 0, self.stage.design_width, self.stage.design_height)
            return
        size = self._backdrop.size()
        x, y, width, height = fit_rect(
            self.stage.design_width,
            self.stage.design_height,
            size.width(),
            size.height(),
        )
        self.stage.setGeometry(x, y, width, height)
