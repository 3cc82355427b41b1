"""Widget rendering a single slide definition."""

from __future__ import annotations

import logging
from typing import Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPixmap
from PyQt5.QtWidgets import QLabel, QSizePolicy, QVBoxLayout, QWidget

from webpresents.config.models import SlideDefinition
from webpresents.core import SlideSource

logger = logging.getLogger("ui.slide_widget")


class SlideWidget(QWidget):
    """Title, body text and optional image stacked vertically."""

    def __init__(self, definition: SlideDefinition, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.definition = definition
        self.setObjectName(definition.name or "slide")
        self.setAttribute(Qt.WA_StyledBackground, True)
        if definition.background:
            self.setStyleSheet(f"SlideWidget {{ background-color: {definition.background}; }}")

        self._layout = QVBoxLayout()
        self._layout.setContentsMargins(48, 48, 48, 48)
        self._layout.setSpacing(24)
        self.setLayout(self._layout)

        self.title_label = self._add_label(definition.title, "slideTitle", "font-size: 40pt; font-weight: bold;")
        self.body_label = self._add_label(definition.body, "slideBody", "font-size: 20pt;")
        self.image_label = self._add_image(definition)
        self._layout.addStretch(1)

    def _add_label(self, text: str, object_name: str, style: str) -> Optional[QLabel]:
        if not text:
            return None
        label = QLabel(text)
        label.setObjectName(object_name)
        label.setWordWrap(True)
        label.setStyleSheet(style)
        self._layout.addWidget(label)
        return label

    def _add_image(self, definition: SlideDefinition) -> Optional[QLabel]:
        if definition.image is None:
            return None
        pixmap = QPixmap(str(definition.image))
        if pixmap.isNull():
            logger.warning("Could not load image %s for slide %s", definition.image, definition.name)
            return None
        label = QLabel()
        label.setObjectName("slideImage")
        label.setAlignment(Qt.AlignCenter)
        label.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        label.setPixmap(pixmap)
        label.setScaledContents(False)
        self._layout.addWidget(label, stretch=1)
        return label


def build_slide_source(definition: SlideDefinition, parent: QWidget) -> SlideSource:
    """Wrap a definition in a SlideSource whose factory can rebuild the widget."""

    def _factory() -> SlideWidget:
        return SlideWidget(definition, parent)

    return SlideSource(
        view=_factory(),
        attributes=dict(definition.attributes),
        name=definition.name,
        factory=_factory,
    )
