"""Qt-backed slide behaviours: video playback and staged fade-in."""

from __future__ import annotations

import logging
from typing import Any, Callable, List

from PyQt5.QtCore import QPropertyAnimation, Qt, QUrl
from PyQt5.QtMultimedia import QMediaContent, QMediaPlayer
from PyQt5.QtMultimediaWidgets import QVideoWidget
from PyQt5.QtWidgets import QGraphicsOpacityEffect, QLabel, QWidget

from webpresents.core import BehaviourRegistry, Slide
from webpresents.infra.exceptions import ConfigurationError
from webpresents.services import TimerHandle
from webpresents.state_machine import SlideState

logger = logging.getLogger("ui.behaviours")

FADE_ELEMENT_MS = 500
FADE_ELEMENT_STAGGER_MS = 500

_READY_STATUSES = frozenset({QMediaPlayer.LoadedMedia, QMediaPlayer.BufferedMedia, QMediaPlayer.BufferingMedia})


class _VideoController:
    """Drives a player from slide events: rewind on show, play on afterShow, pause on hide.

    Player calls made before the media has loaded are queued and replayed in order.
    """

    def __init__(self, slide: Slide, player: QMediaPlayer) -> None:
        self._slide = slide
        self._player = player
        self._queue: List[Callable[[], None]] = []
        self._ready = False
        player.mediaStatusChanged.connect(self._on_status)
        slide.on(SlideState.SHOW, self._rewind)
        slide.on(SlideState.AFTER_SHOW, self._play)
        slide.on(SlideState.HIDE, self._pause)

    def when_ready(self, action: Callable[[], None]) -> None:
        if self._ready:
            action()
        else:
            self._queue.append(action)

    def _on_status(self, status: int) -> None:
        if status in _READY_STATUSES and not self._ready:
            self._ready = True
            queued, self._queue = self._queue, []
            for action in queued:
                action()
        elif status == QMediaPlayer.EndOfMedia:
            self._slide.complete()
        elif status == QMediaPlayer.InvalidMedia:
            logger.error("Video on %r could not be loaded: %s", self._slide, self._player.errorString())

    def _rewind(self, event) -> None:
        self.when_ready(lambda: self._player.setPosition(0))

    def _play(self, event) -> None:
        self.when_ready(self._player.play)

    def _pause(self, event) -> None:
        self.when_ready(self._player.pause)


def video(slide: Slide, source: Any, full: bool = False) -> None:
    """Play a video while the slide is on screen, then advance when it ends.

    Usage: ``video: clips/intro.mp4`` or ``video: ""``. With a source a video
    widget is added to the slide; otherwise the first QVideoWidget already in
    the slide is used.
    """
    view: QWidget = slide.view
    player = QMediaPlayer(view, QMediaPlayer.VideoSurface)

    if isinstance(source, str) and source:
        video_widget = QVideoWidget(view)
        video_widget.setObjectName("slideVideo")
        if full:
            # Video takes the whole slide.
            for label in view.findChildren(QLabel):
                label.hide()
        layout = view.layout()
        if layout is not None:
            layout.addWidget(video_widget, 1)
        url = QUrl(source) if "://" in source else QUrl.fromLocalFile(source)
        player.setMedia(QMediaContent(url))
    else:
        video_widget = view.findChild(QVideoWidget)
        if video_widget is None:
            raise ConfigurationError(f"video on {slide} has no source and the slide holds no video widget")

    player.setVideoOutput(video_widget)
    _VideoController(slide, player)


def full_video(slide: Slide, source: Any) -> None:
    """As :func:`video`, but the video fills the slide."""
    video(slide, source, full=True)


def fade_elements(slide: Slide, _value: Any = None) -> None:
    """Fade the slide's visible child widgets in one after another.

    Usage: ``fadeelements: ""``.
    """
    scheduler = slide.scheduler
    if scheduler is None:
        raise ConfigurationError(f"fadeelements on {slide} needs a scheduler on the slideshow")

    view: QWidget = slide.view
    staged: List[tuple[QWidget, QPropertyAnimation]] = []
    timers: List[TimerHandle] = []

    def _prepare(event) -> None:
        staged.clear()
        children = [
            child
            for child in view.findChildren(QWidget, options=Qt.FindDirectChildrenOnly)
            if not _explicitly_hidden(child)
        ]
        for child in children:
            effect = QGraphicsOpacityEffect(child)
            effect.setOpacity(0.0)
            child.setGraphicsEffect(effect)
            animation = QPropertyAnimation(effect, b"opacity", child)
            animation.setDuration(FADE_ELEMENT_MS)
            animation.setStartValue(0.0)
            animation.setEndValue(1.0)
            staged.append((child, animation))

    def _reveal(event) -> None:
        for index, (_, animation) in enumerate(staged):
            timers.append(scheduler.schedule_once(index * FADE_ELEMENT_STAGGER_MS, animation.start))

    def _reset(event) -> None:
        for timer in timers:
            timer.cancel()
        timers.clear()
        for child, animation in staged:
            animation.stop()
            animation.deleteLater()
            child.setGraphicsEffect(None)
        staged.clear()

    slide.on(SlideState.SHOW, _prepare).on(SlideState.AFTER_SHOW, _reveal).on(SlideState.AFTER_HIDE, _reset)


def _explicitly_hidden(widget: QWidget) -> bool:
    # Children of a never-shown slide report isHidden() until the slide appears.
    return widget.isHidden() and widget.testAttribute(Qt.WA_WState_ExplicitShowHide)


def register_qt_behaviours(registry: BehaviourRegistry) -> BehaviourRegistry:
    registry.register("video", video)
    registry.register("fullvideo", full_video)
    registry.register("fadeelements", fade_elements)
    return registry
