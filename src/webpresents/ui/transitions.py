"""Animated transitions between slide widgets."""

from __future__ import annotations

import logging
from typing import Optional

from PyQt5.QtCore import QAbstractAnimation, QParallelAnimationGroup, QPoint, QPropertyAnimation, Qt
from PyQt5.QtWidgets import QGraphicsOpacityEffect, QWidget

from webpresents.core import Slide, TransitionRegistry
from webpresents.state_machine import SlideState

logger = logging.getLogger("ui.transitions")

FADE_STEP_MS = 300
SLIDE_FADE_MS = 500
SLIDE_FADE_OFFSET = 500


def fade_to_black(outgoing: Optional[Slide], incoming: Slide, step_ms: int = FADE_STEP_MS) -> None:
    """Fade to black, swap slides, then fade the new slide in.

    Usage: ``transition: fadeToBlack``.
    """
    # Not ready for the new slide yet.
    incoming.view.hide()
    stage: QWidget = incoming.view.parentWidget()

    overlay = QWidget(stage)
    overlay.setAttribute(Qt.WA_StyledBackground, True)
    overlay.setStyleSheet("background-color: #000000;")
    overlay.setGeometry(stage.rect())
    effect = QGraphicsOpacityEffect(overlay)
    effect.setOpacity(0.0)
    overlay.setGraphicsEffect(effect)
    overlay.show()
    overlay.raise_()

    fade_in = _opacity_animation(effect, 0.0, 1.0, step_ms, overlay)
    fade_out = _opacity_animation(effect, 1.0, 0.0, step_ms, overlay)

    def _swap() -> None:
        if outgoing is not None:
            outgoing.view.hide()
        incoming.view.show()
        overlay.raise_()
        fade_out.start()

    def _finish() -> None:
        overlay.hide()
        overlay.deleteLater()
        incoming.fire(SlideState.AFTER_SHOW)

    fade_in.finished.connect(_swap)
    fade_out.finished.connect(_finish)
    fade_in.start()


def slide_fade(
    outgoing: Optional[Slide],
    incoming: Slide,
    duration_ms: int = SLIDE_FADE_MS,
    offset: int = SLIDE_FADE_OFFSET,
) -> None:
    """Slide the current slide out to the left while the new one slides in from the right.

    Usage: ``transition: slideFade``.
    """
    if outgoing is None:
        incoming.fire(SlideState.AFTER_SHOW)
        return

    out_view: QWidget = outgoing.view
    in_view: QWidget = incoming.view
    origin = out_view.pos()
    shift = QPoint(offset, 0)

    out_effect = QGraphicsOpacityEffect(out_view)
    out_effect.setOpacity(1.0)
    out_view.setGraphicsEffect(out_effect)
    in_effect = QGraphicsOpacityEffect(in_view)
    in_effect.setOpacity(0.0)
    in_view.setGraphicsEffect(in_effect)
    in_view.move(origin + shift)
    was_below = _stacked_below(in_view, out_view)
    in_view.raise_()

    group = QParallelAnimationGroup(out_view)
    group.addAnimation(_animation(out_view, b"pos", origin, origin - shift, duration_ms))
    group.addAnimation(_animation(in_view, b"pos", origin + shift, origin, duration_ms))
    group.addAnimation(_opacity_animation(out_effect, 1.0, 0.0, duration_ms))
    group.addAnimation(_opacity_animation(in_effect, 0.0, 1.0, duration_ms))

    def _finish() -> None:
        out_view.setGraphicsEffect(None)
        in_view.setGraphicsEffect(None)
        out_view.move(origin)
        in_view.move(origin)
        if was_below:
            in_view.stackUnder(out_view)
        incoming.fire(SlideState.AFTER_SHOW)

    group.finished.connect(_finish)
    group.start(QAbstractAnimation.DeleteWhenStopped)


def register_qt_transitions(registry: TransitionRegistry) -> TransitionRegistry:
    """Add the animated transitions to ``registry`` and return it."""
    registry.register("fadeToBlack", fade_to_black)
    registry.register("slideFade", slide_fade)
    return registry


def _opacity_animation(effect, start: float, end: float, duration_ms: int, parent=None) -> QPropertyAnimation:
    return _animation(effect, b"opacity", start, end, duration_ms, parent)


def _animation(target, prop: bytes, start, end, duration_ms: int, parent=None) -> QPropertyAnimation:
    animation = QPropertyAnimation(target, prop, parent)
    animation.setDuration(duration_ms)
    animation.setStartValue(start)
    animation.setEndValue(end)
    return animation


def _stacked_below(widget: QWidget, other: QWidget) -> bool:
    """True when ``widget`` is painted under ``other``; both share a parent."""
    siblings = widget.parentWidget().children() if widget.parentWidget() is not None else []
    if widget not in siblings or other not in siblings:
        return False
    return siblings.index(widget) < siblings.index(other)
