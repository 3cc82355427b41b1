"""PyQt5 presentation layer."""

from __future__ import annotations

from importlib import import_module
from typing import Any

from .scaling import fit_rect, scale_to_fill

__all__ = [
    "PresentationController",
    "PresentationWindow",
    "QtScheduler",
    "SlideWidget",
    "fit_rect",
    "register_qt_behaviours",
    "register_qt_transitions",
    "scale_to_fill",
]

_LAZY = {
    "PresentationController": "webpresents.ui.controller",
    "PresentationWindow": "webpresents.ui.main_window",
    "QtScheduler": "webpresents.ui.scheduler",
    "SlideWidget": "webpresents.ui.slide_widget",
    "register_qt_behaviours": "webpresents.ui.behaviours",
    "register_qt_transitions": "webpresents.ui.transitions",
}


def __getattr__(name: str) -> Any:
    """Lazily import modules that need Qt."""
    module_name = _LAZY.get(name)
    if module_name is None:
        raise AttributeError(name)
    return getattr(import_module(module_name), name)
