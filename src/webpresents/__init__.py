"""webPresents: a slideshow engine with declarative slide behaviours."""

from __future__ import annotations

from importlib import import_module
from typing import Any

from .config import Config, SlideDefinition, SlideshowOptions, load_config
from .core import (
    BEHAVIOURS,
    TRANSITIONS,
    BehaviourRegistry,
    HeadlessView,
    Slide,
    SlideSource,
    Slideshow,
    TransitionRegistry,
)
from .infra import ConfigurationError, LifecycleError, UnknownTransitionError, WebPresentsError
from .services import ManualScheduler, Scheduler
from .state_machine import SlideState

__version__ = "0.3.0"

__all__ = [
    "BEHAVIOURS",
    "BehaviourRegistry",
    "Config",
    "ConfigurationError",
    "HeadlessView",
    "LifecycleError",
    "ManualScheduler",
    "PresentationController",
    "Scheduler",
    "Slide",
    "SlideDefinition",
    "SlideSource",
    "SlideState",
    "Slideshow",
    "SlideshowOptions",
    "TRANSITIONS",
    "TransitionRegistry",
    "UnknownTransitionError",
    "WebPresentsError",
    "load_config",
]


def __getattr__(name: str) -> Any:
    """Lazily import heavy modules (Qt)."""
    if name == "PresentationController":
        module = import_module("webpresents.ui.controller")
        return getattr(module, "PresentationController")
    raise AttributeError(name)
