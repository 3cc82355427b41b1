"""Toolkit-independent slideshow core."""

from .behaviours import BEHAVIOURS, CORE_BEHAVIOURS, BehaviourRegistry, Installer, apply_behaviours, coerce_attribute_value
from .slide import Slide
from .slideshow import SlideSource, Slideshow, switch_to
from .transitions import (
    TRANSITIONS,
    Transition,
    TransitionRegistry,
    delayed_transition,
    identity_transition,
)
from .view import HeadlessView, SlideView

__all__ = [
    "BEHAVIOURS",
    "CORE_BEHAVIOURS",
    "BehaviourRegistry",
    "HeadlessView",
    "Installer",
    "Slide",
    "SlideSource",
    "SlideView",
    "Slideshow",
    "TRANSITIONS",
    "Transition",
    "TransitionRegistry",
    "apply_behaviours",
    "coerce_attribute_value",
    "delayed_transition",
    "identity_transition",
    "switch_to",
]
