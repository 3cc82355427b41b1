"""State machine package exports."""

from .lifecycle import LIFECYCLE_EVENTS, SlideLifecycle, SlideState

__all__ = [
    "LIFECYCLE_EVENTS",
    "SlideLifecycle",
    "SlideState",
]
