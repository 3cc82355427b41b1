"""Shared services: per-slide event bus and timer scheduling."""

from .event_bus import Event, EventBus, Listener, event_key
from .scheduler import ManualScheduler, Scheduler, TimerHandle

__all__ = [
    "Event",
    "EventBus",
    "Listener",
    "ManualScheduler",
    "Scheduler",
    "TimerHandle",
    "event_key",
]
