"""Synchronous event bus owned by each slide."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

logger = logging.getLogger("services.event_bus")

EventName = Union[str, Enum]


@dataclass(frozen=True)
class Event:
    """Passed to every listener. ``target`` is the object that owns the bus."""

    name: str
    target: Any = None
    payload: Any = None


Listener = Callable[[Event], None]


@dataclass
class _Subscription:
    listener: Listener
    once: bool = False
    active: bool = True


def event_key(name: EventName) -> str:
    """Return the string key for an event name or enum member."""
    return name.value if isinstance(name, Enum) else name


class EventBus:
    """Publish/subscribe bus dispatching synchronously in registration order.

    Listeners registered while an event is being fired only see later firings.
    A listener that raises aborts the current ``fire`` and the exception reaches
    the caller; remaining listeners for that firing do not run.
    """

    def __init__(self, owner: Any = None) -> None:
        self._owner = owner
        self._subscriptions: Dict[str, List[_Subscription]] = {}

    def on(self, name: EventName, listener: Listener) -> None:
        self._subscriptions.setdefault(event_key(name), []).append(_Subscription(listener))

    def once(self, name: EventName, listener: Listener) -> None:
        self._subscriptions.setdefault(event_key(name), []).append(_Subscription(listener, once=True))

    def off(self, name: EventName, listener: Optional[Listener] = None) -> None:
        """Remove one listener, or every listener for the event when none is given."""
        key = event_key(name)
        remaining = []
        for subscription in self._subscriptions.get(key, []):
            if listener is None or subscription.listener is listener:
                subscription.active = False
            else:
                remaining.append(subscription)
        if remaining:
            self._subscriptions[key] = remaining
        else:
            self._subscriptions.pop(key, None)

    def fire(self, name: EventName, payload: Any = None) -> Event:
        key = event_key(name)
        event = Event(name=key, target=self._owner, payload=payload)
        snapshot = tuple(self._subscriptions.get(key, ()))
        logger.debug("Firing %s to %d listener(s) on %r", key, len(snapshot), self._owner)
        for subscription in snapshot:
            if not subscription.active:
                continue
            if subscription.once:
                self._discard(key, subscription)
            subscription.listener(event)
        return event

    def listener_count(self, name: EventName) -> int:
        return len(self._subscriptions.get(event_key(name), ()))

    def _discard(self, key: str, subscription: _Subscription) -> None:
        subscription.active = False
        subscriptions = self._subscriptions.get(key)
        if subscriptions is None:
            return
        subscriptions[:] = [item for item in subscriptions if item is not subscription]
        if not subscriptions:
            del self._subscriptions[key]
