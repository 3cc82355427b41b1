"""Transition protocol and the registry of named transitions.

A transition is called as ``transition(outgoing, incoming)`` once both slide
views are shown. It may rearrange or animate the views however it likes, but
it must restore anything it changed and then call
``incoming.fire(SlideState.AFTER_SHOW)`` exactly once. That call hands control
back to the slideshow; until it happens the deck stays on the outgoing slide
and ignores navigation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Dict, Iterator, Optional

from webpresents.config.models import TransitionRef
from webpresents.infra.exceptions import ConfigurationError, UnknownTransitionError
from webpresents.state_machine import SlideState

if TYPE_CHECKING:
    from .slide import Slide

logger = logging.getLogger("deck.transitions")

Transition = Callable[[Optional["Slide"], "Slide"], None]


def identity_transition(outgoing: Optional["Slide"], incoming: "Slide") -> None:
    """Instant switch: nothing to animate."""
    incoming.fire(SlideState.AFTER_SHOW)


def delayed_transition(delay_ms: float) -> Transition:
    """Build a transition that completes ``delay_ms`` later on the deck's scheduler.

    Headless stand-in for animated transitions: the views swap immediately and
    completion waits for the timer, so the deck spends real (or virtual) time
    mid-transition.
    """

    def _transition(outgoing: Optional["Slide"], incoming: "Slide") -> None:
        scheduler = incoming.scheduler
        if scheduler is None:
            raise ConfigurationError("delayed transitions need a scheduler on the slideshow")
        scheduler.schedule_once(delay_ms, lambda: incoming.fire(SlideState.AFTER_SHOW))

    _transition.__name__ = f"delayed_{delay_ms:g}ms"
    return _transition


class TransitionRegistry:
    """Maps transition names (as used in config and slide attributes) to functions."""

    def __init__(self, transitions: Optional[Dict[str, Transition]] = None) -> None:
        self._transitions: Dict[str, Transition] = dict(transitions or {})

    def register(self, name: str, transition: Optional[Transition] = None):
        """Register a transition; usable directly or as a decorator."""

        def decorator(func: Transition) -> Transition:
            self._transitions[name] = func
            logger.debug("Registered transition: %s -> %s", name, getattr(func, "__name__", func))
            return func

        if transition is None:
            return decorator
        return decorator(transition)

    def unregister(self, name: str) -> None:
        self._transitions.pop(name, None)

    def get(self, name: str) -> Optional[Transition]:
        return self._transitions.get(name)

    def resolve(self, ref: TransitionRef) -> Optional[Transition]:
        """Turn a transition reference into a function, or None for an instant switch."""
        if ref is None or ref == "":
            return None
        if isinstance(ref, str):
            try:
                return self._transitions[ref]
            except KeyError:
                raise UnknownTransitionError(ref, self.names()) from None
        if callable(ref):
            return ref
        raise ConfigurationError(f"Unsupported transition reference: {ref!r}")

    def names(self) -> list[str]:
        return sorted(self._transitions)

    def copy(self) -> "TransitionRegistry":
        return TransitionRegistry(self._transitions)

    def __contains__(self, name: object) -> bool:
        return name in self._transitions

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


TRANSITIONS = TransitionRegistry()
TRANSITIONS.register("instant", identity_transition)
