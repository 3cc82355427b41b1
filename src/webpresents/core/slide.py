"""A single slide: view, lifecycle state and event bus."""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Any, Mapping, Optional

from webpresents.config.models import TransitionRef
from webpresents.services import EventBus, Listener, Scheduler, event_key
from webpresents.services.event_bus import EventName
from webpresents.state_machine import LIFECYCLE_EVENTS, SlideLifecycle, SlideState

from .transitions import TRANSITIONS, Transition

if TYPE_CHECKING:
    from .slideshow import Slideshow

logger = logging.getLogger("deck.slide")


class Slide:
    """A slide in a :class:`Slideshow`.

    Slides are created by the slideshow, one per source; use
    :meth:`Slideshow.get` to reach one and attach listeners::

        slideshow.get("intro").on("show", setup).on("afterShow", lambda e: e.target.complete())

    Events fired by the slideshow:

    ``show``
        About to transition into view. Set the slide up.
    ``afterShow``
        Transitioned into view. Start animations or media; call
        :meth:`complete` to move on.
    ``hide``
        About to transition out of view. Pause anything that would slow the
        transition.
    ``afterHide``
        Fully hidden. Stop anything that should not run in the background.
    """

    def __init__(
        self,
        slideshow: "Slideshow",
        view: Any,
        name: Optional[str] = None,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._slideshow_ref = weakref.ref(slideshow)
        self.view = view
        self.name = name
        self.attributes = dict(attributes or {})
        self._bus = EventBus(owner=self)
        self._lifecycle = SlideLifecycle()
        self._transition: Optional[Transition] = None

    def __repr__(self) -> str:
        label = self.name if self.name is not None else hex(id(self))
        return f"<Slide {label} state={self.state.value}>"

    @property
    def slideshow(self) -> Optional["Slideshow"]:
        return self._slideshow_ref()

    @property
    def scheduler(self) -> Optional[Scheduler]:
        slideshow = self.slideshow
        return slideshow.scheduler if slideshow is not None else None

    @property
    def state(self) -> SlideState:
        return self._lifecycle.slide_state

    @property
    def transition_func(self) -> Optional[Transition]:
        return self._transition

    def on(self, name: EventName, listener: Listener) -> "Slide":
        self._bus.on(name, listener)
        return self

    def once(self, name: EventName, listener: Listener) -> "Slide":
        """As :meth:`on`, but the listener is removed after its first call."""
        self._bus.once(name, listener)
        return self

    def off(self, name: EventName, listener: Optional[Listener] = None) -> "Slide":
        self._bus.off(name, listener)
        return self

    def fire(self, name: EventName, payload: Any = None) -> "Slide":
        """Fire an event on this slide.

        Lifecycle events move ``state`` first, so every listener sees the new
        state. Out-of-order lifecycle events raise ``LifecycleError``.
        """
        key = event_key(name)
        if key in LIFECYCLE_EVENTS:
            self._lifecycle.move_to(SlideState(key))
        self._bus.fire(key, payload)
        return self

    def complete(self) -> "Slide":
        """Signal the slide is finished; the slideshow advances if it is on screen."""
        if self.state is not SlideState.AFTER_SHOW:
            logger.debug("Ignoring complete() on %r", self)
            return self
        slideshow = self.slideshow
        if slideshow is not None:
            slideshow.next()
        return self

    def set_transition(self, ref: TransitionRef) -> "Slide":
        """Set the transition used when leaving this slide (function, name, or empty)."""
        slideshow = self.slideshow
        registry = slideshow.transitions if slideshow is not None else TRANSITIONS
        self._transition = registry.resolve(ref)
        return self
