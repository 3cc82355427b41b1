"""Slideshow: ordered slides, navigation and the switching protocol."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple

from webpresents.config.models import SlideshowOptions
from webpresents.services import Event, Scheduler
from webpresents.state_machine import SlideState

from .behaviours import BEHAVIOURS, BehaviourRegistry
from .slide import Slide
from .transitions import TRANSITIONS, TransitionRegistry, identity_transition

logger = logging.getLogger("deck.slideshow")


@dataclass(frozen=True)
class SlideSource:
    """What a slide is built from: its view plus declarative attributes.

    ``factory`` builds a fresh, equivalent view. It is used when a looping deck
    with a single slide needs a second copy; without one the view is
    shallow-copied.
    """

    view: Any
    attributes: Mapping[str, Any] = field(default_factory=dict)
    name: Optional[str] = None
    factory: Optional[Callable[[], Any]] = None

    def clone(self) -> "SlideSource":
        view = self.factory() if self.factory is not None else copy.copy(self.view)
        return SlideSource(view=view, attributes=dict(self.attributes), name=self.name, factory=self.factory)


class Slideshow:
    """A slide deck.

    Every source becomes a :class:`Slide`, in order. Attributes on a source
    install behaviours (see :mod:`webpresents.core.behaviours`), and
    ``options.transition`` sets the default transition for every slide.

    Example::

        slideshow = Slideshow(sources, SlideshowOptions(transition="fadeToBlack"), scheduler=scheduler)
        slideshow.get("intro").on("afterShow", lambda event: event.target.complete())
        slideshow.start()
    """

    def __init__(
        self,
        sources: Iterable[SlideSource],
        options: Optional[SlideshowOptions] = None,
        *,
        scheduler: Optional[Scheduler] = None,
        transitions: Optional[TransitionRegistry] = None,
        behaviours: Optional[BehaviourRegistry] = None,
    ) -> None:
        self.options = options or SlideshowOptions()
        self.scheduler = scheduler
        self.transitions = transitions if transitions is not None else TRANSITIONS
        self.behaviours = behaviours if behaviours is not None else BEHAVIOURS
        self._current: Optional[Slide] = None
        self._started = False

        sources = list(sources)
        # Looping a single slide needs a distinct slide to switch to.
        if self.options.loop and len(sources) == 1:
            sources.append(sources[0].clone())

        default_transition = self.transitions.resolve(self.options.transition)
        slides = []
        for source in sources:
            slide = Slide(self, source.view, name=source.name, attributes=source.attributes)
            slide.set_transition(default_transition)
            self.behaviours.apply(slide, source.attributes)
            source.view.hide()
            slides.append(slide)
        self._slides: Tuple[Slide, ...] = tuple(slides)
        logger.info(
            "Slideshow ready: %d slide(s), loop=%s, transition=%r",
            len(self._slides),
            self.options.loop,
            self.options.transition,
        )

    @property
    def slides(self) -> Tuple[Slide, ...]:
        return self._slides

    @property
    def current(self) -> Optional[Slide]:
        return self._current

    @property
    def current_index(self) -> Optional[int]:
        return self._index_of(self._current) if self._current is not None else None

    @property
    def started(self) -> bool:
        return self._started

    def __len__(self) -> int:
        return len(self._slides)

    def get(self, ref: Any) -> Optional[Slide]:
        """Find a slide by Slide, view, name or index. Returns None when nothing matches."""
        if isinstance(ref, Slide):
            return ref if self._index_of(ref) is not None else None
        if isinstance(ref, int) and not isinstance(ref, bool):
            return self._slides[ref] if -len(self._slides) <= ref < len(self._slides) else None
        for slide in self._slides:
            if slide.view is ref:
                return slide
        if isinstance(ref, str):
            for slide in self._slides:
                if slide.name == ref:
                    return slide
        return None

    def start(self) -> "Slideshow":
        """Show the first slide. Only the first call has any effect."""
        if not self._started:
            logger.info("Starting slideshow")
            switch_to(self, self._slides[0] if self._slides else None)
            self._started = True
        return self

    def next(self) -> "Slideshow":
        """Advance the slideshow, wrapping to the first slide when looping."""
        return switch_to(self, self._neighbour(1))

    def prev(self) -> "Slideshow":
        """Move the slideshow back. Does nothing on the first slide."""
        return switch_to(self, self._neighbour(-1))

    def _neighbour(self, step: int) -> Optional[Slide]:
        if self._current is None:
            return None
        index = self._index_of(self._current) + step
        if 0 <= index < len(self._slides):
            return self._slides[index]
        if step > 0 and self.options.loop:
            return self._slides[0]
        return None

    def _index_of(self, slide: Slide) -> Optional[int]:
        for index, candidate in enumerate(self._slides):
            if candidate is slide:
                return index
        return None

    def _commit(self, slide: Slide) -> None:
        self._current = slide


def switch_to(slideshow: Slideshow, new_slide: Optional[Slide]) -> Slideshow:
    """Move ``slideshow`` to ``new_slide`` through the outgoing slide's transition.

    Requests are dropped while the current slide is mid-transition. The current
    slide only changes once the transition fires ``afterShow`` on the new slide.
    """
    if new_slide is None:
        return slideshow

    current_slide = slideshow.current
    if current_slide is not None and current_slide.state is not SlideState.AFTER_SHOW:
        logger.debug("Navigation to %r dropped; %r is mid-transition", new_slide, current_slide)
        return slideshow
    if new_slide is current_slide:
        return slideshow

    if current_slide is not None:
        current_slide.fire(SlideState.HIDE)

    new_slide.fire(SlideState.SHOW)
    new_slide.view.show()

    def _on_transition_complete(event: Event) -> None:
        if current_slide is not None:
            current_slide.view.hide()
            current_slide.fire(SlideState.AFTER_HIDE)
        slideshow._commit(new_slide)
        logger.info("Now showing slide %d: %r", slideshow.current_index, new_slide)

    new_slide.once(SlideState.AFTER_SHOW, _on_transition_complete)

    transition = current_slide.transition_func if current_slide is not None else None
    (transition or identity_transition)(current_slide, new_slide)
    return slideshow
