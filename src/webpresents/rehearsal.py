"""Headless rehearsal: run a deck on a virtual clock and record when each slide appears."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional

from webpresents.config.models import Config
from webpresents.core import (
    CORE_BEHAVIOURS,
    BehaviourRegistry,
    HeadlessView,
    SlideSource,
    Slideshow,
    TransitionRegistry,
    delayed_transition,
    identity_transition,
)
from webpresents.services import ManualScheduler
from webpresents.state_machine import SlideState

logger = logging.getLogger("app.rehearsal")

# Stand-in timings for the animated transitions of the Qt layer.
DEFAULT_TRANSITION_TIMINGS: Mapping[str, float] = {
    "fadeToBlack": 600,
    "slideFade": 500,
}

DEFAULT_LIMIT_MS = 10 * 60 * 1000


@dataclass(frozen=True)
class RehearsalStep:
    """A slide reaching ``afterShow`` at ``at_ms`` on the virtual clock."""

    at_ms: float
    index: int
    name: str


def rehearse(
    config: Config,
    limit_ms: float = DEFAULT_LIMIT_MS,
    transition_timings: Optional[Mapping[str, float]] = None,
    *,
    transitions: Optional[TransitionRegistry] = None,
    behaviours: Optional[BehaviourRegistry] = None,
) -> List[RehearsalStep]:
    """Play the deck without a display.

    Slides advance only through their own behaviours (``duration``); the run
    ends when no timer is pending or the clock passes ``limit_ms``. By default the
    deck is built from the toolkit-independent built-ins only; the named timings
    always replace whatever ``transitions`` holds under those names.
    """
    scheduler = ManualScheduler()
    if transitions is None:
        transitions = TransitionRegistry({"instant": identity_transition})
    else:
        transitions = transitions.copy()
    if behaviours is None:
        behaviours = CORE_BEHAVIOURS.copy()
    timings = DEFAULT_TRANSITION_TIMINGS if transition_timings is None else transition_timings
    for name, delay_ms in timings.items():
        transitions.register(name, delayed_transition(delay_ms))

    sources = [
        SlideSource(
            view=HeadlessView(label=definition.name or f"slide-{index + 1}"),
            attributes=dict(definition.attributes),
            name=definition.name,
        )
        for index, definition in enumerate(config.slides)
    ]
    slideshow = Slideshow(
        sources,
        config.deck,
        scheduler=scheduler,
        transitions=transitions,
        behaviours=behaviours,
    )

    timeline: List[RehearsalStep] = []

    def _record(event) -> None:
        slide = event.target
        index = slideshow.slides.index(slide)
        step = RehearsalStep(at_ms=scheduler.now_ms, index=index, name=slide.view.label)
        timeline.append(step)
        logger.info("t=%8.0fms  slide %d (%s)", step.at_ms, step.index + 1, step.name)

    for slide in slideshow.slides:
        slide.on(SlideState.AFTER_SHOW, _record)

    slideshow.start()
    while True:
        due = scheduler.next_due_ms()
        if due is None or due > limit_ms:
            break
        scheduler.run_next()
    scheduler.shutdown()

    logger.info("Rehearsal finished after %.0fms with %d step(s)", scheduler.now_ms, len(timeline))
    return timeline
