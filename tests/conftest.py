"""Shared fixtures for slideshow tests."""

from typing import List

import pytest

from webpresents.config.models import SlideshowOptions
from webpresents.core import HeadlessView, SlideSource, Slideshow, TransitionRegistry
from webpresents.services import ManualScheduler
from webpresents.state_machine import SlideState


class DeferredTransition:
    """Transition that only completes when the test says so."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def __call__(self, outgoing, incoming) -> None:
        self.calls.append((outgoing, incoming))

    @property
    def pending(self) -> int:
        return len(self.calls)

    def finish(self) -> None:
        _, incoming = self.calls.pop(0)
        incoming.fire(SlideState.AFTER_SHOW)


def make_sources(*names, **attributes_by_name):
    return [
        SlideSource(view=HeadlessView(label=name), attributes=attributes_by_name.get(name, {}), name=name)
        for name in names
    ]


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def transitions() -> TransitionRegistry:
    return TransitionRegistry()


@pytest.fixture
def deferred() -> DeferredTransition:
    return DeferredTransition()


@pytest.fixture
def make_deck(scheduler, transitions):
    """Build a deck of HeadlessView slides named after the arguments."""

    def _make(*names, attributes=None, **options):
        sources = make_sources(*names, **(attributes or {}))
        return Slideshow(
            sources,
            SlideshowOptions(**options),
            scheduler=scheduler,
            transitions=transitions,
        )

    return _make
