"""Declarative slide behaviours.

A slide attribute such as ``duration="3000"`` installs the behaviour
registered under ``duration`` when the deck is built, calling
``installer(slide, 3000)``. Number-like values are converted to numbers.
Installers wire themselves up through the slide's event bus only, so each
one is self-contained and the order they run in does not matter.

Register extra behaviours with::

    @BEHAVIOURS.register("spotlight")
    def spotlight(slide, value):
        slide.on(SlideState.SHOW, ...)
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, Mapping, Optional

from webpresents.infra.exceptions import ConfigurationError
from webpresents.services import TimerHandle
from webpresents.state_machine import SlideState

if TYPE_CHECKING:
    from .slide import Slide

logger = logging.getLogger("deck.behaviours")

Installer = Callable[["Slide", Any], None]


def coerce_attribute_value(raw: Any) -> Any:
    """Convert number-like attribute text to int/float; leave anything else untouched."""
    if not isinstance(raw, str):
        return raw
    text = raw.strip()
    if not text:
        return raw
    try:
        number = float(text)
    except ValueError:
        return raw
    if not math.isfinite(number):
        return raw
    return int(number) if number.is_integer() else number


class BehaviourRegistry:
    """Attribute name -> installer lookup."""

    def __init__(self, installers: Optional[Dict[str, Installer]] = None) -> None:
        self._installers: Dict[str, Installer] = dict(installers or {})

    def register(self, name: str, installer: Optional[Installer] = None):
        """Register an installer; usable directly or as a decorator."""

        def decorator(func: Installer) -> Installer:
            self._installers[name] = func
            logger.debug("Registered behaviour: %s -> %s", name, getattr(func, "__name__", func))
            return func

        if installer is None:
            return decorator
        return decorator(installer)

    def unregister(self, name: str) -> None:
        self._installers.pop(name, None)

    def get(self, name: str) -> Optional[Installer]:
        return self._installers.get(name)

    def names(self) -> list[str]:
        return sorted(self._installers)

    def copy(self) -> "BehaviourRegistry":
        return BehaviourRegistry(self._installers)

    def apply(self, slide: "Slide", attributes: Mapping[str, Any]) -> list[str]:
        """Run the installer for every registered attribute. Returns the names applied."""
        applied = []
        for name, raw_value in attributes.items():
            installer = self._installers.get(name)
            if installer is None:
                continue
            value = coerce_attribute_value(raw_value)
            logger.debug("Applying behaviour %s=%r to %s", name, value, slide)
            installer(slide, value)
            applied.append(name)
        return applied

    def __contains__(self, name: object) -> bool:
        return name in self._installers

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


BEHAVIOURS = BehaviourRegistry()


def apply_behaviours(
    slide: "Slide",
    attributes: Mapping[str, Any],
    registry: Optional[BehaviourRegistry] = None,
) -> list[str]:
    return (registry or BEHAVIOURS).apply(slide, attributes)


@BEHAVIOURS.register("duration")
def duration(slide: "Slide", duration_ms: Any) -> None:
    """Advance to the next slide ``duration_ms`` after this one is fully shown.

    Usage: ``duration: 3000`` for a 3 second slide. Leaving the slide early
    cancels the pending advance.
    """
    if isinstance(duration_ms, bool) or not isinstance(duration_ms, (int, float)) or duration_ms < 0:
        raise ConfigurationError(f"duration must be a non-negative number of milliseconds, got {duration_ms!r}")
    scheduler = slide.scheduler
    if scheduler is None:
        raise ConfigurationError(f"duration on {slide} needs a scheduler on the slideshow")

    pending: Optional[TimerHandle] = None

    def _arm(event) -> None:
        nonlocal pending
        pending = scheduler.schedule_once(duration_ms, slide.complete)

    def _disarm(event) -> None:
        nonlocal pending
        if pending is not None:
            pending.cancel()
            pending = None

    slide.on(SlideState.AFTER_SHOW, _arm).on(SlideState.HIDE, _disarm)


@BEHAVIOURS.register("transition")
def transition(slide: "Slide", name: Any) -> None:
    """Use the named transition when leaving this slide."""
    slide.set_transition(name)


# Snapshot of the toolkit-independent built-ins, taken before any UI layer registers more.
CORE_BEHAVIOURS = BEHAVIOURS.copy()
