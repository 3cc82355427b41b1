"""Slide lifecycle: AfterHide -> Show -> AfterShow -> Hide -> AfterHide."""

from __future__ import annotations

import logging
from enum import Enum

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from webpresents.infra.exceptions import LifecycleError

logger = logging.getLogger("deck.lifecycle")


class SlideState(str, Enum):
    """Lifecycle states. The values double as the event names fired on a slide."""

    AFTER_HIDE = "afterHide"
    SHOW = "show"
    AFTER_SHOW = "afterShow"
    HIDE = "hide"


LIFECYCLE_EVENTS = frozenset(state.value for state in SlideState)


class SlideLifecycle(StateMachine):
    """Cyclic lifecycle of a single slide."""

    hidden = State("AfterHide", value=SlideState.AFTER_HIDE.value, initial=True)
    showing = State("Show", value=SlideState.SHOW.value)
    shown = State("AfterShow", value=SlideState.AFTER_SHOW.value)
    hiding = State("Hide", value=SlideState.HIDE.value)

    begin_show = hidden.to(showing)
    finish_show = showing.to(shown)
    begin_hide = shown.to(hiding)
    finish_hide = hiding.to(hidden)

    def move_to(self, target: SlideState) -> SlideState:
        """Advance one step of the cycle; the step must end in ``target``."""
        trigger = _TRIGGERS[SlideState(target)]
        previous = self.slide_state
        try:
            self.send(trigger)
        except TransitionNotAllowed as exc:
            raise LifecycleError(
                f"Cannot enter '{SlideState(target).value}' from '{previous.value}'"
            ) from exc
        logger.debug("Lifecycle %s -> %s", previous.value, self.slide_state.value)
        return self.slide_state

    @property
    def slide_state(self) -> SlideState:
        return SlideState(self.current_state.value)


_TRIGGERS = {
    SlideState.SHOW: "begin_show",
    SlideState.AFTER_SHOW: "finish_show",
    SlideState.HIDE: "begin_hide",
    SlideState.AFTER_HIDE: "finish_hide",
}
