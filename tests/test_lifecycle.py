"""Tests for the slide lifecycle and the Slide event wrapper."""

import pytest

from webpresents.infra.exceptions import LifecycleError
from webpresents.state_machine import SlideLifecycle, SlideState


class TestSlideLifecycle:
    """The lifecycle only moves around its cycle."""

    def test_starts_hidden(self):
        assert SlideLifecycle().slide_state is SlideState.AFTER_HIDE

    def test_full_cycle(self):
        lifecycle = SlideLifecycle()
        for state in (SlideState.SHOW, SlideState.AFTER_SHOW, SlideState.HIDE, SlideState.AFTER_HIDE):
            assert lifecycle.move_to(state) is state
        assert lifecycle.move_to(SlideState.SHOW) is SlideState.SHOW

    @pytest.mark.parametrize(
        "target",
        [SlideState.AFTER_SHOW, SlideState.HIDE, SlideState.AFTER_HIDE],
    )
    def test_out_of_cycle_steps_are_rejected(self, target):
        lifecycle = SlideLifecycle()
        with pytest.raises(LifecycleError):
            lifecycle.move_to(target)
        assert lifecycle.slide_state is SlideState.AFTER_HIDE


class TestSlideFire:
    """Slide.fire stamps state before notifying listeners."""

    def test_listeners_observe_new_state(self, make_deck):
        deck = make_deck("a")
        slide = deck.get("a")
        observed = []
        for state in SlideState:
            slide.on(state, lambda event: observed.append((event.name, event.target.state)))

        slide.fire(SlideState.SHOW).fire(SlideState.AFTER_SHOW).fire(SlideState.HIDE).fire(SlideState.AFTER_HIDE)

        assert observed == [
            ("show", SlideState.SHOW),
            ("afterShow", SlideState.AFTER_SHOW),
            ("hide", SlideState.HIDE),
            ("afterHide", SlideState.AFTER_HIDE),
        ]

    def test_out_of_cycle_fire_raises_before_listeners(self, make_deck):
        deck = make_deck("a")
        slide = deck.get("a")
        calls = []
        slide.on("afterShow", lambda event: calls.append(event))

        with pytest.raises(LifecycleError):
            slide.fire("afterShow")
        assert calls == []
        assert slide.state is SlideState.AFTER_HIDE

    def test_custom_events_do_not_touch_state(self, make_deck):
        deck = make_deck("a")
        slide = deck.get("a")
        payloads = []
        slide.on("cue", lambda event: payloads.append(event.payload))

        slide.fire("cue", 3)

        assert payloads == [3]
        assert slide.state is SlideState.AFTER_HIDE
