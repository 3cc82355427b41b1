"""Tests for declarative slide behaviours."""

import pytest

from webpresents.core import BehaviourRegistry, HeadlessView, SlideSource, Slideshow, coerce_attribute_value
from webpresents.infra.exceptions import ConfigurationError, UnknownTransitionError
from webpresents.state_machine import SlideState


class TestCoerceAttributeValue:
    """Number-like attribute text becomes a number."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("3000", 3000),
            (" 42 ", 42),
            ("1.5", 1.5),
            ("2.0", 2),
            ("-7", -7),
        ],
    )
    def test_numbers(self, raw, expected):
        value = coerce_attribute_value(raw)
        assert value == expected
        assert type(value) is type(expected)

    @pytest.mark.parametrize("raw", ["", "   ", "fadeToBlack", "nan", "inf", "12px"])
    def test_non_numbers_are_untouched(self, raw):
        assert coerce_attribute_value(raw) == raw

    def test_non_strings_pass_through(self):
        marker = object()
        assert coerce_attribute_value(marker) is marker


class TestBehaviourRegistry:
    """Installer registration and application."""

    def test_apply_runs_registered_installers_only(self, scheduler, transitions):
        registry = BehaviourRegistry()
        seen = []
        registry.register("spotlight", lambda slide, value: seen.append((slide.name, value)))

        Slideshow(
            [SlideSource(view=HeadlessView(), name="a", attributes={"spotlight": "2", "unknown": "x"})],
            scheduler=scheduler,
            transitions=transitions,
            behaviours=registry,
        )

        assert seen == [("a", 2)]

    def test_register_as_decorator(self):
        registry = BehaviourRegistry()

        @registry.register("glow")
        def glow(slide, value):
            pass

        assert "glow" in registry
        assert registry.get("glow") is glow
        assert list(registry) == ["glow"]

    def test_copy_is_independent(self):
        registry = BehaviourRegistry()
        registry.register("glow", lambda slide, value: None)

        clone = registry.copy()
        clone.unregister("glow")

        assert "glow" in registry
        assert "glow" not in clone


class TestDurationBehaviour:
    """``duration`` advances the deck on the scheduler."""

    def test_advances_after_duration(self, make_deck, scheduler):
        deck = make_deck("a", "b", attributes={"a": {"duration": "1000"}}).start()

        scheduler.advance(999)
        assert deck.current_index == 0

        scheduler.advance(1)
        assert deck.current_index == 1

    def test_timer_starts_at_after_show(self, make_deck, scheduler, deferred):
        deck = make_deck("a", "b", "c", transition=deferred, attributes={"b": {"duration": "1000"}}).start()

        deck.next()
        scheduler.advance(5000)
        assert scheduler.pending == 0

        deferred.finish()
        assert scheduler.pending == 1

        scheduler.advance(1000)
        assert deferred.pending == 1
        assert deferred.calls[0][1] is deck.slides[2]

    def test_leaving_early_cancels_timer(self, make_deck, scheduler):
        deck = make_deck("a", "b", "c", attributes={"a": {"duration": "1000"}}).start()

        scheduler.advance(500)
        deck.next()
        scheduler.advance(1000)

        assert deck.current_index == 1
        assert scheduler.pending == 0

    def test_zero_duration_advances_on_next_tick(self, make_deck, scheduler):
        deck = make_deck("a", "b", attributes={"a": {"duration": "0"}}).start()

        assert deck.current_index == 0
        scheduler.advance(0)
        assert deck.current_index == 1

    def test_rearms_each_time_shown(self, make_deck, scheduler):
        deck = make_deck("a", "b", attributes={"a": {"duration": "100"}}).start()
        scheduler.advance(100)
        assert deck.current_index == 1

        deck.prev()
        scheduler.advance(100)

        assert deck.current_index == 1

    @pytest.mark.parametrize("value", ["soon", "-5", True])
    def test_invalid_values_are_rejected(self, make_deck, value):
        with pytest.raises(ConfigurationError):
            make_deck("a", attributes={"a": {"duration": value}})

    def test_requires_scheduler(self, transitions):
        source = SlideSource(view=HeadlessView(), name="a", attributes={"duration": "100"})

        with pytest.raises(ConfigurationError):
            Slideshow([source], transitions=transitions)


class TestTransitionBehaviour:
    """``transition`` overrides the deck default for one slide."""

    def test_overrides_default(self, make_deck, transitions, deferred):
        calls = []
        transitions.register("slow", deferred)
        transitions.register("quick", lambda outgoing, incoming: (calls.append(outgoing), incoming.fire(SlideState.AFTER_SHOW)))

        deck = make_deck("a", "b", "c", transition="slow", attributes={"a": {"transition": "quick"}}).start()

        assert deck.slides[0].transition_func is transitions.get("quick")
        assert deck.slides[1].transition_func is deferred

        deck.next()
        assert calls == [deck.slides[0]]
        assert deck.current_index == 1

    def test_empty_value_means_instant(self, make_deck, transitions, deferred):
        transitions.register("slow", deferred)

        deck = make_deck("a", "b", transition="slow", attributes={"a": {"transition": ""}}).start()
        deck.next()

        assert deferred.pending == 0
        assert deck.current_index == 1

    def test_unknown_name_is_rejected(self, make_deck):
        with pytest.raises(UnknownTransitionError):
            make_deck("a", attributes={"a": {"transition": "warp"}})
