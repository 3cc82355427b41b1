"""Tests for the synchronous event bus."""

import pytest

from webpresents.services import EventBus
from webpresents.state_machine import SlideState


class TestEventBus:
    """Registration, ordering and dispatch semantics."""

    def test_listeners_run_in_registration_order(self):
        bus = EventBus()
        calls = []
        bus.on("tick", lambda event: calls.append("first"))
        bus.on("tick", lambda event: calls.append("second"))
        bus.on("other", lambda event: calls.append("other"))

        bus.fire("tick")

        assert calls == ["first", "second"]

    def test_event_carries_owner_and_payload(self):
        owner = object()
        bus = EventBus(owner=owner)
        received = []
        bus.on("tick", received.append)

        bus.fire("tick", {"n": 1})

        event = received[0]
        assert event.name == "tick"
        assert event.target is owner
        assert event.payload == {"n": 1}

    def test_once_listener_runs_a_single_time(self):
        bus = EventBus()
        calls = []
        bus.once("tick", lambda event: calls.append(event.name))

        bus.fire("tick")
        bus.fire("tick")

        assert calls == ["tick"]
        assert bus.listener_count("tick") == 0

    def test_listener_added_during_fire_waits_for_next_fire(self):
        bus = EventBus()
        calls = []

        def add_late(event):
            calls.append("outer")
            bus.on("tick", lambda inner: calls.append("late"))

        bus.once("tick", add_late)

        bus.fire("tick")
        assert calls == ["outer"]

        bus.fire("tick")
        assert calls == ["outer", "late"]

    def test_off_removes_a_single_listener(self):
        bus = EventBus()
        calls = []

        def keep(event):
            calls.append("keep")

        def drop(event):
            calls.append("drop")

        bus.on("tick", keep)
        bus.on("tick", drop)
        bus.off("tick", drop)
        bus.fire("tick")

        assert calls == ["keep"]

    def test_off_without_listener_clears_event(self):
        bus = EventBus()
        bus.on("tick", lambda event: None)
        bus.on("tick", lambda event: None)

        bus.off("tick")

        assert bus.listener_count("tick") == 0

    def test_listener_removed_mid_fire_is_skipped(self):
        bus = EventBus()
        calls = []

        def second(event):
            calls.append("second")

        bus.on("tick", lambda event: bus.off("tick", second))
        bus.on("tick", second)

        bus.fire("tick")

        assert calls == []

    def test_listener_error_propagates_and_stops_dispatch(self):
        bus = EventBus()
        calls = []

        def broken(event):
            raise RuntimeError("setup failed")

        bus.on("tick", broken)
        bus.on("tick", lambda event: calls.append("after"))

        with pytest.raises(RuntimeError, match="setup failed"):
            bus.fire("tick")
        assert calls == []

    def test_enum_and_string_names_are_interchangeable(self):
        bus = EventBus()
        calls = []
        bus.on(SlideState.AFTER_SHOW, lambda event: calls.append(event.name))

        bus.fire("afterShow")

        assert calls == ["afterShow"]
