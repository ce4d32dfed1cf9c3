"""Tests for the event bus."""

from roulette_disk.core.events import (
    Event,
    EventBus,
    EventType,
    key_press_event,
    pointer_press_event,
    tick_event,
)


def test_handlers_receive_their_event_type(event_bus):
    received = []
    event_bus.subscribe(EventType.KEY_PRESS, received.append)

    event_bus.emit(key_press_event("left"))
    event_bus.emit(pointer_press_event(1, 2))

    assert [e.data["key"] for e in received] == ["left"]


def test_unsubscribe(event_bus):
    received = []
    unsubscribe = event_bus.subscribe(EventType.KEY_PRESS, received.append)
    unsubscribe()

    event_bus.emit(key_press_event("left"))

    assert received == []


def test_failing_handler_does_not_stop_others(event_bus):
    received = []

    def broken(event: Event) -> None:
        raise RuntimeError("boom")

    event_bus.subscribe(EventType.KEY_PRESS, broken)
    event_bus.subscribe(EventType.KEY_PRESS, received.append)

    event_bus.emit(key_press_event("right"))

    assert len(received) == 1


def test_history_skips_ticks_and_respects_limit():
    bus = EventBus(history_limit=3)
    for frame in range(5):
        bus.emit(tick_event(0.02, frame))
    for key in ["a", "b", "c", "d"]:
        bus.emit(key_press_event(key))

    history = bus.get_history(limit=10)
    assert [e.data["key"] for e in history] == ["b", "c", "d"]

    bus.clear_history()
    assert bus.get_history() == []


def test_pointer_event_payload():
    event = pointer_press_event(450, 460)
    assert event.type is EventType.POINTER_PRESS
    assert event.data == {"x": 450, "y": 460}
    assert event.source == "mouse"
    assert event.timestamp > 0
