"""
Event bus for the roulette disk.

Provides pub/sub messaging between the window, the disk controller and the
spin animator. Handlers are plain callables invoked synchronously.
"""

from dataclasses import dataclass, field
from typing import Any, Callable
from enum import Enum, auto
from collections import defaultdict
import logging
import time

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Input events
    POINTER_PRESS = auto()
    POINTER_RELEASE = auto()
    KEY_PRESS = auto()

    # Spin events
    SPIN_STARTED = auto()
    SPIN_FINISHED = auto()
    SPIN_CANCELLED = auto()

    # System events
    TICK = auto()  # Redraw tick
    SHUTDOWN = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created
    """
    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.time)


Handler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for component communication.

    A handler that raises is logged and skipped; the remaining handlers
    still run.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)
        self._event_history: list[Event] = []
        self._history_limit = history_limit

    def subscribe(self, event_type: EventType, handler: Handler) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Emit an event to every handler of its type."""
        self._add_to_history(event)

        for handler in list(self._handlers.get(event.type, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type.name}: {e}")

    def _add_to_history(self, event: Event) -> None:
        """Add event to history, maintaining limit."""
        if event.type is EventType.TICK:
            return
        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history.pop(0)

    def get_history(
        self,
        event_type: EventType | None = None,
        limit: int = 10
    ) -> list[Event]:
        """Get recent events from history (ticks are not recorded)."""
        history = self._event_history
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]

    def clear_history(self) -> None:
        """Clear event history."""
        self._event_history.clear()


# Convenience functions for creating common events
def pointer_press_event(x: float, y: float, source: str = "mouse") -> Event:
    """Create a pointer press event."""
    return Event(EventType.POINTER_PRESS, data={"x": x, "y": y}, source=source)


def pointer_release_event(x: float, y: float, source: str = "mouse") -> Event:
    """Create a pointer release event."""
    return Event(EventType.POINTER_RELEASE, data={"x": x, "y": y}, source=source)


def key_press_event(key: str, source: str = "keyboard") -> Event:
    """Create a key press event."""
    return Event(EventType.KEY_PRESS, data={"key": key}, source=source)


def tick_event(delta: float, frame: int) -> Event:
    """Create a redraw tick event."""
    return Event(EventType.TICK, data={"delta": delta, "frame": frame})
