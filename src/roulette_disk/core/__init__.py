"""Core components: angle state and event bus."""

from .state import AngleState, Direction
from .events import EventBus, Event, EventType

__all__ = ["AngleState", "Direction", "EventBus", "Event", "EventType"]
