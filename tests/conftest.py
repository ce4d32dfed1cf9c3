"""Shared fixtures for roulette disk tests."""

import asyncio

import pytest

from roulette_disk.core.events import EventBus
from roulette_disk.core.state import AngleState


class RecordingSleep:
    """Stand-in for asyncio.sleep that records delays and the angle at each pause."""

    def __init__(self, angle_state: AngleState | None = None) -> None:
        self.angle_state = angle_state
        self.delays: list[float] = []
        self.angles: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
        if self.angle_state is not None:
            self.angles.append(self.angle_state.angle)
        await asyncio.sleep(0)


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def angle_state() -> AngleState:
    return AngleState()


@pytest.fixture
def recording_sleep(angle_state: AngleState) -> RecordingSleep:
    return RecordingSleep(angle_state)
