"""
Roulette disk controller.

Connects input events from the bus to the rotation core:

    pointer press   -> arm the drag if it lands inside the disk
    pointer release -> classify the drag and start a spin
    key press       -> one-degree nudge

The render side pulls a `Frame` snapshot once per tick; it never talks to the
spin tasks directly.
"""

import asyncio
import logging
from typing import Callable, Optional

from roulette_disk.animation.spin import SleepFunc, SpinAnimator, SpinPolicy
from roulette_disk.core.events import Event, EventBus, EventType
from roulette_disk.core.state import AngleState
from roulette_disk.graphics.base import Frame
from roulette_disk.input.gesture import GestureClassifier, SpinRequest
from roulette_disk.input.keys import KeyNudge
from roulette_disk.wheel.geometry import DiskGeometry, Point
from roulette_disk.wheel.sectors import SectorMapper

logger = logging.getLogger(__name__)


class RouletteDisk:
    """The spinning disk and everything that moves it."""

    def __init__(
        self,
        event_bus: EventBus,
        geometry: DiskGeometry | None = None,
        dead_zone_radius: float = 90.0,
        policy: SpinPolicy = SpinPolicy.REPLACE,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self.event_bus = event_bus
        self.geometry = geometry or DiskGeometry()

        self.angle_state = AngleState()
        self.mapper = SectorMapper()
        self.classifier = GestureClassifier(self.geometry.center, dead_zone_radius)
        self.animator = SpinAnimator(
            self.angle_state, policy=policy, event_bus=event_bus, sleep=sleep
        )
        self.nudge = KeyNudge(self.angle_state)

        # Drag tracking
        self._armed = False
        self._drag_start: Optional[Point] = None

        self._unsubscribers: list[Callable[[], None]] = [
            event_bus.subscribe(EventType.POINTER_PRESS, self._on_pointer_press),
            event_bus.subscribe(EventType.POINTER_RELEASE, self._on_pointer_release),
            event_bus.subscribe(EventType.KEY_PRESS, self._on_key_press),
        ]

        logger.info(
            f"RouletteDisk ready: board={self.geometry.board_size}, "
            f"disk={self.geometry.disk_width}x{self.geometry.disk_height}, "
            f"policy={self.animator.policy.value}"
        )

    @property
    def angle(self) -> float:
        return self.angle_state.angle

    @property
    def is_armed(self) -> bool:
        """True while a drag that started inside the disk is in progress."""
        return self._armed

    def frame(self) -> Frame:
        """Snapshot of what the renderer should draw this tick."""
        angle = self.angle_state.angle
        return Frame(angle=angle, number=self.mapper.number_for_angle(angle))

    def press(self, point: Point) -> bool:
        """Record a drag start. Returns True if the press landed on the disk."""
        self._armed = self.geometry.contains(point)
        if self._armed:
            self._drag_start = point
        return self._armed

    def release(self, point: Point) -> SpinRequest | None:
        """Finish a drag; starts a spin unless the gesture is ignored."""
        if not self._armed or self._drag_start is None:
            return None

        request = self.classifier.classify(self._drag_start, point)
        if request is None:
            return None

        self.animator.start(request)
        return request

    async def close(self) -> None:
        """Detach from the bus and stop any running spin."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
        self.animator.cancel()
        await self.animator.wait()

    # Event handlers

    def _on_pointer_press(self, event: Event) -> None:
        self.press(Point(event.data["x"], event.data["y"]))

    def _on_pointer_release(self, event: Event) -> None:
        self.release(Point(event.data["x"], event.data["y"]))

    def _on_key_press(self, event: Event) -> None:
        self.nudge.handle(event.data.get("key", ""))
