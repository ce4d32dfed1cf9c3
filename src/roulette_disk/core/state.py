"""
Disk angle state for the roulette wheel.

The angle is measured in whole degrees, clockwise. Every mutation moves it by
exactly one degree and folds at the 0/360 boundary:

    clockwise:         360 -> -1 -> 0
    counterclockwise:    0 -> 361 -> 360

The sentinel values -1 and 361 only exist inside a single step and are never
observed by readers. 360 itself is a legal resting value.
"""

from enum import Enum
import logging
import threading

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Spin direction of the disk."""
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"

    @property
    def is_clockwise(self) -> bool:
        return self is Direction.CLOCKWISE


class AngleState:
    """
    Single-owner cell holding the current disk angle.

    Writers (spin tasks, keyboard nudges) go through the step methods, which
    hold an internal lock for the whole read-fold-write sequence. Readers get a
    snapshot via `current()` or the `angle` property.
    """

    FULL_TURN = 360.0

    def __init__(self, angle: float = 0.0) -> None:
        self._angle = float(angle)
        self._lock = threading.Lock()
        logger.debug(f"AngleState initialized at {self._angle}")

    @property
    def angle(self) -> float:
        """Snapshot of the current angle."""
        with self._lock:
            return self._angle

    def current(self) -> float:
        return self.angle

    def step_clockwise(self) -> float:
        """Advance by one degree. Returns the new angle."""
        with self._lock:
            if self._angle == self.FULL_TURN:
                self._angle = -1.0
            self._angle += 1
            return self._angle

    def step_counterclockwise(self) -> float:
        """Go back by one degree. Returns the new angle."""
        with self._lock:
            if self._angle == 0:
                self._angle = self.FULL_TURN + 1
            self._angle -= 1
            return self._angle

    def step(self, direction: Direction) -> float:
        if direction.is_clockwise:
            return self.step_clockwise()
        return self.step_counterclockwise()

    def reset(self) -> None:
        """Put the disk back at 0 degrees."""
        with self._lock:
            self._angle = 0.0
        logger.debug("AngleState reset")
