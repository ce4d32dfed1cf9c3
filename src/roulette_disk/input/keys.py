"""Keyboard nudges: arrow keys turn the disk one degree at a time."""

import logging

from roulette_disk.core.state import AngleState, Direction

logger = logging.getLogger(__name__)


class Key:
    """Key codes understood by the disk."""
    LEFT = "left"
    RIGHT = "right"


KEY_DIRECTIONS: dict[str, Direction] = {
    Key.RIGHT: Direction.CLOCKWISE,
    Key.LEFT: Direction.COUNTERCLOCKWISE,
}


class KeyNudge:
    """Applies a single synchronous step for each recognized key press."""

    def __init__(self, angle_state: AngleState) -> None:
        self._angle_state = angle_state

    def handle(self, key: str) -> bool:
        """
        Nudge the disk for a key press.

        Returns:
            True if the key was recognized and the angle changed
        """
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return False

        angle = self._angle_state.step(direction)
        logger.debug(f"Nudged {direction.value} to {angle}")
        return True
