"""
Drag gesture classification.

Turns a pointer drag (press point, release point) into a spin request: a
direction and a step count. The direction is inferred from the drag vector
relative to the quadrant of the disk where the drag started, an approximation
of tangential motion around the centre:

    right + bottom:  clockwise iff dx < 0 and dy > 0
    right + top:     clockwise iff dx > 0 or (dy > 0 and dx < 0)
    left + bottom:   clockwise iff dx < 0 or (dx > 0 and dy < 0)
    left + top:      clockwise iff dx > 0 or (dx < 0 and dy < 0)

Screen coordinates are used, so "bottom" means y greater than the centre.
"""

from dataclasses import dataclass
import logging
import math

from roulette_disk.core.state import Direction
from roulette_disk.wheel.geometry import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpinRequest:
    """One spin produced by a completed drag.

    Attributes:
        direction: Which way the disk turns
        step_count: Straight-line drag length; the spin runs ceil(step_count) steps
    """
    direction: Direction
    step_count: float


def drag_length(move_x: float, move_y: float) -> float:
    """Straight-line length of a drag vector."""
    return math.sqrt(move_x ** 2 + move_y ** 2)


def is_clockwise(move_x: float, move_y: float, start: Point, center: Point) -> bool:
    """Quadrant-aware clockwise test for a drag starting at `start`."""
    is_right_side = start.x > center.x
    is_down_side = start.y > center.y

    if is_right_side:
        if is_down_side:
            return move_x < 0 and move_y > 0
        return move_x > 0 or (move_y > 0 and move_x < 0)

    if is_down_side:
        return move_x < 0 or (move_x > 0 and move_y < 0)
    return move_x > 0 or (move_x < 0 and move_y < 0)


class GestureClassifier:
    """Classifies drags on the disk, ignoring releases near the hub."""

    def __init__(self, center: Point, dead_zone_radius: float = 90.0) -> None:
        self.center = center
        self.dead_zone_radius = dead_zone_radius

    def classify(self, start: Point, end: Point) -> SpinRequest | None:
        return classify(start, end, self.center, self.dead_zone_radius)


def classify(
    start: Point,
    end: Point,
    board_center: Point,
    dead_zone_radius: float,
) -> SpinRequest | None:
    """
    Classify a drag from `start` to `end`.

    Returns:
        SpinRequest, or None when the gesture is ignored (released inside
        the dead zone, or no displacement at all)
    """
    if math.hypot(end.x - board_center.x, end.y - board_center.y) < dead_zone_radius:
        logger.debug(f"Gesture ignored: release {end} inside dead zone")
        return None

    move_x = end.x - start.x
    move_y = end.y - start.y
    if move_x == 0 and move_y == 0:
        logger.debug("Gesture ignored: no displacement")
        return None

    clockwise = is_clockwise(move_x, move_y, start, board_center)
    direction = Direction.CLOCKWISE if clockwise else Direction.COUNTERCLOCKWISE
    return SpinRequest(direction=direction, step_count=drag_length(move_x, move_y))
