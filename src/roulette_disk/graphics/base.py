"""
Render boundary of the roulette disk.

The rotation core hands a `Frame` to a `RenderPort` once per tick. Anything
that can paint a frame (the pygame window, a test double) implements the port.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Frame:
    """What to draw for one tick.

    Attributes:
        angle: Disk rotation in degrees, clockwise
        number: Roulette number currently under the marker
    """
    angle: float
    number: int


class RenderPort(ABC):
    """Abstract base class for frame consumers."""

    @abstractmethod
    def render(self, frame: Frame) -> None:
        """Paint one frame."""
        ...
