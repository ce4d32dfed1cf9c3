"""Board and disk geometry used for hit-testing pointer input."""

from dataclasses import dataclass
from typing import NamedTuple


class Point(NamedTuple):
    """2D pixel coordinate in the disk's local space (y grows downward)."""
    x: float
    y: float


@dataclass(frozen=True)
class DiskGeometry:
    """
    Layout of the disk on a square board.

    The disk is centred on the board; its origin is computed with integer
    division so odd leftovers go to the right/bottom edge.

    Attributes:
        board_size: Side length of the square board
        disk_width: Width of the disk image
        disk_height: Height of the disk image
    """
    board_size: int = 600
    disk_width: int = 380
    disk_height: int = 380

    @property
    def origin(self) -> Point:
        return Point(
            (self.board_size - self.disk_width) // 2,
            (self.board_size - self.disk_height) // 2,
        )

    @property
    def center(self) -> Point:
        """Board centre, shared by the dead-zone and quadrant tests."""
        half = self.board_size // 2
        return Point(half, half)

    def contains(self, point: Point) -> bool:
        """Strict test that a point lies inside the disk bounds."""
        origin = self.origin
        horizontally = origin.x < point.x < origin.x + self.disk_width
        vertically = origin.y < point.y < origin.y + self.disk_height
        return horizontally and vertically
