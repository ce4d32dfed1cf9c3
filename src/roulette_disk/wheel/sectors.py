"""Mapping from disk angle to the roulette number under the marker."""

import math

# Physical order of the pockets around a single-zero wheel
ROULETTE_NUMBERS: tuple[int, ...] = (
    0, 26, 3, 35, 12, 28, 7, 29, 18, 22, 9, 31, 14, 20, 1, 33, 16, 24, 5,
    10, 23, 8, 30, 11, 36, 13, 27, 6, 34, 17, 25, 2, 21, 4, 19, 15, 32,
)

# Angular width of one pocket, roughly 360 / 37
SECTOR_WIDTH = 9.73

# Absorbs float noise so an angle of exactly k * SECTOR_WIDTH lands in sector k
_BOUNDARY_TOLERANCE = 1e-9

RED_NUMBERS = frozenset({
    1, 3, 5, 7, 9, 12, 14, 16, 18, 19, 21, 23, 25, 27, 30, 32, 34, 36,
})

GREEN = (0, 140, 60)
RED = (200, 30, 40)
BLACK = (20, 20, 20)


def sector_index(angle: float) -> int:
    """Index into ROULETTE_NUMBERS for a normalized angle."""
    return int(math.floor(angle / SECTOR_WIDTH + _BOUNDARY_TOLERANCE))


def pocket_color(number: int) -> tuple[int, int, int]:
    """Pocket colour for a roulette number."""
    if number == 0:
        return GREEN
    return RED if number in RED_NUMBERS else BLACK


class SectorMapper:
    """
    Converts a disk angle into the number currently under the marker.

    Angle 0 is pinned to the zero pocket regardless of the table contents.
    """

    def __init__(self, numbers: tuple[int, ...] = ROULETTE_NUMBERS) -> None:
        self._numbers = tuple(numbers)

    @property
    def numbers(self) -> tuple[int, ...]:
        return self._numbers

    def number_for_angle(self, angle: float) -> int:
        if angle == 0:
            return 0
        return self._numbers[sector_index(angle)]


_default_mapper = SectorMapper()


def number_for_angle(angle: float) -> int:
    """Number under the marker using the standard wheel layout."""
    return _default_mapper.number_for_angle(angle)
