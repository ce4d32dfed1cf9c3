"""Wheel layout: sector table and board geometry."""

from roulette_disk.wheel.geometry import DiskGeometry, Point
from roulette_disk.wheel.sectors import (
    ROULETTE_NUMBERS,
    SECTOR_WIDTH,
    SectorMapper,
    number_for_angle,
    pocket_color,
    sector_index,
)

__all__ = [
    "DiskGeometry",
    "Point",
    "ROULETTE_NUMBERS",
    "SECTOR_WIDTH",
    "SectorMapper",
    "number_for_angle",
    "pocket_color",
    "sector_index",
]
