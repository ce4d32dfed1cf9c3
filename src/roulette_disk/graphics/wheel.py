"""Disk artwork: procedural wheel rendering and image loading."""

from pathlib import Path
import logging
import math

import numpy as np
from numpy.typing import NDArray
import pygame

from roulette_disk.wheel.sectors import ROULETTE_NUMBERS, pocket_color

logger = logging.getLogger(__name__)

# Transparent key colour for pixels outside the disk
COLORKEY = (0, 0, 0)

RIM_COLOR = (110, 70, 35)
HUB_COLOR = (25, 80, 45)
HUB_RING_COLOR = (200, 170, 60)

# Radii as a fraction of the disk radius
RIM_INNER = 0.93
POCKET_INNER = 0.55
LABEL_RADIUS = 0.82


def wheel_buffer(
    diameter: int,
    numbers: tuple[int, ...] = ROULETTE_NUMBERS,
) -> NDArray[np.uint8]:
    """
    Paint the wheel as an RGB buffer of shape (diameter, diameter, 3).

    Pocket k is centred at (k + 0.5) sector widths counterclockwise from the
    top, so turning the disk clockwise by `angle` brings pocket
    `floor(angle / width)` under a marker at 12 o'clock.
    """
    radius = diameter / 2
    ys, xs = np.mgrid[0:diameter, 0:diameter]
    dx = xs + 0.5 - radius
    dy = ys + 0.5 - radius
    dist = np.hypot(dx, dy)

    # Counterclockwise from the top, screen coordinates
    theta = np.degrees(np.arctan2(-dx, -dy)) % 360
    sector = (theta / (360 / len(numbers))).astype(int) % len(numbers)

    palette = np.array([pocket_color(n) for n in numbers], dtype=np.uint8)
    buffer = palette[sector]

    buffer[dist >= radius * RIM_INNER] = RIM_COLOR
    buffer[dist < radius * POCKET_INNER] = HUB_COLOR
    ring = (dist >= radius * (POCKET_INNER - 0.02)) & (dist < radius * POCKET_INNER)
    buffer[ring] = HUB_RING_COLOR
    buffer[dist >= radius] = COLORKEY

    return buffer


def _label_font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.SysFont("dejavusans,arial,helvetica", size, bold=True)
    except Exception as e:
        logger.debug(f"System font lookup failed: {e}")
        return pygame.font.Font(None, size)


def build_wheel_surface(
    diameter: int,
    numbers: tuple[int, ...] = ROULETTE_NUMBERS,
) -> pygame.Surface:
    """Procedural wheel surface with pocket numbers drawn on it."""
    buffer = wheel_buffer(diameter, numbers)
    surface = pygame.surfarray.make_surface(np.ascontiguousarray(buffer.swapaxes(0, 1)))
    surface.set_colorkey(COLORKEY)

    radius = diameter / 2
    font = _label_font(max(10, diameter // 28))
    sector_width = 360 / len(numbers)

    for k, number in enumerate(numbers):
        center_deg = (k + 0.5) * sector_width
        rad = math.radians(center_deg)
        x = radius - math.sin(rad) * radius * LABEL_RADIUS
        y = radius - math.cos(rad) * radius * LABEL_RADIUS

        label = font.render(str(number), True, (240, 240, 240))
        label = pygame.transform.rotate(label, center_deg)
        surface.blit(label, label.get_rect(center=(x, y)))

    return surface


def load_disk_artwork(image_path: Path | None, diameter: int) -> pygame.Surface:
    """
    Load the disk image, falling back to the procedural wheel.

    The image is not converted here, so this works before a display exists.
    """
    if image_path is not None:
        try:
            surface = pygame.image.load(str(image_path))
            logger.info(f"Loaded disk image {image_path} ({surface.get_width()}x{surface.get_height()})")
            return surface
        except (pygame.error, FileNotFoundError) as e:
            logger.warning(f"Unable to load disk image {image_path}: {e}; using procedural wheel")

    return build_wheel_surface(diameter)
