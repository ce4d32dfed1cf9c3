"""Pygame renderer for the roulette disk."""

import logging

import pygame

from roulette_disk.config.settings import DisplaySettings
from roulette_disk.graphics.base import Frame, RenderPort
from roulette_disk.wheel.geometry import DiskGeometry

logger = logging.getLogger(__name__)

HELP_LINES = (
    ("Use your arrows <- -> to rotate", 500),
    ("Use your mouse to spin the disk", 550),
)


def _load_font(names: str, size: int, bold: bool = False, italic: bool = False) -> pygame.font.Font:
    """System font by name, falling back to pygame's default font."""
    try:
        return pygame.font.SysFont(names, size, bold=bold, italic=italic)
    except Exception as e:
        logger.debug(f"Font {names} failed: {e}")
        return pygame.font.Font(None, size)


class DiskRenderer(RenderPort):
    """
    Paints the board onto a pygame surface.

    Layout follows the classic board: the current number large at the top,
    the rotated disk in the middle, and two help lines at the bottom.
    """

    def __init__(
        self,
        screen: pygame.Surface,
        artwork: pygame.Surface,
        geometry: DiskGeometry,
        config: DisplaySettings | None = None,
    ) -> None:
        self.screen = screen
        self.geometry = geometry
        self.config = config or DisplaySettings()

        # Per-pixel alpha keeps rotation edges smooth
        self._artwork = artwork.convert_alpha()

        if not pygame.font.get_init():
            pygame.font.init()
        self._number_font = _load_font("serif,timesnewroman", self.config.number_font_size, bold=True)
        self._subtitle_font = _load_font("verdana,dejavusans", self.config.subtitle_font_size, italic=True)

        self._last_angle: float | None = None
        self._rotated: pygame.Surface | None = None

    def render(self, frame: Frame) -> None:
        self.screen.fill(self.config.bg_color)
        self._draw_current_number(frame.number)
        self._draw_disk(frame.angle)
        self._draw_marker()
        self._draw_information_subtitle()

    def _draw_current_number(self, number: int) -> None:
        text = self._number_font.render(str(number), True, self.config.number_color)
        center_x = self.geometry.board_size // 2
        self.screen.blit(text, text.get_rect(midtop=(center_x, 10)))

    def _draw_disk(self, angle: float) -> None:
        # Rotation is only redone when the angle moved since the last frame
        if self._rotated is None or angle != self._last_angle:
            # pygame rotates counterclockwise for positive angles
            self._rotated = pygame.transform.rotozoom(self._artwork, -angle, 1.0)
            self._last_angle = angle

        center = self.geometry.center
        rect = self._rotated.get_rect(center=(center.x, center.y))
        self.screen.blit(self._rotated, rect)

    def _draw_marker(self) -> None:
        """Small triangle at 12 o'clock pointing at the pocket being read."""
        center = self.geometry.center
        top = self.geometry.origin.y
        points = [
            (center.x - 9, top - 14),
            (center.x + 9, top - 14),
            (center.x, top + 4),
        ]
        pygame.draw.polygon(self.screen, self.config.marker_color, points)

    def _draw_information_subtitle(self) -> None:
        for line, y in HELP_LINES:
            text = self._subtitle_font.render(line, True, self.config.subtitle_color)
            self.screen.blit(text, (160, y))
