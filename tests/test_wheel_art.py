"""Tests for the procedural wheel artwork."""

from pathlib import Path

import numpy as np
import pygame

from roulette_disk.graphics import wheel
from roulette_disk.wheel.sectors import GREEN, RED


def test_buffer_shape_and_transparent_corners():
    buffer = wheel.wheel_buffer(120)

    assert buffer.shape == (120, 120, 3)
    assert buffer.dtype == np.uint8
    assert tuple(buffer[0, 0]) == wheel.COLORKEY
    assert tuple(buffer[60, 60]) == wheel.HUB_COLOR


def test_zero_pocket_sits_just_left_of_twelve_oclock():
    buffer = wheel.wheel_buffer(200)

    # Row 25 is 75 px above the centre, inside the pocket ring
    assert tuple(buffer[25, 95]) == GREEN
    # Just right of the top is the last pocket (32, red)
    assert tuple(buffer[25, 105]) == RED


def test_missing_image_falls_back_to_procedural_wheel(monkeypatch):
    fallback = pygame.Surface((40, 40))
    monkeypatch.setattr(wheel, "build_wheel_surface", lambda diameter: fallback)

    surface = wheel.load_disk_artwork(Path("does-not-exist.png"), 40)

    assert surface is fallback


def test_no_image_configured_uses_procedural_wheel(monkeypatch):
    fallback = pygame.Surface((40, 40))
    monkeypatch.setattr(wheel, "build_wheel_surface", lambda diameter: fallback)

    assert wheel.load_disk_artwork(None, 40) is fallback
