"""Rendering for the roulette disk."""

from roulette_disk.graphics.base import Frame, RenderPort

__all__ = ["Frame", "RenderPort"]
