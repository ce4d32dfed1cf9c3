"""Roulette disk: a drag-to-spin roulette wheel."""

__version__ = "0.1.0"
