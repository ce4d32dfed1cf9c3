"""Pointer gesture and keyboard input handling."""

from roulette_disk.input.gesture import GestureClassifier, SpinRequest, classify, is_clockwise
from roulette_disk.input.keys import Key, KeyNudge

__all__ = [
    "GestureClassifier",
    "SpinRequest",
    "classify",
    "is_clockwise",
    "Key",
    "KeyNudge",
]
