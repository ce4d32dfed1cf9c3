"""Spin animation for the disk."""

from roulette_disk.animation.easing import delay_profile, step_delay, step_total
from roulette_disk.animation.spin import SpinAnimator, SpinPolicy

__all__ = [
    # Easing
    "delay_profile",
    "step_delay",
    "step_total",
    # Spin
    "SpinAnimator",
    "SpinPolicy",
]
