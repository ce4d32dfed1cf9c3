"""Ease-out timing for disk spins.

A spin is a run of one-degree steps with a pause after each. The first pause
is short, the following ones grow linearly with progress, so the wheel starts
fast and slows down toward the end of its step budget.
"""

import math

# Pause after the very first step (ms)
BASE_DELAY_MS = 3

# Pause after the last step approaches this value (ms)
MAX_DELAY_MS = 10


def step_delay(i: float, step_count: float) -> int:
    """
    Pause in whole milliseconds after step `i` of a spin.

    Args:
        i: Zero-based step index
        step_count: Total step budget of the spin

    Returns:
        Delay in milliseconds, never negative
    """
    delay = BASE_DELAY_MS
    if i != 0:
        step_count = abs(step_count)
        if step_count / i > 0.99:
            delay = int(i * MAX_DELAY_MS / step_count)
    return max(0, delay)


def step_total(step_count: float) -> int:
    """Number of steps a spin runs: every whole i with 0 <= i < step_count."""
    return max(0, math.ceil(abs(step_count)))


def delay_profile(step_count: float) -> list[int]:
    """All per-step delays for a spin, in order."""
    return [step_delay(i, step_count) for i in range(step_total(step_count))]
