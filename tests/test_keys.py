"""Tests for keyboard nudges."""

from roulette_disk.input.keys import Key, KeyNudge


def test_right_arrow_turns_clockwise(angle_state):
    nudge = KeyNudge(angle_state)
    assert nudge.handle(Key.RIGHT) is True
    assert angle_state.angle == 1


def test_left_arrow_turns_counterclockwise_through_the_fold(angle_state):
    nudge = KeyNudge(angle_state)
    nudge.handle(Key.RIGHT)
    nudge.handle(Key.LEFT)
    assert angle_state.angle == 0
    nudge.handle(Key.LEFT)
    assert angle_state.angle == 360


def test_unknown_keys_are_ignored(angle_state):
    nudge = KeyNudge(angle_state)
    assert nudge.handle("space") is False
    assert nudge.handle("") is False
    assert angle_state.angle == 0
