"""Tests for the angle to roulette number mapping."""

import pytest

from roulette_disk.wheel.sectors import (
    BLACK,
    GREEN,
    RED,
    ROULETTE_NUMBERS,
    SECTOR_WIDTH,
    SectorMapper,
    number_for_angle,
    pocket_color,
    sector_index,
)


def test_table_holds_every_number_once():
    assert len(ROULETTE_NUMBERS) == 37
    assert sorted(ROULETTE_NUMBERS) == list(range(37))


def test_zero_angle_is_always_zero():
    assert number_for_angle(0) == 0
    assert SectorMapper(tuple([7] * 37)).number_for_angle(0) == 0


@pytest.mark.parametrize("k", range(1, 37))
def test_sector_boundaries_are_inclusive(k):
    assert number_for_angle(SECTOR_WIDTH * k) == ROULETTE_NUMBERS[k]


@pytest.mark.parametrize("angle, expected", [
    (9.8, 26),
    (19.5, 3),
    (5, 0),
    (9.72, 0),
    (100, 9),
    (359, 32),
    (360, 32),
])
def test_known_angles(angle, expected):
    assert number_for_angle(angle) == expected


def test_sector_index_floors():
    assert sector_index(9.72) == 0
    assert sector_index(9.74) == 1
    assert sector_index(360) == 36


def test_custom_table_is_used_off_zero():
    mapper = SectorMapper(tuple(range(100, 137)))
    assert mapper.number_for_angle(15) == 101


def test_pocket_colors():
    assert pocket_color(0) == GREEN
    assert pocket_color(32) == RED
    assert pocket_color(26) == BLACK


def test_whole_degrees_match_plain_truncation():
    for angle in range(0, 361):
        assert sector_index(angle) == int(angle / SECTOR_WIDTH)
