"""Tests for the disk controller wiring input to the rotation core."""

import pytest

from roulette_disk.core.events import (
    EventType,
    key_press_event,
    pointer_press_event,
    pointer_release_event,
)
from roulette_disk.disk import RouletteDisk
from roulette_disk.graphics.base import Frame
from roulette_disk.wheel.geometry import DiskGeometry, Point


@pytest.fixture
def disk(event_bus, recording_sleep):
    disk = RouletteDisk(event_bus, geometry=DiskGeometry(600, 380, 380), sleep=recording_sleep)
    recording_sleep.angle_state = disk.angle_state
    return disk


def test_initial_frame(disk):
    assert disk.frame() == Frame(angle=0, number=0)


def test_press_inside_disk_arms_drag(disk):
    assert disk.press(Point(450, 450)) is True
    assert disk.is_armed


def test_press_outside_disk_disarms_drag(disk):
    disk.press(Point(450, 450))
    assert disk.press(Point(50, 50)) is False
    assert not disk.is_armed
    assert disk.release(Point(200, 200)) is None


def test_press_on_disk_edge_is_outside(disk):
    # Disk spans 110..490 on both axes, edges excluded
    assert disk.press(Point(110, 300)) is False
    assert disk.press(Point(300, 490)) is False
    assert disk.press(Point(111, 489)) is True


def test_release_without_press_is_ignored(disk):
    assert disk.release(Point(440, 470)) is None


def test_release_in_dead_zone_is_ignored(disk):
    disk.press(Point(450, 450))
    assert disk.release(Point(350, 320)) is None
    assert not disk.animator.is_spinning
    assert disk.angle == 0


@pytest.mark.asyncio
async def test_drag_spins_disk(disk):
    disk.press(Point(450, 450))
    request = disk.release(Point(440, 470))
    await disk.animator.wait()

    # sqrt(10^2 + 20^2) = 22.36 -> 23 clockwise steps
    assert request.step_count == pytest.approx(22.36, abs=0.01)
    assert disk.angle == 23
    assert disk.frame() == Frame(angle=23, number=3)


@pytest.mark.asyncio
async def test_pointer_events_from_bus_start_spin(disk, event_bus):
    event_bus.emit(pointer_press_event(450, 450))
    event_bus.emit(pointer_release_event(470, 470))
    assert disk.animator.is_spinning
    await disk.animator.wait()

    # Down-right from the right/bottom quadrant is counterclockwise
    assert disk.angle == 361 - 29
    assert len(event_bus.get_history(EventType.SPIN_FINISHED)) == 1


def test_key_events_nudge(disk, event_bus):
    event_bus.emit(key_press_event("right"))
    assert disk.angle == 1
    event_bus.emit(key_press_event("left"))
    event_bus.emit(key_press_event("left"))
    assert disk.angle == 360
    event_bus.emit(key_press_event("up"))
    assert disk.angle == 360


@pytest.mark.asyncio
async def test_close_detaches_from_bus(disk, event_bus):
    disk.press(Point(450, 450))
    disk.release(Point(100, 450))
    await disk.close()

    assert not disk.animator.is_spinning
    angle = disk.angle
    event_bus.emit(key_press_event("right"))
    assert disk.angle == angle
