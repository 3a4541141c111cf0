import math
from types import SimpleNamespace

import pytest

from billboard_anim.angle import calculate_angle, signed_angle_degrees
from billboard_anim.direction import Direction


def facing(degrees):
    rad = math.radians(degrees)
    return SimpleNamespace(forward=(math.sin(rad), 0.0, math.cos(rad)))


CAMERA = SimpleNamespace(forward=(0.0, 0.0, 1.0))


def test_same_facing_is_back():
    assert calculate_angle(CAMERA, facing(0)) is Direction.BACK


def test_opposite_facing_is_front():
    assert calculate_angle(CAMERA, facing(180)) is Direction.FRONT


def test_positive_side_is_right():
    assert calculate_angle(CAMERA, SimpleNamespace(forward=(1.0, 0.0, 0.0))) is Direction.RIGHT


def test_negative_side_is_left():
    assert calculate_angle(CAMERA, SimpleNamespace(forward=(-1.0, 0.0, 0.0))) is Direction.LEFT


@pytest.mark.parametrize(
    "degrees, expected",
    [
        (64, Direction.BACK),
        (66, Direction.RIGHT),
        (154, Direction.RIGHT),
        (156, Direction.FRONT),
        (-64, Direction.BACK),
        (-100, Direction.LEFT),
        (-156, Direction.FRONT),
    ],
)
def test_thresholds(degrees, expected):
    assert calculate_angle(CAMERA, facing(degrees)) is expected


def test_vertical_component_and_length_are_ignored():
    tilted = SimpleNamespace(forward=(0.0, 5.0, 3.0))
    assert calculate_angle(CAMERA, tilted) is calculate_angle(CAMERA, facing(0))


def test_signed_angle_of_quarter_turn():
    assert signed_angle_degrees((0.0, 0.0, 1.0), (1.0, 0.0, 0.0)) == pytest.approx(90.0)


@pytest.mark.parametrize("degrees", [10, 45, 100, 170])
def test_signed_angle_is_antisymmetric(degrees):
    a = (0.0, 0.0, 1.0)
    b = facing(degrees).forward
    assert signed_angle_degrees(a, b) == pytest.approx(-signed_angle_degrees(b, a))
    assert signed_angle_degrees(a, b) == pytest.approx(degrees)