"""Work out which way a sprite faces as seen from the camera."""

from __future__ import annotations

import math
from typing import Protocol, Tuple

from .direction import Direction

Vector3 = Tuple[float, float, float]

SIDE_ANGLE = 155.0
BACK_ANGLE = 65.0

_UP: Vector3 = (0.0, 1.0, 0.0)


class Oriented(Protocol):
    """An object whose ``forward`` is the z column of its global basis."""

    forward: Vector3


def _dot(a: Vector3, b: Vector3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vector3, b: Vector3) -> Vector3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _flatten(vector: Vector3) -> Vector3:
    x, _, z = vector
    length = math.hypot(x, z)
    if length == 0.0:
        return (0.0, 0.0, 0.0)
    return (x / length, 0.0, z / length)


def signed_angle_degrees(from_vector: Vector3, to_vector: Vector3) -> float:
    """Return the angle in degrees from one vector to another around the up axis."""
    cross = _cross(from_vector, to_vector)
    unsigned = math.atan2(math.sqrt(_dot(cross, cross)), _dot(from_vector, to_vector))
    if _dot(cross, _UP) < 0:
        unsigned = -unsigned
    return math.degrees(unsigned)


def calculate_angle(camera: Oriented, sprite: Oriented) -> Direction:
    """Return the direction of ``sprite`` as seen through ``camera``."""
    signed = signed_angle_degrees(_flatten(camera.forward), _flatten(sprite.forward))
    angle = abs(signed)
    if angle < BACK_ANGLE:
        return Direction.BACK
    if angle < SIDE_ANGLE:
        return Direction.RIGHT if signed > 0.0 else Direction.LEFT
    return Direction.FRONT