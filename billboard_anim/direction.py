"""The four directions a billboard sprite can face relative to the camera."""

from __future__ import annotations

import enum


class Direction(enum.Enum):
    """Represents all four directions of a sprite."""

    FRONT = enum.auto()
    BACK = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()

    @classmethod
    def default(cls) -> Direction:
        """Return the direction a fresh animator starts with."""
        return cls.FRONT