"""Animation enums that map a state and a facing direction to a clip name."""

from __future__ import annotations

import abc
import enum
from typing import Callable, TypeVar

from .direction import Direction

E = TypeVar("E", bound=type)

_DEFAULT_ATTR = "_billboard_default_"

_SUFFIXES = {
    Direction.BACK: "_back",
    Direction.RIGHT: "_side",
    Direction.LEFT: "_side",
    Direction.FRONT: "_front",
}


class BillboardAnimation(abc.ABC):
    """Anything that can name its animation clip for a given direction."""

    @abc.abstractmethod
    def rotate(self, direction: Direction) -> str:
        """Return the clip name for this animation seen from ``direction``."""


def _require_enum(cls: object) -> None:
    if not (isinstance(cls, type) and issubclass(cls, enum.Enum)):
        raise TypeError("BillboardAnimation can only be derived for enums")


def _rotate(self: enum.Enum, direction: Direction) -> str:
    return self.name.lower() + _SUFFIXES[direction]


def billboard_animation(cls: E) -> E:
    """Give an enum a ``rotate`` method built from its member names.

    A member ``Idle`` yields ``idle_front``, ``idle_back`` and ``idle_side``.
    """
    _require_enum(cls)
    cls.rotate = _rotate
    BillboardAnimation.register(cls)
    return cls


def animation_enum(default: str) -> Callable[[E], E]:
    """Mark an enum as an animation enum whose default member is ``default``.

    A ``rotate`` method the enum defines itself is kept; otherwise one is
    generated as by :func:`billboard_animation`.
    """

    def decorate(cls: E) -> E:
        _require_enum(cls)
        if default not in cls.__members__:
            raise ValueError(f"{cls.__name__} has no member named {default!r}")
        if "rotate" in cls.__dict__:
            BillboardAnimation.register(cls)
        else:
            billboard_animation(cls)
        setattr(cls, _DEFAULT_ATTR, cls[default])
        return cls

    return decorate


def default_animation(cls: type) -> enum.Enum:
    """Return the member marked as default by :func:`animation_enum`."""
    member = getattr(cls, _DEFAULT_ATTR, None)
    if member is None:
        raise ValueError(
            f"{getattr(cls, '__name__', cls)!r} has no default animation; "
            "mark one with animation_enum(default=...)"
        )
    return member