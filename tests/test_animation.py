import enum

import pytest

from billboard_anim.animation import (
    BillboardAnimation,
    animation_enum,
    billboard_animation,
    default_animation,
)
from billboard_anim.direction import Direction


@animation_enum("Idle")
class CharacterAnimations(enum.Enum):
    Idle = enum.auto()
    Walk = enum.auto()
    Crawl = enum.auto()


def test_animation_rotation():
    animation = default_animation(CharacterAnimations)
    assert animation is CharacterAnimations.Idle
    assert animation.rotate(Direction.FRONT) == "idle_front"
    assert animation.rotate(Direction.BACK) == "idle_back"
    assert animation.rotate(Direction.LEFT) == "idle_side"
    assert animation.rotate(Direction.RIGHT) == "idle_side"


def test_default_animation_is_marked_member():
    assert default_animation(CharacterAnimations) is CharacterAnimations.Idle


def test_members_are_billboard_animations():
    default = default_animation(CharacterAnimations)
    assert isinstance(default, BillboardAnimation)
    assert isinstance(CharacterAnimations.Walk, BillboardAnimation)
    assert CharacterAnimations.Walk.rotate(Direction.default()) == "walk_front"


def test_derived_enum_without_default():
    @billboard_animation
    class States(enum.Enum):
        Crawl = 1

    assert States.Crawl.rotate(Direction.BACK) == "crawl_back"
    with pytest.raises(ValueError):
        default_animation(States)


def test_manual_implementation():
    class States(BillboardAnimation):
        def rotate(self, direction):
            if direction is Direction.FRONT:
                return "idle_front"
            if direction is Direction.BACK:
                return "idle_back"
            return "idle_side"

    assert States().rotate(Direction.default()) == "idle_front"


def test_abstract_rotate_must_be_implemented():
    class Incomplete(BillboardAnimation):
        pass

    with pytest.raises(TypeError):
        BillboardAnimation()
    with pytest.raises(TypeError):
        Incomplete()


def test_derive_rejects_non_enum():
    with pytest.raises(TypeError):
        billboard_animation(object)


def test_animation_enum_rejects_unknown_default():
    with pytest.raises(ValueError):

        @animation_enum("Jump")
        class States(enum.Enum):
            Idle = 1


def test_animation_enum_keeps_own_rotate():
    @animation_enum("Idle")
    class States(enum.Enum):
        Idle = 1

        def rotate(self, direction):
            return "custom"

    member = default_animation(States)
    assert member is States.Idle
    assert member.rotate(Direction.default()) == "custom"
    assert isinstance(member, BillboardAnimation)