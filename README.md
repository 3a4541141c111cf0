# billboard-anim

This package handles animation state for billboard sprites in a 3D scene. A
billboard sprite is a flat sprite that always faces the viewer. It usually has
separate drawings for its front, its back and its side. The package works out
which of those the camera currently sees and picks the matching animation
name, such as `walk_front`, `walk_side` or `walk_back`.

## Installation

```
pip install billboard-anim
```

The package has no runtime dependencies.

## Modules

### `billboard_anim.direction`

- `Direction` is an enum with the members `FRONT`, `BACK`, `LEFT` and `RIGHT`.
- `Direction.default()` returns `Direction.FRONT`.

### `billboard_anim.animation`

- `BillboardAnimation` is an abstract base class. It declares one method, `rotate(direction)`, which returns the animation name for that direction.
- `billboard_animation(cls)` is a class decorator for enums.
  - It adds a `rotate` method that uses the lower-case member name. A member `IDLE` gives `idle_front`, `idle_back` and `idle_side`; left and right both give `_side`.
  - It registers the enum as a `BillboardAnimation`.
  - It raises `TypeError` if the class is not an enum.
- `animation_enum(default)` returns a decorator.
  - The decorator does the same as `billboard_animation`, but if the enum already defines its own `rotate`, that method is kept.
  - It also records the member named `default` as the enum's default member.
  - It raises `ValueError` if the enum has no member of that name.
- `default_animation(cls)` returns the member recorded by `animation_enum`. It raises `ValueError` if none was recorded.

### `billboard_anim.angle`

- `signed_angle_degrees(from_vector, to_vector)` returns the angle between two 3-tuples, in degrees. The sign is positive when the turn is counter-clockwise around the up axis `(0, 1, 0)`.
- `calculate_angle(camera, sprite)` takes any two objects that have a `forward` 3-tuple and returns a `Direction`.
  - It first flattens both vectors onto the ground plane and normalises them.
  - It then measures the signed angle between them:
    - below 65° gives `BACK`;
    - below 155° gives `RIGHT` if the angle is positive, otherwise `LEFT`;
    - anything larger gives `FRONT`.

### `billboard_anim.animator`

- `Sprite` is a dataclass holding a sprite's state:
  - fields `forward`, `animation`, `playing`, `flip_h` and `frame`;
  - methods `play()`, `pause()` and `stop()`. `stop()` also resets `frame` to 0.
- `Camera` is a dataclass with a single field, `forward`.
- `Animator` is the abstract interface that `BillboardAnimator` implements.
- `BillboardAnimator(default_animation)` keeps a sprite's animation in step with the camera. See "Driving an animator" below.

### `billboard_anim.node`

- `AnimatorNode(animation_type)` is a scene-node style wrapper around a `BillboardAnimator`.
- Its starting animation is `default_animation(animation_type)`, so the enum must be decorated with `animation_enum`.
- It has an attribute `loop_animation`, which is `False` by default.
- `ready()` does two things:
  - it applies `loop_animation` to the animator;
  - it wires the animation-finished notification to every callback added with `connect(callback)`.
- It also has these methods:
  - `is_set_up()`, `set_camera()`, `set_sprite()`, `update()`, `pause()`, `play()` and `is_paused()`;
  - `change_animation()` and `play_one_shot()`, which raise `TypeError` for a value that is not of `animation_type`;
  - `set_looping()`, `get_looping()` and `toggle_looping()`.

## Example

```python
from enum import Enum

from billboard_anim.animation import billboard_animation
from billboard_anim.direction import Direction


@billboard_animation
class CharacterAnimations(Enum):
    IDLE = 1
    WALK = 2
    CRAWL = 3


assert CharacterAnimations.IDLE.rotate(Direction.FRONT) == "idle_front"
assert CharacterAnimations.IDLE.rotate(Direction.LEFT) == "idle_side"
```

## Driving an animator

Create a `BillboardAnimator` with the starting animation. Give it a camera with
`set_camera` and a sprite with `set_sprite`. Then call `update()` once per
frame.

If either the camera or the sprite is missing, `is_setup()` returns false. In
that case `update()` only logs a warning. While the animator is paused,
`update()` does nothing.

On each `update()`, outside a one-shot, the animator does the following:

1. It recomputes the direction with `calculate_angle`.
2. It sets `sprite.flip_h` to `True` for `LEFT` and to `False` for `RIGHT`.
3. It sets `sprite.animation` to the current animation name.
4. If looping is on and the sprite is not playing, it starts the sprite playing.

The animator has these control methods:

- `change_animation(animation)` switches animation. If the animator is not paused, it also starts the sprite playing.
- `pause()` pauses the sprite and `play()` resumes it. `is_paused()` reports whether the animator is paused.
- `set_looping(looping)` turns looping on or off. `is_looping()` reports whether it is on.
- `play_one_shot(animation)` restarts the sprite on that animation.
  - The direction is not recomputed until the animation ends.
  - When the sprite stops playing, the next `update()` calls the callback given to `on_animation_finished(callback)` with that animation.

The animator also has two read-only properties:

- `direction` is the current `Direction`.
- `animation_name` is the full name in use, for example `idle_side`.

## What this package does not do

The package does not draw anything, and it does not load sprite sheets. It
does not connect to a game engine either. `Sprite` and `Camera` are plain
state records. Your own code must copy orientation into them and must move
`playing` and `frame` forward as the animation runs.

## Running the tests

```
pip install -e ".[test]"
pytest
```