"""An animator that keeps a billboard sprite's clip in step with the camera."""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from .angle import Vector3, calculate_angle
from .direction import Direction

logger = logging.getLogger(__name__)

A = TypeVar("A")


@dataclass
class Sprite:
    """An animated 3D sprite: its facing, current clip and playback state."""

    forward: Vector3 = (0.0, 0.0, 1.0)
    animation: str = ""
    playing: bool = False
    flip_h: bool = False
    frame: int = 0

    def play(self) -> None:
        self.playing = True

    def pause(self) -> None:
        self.playing = False

    def stop(self) -> None:
        self.playing = False
        self.frame = 0


@dataclass
class Camera:
    """A 3D camera, described by the direction it faces."""

    forward: Vector3 = (0.0, 0.0, 1.0)


class Animator(abc.ABC, Generic[A]):
    """The interface every animator offers."""

    @abc.abstractmethod
    def update(self) -> None:
        """Bring the animator's state up to date."""

    @abc.abstractmethod
    def change_animation(self, animation: A) -> None:
        """Switch to another animation."""

    @abc.abstractmethod
    def is_setup(self) -> bool:
        """Whether everything needed to animate has been given."""

    @abc.abstractmethod
    def is_paused(self) -> bool:
        """Whether playback is paused."""

    @abc.abstractmethod
    def is_looping(self) -> bool:
        """Whether animations loop."""

    @property
    @abc.abstractmethod
    def direction(self) -> Direction:
        """The direction the sprite currently faces."""

    @property
    @abc.abstractmethod
    def animation_name(self) -> str:
        """The clip name for the current animation and direction."""

    @abc.abstractmethod
    def play_one_shot(self, animation: A) -> None:
        """Play ``animation`` once, without turning the sprite meanwhile."""

    @abc.abstractmethod
    def play(self) -> None:
        """Resume playback."""

    @abc.abstractmethod
    def pause(self) -> None:
        """Pause playback."""


class BillboardAnimator(Animator[A]):
    """Drives a sprite so that it shows the clip matching the camera angle."""

    def __init__(self, default_animation: A) -> None:
        self._sprite: Optional[Sprite] = None
        self._camera: Optional[Camera] = None
        self._direction = Direction.default()
        self._animation = default_animation
        self._one_shot = False
        self._looping = False
        self._paused = False
        self._on_finished: Optional[Callable[[A], None]] = None

    def set_looping(self, looping: bool) -> None:
        self._looping = looping

    def set_camera(self, camera: Camera) -> None:
        self._camera = camera

    def set_sprite(self, sprite: Sprite) -> None:
        self._sprite = sprite

    def on_animation_finished(self, callback: Callable[[A], None]) -> None:
        """Call ``callback`` with the animation when a one-shot finishes."""
        self._on_finished = callback

    def _update_animation(self, sprite: Sprite) -> None:
        name = self.animation_name
        if sprite.animation != name:
            sprite.animation = name
        if self._looping and not sprite.playing:
            sprite.play()

    def update(self) -> None:
        camera, sprite = self._camera, self._sprite
        if camera is None or sprite is None:
            logger.warning(
                "BillboardAnimator must be fully setup before use. Consider "
                "using set_camera() or set_sprite() to fix that."
            )
            return
        if self._paused:
            return

        if not self._one_shot:
            self._direction = calculate_angle(camera, sprite)
            if self._direction is Direction.RIGHT:
                sprite.flip_h = False
            elif self._direction is Direction.LEFT:
                sprite.flip_h = True
        elif not sprite.playing:
            self._one_shot = False
            if self._on_finished is not None:
                self._on_finished(self._animation)
            return

        self._update_animation(sprite)

    def is_setup(self) -> bool:
        return self._camera is not None and self._sprite is not None

    def is_looping(self) -> bool:
        return self._looping

    def is_paused(self) -> bool:
        return self._paused

    def pause(self) -> None:
        if self._paused:
            return
        if self._sprite is not None:
            self._sprite.pause()
            self._paused = True

    def play(self) -> None:
        if self._sprite is not None:
            self._sprite.play()
            self._paused = False

    def play_one_shot(self, animation: A) -> None:
        sprite = self._sprite
        if sprite is None:
            return
        self._one_shot = True
        self._animation = animation
        if sprite.playing:
            sprite.stop()
        sprite.play()

    def change_animation(self, animation: A) -> None:
        self._animation = animation
        if not self._paused and self._sprite is not None:
            self._sprite.play()

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def animation_name(self) -> str:
        return self._animation.rotate(self._direction)