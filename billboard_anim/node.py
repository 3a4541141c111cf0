"""A scene-node style wrapper that exposes an animator and a finished signal."""

from __future__ import annotations

from typing import Callable, Generic, List, TypeVar

from .animation import default_animation
from .animator import BillboardAnimator, Camera, Sprite

A = TypeVar("A")


class AnimatorNode(Generic[A]):
    """A node owning a :class:`BillboardAnimator` for one animation enum."""

    def __init__(self, animation_type: type) -> None:
        self.animation_type = animation_type
        self.loop_animation = False
        self._animator: BillboardAnimator[A] = BillboardAnimator(
            default_animation(animation_type)
        )
        self._listeners: List[Callable[[A], None]] = []

    def _check(self, animation: A) -> None:
        if not isinstance(animation, self.animation_type):
            raise TypeError(
                f"expected {self.animation_type.__name__}, got {type(animation).__name__}"
            )

    def _emit_finished(self, animation: A) -> None:
        for listener in list(self._listeners):
            listener(animation)

    def ready(self) -> None:
        """Apply the exported settings and wire up the finished signal."""
        self._animator.set_looping(self.loop_animation)
        self._animator.on_animation_finished(self._emit_finished)

    def connect(self, callback: Callable[[A], None]) -> None:
        """Connect ``callback`` to the animation-finished signal."""
        self._listeners.append(callback)

    def is_set_up(self) -> bool:
        return self._animator.is_setup()

    def change_animation(self, animation: A) -> None:
        self._check(animation)
        self._animator.change_animation(animation)

    def set_looping(self, looping: bool) -> None:
        self._animator.set_looping(looping)

    def get_looping(self) -> bool:
        return self._animator.is_looping()

    def toggle_looping(self) -> None:
        self._animator.set_looping(not self._animator.is_looping())

    def set_camera(self, camera: Camera) -> None:
        self._animator.set_camera(camera)

    def set_sprite(self, sprite: Sprite) -> None:
        self._animator.set_sprite(sprite)

    def update(self) -> None:
        self._animator.update()

    def pause(self) -> None:
        self._animator.pause()

    def play(self) -> None:
        self._animator.play()

    def play_one_shot(self, animation: A) -> None:
        self._check(animation)
        self._animator.play_one_shot(animation)

    def is_paused(self) -> bool:
        return self._animator.is_paused()