"""Sprite-sheet animations driven by frame time."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from quadkit.geometry import Rect, Vec2

__all__ = ["Animation", "AnimationFrame", "AnimatedSprite"]


@dataclass
class Animation:
    """One animation: a row of a sprite sheet with a frame count and speed."""

    name: str
    row: int
    frames: int
    fps: int


@dataclass
class AnimationFrame:
    """The part of the sprite sheet to draw and the size to draw it at."""

    source_rect: Rect
    dest_size: Vec2


class AnimatedSprite:
    """Tracks which tile of a sprite sheet to show for a set of animations."""

    def __init__(
        self,
        tile_width: int,
        tile_height: int,
        animations: Iterable[Animation],
        playing: bool,
    ) -> None:
        self._tile_width = float(tile_width)
        self._tile_height = float(tile_height)
        self._animations = list(animations)
        self._current_animation = 0
        self._time = 0.0
        self._frame = 0
        self.playing = playing

    def set_animation(self, animation: int) -> None:
        """Switch to animation number ``animation``, keeping the frame in range."""
        selected = self._animations[animation]
        self._current_animation = animation
        self._frame %= selected.frames

    def current_animation(self) -> int:
        """Index of the animation being shown."""
        return self._current_animation

    def set_frame(self, frame: int) -> None:
        """Jump to ``frame`` of the current animation."""
        self._frame = frame

    def update(self, frame_time: float) -> None:
        """Advance the animation by ``frame_time`` seconds if it is playing."""
        animation = self._animations[self._current_animation]
        if self.playing:
            self._time += frame_time
            if self._time > 1.0 / animation.fps:
                self._frame += 1
                self._time = 0.0
        self._frame %= animation.frames

    def frame(self) -> AnimationFrame:
        """The source rectangle and destination size of the current frame."""
        animation = self._animations[self._current_animation]
        return AnimationFrame(
            source_rect=Rect(
                self._tile_width * self._frame,
                self._tile_height * animation.row,
                self._tile_width,
                self._tile_height,
            ),
            dest_size=Vec2(self._tile_width, self._tile_height),
        )