"""Frame-by-frame animations cut from a sprite sheet."""

from __future__ import annotations

import pygame

from dashrunner.gui import Sprite


class Animation:
    """One strip of frames on a sprite sheet, stepped by a timer."""

    def __init__(
        self,
        sprite: Sprite,
        sprite_sheet: pygame.Surface,
        animation_timer: float,
        start_frame_x: int,
        start_frame_y: int,
        frames_x: int,
        frames_y: int,
        width: int,
        height: int,
    ):
        self.sprite = sprite
        self.sprite_sheet = sprite_sheet
        self.animation_timer = animation_timer
        self.timer = 0.0
        self.done = False
        self.width = width
        self.height = height
        self.start_rect = pygame.Rect(start_frame_x * width, start_frame_y * height, width, height)
        self.current_rect = pygame.Rect(self.start_rect)
        self.end_rect = pygame.Rect(frames_x * width, frames_y * height, width, height)

        sprite.texture = sprite_sheet
        sprite.texture_rect = pygame.Rect(self.start_rect)

    def play(self, delta_time: float) -> bool:
        """Advance the timer; return True on the frame the strip wraps around."""
        self.done = False
        self.timer += 100.0 * delta_time
        if self.timer >= self.animation_timer:
            self.timer = 0.0
            if self.current_rect != self.end_rect:
                self.current_rect.left += self.width
            else:
                self.current_rect.left = self.start_rect.left
                self.done = True
            self.sprite.texture_rect = pygame.Rect(self.current_rect)
        return self.done

    def reset(self) -> None:
        """Go back to the first frame, ready to step on the next play."""
        self.timer = self.animation_timer
        self.current_rect = pygame.Rect(self.start_rect)


class AnimationComponent:
    """Named animations on one sprite, with an optional priority animation."""

    def __init__(self, sprite: Sprite, sprite_sheet: pygame.Surface):
        self.sprite = sprite
        self.sprite_sheet = sprite_sheet
        self.animations: dict[str, Animation] = {}
        self.last_animation: Animation | None = None
        self.priority_animation: Animation | None = None

    def add_animation(
        self,
        key: str,
        animation_timer: float,
        start_frame_x: int,
        start_frame_y: int,
        frames_x: int,
        frames_y: int,
        width: int,
        height: int,
    ) -> None:
        self.animations[key] = Animation(
            self.sprite,
            self.sprite_sheet,
            animation_timer,
            start_frame_x,
            start_frame_y,
            frames_x,
            frames_y,
            width,
            height,
        )

    def is_done(self, key: str) -> bool:
        """Whether the named animation finished its strip on its last play."""
        return self.animations[key].done

    def _switch_to(self, animation: Animation) -> None:
        if self.last_animation is not animation:
            if self.last_animation is not None:
                self.last_animation.reset()
            self.last_animation = animation

    def play(self, key: str, delta_time: float, priority: bool = False) -> bool:
        """Play the named animation unless a different priority one is running."""
        animation = self.animations[key]
        if self.priority_animation is not None:
            if self.priority_animation is animation:
                self._switch_to(animation)
                if animation.play(delta_time):
                    self.priority_animation = None
        else:
            if priority:
                self.priority_animation = animation
            self._switch_to(animation)
            animation.play(delta_time)
        return animation.done