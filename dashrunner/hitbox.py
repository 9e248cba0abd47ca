"""A collision rectangle kept at a fixed offset from a sprite."""

from __future__ import annotations

import pygame

from dashrunner.gui import FloatRect, Sprite, draw_rect

_OUTLINE_COLOR = (0, 255, 0, 255)


class HitboxComponent:
    """Tracks a rectangle offset from a sprite's position."""

    def __init__(self, sprite: Sprite, x: float, y: float, width: float, height: float):
        self.sprite = sprite
        self.offset_x = x
        self.offset_y = y
        self.rect = FloatRect(sprite.x + x, sprite.y + y, width, height)

    @property
    def position(self) -> tuple[float, float]:
        return self.rect.left, self.rect.top

    @property
    def global_bounds(self) -> FloatRect:
        return FloatRect(self.rect.left, self.rect.top, self.rect.width, self.rect.height)

    def next_position(self, velocity: tuple[float, float]) -> FloatRect:
        """The rectangle as it would be after moving by ``velocity``."""
        dx, dy = velocity
        return FloatRect(self.rect.left + dx, self.rect.top + dy, self.rect.width, self.rect.height)

    def set_position(self, x: float, y: float) -> None:
        """Place the hitbox and move the sprite to keep the offset."""
        self.rect.left = x
        self.rect.top = y
        self.sprite.position = (x - self.offset_x, y - self.offset_y)

    def intersects(self, rect: FloatRect) -> bool:
        return self.rect.intersects(rect)

    def update(self, delta_time: float) -> None:
        """Follow the sprite's current position."""
        self.rect.left = self.sprite.x + self.offset_x
        self.rect.top = self.sprite.y + self.offset_y

    def render(self, surface: pygame.Surface) -> None:
        draw_rect(surface, self.rect, None, _OUTLINE_COLOR, -1.0)