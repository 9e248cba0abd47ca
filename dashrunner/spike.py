"""A spike hazard that scrolls with the ground."""

from __future__ import annotations

import pygame

from dashrunner.enemy import Enemy
from dashrunner.gui import FloatRect

TEXTURE_PATH = "Resources/GFX/Spikes/SpikesSheet.png"


class Spike(Enemy):
    """Hurts whatever overlaps its full tile."""

    def __init__(self, x: float, y: float, scale_x: float, scale_y: float):
        super().__init__()
        self.sprite_sheet = self._load_texture(TEXTURE_PATH)

        self.set_position(x - 64.0 * (scale_x - 1.0), y - 64.0 * (scale_y - 1.0))
        self.set_scale(scale_x, scale_y)

        self.create_hitbox_component(0.0, 0.0, 64.0 * scale_x, 64.0 * scale_y)
        self.create_animation_component(self.sprite_sheet)
        self.animation.add_animation("IDLE", 20.0, 0, 0, 3, 0, 64, 64)

        self.velocity = (-400.0, 0.0)

    def attack(self, rect: FloatRect) -> bool:
        return self.hitbox.intersects(rect)

    def update(self, delta_time: float) -> None:
        self.update_animation(delta_time)
        vx, vy = self.velocity
        self.sprite.move(vx * delta_time, vy * delta_time)
        self.hitbox.update(delta_time)

    def render(self, surface: pygame.Surface, show_hitbox: bool = False) -> None:
        self._draw_with_hitbox(surface, show_hitbox)