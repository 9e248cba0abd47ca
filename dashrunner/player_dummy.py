"""The idle runner shown on the main menu."""

from __future__ import annotations

import pygame

from dashrunner.entity import Entity


class PlayerDummy(Entity):
    """A still, animated figure with no hitbox or movement."""

    def __init__(self, sprite_sheet: pygame.Surface, x: float, y: float, scale_x: float, scale_y: float):
        super().__init__()
        self.set_position(x, y)
        self.set_scale(scale_x, scale_y)
        self.create_animation_component(sprite_sheet)
        self.animation.add_animation("IDLE", 40.0, 0, 0, 7, 0, 64, 128)

    def update_animation(self, delta_time: float) -> None:
        self.animation.play("IDLE", delta_time)

    def update(self, delta_time: float) -> None:
        self.update_animation(delta_time)

    def render(self, surface: pygame.Surface, show_hitbox: bool = False) -> None:
        self._draw_with_hitbox(surface, show_hitbox)