"""The runner controlled by the player."""

from __future__ import annotations

from enum import IntEnum

import pygame

from dashrunner.entity import Entity


class PlayerState(IntEnum):
    RUN = 0
    JUMP = 1
    FALL = 2


class Player(Entity):
    """A moving, animated entity with run, jump and fall strips."""

    def __init__(self, sprite_sheet: pygame.Surface, x: float, y: float, scale_x: float, scale_y: float):
        super().__init__()
        self.state = PlayerState.RUN

        self.set_position(x, y)
        self.set_scale(scale_x, scale_y)

        self.create_hitbox_component(0.0, 20.0, 60.0 * scale_x, 108.0 * scale_y)
        self.create_movement_component(600.0, 30.0, 5.0, 50.0)
        self.create_animation_component(sprite_sheet)

        self.animation.add_animation("RUN", 20.0, 0, 1, 7, 1, 64, 128)
        self.animation.add_animation("JUMP", 20.0, 0, 2, 7, 2, 64, 128)
        self.animation.add_animation("FALL", 20.0, 0, 3, 7, 3, 64, 128)

    @property
    def velocity(self) -> tuple[float, float]:
        return self.movement.velocity

    def update_animation(self, delta_time: float) -> None:
        self.animation.play(self.state.name, delta_time)

    def update(self, delta_time: float) -> None:
        self.movement.update(delta_time)
        self.update_animation(delta_time)
        self.hitbox.update(delta_time)

    def render(self, surface: pygame.Surface, show_hitbox: bool = False) -> None:
        self._draw_with_hitbox(surface, show_hitbox)