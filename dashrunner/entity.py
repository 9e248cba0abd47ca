"""The base class for everything that moves and is drawn in the world."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame

from dashrunner.animation import AnimationComponent
from dashrunner.gui import FloatRect, Sprite
from dashrunner.hitbox import HitboxComponent
from dashrunner.movement import MovementComponent


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Entity(ABC):
    """A sprite with optional hitbox, movement and animation components."""

    def __init__(self) -> None:
        self.sprite = Sprite()
        self.ground_check = True
        self.hitbox: HitboxComponent | None = None
        self.movement: MovementComponent | None = None
        self.animation: AnimationComponent | None = None

    @property
    def position(self) -> tuple[float, float]:
        if self.hitbox is not None:
            return self.hitbox.position
        return self.sprite.position

    @property
    def global_bounds(self) -> FloatRect:
        if self.hitbox is not None:
            return self.hitbox.global_bounds
        return self.sprite.global_bounds

    def grid_position(self, grid_size: int) -> tuple[int, int]:
        """The grid cell of the position, truncating towards zero."""
        x, y = self.position
        return _truncating_div(int(x), grid_size), _truncating_div(int(y), grid_size)

    def next_position_bounds(self, delta_time: float) -> FloatRect:
        """Where the hitbox will be after this frame; (-1, -1, -1, -1) without one."""
        if self.hitbox is not None and self.movement is not None:
            vx, vy = self.movement.velocity
            return self.hitbox.next_position((vx * delta_time, vy * delta_time))
        return FloatRect(-1.0, -1.0, -1.0, -1.0)

    def set_scale(self, scale_x: float, scale_y: float) -> None:
        self.sprite.scale_x = scale_x
        self.sprite.scale_y = scale_y

    def create_hitbox_component(self, x: float, y: float, width: float, height: float) -> None:
        self.hitbox = HitboxComponent(self.sprite, x, y, width, height)

    def create_movement_component(
        self, max_velocity: float, acceleration: float, deceleration: float, gravity: float
    ) -> None:
        self.movement = MovementComponent(self.sprite, max_velocity, acceleration, deceleration, gravity)

    def create_animation_component(self, sprite_sheet: pygame.Surface) -> None:
        self.animation = AnimationComponent(self.sprite, sprite_sheet)

    def set_position(self, x: float, y: float) -> None:
        if self.hitbox is not None:
            self.hitbox.set_position(x, y)
        else:
            self.sprite.position = (x, y)

    def move(self, delta_time: float, x: float, y: float) -> None:
        if self.movement is not None:
            self.movement.move(delta_time, x, y)

    def stop_velocity(self) -> None:
        if self.movement is not None:
            self.movement.stop_velocity()

    def stop_velocity_x(self) -> None:
        if self.movement is not None:
            self.movement.stop_velocity_x()

    def stop_velocity_y(self) -> None:
        if self.movement is not None:
            self.movement.stop_velocity_y()

    def _draw_with_hitbox(self, surface: pygame.Surface, show_hitbox: bool) -> None:
        self.sprite.draw(surface)
        if self.hitbox is not None and show_hitbox:
            self.hitbox.render(surface)

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the entity by one frame."""

    @abstractmethod
    def render(self, surface: pygame.Surface, show_hitbox: bool = False) -> None:
        """Draw the entity, and its hitbox when asked."""