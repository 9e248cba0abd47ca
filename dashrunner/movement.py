"""Velocity, acceleration, damping and gravity for a sprite."""

from __future__ import annotations

from dashrunner.gui import Sprite


def _damp(value: float, limit: float, deceleration: float) -> float:
    if value > 0.0:
        value = min(value, limit)
        return max(value - deceleration, 0.0)
    if value < 0.0:
        value = max(value, -limit)
        return min(value + deceleration, 0.0)
    return value


class MovementComponent:
    """Moves a sprite from a velocity that is clamped, damped and pulled down."""

    def __init__(
        self,
        sprite: Sprite,
        max_velocity: float = 100.0,
        acceleration: float = 0.0,
        deceleration: float = 0.0,
        gravity: float = 50.0,
    ):
        self.sprite = sprite
        self.max_velocity = max_velocity
        self.acceleration = acceleration
        self.deceleration = deceleration
        self.gravity = gravity
        self.velocity_x = 0.0
        self.velocity_y = 0.0

    @property
    def velocity(self) -> tuple[float, float]:
        return self.velocity_x, self.velocity_y

    def stop_velocity(self) -> None:
        self.velocity_x = 0.0
        self.velocity_y = 0.0

    def stop_velocity_x(self) -> None:
        self.velocity_x = 0.0

    def stop_velocity_y(self) -> None:
        self.velocity_y = 0.0

    def move(self, delta_time: float, x: float, y: float) -> None:
        """Accelerate in the direction (x, y)."""
        self.velocity_x += self.acceleration * x
        self.velocity_y += self.acceleration * y

    def update(self, delta_time: float) -> None:
        self.velocity_x = _damp(self.velocity_x, self.max_velocity, self.deceleration)
        self.velocity_y = _damp(self.velocity_y, self.max_velocity, self.deceleration)
        self.velocity_y += self.gravity
        self.sprite.move(self.velocity_x * delta_time, self.velocity_y * delta_time)