"""A stationary gun that scrolls with the ground and fires bullets."""

from __future__ import annotations

from collections import deque

import pygame

from dashrunner.bullet import Bullet
from dashrunner.enemy import Enemy
from dashrunner.gui import FloatRect

TEXTURE_PATH = "Resources/GFX/Turret/TurretSheet.png"


class Turret(Enemy):
    """Fires a bullet every couple of seconds; only its bullets do harm."""

    bullet_max_timer = 2.0
    expire_max_timer = 1.0

    def __init__(self, x: float, y: float, scale_x: float, scale_y: float):
        super().__init__()
        self.sprite_sheet = self._load_texture(TEXTURE_PATH)

        self.set_position(x - 64.0 * (scale_x - 1.0), y - 64.0 * (scale_y - 1.0))
        self.set_scale(scale_x, scale_y)

        self.create_hitbox_component(0.0, 48.0, 64.0 * scale_x, 40.0 * scale_y)
        self.create_animation_component(self.sprite_sheet)
        self.animation.add_animation("IDLE", 45.0, 0, 0, 3, 0, 64, 64)

        self.velocity = (-400.0, 0.0)
        self.bullets: deque[Bullet] = deque()
        self.bullet_timer = 0.0
        self.expire_timer = self.expire_max_timer

    def attack(self, rect: FloatRect) -> bool:
        return any(bullet.attack(rect) for bullet in self.bullets)

    def update_bullets(self, delta_time: float) -> None:
        """Fire, expire and move the bullets."""
        if self.bullet_timer <= 0.0:
            x, y = self.position
            self.bullets.append(Bullet(x, y + 16.0, 2.0, 2.0))
            self.bullet_timer = self.bullet_max_timer
        else:
            self.bullet_timer -= delta_time

        if self.expire_timer <= 0.0:
            self.bullets.popleft()
            self.expire_timer = self.expire_max_timer
        elif len(self.bullets) == 1:
            self.expire_timer -= delta_time

        for bullet in self.bullets:
            bullet.update(delta_time)

    def update(self, delta_time: float) -> None:
        self.update_animation(delta_time)
        vx, vy = self.velocity
        self.sprite.move(vx * delta_time, vy * delta_time)
        self.hitbox.update(delta_time)
        self.update_bullets(delta_time)

    def render(self, surface: pygame.Surface, show_hitbox: bool = False) -> None:
        self._draw_with_hitbox(surface, show_hitbox)
        for bullet in self.bullets:
            bullet.render(surface, show_hitbox)