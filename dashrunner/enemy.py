"""The base class for hazards that can hit the player."""

from __future__ import annotations

from abc import abstractmethod
from functools import lru_cache
from pathlib import Path

import pygame

from dashrunner.entity import Entity
from dashrunner.gui import FloatRect


@lru_cache(maxsize=None)
def _cached_texture(path: str) -> pygame.Surface:
    return pygame.image.load(path)


class Enemy(Entity):
    """An entity with an idle animation that can attack a rectangle."""

    @staticmethod
    def _load_texture(path: str | Path) -> pygame.Surface:
        resolved = Path(path).resolve()
        if not resolved.is_file():
            raise FileNotFoundError(f"Could not load texture: {path}")
        return _cached_texture(str(resolved))

    @abstractmethod
    def attack(self, rect: FloatRect) -> bool:
        """Whether the enemy hits ``rect``."""

    def update_animation(self, delta_time: float) -> None:
        if self.animation is not None:
            self.animation.play("IDLE", delta_time)