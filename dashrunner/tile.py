"""Single tiles of a scrolling tile map."""

from __future__ import annotations

from enum import IntEnum

import pygame

from dashrunner.gui import FloatRect


class TileType(IntEnum):
    DEFAULT = 0
    FRONT = 1
    SPIKE = 2
    TURRET = 3


class Tile:
    """A textured square on the grid that scrolls to the left."""

    def __init__(
        self,
        x: float,
        y: float,
        grid_size: float,
        texture: pygame.Surface | None,
        texture_rect: pygame.Rect,
        collision: bool = False,
        tile_type: int = TileType.DEFAULT,
        small_offset_x: float = 0.0,
    ):
        self.shape = FloatRect(x * grid_size + small_offset_x, y * grid_size, grid_size, grid_size)
        self.texture = texture
        self.texture_rect = pygame.Rect(texture_rect)
        self.velocity = (-400.0, 0.0)
        self.collision = bool(collision)
        self.tile_type = int(tile_type)

    @property
    def position(self) -> tuple[float, float]:
        return self.shape.left, self.shape.top

    @property
    def global_bounds(self) -> FloatRect:
        return FloatRect(self.shape.left, self.shape.top, self.shape.width, self.shape.height)

    def next_global_bounds(self, delta_time: float) -> FloatRect:
        """The bounds the tile will have after moving for ``delta_time``."""
        vx, vy = self.velocity
        return FloatRect(
            self.shape.left + vx * delta_time,
            self.shape.top + vy * delta_time,
            self.shape.width,
            self.shape.height,
        )

    def intersects(self, bounds: FloatRect, delta_time: float | None = None) -> bool:
        """Overlap with ``bounds`` now, or after ``delta_time`` when given."""
        own = self.global_bounds if delta_time is None else self.next_global_bounds(delta_time)
        return own.intersects(bounds)

    def as_string(self) -> str:
        """Texture position, collision flag and type, as stored in map files."""
        return f"{self.texture_rect.left} {self.texture_rect.top} {int(self.collision)} {self.tile_type}"

    def update(self, delta_time: float) -> None:
        vx, vy = self.velocity
        self.shape.left += vx * delta_time
        self.shape.top += vy * delta_time

    def render(self, surface: pygame.Surface) -> None:
        if self.texture is None:
            return
        rect = self.texture_rect.clip(self.texture.get_rect())
        size = (round(self.shape.width), round(self.shape.height))
        if rect.width <= 0 or rect.height <= 0 or size[0] <= 0 or size[1] <= 0:
            return
        image = pygame.transform.scale(self.texture.subsurface(rect), size)
        surface.blit(image, (round(self.shape.left), round(self.shape.top)))