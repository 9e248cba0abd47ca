"""Geometry, sprite and layout helpers shared by the interface widgets."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache

import pygame

Color = tuple[int, int, int, int]


@dataclass
class FloatRect:
    """An axis-aligned rectangle with floating-point coordinates."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def _span_x(self) -> tuple[float, float]:
        return min(self.left, self.right), max(self.left, self.right)

    def _span_y(self) -> tuple[float, float]:
        return min(self.top, self.bottom), max(self.top, self.bottom)

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies inside; right and bottom edges excluded."""
        min_x, max_x = self._span_x()
        min_y, max_y = self._span_y()
        return min_x <= x < max_x and min_y <= y < max_y

    def intersects(self, other: FloatRect) -> bool:
        """True when the two rectangles overlap by a non-zero area."""
        a_left, a_right = self._span_x()
        a_top, a_bottom = self._span_y()
        b_left, b_right = other._span_x()
        b_top, b_bottom = other._span_y()
        left, right = max(a_left, b_left), min(a_right, b_right)
        top, bottom = max(a_top, b_top), min(a_bottom, b_bottom)
        return left < right and top < bottom


class Sprite:
    """A positioned, scaled view onto a region of a texture surface."""

    def __init__(self, texture: pygame.Surface | None = None, x: float = 0.0, y: float = 0.0):
        self.texture = texture
        self.texture_rect: pygame.Rect | None = None if texture is None else texture.get_rect()
        self.x = x
        self.y = y
        self.scale_x = 1.0
        self.scale_y = 1.0

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    @position.setter
    def position(self, value: tuple[float, float]) -> None:
        self.x, self.y = value

    def _source_rect(self) -> pygame.Rect | None:
        if self.texture is None:
            return None
        if self.texture_rect is None:
            return self.texture.get_rect()
        return pygame.Rect(self.texture_rect)

    @property
    def global_bounds(self) -> FloatRect:
        rect = self._source_rect()
        if rect is None:
            return FloatRect(self.x, self.y, 0.0, 0.0)
        return FloatRect(self.x, self.y, rect.width * self.scale_x, rect.height * self.scale_y)

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the visible texture region onto ``surface``."""
        rect = self._source_rect()
        if rect is None:
            return
        rect = rect.clip(self.texture.get_rect())
        if rect.width <= 0 or rect.height <= 0:
            return
        image = self.texture.subsurface(rect)
        if self.scale_x != 1.0 or self.scale_y != 1.0:
            size = (
                max(0, round(rect.width * abs(self.scale_x))),
                max(0, round(rect.height * abs(self.scale_y))),
            )
            if size[0] == 0 or size[1] == 0:
                return
            image = pygame.transform.scale(image, size)
        surface.blit(image, (round(self.x), round(self.y)))


@lru_cache(maxsize=None)
def load_font(path: str | None, size: int) -> pygame.font.Font:
    """Load a font of the given pixel size; ``None`` selects the default font."""
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


def _blend(surface: pygame.Surface, box: pygame.Rect, color: Color, border: int) -> None:
    if box.width <= 0 or box.height <= 0:
        return
    layer = pygame.Surface(box.size, pygame.SRCALPHA)
    pygame.draw.rect(layer, color, layer.get_rect(), border)
    surface.blit(layer, box.topleft)


def draw_rect(
    surface: pygame.Surface,
    rect: FloatRect,
    fill: Color | None = None,
    outline: Color | None = None,
    thickness: float = 0.0,
) -> None:
    """Draw a filled and optionally outlined rectangle, honouring alpha.

    A positive thickness puts the outline outside the rectangle, a negative
    one inside it.
    """
    box = pygame.Rect(round(rect.left), round(rect.top), round(rect.width), round(rect.height))
    if fill is not None:
        _blend(surface, box, fill, 0)
    if outline is not None and thickness:
        border = max(1, round(abs(thickness)))
        if thickness > 0:
            box = box.inflate(2 * border, 2 * border)
        _blend(surface, box, outline, border)


def percent_to_pixels_x(percent: float, resolution: tuple[int, int]) -> float:
    """Whole pixels covered by ``percent`` of the resolution's width."""
    width, _ = resolution
    return float(math.floor(width * (percent / 100.0)))


def percent_to_pixels_y(percent: float, resolution: tuple[int, int]) -> float:
    """Whole pixels covered by ``percent`` of the resolution's height."""
    _, height = resolution
    return float(math.floor(height * (percent / 100.0)))


def calculate_text_size(constant: int, resolution: tuple[int, int]) -> int:
    """Character size scaled to the resolution: (width + height) // constant."""
    width, height = resolution
    return (width + height) // constant