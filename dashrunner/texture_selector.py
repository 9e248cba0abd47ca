"""A panel for picking one grid cell from a tile sheet."""

from __future__ import annotations

import pygame

from dashrunner.button import Button
from dashrunner.gui import FloatRect, Sprite, draw_rect

_BOUNDS_FILL = (50, 50, 50, 100)
_BOUNDS_OUTLINE = (255, 255, 255, 200)
_SELECTOR_OUTLINE = (255, 0, 0, 255)


class TextureSelector:
    """Shows a tile sheet and tracks the grid cell under the mouse."""

    key_time_max = 2.0

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        grid_size: float,
        texture_sheet: pygame.Surface,
        font: str | None,
        text: str,
    ):
        self.bounds = FloatRect(x, y, width, height)
        self.sheet = Sprite(texture_sheet, x, y)

        sheet_bounds = self.sheet.global_bounds
        if sheet_bounds.width > self.bounds.width:
            self.sheet.texture_rect = pygame.Rect(0, 0, int(self.bounds.width), int(sheet_bounds.height))
        sheet_bounds = self.sheet.global_bounds
        if sheet_bounds.height > self.bounds.height:
            self.sheet.texture_rect = pygame.Rect(0, 0, int(sheet_bounds.width), int(self.bounds.height))

        self.grid_size = grid_size
        self.selector = FloatRect(x, y, grid_size, grid_size)
        self.mouse_position_grid = (0, 0)
        self.texture_rect = pygame.Rect(0, 0, int(grid_size), int(grid_size))
        self.active = False
        self.hidden = True
        self.key_time = 0.0
        self.hide_button = Button(1810.0, 20.0, 64.0, 64.0, text, font, 32)

    def consume_key_time(self) -> bool:
        """Return True and restart the cooldown once it has elapsed."""
        if self.key_time >= self.key_time_max:
            self.key_time = 0.0
            return True
        return False

    def update_key_time(self, delta_time: float) -> None:
        if self.key_time < self.key_time_max:
            self.key_time += 10.0 * delta_time

    def update(self, delta_time: float, mouse_position: tuple[float, float], mouse_pressed: bool) -> None:
        self.update_key_time(delta_time)
        self.hide_button.update(mouse_position, mouse_pressed)

        if self.hide_button.is_pressed() and self.consume_key_time():
            self.hidden = not self.hidden

        if self.hidden:
            return

        self.active = False
        mx, my = mouse_position
        if self.bounds.contains(mx, my):
            self.active = True
            step = int(self.grid_size)
            grid_x = int(mx - self.bounds.left) // step
            grid_y = int(my - self.bounds.top) // step
            self.mouse_position_grid = (grid_x, grid_y)
            self.selector.left = self.bounds.left + grid_x * self.grid_size
            self.selector.top = self.bounds.top + grid_y * self.grid_size
            self.texture_rect.left = int(self.selector.left - self.bounds.left)
            self.texture_rect.top = int(self.selector.top - self.bounds.top)

    def render(self, surface: pygame.Surface) -> None:
        if not self.hidden:
            draw_rect(surface, self.bounds, _BOUNDS_FILL, _BOUNDS_OUTLINE, 1.0)
            self.sheet.draw(surface)
            if self.active:
                draw_rect(surface, self.selector, None, _SELECTOR_OUTLINE, 1.0)
        self.hide_button.render(surface)