"""The overlay shown while a game or editor is paused."""

from __future__ import annotations

import pygame

from dashrunner.button import TEXT_COLOR, Button
from dashrunner.gui import FloatRect, calculate_text_size, draw_rect, load_font, percent_to_pixels_y

_BACKGROUND_COLOR = (20, 20, 20, 100)
_CONTAINER_COLOR = (20, 20, 20, 200)


class PauseMenu:
    """A dimmed backdrop with a central panel of buttons."""

    title = "PAUSED"

    def __init__(self, resolution: tuple[int, int], font: str | None = None):
        width, height = resolution
        self.font = font
        self.background = FloatRect(0.0, 0.0, float(width), float(height))
        container_width = width / 4
        self.container = FloatRect(
            width / 2 - container_width / 2,
            percent_to_pixels_y(4.63, resolution),
            container_width,
            height - percent_to_pixels_y(9.26, resolution),
        )
        self._title_font = load_font(font, calculate_text_size(45, resolution))
        title_width, _ = self._title_font.size(self.title)
        self.title_position = (
            self.container.left + self.container.width / 2 - title_width / 2,
            self.container.top + percent_to_pixels_y(1.85, resolution),
        )
        self.buttons: dict[str, Button] = {}

    def add_button(self, key: str, text: str, char_size: int, width: float, height: float, y: float) -> None:
        x = self.container.left + self.container.width / 2 - width / 2
        self.buttons[key] = Button(x, y, width, height, text, self.font, char_size)

    def is_button_pressed(self, key: str) -> bool:
        """Whether the named button is pressed; unknown names raise KeyError."""
        return self.buttons[key].is_pressed()

    def update(self, mouse_position: tuple[float, float], mouse_pressed: bool) -> None:
        for button in self.buttons.values():
            button.update(mouse_position, mouse_pressed)

    def render(self, surface: pygame.Surface) -> None:
        draw_rect(surface, self.background, _BACKGROUND_COLOR)
        draw_rect(surface, self.container, _CONTAINER_COLOR)
        image = self._title_font.render(self.title, True, TEXT_COLOR[:3])
        x, y = self.title_position
        surface.blit(image, (round(x), round(y)))
        for button in self.buttons.values():
            button.render(surface)