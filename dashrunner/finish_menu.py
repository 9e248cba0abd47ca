"""The overlay shown when a run ends, with a name field for the score."""

from __future__ import annotations

import pygame

from dashrunner.button import TEXT_COLOR, Button
from dashrunner.gui import (
    FloatRect,
    calculate_text_size,
    draw_rect,
    load_font,
    percent_to_pixels_x,
    percent_to_pixels_y,
)
from dashrunner.textfield import TextField

_BACKGROUND_COLOR = (20, 20, 20, 100)
_CONTAINER_COLOR = (20, 20, 20, 200)


class FinishMenu:
    """Shows the final score, a name field and buttons."""

    title = "FINISHED!"

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
        centre_x = self.container.left + self.container.width / 2

        self._title_font = load_font(font, calculate_text_size(45, resolution))
        title_width, _ = self._title_font.size(self.title)
        self.title_position = (
            centre_x - title_width / 2,
            self.container.top + percent_to_pixels_y(1.85, resolution),
        )

        self._score_font = load_font(font, calculate_text_size(60, resolution))
        self.score_text = "Score:"
        self.score_position = (
            centre_x - title_width / 2,
            self.container.top + percent_to_pixels_y(9.26, resolution),
        )

        field_width = percent_to_pixels_x(10.4, resolution)
        self.field = TextField(
            centre_x - field_width / 2,
            self.container.top + percent_to_pixels_y(37.04, resolution),
            field_width,
            percent_to_pixels_y(9.26, resolution),
            font,
            calculate_text_size(100, resolution),
        )
        self.buttons: dict[str, Button] = {}

    @property
    def field_text(self) -> str:
        return self.field.text

    def set_score(self, value: int) -> None:
        self.score_text = f"Score: {value}"

    def add_button(self, key: str, text: str, char_size: int, width: float, height: float, y: float) -> None:
        x = self.container.left + self.container.width / 2 - width / 2
        self.buttons[key] = Button(x, y, width, height, text, self.font, char_size)

    def is_button_pressed(self, key: str) -> bool:
        """Whether the named button is pressed; unknown names raise KeyError."""
        return self.buttons[key].is_pressed()

    def handle_event(self, event: pygame.event.Event) -> None:
        self.field.handle_event(event)

    def update(self, mouse_position: tuple[float, float], mouse_pressed: bool, delta_time: float) -> None:
        for button in self.buttons.values():
            button.update(mouse_position, mouse_pressed)
        self.field.update(mouse_position, mouse_pressed, delta_time)

    def render(self, surface: pygame.Surface) -> None:
        draw_rect(surface, self.background, _BACKGROUND_COLOR)
        draw_rect(surface, self.container, _CONTAINER_COLOR)
        for font, text, (x, y) in (
            (self._title_font, self.title, self.title_position),
            (self._score_font, self.score_text, self.score_position),
        ):
            surface.blit(font.render(text, True, TEXT_COLOR[:3]), (round(x), round(y)))
        for button in self.buttons.values():
            button.render(surface)
        self.field.render(surface)