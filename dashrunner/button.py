"""A clickable rectangular button with a centred caption."""

from __future__ import annotations

from enum import IntEnum

import pygame

from dashrunner.gui import Color, FloatRect, draw_rect, load_font

TEXT_COLOR: Color = (235, 148, 20, 255)
NORMAL_COLOR: Color = (23, 52, 55, 255)
HOVER_COLOR: Color = (32, 72, 77, 255)
PRESSED_COLOR: Color = (43, 96, 102, 255)


class ButtonState(IntEnum):
    NORMAL = 0
    HOVER = 1
    PRESSED = 2


class Button:
    """A button that tracks hover and press state from the mouse."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        text: str,
        font: str | None = None,
        font_size: int = 30,
        font_color: Color = TEXT_COLOR,
        normal_color: Color = NORMAL_COLOR,
        hover_color: Color = HOVER_COLOR,
        pressed_color: Color = PRESSED_COLOR,
        button_id: int = 0,
    ):
        self.shape = FloatRect(x, y, width, height)
        self.font = font
        self.font_size = font_size
        self._font = load_font(font, font_size)
        self.text = text
        self.text_color = font_color
        self.normal_color = normal_color
        self.hover_color = hover_color
        self.pressed_color = pressed_color
        self.fill_color = normal_color
        self.state = ButtonState.NORMAL
        self.button_id = button_id

        text_width, text_height = self._font.size(self.text)
        self.text_position = (
            x + width / 2 - text_width / 2,
            y + height / 2 - text_height / 2,
        )

    def is_pressed(self) -> bool:
        return self.state is ButtonState.PRESSED

    def reset_text_position(self) -> None:
        """Centre the caption horizontally again, keeping its vertical place."""
        text_width, _ = self._font.size(self.text)
        self.text_position = (
            self.shape.left + self.shape.width / 2 - text_width / 2,
            self.text_position[1],
        )

    def update(self, mouse_position: tuple[float, float], mouse_pressed: bool) -> None:
        x, y = mouse_position
        if self.shape.contains(x, y):
            self.state = ButtonState.PRESSED if mouse_pressed else ButtonState.HOVER
        else:
            self.state = ButtonState.NORMAL
        self.fill_color = {
            ButtonState.NORMAL: self.normal_color,
            ButtonState.HOVER: self.hover_color,
            ButtonState.PRESSED: self.pressed_color,
        }[self.state]

    def render(self, surface: pygame.Surface) -> None:
        draw_rect(surface, self.shape, self.fill_color)
        if self.text:
            image = self._font.render(self.text, True, self.text_color[:3])
            x, y = self.text_position
            surface.blit(image, (round(x), round(y)))