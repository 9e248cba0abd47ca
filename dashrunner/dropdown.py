"""A drop-down list built from buttons."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from dashrunner.button import Button


class DropDown:
    """A button showing the active choice that opens a list of options."""

    key_time_max = 2.0

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        font: str | None,
        font_size: int,
        items: Sequence[str],
        default_index: int = 0,
    ):
        self.key_time = 0.0
        self.show_list = False
        self.active_item = Button(x, y, width, height, items[default_index], font, font_size)
        self.options = [
            Button(x, y + (i + 1) * height, width, height, item, font, font_size, button_id=i)
            for i, item in enumerate(items)
        ]

    @property
    def active_item_id(self) -> int:
        return self.active_item.button_id

    def consume_key_time(self) -> bool:
        """Return True and restart the cooldown once it has elapsed."""
        if self.key_time >= self.key_time_max:
            self.key_time = 0.0
            return True
        return False

    def update_key_time(self, delta_time: float) -> None:
        if self.key_time < self.key_time_max:
            self.key_time += 10.0 * delta_time

    def update(self, mouse_position: tuple[float, float], mouse_pressed: bool, delta_time: float) -> None:
        self.update_key_time(delta_time)
        self.active_item.update(mouse_position, mouse_pressed)

        if self.active_item.is_pressed() and self.consume_key_time():
            self.show_list = not self.show_list

        if self.show_list:
            for option in self.options:
                option.update(mouse_position, mouse_pressed)
                if option.is_pressed() and self.consume_key_time():
                    self.show_list = False
                    self.active_item.text = option.text
                    self.active_item.reset_text_position()
                    self.active_item.button_id = option.button_id

    def render(self, surface: pygame.Surface) -> None:
        self.active_item.render(surface)
        if self.show_list:
            for option in self.options:
                option.render(surface)