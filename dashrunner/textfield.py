"""A single-line text input built on a button."""

from __future__ import annotations

import pygame

from dashrunner.button import Button

DELETE_KEY = 8
ENTER_KEY = 13
ESCAPE_KEY = 27

_PLACEHOLDER = "Input"
_MAX_LENGTH = 5
_CONTROL_KEYS = {pygame.K_BACKSPACE: DELETE_KEY, pygame.K_RETURN: ENTER_KEY, pygame.K_ESCAPE: ESCAPE_KEY}


class TextField:
    """A button that, once clicked, accepts up to five ASCII characters."""

    key_time_max = 2.0

    def __init__(self, x: float, y: float, width: float, height: float, font: str | None = None, font_size: int = 30):
        self.key_time = 0.0
        self.typing = False
        self._text = _PLACEHOLDER
        self.field = Button(x, y, width, height, self._text, font, font_size)

    @property
    def text(self) -> str:
        return self._text

    def consume_key_time(self) -> bool:
        """Return True and restart the cooldown once it has elapsed."""
        if self.key_time >= self.key_time_max:
            self.key_time = 0.0
            return True
        return False

    def input_logic(self, character: int) -> None:
        """Apply one character code to the text."""
        if character == DELETE_KEY:
            self._text = self._text[:-1]
        elif character == ESCAPE_KEY:
            self.typing = False
            self._text = _PLACEHOLDER
        elif character == ENTER_KEY:
            self.typing = False
        elif len(self._text) < _MAX_LENGTH:
            self._text += chr(character)
        self.field.text = self._text

    @staticmethod
    def _character_codes(event: pygame.event.Event) -> list[int] | None:
        if event.type == pygame.TEXTINPUT:
            return [ord(c) for c in event.text]
        if event.type == pygame.KEYDOWN and event.key in _CONTROL_KEYS:
            return [_CONTROL_KEYS[event.key]]
        return None

    def handle_event(self, event: pygame.event.Event) -> None:
        if not self.typing:
            return
        codes = self._character_codes(event)
        if codes is None or not self.consume_key_time():
            return
        for code in codes:
            if code < 128:
                self.input_logic(code)

    def update_key_time(self, delta_time: float) -> None:
        if self.key_time < self.key_time_max:
            self.key_time += 10.0 * delta_time

    def update(self, mouse_position: tuple[float, float], mouse_pressed: bool, delta_time: float) -> None:
        self.update_key_time(delta_time)
        self.field.update(mouse_position, mouse_pressed)
        if self.field.is_pressed() and self.consume_key_time():
            self.typing = not self.typing

    def render(self, surface: pygame.Surface) -> None:
        self.field.render(surface)