"""The window, the main loop and the stack of screens."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from dashrunner.graphics_settings import GraphicsSettings
from dashrunner.main_menu_state import MainMenuState
from dashrunner.state import State, StateData

GRAPHICS_SETTINGS_PATH = "Config/graphics.ini"
SUPPORTED_KEYS_PATH = "Config/supported_keys.ini"


def load_supported_keys(path: str | Path) -> dict[str, int]:
    """Read ``name code`` pairs, stopping at the first value that is not a number.

    A missing file gives no keys.
    """
    try:
        tokens = Path(path).read_text().split()
    except OSError:
        return {}
    keys: dict[str, int] = {}
    for name, value in zip(tokens[0::2], tokens[1::2]):
        try:
            keys[name] = int(value)
        except ValueError:
            break
    return keys


class Game:
    """Owns the window and runs the topmost screen each frame."""

    grid_size = 64.0

    def __init__(self):
        pygame.init()
        self.graphics_settings = GraphicsSettings()
        self.graphics_settings.load_from_file(GRAPHICS_SETTINGS_PATH)

        self.is_open = False
        self.window = self._create_window()
        self.clock = pygame.time.Clock()
        self.delta_time = 0.0
        self.has_focus = True
        self._events: list[pygame.event.Event] = []

        self.supported_keys = load_supported_keys(SUPPORTED_KEYS_PATH)
        self.states: list[State] = []
        self.state_data = StateData(
            grid_size=self.grid_size,
            graphics_settings=self.graphics_settings,
            window=self.window,
            supported_keys=self.supported_keys,
            states=self.states,
        )
        self.states.append(MainMenuState(self.state_data))

    @property
    def frame_rate_limit(self) -> int:
        return int(getattr(self.graphics_settings, "frame_rate_limit", 0) or 0)

    def _create_window(self) -> pygame.Surface:
        settings = self.graphics_settings
        flags = 0
        vsync = 0
        if getattr(settings, "full_screen", False):
            flags |= pygame.FULLSCREEN
        if getattr(settings, "vsync", False):
            flags |= pygame.SCALED
            vsync = 1
        window = pygame.display.set_mode(tuple(settings.resolution), flags, vsync=vsync)
        pygame.display.set_caption(str(getattr(settings, "title", "Endless Runner")))
        self.is_open = True
        return window

    def application_quit(self) -> None:
        """Close the window; the main loop stops after this frame."""
        self.is_open = False

    def handle_events(self) -> None:
        """Drain the event queue and refresh the shared input state."""
        data = self.state_data
        self._events = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.application_quit()
            elif event.type == pygame.KEYDOWN:
                data.pressed_keys.add(event.key)
            elif event.type == pygame.KEYUP:
                data.pressed_keys.discard(event.key)
            elif event.type == pygame.WINDOWFOCUSLOST:
                self.has_focus = False
                data.pressed_keys.clear()
            elif event.type == pygame.WINDOWFOCUSGAINED:
                self.has_focus = True
            self._events.append(event)

        data.mouse_position = pygame.mouse.get_pos()
        buttons = pygame.mouse.get_pressed()
        data.mouse_left = bool(buttons[0])
        data.mouse_right = bool(buttons[2])

    def update(self) -> None:
        """Run the top screen for one frame; an empty stack closes the game."""
        self.handle_events()
        if not self.states:
            self.application_quit()
            return
        if not self.has_focus:
            return

        self.states[-1].update(self.delta_time)
        top = self.states[-1]
        for event in self._events:
            top.handle_event(event)
        if top.quit:
            top.end_state()
            self.states.pop()

    def update_delta_time(self) -> None:
        """Measure the time since the last frame, honouring the frame-rate limit."""
        self.delta_time = self.clock.tick(self.frame_rate_limit) / 1000.0

    def render(self) -> None:
        self.window.fill((0, 0, 0))
        if self.states:
            self.states[-1].render(self.window)
        pygame.display.flip()

    def run(self) -> None:
        """Loop until the window is closed or no screen is left."""
        while self.is_open:
            self.update_delta_time()
            self.update()
            self.render()


def main(argv: list[str] | None = None) -> int:
    """Start the game in the current directory."""
    parser = argparse.ArgumentParser(prog="dashrunner", description="An endless side-scrolling runner.")
    parser.parse_args(argv)
    try:
        Game().run()
    finally:
        pygame.quit()
    return 0