"""The screens of the game and the data they share."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from dashrunner.graphics_settings import GraphicsSettings
from dashrunner.gui import Color, load_font

FONT_PATH = "Fonts/NewRocker-Regular.ttf"


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _require_file(path: str | Path) -> str:
    """Return ``path`` as a string, or raise FileNotFoundError if it is no file."""
    if not Path(path).is_file():
        raise FileNotFoundError(f"Could not load {path}")
    return str(path)


def _load_image(path: str | Path) -> pygame.Surface:
    return pygame.image.load(_require_file(path))


@dataclass
class StateData:
    """Everything the screens share: settings, window, keys, input and the screen stack."""

    grid_size: float = 64.0
    graphics_settings: GraphicsSettings = field(default_factory=GraphicsSettings)
    window: pygame.Surface | None = None
    supported_keys: dict[str, int] = field(default_factory=dict)
    states: list[State] = field(default_factory=list)
    mouse_position: tuple[int, int] = (0, 0)
    mouse_left: bool = False
    mouse_right: bool = False
    pressed_keys: set[int] = field(default_factory=set)


class State(ABC):
    """One screen on the stack: key cooldown, pause and quit flags, mouse tracking."""

    key_time_max = 20.0

    def __init__(self, state_data: StateData):
        self.state_data = state_data
        self.window = state_data.window
        self.supported_keys = state_data.supported_keys
        self.states = state_data.states
        self.grid_size = state_data.grid_size
        self.keybinds: dict[str, int] = {}
        self.quit = False
        self.paused = False
        self.key_time = 0.0
        self.font: str | None = None
        self.mouse_position_window: tuple[int, int] = (0, 0)
        self.mouse_position_view: tuple[float, float] = (0.0, 0.0)
        self.mouse_position_grid: tuple[int, int] = (0, 0)
        self.textures: dict[str, pygame.Surface] = {}

    @property
    def resolution(self) -> tuple[int, int]:
        return self.state_data.graphics_settings.resolution

    def consume_key_time(self) -> bool:
        """Return True and restart the cooldown once it has elapsed."""
        if self.key_time >= self.key_time_max:
            self.key_time = 0.0
            return True
        return False

    def end_state(self) -> None:
        self.quit = True

    def pause_state(self) -> None:
        self.paused = True

    def resume_state(self) -> None:
        self.paused = False

    def update_mouse_positions(
        self,
        mouse_position: tuple[int, int] | None = None,
        view_offset: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        """Record the mouse in window, world and grid coordinates.

        Without an explicit position the one in the shared data is used.
        ``view_offset`` is how far the view's top-left corner lies from the origin.
        """
        if mouse_position is None:
            mouse_position = self.state_data.mouse_position
        x, y = mouse_position
        self.mouse_position_window = (int(x), int(y))
        ox, oy = view_offset
        self.mouse_position_view = (x + ox, y + oy)
        step = int(self.grid_size)
        vx, vy = self.mouse_position_view
        self.mouse_position_grid = (_truncating_div(int(vx), step), _truncating_div(int(vy), step))

    def update_key_time(self, delta_time: float) -> None:
        if self.key_time < self.key_time_max:
            self.key_time += 100.0 * delta_time

    def _load_keybinds(self, path: str | Path) -> None:
        """Read ``action key-name`` pairs; unknown key names raise KeyError."""
        try:
            tokens = Path(path).read_text().split()
        except OSError:
            return
        for action, key_name in zip(tokens[0::2], tokens[1::2]):
            self.keybinds[action] = self.supported_keys[key_name]

    def _key_pressed(self, action: str) -> bool:
        key = self.keybinds.get(action)
        return key is not None and key in self.state_data.pressed_keys

    def _target(self, surface: pygame.Surface | None) -> pygame.Surface:
        target = surface if surface is not None else self.window
        if target is None:
            raise ValueError("No surface to render to")
        return target

    def _draw_text(
        self,
        surface: pygame.Surface,
        text: str,
        size: int,
        color: Color,
        position: tuple[float, float],
    ) -> None:
        if not text:
            return
        image = load_font(self.font, size).render(text, True, color[:3])
        surface.blit(image, (round(position[0]), round(position[1])))

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window event."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the screen by one frame."""

    @abstractmethod
    def render(self, surface: pygame.Surface | None = None) -> None:
        """Draw the screen onto ``surface``, or the window when none is given."""

    @abstractmethod
    def update_input(self, delta_time: float) -> None:
        """Handle the keyboard for this frame."""