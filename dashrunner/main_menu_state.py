"""The title screen: play, leaderboard, the hidden editor and quit."""

from __future__ import annotations

import re

import pygame

from dashrunner.button import Button
from dashrunner.editor_state import EditorState
from dashrunner.game_state import GameState
from dashrunner.gui import calculate_text_size, percent_to_pixels_x, percent_to_pixels_y
from dashrunner.leaderboard_state import BACKGROUND_PATH, LeaderBoardState
from dashrunner.player_dummy import PlayerDummy
from dashrunner.state import FONT_PATH, State, StateData, _load_image, _require_file
from dashrunner.textfield import TextField

KEYBINDS_PATH = "Config/mainmenustate_keybinds.ini"
PLAYER_SHEET_PATH = "Resources/GFX/Player/PlayerSheet.png"
EDITOR_UNLOCK_CODE = "!Adm*"
_TITLE_COLOR = (217, 62, 38, 255)


class MainMenuState(State):
    """The first screen; typing the unlock code into the field reveals the editor."""

    title = "Endless Runner"
    editor_unlock = re.compile(re.escape(EDITOR_UNLOCK_CODE))

    def __init__(self, state_data: StateData):
        super().__init__(state_data)
        resolution = self.resolution
        size = self.window.get_size() if self.window is not None else resolution
        self.background = pygame.transform.scale(_load_image(BACKGROUND_PATH), size)
        self.font = _require_file(FONT_PATH)
        self._load_keybinds(KEYBINDS_PATH)

        self.title_position = (percent_to_pixels_x(9.9, resolution), percent_to_pixels_y(30.6, resolution))
        self.title_size = calculate_text_size(45, resolution)

        x = percent_to_pixels_x(15.625, resolution)
        width = percent_to_pixels_x(10.4, resolution)
        height = percent_to_pixels_y(6.94, resolution)
        text_size = calculate_text_size(100, resolution)
        self.buttons = {
            key: Button(x, percent_to_pixels_y(y, resolution), width, height, text, self.font, text_size)
            for key, text, y in (
                ("GameStateButton", "Play", 42.6),
                ("LeaderBoardStateButton", "LeaderBoard", 51.0),
                ("EditorStateButton", "Editor", 59.3),
                ("ExitStateButton", "Quit", 68.0),
            )
        }
        self.text_field = TextField(
            percent_to_pixels_x(83.85, resolution),
            percent_to_pixels_y(74.07, resolution),
            width,
            percent_to_pixels_y(9.26, resolution),
            self.font,
            text_size,
        )

        self.textures["Player"] = _load_image(PLAYER_SHEET_PATH)
        self.player_dummy = PlayerDummy(
            self.textures["Player"],
            percent_to_pixels_x(67.71, resolution),
            percent_to_pixels_y(21.3, resolution),
            4.0,
            4.0,
        )
        self.show_editor_button = False

    def check_admin_access(self) -> None:
        """Show the editor button only while the field holds the unlock code."""
        self.show_editor_button = self.editor_unlock.fullmatch(self.text_field.text) is not None

    def handle_event(self, event: pygame.event.Event) -> None:
        self.text_field.handle_event(event)

    def update(self, delta_time: float) -> None:
        self.check_admin_access()
        self.update_input(delta_time)
        self.update_mouse_positions()
        self.update_gui(delta_time)
        self.player_dummy.update(delta_time)

    def render(self, surface: pygame.Surface | None = None) -> None:
        target = self._target(surface)
        target.blit(self.background, (0, 0))
        self._draw_text(target, self.title, self.title_size, _TITLE_COLOR, self.title_position)
        for button in self.buttons.values():
            if button.text != "Editor" or self.show_editor_button:
                button.render(target)
        self.text_field.render(target)
        self.player_dummy.render(target)

    def update_input(self, delta_time: float) -> None:
        """The main menu has no keyboard controls."""

    def update_buttons(self) -> None:
        for button in self.buttons.values():
            button.update(self.mouse_position_window, self.state_data.mouse_left)

        if self.buttons["GameStateButton"].is_pressed():
            self.states.append(GameState(self.state_data))
        if self.buttons["LeaderBoardStateButton"].is_pressed():
            self.states.append(LeaderBoardState(self.state_data))
        if self.buttons["EditorStateButton"].is_pressed() and self.show_editor_button:
            self.states.append(EditorState(self.state_data))
        if self.buttons["ExitStateButton"].is_pressed():
            self.end_state()

    def update_gui(self, delta_time: float) -> None:
        self.update_buttons()
        self.text_field.update(self.mouse_position_window, self.state_data.mouse_left, delta_time)