"""The tile map editor: paint tiles, pick textures and manage the saved chunks."""

from __future__ import annotations

from pathlib import Path

import pygame

from dashrunner.button import Button
from dashrunner.gui import (
    FloatRect,
    calculate_text_size,
    draw_rect,
    load_font,
    percent_to_pixels_x,
    percent_to_pixels_y,
)
from dashrunner.map_generator import MAPS_DIR, TILE_SHEET_PATH, map_path
from dashrunner.pause_menu import PauseMenu
from dashrunner.state import FONT_PATH, State, StateData, _require_file
from dashrunner.texture_selector import TextureSelector
from dashrunner.tile import TileType
from dashrunner.tile_map import TileMap

KEYBINDS_PATH = "Config/editorstate_keybinds.ini"
SETTINGS_PATH = f"{MAPS_DIR}/EditorStateSettings.ini"

_SIDEBAR_FILL = (50, 50, 50, 100)
_SIDEBAR_OUTLINE = (200, 200, 200, 150)
_SELECTOR_OUTLINE = (0, 255, 0, 255)
_BORDER_OUTLINE = (255, 255, 255, 255)
_CURSOR_TEXT_COLOR = (255, 255, 255, 255)


class EditorState(State):
    """Edits one tile map chunk at a time; chunks are listed as numbered buttons."""

    max_tile_maps_count = 20
    max_type = int(TileType.TURRET)
    cursor_text_size = 24

    def __init__(self, state_data: StateData):
        super().__init__(state_data)
        resolution = self.resolution
        self.font = _require_file(FONT_PATH)
        self._load_keybinds(KEYBINDS_PATH)

        button_size = calculate_text_size(100, resolution)
        button_width = percent_to_pixels_x(10.42, resolution)
        button_height = percent_to_pixels_y(6.94, resolution)
        self.pause_menu = PauseMenu(resolution, self.font)
        for key, text, y in (
            ("ResumeStateButton", "Resume", 37.04),
            ("SaveStateButton", "Save", 55.56),
            ("QuitStateButton", "Quit", 74.07),
        ):
            self.pause_menu.add_button(
                key, text, button_size, button_width, button_height, percent_to_pixels_y(y, resolution)
            )

        grid = int(self.grid_size)
        self.texture_rect = pygame.Rect(0, 0, grid, grid)
        self.current_tile_map = TileMap(10, 17, 0, self.grid_size, 1, TILE_SHEET_PATH)

        self.buttons = {
            "AddTileMapButton": Button(1773.0, 104.0, 64.0, 64.0, "Add", self.font, 32),
            "RemoveTileMapButton": Button(1847.0, 104.0, 64.0, 64.0, "X", self.font, 32),
        }
        self.sidebar = FloatRect(1762.0, 0.0, 158.0, float(resolution[1]))
        self.selector_position = (0.0, 0.0)
        self.texture_selector = TextureSelector(
            881.0, 220.0, 640.0, 640.0, self.grid_size, self.current_tile_map.texture_sheet, self.font, "TS"
        )
        self.tile_map_border = FloatRect(0.0, 0.0, 640.0, 1080.0)

        self.cursor_text = ""
        self.cursor_text_position = (0.0, 0.0)
        self.collision = False
        self.tile_type = 0
        self.layer = 0
        self.add_tile_lock = False

        self.tile_maps_count = 0
        self.tile_map_buttons: list[Button] = []
        self.add_tile_map_button()
        self.load_editor_settings()

    def _make_tile_map_button(self, number: int) -> Button:
        x = 1847.0 if number % 2 else 1773.0
        y = 188.0 + (number // 2) * 84.0
        return Button(x, y, 64.0, 64.0, str(number), self.font, 32)

    def add_tile_map_button(self) -> None:
        """Add a button for the next chunk, up to the maximum number of chunks."""
        if self.tile_maps_count < self.max_tile_maps_count:
            self.tile_map_buttons.append(self._make_tile_map_button(self.tile_maps_count))
            self.tile_maps_count += 1

    def remove_tile_map_button(self) -> None:
        """Delete the last chunk's file and button; the first chunk always stays."""
        if self.tile_maps_count <= 1:
            return
        last = self.tile_map_buttons[-1]
        was_current = self.current_tile_map.index == int(last.text)
        Path(map_path(int(last.text))).unlink(missing_ok=True)
        self.tile_map_buttons.pop()
        self.tile_maps_count -= 1
        if was_current:
            self.current_tile_map.load_from_file(map_path(int(self.tile_map_buttons[-1].text)), 0, True)

    def _save_current_map(self) -> None:
        Path(MAPS_DIR).mkdir(parents=True, exist_ok=True)
        self.current_tile_map.save_to_file(map_path(self.current_tile_map.index))

    def save_editor_settings(self) -> None:
        """Store the number of chunks."""
        path = Path(SETTINGS_PATH)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(str(self.tile_maps_count))

    def load_editor_settings(self) -> None:
        """Restore the chunk buttons and open the first chunk."""
        try:
            tokens = Path(SETTINGS_PATH).read_text().split()
        except OSError:
            tokens = None
        if tokens is not None:
            try:
                self.tile_maps_count = int(tokens[0])
            except (IndexError, ValueError):
                self.tile_maps_count = 0
        self.tile_map_buttons.extend(self._make_tile_map_button(i) for i in range(1, self.tile_maps_count))
        self.current_tile_map.load_from_file(map_path(0), 0, True)

    def handle_event(self, event: pygame.event.Event) -> None:
        """The editor ignores window events."""

    def update(self, delta_time: float) -> None:
        self.update_input(delta_time)
        self.update_mouse_positions()
        self.update_key_time(delta_time)
        if not self.paused:
            self.update_gui(delta_time)
            self.update_editor_input(delta_time)
        else:
            self.pause_menu.update(self.mouse_position_window, self.state_data.mouse_left)
            self.update_pause_menu_buttons()

    def render(self, surface: pygame.Surface | None = None) -> None:
        target = self._target(surface)
        self.current_tile_map.render(target, True)
        self.current_tile_map.render_deferred(target, True)
        self._render_gui(target)
        if self.paused:
            self.pause_menu.render(target)

    def _render_selector(self, surface: pygame.Surface) -> None:
        sheet = self.current_tile_map.texture_sheet
        rect = self.texture_rect.clip(sheet.get_rect())
        size = int(self.grid_size)
        x, y = self.selector_position
        if rect.width > 0 and rect.height > 0 and size > 0:
            image = pygame.transform.scale(sheet.subsurface(rect), (size, size))
            image.set_alpha(100)
            surface.blit(image, (round(x), round(y)))
        draw_rect(surface, FloatRect(x, y, self.grid_size, self.grid_size), None, _SELECTOR_OUTLINE, 1.0)

    def _render_cursor_text(self, surface: pygame.Surface) -> None:
        line_height = load_font(self.font, self.cursor_text_size).get_linesize()
        x, y = self.cursor_text_position
        for number, line in enumerate(self.cursor_text.split("\n")):
            self._draw_text(surface, line, self.cursor_text_size, _CURSOR_TEXT_COLOR, (x, y + number * line_height))

    def _render_gui(self, surface: pygame.Surface) -> None:
        for button in self.buttons.values():
            button.render(surface)
        for button in self.tile_map_buttons:
            button.render(surface)
        if not self.texture_selector.active:
            self._render_selector(surface)
        self.texture_selector.render(surface)
        draw_rect(surface, self.sidebar, _SIDEBAR_FILL, _SIDEBAR_OUTLINE, 1.0)
        self._render_cursor_text(surface)
        draw_rect(surface, self.tile_map_border, None, _BORDER_OUTLINE, 1.0)

    def update_input(self, delta_time: float) -> None:
        if self._key_pressed("CLOSE") and self.consume_key_time():
            if self.paused:
                self.resume_state()
            else:
                self.pause_state()

    def _mouse_in_sidebar(self) -> bool:
        x, y = self.mouse_position_window
        return self.sidebar.contains(x, y)

    def update_editor_input(self, delta_time: float) -> None:
        """Paint, erase, pick a texture or toggle the tile settings."""
        data = self.state_data
        gx, gy = self.mouse_position_grid
        if data.mouse_left and self.consume_key_time():
            if self._mouse_in_sidebar():
                return
            if not self.texture_selector.active:
                if not self.add_tile_lock or self.current_tile_map.tile_empty(gx, gy, 0):
                    self.current_tile_map.add_tile(gx, gy, 0, self.texture_rect, self.collision, self.tile_type)
            else:
                self.texture_rect = pygame.Rect(self.texture_selector.texture_rect)
        elif data.mouse_right and self.consume_key_time():
            if self._mouse_in_sidebar():
                return
            if not self.texture_selector.active:
                self.current_tile_map.remove_tile(gx, gy, 0)
        elif self._key_pressed("COLLISION") and self.consume_key_time():
            self.collision = not self.collision
        elif self._key_pressed("TYPE") and self.consume_key_time():
            self.tile_type = 0 if self.tile_type == self.max_type else self.tile_type + 1
        elif self._key_pressed("TILELOCK") and self.consume_key_time():
            self.add_tile_lock = not self.add_tile_lock

    def update_pause_menu_buttons(self) -> None:
        if self.pause_menu.is_button_pressed("ResumeStateButton"):
            self.resume_state()
        if self.pause_menu.is_button_pressed("SaveStateButton"):
            self._save_current_map()
            self.save_editor_settings()
        if self.pause_menu.is_button_pressed("QuitStateButton"):
            self.end_state()

    def update_buttons(self) -> None:
        mouse_left = self.state_data.mouse_left
        for button in self.buttons.values():
            button.update(self.mouse_position_window, mouse_left)
        for button in self.tile_map_buttons:
            button.update(self.mouse_position_window, mouse_left)

        if self.buttons["AddTileMapButton"].is_pressed() and self.consume_key_time():
            self.add_tile_map_button()
            self.save_editor_settings()

        if self.buttons["RemoveTileMapButton"].is_pressed() and self.consume_key_time():
            self.remove_tile_map_button()
            self.save_editor_settings()

        for button in list(self.tile_map_buttons):
            if button.is_pressed() and self.consume_key_time():
                self._save_current_map()
                number = int(button.text)
                self.current_tile_map.load_from_file(map_path(number), number, True)
                self.save_editor_settings()

    def update_gui(self, delta_time: float) -> None:
        self.update_buttons()
        self.texture_selector.update(delta_time, self.mouse_position_window, self.state_data.mouse_left)

        gx, gy = self.mouse_position_grid
        if not self.texture_selector.active:
            self.selector_position = (gx * self.grid_size, gy * self.grid_size)

        vx, vy = self.mouse_position_view
        self.cursor_text_position = (vx + 50.0, vy - 50.0)
        tiles = self.current_tile_map.layer_size(gx, gy, self.layer)
        self.cursor_text = (
            f"{vx:g} {vy:g}\n{gx} {gy}"
            f"\nCollision: {int(self.collision)}\nType: {self.tile_type}\nTiles: {tiles}"
            f"\n TileLock: {int(self.add_tile_lock)}"
        )