"""The running game: the player, the scrolling world, the score and its menus."""

from __future__ import annotations

import pygame

from dashrunner.button import TEXT_COLOR
from dashrunner.entity import Entity
from dashrunner.finish_menu import FinishMenu
from dashrunner.gui import calculate_text_size, percent_to_pixels_x, percent_to_pixels_y
from dashrunner.leaderboard_state import LeaderBoardState
from dashrunner.map_generator import MapGenerator
from dashrunner.pause_menu import PauseMenu
from dashrunner.player import Player, PlayerState
from dashrunner.score_timer import ScoreTimer
from dashrunner.state import FONT_PATH, State, StateData, _load_image, _require_file

KEYBINDS_PATH = "Config/gamestate_keybinds.ini"
PLAYER_SHEET_PATH = "Resources/GFX/Player/PlayerSheet.png"


class GameState(State):
    """Runs the player through generated maps until they fall behind or are hit."""

    player_max_jump_time = 0.45

    def __init__(self, state_data: StateData):
        super().__init__(state_data)
        resolution = self.resolution
        self.render_texture = pygame.Surface(resolution)
        self.max_size_world = (1920.0, 1080.0)
        self.font = _require_file(FONT_PATH)
        self._load_keybinds(KEYBINDS_PATH)
        self.textures["Player"] = _load_image(PLAYER_SHEET_PATH)

        button_size = calculate_text_size(100, resolution)
        button_width = percent_to_pixels_x(10.42, resolution)
        button_height = percent_to_pixels_y(6.94, resolution)

        self.pause_menu = PauseMenu(resolution, self.font)
        for key, text, y in (
            ("ResumeStateButton", "Resume", 37.04),
            ("LeaderBoardStateButton", "LeaderBoard", 55.56),
            ("QuitStateButton", "Quit", 74.07),
        ):
            self.pause_menu.add_button(
                key, text, button_size, button_width, button_height, percent_to_pixels_y(y, resolution)
            )

        self.finish_menu = FinishMenu(resolution, self.font)
        for key, text, y in (("SaveScoreButton", "Save", 64.81), ("QuitStateButton", "Quit", 74.07)):
            self.finish_menu.add_button(
                key, text, button_size, button_width, button_height, percent_to_pixels_y(y, resolution)
            )

        self.player = Player(self.textures["Player"], 896.0, 440.0, 1.0, 1.0)

        self.score_text = "0"
        self.score_text_size = calculate_text_size(45, resolution)
        self.score_text_position = (percent_to_pixels_x(2.6, resolution), percent_to_pixels_y(2.6, resolution))

        self.finished = False
        self.player_jump_timer = 0.0
        self.player_can_jump = True
        self.player_jumping = False

        self.map_generator = MapGenerator(self.grid_size)
        self.score_timer = ScoreTimer()
        self.score_timer.start()
        self.score_timer.load_from_file()

    def update_collision(self, entity: Entity) -> None:
        """Keep the entity inside the world; falling off the left edge ends the game."""
        world_width, world_height = self.max_size_world
        x, y = entity.position
        bounds = entity.global_bounds
        if x < 0.0:
            entity.set_position(0.0, y)
            entity.stop_velocity_x()
            self.end_game()
        elif x + bounds.width > world_width:
            entity.set_position(world_width - bounds.width, y)
            entity.stop_velocity_x()

        x, y = entity.position
        bounds = entity.global_bounds
        if y < 0.0:
            entity.set_position(x, 0.0)
            entity.stop_velocity_y()
        elif y + bounds.height > world_height:
            entity.set_position(x, world_height - bounds.height)
            entity.stop_velocity_y()

    def end_game(self) -> None:
        self.score_timer.stop()
        self.score_text = str(self.score_timer.score)
        self.finish_menu.set_score(self.score_timer.score)
        self.finished = True

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.finished:
            self.finish_menu.handle_event(event)

    def update(self, delta_time: float) -> None:
        self.update_mouse_positions()
        self.update_key_time(delta_time)

        if not self.finished:
            self.update_input(delta_time)

        mouse_left = self.state_data.mouse_left
        if self.paused:
            self.pause_menu.update(self.mouse_position_window, mouse_left)
            self.update_pause_menu_buttons()
        elif self.finished:
            self.finish_menu.update(self.mouse_position_window, mouse_left, delta_time)
            self.update_finish_menu_buttons()
        else:
            self.update_player_input(delta_time)
            self.update_collision(self.player)
            self.map_generator.update(self.player, delta_time)
            if self.map_generator.update_enemy_attacks(self.player, delta_time):
                self.end_game()
            self.player.update(delta_time)
            self.score_timer.update(delta_time)
            self.score_text = str(self.score_timer.score)

    def render(self, surface: pygame.Surface | None = None) -> None:
        target = self._target(surface)
        canvas = self.render_texture
        canvas.fill((0, 0, 0))
        self.map_generator.render(canvas)
        self.player.render(canvas)
        self.map_generator.render_deferred(canvas)
        self._draw_text(canvas, self.score_text, self.score_text_size, TEXT_COLOR, self.score_text_position)
        if self.paused:
            self.pause_menu.render(canvas)
        if self.finished:
            self.finish_menu.render(canvas)
        target.blit(canvas, (0, 0))

    def update_pause_menu_buttons(self) -> None:
        if self.pause_menu.is_button_pressed("ResumeStateButton"):
            self.resume_state()
        if self.pause_menu.is_button_pressed("LeaderBoardStateButton"):
            self.states.append(LeaderBoardState(self.state_data))
        if self.pause_menu.is_button_pressed("QuitStateButton"):
            self.end_state()

    def update_finish_menu_buttons(self) -> None:
        if self.finish_menu.is_button_pressed("SaveScoreButton"):
            if self.score_timer.save_to_file(self.finish_menu.field.text, self.score_timer.score):
                self.end_state()
        if self.finish_menu.is_button_pressed("QuitStateButton"):
            self.end_state()

    def update_player_input(self, delta_time: float) -> None:
        """Jump while the key is held, for at most the maximum jump time."""
        if self._key_pressed("JUMP") and self.player_can_jump:
            self.player.move(delta_time, 0.0, -20.0)
            self.player.ground_check = False
            self.player_jumping = True
            self.player.state = PlayerState.JUMP
        else:
            self.player_jumping = False
            self.player.state = PlayerState.FALL

        if self.player_can_jump:
            if self.player_jumping:
                self.player_jump_timer += delta_time
            if self.player_jump_timer >= self.player_max_jump_time:
                self.player_can_jump = False
                self.player_jumping = False

        if self.player.ground_check:
            self.player_can_jump = True
            self.player_jumping = False
            self.player_jump_timer = 0.0
            self.player.state = PlayerState.RUN

    def update_input(self, delta_time: float) -> None:
        if self._key_pressed("CLOSE") and self.consume_key_time():
            if self.paused:
                self.resume_state()
            else:
                self.pause_state()