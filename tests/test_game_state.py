import shutil
from pathlib import Path

import pygame
import pytest

from dashrunner.button import TEXT_COLOR
from dashrunner.game_state import GameState
from dashrunner.graphics_settings import GraphicsSettings
from dashrunner.leaderboard_state import LeaderBoardState
from dashrunner.player import PlayerState
from dashrunner.state import StateData

RESOLUTION = (800, 600)
IMAGES = {
    "Resources/GFX/MainMenu/BG.png": (64, 64),
    "Resources/GFX/Player/PlayerSheet.png": (512, 512),
    "Resources/GFX/Tiles/TileSheet.png": (256, 256),
    "Resources/GFX/Spikes/SpikesSheet.png": (256, 64),
    "Resources/GFX/Turret/TurretSheet.png": (256, 64),
    "Resources/GFX/Turret/BulletSheet.png": (256, 64),
}


def _write_assets(root):
    fonts = root / "Fonts"
    fonts.mkdir()
    default_font = Path(pygame.__file__).parent / pygame.font.get_default_font()
    shutil.copy(default_font, fonts / "NewRocker-Regular.ttf")
    for relative, size in IMAGES.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        surface = pygame.Surface(size)
        surface.fill((10, 20, 30))
        pygame.image.save(surface, str(path))
    config = root / "Config"
    config.mkdir()
    (config / "gamestate_keybinds.ini").write_text("CLOSE Escape\nJUMP Space\n")


@pytest.fixture
def data(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_assets(tmp_path)
    return StateData(
        grid_size=64.0,
        graphics_settings=GraphicsSettings(resolution=RESOLUTION),
        window=pygame.Surface(RESOLUTION),
        supported_keys={"Escape": pygame.K_ESCAPE, "Space": pygame.K_SPACE},
    )


@pytest.fixture
def state(data):
    return GameState(data)


def _click(data, button):
    shape = button.shape
    data.mouse_position = (round(shape.left + shape.width / 2), round(shape.top + shape.height / 2))
    data.mouse_left = True


def test_new_game_is_running(state, data):
    assert state.score_text == "0"
    assert state.finished is False
    assert state.score_timer.counting is True
    assert state.keybinds == {"CLOSE": pygame.K_ESCAPE, "JUMP": pygame.K_SPACE}


def test_missing_player_sheet_raises(data, tmp_path):
    (tmp_path / "Resources/GFX/Player/PlayerSheet.png").unlink()
    with pytest.raises(FileNotFoundError):
        GameState(data)


def test_end_game_stops_timer_and_shows_score(state):
    state.score_timer.score = 7
    state.end_game()
    assert state.finished is True
    assert state.score_timer.counting is False
    assert state.score_text == "7"


def test_left_edge_ends_game(state):
    state.player.set_position(-10.0, 500.0)
    state.update_collision(state.player)
    assert state.player.position == (0.0, 500.0)
    assert state.finished is True


def test_right_edge_clamps(state):
    state.player.set_position(1900.0, 500.0)
    state.update_collision(state.player)
    x, _ = state.player.position
    assert x + state.player.global_bounds.width == 1920.0
    assert state.finished is False


def test_top_edge_clamps(state):
    state.player.set_position(100.0, -5.0)
    state.update_collision(state.player)
    assert state.player.position == (100.0, 0.0)


def test_bottom_edge_clamps(state):
    state.player.set_position(100.0, 1070.0)
    state.update_collision(state.player)
    _, y = state.player.position
    assert y + state.player.global_bounds.height == 1080.0


def test_jump_key_starts_jump(state, data):
    data.pressed_keys.add(pygame.K_SPACE)
    state.update_player_input(0.01)
    assert state.player.state is PlayerState.JUMP
    assert state.player.ground_check is False
    assert state.player.velocity[1] < 0.0
    assert state.player_jumping is True


def test_on_ground_without_key_runs(state):
    state.update_player_input(0.01)
    assert state.player.state is PlayerState.RUN
    assert state.player_can_jump is True
    assert state.player_jump_timer == 0.0


def test_long_jump_runs_out(state, data):
    data.pressed_keys.add(pygame.K_SPACE)
    state.update_player_input(0.5)
    assert state.player_can_jump is False
    assert state.player_jumping is False


def test_in_air_without_key_falls(state):
    state.player.ground_check = False
    state.update_player_input(0.01)
    assert state.player.state is PlayerState.FALL


def test_close_key_toggles_pause(state, data):
    data.pressed_keys.add(pygame.K_ESCAPE)
    state.update_key_time(1.0)
    state.update_input(0.0)
    assert state.paused is True
    state.update_input(0.0)
    assert state.paused is True
    state.update_key_time(1.0)
    state.update_input(0.0)
    assert state.paused is False


def test_resume_button_unpauses(state, data):
    state.pause_state()
    _click(data, state.pause_menu.buttons["ResumeStateButton"])
    state.update(0.01)
    assert state.paused is False


def test_leaderboard_button_pushes_screen(state, data):
    state.pause_state()
    _click(data, state.pause_menu.buttons["LeaderBoardStateButton"])
    state.update(0.01)
    assert len(data.states) == 1
    assert isinstance(data.states[0], LeaderBoardState)


def test_quit_button_ends_state(state, data):
    state.pause_state()
    _click(data, state.pause_menu.buttons["QuitStateButton"])
    state.update(0.01)
    assert state.quit is True


def test_running_frame_moves_player_and_fills_maps(state):
    _, before = state.player.position
    state.update(0.01)
    _, after = state.player.position
    assert after > before
    assert len(state.map_generator.maps) == 5


def test_render_draws_score_text(state, data):
    state.render()
    x, y = state.score_text_position
    found = any(
        tuple(data.window.get_at((px, py)))[:3] == TEXT_COLOR[:3]
        for px in range(int(x), int(x) + 60)
        for py in range(int(y), int(y) + 60)
    )
    assert found is True