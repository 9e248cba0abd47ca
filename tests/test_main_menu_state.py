import os
import shutil
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from dashrunner.editor_state import EditorState
from dashrunner.graphics_settings import GraphicsSettings
from dashrunner.leaderboard_state import LeaderBoardState
from dashrunner.main_menu_state import EDITOR_UNLOCK_CODE, MainMenuState
from dashrunner.state import StateData


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    pygame.init()
    fonts = tmp_path / "Fonts"
    fonts.mkdir()
    shutil.copy(Path(pygame.__file__).parent / pygame.font.get_default_font(), fonts / "NewRocker-Regular.ttf")
    for relative, size in (
        ("Resources/GFX/MainMenu/BG.png", (64, 64)),
        ("Resources/GFX/Player/PlayerSheet.png", (512, 512)),
        ("Resources/GFX/Tiles/TileSheet.png", (256, 256)),
    ):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        pygame.image.save(pygame.Surface(size), str(path))
    (tmp_path / "Resources" / "TileMaps").mkdir(parents=True)
    yield tmp_path


def make_state():
    settings = GraphicsSettings()
    settings.resolution = (1920, 1080)
    data = StateData(grid_size=64.0, graphics_settings=settings, window=pygame.Surface((1920, 1080)))
    return MainMenuState(data)


def press(state, key):
    shape = state.buttons[key].shape
    state.state_data.mouse_position = (
        int(shape.left + shape.width / 2),
        int(shape.top + shape.height / 2),
    )
    state.state_data.mouse_left = True
    state.update_mouse_positions()
    state.update_buttons()


def test_editor_hidden_by_default(workspace):
    state = make_state()
    state.check_admin_access()
    assert state.show_editor_button is False


def test_unlock_code_reveals_editor(workspace):
    state = make_state()
    state.text_field.text = EDITOR_UNLOCK_CODE
    state.check_admin_access()
    assert state.show_editor_button is True
    state.text_field.text = EDITOR_UNLOCK_CODE[:-1]
    state.check_admin_access()
    assert state.show_editor_button is False


def test_update_checks_access(workspace):
    state = make_state()
    state.text_field.text = EDITOR_UNLOCK_CODE
    state.update(0.0)
    assert state.show_editor_button is True
    assert state.states == []


def test_leaderboard_button_pushes_leaderboard(workspace):
    state = make_state()
    press(state, "LeaderBoardStateButton")
    assert len(state.states) == 1
    assert isinstance(state.states[0], LeaderBoardState)


def test_locked_editor_button_does_nothing(workspace):
    state = make_state()
    press(state, "EditorStateButton")
    assert state.states == []


def test_unlocked_editor_button_pushes_editor(workspace):
    state = make_state()
    state.text_field.text = EDITOR_UNLOCK_CODE
    state.check_admin_access()
    press(state, "EditorStateButton")
    assert len(state.states) == 1
    assert isinstance(state.states[0], EditorState)


def test_quit_button_ends_state(workspace):
    state = make_state()
    press(state, "ExitStateButton")
    assert state.quit is True
    assert state.states == []


def test_buttons_are_stacked_vertically(workspace):
    state = make_state()
    tops = [state.buttons[key].shape.top for key in (
        "GameStateButton", "LeaderBoardStateButton", "EditorStateButton", "ExitStateButton"
    )]
    assert tops == sorted(tops)
    assert len(set(tops)) == 4


def test_update_animates_player_dummy(workspace):
    state = make_state()
    start = state.player_dummy.sprite.texture_rect.left
    state.update(1.0)
    assert state.player_dummy.sprite.texture_rect.left == start + 64