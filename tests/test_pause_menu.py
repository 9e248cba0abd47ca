import pygame
import pytest

from dashrunner.button import NORMAL_COLOR
from dashrunner.pause_menu import PauseMenu

RESOLUTION = (1920, 1080)


def make():
    menu = PauseMenu(RESOLUTION, None)
    menu.add_button("ResumeStateButton", "Resume", 30, 200, 75, 400)
    return menu


def test_container_is_centred():
    menu = make()
    assert menu.container.left + menu.container.width / 2 == 1920 / 2
    assert menu.container.width == 1920 / 4


def test_button_centred_in_container():
    menu = make()
    button = menu.buttons["ResumeStateButton"]
    centre = button.shape.left + button.shape.width / 2
    assert centre == menu.container.left + menu.container.width / 2
    assert button.shape.top == 400
    assert button.text == "Resume"


def test_unknown_button_raises():
    with pytest.raises(KeyError):
        make().is_button_pressed("Nope")


def test_press_detection():
    menu = make()
    button = menu.buttons["ResumeStateButton"]
    menu.update((button.shape.left + 5, button.shape.top + 5), True)
    assert menu.is_button_pressed("ResumeStateButton")
    menu.update((0, 0), True)
    assert not menu.is_button_pressed("ResumeStateButton")


def test_render_draws_buttons_on_top():
    menu = make()
    button = menu.buttons["ResumeStateButton"]
    surface = pygame.Surface(RESOLUTION)
    surface.fill((0, 0, 0))
    menu.render(surface)
    corner = (int(button.shape.left) + 2, int(button.shape.top) + 2)
    assert tuple(surface.get_at(corner))[:3] == NORMAL_COLOR[:3]