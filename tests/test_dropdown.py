import pygame

from dashrunner.button import NORMAL_COLOR
from dashrunner.dropdown import DropDown

ITEMS = ["Low", "Mid", "High"]


def make():
    return DropDown(0, 0, 100, 30, None, 20, ITEMS, 1)


def test_default_item_is_active():
    dd = make()
    assert dd.active_item_id == 1
    assert dd.active_item.text == "Mid"
    assert dd.show_list is False


def test_options_stacked_below_with_ids():
    dd = make()
    for i, option in enumerate(dd.options):
        assert option.shape.top == (i + 1) * 30
        assert option.button_id == i
        assert option.text == ITEMS[i]


def test_consume_key_time_needs_cooldown():
    dd = make()
    assert dd.consume_key_time() is False
    dd.update_key_time(1.0)
    assert dd.consume_key_time() is True
    assert dd.consume_key_time() is False


def test_key_time_stops_growing_past_max():
    dd = make()
    dd.update_key_time(1.0)
    once = dd.key_time
    dd.update_key_time(1.0)
    assert dd.key_time == once


def test_click_without_cooldown_does_not_open():
    dd = make()
    dd.update((50, 15), True, 0.0)
    assert dd.show_list is False


def test_click_opens_list():
    dd = make()
    dd.update((50, 15), True, 1.0)
    assert dd.show_list is True


def test_selecting_option_updates_active_item():
    dd = make()
    dd.update((50, 15), True, 1.0)
    dd.update((50, 3 * 30 + 15), True, 1.0)
    assert dd.show_list is False
    assert dd.active_item.text == "High"
    assert dd.active_item_id == 2


def test_render_hides_options_when_closed():
    dd = DropDown(0, 0, 100, 30, None, 20, ["", "", ""], 0)
    surface = pygame.Surface((100, 200))
    surface.fill((0, 0, 0))
    dd.render(surface)
    assert tuple(surface.get_at((1, 1)))[:3] == NORMAL_COLOR[:3]
    assert tuple(surface.get_at((1, 31)))[:3] == (0, 0, 0)