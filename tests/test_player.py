import pygame
import pytest

from dashrunner.player import Player, PlayerState


@pytest.fixture
def sheet():
    surface = pygame.Surface((512, 512))
    surface.fill((200, 0, 0))
    return surface


def test_initial_layout(sheet):
    player = Player(sheet, 896.0, 440.0, 1.0, 1.0)
    assert player.sprite.position == (896.0, 440.0)
    assert player.position == (896.0, 440.0 + 20.0)
    assert player.state is PlayerState.RUN
    assert set(player.animation.animations) == {"RUN", "JUMP", "FALL"}


def test_hitbox_scales(sheet):
    player = Player(sheet, 0.0, 0.0, 2.0, 1.0)
    bounds = player.global_bounds
    assert bounds.width == 60.0 * 2.0
    assert bounds.height == 108.0 * 1.0


def test_update_applies_gravity_and_syncs_hitbox(sheet):
    player = Player(sheet, 896.0, 440.0, 1.0, 1.0)
    player.update(0.1)
    assert player.velocity == (0.0, 50.0)
    assert player.sprite.y == pytest.approx(440.0 + 50.0 * 0.1)
    assert player.position == pytest.approx((player.sprite.x, player.sprite.y + 20.0))


def test_jump_impulse(sheet):
    player = Player(sheet, 0.0, 0.0, 1.0, 1.0)
    player.move(0.1, 0.0, -20.0)
    assert player.velocity == (0.0, -600.0)


def test_update_animation_follows_state(sheet):
    player = Player(sheet, 0.0, 0.0, 1.0, 1.0)
    player.state = PlayerState.JUMP
    player.update_animation(0.2)
    jump = player.animation.animations["JUMP"]
    assert player.sprite.texture_rect.top == jump.start_rect.top
    assert player.sprite.texture_rect.left == jump.start_rect.left + jump.width
    assert player.animation.last_animation is jump


def test_render_draws_sprite_and_hitbox(sheet):
    surface = pygame.Surface((200, 200))
    player = Player(sheet, 10.0, 10.0, 1.0, 1.0)
    player.render(surface, show_hitbox=True)
    assert tuple(surface.get_at((15, 15)))[:3] == (200, 0, 0)
    assert tuple(surface.get_at((10, 30)))[:3] == (0, 255, 0)