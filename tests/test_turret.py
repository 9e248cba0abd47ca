import pygame
import pytest

from dashrunner import bullet as bullet_module
from dashrunner.gui import FloatRect
from dashrunner.turret import TEXTURE_PATH, Turret


def _write_sheet(root, relative):
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(pygame.Surface((256, 64)), str(path))


@pytest.fixture
def resources(tmp_path, monkeypatch):
    _write_sheet(tmp_path, TEXTURE_PATH)
    _write_sheet(tmp_path, bullet_module.TEXTURE_PATH)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_missing_texture_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        Turret(0.0, 0.0, 1.0, 1.0)


def test_hitbox_layout(resources):
    turret = Turret(500.0, 300.0, 1.0, 1.0)
    assert turret.position == (500.0, 300.0 + 48.0)
    assert turret.global_bounds.width == 64.0
    assert turret.global_bounds.height == 40.0


def test_first_update_fires_a_bullet(resources):
    turret = Turret(500.0, 300.0, 1.0, 1.0)
    turret.update_bullets(0.5)
    assert len(turret.bullets) == 1
    assert turret.bullet_timer == turret.bullet_max_timer


def test_lone_bullet_expires(resources):
    turret = Turret(500.0, 300.0, 1.0, 1.0)
    sizes = []
    for _ in range(3):
        turret.update_bullets(0.5)
        sizes.append(len(turret.bullets))
    assert sizes == [1, 1, 0]
    assert turret.expire_timer == turret.expire_max_timer


def test_attack_only_through_bullets(resources):
    turret = Turret(500.0, 300.0, 1.0, 1.0)
    assert turret.attack(turret.global_bounds) is False
    turret.update_bullets(0.01)
    bullet_bounds = turret.bullets[0].global_bounds
    assert turret.attack(bullet_bounds) is True
    assert turret.attack(FloatRect(-5000.0, -5000.0, 1.0, 1.0)) is False


def test_update_scrolls_turret_and_moves_bullets(resources):
    turret = Turret(500.0, 300.0, 1.0, 1.0)
    turret.update(0.1)
    assert turret.position == pytest.approx((500.0 - 400.0 * 0.1, 300.0 + 48.0))
    first = turret.bullets[0].position
    turret.update(0.1)
    assert turret.bullets[0].position[0] == pytest.approx(first[0] - 1000.0 * 0.1)


def test_render_draws_bullet_hitboxes(resources):
    surface = pygame.Surface((1200, 800))
    turret = Turret(500.0, 300.0, 1.0, 1.0)
    turret.update_bullets(0.01)
    turret.render(surface, show_hitbox=True)
    left, top = turret.bullets[0].position
    assert tuple(surface.get_at((round(left), round(top))))[:3] == (0, 255, 0)