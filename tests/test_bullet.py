import pygame
import pytest

from dashrunner.bullet import TEXTURE_PATH, Bullet
from dashrunner.gui import FloatRect


@pytest.fixture
def resources(tmp_path, monkeypatch):
    path = tmp_path / TEXTURE_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(pygame.Surface((256, 64)), str(path))
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_missing_texture_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        Bullet(0.0, 0.0, 1.0, 1.0)


def test_hitbox_offset(resources):
    bullet = Bullet(300.0, 100.0, 1.0, 1.0)
    assert bullet.sprite.position == (300.0, 100.0)
    assert bullet.position == (300.0 + 49.0, 100.0 + 67.0)
    assert bullet.global_bounds.width == 15.0
    assert bullet.global_bounds.height == 20.0


def test_scaled_bullet_shifts_sprite(resources):
    bullet = Bullet(300.0, 100.0, 2.0, 2.0)
    assert bullet.sprite.position == (300.0 - 64.0, 100.0 - 64.0)
    assert bullet.global_bounds.width == 15.0 * 2.0


def test_update_flies_left(resources):
    bullet = Bullet(300.0, 100.0, 1.0, 1.0)
    bullet.update(0.1)
    assert bullet.position == pytest.approx((300.0 + 49.0 - 1000.0 * 0.1, 100.0 + 67.0))


def test_attack(resources):
    bullet = Bullet(300.0, 100.0, 1.0, 1.0)
    left, top = bullet.position
    assert bullet.attack(FloatRect(left, top, 1.0, 1.0)) is True
    assert bullet.attack(FloatRect(left - 50.0, top, 10.0, 10.0)) is False