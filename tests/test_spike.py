import pygame
import pytest

from dashrunner.gui import FloatRect
from dashrunner.spike import TEXTURE_PATH, Spike


def _write_sheet(root, relative):
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    surface = pygame.Surface((256, 64))
    surface.fill((120, 120, 120))
    pygame.image.save(surface, str(path))


@pytest.fixture
def resources(tmp_path, monkeypatch):
    _write_sheet(tmp_path, TEXTURE_PATH)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_missing_texture_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        Spike(0.0, 0.0, 1.0, 1.0)


def test_layout_at_unit_scale(resources):
    spike = Spike(100.0, 200.0, 1.0, 1.0)
    assert spike.position == (100.0, 200.0)
    assert spike.global_bounds == FloatRect(100.0, 200.0, 64.0, 64.0)


def test_layout_at_double_scale(resources):
    spike = Spike(100.0, 200.0, 2.0, 2.0)
    assert spike.position == (100.0 - 64.0, 200.0 - 64.0)
    assert spike.global_bounds.width == 64.0 * 2.0


def test_update_scrolls_left(resources):
    spike = Spike(100.0, 200.0, 1.0, 1.0)
    spike.update(0.5)
    assert spike.position == pytest.approx((100.0 - 400.0 * 0.5, 200.0))


def test_attack(resources):
    spike = Spike(100.0, 200.0, 1.0, 1.0)
    assert spike.attack(FloatRect(120.0, 220.0, 10.0, 10.0)) is True
    assert spike.attack(FloatRect(0.0, 0.0, 10.0, 10.0)) is False


def test_render_draws_texture(resources):
    surface = pygame.Surface((300, 300))
    spike = Spike(100.0, 100.0, 1.0, 1.0)
    spike.render(surface)
    assert tuple(surface.get_at((110, 110)))[:3] == (120, 120, 120)