"""An endless chain of tile maps, refilled with random chunks as they scroll away."""

from __future__ import annotations

import random
from collections import deque

import pygame

from dashrunner.entity import Entity
from dashrunner.tile_map import TileMap

TILE_SHEET_PATH = "Resources/GFX/Tiles/TileSheet.png"
MAPS_DIR = "Resources/TileMaps"
_CHAIN_LENGTH = 5
_CHUNK_WIDTH = 640.0


def map_path(index: int) -> str:
    """Path of the saved chunk with the given number."""
    return f"{MAPS_DIR}/TileMap{index}.map"


class MapGenerator:
    """Keeps five map chunks side by side, replacing the leftmost as it leaves."""

    def __init__(self, grid_size: float = 64.0):
        self.grid_size = grid_size
        self._rng = random.Random()
        self.maps: deque[TileMap] = deque(
            TileMap(10, 17, offset, grid_size, 1, TILE_SHEET_PATH) for offset in (0, 10, 20, 30)
        )
        for i, chunk in enumerate((0, 1, 0, 1)):
            self.maps[i].load_from_file(map_path(chunk), i)

    def update_maps(self, delta_time: float) -> None:
        """Fill the chain to five chunks, or swap out the chunk that scrolled off."""
        if len(self.maps) == _CHAIN_LENGTH:
            left, _ = self.maps[0].position()
            if left <= -_CHUNK_WIDTH:
                small_offset = left + _CHUNK_WIDTH
                self.maps.popleft()
                previous = self.maps[-1].index
                chunk = self._rng.randint(2, 15)
                while chunk == previous:
                    chunk = self._rng.randint(2, 15)
                new_map = TileMap(
                    10, 17, len(self.maps) * 10, self.grid_size, 1, TILE_SHEET_PATH, 0, small_offset
                )
                new_map.load_from_file(map_path(chunk), 0)
                self.maps.append(new_map)
        else:
            while len(self.maps) < _CHAIN_LENGTH:
                new_map = TileMap(10, 17, len(self.maps) * 10, self.grid_size, 1, TILE_SHEET_PATH)
                new_map.load_from_file(map_path(self._rng.randint(0, 1)), 0)
                self.maps.append(new_map)

    def update_enemy_attacks(self, entity: Entity, delta_time: float) -> bool:
        return any(tile_map.update_enemy_attacks(entity, delta_time) for tile_map in self.maps)

    def update(self, entity: Entity, delta_time: float) -> None:
        self.update_maps(delta_time)
        for tile_map in self.maps:
            tile_map.update_collision(entity, delta_time)
            tile_map.update(delta_time)

    def render(self, surface: pygame.Surface) -> None:
        for tile_map in self.maps:
            tile_map.render(surface)

    def render_deferred(self, surface: pygame.Surface) -> None:
        for tile_map in self.maps:
            tile_map.render_deferred(surface)