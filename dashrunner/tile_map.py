"""A layered grid of tiles, with its enemies, loaded from and saved to text files."""

from __future__ import annotations

from collections import deque
from pathlib import Path

import pygame

from dashrunner.enemy import Enemy
from dashrunner.entity import Entity
from dashrunner.spike import Spike
from dashrunner.tile import Tile, TileType
from dashrunner.turret import Turret

_COLLISION_FILL = (255, 0, 0, 50)
_COLLISION_OUTLINE = (255, 0, 0, 255)
_ENEMY_FILL = (0, 0, 255, 50)
_ENEMY_OUTLINE = (0, 0, 255, 255)


def _load_sheet(path: str) -> pygame.Surface:
    if not Path(path).is_file():
        raise FileNotFoundError(f"Could not load tile sheet: {path}")
    return pygame.image.load(path)


def _unsigned(token: str) -> int:
    value = int(token)
    if value < 0:
        raise ValueError(token)
    return value


def _flag(token: str) -> bool:
    if token not in ("0", "1"):
        raise ValueError(token)
    return token == "1"


class TileMap:
    """A size_x by size_y grid of stacked tiles, shifted right by offset_x cells."""

    def __init__(
        self,
        size_x: int,
        size_y: int,
        offset_x: int,
        grid_size: float,
        layers: int,
        tile_sheet_path: str,
        index: int = 0,
        small_offset_x: float = 0.0,
    ):
        self.index = index
        self.size_x = size_x
        self.size_y = size_y
        self.world_size = (1920.0, 1080.0)
        self.grid_size = float(grid_size)
        self.layers = layers
        self.tile_sheet_path = tile_sheet_path
        self.offset_x = offset_x
        self.small_offset_x = small_offset_x
        self.layer = 0
        self.map: list[list[list[list[Tile]]]] = []
        self.deferred_render_list: deque[Tile] = deque()
        self.enemies: list[Enemy] = []
        self._build_grid()
        self.texture_sheet = _load_sheet(tile_sheet_path)

    @property
    def grid_size_i(self) -> int:
        return int(self.grid_size)

    def _build_grid(self) -> None:
        self.map = [
            [[[] for _ in range(self.layers)] for _ in range(self.size_y)] for _ in range(self.size_x)
        ]

    def _in_range(self, x: int, y: int, z: int) -> bool:
        return 0 <= x < self.size_x and 0 <= y < self.size_y and 0 <= z < self.layers

    def _tiles(self):
        for column in self.map:
            for cell in column:
                for stack in cell:
                    yield from stack

    def clear(self) -> None:
        """Remove every tile, deferred tile and enemy."""
        for column in self.map:
            for cell in column:
                for stack in cell:
                    stack.clear()
        self.deferred_render_list.clear()
        self.enemies.clear()

    def tile_empty(self, x: int, y: int, z: int) -> bool:
        """True when the cell has no tiles; cells outside the grid count as empty."""
        if self._in_range(x, y, z):
            return not self.map[x][y][z]
        return True

    def layer_size(self, x: int, y: int, layer: int) -> int:
        """Number of tiles stacked in the cell, or -1 outside the grid."""
        if 0 <= x < len(self.map) and 0 <= y < len(self.map[x]) and 0 <= layer < len(self.map[x][y]):
            return len(self.map[x][y][layer])
        return -1

    def position(self) -> tuple[float, float]:
        """Position of the first tile of the top-left cell; IndexError when it has none."""
        return self.map[0][0][0][0].position

    def add_tile(
        self,
        x: int,
        y: int,
        z: int,
        texture_rect: pygame.Rect,
        collision: bool = False,
        tile_type: int = TileType.DEFAULT,
    ) -> None:
        if self._in_range(x, y, z):
            self.map[x][y][z].append(
                Tile(
                    float(x + self.offset_x),
                    float(y),
                    self.grid_size,
                    self.texture_sheet,
                    texture_rect,
                    collision,
                    tile_type,
                    self.small_offset_x,
                )
            )

    def remove_tile(self, x: int, y: int, z: int) -> None:
        """Remove the top tile of the cell, if any."""
        if self._in_range(x, y, z) and self.map[x][y][z]:
            self.map[x][y][z].pop()

    def save_to_file(self, file_name: str | Path) -> None:
        lines = [
            str(self.index),
            f"{self.size_x} {self.size_y}",
            str(self.grid_size_i),
            str(self.layers),
            self.tile_sheet_path,
        ]
        for x, column in enumerate(self.map):
            for y, cell in enumerate(column):
                for z, stack in enumerate(cell):
                    lines.extend(f"{x} {y} {z} {tile.as_string()}" for tile in stack)
        Path(file_name).write_text("\n".join(lines) + "\n")

    def load_from_file(self, file_name: str | Path, index: int = 0, in_editor_state: bool = False) -> None:
        """Replace the map with a saved one.

        A missing file leaves an empty map with the given index. Outside the
        editor, spike and turret tiles spawn their enemies.
        """
        try:
            content = Path(file_name).read_text()
        except OSError:
            self.clear()
            self.index = index
            return

        tokens = content.split()
        if len(tokens) < 6:
            raise ValueError(f"Malformed tile map header in {file_name}")
        try:
            file_index = int(tokens[0])
            size_x = _unsigned(tokens[1])
            size_y = _unsigned(tokens[2])
            grid_size = float(tokens[3])
            layers = int(tokens[4])
        except ValueError as exc:
            raise ValueError(f"Malformed tile map header in {file_name}") from exc
        path = tokens[5]

        self.index = file_index
        self.grid_size = grid_size
        self.size_x = size_x
        self.size_y = size_y
        self.layers = layers
        self.tile_sheet_path = path

        self.clear()
        self._build_grid()
        self.texture_sheet = _load_sheet(path)

        records = tokens[6:]
        for start in range(0, len(records) - 6, 7):
            chunk = records[start:start + 7]
            try:
                x, y, z, rect_x, rect_y = (int(token) for token in chunk[:5])
                collision = _flag(chunk[5])
                tile_type = int(chunk[6])
            except ValueError:
                break
            if not self._in_range(x, y, z):
                raise ValueError(f"Tile outside the grid in {file_name}: {x} {y} {z}")
            rect = pygame.Rect(rect_x, rect_y, self.grid_size_i, self.grid_size_i)
            self.map[x][y][z].append(
                Tile(
                    float(x + self.offset_x),
                    float(y),
                    self.grid_size,
                    self.texture_sheet,
                    rect,
                    collision,
                    tile_type,
                    self.small_offset_x,
                )
            )

        if not in_editor_state:
            self._spawn_enemies()

    def _spawn_enemies(self) -> None:
        for tile in self._tiles():
            x, y = tile.position
            if tile.tile_type == TileType.SPIKE:
                self.enemies.append(Spike(x, y, 1.0, 1.0))
            elif tile.tile_type == TileType.TURRET:
                self.enemies.append(Turret(x, y, 2.0, 2.0))

    def update_collision(self, entity: Entity, delta_time: float) -> None:
        """Push the entity out of the solid tiles it is about to enter."""
        self.layer = 0
        for column in self.map:
            for cell in column:
                if self.layer >= len(cell):
                    continue
                for tile in cell[self.layer]:
                    if not tile.collision or not tile.intersects(entity.next_position_bounds(delta_time), delta_time):
                        continue
                    body = entity.global_bounds
                    wall = tile.global_bounds
                    next_wall = tile.next_global_bounds(delta_time)
                    overlap_x = body.left < wall.right and body.right > wall.left
                    overlap_y = body.top < wall.bottom and body.bottom > wall.top

                    if body.top < wall.top and body.bottom < wall.bottom and overlap_x:
                        entity.stop_velocity_y()
                        entity.ground_check = True
                        entity.set_position(body.left, next_wall.top - body.height)
                    elif body.top > wall.top and body.bottom > wall.bottom and overlap_x:
                        entity.stop_velocity_y()
                        entity.set_position(body.left, next_wall.bottom)
                    elif body.left < wall.left and body.right < wall.right and overlap_y:
                        entity.stop_velocity_x()
                        entity.set_position(next_wall.left - body.width, body.top)
                    elif body.left > wall.left and body.right > wall.right and overlap_y:
                        entity.stop_velocity_x()
                        entity.set_position(next_wall.right, body.top)

    def update_enemy_attacks(self, entity: Entity, delta_time: float) -> bool:
        """Whether any enemy hits where the entity is about to be."""
        return any(enemy.attack(entity.next_position_bounds(delta_time)) for enemy in self.enemies)

    def update(self, delta_time: float) -> None:
        for tile in self._tiles():
            tile.update(delta_time)
        for enemy in self.enemies:
            enemy.update(delta_time)

    def _draw_markers(self, surface: pygame.Surface, tile: Tile, show_collision: bool) -> None:
        from dashrunner.gui import draw_rect

        if not show_collision:
            return
        if tile.collision:
            draw_rect(surface, tile.global_bounds, _COLLISION_FILL, _COLLISION_OUTLINE, -1.0)
        if tile.tile_type in (TileType.SPIKE, TileType.TURRET):
            draw_rect(surface, tile.global_bounds, _ENEMY_FILL, _ENEMY_OUTLINE, -1.0)

    def render(self, surface: pygame.Surface, show_collision: bool = False) -> None:
        """Draw the tiles; front tiles are kept back for ``render_deferred``."""
        for tile in self._tiles():
            if tile.tile_type == TileType.FRONT:
                self.deferred_render_list.append(tile)
            else:
                tile.render(surface)
                self._draw_markers(surface, tile, show_collision)

    def render_deferred(self, surface: pygame.Surface, show_collision: bool = False) -> None:
        """Draw the front tiles held back by ``render``, then the enemies."""
        while self.deferred_render_list:
            tile = self.deferred_render_list.popleft()
            tile.render(surface)
            self._draw_markers(surface, tile, show_collision)
        for enemy in self.enemies:
            enemy.render(surface)