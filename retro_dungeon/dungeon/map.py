"""Fixed-size tile grid.

The grid is column-major (``grid[x][y]``) like the rest of the dungeon code. Coordinates
never raise: out-of-bounds reads return ``False``/``None`` and out-of-bounds writes are
dropped, so callers can probe freely around the edges.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from ..models.entities import Position
from .tiles import WALL, Tile, TileType, tile_for


class Map:
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.grid: List[List[Tile]] = [[WALL for _ in range(height)] for _ in range(width)]
        self.stairs_down: Optional[Position] = None
        self.entrance: Optional[Position] = None

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, x: int, y: int) -> bool:
        if not self.is_valid_position(x, y):
            return False
        return self.grid[x][y].walkable

    def get_tile(self, x: int, y: int) -> Optional[Tile]:
        if not self.is_valid_position(x, y):
            return None
        return self.grid[x][y]

    def set_tile(self, x: int, y: int, tile_type: TileType) -> None:
        if not self.is_valid_position(x, y):
            return
        self.grid[x][y] = tile_for(tile_type)

    def clear(self) -> None:
        for column in self.grid:
            for y in range(self.height):
                column[y] = WALL
        self.stairs_down = None
        self.entrance = None

    def cells_of(self, tile_type: TileType) -> Iterator[Position]:
        for x in range(self.width):
            for y in range(self.height):
                if self.grid[x][y].type is tile_type:
                    yield Position(x, y)

    def rows(self) -> Iterator[str]:
        """Yield each row of glyphs top to bottom."""
        for y in range(self.height):
            yield "".join(self.grid[x][y].symbol for x in range(self.width))

    def __repr__(self):  # pragma: no cover - debugging aid
        return f"Map({self.width}x{self.height}, stairs_down={self.stairs_down}, entrance={self.entrance})"


__all__ = ["Map"]
