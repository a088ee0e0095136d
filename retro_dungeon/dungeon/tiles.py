# Tile constants centralized for modular imports
from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class TileType(Enum):
    FLOOR = "floor"
    WALL = "wall"
    DOOR = "door"
    STAIRS_UP = "stairs_up"
    STAIRS_DOWN = "stairs_down"
    TRAP = "trap"


class Tile(NamedTuple):
    type: TileType
    symbol: str
    walkable: bool


# Canonical glyph / walkability per type; Map.set_tile always writes one of these.
TILES = {
    TileType.FLOOR: Tile(TileType.FLOOR, ".", True),
    TileType.WALL: Tile(TileType.WALL, "#", False),
    TileType.DOOR: Tile(TileType.DOOR, "+", True),
    TileType.STAIRS_UP: Tile(TileType.STAIRS_UP, "<", True),
    TileType.STAIRS_DOWN: Tile(TileType.STAIRS_DOWN, ">", True),
    TileType.TRAP: Tile(TileType.TRAP, "^", True),
}

FLOOR = TILES[TileType.FLOOR]
WALL = TILES[TileType.WALL]


def tile_for(tile_type: TileType) -> Tile:
    return TILES[tile_type]


__all__ = ["TileType", "Tile", "TILES", "FLOOR", "WALL", "tile_for"]
