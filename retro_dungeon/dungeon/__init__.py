"""Public dungeon package interface: tiles, the map grid and pluggable generators."""

from .generator import (
    GENERATORS,
    MapGenerator,
    RoomsGenerator,
    SingleRoomGenerator,
    get_generator,
)  # noqa: F401
from .map import Map  # noqa: F401
from .rooms import Room  # noqa: F401
from .tiles import TILES, Tile, TileType  # noqa: F401

__all__ = [
    "GENERATORS",
    "Map",
    "MapGenerator",
    "Room",
    "RoomsGenerator",
    "SingleRoomGenerator",
    "TILES",
    "Tile",
    "TileType",
    "get_generator",
]
