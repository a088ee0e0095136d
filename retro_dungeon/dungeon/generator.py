"""Map generators.

A generator turns ``(width, height)`` into a fully populated :class:`Map` using its own seeded
``random.Random``. ``Game`` keeps drawing spawn positions from that same ``rng`` after each
``generate`` call, so one seed fixes both the level layout and everything placed on it.

Generators:
    * ``single_room``: one centered rectangle spanning the middle half of each axis, with a
      down-staircase at a uniformly random cell inside it.
    * ``rooms``: scattered rectangular rooms chained by L-shaped corridors; stairs in the last
      room, entrance at the center of the first.

Both record ``map.entrance`` (where the player is placed) and ``map.stairs_down``.
"""

from __future__ import annotations

import random
from typing import Dict, Optional, Type

from ..logging_utils import get_logger
from ..models.entities import Position
from .map import Map
from .rooms import Room, scatter_rooms
from .tiles import TileType

_log = get_logger("retro_dungeon.dungeon")

MIN_DIMENSION = 2


class MapGenerator:
    name = "base"

    def __init__(self, seed: Optional[int] = None):
        # 0 is a valid deterministic seed; None => draw one from system entropy
        if seed is None:
            seed = random.SystemRandom().randint(0, 2**31 - 1)
        self.seed = seed
        self.rng = random.Random(seed)

    def generate(self, width: int, height: int) -> Map:
        if width < MIN_DIMENSION or height < MIN_DIMENSION:
            raise ValueError(f"Map dimensions must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, got {width}x{height}")
        dungeon_map = Map(width, height)
        self._build(dungeon_map)
        _log.debug(
            event="generator_run",
            generator=self.name,
            seed=self.seed,
            width=width,
            height=height,
            stairs=dungeon_map.stairs_down,
        )
        return dungeon_map

    def _build(self, dungeon_map: Map) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Shared carving helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _carve_room(dungeon_map: Map, room: Room) -> None:
        # Never carve the last row/column so the border stays solid
        for x, y in room.cells():
            if x < dungeon_map.width - 1 and y < dungeon_map.height - 1:
                dungeon_map.set_tile(x, y, TileType.FLOOR)

    def _place_stairs(self, dungeon_map: Map, room: Room) -> Position:
        stairs = Position(
            self.rng.randint(room.x, room.x + room.w - 1),
            self.rng.randint(room.y, room.y + room.h - 1),
        )
        dungeon_map.set_tile(stairs.x, stairs.y, TileType.STAIRS_DOWN)
        dungeon_map.stairs_down = stairs
        return stairs


class SingleRoomGenerator(MapGenerator):
    name = "single_room"

    @staticmethod
    def centered_room(width: int, height: int) -> Room:
        return Room(width // 4, height // 4, width // 2, height // 2)

    def _build(self, dungeon_map: Map) -> None:
        room = self.centered_room(dungeon_map.width, dungeon_map.height)
        self._carve_room(dungeon_map, room)
        self._place_stairs(dungeon_map, room)
        # One cell in from the room's top-left corner (clamped for tiny rooms)
        dungeon_map.entrance = Position(
            min(room.x + 1, room.x + room.w - 1),
            min(room.y + 1, room.y + room.h - 1),
        )


class RoomsGenerator(MapGenerator):
    name = "rooms"

    def _build(self, dungeon_map: Map) -> None:
        rooms = scatter_rooms(dungeon_map.width, dungeon_map.height, self.rng)
        if not rooms:
            # Too small for scattering; degrade to the single centered room
            rooms = [SingleRoomGenerator.centered_room(dungeon_map.width, dungeon_map.height)]
        for room in rooms:
            self._carve_room(dungeon_map, room)
        for prev, room in zip(rooms, rooms[1:]):
            self._carve_corridor(dungeon_map, prev.center, room.center)
        self._place_stairs(dungeon_map, rooms[-1])
        dungeon_map.entrance = Position(*rooms[0].center)

    def _carve_corridor(self, dungeon_map: Map, start, end) -> None:
        (x1, y1), (x2, y2) = start, end
        if self.rng.random() < 0.5:
            self._carve_line(dungeon_map, x1, y1, x2, y1)
            self._carve_line(dungeon_map, x2, y1, x2, y2)
        else:
            self._carve_line(dungeon_map, x1, y1, x1, y2)
            self._carve_line(dungeon_map, x1, y2, x2, y2)

    @staticmethod
    def _carve_line(dungeon_map: Map, x1: int, y1: int, x2: int, y2: int) -> None:
        dx = 1 if x2 >= x1 else -1
        dy = 1 if y2 >= y1 else -1
        for xx in range(x1, x2 + dx, dx):
            for yy in range(y1, y2 + dy, dy):
                tile = dungeon_map.get_tile(xx, yy)
                if tile is not None and tile.type is TileType.WALL:
                    dungeon_map.set_tile(xx, yy, TileType.FLOOR)


GENERATORS: Dict[str, Type[MapGenerator]] = {
    SingleRoomGenerator.name: SingleRoomGenerator,
    RoomsGenerator.name: RoomsGenerator,
}


def get_generator(name: str, seed: Optional[int] = None) -> MapGenerator:
    """Instantiate a registered generator by name; raises ValueError for unknown names."""
    try:
        cls = GENERATORS[name]
    except KeyError:
        raise ValueError(f"Unknown generator {name!r}; available: {', '.join(sorted(GENERATORS))}") from None
    return cls(seed=seed)


__all__ = [
    "MapGenerator",
    "SingleRoomGenerator",
    "RoomsGenerator",
    "GENERATORS",
    "get_generator",
]
