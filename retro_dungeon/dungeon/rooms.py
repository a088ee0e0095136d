import random
from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class Room:
    x: int
    y: int
    w: int
    h: int

    def cells(self):
        for ix in range(self.x, self.x + self.w):
            for iy in range(self.y, self.y + self.h):
                yield ix, iy

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.w // 2, self.y + self.h // 2)


def scatter_rooms(
    width: int,
    height: int,
    rng: random.Random,
    min_rooms: int = 4,
    max_rooms: int = 8,
    min_size: int = 3,
    max_size: int = 10,
) -> List[Room]:
    """Place non-overlapping rooms inside a ``width`` x ``height`` area.

    Rooms keep a one-cell margin from the border and a two-cell gap from each other so a wall
    always separates them. Placement gives up after ``target * 15`` attempts; small maps may
    therefore return fewer rooms than requested (possibly none).
    """
    target = rng.randint(min_rooms, max_rooms)
    attempts = target * 15
    rooms: List[Room] = []
    while len(rooms) < target and attempts > 0:
        attempts -= 1
        w = rng.randint(min_size, max(min_size, min(max_size, width - 2)))
        h = rng.randint(min_size, max(min_size, min(max_size, height - 2)))
        if width - w - 2 < 1 or height - h - 2 < 1:
            continue
        x = rng.randint(1, width - w - 2)
        y = rng.randint(1, height - h - 2)
        new_room = Room(x, y, w, h)
        if _room_overlaps(new_room, rooms):
            continue
        rooms.append(new_room)
    return rooms


def _room_overlaps(room: Room, existing: List[Room]) -> bool:
    pad = 2  # wall ring plus a gap
    for r in existing:
        if (
            room.x - pad < r.x + r.w
            and room.x + room.w + pad > r.x
            and room.y - pad < r.y + r.h
            and room.y + room.h + pad > r.y
        ):
            return True
    return False


__all__ = ["Room", "scatter_rooms"]
