"""Enemy and item placement.

Stateless helpers that draw from the generator's ``random.Random`` so a seed reproduces a whole
level. Positions are uniform over the map interior ``[1, w-2] x [1, h-2]`` and are not checked
against walls; enemies embedded in rock simply wait to be dug out.
"""

from __future__ import annotations

import random
from typing import Callable, List, Tuple

from ..models.entities import Enemy, EnemyType, Position
from ..models.items import FloorItem, ItemArena, health_potion

# Draw order for the type roll; index = rng.randint(0, 6)
SPAWN_ORDER: Tuple[EnemyType, ...] = (
    EnemyType.GOBLIN,
    EnemyType.ORC,
    EnemyType.SKELETON,
    EnemyType.ZOMBIE,
    EnemyType.RAT,
    EnemyType.SPIDER,
    EnemyType.DRAGON,
)


def _interior_position(rng: random.Random, width: int, height: int) -> Position:
    x = rng.randint(1, max(1, width - 2))
    y = rng.randint(1, max(1, height - 2))
    return Position(x, y)


def spawn_enemies(
    rng: random.Random, count: int, width: int, height: int, next_id: Callable[[], int]
) -> List[Enemy]:
    enemies = []
    for _ in range(max(0, count)):
        pos = _interior_position(rng, width, height)
        enemy_type = SPAWN_ORDER[rng.randint(0, len(SPAWN_ORDER) - 1)]
        enemies.append(Enemy.spawn(next_id(), enemy_type, pos))
    return enemies


def spawn_items(
    rng: random.Random, count: int, width: int, height: int, arena: ItemArena, next_id: Callable[[], int]
) -> List[FloorItem]:
    """Register ``count`` health potions in ``arena`` and return their floor placements."""
    placed = []
    for _ in range(max(0, count)):
        pos = _interior_position(rng, width, height)
        item = arena.add(health_potion(next_id()))
        placed.append(FloorItem(item.id, pos))
    return placed


__all__ = ["SPAWN_ORDER", "spawn_enemies", "spawn_items"]
