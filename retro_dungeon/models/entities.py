"""Player and enemy entities.

Plain mutable records with a few derived helpers. Nothing here checks the map: movement
legality, collisions and combat ordering belong to ``Game``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, NamedTuple


class Position(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    NORTH = "n"
    SOUTH = "s"
    EAST = "e"
    WEST = "w"


# East steps two columns; the other directions step one.
MOVE_DELTAS: Dict[Direction, tuple] = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (2, 0),
    Direction.WEST: (-1, 0),
}


class EnemyType(Enum):
    GOBLIN = "goblin"
    ORC = "orc"
    SKELETON = "skeleton"
    ZOMBIE = "zombie"
    DRAGON = "dragon"
    RAT = "rat"
    SPIDER = "spider"


class EnemyStats(NamedTuple):
    name: str
    symbol: str
    health: int
    max_health: int
    attack_power: int
    defense: int


# Dragon starts with 0 health and is therefore dead on spawn.
ENEMY_STATS: Dict[EnemyType, EnemyStats] = {
    EnemyType.GOBLIN: EnemyStats("Goblin", "g", 20, 20, 5, 2),
    EnemyType.ORC: EnemyStats("Orc", "o", 40, 40, 10, 5),
    EnemyType.SKELETON: EnemyStats("Skeleton", "s", 25, 25, 8, 3),
    EnemyType.ZOMBIE: EnemyStats("Zombie", "z", 35, 35, 6, 8),
    EnemyType.DRAGON: EnemyStats("Dragon", "D", 0, 200, 30, 20),
    EnemyType.RAT: EnemyStats("Rat", "r", 5, 5, 2, 0),
    EnemyType.SPIDER: EnemyStats("Spider", "x", 15, 15, 6, 1),
}

ENEMY_EXP_REWARD = 10
ENEMY_GOLD_REWARD = 5

# Inventory accepts a new item while it holds 20 or fewer, so 21 fit.
INVENTORY_CAPACITY = 21


class _Combatant:
    health: int

    def take_damage(self, amount: int) -> None:
        self.health = max(0, self.health - max(0, amount))

    def is_alive(self) -> bool:
        return self.health > 0


@dataclass
class Enemy(_Combatant):
    id: int
    type: EnemyType
    pos: Position
    name: str
    symbol: str
    health: int
    max_health: int
    attack_power: int
    defense: int
    exp_reward: int = ENEMY_EXP_REWARD
    gold_reward: int = ENEMY_GOLD_REWARD

    @classmethod
    def spawn(cls, entity_id: int, enemy_type: EnemyType, pos: Position) -> "Enemy":
        stats = ENEMY_STATS[enemy_type]
        return cls(
            id=entity_id,
            type=enemy_type,
            pos=Position(*pos),
            name=stats.name,
            symbol=stats.symbol,
            health=stats.health,
            max_health=stats.max_health,
            attack_power=stats.attack_power,
            defense=stats.defense,
        )


@dataclass
class Player(_Combatant):
    id: int
    name: str
    pos: Position
    health: int = 100
    max_health: int = 100
    attack_power: int = 5
    defense: int = 2
    level: int = 1
    experience: int = 0
    gold: int = 0
    dungeon_level: int = 1
    inventory: List[int] = field(default_factory=list)  # ItemArena ids

    def heal(self, amount: int) -> None:
        self.health = min(self.health + max(0, amount), self.max_health)

    def add_item(self, item_id: int) -> bool:
        if len(self.inventory) >= INVENTORY_CAPACITY:
            return False
        self.inventory.append(item_id)
        return True

    def remove_item(self, item_id: int) -> bool:
        try:
            self.inventory.remove(item_id)
        except ValueError:
            return False
        return True

    def move(self, direction: Direction) -> bool:
        """Shift position by the direction's delta. Always succeeds; the caller validates."""
        dx, dy = MOVE_DELTAS[direction]
        self.pos = Position(self.pos.x + dx, self.pos.y + dy)
        return True


__all__ = [
    "Direction",
    "ENEMY_STATS",
    "Enemy",
    "EnemyStats",
    "EnemyType",
    "INVENTORY_CAPACITY",
    "MOVE_DELTAS",
    "Player",
    "Position",
]
