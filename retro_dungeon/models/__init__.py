from .entities import Direction, Enemy, EnemyType, Player, Position  # noqa: F401
from .items import FloorItem, Item, ItemArena, ItemType  # noqa: F401

__all__ = [
    "Direction",
    "Enemy",
    "EnemyType",
    "FloorItem",
    "Item",
    "ItemArena",
    "ItemType",
    "Player",
    "Position",
]
