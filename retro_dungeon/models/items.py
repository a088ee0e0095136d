"""Item variants and the arena that owns them.

Every item lives in exactly one :class:`ItemArena`; the floor list and the player's inventory
refer to items by id only. Items are frozen once created, so sharing an id between collections
can never leak a mutation.

Variants carry only the effect field they use:
    * ``Potion.heal``     health restored when used
    * ``Weapon.damage``   attack power gained when used (equipped permanently)
    * ``Armor.defense``   defense gained when used
    * ``Treasure``        no effect beyond ``value`` (converted to gold when used)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, NamedTuple, Optional

from .entities import Position


class ItemType(Enum):
    POTION = "potion"
    WEAPON = "weapon"
    ARMOR = "armor"
    TREASURE = "treasure"


@dataclass(frozen=True)
class Item:
    id: int
    name: str
    symbol: str
    value: int

    type = None  # overridden per variant


@dataclass(frozen=True)
class Potion(Item):
    heal: int = 0

    type = ItemType.POTION


@dataclass(frozen=True)
class Weapon(Item):
    damage: int = 0

    type = ItemType.WEAPON


@dataclass(frozen=True)
class Armor(Item):
    defense: int = 0

    type = ItemType.ARMOR


@dataclass(frozen=True)
class Treasure(Item):
    type = ItemType.TREASURE


VARIANTS = {
    ItemType.POTION: Potion,
    ItemType.WEAPON: Weapon,
    ItemType.ARMOR: Armor,
    ItemType.TREASURE: Treasure,
}


class FloorItem(NamedTuple):
    item_id: int
    pos: Position


def health_potion(item_id: int) -> Potion:
    return Potion(id=item_id, name="Health Potion", symbol="!", value=25, heal=20)


class ItemArena:
    def __init__(self):
        self._items: Dict[int, Item] = {}

    def add(self, item: Item) -> Item:
        if item.id in self._items:
            raise ValueError(f"Item id {item.id} already registered")
        self._items[item.id] = item
        return item

    def create(self, item_type: ItemType, item_id: int, **fields) -> Item:
        """Build a variant by tag and register it. Unknown tags raise ValueError."""
        try:
            cls = VARIANTS[item_type]
        except KeyError:
            raise ValueError(f"Unknown item type {item_type!r}") from None
        return self.add(cls(id=item_id, **fields))

    def get(self, item_id: int) -> Optional[Item]:
        return self._items.get(item_id)

    def discard(self, item_id: int) -> None:
        self._items.pop(item_id, None)

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, item_id: int) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items.values())


__all__ = [
    "Armor",
    "FloorItem",
    "Item",
    "ItemArena",
    "ItemType",
    "Potion",
    "Treasure",
    "VARIANTS",
    "Weapon",
    "health_potion",
]
