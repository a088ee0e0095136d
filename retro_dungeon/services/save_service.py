"""Plain-text player save record.

Format (UTF-8, three lines, whitespace separated integers)::

    <name>
    <health> <max_health> <attack_power> <defense>
    <level> <experience> <gold> <dungeon_level>

There is no header or version. Only the player's stats are stored: map layout, enemies, floor
items and inventory are regenerated on load.
"""

from __future__ import annotations

import os
from typing import NamedTuple, Union

from ..models.entities import Player

PathLike = Union[str, "os.PathLike[str]"]


class SaveFormatError(ValueError):
    """Raised when a save record cannot be written or parsed."""


class SaveRecord(NamedTuple):
    name: str
    health: int
    max_health: int
    attack_power: int
    defense: int
    level: int
    experience: int
    gold: int
    dungeon_level: int

    @classmethod
    def from_player(cls, player: Player) -> "SaveRecord":
        return cls(
            player.name,
            player.health,
            player.max_health,
            player.attack_power,
            player.defense,
            player.level,
            player.experience,
            player.gold,
            player.dungeon_level,
        )

    def apply_to(self, player: Player) -> Player:
        player.health = self.health
        player.max_health = self.max_health
        player.attack_power = self.attack_power
        player.defense = self.defense
        player.level = self.level
        player.experience = self.experience
        player.gold = self.gold
        player.dungeon_level = self.dungeon_level
        return player


def format_record(record: SaveRecord) -> str:
    if "\n" in record.name or "\r" in record.name:
        raise SaveFormatError("Player name may not contain a line break")
    return (
        f"{record.name}\n"
        f"{record.health} {record.max_health} {record.attack_power} {record.defense}\n"
        f"{record.level} {record.experience} {record.gold} {record.dungeon_level}\n"
    )


def parse_record(text: str) -> SaveRecord:
    name, sep, rest = text.partition("\n")
    if not sep:
        raise SaveFormatError("Save record is missing its stat lines")
    tokens = rest.split()
    if len(tokens) != 8:
        raise SaveFormatError(f"Expected 8 stat values, found {len(tokens)}")
    try:
        values = [int(t) for t in tokens]
    except ValueError as exc:
        raise SaveFormatError(f"Non-integer stat value: {exc}") from exc
    return SaveRecord(name.rstrip("\r"), *values)


def write_save(path: PathLike, player: Player) -> SaveRecord:
    """Write ``player`` to ``path``. OSError propagates; bad names raise SaveFormatError."""
    record = SaveRecord.from_player(player)
    payload = format_record(record)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(payload)
    return record


def read_save(path: PathLike) -> SaveRecord:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return parse_record(f.read())


__all__ = ["SaveFormatError", "SaveRecord", "format_record", "parse_record", "read_save", "write_save"]
