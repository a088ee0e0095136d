"""ANSI frame renderer.

Each frame clears the screen, prints the map row by row, then positions entity glyphs with
cursor-addressing escapes (1-based ``row;col``). Below the map are the status line at row
``map_height + 2`` and the message log from row ``map_height + 4``. A missing player or map skips
only the parts that need it.

Colour uses colorama's ``Fore``/``Style`` codes and is off by default so frames stay
byte-predictable. The CLI turns it on for interactive terminals.
"""

from __future__ import annotations

import sys
from typing import IO, TYPE_CHECKING, List, Optional

from colorama import Fore, Style

from .dungeon.tiles import TileType

if TYPE_CHECKING:  # pragma: no cover
    from .game import Game

CLEAR_SCREEN = "\033[2J\033[H"
PLAYER_GLYPH = "@"

_TILE_COLORS = {
    TileType.STAIRS_DOWN: Fore.MAGENTA + Style.BRIGHT,
    TileType.STAIRS_UP: Fore.MAGENTA,
    TileType.DOOR: Fore.YELLOW,
    TileType.TRAP: Fore.RED,
}


def cursor_to(row: int, col: int) -> str:
    return f"\033[{row};{col}H"


class AnsiRenderer:
    def __init__(self, stream: Optional[IO[str]] = None, color: bool = False):
        self.stream = stream
        self.color = color

    def _paint(self, text: str, code: str) -> str:
        if not self.color:
            return text
        return f"{code}{text}{Style.RESET_ALL}"

    def _glyph_at(self, x: int, y: int, glyph: str, code: str) -> str:
        return cursor_to(y + 1, x + 1) + self._paint(glyph, code)

    def map_section(self, game: "Game") -> str:
        dungeon_map = game.map
        if dungeon_map is None:
            return ""
        if not self.color:
            return "".join(row + "\n" for row in dungeon_map.rows())
        lines = []
        for y in range(dungeon_map.height):
            cells = []
            for x in range(dungeon_map.width):
                tile = dungeon_map.grid[x][y]
                code = _TILE_COLORS.get(tile.type)
                cells.append(self._paint(tile.symbol, code) if code else tile.symbol)
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def entity_section(self, game: "Game") -> str:
        parts: List[str] = []
        for floor_item in game.floor_items:
            item = game.items.get(floor_item.item_id)
            if item is not None:
                parts.append(self._glyph_at(floor_item.pos.x, floor_item.pos.y, item.symbol, Fore.GREEN))
        if game.player is not None:
            parts.append(self._glyph_at(game.player.pos.x, game.player.pos.y, PLAYER_GLYPH, Fore.YELLOW + Style.BRIGHT))
        for enemy in game.enemies:
            if enemy.is_alive():
                parts.append(self._glyph_at(enemy.pos.x, enemy.pos.y, enemy.symbol, Fore.RED))
        return "".join(parts)

    def status_section(self, game: "Game") -> str:
        player = game.player
        if player is None:
            return ""
        line = (
            f"Health: {player.health}/{player.max_health}"
            f"  Level: {player.level}"
            f"  Gold: {player.gold}"
            f"  Dungeon: {player.dungeon_level}"
        )
        low = player.health * 4 <= player.max_health
        return cursor_to(game.config.map_height + 2, 1) + self._paint(line, Fore.RED if low else Fore.WHITE)

    def message_section(self, game: "Game") -> str:
        row = game.config.map_height + 4
        parts = []
        for offset, message in enumerate(game.messages):
            parts.append(cursor_to(row + offset, 1) + message)
        return "".join(parts)

    def build_frame(self, game: "Game") -> str:
        return (
            CLEAR_SCREEN
            + self.map_section(game)
            + self.entity_section(game)
            + self.status_section(game)
            + self.message_section(game)
        )

    def render(self, game: "Game") -> str:
        """Write one frame to the stream (stdout by default) and return it."""
        frame = self.build_frame(game)
        stream = self.stream or sys.stdout
        stream.write(frame)
        stream.flush()
        return frame


__all__ = ["AnsiRenderer", "CLEAR_SCREEN", "cursor_to"]
