"""Game session: state machine and turn loop.

A :class:`Game` is an explicit context object; nothing is module-global, so several sessions
can run side by side (tests rely on this). Lifecycle::

    MAIN_MENU --new_game--> PLAYING --player dies--> GAME_OVER
                  load_game --^

One turn is ``handle_movement(direction)`` followed by ``update()``:
    1. the player moves unconditionally (walls do not block);
    2. a living enemy on the destination triggers one melee exchange;
    3. floor items on the destination are picked up, unless that fight was fatal;
    4. standing on a down-staircase descends a level, even after a fatal fight.

The state is not checked here; turn drivers stop feeding moves once the game is over.
``update()`` then removes at most one dead enemy.
"""

from __future__ import annotations

from enum import Enum
from typing import IO, List, Optional, Union

from .config import GameConfig
from .dungeon import Map, MapGenerator, TileType, get_generator
from .logging_utils import get_logger
from .messages import MessageLog
from .models.entities import Direction, Enemy, Player, Position
from .models.items import Armor, FloorItem, Item, ItemArena, Potion, Treasure, Weapon
from .render import AnsiRenderer
from .services import save_service
from .services.combat_service import CombatResult, resolve_melee
from .services.spawn_service import spawn_enemies, spawn_items

_log = get_logger("retro_dungeon.game")

# Initial player cell before the map's entrance is known
PLAYER_SPAWN = Position(5, 5)


class GameState(Enum):
    MAIN_MENU = "main_menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Game:
    def __init__(self, config: Optional[GameConfig] = None, generator: Optional[MapGenerator] = None):
        self.config = config or GameConfig()
        self.generator = generator or get_generator(self.config.generator, self.config.seed)
        self.state = GameState.MAIN_MENU
        self._next_entity_id = 1
        self.player: Optional[Player] = None
        self.map: Optional[Map] = None
        self.enemies: List[Enemy] = []
        self.items = ItemArena()
        self.floor_items: List[FloorItem] = []
        self.messages = MessageLog(self.config.max_messages)

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------
    def next_entity_id(self) -> int:
        entity_id = self._next_entity_id
        self._next_entity_id += 1
        return entity_id

    def new_game(self, player_name: str) -> None:
        self.player = Player(self.next_entity_id(), player_name, PLAYER_SPAWN)
        self.items.clear()
        self._build_level(self.config.initial_enemies, self.config.items_per_level)
        self.state = GameState.PLAYING
        self.messages.clear()
        self.add_message(f"Welcome to the dungeon, {player_name}!")
        _log.info(event="new_game", player=player_name, seed=self.generator.seed, generator=self.generator.name)

    def shutdown(self) -> None:
        self.player = None
        self.map = None
        self.enemies.clear()
        self.floor_items.clear()
        self.items.clear()
        self.messages.clear()

    def next_level(self) -> None:
        self.player.dungeon_level += 1
        self._build_level(self.config.initial_enemies + self.player.dungeon_level, self.config.items_per_level)
        self.add_message(f"You descend to dungeon level {self.player.dungeon_level}")
        _log.info(event="level_descend", player=self.player.name, dungeon_level=self.player.dungeon_level)

    def _build_level(self, enemy_count: int, item_count: int) -> None:
        width, height = self.config.map_width, self.config.map_height
        self.map = self.generator.generate(width, height)
        self.player.pos = self.map.entrance or Position(width // 4 + 1, height // 4 + 1)
        self.enemies.clear()
        self._clear_floor_items()
        rng = self.generator.rng
        self.enemies.extend(spawn_enemies(rng, enemy_count, width, height, self.next_entity_id))
        self.floor_items.extend(spawn_items(rng, item_count, width, height, self.items, self.next_entity_id))

    def _clear_floor_items(self) -> None:
        for floor_item in self.floor_items:
            self.items.discard(floor_item.item_id)
        self.floor_items.clear()

    # ------------------------------------------------------------------
    # Turn loop
    # ------------------------------------------------------------------
    def handle_movement(self, direction: Union[Direction, str]) -> None:
        if self.player is None or self.map is None:
            return
        direction = Direction(direction)
        self.player.move(direction)
        x, y = self.player.pos

        if not self.map.is_walkable(x, y):
            # Movement is not gated; only note it
            _log.debug(event="entered_blocked_tile", x=x, y=y)

        enemy = self.get_enemy_at(self.player.pos)
        if enemy is not None:
            self.handle_combat(enemy)
        if self.state is GameState.PLAYING:
            self.pickup_items()

        tile = self.map.get_tile(x, y)
        if tile is not None and tile.type is TileType.STAIRS_DOWN:
            self.next_level()

    def handle_combat(self, enemy: Enemy) -> CombatResult:
        result = resolve_melee(self.player, enemy)
        for message in result.messages:
            self.add_message(message)
        if result.enemy_killed:
            _log.info(event="enemy_slain", enemy=enemy.name, enemy_id=enemy.id, xp=self.player.experience)
        if result.player_killed:
            self.state = GameState.GAME_OVER
            _log.info(event="player_slain", player=self.player.name, by=enemy.name)
        return result

    def update(self) -> Optional[Enemy]:
        """Reap the first dead enemy (at most one per call) and return it."""
        for enemy in self.enemies:
            if not enemy.is_alive():
                self.enemies.remove(enemy)
                _log.debug(event="enemy_reaped", enemy=enemy.name, enemy_id=enemy.id)
                return enemy
        return None

    def get_enemy_at(self, pos: Position) -> Optional[Enemy]:
        for enemy in self.enemies:
            if enemy.pos == pos and enemy.is_alive():
                return enemy
        return None

    def add_message(self, message: str) -> None:
        self.messages.add(message)

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------
    def items_at(self, pos: Position) -> List[FloorItem]:
        return [fi for fi in self.floor_items if fi.pos == pos]

    def pickup_items(self) -> int:
        picked = 0
        for floor_item in self.items_at(self.player.pos):
            if not self.player.add_item(floor_item.item_id):
                self.add_message("Your pack is full.")
                break
            self.floor_items.remove(floor_item)
            self.add_message(f"You pick up {self.items.get(floor_item.item_id).name}.")
            picked += 1
        return picked

    def use_item(self, item_id: int) -> bool:
        if self.player is None or item_id not in self.player.inventory:
            return False
        item: Item = self.items.get(item_id)
        if isinstance(item, Potion):
            before = self.player.health
            self.player.heal(item.heal)
            self.add_message(f"You drink the {item.name}. +{self.player.health - before} HP")
        elif isinstance(item, Weapon):
            self.player.attack_power += item.damage
            self.add_message(f"You wield the {item.name}. +{item.damage} ATK")
        elif isinstance(item, Armor):
            self.player.defense += item.defense
            self.add_message(f"You don the {item.name}. +{item.defense} DEF")
        elif isinstance(item, Treasure):
            self.player.gold += item.value
            self.add_message(f"You cash in the {item.name}. +{item.value} gold")
        else:
            return False
        self.player.remove_item(item_id)
        self.items.discard(item_id)
        return True

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def save_game(self, path=None) -> bool:
        path = path or self.config.save_path
        if self.player is None:
            _log.warn(event="save_failed", path=path, error="no_active_player")
            return False
        try:
            save_service.write_save(path, self.player)
        except (OSError, save_service.SaveFormatError) as e:
            _log.warn(event="save_failed", path=path, error=str(e))
            return False
        _log.info(event="save_written", path=path, player=self.player.name)
        return True

    def load_game(self, path=None) -> bool:
        path = path or self.config.save_path
        try:
            record = save_service.read_save(path)
        except (OSError, save_service.SaveFormatError) as e:
            _log.warn(event="load_failed", path=path, error=str(e))
            return False
        self.player = record.apply_to(Player(self.next_entity_id(), record.name, PLAYER_SPAWN))
        self.items.clear()
        self.floor_items.clear()
        self._build_level(self.config.initial_enemies, 0)
        self.state = GameState.PLAYING
        self.messages.clear()
        self.add_message(f"Welcome back, {record.name}!")
        _log.info(event="game_loaded", path=path, player=record.name, dungeon_level=record.dungeon_level)
        return True

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def render(self, stream: Optional[IO[str]] = None, color: bool = False) -> str:
        return AnsiRenderer(stream=stream, color=color).render(self)


__all__ = ["Game", "GameState", "PLAYER_SPAWN"]
