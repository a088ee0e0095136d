import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from retro_dungeon.config import GameConfig  # noqa: E402
from retro_dungeon.dungeon import TileType  # noqa: E402
from retro_dungeon.game import Game  # noqa: E402


@pytest.fixture()
def config():
    return GameConfig(seed=1234)


@pytest.fixture()
def game(config):
    g = Game(config)
    g.new_game("Tester")
    return g


@pytest.fixture()
def quiet_game(game):
    """A started game with no enemies or floor items and plain floor around the player.

    Lets movement tests place exactly what they need without random spawns interfering.
    """
    game.enemies.clear()
    game.floor_items.clear()
    px, py = game.player.pos
    for dx in range(-2, 3):
        for dy in range(-2, 3):
            game.map.set_tile(px + dx, py + dy, TileType.FLOOR)
    game.map.stairs_down = None
    return game
