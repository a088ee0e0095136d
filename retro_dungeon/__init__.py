"""Retro Dungeon: a small terminal dungeon crawler.

Public surface:
    Game / GameState     session context object and state machine
    GameConfig           tunables with RETRO_DUNGEON_* environment overrides
    get_generator        pluggable map generators ("single_room", "rooms")
"""

from .config import GameConfig  # noqa: F401
from .dungeon import get_generator  # noqa: F401
from .game import Game, GameState  # noqa: F401
from .models import Direction  # noqa: F401

__version__ = "0.1.0"

__all__ = ["Direction", "Game", "GameConfig", "GameState", "get_generator", "__version__"]
