"""Retro Dungeon CLI entry point.

Starts (or loads) a game, optionally replays a scripted move string, renders the resulting
frame and optionally writes a save file. Configuration comes from flags, ``RETRO_DUNGEON_*``
environment variables and an optional .env file; flags win.

Run `python run.py --help` for details.
"""

import argparse
import sys
from textwrap import dedent

from colorama import Fore, Style, just_fix_windows_console
from dotenv import load_dotenv

from retro_dungeon import __version__
from retro_dungeon import logging_utils
from retro_dungeon.config import GameConfig
from retro_dungeon.dungeon import GENERATORS
from retro_dungeon.game import Game, GameState
from retro_dungeon.logging_utils import log
from retro_dungeon.models.entities import Direction

MOVE_KEYS = {d.value: d for d in Direction}


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Retro Dungeon

    Start a new dungeon run or resume a saved character, replay a scripted
    sequence of moves and print the resulting ANSI frame. Configuration can be
    provided via CLI flags or environment variables. If both are present, CLI
    flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          RETRO_DUNGEON_SEED             Generator seed (default: random)
          RETRO_DUNGEON_GENERATOR        single_room | rooms (default: single_room)
          RETRO_DUNGEON_MAP_WIDTH        Map width (default: 80)
          RETRO_DUNGEON_MAP_HEIGHT       Map height (default: 24)
          RETRO_DUNGEON_MAX_MESSAGES     Message log size (default: 5)
          RETRO_DUNGEON_SAVE_PATH        Default save file (default: retro_dungeon.sav)
          RETRO_DUNGEON_LOG_LEVEL        debug | info | warn | error (default: warn)
          RETRO_DUNGEON_LOG_JSON         Emit JSON log lines when truthy

        Examples:
          # New game with a fixed seed, walk east twice then south
          python run.py new --name Ada --seed 42 --moves ees

          # Save after the scripted moves
          python run.py new --name Ada --seed 42 --moves ees --save ada.sav

          # Resume a saved character on a freshly generated level
          python run.py load ada.sav --moves n
        """
    )

    parser = argparse.ArgumentParser(
        prog="retro-dungeon",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=sorted(logging_utils.LEVELS, key=logging_utils.LEVELS.get),
        default=None,
        help="Override RETRO_DUNGEON_LOG_LEVEL (logs go to stderr)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Retro Dungeon {__version__}",
    )

    # Options shared by both subcommands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--seed", type=int, default=None, help="Generator seed (default: env or random)")
    common.add_argument(
        "--generator",
        choices=sorted(GENERATORS),
        default=None,
        help="Map generator (default: env or single_room)",
    )
    common.add_argument(
        "--moves",
        default="",
        help="Scripted moves applied in order: n, s, e, w (whitespace ignored)",
    )
    common.add_argument("--save", dest="save_path", default=None, help="Write a save file after the moves")
    common.add_argument("--no-color", dest="no_color", action="store_true", help="Disable ANSI colour")

    subparsers = parser.add_subparsers(dest="command")

    new_parser = subparsers.add_parser(
        "new",
        parents=[common],
        help="Start a new game",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    new_parser.add_argument("--name", default="Adventurer", help="Player name (default: Adventurer)")
    new_parser.set_defaults(command="new")

    load_parser = subparsers.add_parser(
        "load",
        parents=[common],
        help="Resume a character from a save file",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    load_parser.add_argument("path", help="Save file to read")
    load_parser.set_defaults(command="load")

    # If no subcommand provided, default to a new game
    if not any(a in subparsers.choices for a in argv):
        argv = list(argv) + ["new"]

    return parser.parse_args(argv)


def parse_moves(raw: str) -> list[Direction]:
    """Translate a move string into directions; raises ValueError on unknown keys."""
    moves = []
    for ch in raw.lower():
        if ch.isspace():
            continue
        if ch not in MOVE_KEYS:
            raise ValueError(f"Unknown move {ch!r}; use n, s, e or w")
        moves.append(MOVE_KEYS[ch])
    return moves


def play_moves(game: Game, moves: list[Direction]) -> int:
    """Apply moves until they run out or the game ends; returns the number applied."""
    applied = 0
    for direction in moves:
        if game.state is not GameState.PLAYING:
            break
        game.handle_movement(direction)
        game.update()
        applied += 1
    return applied


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()
    if args.log_level:
        logging_utils.configure(level=args.log_level)

    color = not args.no_color and sys.stdout.isatty()
    if color:
        just_fix_windows_console()

    def error(msg: str) -> int:
        prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if color else "[ERROR]"
        print(f"{prefix} {msg}", file=sys.stderr)
        return 1

    try:
        moves = parse_moves(args.moves)
    except ValueError as e:
        return error(str(e))

    config = GameConfig.from_env(seed=args.seed, generator=args.generator)
    try:
        game = Game(config)
        if args.command == "load":
            if not game.load_game(args.path):
                return error(f"Could not load save file: {args.path}")
        else:
            game.new_game(args.name)
    except ValueError as e:
        # Bad generator name or map dimensions from the environment
        return error(str(e))
    log.info(event="startup", mode=args.command, seed=game.generator.seed, generator=game.generator.name)

    play_moves(game, moves)
    game.render(stream=sys.stdout, color=color)
    print()

    if args.save_path and not game.save_game(args.save_path):
        return error(f"Could not write save file: {args.save_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
