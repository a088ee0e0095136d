import importlib
import sys

import pytest

# Import run.py as a module and drive parse_args + main directly.


@pytest.fixture()
def run_module(monkeypatch):
    for key in ("RETRO_DUNGEON_SEED", "RETRO_DUNGEON_GENERATOR", "RETRO_DUNGEON_MAP_WIDTH", "RETRO_DUNGEON_MAP_HEIGHT"):
        monkeypatch.delenv(key, raising=False)
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


def test_version_flag_outputs_version(run_module, capsys):
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "Retro Dungeon" in out
    assert run_module.__version__ in out


def test_default_command_is_new(run_module):
    ns = run_module.parse_args([])
    assert ns.command == "new"
    assert ns.name == "Adventurer"
    ns = run_module.parse_args(["--log-level", "info"])
    assert ns.command == "new"


def test_parse_moves(run_module):
    D = run_module.Direction
    assert run_module.parse_moves("n e\tS w") == [D.NORTH, D.EAST, D.SOUTH, D.WEST]
    with pytest.raises(ValueError):
        run_module.parse_moves("nq")


def test_new_game_renders_frame(run_module, capsys):
    code = run_module.main(["new", "--name", "Ada", "--seed", "7", "--no-color"])
    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith("\033[2J\033[H")
    assert "Welcome to the dungeon, Ada!" in out
    assert "Health: 100/100" in out


def test_new_game_is_deterministic(run_module, capsys):
    run_module.main(["new", "--seed", "21", "--moves", "wws", "--no-color"])
    first = capsys.readouterr().out
    run_module.main(["new", "--seed", "21", "--moves", "wws", "--no-color"])
    assert capsys.readouterr().out == first


def test_save_then_load(run_module, tmp_path, capsys):
    path = tmp_path / "ada.sav"
    assert run_module.main(["new", "--name", "Ada", "--seed", "3", "--save", str(path)]) == 0
    assert path.read_text(encoding="utf-8").splitlines()[0] == "Ada"
    capsys.readouterr()
    assert run_module.main(["load", str(path), "--seed", "4"]) == 0
    assert "Welcome back, Ada!" in capsys.readouterr().out


def test_load_missing_file_fails(run_module, tmp_path, capsys):
    assert run_module.main(["load", str(tmp_path / "none.sav")]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_bad_moves_fail(run_module, capsys):
    assert run_module.main(["new", "--moves", "up"]) == 1
    assert "Unknown move" in capsys.readouterr().err


def test_play_moves_stops_when_game_ends(run_module):
    from retro_dungeon.config import GameConfig
    from retro_dungeon.game import Game, GameState

    game = Game(GameConfig(seed=1))
    game.new_game("Ada")
    game.state = GameState.GAME_OVER
    D = run_module.Direction
    assert run_module.play_moves(game, [D.NORTH, D.SOUTH]) == 0


def test_env_file_argument(run_module, tmp_path, capsys):
    env_file = tmp_path / ".env"
    env_file.write_text("RETRO_DUNGEON_MAP_HEIGHT=12\n")
    try:
        assert run_module.main(["--env-file", str(env_file), "new", "--no-color"]) == 0
    finally:
        import os

        os.environ.pop("RETRO_DUNGEON_MAP_HEIGHT", None)
    out = capsys.readouterr().out
    # Status line sits two rows below a 12-row map
    assert "\033[14;1HHealth:" in out
