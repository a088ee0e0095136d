import pytest

from retro_dungeon.config import GameConfig


def test_defaults():
    cfg = GameConfig()
    assert (cfg.map_width, cfg.map_height, cfg.max_messages) == (80, 24, 5)
    assert (cfg.initial_enemies, cfg.items_per_level) == (5, 3)
    assert cfg.seed is None
    assert cfg.generator == "single_room"


def test_env_overrides():
    env = {
        "RETRO_DUNGEON_SEED": "42",
        "RETRO_DUNGEON_MAP_WIDTH": "40",
        "RETRO_DUNGEON_GENERATOR": "rooms",
        "RETRO_DUNGEON_SAVE_PATH": "/tmp/x.sav",
        "UNRELATED": "1",
    }
    cfg = GameConfig.from_env(env)
    assert cfg.seed == 42
    assert cfg.map_width == 40
    assert cfg.map_height == 24
    assert cfg.generator == "rooms"
    assert cfg.save_path == "/tmp/x.sav"


def test_random_seed_keyword():
    assert GameConfig.from_env({"RETRO_DUNGEON_SEED": "random"}).seed is None


def test_invalid_integer_is_skipped():
    cfg = GameConfig.from_env({"RETRO_DUNGEON_MAP_HEIGHT": "tall"})
    assert cfg.map_height == 24


def test_keyword_overrides_win_and_none_is_ignored():
    cfg = GameConfig.from_env({"RETRO_DUNGEON_SEED": "1"}, seed=9, generator=None)
    assert cfg.seed == 9
    assert cfg.generator == "single_room"


def test_unknown_override_rejected():
    with pytest.raises(ValueError):
        GameConfig.from_env({}, colour="blue")


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("RETRO_DUNGEON_MAX_MESSAGES", "8")
    assert GameConfig.from_env().max_messages == 8
