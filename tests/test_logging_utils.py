import io
import json

import pytest

from retro_dungeon import logging_utils


@pytest.fixture()
def sink(monkeypatch):
    buf = io.StringIO()
    monkeypatch.setattr(logging_utils, "STREAM", buf)
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.LEVELS["info"])
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    return buf


def test_key_value_format(sink):
    logging_utils.get_logger("t").info(event="new_game", player="Ada Lovelace", seed=3)
    line = sink.getvalue().strip()
    assert line.startswith("level=info ts=")
    assert "event=new_game" in line
    assert "player=Ada_Lovelace" in line
    assert "seed=3" in line
    assert "logger=t" in line


def test_level_threshold(sink):
    log = logging_utils.get_logger("t")
    log.debug(event="hidden")
    log.warn(event="shown")
    out = sink.getvalue()
    assert "hidden" not in out
    assert "event=shown" in out


def test_json_mode_and_none_dropped(sink):
    logging_utils.configure(json_mode=True)
    logging_utils.get_logger("t").error(event="save_failed", path=None, error="disk full")
    rec = json.loads(sink.getvalue())
    assert rec["level"] == "error"
    assert rec["error"] == "disk full"
    assert "path" not in rec


def test_configure_level(sink):
    logging_utils.configure(level="error")
    logging_utils.get_logger("t").warn(event="quiet")
    assert sink.getvalue() == ""
    with pytest.raises(ValueError):
        logging_utils.configure(level="verbose")


def test_logger_cache():
    assert logging_utils.get_logger("same") is logging_utils.get_logger("same")


def test_failed_load_is_logged(sink, tmp_path):
    from retro_dungeon.config import GameConfig
    from retro_dungeon.game import Game

    Game(GameConfig(seed=1)).load_game(tmp_path / "missing.sav")
    assert "event=load_failed" in sink.getvalue()
