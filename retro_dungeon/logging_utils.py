"""Minimal structured logging helper.

Emits key=value pairs (or compact JSON) with a timestamp and level. Records go
to stderr by default because stdout carries the rendered game frames.

Usage:
    from retro_dungeon.logging_utils import log
    log.info(event="new_game", player="Ada", seed=42)

All non-str values are str()'d with spaces replaced. Reserved keys: level, ts.

Environment:
    RETRO_DUNGEON_LOG_LEVEL   debug | info | warn | error (default: warn)
    RETRO_DUNGEON_LOG_JSON    1/true/yes/on for one JSON object per line
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import IO, Optional

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("RETRO_DUNGEON_LOG_LEVEL", "warn"), 30)
JSON_MODE = os.getenv("RETRO_DUNGEON_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")
STREAM: Optional[IO[str]] = None  # None => sys.stderr at write time


def configure(level: Optional[str] = None, json_mode: Optional[bool] = None, stream: Optional[IO[str]] = None):
    """Adjust logging at runtime (CLI flags, tests).

    Unknown level names raise ValueError so a typo on the command line is not silently ignored.
    """
    global CURRENT_LEVEL, JSON_MODE, STREAM
    if level is not None:
        if level not in LEVELS:
            raise ValueError(f"Unknown log level {level!r}; expected one of {', '.join(LEVELS)}")
        CURRENT_LEVEL = LEVELS[level]
    if json_mode is not None:
        JSON_MODE = bool(json_mode)
    if stream is not None:
        STREAM = stream


def _format(level: str, **fields):
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        try:
            return json.dumps(rec, separators=(",", ":"))
        except (TypeError, ValueError):
            return json.dumps({"level": level, "ts": int(time.time()), "error": "json_encode_failed"})
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "retro_dungeon"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        print(_format(lvl, **fields), file=STREAM or sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("retro_dungeon")

__all__ = ["LEVELS", "configure", "get_logger", "log"]
