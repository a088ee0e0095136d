from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

from .logging_utils import get_logger

_log = get_logger("retro_dungeon.config")

ENV_PREFIX = "RETRO_DUNGEON_"


@dataclass
class GameConfig:
    map_width: int = 80
    map_height: int = 24
    max_messages: int = 5
    initial_enemies: int = 5
    items_per_level: int = 3
    seed: Optional[int] = None
    generator: str = "single_room"
    save_path: str = "retro_dungeon.sav"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "GameConfig":
        """Build a config from ``RETRO_DUNGEON_<FIELD>`` variables.

        Explicit keyword overrides win over the environment; ``None`` overrides are ignored so
        argparse defaults can be passed straight through. Malformed integers are logged and skipped.
        """
        environ = os.environ if environ is None else environ
        cfg = cls()
        for f in fields(cls):
            env_key = ENV_PREFIX + f.name.upper()
            if env_key not in environ:
                continue
            raw = environ[env_key].strip()
            if f.name in ("generator", "save_path"):
                setattr(cfg, f.name, raw)
                continue
            if f.name == "seed" and raw.lower() in ("", "none", "random"):
                cfg.seed = None
                continue
            try:
                setattr(cfg, f.name, int(raw))
            except ValueError:
                _log.warn(event="config_invalid_int", key=env_key, value=raw)
        for name, value in overrides.items():
            if value is None:
                continue
            if not hasattr(cfg, name):
                raise ValueError(f"Unknown config option {name!r}")
            setattr(cfg, name, value)
        return cfg


__all__ = ["GameConfig", "ENV_PREFIX"]
