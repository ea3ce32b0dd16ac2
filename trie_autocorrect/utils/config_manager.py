# config_manager.py - JSON config manager

import json
import logging
import os
from typing import Any, Dict, Optional

from trie_autocorrect.core.autocorrect import EngineConfig
from trie_autocorrect.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "max_suggestions": 5,
    "max_edit_distance": 2,
    "candidate_factor": 10,  # traversal cap = max_suggestions * candidate_factor
    "dictionary_size": 500000,  # synthetic dictionary size when no file is given
    "dictionary_file": None,
}


def _coerce(key: str, val: Any) -> Any:
    """Convert `val` to the type of the option's default (None defaults take any value)."""
    default = DEFAULTS[key]
    if default is None:
        return None if val in (None, "", "none", "None") else val
    if isinstance(val, bool) and not isinstance(default, bool):
        raise TypeError(f"{key} expects {type(default).__name__}")
    return type(default)(val)


class Config:
    """
    Settings with defaults, overlaid by a JSON file when `path` is given.
    path=None keeps everything in memory (nothing is written).
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        if self.path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            self.save()
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("config %s unreadable, using defaults: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("config %s is not a JSON object, using defaults", self.path)
            return
        for k, v in loaded.items():
            if k not in DEFAULTS:
                logger.warning("unknown config option %r ignored", k)
                continue
            try:
                self.data[k] = _coerce(k, v)
            except (TypeError, ValueError):
                logger.warning("config option %r has bad value %r, keeping default", k, v)

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str) -> Any:
        return self.data[key]

    def set(self, key: str, val: Any) -> None:
        """Set an option, coercing `val` to the default's type; saves when file-backed."""
        if key not in DEFAULTS:
            raise ConfigError(f"no such option: {key}")
        try:
            self.data[key] = _coerce(key, val)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"bad value for {key}: {val!r}") from e
        self.save()

    def engine_config(self) -> EngineConfig:
        return EngineConfig(
            max_edit_distance=int(self.data["max_edit_distance"]),
            candidate_factor=int(self.data["candidate_factor"]),
        )
