"""
config.py — Runtime Configuration
==================================
Class-level settings read everywhere as ``Config.<name>``.  A JSON file
can override them via :meth:`Config.load_from_file`; ``main.py`` loads
the file named by the ``DSVIZ_CONFIG`` environment variable when set.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_FIELDS = ("bucket_count", "speed_presets", "default_speed",
           "log_level", "secret_key", "config_file")


class Config:
    """Global configuration.

    Attributes
    ----------
    bucket_count:
        Number of buckets for the hash set / hash table pages.
    speed_presets:
        ``{structure kind: {"slow"|"normal"|"fast": seconds per step}}``.
        Kinds not listed fall back to ``"default"``.
    default_speed:
        Preset a fresh playback controller starts on.
    log_level:
        Level name passed to :func:`configure_logging`.
    secret_key:
        Flask secret key; ``None`` leaves Flask's default.
    config_file:
        Absolute path of the last file loaded, if any.
    """

    bucket_count: int = 10
    speed_presets: Dict[str, Dict[str, float]] = {
        "default":     {"slow": 1.5, "normal": 1.0, "fast": 0.5},
        "graph":       {"slow": 2.0, "normal": 1.5, "fast": 0.8},
        "bst":         {"slow": 1.5, "normal": 0.8, "fast": 0.4},
        "linked-list": {"slow": 1.5, "normal": 0.8, "fast": 0.4},
    }
    default_speed: str = "normal"
    log_level: str = "INFO"
    secret_key: Optional[str] = None
    config_file: Optional[str] = None

    @classmethod
    def presets_for(cls, kind: str) -> Dict[str, float]:
        return dict(cls.speed_presets.get(kind, cls.speed_presets["default"]))

    @classmethod
    def load_from_file(cls, path: str) -> None:
        """Load configuration values from a JSON file.

        Only keys naming a setting above are assigned; anything else
        in the file is ignored.  Nested dictionaries are merged recursively when the
        existing attribute is also a ``dict``.
        """
        if not os.path.exists(path):
            raise FileNotFoundError(path)
        with open(path) as f:
            data = json.load(f)
        cls.config_file = os.path.abspath(path)

        for key, value in data.items():
            if key not in _FIELDS:
                continue
            current = getattr(cls, key)
            if isinstance(current, dict) and isinstance(value, dict):
                _merge(current, value)
            else:
                setattr(cls, key, value)

    @classmethod
    def snapshot(cls) -> Dict[str, Any]:
        return {
            key: copy.deepcopy(getattr(cls, key))
            for key in _FIELDS
        }

    @classmethod
    def restore(cls, values: Dict[str, Any]) -> None:
        for key, value in values.items():
            setattr(cls, key, copy.deepcopy(value))


def _merge(into: dict, update: dict) -> None:
    for key, value in update.items():
        if isinstance(into.get(key), dict) and isinstance(value, dict):
            _merge(into[key], value)
        else:
            into[key] = value


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the project-wide logging format at ``level`` (default: Config.log_level)."""
    name = (level or Config.log_level).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)
