import json
import logging

import pytest

from engine.config import Config, configure_logging
from engine.playback import PlaybackController
from engine.session import VisualizerSession


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))
    return path


def test_load_from_file_merges_nested_presets(tmp_path):
    path = write_config(tmp_path, {
        "speed_presets": {"graph": {"fast": 0.2}, "heap": {"slow": 3.0, "normal": 2.0, "fast": 1.0}},
        "bucket_count": 7,
    })
    Config.load_from_file(str(path))
    assert Config.speed_presets["graph"] == {"slow": 2.0, "normal": 1.5, "fast": 0.2}
    assert Config.presets_for("heap")["slow"] == 3.0
    assert Config.bucket_count == 7
    assert Config.config_file == str(path.resolve())


def test_unknown_keys_are_ignored(tmp_path):
    Config.load_from_file(str(write_config(tmp_path, {"presets_for": 1, "colour": "red"})))
    assert callable(Config.presets_for)
    assert not hasattr(Config, "colour")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load_from_file(str(tmp_path / "nope.json"))


def test_presets_fall_back_to_default():
    assert Config.presets_for("trie") == Config.speed_presets["default"]
    presets = Config.presets_for("graph")
    presets["slow"] = 99
    assert Config.speed_presets["graph"]["slow"] == 2.0


def test_bucket_count_reaches_new_sessions():
    Config.bucket_count = 5
    viz = VisualizerSession("hashset")
    assert viz.store.bucket_count == 5


def test_default_speed_applies_to_new_controllers():
    Config.default_speed = "fast"
    assert PlaybackController("graph").interval == 0.8


def test_configure_logging_uses_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    Config.log_level = "debug"
    configure_logging()
    assert calls["level"] == logging.DEBUG
    configure_logging("warning")
    assert calls["level"] == logging.WARNING
