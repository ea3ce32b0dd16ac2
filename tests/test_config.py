# tests/test_config.py
import json

import pytest
from trie_autocorrect.errors import ConfigError
from trie_autocorrect.utils.config_manager import DEFAULTS, Config


def test_defaults_in_memory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = Config()
    assert cfg.data == DEFAULTS
    cfg.set("max_suggestions", "7")
    assert cfg.get("max_suggestions") == 7
    assert list(tmp_path.iterdir()) == []


def test_set_rejects_unknown_and_bad_values():
    cfg = Config()
    with pytest.raises(ConfigError):
        cfg.set("colour", "blue")
    with pytest.raises(ConfigError):
        cfg.set("max_edit_distance", "two")


def test_optional_path_option():
    cfg = Config()
    cfg.set("dictionary_file", "words.txt")
    assert cfg.get("dictionary_file") == "words.txt"
    cfg.set("dictionary_file", "none")
    assert cfg.get("dictionary_file") is None


def test_file_round_trip(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    assert p.exists()
    cfg.set("candidate_factor", 4)
    again = Config(str(p))
    assert again.get("candidate_factor") == 4


def test_unreadable_file_keeps_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text("{not json", encoding="utf8")
    assert Config(str(p)).data == DEFAULTS


def test_unknown_keys_in_file_are_ignored(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"max_suggestions": 3, "theme": "dark"}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("max_suggestions") == 3
    assert "theme" not in cfg.data


def test_engine_config():
    cfg = Config()
    cfg.set("max_edit_distance", "1")
    ec = cfg.engine_config()
    assert ec.max_edit_distance == 1
    assert ec.candidate_factor == DEFAULTS["candidate_factor"]


def test_string_values_in_file_are_coerced(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"max_suggestions": "3", "dictionary_size": "200"}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("max_suggestions") == 3
    assert cfg.get("dictionary_size") == 200


def test_uncoercible_values_in_file_keep_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(
        json.dumps({"max_edit_distance": "two", "candidate_factor": None, "max_suggestions": True}),
        encoding="utf8",
    )
    cfg = Config(str(p))
    assert cfg.get("max_edit_distance") == DEFAULTS["max_edit_distance"]
    assert cfg.get("candidate_factor") == DEFAULTS["candidate_factor"]
    assert cfg.get("max_suggestions") == DEFAULTS["max_suggestions"]
