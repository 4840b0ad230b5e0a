"""Tests for config defaults and file merging."""

import json

from sentinels_setup.config import get_config


def test_get_config_defaults(monkeypatch):
    """Returns defaults when no config file exists."""
    monkeypatch.delenv("SENTINELS_CONFIG", raising=False)
    config = get_config()
    assert config["max_trials"] == 100_000
    assert config["max_redraws"] == 10_000
    assert config["web_tolerance"] == 10
    assert config["default_packs"] == ["baseset", "miniexpansion"]
    assert config["default_player_count"] == 3
    assert config["default_loss_pct"] == 50
    assert config["default_tolerance"] == 10


def test_get_config_missing_file(tmp_path):
    config = get_config(tmp_path / "nope.json")
    assert config["max_trials"] == 100_000


def test_get_config_merges_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_trials": 500, "default_packs": ["rookcity"]}))
    config = get_config(path)
    assert config["max_trials"] == 500
    assert config["default_packs"] == ["rookcity"]
    assert config["web_tolerance"] == 10


def test_get_config_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"theme": "dark", "web_tolerance": 5}))
    config = get_config(path)
    assert "theme" not in config
    assert config["web_tolerance"] == 5


def test_get_config_from_env(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"default_loss_pct": 70}))
    monkeypatch.setenv("SENTINELS_CONFIG", str(path))
    assert get_config()["default_loss_pct"] == 70


def test_defaults_not_shared_between_calls(monkeypatch):
    monkeypatch.delenv("SENTINELS_CONFIG", raising=False)
    first = get_config()
    first["default_packs"].append("promos")
    assert get_config()["default_packs"] == ["baseset", "miniexpansion"]
