"""Tests for configuration loading."""

from pathlib import Path

from grindtracker.config import (
    DEFAULTS,
    default_db_path,
    load_config,
    resolve_db_path,
    write_default_config,
)


def test_missing_file_gives_defaults(tmp_path: Path):
    assert load_config(tmp_path / "missing.toml") == DEFAULTS


def test_file_overrides_defaults(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text("[ledger]\nbuy_in_ceiling = 22.0\n")

    config = load_config(path)

    assert config["ledger"]["buy_in_ceiling"] == 22.0
    assert config["ledger"]["currency"] == "$"
    assert DEFAULTS["ledger"]["buy_in_ceiling"] == 10.0


def test_unreadable_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text("[ledger\nbroken = ")
    assert load_config(path) == DEFAULTS


def test_write_default_config_round_trip(tmp_path: Path):
    path = write_default_config(tmp_path / "conf" / "config.toml")
    assert path.exists()
    assert load_config(path) == DEFAULTS


def test_db_path_resolution(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    assert resolve_db_path(DEFAULTS) == default_db_path()
    assert default_db_path() == tmp_path / ".config" / "grindtracker" / "grindtracker.db"
    assert resolve_db_path({"storage": {"db_path": "~/poker.db"}}) == tmp_path / "poker.db"
