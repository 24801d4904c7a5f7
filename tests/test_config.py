"""Tests for the address book configuration system."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from addressbook.config.loader import clear_cache, default_config_path, get_config, load_config
from addressbook.config.models import AddressBookConfig
from addressbook.domain.errors import ConfigurationError


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _fresh_cache():
    """Ensure a clean config cache for every test."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture()
def user_config(tmp_path: Path, monkeypatch) -> Path:
    """Redirect the user config file into a temp directory."""
    target = tmp_path / "user" / "config.json"
    monkeypatch.setattr("addressbook.config.loader.default_config_path", lambda: target)
    return target


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


class TestConfigModel:
    def test_defaults(self):
        cfg = AddressBookConfig()
        assert cfg.storage_path == "addressbook.txt"
        assert cfg.json_indent == 2
        assert cfg.log_level == "WARNING"

    def test_log_level_normalised(self):
        assert AddressBookConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            AddressBookConfig(log_level="chatty")

    @pytest.mark.parametrize("indent", [-1, 9])
    def test_indent_bounds(self, indent):
        with pytest.raises(ValidationError):
            AddressBookConfig(json_indent=indent)


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


class TestLoader:
    def test_defaults_without_user_file(self, user_config: Path):
        assert get_config() == AddressBookConfig()

    def test_reads_user_file(self, user_config: Path):
        user_config.parent.mkdir(parents=True)
        user_config.write_text(json.dumps({"storage_path": "mine.txt"}), encoding="utf-8")
        cfg = load_config()
        assert cfg.storage_path == "mine.txt"
        assert cfg.json_indent == 2

    def test_explicit_path(self, tmp_path: Path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"json_indent": 0, "log_level": "info"}), encoding="utf-8")
        cfg = load_config(path)
        assert cfg.json_indent == 0
        assert cfg.log_level == "INFO"

    def test_explicit_missing_path(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_unreadable_path(self, tmp_path: Path):
        folder = tmp_path / "config.json"
        folder.mkdir()
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_config(folder)

    def test_invalid_values(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"json_indent": 42}), encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid config"):
            load_config(path)

    def test_cached(self, tmp_path: Path):
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"storage_path": "a.txt"}), encoding="utf-8")
        first = load_config(path)
        path.write_text(json.dumps({"storage_path": "b.txt"}), encoding="utf-8")
        assert load_config(path) is first
        clear_cache()
        assert load_config(path).storage_path == "b.txt"

    def test_default_config_path_location(self):
        path = default_config_path()
        assert path.name == "config.json"
        assert "addressbook" in str(path)
