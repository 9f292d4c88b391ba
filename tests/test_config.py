"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from lifetime import config


@pytest.fixture(autouse=True)
def fresh_config():
    config.reset_config()
    yield
    config.reset_config()


class TestLoadConfig:
    """Tests for load_config()."""

    def test_resolves_paths_from_project_root(self, config_file, tmp_path):
        config.load_config(str(config_file))
        assert config.get("logging.file") == str(tmp_path / "logs" / "test.log")
        assert config.get("database.path") == str(tmp_path / "data" / "test.db")

    def test_absolute_paths_unchanged(self, config_file, demos_config):
        config.load_config(str(config_file))
        assert config.get("catalog.demos_config") == demos_config

    def test_file_outside_config_dir(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({"database": {"path": "catalog.db"}}))
        config.load_config(str(path))
        assert config.get("database.path") == str(tmp_path / "catalog.db")

    def test_merges_defaults(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({"logging": {"level": "DEBUG"}}))
        loaded = config.load_config(str(path))
        assert loaded["logging"]["level"] == "DEBUG"
        assert loaded["logging"]["file"] == str(tmp_path / "logs" / "lifetime.log")
        assert "catalog" in loaded

    def test_memory_database_is_not_resolved(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({"database": {"path": ":memory:"}}))
        config.load_config(str(path))
        assert config.get("database.path") == ":memory:"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert config.load_config(str(path))["logging"]["level"] == "WARNING"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            config.load_config(str(tmp_path / "nope.yaml"))

    def test_defaults_when_nothing_found(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        loaded = config.load_config()
        assert loaded["logging"]["level"] == "WARNING"
        assert loaded["database"]["path"] == str(Path.cwd() / "data" / "catalog.db")

    def test_defaults_are_not_mutated(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({"logging": {"level": "DEBUG"}}))
        config.load_config(str(path))
        assert config.DEFAULTS["logging"]["level"] == "WARNING"
        assert config.DEFAULTS["logging"]["file"] == "logs/lifetime.log"


class TestGet:
    """Tests for dot-notation access."""

    def test_get(self, config_file):
        config.load_config(str(config_file))
        assert config.get("logging.level") == "WARNING"
        assert config.get("logging.missing", "x") == "x"
        assert config.get("logging.level.deeper") is None

    def test_get_config(self, config_file):
        config.load_config(str(config_file))
        assert config.get_config()["database"]["path"].endswith("test.db")
