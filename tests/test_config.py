"""Tests for configuration management."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tasktrack_cli.config import TASK_FILE_ENV, Config, ConfigManager, get_config_manager


def test_default_config():
    """Test default configuration."""
    config = Config()
    assert config.storage.path == "tasks.json"
    assert config.storage.autosave is False
    assert config.output.format == "table"
    assert config.output.date_format == "%Y-%m-%d"
    assert config.ui.max_retries == 3


def test_config_file_lives_in_config_dir(tmp_path):
    manager = ConfigManager(profile="test")
    assert manager.config_file == tmp_path / "config" / "test.json"


def test_config_save_load():
    """Values written by one manager are read back by a fresh one."""
    manager = ConfigManager(profile="test")
    manager.set("storage.autosave", True)
    manager.set("storage.path", "/tmp/my-tasks.json")

    reloaded = ConfigManager(profile="test")
    assert reloaded.get("storage.autosave") is True
    assert reloaded.get("storage.path") == "/tmp/my-tasks.json"


def test_get_unknown_key_returns_none():
    manager = ConfigManager()
    assert manager.get("storage.nope") is None
    assert manager.get("storage") is None
    assert manager.get("missing.path") is None


def test_set_unknown_key_raises():
    with pytest.raises(KeyError):
        ConfigManager().set("storage.nope", 1)


def test_set_wrong_type_raises():
    with pytest.raises(ValidationError):
        ConfigManager().set("ui.max_retries", "many")


def test_reset_single_key():
    manager = ConfigManager()
    manager.set("ui.max_retries", 7)

    manager.reset("ui.max_retries")

    assert manager.get("ui.max_retries") == 3


def test_reset_all():
    manager = ConfigManager()
    manager.set("output.format", "json")

    manager.reset()

    assert ConfigManager().get("output.format") == "table"


def test_corrupt_config_falls_back_to_defaults():
    manager = ConfigManager()
    manager.config_file.write_text("{not json")

    assert manager.load_config() == Config()


def test_task_file_precedence(monkeypatch):
    manager = ConfigManager()
    assert manager.task_file() == Path("tasks.json")

    monkeypatch.setenv(TASK_FILE_ENV, "env.json")
    assert manager.task_file() == Path("env.json")
    assert manager.task_file("cli.json") == Path("cli.json")


def test_get_config_manager_caches_per_profile():
    assert get_config_manager() is get_config_manager()
    assert get_config_manager("work").profile == "work"
