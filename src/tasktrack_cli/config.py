"""Configuration management for TaskTrack CLI."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

from tasktrack_cli.utils.logger import get_logger

TASK_FILE_ENV = "TASKTRACK_FILE"


class StorageConfig(BaseModel):
    """Task file configuration."""

    path: str = Field(default="tasks.json")
    autosave: bool = Field(default=False)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="table")
    date_format: str = Field(default="%Y-%m-%d")


class UIConfig(BaseModel):
    """Interactive shell configuration."""

    max_retries: int = Field(default=3, ge=1)
    show_header: bool = Field(default=True)


class Config(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    ui: UIConfig = Field(default_factory=UIConfig)


class ConfigManager:
    """Manages TaskTrack CLI configuration."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        self.config_dir = Path(user_config_dir("tasktrack-cli"))
        self.config_file = self.config_dir / f"{profile}.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r") as f:
                    data = json.load(f)
                return Config(**data)
            except (OSError, ValueError, TypeError, ValidationError) as e:
                # If config is corrupted, return default
                get_logger().warning("ignoring unreadable config %s: %s", self.config_file, e)
                return Config()
        return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        with open(self.config_file, "w") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a known setting
            ValidationError: If the value has the wrong type
        """
        if self.get(key) is None:
            raise KeyError(key)

        keys = key.split(".")
        config_dict = self.config.model_dump()

        # Navigate to the nested dictionary
        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        # Reload config from the modified dictionary
        self._config = Config(**config_dict)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = Config()
        else:
            default_value = self.get_from_config(Config(), key)
            if default_value is None:
                raise KeyError(key)
            self.set(key, default_value)
        self.save_config()

    @staticmethod
    def get_from_config(config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        keys = key.split(".")
        value: Any = config
        for k in keys:
            if isinstance(value, BaseModel) and k in type(value).model_fields:
                value = getattr(value, k)
            else:
                return None
        if isinstance(value, BaseModel):
            return None
        return value

    def task_file(self, override: Optional[str] = None) -> Path:
        """Resolve the task file path.

        Precedence: explicit override, then the TASKTRACK_FILE environment
        variable, then ``storage.path``. Relative paths are relative to the
        working directory.
        """
        raw = override or os.environ.get(TASK_FILE_ENV) or self.config.storage.path
        return Path(raw).expanduser()


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or _config_manager.profile != profile:
        _config_manager = ConfigManager(profile)
    return _config_manager
