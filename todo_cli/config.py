from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict
import os

logger = logging.getLogger(__name__)

APP_NAME = "todo-cli"
DATA_FILE_NAME = "todos.json"

BACKEND_ENV = "TODO_CLI_BACKEND"
DATA_FILE_ENV = "TODO_CLI_DATA_FILE"
LOG_LEVEL_ENV = "TODO_CLI_LOG_LEVEL"

SETTING_KEYS = ("backend", "data_file", "log_level")


def get_data_dir(app_name: str = APP_NAME) -> Path:
    """Get the per-user data directory (not created here)."""
    if os.name == "nt":  # Windows
        base = Path(os.environ.get("LOCALAPPDATA", Path.home() / "AppData" / "Local"))
    else:
        xdg_data = os.environ.get("XDG_DATA_HOME")
        base = Path(xdg_data) if xdg_data else Path.home() / ".local" / "share"
    return base / app_name


class ConfigManager:
    """Manages persistent configuration using XDG directories.

    Environment variables override values from config.json.
    """

    def __init__(self, app_name: str = APP_NAME):
        self.app_name = app_name
        self._config_dir = self._get_config_dir()
        self._config_file = self._config_dir / "config.json"
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _get_config_dir(self) -> Path:
        """Get XDG-compliant config directory."""
        if os.name == "nt":  # Windows
            base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        else:  # Unix-like systems
            xdg_config = os.environ.get("XDG_CONFIG_HOME")
            if xdg_config:
                base = Path(xdg_config)
            else:
                base = Path.home() / ".config"
        return base / self.app_name

    def _load_config(self) -> None:
        """Load configuration from file."""
        try:
            if self._config_file.exists():
                with open(self._config_file, "r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top-level value is not an object")
                self._config = loaded
                logger.debug(f"Loaded config from {self._config_file}")
            else:
                self._config = {}
                logger.debug("No config file found, using defaults")
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load config from {self._config_file}: {e}")
            self._config = {}

    def _save_config(self) -> None:
        """Save configuration to file."""
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
            with open(self._config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2, ensure_ascii=False)
            logger.debug(f"Saved config to {self._config_file}")
        except OSError as e:
            logger.error(f"Failed to save config to {self._config_file}: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value and save."""
        self._config[key] = value
        self._save_config()

    def _setting(self, env_key: str, key: str, default: str) -> str:
        override = os.environ.get(env_key, "").strip()
        if override:
            return override
        value = self.get(key)
        return str(value) if value else default

    @property
    def backend(self) -> str:
        return self._setting(BACKEND_ENV, "backend", "json")

    @property
    def data_file(self) -> Path:
        default = str(get_data_dir(self.app_name) / DATA_FILE_NAME)
        return Path(self._setting(DATA_FILE_ENV, "data_file", default)).expanduser()

    @property
    def log_level(self) -> str:
        return self._setting(LOG_LEVEL_ENV, "log_level", "WARNING").upper()

    @property
    def config_file_path(self) -> Path:
        """Get the config file path."""
        return self._config_file
