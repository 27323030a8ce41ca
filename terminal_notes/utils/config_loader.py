"""
Configuration Loader for Terminal Notes
Handles loading and managing application configuration
"""

import copy
import json
from pathlib import Path
from typing import Dict, Any, Optional

from .logger import Logger


DEFAULT_CONFIG: Dict[str, Any] = {
    "app": {
        "name": "Terminal Notes",
        "version": "1.0"
    },
    "storage": {
        "notes_file": "notes.json",
        "todos_file": "todos.json"
    },
    "ui": {
        "window_width": 800,
        "window_height": 600,
        "font_size": 12
    }
}

DEFAULT_CONFIG_PATH = Path("config") / "app_config.json"


class ConfigLoader:
    """Loads and manages application configuration"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize the ConfigLoader.

        Parameters:
            config_path (Optional[Path]): Optional path to the JSON config file. If omitted, defaults to
                "config/app_config.json" relative to the working directory, beside the data files.

        Behavior:
            Immediately calls `load_config()` to populate `config_data` (this may create defaults or
            persist the config).
        """
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self.config_data: Dict[str, Any] = {}
        self.logger = Logger()
        self.load_config()

    def load_config(self) -> None:
        """
        Load configuration from the configured file.

        If the config file does not exist, a default configuration is created (and persisted).
        Keys missing from the file are filled in from the defaults. On any read or parse error,
        the method falls back to the default configuration without overwriting the broken file.
        """
        try:
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top-level value is not an object")
                self.config_data = self._merge_defaults(loaded)
            else:
                self.create_default_config()
        except (OSError, ValueError) as e:
            self.logger.error(f"Error loading config: {e}")
            self.config_data = copy.deepcopy(DEFAULT_CONFIG)

    @staticmethod
    def _merge_defaults(loaded: Dict[str, Any]) -> Dict[str, Any]:
        """Return `loaded` with every missing default section or key filled in."""
        merged = copy.deepcopy(DEFAULT_CONFIG)
        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values
        return merged

    def create_default_config(self) -> None:
        """Set the configuration to the built-in defaults and persist them."""
        self.config_data = copy.deepcopy(DEFAULT_CONFIG)
        self.save_config()

    def save_config(self) -> None:
        """
        Persist the current in-memory configuration to the configured JSON file.

        Creates parent directories as needed. On failure the error is logged;
        exceptions are not propagated.
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self.config_data, f, indent=4)
        except OSError as e:
            self.logger.error(f"Error saving config: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Return a configuration value by dot-notated path (e.g., "app.name").

        If any segment is missing or an intermediate value is not a dict, `default` is returned.
        """
        keys = key.split('.')
        value = self.config_data

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any, save: bool = True) -> None:
        """
        Set a configuration value identified by a dot-notated key path.

        Intermediate dictionaries are created as needed. If `save` is True the
        updated configuration is persisted immediately.
        """
        keys = key.split('.')
        config = self.config_data

        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
        if save:
            self.save_config()
