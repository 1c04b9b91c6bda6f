"""Configuration management for taggie.

Handles saving and loading user preferences: the editor command, the last
edited directory and the default logging level.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli_w

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.taggie on all platforms)
    """
    return Path.home() / ".taggie"


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "config.toml"


class Config:
    """Configuration manager for application settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "editor": {
            # Editor command line, e.g. "code --wait". Empty means use
            # $VISUAL, then $EDITOR, then vi.
            "command": "",
        },
        "paths": {
            "last_music_dir": "",
        },
        "logging": {
            # debug, info, warning, error or critical (silent)
            "level": "critical",
        },
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_path: Config file to use instead of ~/.taggie/config.toml
        """
        self.config_path = Path(config_path) if config_path else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Error loading config %s: %s", self.config_path, e)
            return False

        # Merge with defaults (in case new keys were added)
        self._merge_config(self.data, loaded_data)
        self._dirty = False
        return True

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
        except OSError as e:
            logger.warning("Error saving config %s: %s", self.config_path, e)
            return False

        self._dirty = False
        return True

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        """Check if configuration has been modified."""
        return self._dirty

    # Editor settings
    def get_editor(self) -> str:
        """Get the configured editor command ('' when unset)."""
        return self.data.get("editor", {}).get("command", "")

    def set_editor(self, command: str) -> None:
        self.data.setdefault("editor", {})["command"] = command
        self._dirty = True

    # Path settings
    def get_last_music_dir(self) -> str:
        """Get last edited music directory."""
        return self.data["paths"]["last_music_dir"]

    def set_last_music_dir(self, path: str) -> None:
        """Save last edited music directory."""
        if self.data["paths"]["last_music_dir"] == path:
            return
        self.data["paths"]["last_music_dir"] = path
        self._dirty = True

    # Logging settings
    def get_log_level(self) -> str:
        return self.data.get("logging", {}).get("level", "critical")

    def set_log_level(self, level: str) -> None:
        """Set the default logging level.

        Raises:
            ValueError: If level is not a logging level name
        """
        if not isinstance(logging.getLevelName(level.upper()), int):
            raise ValueError(f"Invalid log level: {level}")
        self.data.setdefault("logging", {})["level"] = level.lower()
        self._dirty = True
