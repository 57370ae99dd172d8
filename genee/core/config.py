#!/usr/bin/env python3
"""
config.py
-------------------
Persistent settings for the genee habit diary.

Settings are stored as a flat YAML mapping. A missing file yields the
defaults, and a missing key yields that key's default, so a fresh install
needs no configuration at all.

Usage:
    from genee.core.config import load_config, save_config

    config = load_config()
    config.graph_days = 14
    save_config(config)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from .exceptions import ConfigError
from .paths import CONFIG_PATH, DEFAULT_DATAFILE_PATH

# ---- Defaults ----
DEFAULT_GRAPH_DAYS = 30
DEFAULT_PAST_PERIODS = 2
DEFAULT_MAX_DISPLAYED_COLS = 70
DEFAULT_LIST_PREVIOUS_DAYS = 0
DEFAULT_LIST_MOST_FREQUENT_DAYS = 5

INT_FIELDS = (
    "graph_days",
    "past_periods",
    "max_displayed_cols",
    "list_previous_days",
    "list_most_frequent_days",
)
"""Integer settings; list_previous_days may be zero, the others must be positive."""


@dataclass
class Config:
    """
    All persistent configuration items.

    Attributes:
        datafile_path: Path of the default diary file
        graph_days: How many days are aggregated per period in graphs
        past_periods: How many periods are displayed
        max_displayed_cols: Maximum width of graph output in the terminal
        list_previous_days: Number of previous days printed as a table
        list_most_frequent_days: Number of most frequent day signatures printed
    """

    datafile_path: Path = field(default_factory=lambda: DEFAULT_DATAFILE_PATH)
    graph_days: int = DEFAULT_GRAPH_DAYS
    past_periods: int = DEFAULT_PAST_PERIODS
    max_displayed_cols: int = DEFAULT_MAX_DISPLAYED_COLS
    list_previous_days: int = DEFAULT_LIST_PREVIOUS_DAYS
    list_most_frequent_days: int = DEFAULT_LIST_MOST_FREQUENT_DAYS

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Config:
        """
        Build a Config from a deserialized mapping.

        Raises:
            ConfigError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        config = cls()
        for key, value in data.items():
            if value is None:
                continue
            setattr(config, key, _coerce_value(key, value))
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a YAML-serializable dictionary."""
        data: Dict[str, Any] = {"datafile_path": str(self.datafile_path)}
        for key in INT_FIELDS:
            data[key] = getattr(self, key)
        return data

    def to_yaml(self) -> str:
        """Render the effective configuration as YAML."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False)


def _coerce_value(key: str, value: Any) -> Any:
    if key == "datafile_path":
        return Path(str(value)).expanduser()

    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError:
            raise ConfigError(
                f"Invalid value for '{key}': expected an integer, got '{value}'"
            ) from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"Invalid value for '{key}': expected an integer")

    minimum = 0 if key == "list_previous_days" else 1
    if value < minimum:
        raise ConfigError(f"Invalid value for '{key}': must be at least {minimum}")
    return value


def load_config(path: Optional[Path] = None) -> Config:
    """
    Load the persistent configuration.

    Args:
        path: Configuration file (default: CONFIG_PATH)

    Returns:
        Loaded configuration, or defaults if the file does not exist

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    path = Path(path) if path else CONFIG_PATH
    if not path.exists():
        return Config()

    try:
        content = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e

    if content is None:
        return Config()
    if not isinstance(content, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping")
    return Config.from_dict(content)


def save_config(config: Config, path: Optional[Path] = None) -> Path:
    """
    Save the configuration, creating parent directories as needed.

    Returns:
        Path the configuration was written to

    Raises:
        ConfigError: If the file cannot be written
    """
    path = Path(path) if path else CONFIG_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(config.to_yaml(), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot write configuration file {path}: {e}") from e
    return path


def set_config_value(config: Config, key: str, value: str) -> Config:
    """
    Update a single setting from its string form.

    Raises:
        ConfigError: If the key is unknown or the value is invalid
    """
    if key not in {f.name for f in fields(Config)}:
        raise ConfigError(f"Unknown configuration key: {key}")
    setattr(config, key, _coerce_value(key, value))
    return config
