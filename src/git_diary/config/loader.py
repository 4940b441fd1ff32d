"""YAML configuration loader with inheritance support.

Supports:
- Loading YAML config files
- Config inheritance via 'extends' key
- Deep merging of nested config
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from . import (
    DiaryConfig,
    HistoryConfig,
    LoggingConfig,
    StorageConfig,
    SummarizerConfig,
)

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GIT_DIARY_CONFIG"
DEFAULT_CONFIG_NAME = "default.yaml"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Values from override take precedence. Nested dicts are merged recursively.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_with_inheritance(path: Path) -> dict[str, Any]:
    """Load YAML file with inheritance support.

    If the file contains an 'extends' key, the base config is loaded first
    and merged with the current config.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        config = yaml.safe_load(f) or {}

    if "extends" in config:
        base_name = config.pop("extends")
        base_path = path.parent / base_name
        base_config = load_yaml_with_inheritance(base_path)
        config = deep_merge(base_config, config)

    return config


def dict_to_config(data: dict[str, Any]) -> DiaryConfig:
    """Convert raw dict to typed DiaryConfig dataclass."""
    diary_data = data.get("git_diary", {}) or {}

    # YAML gives None for empty sections
    def safe_get(key: str) -> dict[str, Any]:
        value = diary_data.get(key, {})
        return value if value is not None else {}

    days = diary_data.get("days", DiaryConfig.days)
    if not isinstance(days, int) or isinstance(days, bool) or days < 1:
        raise ValueError(f"days must be a positive integer, got {days!r}")

    return DiaryConfig(
        days=days,
        history=HistoryConfig(**safe_get("history")),
        summarizer=SummarizerConfig(**safe_get("summarizer")),
        storage=StorageConfig(**safe_get("storage")),
        logging=LoggingConfig(**safe_get("logging")),
    )


class YAMLConfigLoader:
    """YAML configuration loader implementation."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize loader with optional config directory.

        Args:
            config_dir: Directory containing config files.
                        Defaults to 'config' relative to project root.
        """
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent.parent / "config"
        self._config_dir = config_dir

    def load(self, path: Path) -> DiaryConfig:
        """Load configuration from file path.

        Args:
            path: Path to YAML config file

        Returns:
            Parsed DiaryConfig
        """
        raw_config = load_yaml_with_inheritance(path)
        return dict_to_config(raw_config)

    def load_default(self) -> DiaryConfig:
        """Load the default config file, or built-in defaults if it is absent."""
        default_path = self._config_dir / DEFAULT_CONFIG_NAME
        if not default_path.exists():
            logger.debug(f"No config at {default_path}, using built-in defaults")
            return DiaryConfig()
        return self.load(default_path)

    def get_config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self._config_dir


def load_config(path: str | Path | None = None) -> DiaryConfig:
    """Load git-diary configuration.

    Args:
        path: Direct path to config file. Falls back to the
              GIT_DIARY_CONFIG environment variable, then to
              config/default.yaml, then to built-in defaults.

    Returns:
        Parsed DiaryConfig

    Examples:
        >>> config = load_config()
        >>> config = load_config(path="/path/to/config.yaml")
    """
    loader = YAMLConfigLoader()

    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None

    if path is not None:
        return loader.load(Path(path))
    return loader.load_default()


__all__ = [
    "CONFIG_ENV_VAR",
    "YAMLConfigLoader",
    "deep_merge",
    "dict_to_config",
    "load_config",
    "load_yaml_with_inheritance",
]
