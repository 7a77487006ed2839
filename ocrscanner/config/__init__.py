"""
Configuration Module for the payment-slip scanner.

This module provides centralized configuration management using YAML files.
Defaults ship with the package in settings.yaml; a user file can override
any subset of keys.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ocrscanner.utils.exceptions import ConfigurationError
from ocrscanner.utils.helpers import merge_dicts

DEFAULT_CONFIG_PATH = Path(__file__).parent / "settings.yaml"


class ConfigurationManager:
    """
    Centralized configuration management for the scanner.

    This class loads the packaged defaults, merges an optional user
    configuration file over them, and provides dot-notation access to
    the result.

    Attributes:
        config_path (Optional[Path]): Path to the user configuration file.
        config (Dict): Loaded configuration dictionary.

    Example:
        >>> config = ConfigurationManager()
        >>> config.get("scanner.cooldown_seconds")
        1.0
    """

    _instance: Optional['ConfigurationManager'] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[str] = None) -> 'ConfigurationManager':
        """
        Singleton pattern to ensure only one configuration instance exists.

        Args:
            config_path: Optional path to configuration file.

        Returns:
            ConfigurationManager instance.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Optional path to a user configuration file that
                        is merged over the packaged defaults.
        """
        if self._initialized:
            return

        self.config_path = Path(config_path) if config_path else None

        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """
        Load the default configuration and merge the user file over it.

        Raises:
            ConfigurationError: If a file is missing or is not valid YAML.
        """
        config = self._read_yaml(DEFAULT_CONFIG_PATH)

        if self.config_path is not None:
            config = merge_dicts(config, self._read_yaml(self.config_path))

        self._config = config
        self._resolve_paths()

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        """
        Read a YAML mapping from disk.

        Args:
            path: File to read.

        Returns:
            Parsed mapping (empty for an empty file).

        Raises:
            ConfigurationError: If the file is missing, unparsable or
                               does not contain a mapping.
        """
        if not path.exists():
            raise ConfigurationError(str(path), "file not found")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(str(path), str(e)) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(str(path), "top level must be a mapping")
        return data

    def _resolve_paths(self) -> None:
        """
        Resolve a relative log file path against the current working
        directory.
        """
        log_path = self.get("logging.file.path")
        if log_path and not Path(log_path).is_absolute():
            self._config['logging']['file']['path'] = str(Path.cwd() / log_path)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key in dot notation (e.g., "scanner.cooldown_seconds").
            default: Default value if key doesn't exist.

        Returns:
            Configuration value or default.

        Example:
            >>> config.get("validation.reference.length_control")
            False
            >>> config.get("nonexistent.key", "default_value")
            "default_value"
        """
        keys = key.split('.')
        value = self._config

        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_all(self) -> Dict[str, Any]:
        """Get a copy of the complete configuration dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    @classmethod
    def reset(cls) -> None:
        """
        Reset the singleton instance.
        Useful for testing or configuration changes.
        """
        cls._instance = None


def get_config(key: str, default: Any = None) -> Any:
    """
    Convenience function to get configuration values.

    Args:
        key: Configuration key in dot notation.
        default: Default value if key doesn't exist.

    Returns:
        Configuration value or default.
    """
    return ConfigurationManager().get(key, default)


__all__ = ['ConfigurationManager', 'get_config', 'DEFAULT_CONFIG_PATH']
