"""Configuration loader for the networking package.

This module loads the YAML configuration files from the config/ directory
and provides a singleton config object for easy access throughout the package.
"""

from pathlib import Path
from typing import Any, cast

import yaml

from networking.exceptions import ConfigurationError


class Config:
    """Configuration manager that loads and provides access to all config files."""

    def __init__(self, config_dict: dict[str, Any] | None = None, config_dir: Path | None = None):
        """
        Initialize the configuration manager.

        Args:
            config_dict: Optional dictionary of config values for testing.
                        If provided, config files won't be loaded from disk.
            config_dir: Optional directory to load config files from instead of
                        the project's config/ directory.
        """
        self._configs: dict[str, Any]
        self._config_dir: Path | None

        if config_dict is not None:
            # Testing mode: use provided config
            self._configs = config_dict
            self._config_dir = None
        else:
            self._configs = {}
            self._config_dir = config_dir if config_dir is not None else self._find_config_dir()
            self._load_all_configs()

    def _find_config_dir(self) -> Path | None:
        """Find the config directory relative to the project root."""
        # Go up from networking/config/loader.py to project root
        project_root = Path(__file__).resolve().parent.parent.parent
        config_dir = project_root / "config"

        # Installed without the source tree: built-in defaults apply
        if not config_dir.exists():
            return None

        return config_dir

    def _load_all_configs(self):
        """Load all YAML configuration files from the config directory."""
        if self._config_dir is None:
            return

        config_path = self._config_dir / "networking_config.yaml"
        if not config_path.exists():
            print(f"Warning: Config file networking_config.yaml not found at {config_path}")
            return

        with open(config_path, encoding="utf-8") as f:
            loaded_config = yaml.safe_load(f)

        if not isinstance(loaded_config, dict):
            print(
                f"Warning: Config file networking_config.yaml must contain a dictionary, "
                f"got {type(loaded_config).__name__}. Using empty config."
            )
            return

        for key, section in loaded_config.items():
            self._configs[key] = section if isinstance(section, dict) else {}

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            path: Dot-separated path to the config value (e.g., "http.timeout")
            default: Default value to return if path is not found

        Returns:
            The configuration value or default if not found

        Example:
            >>> config.get("http.timeout")
            30
            >>> config.get("executor.max_workers")
            8
        """
        parts = path.split(".")
        value = self._configs

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def get_positive(self, path: str, default: float) -> float:
        """Get a numeric value that must be greater than zero.

        Raises:
            ConfigurationError: If the configured value is not a positive number
        """
        value = self.get(path, default)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigurationError(f"must be a positive number, got {value!r}", config_key=path)
        return value

    @property
    def http(self) -> dict[str, Any]:
        """Get HTTP client configuration."""
        return cast(dict[str, Any], self._configs.get("http", {}))

    @property
    def executor(self) -> dict[str, Any]:
        """Get request executor configuration."""
        return cast(dict[str, Any], self._configs.get("executor", {}))

    @property
    def logging(self) -> dict[str, Any]:
        """Get logging configuration."""
        return cast(dict[str, Any], self._configs.get("logging", {}))

    def reload(self):
        """Reload all configuration files."""
        self._configs.clear()
        self._load_all_configs()


# Create a singleton instance
config = Config()
