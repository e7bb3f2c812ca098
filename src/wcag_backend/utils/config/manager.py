"""
Main configuration manager for the WCAG server.

This module provides the ConfigManager class that merges configuration from
built-in defaults, an optional JSON configuration file and environment
variables (including a ``.env`` file).
"""

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ...exceptions.config_exceptions import ConfigurationError
from .environment import EnvironmentHandler
from .file_operations import FileOperations
from .paths import ConfigPaths, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Configuration manager for the WCAG server.

    Handles loading and merging of configuration from multiple sources,
    later sources overriding earlier ones:

    - Built-in defaults
    - ``wcag.config.json`` (optional)
    - Environment variables
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        project_root: Optional[Union[str, Path]] = None,
        load_env: bool = True,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize the ConfigManager.

        Args:
            config_file: Path to configuration file (default: wcag.config.json)
            project_root: Directory relative paths are resolved against
                (default: current working directory)
            load_env: Whether to load environment variables from .env file
            environ: Environment mapping (default: ``os.environ``)
        """
        self.project_root = Path(project_root or os.getcwd()).resolve()
        self.config_file = config_file or ConfigPaths.DEFAULT_CONFIG_FILE
        self.paths = ConfigPaths()

        self._config: Dict[str, Any] = {}
        self._loaded = False
        self.logger = logger

        self.file_ops = FileOperations(self.project_root, self.paths.ENV_FILE)
        self.env_handler = EnvironmentHandler(environ)

        if load_env:
            self.file_ops.load_environment_variables()

    @property
    def config(self) -> Dict[str, Any]:
        """Get the current configuration. Loads if not already loaded."""
        if not self._loaded:
            self.load_config()
        return deepcopy(self._config)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load_config(self, force_reload: bool = False) -> Dict[str, Any]:
        """
        Load configuration from all sources.

        Args:
            force_reload: Force reloading even if already loaded

        Returns:
            Loaded configuration dictionary

        Raises:
            ConfigurationError: If the configuration file or an environment
                override is invalid
        """
        if self._loaded and not force_reload:
            return deepcopy(self._config)

        self.logger.debug(f"Loading configuration from {self.config_file}")

        try:
            file_config = self.file_ops.load_json_file(self.config_file)
            merged_config = merge_configs(DEFAULT_CONFIG, file_config)
            self._config = self.env_handler.apply_environment_overrides(merged_config)
        except ConfigurationError as e:
            self.logger.error(f"Configuration loading failed: {e}")
            self._loaded = False
            raise

        self._loaded = True
        self.logger.debug("Configuration loaded successfully")
        return deepcopy(self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key using dot notation.

        Args:
            key: Configuration key (e.g. 'corpus.root')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        config = self.config
        try:
            for k in key.split('.'):
                config = config[k]
            return config
        except (KeyError, TypeError):
            return default

    def get_path(self, key: str) -> Optional[Path]:
        """Get a path-valued setting resolved against the project root."""
        value = self.get(key)
        if not value:
            return None
        return self.file_ops.resolve_path(value)

    def reset(self) -> None:
        """Reset configuration state, forcing reload on next access."""
        self._config = {}
        self._loaded = False


def merge_configs(*configs: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep-merge configuration dictionaries; later ones win."""
    result: Dict[str, Any] = {}
    for config in configs:
        for key, value in config.items():
            if isinstance(value, Mapping) and isinstance(result.get(key), dict):
                result[key] = merge_configs(result[key], value)
            else:
                result[key] = deepcopy(value)
    return result
