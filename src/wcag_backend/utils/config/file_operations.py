"""
File operations for configuration management.

This module provides file loading, path resolution, and ``.env`` loading
for the WCAG server configuration system.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from dotenv import load_dotenv

from ...exceptions.config_exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class FileOperations:
    """
    File operations for configuration management.

    Handles file loading, path resolution, and environment variable loading.
    """

    def __init__(self, project_root: Path, env_file: str) -> None:
        """
        Initialize file operations.

        Args:
            project_root: Project root directory
            env_file: Environment file name
        """
        self.project_root = project_root
        self.env_file = env_file
        self.logger = logger

    def resolve_path(self, path: Union[str, Path]) -> Path:
        """
        Resolve a path relative to the project root.

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Resolved absolute path
        """
        path_obj = Path(path).expanduser()
        if path_obj.is_absolute():
            return path_obj
        return (self.project_root / path_obj).resolve()

    def load_environment_variables(self) -> None:
        """
        Load environment variables from the .env file if it exists.

        Variables already set in the process environment take precedence.
        """
        env_file_path = self.resolve_path(self.env_file)
        if env_file_path.exists():
            self.logger.debug(f"Loading environment variables from {env_file_path}")
            load_dotenv(env_file_path, override=False)
        else:
            self.logger.debug(f"Environment file not found at {env_file_path}, skipping")

    def load_json_file(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load and parse a JSON configuration file.

        Args:
            file_path: Path to JSON file

        Returns:
            Parsed JSON data, or an empty dict if the file does not exist

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        resolved_path = self.resolve_path(file_path)

        if not resolved_path.exists():
            self.logger.debug(f"Configuration file not found at {resolved_path}, using defaults")
            return {}

        try:
            with open(resolved_path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            error_msg = f"Invalid JSON in configuration file {resolved_path}: {e}"
            self.logger.error(error_msg)
            raise ConfigurationError(error_msg, str(resolved_path)) from e
        except OSError as e:
            error_msg = f"Error reading configuration file {resolved_path}: {e}"
            self.logger.error(error_msg)
            raise ConfigurationError(error_msg, str(resolved_path)) from e

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                "Configuration file must contain a JSON object",
                str(resolved_path),
                suggestions=["Wrap the settings in a top-level object, e.g. {\"corpus\": {...}}"]
            )

        self.logger.info(f"Successfully loaded configuration from {resolved_path}")
        return config_data
