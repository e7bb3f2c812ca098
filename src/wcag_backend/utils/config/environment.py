"""
Environment variable handling for configuration management.

Environment variables override values from the defaults and the optional
configuration file. The corpus root keeps the ``WCAG_PATH`` name used by
existing MCP client setups.
"""

import logging
import os
from copy import deepcopy
from typing import Any, Dict, Mapping, Optional

from ...exceptions.config_exceptions import EnvironmentVariableError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("standard", "detailed", "json")

_ENUMERATED_VALUES = {
    'WCAG_LOG_LEVEL': (VALID_LOG_LEVELS, str.upper),
    'WCAG_LOG_FORMAT': (VALID_LOG_FORMATS, str.lower),
}


class EnvironmentHandler:
    """
    Environment variable handling for configuration management.

    Handles environment variable overrides and value validation.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self.environ = environ if environ is not None else os.environ
        self.logger = logger

    def get_env_mapping(self) -> Dict[str, str]:
        """Mapping of environment variable names to configuration keys."""
        return {
            'WCAG_PATH': 'corpus.root',
            'WCAG_CRITERIA_INDEX': 'corpus.criteria_index',
            'WCAG_LOG_LEVEL': 'logging.level',
            'WCAG_LOG_FORMAT': 'logging.format',
            'WCAG_LOG_FILE': 'logging.file',
            'WCAG_SERVER_NAME': 'server.name',
        }

    def convert_env_value(self, env_var: str, value: str) -> Any:
        """
        Validate and normalize an environment variable value.

        Raises:
            EnvironmentVariableError: If the value is not acceptable
        """
        choices = _ENUMERATED_VALUES.get(env_var)
        if choices is None:
            return value.strip()

        allowed, normalize = choices
        normalized = normalize(value.strip())
        if normalized not in allowed:
            raise EnvironmentVariableError(
                f"Invalid value '{value}' for {env_var}, expected one of {', '.join(allowed)}",
                env_var,
                value,
                allowed=allowed,
                config_key=self.get_env_mapping().get(env_var),
            )
        return normalized

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Args:
            config: Base configuration dictionary

        Returns:
            Configuration with environment overrides applied

        Raises:
            EnvironmentVariableError: If an override has an invalid value
        """
        result = deepcopy(config)

        for env_var, config_key in self.get_env_mapping().items():
            env_value = self.environ.get(env_var)
            if env_value is None or env_value == "":
                continue

            converted_value = self.convert_env_value(env_var, env_value)
            set_nested_value(result, config_key, converted_value)
            self.logger.debug(f"Applied environment override: {env_var} -> {config_key}")

        return result


def set_nested_value(config: Dict[str, Any], key_path: str, value: Any) -> None:
    """Set a nested value in configuration using dot notation."""
    keys = key_path.split('.')
    current = config

    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value
