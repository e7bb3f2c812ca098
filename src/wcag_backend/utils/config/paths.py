"""
Configuration file paths and defaults for the WCAG server.

This module provides the ConfigPaths dataclass containing default paths
and the built-in default configuration.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ConfigPaths:
    """Configuration file paths and constants."""

    DEFAULT_CONFIG_FILE: str = "wcag.config.json"
    ENV_FILE: str = ".env"


DEFAULT_CONFIG: Dict[str, Any] = {
    "corpus": {
        "root": "../wcag",
        "criteria_index": "wcag-criteria.json",
    },
    "logging": {
        "level": "INFO",
        "format": "standard",
        "file": None,
    },
    "server": {
        "name": "wcag-server",
        "version": "0.1.0",
    },
}
