"""Configuration management package.

This package provides the configuration system with support for:
- Built-in defaults
- An optional JSON configuration file
- Environment variable overrides (including a .env file)

Usage:
    from wcag_backend.utils.config import ConfigManager

    config = ConfigManager()
    corpus_root = config.get_path("corpus.root")
"""

from .manager import ConfigManager, merge_configs
from .paths import ConfigPaths, DEFAULT_CONFIG
from .file_operations import FileOperations
from .environment import EnvironmentHandler

__all__ = [
    'ConfigManager',
    'ConfigPaths',
    'DEFAULT_CONFIG',
    'FileOperations',
    'EnvironmentHandler',
    'merge_configs',
]
