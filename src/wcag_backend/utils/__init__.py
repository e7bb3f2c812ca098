"""Utility modules for configuration and logging."""

from .config import ConfigManager
from .logging_config import LoggingManager, LogLevel, LogFormat

__all__ = [
    "ConfigManager",
    "LoggingManager",
    "LogLevel",
    "LogFormat",
]
