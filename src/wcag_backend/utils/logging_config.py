"""
Logging configuration for the WCAG server.

Console output always goes to stderr: when the server runs over the stdio
transport, stdout carries the MCP protocol stream.
"""

import json
import logging
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union


class LogLevel(Enum):
    """Log level enumeration."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_name(cls, name: Union[str, "LogLevel", None]) -> "LogLevel":
        if isinstance(name, LogLevel):
            return name
        try:
            return cls[(name or "INFO").upper()]
        except KeyError:
            return cls.INFO


class LogFormat(Enum):
    """Log format types."""
    STANDARD = "standard"
    JSON = "json"
    DETAILED = "detailed"

    @classmethod
    def from_name(cls, name: Union[str, "LogFormat", None]) -> "LogFormat":
        if isinstance(name, LogFormat):
            return name
        try:
            return cls((name or "standard").lower())
        except ValueError:
            return cls.STANDARD


# Standard LogRecord attributes, excluded from JSON extra fields
_STANDARD_ATTRS = frozenset({
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName', 'taskName',
    'processName', 'process', 'exc_info', 'exc_text', 'stack_info', 'message',
})


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        for attr_name, attr_value in record.__dict__.items():
            if not attr_name.startswith('_') and attr_name not in _STANDARD_ATTRS and not callable(attr_value):
                log_data[attr_name] = attr_value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False, separators=(',', ':'))


class LoggingManager:
    """
    Configures the root logger with a console handler on stderr and an
    optional file handler.
    """

    def __init__(
        self,
        log_level: LogLevel = LogLevel.INFO,
        log_format: LogFormat = LogFormat.STANDARD,
        log_file: Optional[Path] = None,
        enable_console: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.log_level = log_level
        self.log_format = log_format
        self.log_file = log_file
        self.enable_console = enable_console
        self.stream = stream

        self._loggers: Dict[str, logging.Logger] = {}
        self._setup_root_logger()

    @classmethod
    def from_config(cls, config_manager, **kwargs) -> "LoggingManager":
        """Create a LoggingManager from the ``logging`` section of a ConfigManager."""
        return cls(
            log_level=LogLevel.from_name(config_manager.get("logging.level")),
            log_format=LogFormat.from_name(config_manager.get("logging.format")),
            log_file=config_manager.get_path("logging.file"),
            **kwargs,
        )

    def _setup_root_logger(self) -> None:
        """Setup the root logger configuration."""
        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level.value)
        root_logger.handlers.clear()

        formatter = self._create_formatters()[self.log_format]

        if self.enable_console:
            console_handler = logging.StreamHandler(self.stream or sys.stderr)
            console_handler.setLevel(self.log_level.value)
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        if self.log_file:
            file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
            file_handler.setLevel(self.log_level.value)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    def _create_formatters(self) -> Dict[LogFormat, logging.Formatter]:
        return {
            LogFormat.STANDARD: logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ),
            LogFormat.JSON: JSONFormatter(),
            LogFormat.DETAILED: logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
            ),
        }

    def get_logger(self, name: str) -> logging.Logger:
        """Get or create a logger instance."""
        if name not in self._loggers:
            logger = logging.getLogger(name)
            logger.setLevel(self.log_level.value)
            self._loggers[name] = logger

        return self._loggers[name]
