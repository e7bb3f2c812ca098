"""
Tests for logging configuration.
"""

import io
import json
import logging

import pytest

from wcag_backend.utils.config import ConfigManager
from wcag_backend.utils.logging_config import JSONFormatter, LogFormat, LoggingManager, LogLevel


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestLoggingManager:
    """Test handler setup on the root logger."""

    def test_console_handler_writes_to_stream(self):
        stream = io.StringIO()
        manager = LoggingManager(log_level=LogLevel.DEBUG, stream=stream)

        manager.get_logger("wcag_backend.test").info("hello")
        assert "hello" in stream.getvalue()

    def test_console_defaults_to_stderr(self):
        import sys

        LoggingManager()
        handler = logging.getLogger().handlers[0]
        assert handler.stream is sys.stderr

    def test_file_handler(self, temp_directory):
        log_file = temp_directory / "server.log"
        manager = LoggingManager(log_file=log_file, enable_console=False)

        manager.get_logger("wcag_backend.test").warning("to file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "to file" in log_file.read_text(encoding="utf-8")

    def test_json_format(self):
        stream = io.StringIO()
        manager = LoggingManager(log_format=LogFormat.JSON, stream=stream)

        manager.get_logger("wcag_backend.test").info("structured", extra={"uri": "wcag://techniques/H37"})
        record = json.loads(stream.getvalue().strip())
        assert record["message"] == "structured"
        assert record["uri"] == "wcag://techniques/H37"

    def test_from_config(self, temp_directory):
        config = ConfigManager(
            project_root=temp_directory,
            load_env=False,
            environ={"WCAG_LOG_LEVEL": "ERROR", "WCAG_LOG_FORMAT": "detailed"},
        )
        manager = LoggingManager.from_config(config, stream=io.StringIO())

        assert manager.log_level is LogLevel.ERROR
        assert manager.log_format is LogFormat.DETAILED
        assert logging.getLogger().level == logging.ERROR


class TestLogEnums:
    """Test level and format lookup by name."""

    def test_level_from_name(self):
        assert LogLevel.from_name("warning") is LogLevel.WARNING
        assert LogLevel.from_name("nonsense") is LogLevel.INFO
        assert LogLevel.from_name(None) is LogLevel.INFO

    def test_format_from_name(self):
        assert LogFormat.from_name("JSON") is LogFormat.JSON
        assert LogFormat.from_name("nonsense") is LogFormat.STANDARD


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        import sys

        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

    data = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in data["exception"]
