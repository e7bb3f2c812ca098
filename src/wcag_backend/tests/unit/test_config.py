"""
Tests for configuration loading.

Covers defaults, the JSON configuration file, environment overrides and
the errors raised for invalid sources.
"""

import json
from pathlib import Path

import pytest

from wcag_backend.exceptions import ConfigurationError, EnvironmentVariableError
from wcag_backend.utils.config import ConfigManager, EnvironmentHandler, merge_configs


class TestConfigManager:
    """Test ConfigManager source merging."""

    def test_defaults(self, temp_directory):
        config = ConfigManager(project_root=temp_directory, load_env=False, environ={})

        assert config.get("corpus.root") == "../wcag"
        assert config.get("corpus.criteria_index") == "wcag-criteria.json"
        assert config.get("logging.level") == "INFO"
        assert config.get("server.name") == "wcag-server"
        assert config.get("missing.key", "fallback") == "fallback"

    def test_default_corpus_path_is_sibling(self, temp_directory):
        config = ConfigManager(project_root=temp_directory / "server", load_env=False, environ={})
        assert config.get_path("corpus.root") == (temp_directory / "wcag").resolve()

    def test_config_file_overrides_defaults(self, temp_directory):
        (temp_directory / "wcag.config.json").write_text(json.dumps({
            "corpus": {"root": "content"},
            "logging": {"format": "json"},
        }), encoding="utf-8")
        config = ConfigManager(project_root=temp_directory, load_env=False, environ={})

        assert config.get_path("corpus.root") == (temp_directory / "content").resolve()
        assert config.get("corpus.criteria_index") == "wcag-criteria.json"
        assert config.get("logging.format") == "json"
        assert config.get("logging.level") == "INFO"

    def test_environment_overrides_file(self, config_file, temp_directory):
        config = ConfigManager(
            config_file=str(config_file),
            load_env=False,
            environ={"WCAG_PATH": "/srv/wcag", "WCAG_LOG_LEVEL": "debug"},
        )

        assert config.get_path("corpus.root") == Path("/srv/wcag")
        assert config.get("logging.level") == "DEBUG"

    def test_empty_environment_value_ignored(self, temp_directory):
        config = ConfigManager(project_root=temp_directory, load_env=False, environ={"WCAG_PATH": ""})
        assert config.get("corpus.root") == "../wcag"

    def test_unset_path_is_none(self, temp_directory):
        config = ConfigManager(project_root=temp_directory, load_env=False, environ={})
        assert config.get_path("logging.file") is None

    def test_invalid_json(self, temp_directory):
        path = temp_directory / "broken.json"
        path.write_text("{", encoding="utf-8")
        config = ConfigManager(config_file=str(path), load_env=False, environ={})

        with pytest.raises(ConfigurationError):
            config.load_config()
        assert not config.is_loaded

    def test_non_object_config(self, temp_directory):
        path = temp_directory / "list.json"
        path.write_text("[]", encoding="utf-8")
        config = ConfigManager(config_file=str(path), load_env=False, environ={})

        with pytest.raises(ConfigurationError) as exc_info:
            config.load_config()
        assert "Suggestions" in str(exc_info.value)

    def test_invalid_log_level(self, temp_directory):
        config = ConfigManager(project_root=temp_directory, load_env=False, environ={"WCAG_LOG_LEVEL": "LOUD"})

        with pytest.raises(EnvironmentVariableError) as exc_info:
            config.load_config()
        assert exc_info.value.variable_name == "WCAG_LOG_LEVEL"
        assert exc_info.value.config_key == "logging.level"
        assert "Set WCAG_LOG_LEVEL to one of: DEBUG, INFO" in str(exc_info.value)

    def test_env_file_loaded(self, temp_directory, monkeypatch):
        # Registers the variable with monkeypatch so the value loaded below is undone.
        monkeypatch.setenv("WCAG_SERVER_NAME", "placeholder")
        monkeypatch.delenv("WCAG_SERVER_NAME")
        (temp_directory / ".env").write_text("WCAG_SERVER_NAME=from-dotenv\n", encoding="utf-8")

        config = ConfigManager(project_root=temp_directory, load_env=True)
        assert config.get("server.name") == "from-dotenv"

    def test_config_returns_copy(self, temp_directory):
        config = ConfigManager(project_root=temp_directory, load_env=False, environ={})
        config.config["corpus"]["root"] = "changed"
        assert config.get("corpus.root") == "../wcag"

    def test_reset(self, temp_directory):
        config = ConfigManager(project_root=temp_directory, load_env=False, environ={})
        config.load_config()
        config.reset()
        assert not config.is_loaded


class TestEnvironmentHandler:
    """Test environment value conversion."""

    def test_log_format_normalized(self):
        assert EnvironmentHandler({}).convert_env_value("WCAG_LOG_FORMAT", " JSON ") == "json"

    def test_invalid_log_format(self):
        with pytest.raises(EnvironmentVariableError):
            EnvironmentHandler({}).convert_env_value("WCAG_LOG_FORMAT", "xml")

    def test_overrides_create_sections(self):
        result = EnvironmentHandler({"WCAG_CRITERIA_INDEX": "index.json"}).apply_environment_overrides({})
        assert result == {"corpus": {"criteria_index": "index.json"}}


def test_merge_configs_is_deep():
    merged = merge_configs({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}, "d": 4})
    assert merged == {"a": {"b": 1, "c": 3}, "d": 4}
