"""Tests for logging configuration."""

import os
from pathlib import Path
from unittest.mock import Mock, patch

from doctree_core.logging import get_pipeline_logger, setup_logging
from doctree_core.logging.logging_config import DEFAULT_LOG_LEVELS, PACKAGE_LOGGER, LoggingConfig


class TestLoggingConfig:
    """Test LoggingConfig class."""

    def test_default_config_path_from_env(self):
        with patch.dict(os.environ, {"DOCTREE_LOGGING_CONFIG": "/path/to/config.yml"}):
            config = LoggingConfig()
            assert config.config_path == Path("/path/to/config.yml")

    def test_default_config_path_from_prefect_env(self):
        with patch.dict(os.environ, {"PREFECT_LOGGING_SETTINGS_PATH": "/prefect/config.yml"}, clear=True):
            config = LoggingConfig()
            assert config.config_path == Path("/prefect/config.yml")

    def test_no_config_path_returns_none(self):
        with patch.dict(os.environ, clear=True):
            config = LoggingConfig()
            assert config.config_path is None

    def test_load_config_from_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "logging.yml"
        config_file.write_text("""
version: 1
disable_existing_loggers: false
handlers:
  console:
    class: logging.StreamHandler
""")

        loaded = LoggingConfig(config_path=config_file).load_config()

        assert loaded["version"] == 1
        assert loaded["disable_existing_loggers"] is False
        assert "console" in loaded["handlers"]

    def test_missing_file_falls_back_to_default(self, tmp_path: Path) -> None:
        loaded = LoggingConfig(config_path=tmp_path / "missing.yml").load_config()
        assert PACKAGE_LOGGER in loaded["loggers"]

    def test_default_level_from_env(self):
        with patch.dict(os.environ, {"DOCTREE_LOG_LEVEL": "DEBUG"}, clear=True):
            loaded = LoggingConfig().load_config()
            assert loaded["loggers"][PACKAGE_LOGGER]["level"] == "DEBUG"

    def test_config_is_cached(self):
        with patch.dict(os.environ, clear=True):
            config = LoggingConfig()
            assert config.load_config() is config.load_config()

    @patch("logging.config.dictConfig")
    def test_apply_config(self, mock_dict_config: Mock) -> None:
        LoggingConfig().apply()

        mock_dict_config.assert_called_once()
        assert mock_dict_config.call_args[0][0]["version"] == 1

    @patch("logging.config.dictConfig")
    def test_apply_with_prefect_settings(self, mock_dict_config: Mock) -> None:
        with patch.dict(os.environ, clear=True):
            custom_config = {"version": 1, "loggers": {"prefect": {"level": "DEBUG"}}}
            with patch.object(LoggingConfig, "load_config", return_value=custom_config):
                LoggingConfig().apply()
                assert os.environ["PREFECT_LOGGING_LEVEL"] == "DEBUG"


class TestSetupLogging:
    """Test setup_logging() and get_pipeline_logger()."""

    @patch("doctree_core.logging.logging_config.get_logger")
    @patch("logging.config.dictConfig")
    def test_level_override(self, mock_dict_config: Mock, mock_get_logger: Mock) -> None:
        setup_logging(level="DEBUG")

        mock_dict_config.assert_called_once()
        assert mock_get_logger.call_count == len(DEFAULT_LOG_LEVELS)
        mock_get_logger.return_value.setLevel.assert_called_with("DEBUG")

    def test_get_pipeline_logger(self):
        logger = get_pipeline_logger("doctree_core.test")
        assert logger.name.endswith("doctree_core.test")
