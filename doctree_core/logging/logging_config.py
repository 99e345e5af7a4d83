"""Centralized logging configuration for doctree-core.

@public

Loggers are obtained through Prefect's logger factory so that messages
emitted while a host application runs inside a Prefect flow end up in the
flow's run log. Configuration comes from a YAML file when one is given,
otherwise from a built-in default.

Usage:
    >>> from doctree_core.logging import get_pipeline_logger
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.debug("Querying children")

Environment variables:
    DOCTREE_LOGGING_CONFIG: Path to custom logging.yml
    DOCTREE_LOG_LEVEL: Default log level for doctree_core loggers
    PREFECT_LOGGING_SETTINGS_PATH: Alternative config path
"""

import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from prefect.logging import get_logger

# get_logger() nests every name under the "prefect" logger
PACKAGE_LOGGER = "prefect.doctree_core"

DEFAULT_LOG_LEVELS = {
    "doctree_core": "INFO",
    "doctree_core.tree": "INFO",
    "doctree_core.registry": "INFO",
    "doctree_core.native": "INFO",
}


class LoggingConfig:
    """Manages logging configuration for the library.

    @public

    Configuration precedence:
        1. Explicit config_path parameter
        2. DOCTREE_LOGGING_CONFIG environment variable
        3. PREFECT_LOGGING_SETTINGS_PATH environment variable
        4. Default configuration

    Example:
        >>> config = LoggingConfig(Path("custom_logging.yml"))
        >>> config.apply()

    Note:
        Configuration is lazy-loaded and cached after first access.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or self._get_default_config_path()
        self._config: Optional[Dict[str, Any]] = None

    @staticmethod
    def _get_default_config_path() -> Optional[Path]:
        if env_path := os.environ.get("DOCTREE_LOGGING_CONFIG"):
            return Path(env_path)

        if prefect_path := os.environ.get("PREFECT_LOGGING_SETTINGS_PATH"):
            return Path(prefect_path)

        return None

    def load_config(self) -> Dict[str, Any]:
        """Load logging configuration from file or defaults.

        Returns:
            Dictionary in logging.config.dictConfig format. Cached after
            the first call; create a new LoggingConfig to reload from disk.
        """
        if self._config is None:
            if self.config_path and self.config_path.exists():
                with open(self.config_path, "r") as f:
                    self._config = yaml.safe_load(f)
            else:
                self._config = self._get_default_config()
        assert self._config is not None
        return self._config

    @staticmethod
    def _get_default_config() -> Dict[str, Any]:
        """Default configuration: one console handler, DOCTREE_LOG_LEVEL for the package."""
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                PACKAGE_LOGGER: {
                    "level": os.environ.get("DOCTREE_LOG_LEVEL", "INFO"),
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
            "root": {
                "level": "WARNING",
                "handlers": ["console"],
            },
        }

    def apply(self):
        """Apply the configuration with logging.config.dictConfig.

        Also exports PREFECT_LOGGING_LEVEL when the configuration carries a
        ``prefect`` logger entry and the variable is not already set.
        """
        config = self.load_config()
        logging.config.dictConfig(config)

        if "prefect" in config.get("loggers", {}):
            prefect_level = config["loggers"]["prefect"].get("level", "INFO")
            os.environ.setdefault("PREFECT_LOGGING_LEVEL", prefect_level)


_logging_config: Optional[LoggingConfig] = None


def setup_logging(config_path: Optional[Path] = None, level: Optional[str] = None):
    """Setup logging for the doctree-core library.

    @public

    Args:
        config_path: Optional path to YAML logging configuration file.
                    If None, uses environment variables or defaults.
        level: Optional log level override (INFO, DEBUG, WARNING, etc.)
              applied to every doctree_core logger.

    Example:
        >>> setup_logging(level="DEBUG")
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        for logger_name in DEFAULT_LOG_LEVELS:
            logger = get_logger(logger_name)
            logger.setLevel(level)


def get_pipeline_logger(name: str):
    """Get a logger for library components.

    @public

    Initializes logging with the default configuration on first use.

    Args:
        name: Logger name, typically __name__.

    Returns:
        Prefect logger instance.
    """
    if _logging_config is None:
        setup_logging()

    return get_logger(name)
