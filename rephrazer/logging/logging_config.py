"""Centralized logging configuration for Rephrazer.

Supports a YAML configuration file in ``logging.config.dictConfig`` format
and falls back to built-in defaults.

Usage:
    >>> from rephrazer.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Prompt compiled")

Environment variables:
    REPHRAZER_LOGGING_CONFIG: Path to custom logging.yml
    REPHRAZER_LOG_LEVEL: Default log level (WARNING, INFO, DEBUG, etc.)
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

# Package loggers whose level follows the setup_logging() override
DEFAULT_LOG_LEVELS = {
    "rephrazer": "WARNING",
    "rephrazer.options": "WARNING",
    "rephrazer.prompt_compiler": "WARNING",
    "rephrazer.clipboard": "WARNING",
}


class LoggingConfig:
    """Manages logging configuration for Rephrazer.

    Configuration precedence:
        1. Explicit config_path parameter
        2. REPHRAZER_LOGGING_CONFIG environment variable
        3. Default configuration

    Example:
        >>> config = LoggingConfig()
        >>> config.apply()
        >>>
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
        """Get config path from REPHRAZER_LOGGING_CONFIG, or None for built-in defaults."""
        if env_path := os.environ.get("REPHRAZER_LOGGING_CONFIG"):
            return Path(env_path)
        return None

    def load_config(self) -> Dict[str, Any]:
        """Load logging configuration from file or defaults.

        Returns:
            Dictionary in ``logging.config.dictConfig`` format.
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
        """Get default logging configuration.

        Warnings and above go to stderr so they never mix with a prompt printed on stdout.

        Default format:
            "HH:MM:SS.mmm | LEVEL | logger.name - message"
        """
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
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "rephrazer": {
                    "level": os.environ.get("REPHRAZER_LOG_LEVEL", "WARNING"),
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
        """Apply the configuration via ``logging.config.dictConfig``.

        Multiple calls reconfigure logging.
        """
        config = self.load_config()
        logging.config.dictConfig(config)


_logging_config: Optional[LoggingConfig] = None


def setup_logging(config_path: Optional[Path] = None, level: Optional[str] = None):
    """Set up logging for Rephrazer.

    Args:
        config_path: Optional path to a YAML logging configuration file.
        level: Optional level override (INFO, DEBUG, ...) applied to all package loggers.

    Example:
        >>> setup_logging()
        >>> setup_logging(level="DEBUG")
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        for logger_name in DEFAULT_LOG_LEVELS:
            logging.getLogger(logger_name).setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a Rephrazer component.

    Initializes logging with defaults on first use.

    Args:
        name: Logger name, typically ``__name__``.
    """
    if _logging_config is None:
        setup_logging()

    return logging.getLogger(name)
