"""Logging infrastructure for Rephrazer.

Example:
    >>> from rephrazer.logging import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info("Processing started")

Note:
    Always use get_logger() instead of logging.getLogger() so that the
    package configuration is applied before the first record is emitted.
"""

from .logging_config import LoggingConfig, get_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "get_logger",
    "setup_logging",
]
