"""
Logging setup

Applies a LoggingConfig to the root logger. Library modules only ever call
logging.getLogger(__name__); entry points call setup_logging() once.
"""

import logging
from typing import Optional

from core.config.logging_config import LoggingConfig

HTTP_LOGGERS = ("httpx", "httpcore")


def _level(name: str, default: int) -> int:
    return getattr(logging, (name or "").upper(), default)


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure root logging from a LoggingConfig.

    Args:
        config: Logging configuration (defaults to environment)

    Returns:
        Logger named after the configured service
    """
    if config is None:
        config = LoggingConfig.from_env()

    handlers = []
    if config.enable_console:
        handlers.append(logging.StreamHandler())
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=_level(config.log_level, logging.INFO),
        format=config.log_format,
        handlers=handlers or None,
        force=True,
    )

    http_level = _level(config.http_log_level, logging.WARNING)
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)

    return logging.getLogger(config.service_name)


__all__ = ["setup_logging"]
