#!/usr/bin/env python3
"""Logging configuration

Levels for the campaign manager's own loggers and for the HTTP stack
underneath it. httpx and httpcore log every request, which drowns out the
handle lifecycle messages operators actually read.
"""
import os
from dataclasses import dataclass

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _bool(val: str) -> bool:
    return val.lower() == "true"


@dataclass
class LoggingConfig:
    """Root and HTTP-stack logging settings"""
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    # Extra file handler, off when empty
    log_file: str = ""
    enable_console: bool = True
    http_log_level: str = "WARNING"

    service_name: str = "campaign_service"

    @classmethod
    def from_env(cls) -> 'LoggingConfig':
        """Load logging config from environment variables"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env == "development" else "INFO"),
            log_format=os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("LOG_FILE", ""),
            enable_console=_bool(os.getenv("LOG_CONSOLE", "true")),
            http_log_level=os.getenv("HTTP_LOG_LEVEL", "WARNING"),
            service_name=os.getenv("SERVICE_NAME", "campaign_service"),
        )
