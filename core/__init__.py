#!/usr/bin/env python3
"""
Core Module

Shared infrastructure for the campaign manager.

COMPONENTS:
    - config/: Dataclass configuration loaded from environment and dotenv files
    - logger.py: Root logging setup from LoggingConfig
    - http_client_base.py: httpx.AsyncClient wrapper for the CrudCrud clients

USAGE:
    from core.config import get_settings
    from core.logger import setup_logging

    settings = get_settings()
    setup_logging(settings.logging)
"""

from .http_client_base import BaseHttpClient, build_default_headers
from .logger import setup_logging

__all__ = [
    "BaseHttpClient",
    "build_default_headers",
    "setup_logging",
]
