#!/usr/bin/env python3
"""Application configuration

Combines the backing store and logging sub-configs for the campaign manager.
"""
import os
from dataclasses import dataclass, field

from .backing_store_config import BackingStoreConfig
from .logging_config import LoggingConfig


@dataclass
class AppConfig:
    """Main configuration for the campaign manager"""

    # Environment
    environment: str = "development"

    # Sub-configurations
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    backing_store: BackingStoreConfig = field(default_factory=BackingStoreConfig)

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Load complete configuration from environment"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            environment=env,
            logging=LoggingConfig.from_env(),
            backing_store=BackingStoreConfig.from_env(),
        )
