#!/usr/bin/env python3
"""Configuration for the campaign manager

Configuration hierarchy:
- backing_store_config: CrudCrud endpoints, timeouts, expiry classification, handle storage
- logging_config: Root and HTTP-stack logging
- app_config: Combines the above

An env file is loaded first without overriding variables that are already
set. ENV_FILE names it explicitly; otherwise it is picked from ENV.
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .backing_store_config import BackingStoreConfig, DEFAULT_EXPIRED_STATUSES
from .app_config import AppConfig

ENV_FILES = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "production": "deployment/environments/production.env",
}


def env_file_for(env: str) -> str:
    """Env file path for an environment name"""
    return os.getenv("ENV_FILE") or ENV_FILES.get(env, ENV_FILES["development"])


load_dotenv(env_file_for(os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")), override=False)

settings = AppConfig.from_env()

def get_settings() -> AppConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> AppConfig:
    """Reload settings from environment"""
    global settings
    settings = AppConfig.from_env()
    return settings

__all__ = [
    'AppConfig',
    'get_settings',
    'reload_settings',
    'settings',
    'env_file_for',
    'LoggingConfig',
    'BackingStoreConfig',
    'DEFAULT_EXPIRED_STATUSES',
]
