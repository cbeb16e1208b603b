"""
Runtime Configuration Module

Provides configuration loading and management for hashtree.
"""

from .runtime import (
    ENV_PREFIX,
    HashingConfig,
    FileServerConfig,
    LoggingConfig,
    RuntimeConfig,
    load_config,
    get_default_config_template,
)

__all__ = [
    "ENV_PREFIX",
    "HashingConfig",
    "FileServerConfig",
    "LoggingConfig",
    "RuntimeConfig",
    "load_config",
    "get_default_config_template",
]
