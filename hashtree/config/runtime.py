"""
Runtime Configuration

Central configuration for hasher selection, file commitments and logging.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from hashtree.crypto.hashing import DEFAULT_HASHER, available_hashers
from hashtree.schemas.errors import ConfigException

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "HASHTREE_"

DEFAULT_CONFIG_FILES = ("hashtree.json", "hashtree.yaml", "hashtree.yml")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class HashingConfig:
    """Which hasher builds and verifies trees."""
    algorithm: str = DEFAULT_HASHER

    def __post_init__(self):
        self.algorithm = str(self.algorithm).strip().lower()
        if self.algorithm not in available_hashers():
            raise ConfigException(
                f"Unknown hasher {self.algorithm!r} (available: {', '.join(available_hashers())})",
                key="hashing.algorithm",
            )


@dataclass
class FileServerConfig:
    """Configuration for file commitments."""
    chunk_size: int = 1024
    extensions: list[str] = field(default_factory=list)

    def __post_init__(self):
        try:
            self.chunk_size = int(self.chunk_size)
        except (TypeError, ValueError) as e:
            raise ConfigException(
                f"Chunk size must be an integer, got {self.chunk_size!r}",
                key="file_server.chunk_size",
            ) from e
        if self.chunk_size <= 0:
            raise ConfigException(
                f"Chunk size must be positive, got {self.chunk_size}",
                key="file_server.chunk_size",
            )
        if isinstance(self.extensions, str):
            self.extensions = _split_list(self.extensions)


@dataclass
class LoggingConfig:
    """Configuration for CLI logging."""
    level: str = "INFO"
    file: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.level, str) or self.level.strip().upper() not in LOG_LEVELS:
            raise ConfigException(
                f"Log level must be one of {', '.join(LOG_LEVELS)}, got {self.level!r}",
                key="logging.level",
            )
        self.level = self.level.strip().upper()


def _split_list(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables (and a .env file)
    - JSON or YAML file
    - Programmatic construction
    """
    hashing: HashingConfig = field(default_factory=HashingConfig)
    file_server: FileServerConfig = field(default_factory=FileServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - HASHTREE_HASHER: hasher name (sha256, djb2, sdbm)
        - HASHTREE_CHUNK_SIZE: file chunk size in bytes
        - HASHTREE_EXTENSIONS: comma-separated allowed file extensions
        - HASHTREE_LOG_LEVEL: log level
        - HASHTREE_LOG_FILE: optional log file path
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HASHER"):
            overrides.setdefault("hashing", {})["algorithm"] = os.getenv(f"{ENV_PREFIX}HASHER")

        if os.getenv(f"{ENV_PREFIX}CHUNK_SIZE"):
            overrides.setdefault("file_server", {})["chunk_size"] = os.getenv(
                f"{ENV_PREFIX}CHUNK_SIZE"
            )
        if os.getenv(f"{ENV_PREFIX}EXTENSIONS"):
            overrides.setdefault("file_server", {})["extensions"] = _split_list(
                os.getenv(f"{ENV_PREFIX}EXTENSIONS", "")
            )

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_file(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a JSON or YAML file."""
        return cls.from_dict(_read_config_file(Path(path)))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        if not isinstance(data, dict):
            raise ConfigException(f"Configuration must be a mapping, got {type(data).__name__}")

        try:
            hashing_data = data.get("hashing", {}) or {}
            file_server_data = data.get("file_server", {}) or {}
            logging_data = data.get("logging", {}) or {}

            return cls(
                hashing=HashingConfig(**hashing_data),
                file_server=FileServerConfig(**file_server_data),
                logging=LoggingConfig(**logging_data),
            )
        except TypeError as e:
            raise ConfigException(f"Invalid configuration: {e}") from e

    def merged_with(self, overrides: dict[str, Any]) -> "RuntimeConfig":
        """Return a copy with `overrides` applied section by section."""
        data = self.to_dict()
        for section, values in overrides.items():
            if isinstance(values, dict):
                data.setdefault(section, {}).update(values)
            else:
                data[section] = values
        return RuntimeConfig.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigException(f"Config file not found: {path}", details={"path": str(path)})

    try:
        with open(path) as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigException(
            f"Cannot parse config file {path}: {e}",
            details={"path": str(path)},
        ) from e

    return data or {}


def load_config(config_path: Path | str | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings. Without an explicit
    path the first existing default file in the working directory is used.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration
    """
    config = RuntimeConfig()

    if config_path is not None:
        config = RuntimeConfig.from_file(config_path)
    else:
        for name in DEFAULT_CONFIG_FILES:
            default_path = Path.cwd() / name
            if default_path.exists():
                config = RuntimeConfig.from_file(default_path)
                break

    return config.merged_with(RuntimeConfig._get_env_overrides())


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(RuntimeConfig().to_dict(), indent=2) + "\n"


__all__ = [
    "ENV_PREFIX",
    "LOG_LEVELS",
    "HashingConfig",
    "FileServerConfig",
    "LoggingConfig",
    "RuntimeConfig",
    "load_config",
    "get_default_config_template",
]
