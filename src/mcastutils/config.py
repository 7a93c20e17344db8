"""
Configuration management for mcastutils.

Loads settings from environment variables or a .env file.
"""

import os
from pathlib import Path
from dataclasses import dataclass

from dotenv import load_dotenv

from mcastutils.errors import ConfigError


# Check common locations for .env
ENV_LOCATIONS = [
    Path.home() / ".mcast" / ".env",
    Path.home() / ".config" / "mcast" / ".env",
    Path.cwd() / ".env",
]

DEFAULT_MAX_LIST_ADDRESSES = 1 << 20


def load_env_files(locations: list[Path] | None = None) -> Path | None:
    """Load the first .env file found, returning its path."""
    for env_path in locations if locations is not None else ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw, 10)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {value}")
    return value


@dataclass
class UtilsConfig:
    """Library settings."""

    # Largest CIDR block ip_list() will materialise; 0 disables the guard
    max_list_addresses: int = DEFAULT_MAX_LIST_ADDRESSES

    # Interface used when get_interface() is called with None
    default_interface: str = ""

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "UtilsConfig":
        """Load configuration from environment variables."""
        return cls(
            max_list_addresses=_env_int("MCAST_MAX_LIST_ADDRESSES", DEFAULT_MAX_LIST_ADDRESSES),
            default_interface=os.getenv("MCAST_INTERFACE", ""),
            log_level=os.getenv("MCAST_LOG_LEVEL", "INFO"),
        )


# Global config instance
_config: UtilsConfig | None = None


def get_config() -> UtilsConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        load_env_files()
        _config = UtilsConfig.from_env()
    return _config


def set_config(config: UtilsConfig | None) -> None:
    """Set the global configuration instance, or clear it with None."""
    global _config
    _config = config
