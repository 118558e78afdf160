"""
Configuration helpers for the proverbs service.

Settings are read once from the environment (optionally seeded from a dotenv
file) and cached, so routers/services never fetch os.environ directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

from dotenv import load_dotenv

DEFAULT_DATA_FILE = os.path.join(".", "data", "proverbs.json")
DEFAULT_ENV_FILE = ".env"


class ConfigError(Exception):
    """Raised when the configuration cannot be read."""


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host_address: str
    host_port: int
    data_file: str
    log_level: str


def load_env_file(path: str | os.PathLike | None = None) -> bool:
    """
    Load KEY=VALUE pairs from a dotenv file into os.environ.

    Variables already set in the process environment are kept. The default
    ``.env`` is optional; a file named explicitly (argument or ENV_FILE) must
    exist.
    """
    explicit = path or os.getenv("ENV_FILE")
    env_path = Path(explicit or DEFAULT_ENV_FILE)
    if not env_path.is_file():
        if explicit:
            raise ConfigError(f"env file not found: {env_path}")
        return False
    try:
        return load_dotenv(env_path, override=False)
    except OSError as exc:
        raise ConfigError(f"cannot read env file {env_path}: {exc}") from exc


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host_address=os.getenv("HOST_ADDRESS", "127.0.0.1"),
        host_port=_int(os.getenv("HOST_PORT"), 80),
        data_file=os.getenv("DATA_FILE") or DEFAULT_DATA_FILE,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
