"""Runtime configuration for Kellum Library."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_DB_PATH = "kellum_library.db"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


class ConfigError(Exception):
    """Raised when configuration is invalid."""


def db_path_from_env(environ: Mapping[str, str] | None = None) -> str:
    """Database path from KELLUM_DB_PATH, then the legacy DB_PATH. Never raises."""
    env = os.environ if environ is None else environ
    return env.get("KELLUM_DB_PATH") or env.get("DB_PATH") or DEFAULT_DB_PATH


@dataclass(frozen=True)
class Settings:
    """Process settings.

    Attributes:
        db_path: SQLite database path. ":memory:" for an in-memory database.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        log_dir: Log directory, or None to let setup_logging decide.
        log_level: Log level name, or None to let setup_logging decide.
    """

    db_path: str = DEFAULT_DB_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_dir: str | None = None
    log_level: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        KELLUM_DB_PATH wins over the legacy DB_PATH variable.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Parsed settings.

        Raises:
            ConfigError: If KELLUM_PORT is not a valid TCP port.
        """
        env = os.environ if environ is None else environ

        db_path = db_path_from_env(env)

        raw_port = env.get("KELLUM_PORT")
        port = DEFAULT_PORT
        if raw_port:
            try:
                port = int(raw_port)
            except ValueError as e:
                raise ConfigError(f"KELLUM_PORT must be an integer, got '{raw_port}'") from e
            if not 0 < port < 65536:
                raise ConfigError(f"KELLUM_PORT out of range: {port}")

        return cls(
            db_path=db_path,
            host=env.get("KELLUM_HOST", DEFAULT_HOST),
            port=port,
            log_dir=env.get("KELLUM_LOG_DIR"),
            log_level=env.get("KELLUM_LOG_LEVEL"),
        )
