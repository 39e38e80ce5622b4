"""CLI entry point for the Kellum Library API server."""

from __future__ import annotations

import dataclasses

import click
import uvicorn

from kellum_library import __version__
from kellum_library.api.app import create_app
from kellum_library.config import ConfigError, Settings
from kellum_library.logging import setup_logging


@click.command()
@click.version_option(version=__version__)
@click.option("--host", default=None, help="Interface to bind (default: KELLUM_HOST or 127.0.0.1)")
@click.option(
    "--port", type=int, default=None, help="Port to listen on (default: KELLUM_PORT or 8080)"
)
@click.option(
    "--db-path",
    "db_path",
    default=None,
    help="SQLite database path (default: KELLUM_DB_PATH or kellum_library.db)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(host: str | None, port: int | None, db_path: str | None, verbose: bool) -> None:
    """Serve the games and movies catalog API."""
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    overrides = {"host": host, "port": port, "db_path": db_path}
    settings = dataclasses.replace(
        settings, **{k: v for k, v in overrides.items() if v is not None}
    )

    setup_logging(
        log_dir=settings.log_dir,
        level="DEBUG" if verbose else settings.log_level,
    )
    click.echo(f"Serving on http://{settings.host}:{settings.port} (db: {settings.db_path})")
    app = create_app(settings.db_path)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
