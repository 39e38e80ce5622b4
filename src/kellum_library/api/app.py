"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kellum_library import __version__
from kellum_library.api.dependencies import close_services, init_services
from kellum_library.api.models import APIResponse
from kellum_library.api.routes import auth, games, movies
from kellum_library.auth import AuthError
from kellum_library.catalog import CatalogError, GameNotFoundError, MovieNotFoundError
from kellum_library.config import db_path_from_env
from kellum_library.logging import describe_error

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from kellum_library.auth import Clock

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    db_path = app.state.db_path if hasattr(app.state, "db_path") else "kellum_library.db"
    clock = app.state.clock if hasattr(app.state, "clock") else None
    init_services(db_path, clock=clock)
    logger.info("Services initialized (db=%s)", db_path)

    yield

    close_services()


def create_app(db_path: str | None = None, clock: Clock | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: SQLite database path. Defaults to the configured path.
        clock: Time source for sessions. Defaults to the system clock.
    """
    app = FastAPI(
        title="Kellum Library API",
        description="Games and movies catalog with session authentication",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.db_path = db_path if db_path is not None else db_path_from_env()
    app.state.clock = clock

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(AuthError)
    async def auth_error_handler(_request: Request, exc: AuthError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=APIResponse[None](data=None, error=exc.message).model_dump(),
        )

    @app.exception_handler(GameNotFoundError)
    async def game_not_found_handler(_request: Request, _exc: GameNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=APIResponse[None](data=None, error="Game not found").model_dump(),
        )

    @app.exception_handler(MovieNotFoundError)
    async def movie_not_found_handler(
        _request: Request, _exc: MovieNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=APIResponse[None](data=None, error="Movie not found").model_dump(),
        )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(_request: Request, exc: CatalogError) -> JSONResponse:
        logger.error("Catalog storage failure: %s", describe_error(exc))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=APIResponse[None](data=None, error="Internal server error").model_dump(),
        )

    app.include_router(auth.router)
    app.include_router(games.router)
    app.include_router(movies.router)

    return app


# Default app instance
app = create_app()
