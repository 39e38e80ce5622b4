"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends, Request

from kellum_library.auth import (
    AuthenticatedUser,
    Clock,
    CredentialVerifier,
    RequestAuthorizer,
    SessionManager,
)
from kellum_library.auth_store import AuthStore
from kellum_library.catalog import CatalogStore
from kellum_library.database import Database

# Global instances (initialized on app startup)
_database: Database | None = None
_auth_store: AuthStore | None = None
_catalog_store: CatalogStore | None = None
_session_manager: SessionManager | None = None
_authorizer: RequestAuthorizer | None = None


def init_services(db_path: str = "kellum_library.db", clock: Clock | None = None) -> Database:
    """Initialize the database, both stores and the auth components."""
    global _database, _auth_store, _catalog_store, _session_manager, _authorizer  # noqa: PLW0603
    _database = Database(db_path)
    _auth_store = AuthStore(_database)
    _catalog_store = CatalogStore(_database)
    _session_manager = SessionManager(
        store=_auth_store,
        verifier=CredentialVerifier(_auth_store),
        clock=clock,
    )
    _authorizer = RequestAuthorizer(_session_manager)
    return _database


def close_services() -> None:
    """Dispose of the database and drop all global instances."""
    global _database, _auth_store, _catalog_store, _session_manager, _authorizer  # noqa: PLW0603
    if _database is not None:
        _database.close()
    _database = None
    _auth_store = None
    _catalog_store = None
    _session_manager = None
    _authorizer = None


def get_catalog_store() -> Generator[CatalogStore, None, None]:
    """Dependency that provides the CatalogStore instance."""
    if _catalog_store is None:
        raise RuntimeError("CatalogStore not initialized. Call init_services() first.")
    yield _catalog_store


CatalogStoreDep = Annotated[CatalogStore, Depends(get_catalog_store)]


def get_session_manager() -> Generator[SessionManager, None, None]:
    """Dependency that provides the SessionManager instance."""
    if _session_manager is None:
        raise RuntimeError("SessionManager not initialized. Call init_services() first.")
    yield _session_manager


SessionManagerDep = Annotated[SessionManager, Depends(get_session_manager)]


def get_authorizer() -> Generator[RequestAuthorizer, None, None]:
    """Dependency that provides the RequestAuthorizer instance."""
    if _authorizer is None:
        raise RuntimeError("RequestAuthorizer not initialized. Call init_services() first.")
    yield _authorizer


AuthorizerDep = Annotated[RequestAuthorizer, Depends(get_authorizer)]


def require_session(request: Request, authorizer: AuthorizerDep) -> AuthenticatedUser:
    """Dependency that gates a route behind a live session."""
    return authorizer.authorize(request.headers)


CurrentUserDep = Annotated[AuthenticatedUser, Depends(require_session)]
