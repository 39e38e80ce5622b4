"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from kellum_library.auth import CredentialVerifier, SessionManager, SystemClock
from kellum_library.auth_store import AuthStore
from kellum_library.catalog import CatalogStore
from kellum_library.database import Database


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


class ManualClock(SystemClock):
    """Clock that only moves when a test moves it."""

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start if start is not None else datetime(2025, 3, 14, 9, 0, tzinfo=UTC)

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        self._now += delta


@pytest.fixture
def clock() -> ManualClock:
    """A clock frozen at a fixed instant until advanced."""
    return ManualClock()


@pytest.fixture
def database():
    """Create an in-memory database."""
    db = Database(":memory:")
    yield db
    db.close()


@pytest.fixture
def auth_store(database: Database) -> AuthStore:
    """Create an AuthStore on the in-memory database."""
    return AuthStore(database)


@pytest.fixture
def catalog_store(database: Database) -> CatalogStore:
    """Create a CatalogStore on the in-memory database."""
    return CatalogStore(database)


@pytest.fixture
def verifier(auth_store: AuthStore) -> CredentialVerifier:
    """Create a CredentialVerifier on the auth store."""
    return CredentialVerifier(auth_store)


@pytest.fixture
def sessions(
    auth_store: AuthStore, verifier: CredentialVerifier, clock: ManualClock
) -> SessionManager:
    """Create a SessionManager driven by the manual clock."""
    return SessionManager(store=auth_store, verifier=verifier, clock=clock)
