"""Auth Store - Persistent storage for identities and sessions."""

from kellum_library.auth_store.exceptions import (
    AuthStoreError,
    IdentityExistsError,
    IdentityNotFoundError,
    SessionNotFoundError,
)
from kellum_library.auth_store.models import Identity, LiveSession, UserSession
from kellum_library.auth_store.store import AuthStore

__all__ = [
    "AuthStore",
    "AuthStoreError",
    "Identity",
    "IdentityExistsError",
    "IdentityNotFoundError",
    "LiveSession",
    "SessionNotFoundError",
    "UserSession",
]
