"""Custom exceptions for the auth store."""


class AuthStoreError(Exception):
    """Base exception for auth store errors, including wrapped storage faults."""


class IdentityExistsError(AuthStoreError):
    """Identity with given username already exists."""


class IdentityNotFoundError(AuthStoreError):
    """Identity with given ID does not exist."""


class SessionNotFoundError(AuthStoreError):
    """Session with given ID does not exist."""
