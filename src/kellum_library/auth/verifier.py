"""Credential verification and identity registration."""

from __future__ import annotations

import logging

from kellum_library.auth.exceptions import FailedToAuthenticate, FailedToRegister
from kellum_library.auth_store import AuthStore, AuthStoreError, IdentityExistsError
from kellum_library.logging import describe_error

logger = logging.getLogger(__name__)


class CredentialVerifier:
    """Checks (username, credential hash) pairs against stored identities."""

    def __init__(self, store: AuthStore) -> None:
        self._store = store

    def verify(self, username: str, credential_hash: str) -> str:
        """Return the ID of the identity matching both values exactly.

        Unknown usernames and wrong hashes fail identically.

        Raises:
            FailedToAuthenticate: If no identity matches, or on storage fault.
        """
        try:
            identity_id = self._store.find_identity_id(username, credential_hash)
        except AuthStoreError as e:
            logger.error("Identity lookup failed for user %r: %s", username, describe_error(e))
            raise FailedToAuthenticate() from e

        if identity_id is None:
            logger.info("Rejected credentials for user %r", username)
            raise FailedToAuthenticate()
        return identity_id

    def register(self, username: str, credential_hash: str) -> str:
        """Create a new identity and return its ID. No session is created.

        Raises:
            FailedToRegister: If the username is taken, or on storage fault.
        """
        try:
            identity = self._store.create_identity(username, credential_hash)
        except IdentityExistsError as e:
            logger.info("Registration refused, username %r already taken", username)
            raise FailedToRegister() from e
        except AuthStoreError as e:
            logger.error("Registration failed for user %r: %s", username, describe_error(e))
            raise FailedToRegister() from e

        logger.info("Registered user %r (id=%s)", username, identity.id)
        return identity.id
