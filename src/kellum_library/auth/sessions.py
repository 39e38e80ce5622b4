"""Session issuance, validation and logout."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kellum_library.auth.clock import Clock, SystemClock
from kellum_library.auth.exceptions import (
    FailedToAuthenticate,
    FailedToRegister,
    InvalidSessionToken,
)
from kellum_library.auth.models import AuthenticatedUser
from kellum_library.auth_store import AuthStoreError, SessionNotFoundError
from kellum_library.logging import describe_error, mask_token

if TYPE_CHECKING:
    from kellum_library.auth.verifier import CredentialVerifier
    from kellum_library.auth_store import AuthStore

logger = logging.getLogger(__name__)


class SessionManager:
    """Stateless orchestrator over the credential verifier and the auth store.

    Sessions are never extended: validate only observes, and a new expiry
    only comes from issuing a new session. Every validate re-reads the store.
    """

    def __init__(
        self,
        store: AuthStore,
        verifier: CredentialVerifier,
        clock: Clock | None = None,
    ) -> None:
        """Initialize the SessionManager.

        Args:
            store: AuthStore holding identities and sessions.
            verifier: CredentialVerifier used by login and registration.
            clock: Time source. Defaults to the system clock.
        """
        self._store = store
        self._verifier = verifier
        self._clock = clock if clock is not None else SystemClock()

    def issue(self, identity_id: str, username: str) -> AuthenticatedUser:
        """Create a new session for an identity.

        Args:
            identity_id: The owning identity's ID.
            username: The identity's username, echoed into the returned view.

        Returns:
            AuthenticatedUser for the new session.

        Raises:
            FailedToAuthenticate: If the session could not be persisted.
        """
        expires_at = self._clock.expiry_from(self._clock.now())
        try:
            user_session = self._store.create_session(identity_id, expires_at)
        except AuthStoreError as e:
            logger.error("Could not issue session for user %r: %s", username, describe_error(e))
            raise FailedToAuthenticate() from e

        logger.info(
            "Issued session %s for user %r (expires %s)",
            mask_token(user_session.id),
            username,
            user_session.expires_at.isoformat(),
        )
        return AuthenticatedUser(username=username, session_id=user_session.id)

    def validate(self, session_id: str) -> AuthenticatedUser:
        """Resolve a live session.

        Absent and expired sessions fail the same way.

        Raises:
            InvalidSessionToken: If the session is absent or expired.
            FailedToRegister: On storage fault.
        """
        try:
            live = self._store.find_live_session(session_id, self._clock.now())
        except AuthStoreError as e:
            logger.error("Session lookup failed: %s", describe_error(e))
            raise FailedToRegister() from e

        if live is None:
            logger.debug("Session %s is absent or expired", mask_token(session_id))
            raise InvalidSessionToken()
        return AuthenticatedUser(username=live.username, session_id=live.session_id)

    def login(self, username: str, credential_hash: str) -> AuthenticatedUser:
        """Verify credentials and issue a fresh session.

        Raises:
            FailedToAuthenticate: On bad credentials or session creation failure.
        """
        identity_id = self._verifier.verify(username, credential_hash)
        return self.issue(identity_id, username)

    def register_and_login(self, username: str, credential_hash: str) -> AuthenticatedUser:
        """Register a new identity, then issue its first session.

        Raises:
            FailedToRegister: If registration fails.
            FailedToAuthenticate: If the session could not be created.
        """
        identity_id = self._verifier.register(username, credential_hash)
        return self.issue(identity_id, username)

    def revoke(self, session_id: str) -> None:
        """Delete a session (logout).

        Raises:
            InvalidSessionToken: If the session doesn't exist.
            FailedToRegister: On storage fault.
        """
        try:
            self._store.delete_session(session_id)
        except SessionNotFoundError as e:
            raise InvalidSessionToken() from e
        except AuthStoreError as e:
            logger.error("Could not revoke session: %s", describe_error(e))
            raise FailedToRegister() from e

        logger.info("Revoked session %s", mask_token(session_id))
