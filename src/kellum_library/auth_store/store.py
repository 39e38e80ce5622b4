"""AuthStore - Persistence API for identities and sessions."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from kellum_library.auth_store.exceptions import (
    AuthStoreError,
    IdentityExistsError,
    IdentityNotFoundError,
    SessionNotFoundError,
)
from kellum_library.auth_store.models import Identity, LiveSession, UserSession
from kellum_library.database import Database

logger = logging.getLogger(__name__)


def _as_naive_utc(moment: datetime) -> datetime:
    """Normalize a datetime to the naive UTC form stored in SQLite."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(UTC).replace(tzinfo=None)


class AuthStore:
    """Row-level access to identities and sessions.

    Every operation runs in its own SQLAlchemy session. Storage faults are
    raised as AuthStoreError so callers never see SQLAlchemy exceptions.

    The auth flow uses create_identity, find_identity_id, create_session,
    find_live_session and delete_session. get_identity, count_identities,
    get_session and list_sessions are the admin and test surface: they read
    rows regardless of expiry and are not reachable over HTTP.
    """

    def __init__(self, db: Database) -> None:
        """Initialize the store on a shared database.

        Creates tables if they don't exist.

        Args:
            db: Database connection manager
        """
        self._db = db
        self._db.create_tables()

    # --- Identity Operations ---

    def create_identity(self, username: str, credential_hash: str) -> Identity:
        """Create a new identity.

        Args:
            username: Unique, human-chosen name
            credential_hash: Opaque pre-hashed credential

        Returns:
            Created Identity with generated ID

        Raises:
            IdentityExistsError: If the username is already taken
            AuthStoreError: On any other storage fault
        """
        session = self._db.get_session()
        try:
            identity = Identity(username=username, credential_hash=credential_hash)
            session.add(identity)
            session.commit()
            session.refresh(identity)
            return identity
        except IntegrityError as e:
            session.rollback()
            raise IdentityExistsError(f"Identity with username '{username}' already exists") from e
        except SQLAlchemyError as e:
            session.rollback()
            raise AuthStoreError("Failed to create identity") from e
        finally:
            session.close()

    def find_identity_id(self, username: str, credential_hash: str) -> str | None:
        """Find the identity matching both username and credential hash exactly.

        Args:
            username: Username to match
            credential_hash: Credential hash to match

        Returns:
            The identity ID, or None if no row matches

        Raises:
            AuthStoreError: On storage fault
        """
        session = self._db.get_session()
        try:
            stmt = select(Identity.id).where(
                Identity.username == username,
                Identity.credential_hash == credential_hash,
            )
            return session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise AuthStoreError("Failed to look up identity") from e
        finally:
            session.close()

    def get_identity(self, identity_id: str) -> Identity:
        """Get identity by ID.

        Raises:
            IdentityNotFoundError: If identity doesn't exist
            AuthStoreError: On storage fault
        """
        session = self._db.get_session()
        try:
            identity = session.get(Identity, identity_id)
            if identity is None:
                raise IdentityNotFoundError(f"Identity with id '{identity_id}' not found")
            return identity
        except SQLAlchemyError as e:
            raise AuthStoreError("Failed to load identity") from e
        finally:
            session.close()

    def count_identities(self, username: str | None = None) -> int:
        """Count identities, optionally only those with the given username."""
        session = self._db.get_session()
        try:
            stmt = select(func.count(Identity.id))
            if username is not None:
                stmt = stmt.where(Identity.username == username)
            return session.execute(stmt).scalar_one()
        except SQLAlchemyError as e:
            raise AuthStoreError("Failed to count identities") from e
        finally:
            session.close()

    # --- Session Operations ---

    def create_session(self, user_id: str, expires_at: datetime) -> UserSession:
        """Persist a new session for an identity.

        Args:
            user_id: Owning identity ID
            expires_at: Absolute expiry instant

        Returns:
            Created UserSession with generated ID

        Raises:
            IdentityNotFoundError: If the identity doesn't exist
            AuthStoreError: On any other storage fault
        """
        session = self._db.get_session()
        try:
            if session.get(Identity, user_id) is None:
                raise IdentityNotFoundError(f"Identity with id '{user_id}' not found")

            user_session = UserSession(user_id=user_id, expires_at=_as_naive_utc(expires_at))
            session.add(user_session)
            session.commit()
            session.refresh(user_session)
            return user_session
        except IntegrityError as e:
            session.rollback()
            raise IdentityNotFoundError(f"Identity with id '{user_id}' not found") from e
        except SQLAlchemyError as e:
            session.rollback()
            raise AuthStoreError("Failed to create session") from e
        finally:
            session.close()

    def get_session(self, session_id: str) -> UserSession:
        """Get a session by ID regardless of expiry.

        Raises:
            SessionNotFoundError: If the session doesn't exist
            AuthStoreError: On storage fault
        """
        session = self._db.get_session()
        try:
            user_session = session.get(UserSession, session_id)
            if user_session is None:
                raise SessionNotFoundError(f"Session with id '{session_id}' not found")
            return user_session
        except SQLAlchemyError as e:
            raise AuthStoreError("Failed to load session") from e
        finally:
            session.close()

    def find_live_session(self, session_id: str, now: datetime) -> LiveSession | None:
        """Fetch a session joined to its identity, only if it is unexpired at `now`.

        The expiry comparison is part of the SELECT itself, so the row fetch
        and the check against `now` happen in one statement. A session whose
        expiry equals `now` counts as expired.

        Args:
            session_id: Session ID to look up
            now: The instant to evaluate expiry against

        Returns:
            The LiveSession, or None if the session is absent or expired

        Raises:
            AuthStoreError: On storage fault
        """
        session = self._db.get_session()
        try:
            stmt = (
                select(
                    UserSession.id,
                    UserSession.user_id,
                    Identity.username,
                    UserSession.expires_at,
                )
                .join(Identity, UserSession.user_id == Identity.id)
                .where(
                    UserSession.id == session_id,
                    UserSession.expires_at > _as_naive_utc(now),
                )
            )
            row = session.execute(stmt).one_or_none()
            if row is None:
                return None
            return LiveSession(
                session_id=row.id,
                user_id=row.user_id,
                username=row.username,
                expires_at=row.expires_at,
            )
        except SQLAlchemyError as e:
            raise AuthStoreError("Failed to look up session") from e
        finally:
            session.close()

    def list_sessions(self, user_id: str) -> list[UserSession]:
        """List all sessions of an identity, live or expired, newest expiry first."""
        session = self._db.get_session()
        try:
            stmt = (
                select(UserSession)
                .where(UserSession.user_id == user_id)
                .order_by(UserSession.expires_at.desc())
            )
            return list(session.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            raise AuthStoreError("Failed to list sessions") from e
        finally:
            session.close()

    def delete_session(self, session_id: str) -> None:
        """Delete a session.

        Raises:
            SessionNotFoundError: If the session doesn't exist
            AuthStoreError: On storage fault
        """
        session = self._db.get_session()
        try:
            user_session = session.get(UserSession, session_id)
            if user_session is None:
                raise SessionNotFoundError(f"Session with id '{session_id}' not found")

            session.delete(user_session)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise AuthStoreError("Failed to delete session") from e
        finally:
            session.close()
