"""Unit tests for AuthStore identity operations."""

import pytest

from kellum_library.auth_store import (
    AuthStore,
    IdentityExistsError,
    IdentityNotFoundError,
)


@pytest.mark.unit
class TestCreateIdentity:
    """Tests for create_identity."""

    def test_create_identity(self, auth_store: AuthStore) -> None:
        """Creates an identity with a generated ID."""
        identity = auth_store.create_identity("alice", "h1")

        assert identity.id is not None
        assert len(identity.id) == 36
        assert identity.username == "alice"
        assert identity.credential_hash == "h1"
        assert identity.created_at is not None

    def test_create_identity_duplicate_username_raises(self, auth_store: AuthStore) -> None:
        """IdentityExistsError on duplicate username, and no second row."""
        auth_store.create_identity("alice", "h1")

        with pytest.raises(IdentityExistsError) as exc_info:
            auth_store.create_identity("alice", "h2")

        assert "alice" in str(exc_info.value)
        assert auth_store.count_identities("alice") == 1

    def test_usernames_are_case_sensitive(self, auth_store: AuthStore) -> None:
        """Usernames differing only in case are distinct identities."""
        auth_store.create_identity("alice", "h1")
        auth_store.create_identity("Alice", "h1")

        assert auth_store.count_identities() == 2


@pytest.mark.unit
class TestFindIdentityId:
    """Tests for find_identity_id."""

    def test_matches_exact_pair(self, auth_store: AuthStore) -> None:
        """Returns the ID when username and hash both match."""
        identity = auth_store.create_identity("alice", "h1")

        assert auth_store.find_identity_id("alice", "h1") == identity.id

    @pytest.mark.parametrize(
        ("username", "credential_hash"),
        [
            ("alice", "wrong"),
            ("bob", "h1"),
            ("ALICE", "h1"),
            ("alice", "H1"),
            ("alice ", "h1"),
        ],
    )
    def test_no_match_returns_none(
        self, auth_store: AuthStore, username: str, credential_hash: str
    ) -> None:
        """Any mismatch in either field yields None."""
        auth_store.create_identity("alice", "h1")

        assert auth_store.find_identity_id(username, credential_hash) is None


@pytest.mark.unit
class TestGetIdentity:
    """Tests for get_identity."""

    def test_get_identity_exists(self, auth_store: AuthStore) -> None:
        """Returns the stored identity."""
        created = auth_store.create_identity("alice", "h1")

        assert auth_store.get_identity(created.id).username == "alice"

    def test_get_identity_not_found_raises(self, auth_store: AuthStore) -> None:
        """IdentityNotFoundError for unknown ID."""
        with pytest.raises(IdentityNotFoundError) as exc_info:
            auth_store.get_identity("nonexistent-id")

        assert "nonexistent-id" in str(exc_info.value)

    def test_repr_hides_credential_hash(self, auth_store: AuthStore) -> None:
        """The credential hash never shows up in repr."""
        identity = auth_store.create_identity("alice", "super-secret-hash")

        assert "super-secret-hash" not in repr(identity)
        assert "alice" in repr(identity)
