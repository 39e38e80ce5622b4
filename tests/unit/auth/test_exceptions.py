"""Unit tests for the auth error taxonomy."""

import pytest

from kellum_library.auth import (
    AuthError,
    FailedToAuthenticate,
    FailedToRegister,
    GenerallyForbidden,
    InvalidSessionToken,
    SuspiciousRequest,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("error_cls", "status_code", "message"),
    [
        (FailedToRegister, 412, "Failed to register user"),
        (FailedToAuthenticate, 401, "Failed to authenticate user"),
        (InvalidSessionToken, 401, "Invalid session token"),
        (GenerallyForbidden, 403, "User is just not allowed to do this"),
        (SuspiciousRequest, 401, "There might be an attacker in the middle"),
    ],
)
def test_status_and_message(error_cls: type[AuthError], status_code: int, message: str) -> None:
    """Each error kind has a fixed status code and message."""
    error = error_cls()

    assert isinstance(error, AuthError)
    assert error.status_code == status_code
    assert error.message == message
    assert str(error) == message
