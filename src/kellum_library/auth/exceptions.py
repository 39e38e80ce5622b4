"""Error taxonomy for authentication and request authorization.

Each error carries a fixed, short message and the HTTP status the transport
layer renders it with. Messages never say which part of a credential was wrong.
"""

from fastapi import status


class AuthError(Exception):
    """Base exception for auth errors."""

    status_code: int = status.HTTP_401_UNAUTHORIZED
    message: str = "Authentication error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class FailedToRegister(AuthError):  # noqa: N818
    """Identity creation failed, or a storage fault occurred."""

    status_code = status.HTTP_412_PRECONDITION_FAILED
    message = "Failed to register user"


class FailedToAuthenticate(AuthError):  # noqa: N818
    """Credentials did not match, or the session could not be created."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Failed to authenticate user"


class InvalidSessionToken(AuthError):  # noqa: N818
    """Session is absent or expired."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid session token"


class GenerallyForbidden(AuthError):  # noqa: N818
    """No session credential was supplied."""

    status_code = status.HTTP_403_FORBIDDEN
    message = "User is just not allowed to do this"


class SuspiciousRequest(AuthError):  # noqa: N818
    """Request integrity check failed."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "There might be an attacker in the middle"
