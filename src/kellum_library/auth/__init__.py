"""Session-based authentication and request authorization."""

from kellum_library.auth.authorizer import SESSION_HEADER, RequestAuthorizer
from kellum_library.auth.clock import SESSION_DURATION, Clock, SystemClock
from kellum_library.auth.exceptions import (
    AuthError,
    FailedToAuthenticate,
    FailedToRegister,
    GenerallyForbidden,
    InvalidSessionToken,
    SuspiciousRequest,
)
from kellum_library.auth.models import AuthenticatedUser
from kellum_library.auth.sessions import SessionManager
from kellum_library.auth.verifier import CredentialVerifier

__all__ = [
    "SESSION_DURATION",
    "SESSION_HEADER",
    "AuthError",
    "AuthenticatedUser",
    "Clock",
    "CredentialVerifier",
    "FailedToAuthenticate",
    "FailedToRegister",
    "GenerallyForbidden",
    "InvalidSessionToken",
    "RequestAuthorizer",
    "SessionManager",
    "SuspiciousRequest",
    "SystemClock",
]
