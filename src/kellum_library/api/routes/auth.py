"""Login, registration and session endpoints."""

from fastapi import APIRouter, status

from kellum_library.api.dependencies import CurrentUserDep, SessionManagerDep
from kellum_library.api.models import (
    APIResponse,
    AuthenticatedUserResponse,
    Credentials,
    authenticated_user_to_response,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=APIResponse[AuthenticatedUserResponse])
def login(
    credentials: Credentials, sessions: SessionManagerDep
) -> APIResponse[AuthenticatedUserResponse]:
    """Log in with a username and credential hash."""
    user = sessions.login(credentials.username, credentials.credential_hash)
    return APIResponse(data=authenticated_user_to_response(user))


@router.post("/register", response_model=APIResponse[AuthenticatedUserResponse])
def register(
    credentials: Credentials, sessions: SessionManagerDep
) -> APIResponse[AuthenticatedUserResponse]:
    """Register a new user and log them in."""
    user = sessions.register_and_login(credentials.username, credentials.credential_hash)
    return APIResponse(data=authenticated_user_to_response(user))


@router.get("/session", response_model=APIResponse[AuthenticatedUserResponse])
def current_session(user: CurrentUserDep) -> APIResponse[AuthenticatedUserResponse]:
    """Return the user behind the presented session."""
    return APIResponse(data=authenticated_user_to_response(user))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(user: CurrentUserDep, sessions: SessionManagerDep) -> None:
    """End the presented session."""
    sessions.revoke(user.session_id)
