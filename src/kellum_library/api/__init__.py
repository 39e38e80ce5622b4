"""REST API for Kellum Library."""

from kellum_library.api.app import app, create_app
from kellum_library.api.models import (
    APIResponse,
    AuthenticatedUserResponse,
    Credentials,
    GameResponse,
    MovieResponse,
)

__all__ = [
    "APIResponse",
    "AuthenticatedUserResponse",
    "Credentials",
    "GameResponse",
    "MovieResponse",
    "app",
    "create_app",
]
