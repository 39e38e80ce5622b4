"""Pydantic models for REST API."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from kellum_library.catalog.models import (
    ESRBRating,
    MotionPictureFormat,
    MPAARating,
    PlatformType,
)

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Auth models


class Credentials(BaseModel):
    """Request model for login and registration."""

    username: str = Field(..., min_length=1, max_length=255)
    credential_hash: str = Field(..., min_length=1, max_length=512)


class AuthenticatedUserResponse(BaseModel):
    """Response model for a logged-in user."""

    username: str
    user_session: str


def authenticated_user_to_response(user: Any) -> AuthenticatedUserResponse:
    """Convert an AuthenticatedUser to AuthenticatedUserResponse."""
    return AuthenticatedUserResponse(username=user.username, user_session=user.session_id)


# Game models


class GameCreate(BaseModel):
    """Request model for creating a game."""

    title: str = Field(..., min_length=1, max_length=500)
    platform: PlatformType
    rating: ESRBRating
    number_of_players: int = Field(default=1, ge=0, le=255)


class GameUpdate(GameCreate):
    """Request model for replacing a game."""

    id: str = Field(..., min_length=1, max_length=36)


class GameResponse(BaseModel):
    """Response model for a game."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    platform: PlatformType
    rating: ESRBRating
    number_of_players: int


def game_to_response(game: Any) -> GameResponse:
    """Convert a Game model to GameResponse."""
    return GameResponse.model_validate(game)


# Movie models


class MovieCreate(BaseModel):
    """Request model for creating a movie."""

    title: str = Field(..., min_length=1, max_length=500)
    format: MotionPictureFormat
    rating: MPAARating


class MovieUpdate(MovieCreate):
    """Request model for replacing a movie."""

    id: str = Field(..., min_length=1, max_length=36)


class MovieResponse(BaseModel):
    """Response model for a movie."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    format: MotionPictureFormat
    rating: MPAARating


def movie_to_response(movie: Any) -> MovieResponse:
    """Convert a Movie model to MovieResponse."""
    return MovieResponse.model_validate(movie)


class DeleteAllResponse(BaseModel):
    """Response model for bulk deletes."""

    deleted: int
