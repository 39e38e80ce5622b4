"""Catalog - games and movies."""

from kellum_library.catalog.exceptions import (
    CatalogError,
    GameNotFoundError,
    MovieNotFoundError,
)
from kellum_library.catalog.models import (
    ESRBRating,
    Game,
    MotionPictureFormat,
    Movie,
    MPAARating,
    PlatformType,
    parse_enum,
)
from kellum_library.catalog.store import CatalogStore

__all__ = [
    "CatalogError",
    "CatalogStore",
    "ESRBRating",
    "Game",
    "GameNotFoundError",
    "MPAARating",
    "MotionPictureFormat",
    "Movie",
    "MovieNotFoundError",
    "PlatformType",
    "parse_enum",
]
