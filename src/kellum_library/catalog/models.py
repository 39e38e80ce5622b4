"""SQLAlchemy models and enumerations for catalog entries."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, TypeVar

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from kellum_library.database import Base, generate_uuid

E = TypeVar("E", bound=StrEnum)


class PlatformType(StrEnum):
    """Hardware a game runs on."""

    PLAYSTATION1 = "Playstation1"
    PLAYSTATION2 = "Playstation2"
    PLAYSTATION3 = "Playstation3"
    PLAYSTATION4 = "Playstation4"
    PLAYSTATION5 = "Playstation5"
    NES = "NES"
    SNES = "SNES"
    N64 = "N64"
    GAMECUBE = "GameCube"
    WII = "Wii"
    WIIU = "WiiU"
    SWITCH = "Switch"
    SWITCH2 = "Switch2"
    NINTENDO_DS = "NintendoDS"
    NINTENDO_3DS = "Nintendo3DS"
    COMPUTER = "Computer"


class ESRBRating(StrEnum):
    """ESRB content rating."""

    EVERYONE = "Everyone"
    EVERYONE10 = "Everyone10"
    TEEN = "Teen"
    MATURE = "Mature"
    ADULT_ONLY = "AdultOnly"


class MPAARating(StrEnum):
    """MPAA film rating."""

    GENERAL_AUDIENCES = "GeneralAudiences"
    PARENTAL_GUIDANCE = "ParentalGuidance"
    PARENTS_STRONGLY_CAUTIONED = "ParentsStronglyCautioned"
    RESTRICTED = "Restricted"
    ADULTS_ONLY = "AdultsOnly"


class MotionPictureFormat(StrEnum):
    """Physical media a movie is held on."""

    BLU_RAY = "BluRay"
    ULTRA_HD = "UltraHD"
    DVD = "DVD"
    VHS = "VHS"


def parse_enum(enum_cls: type[E], value: str) -> E:
    """Parse an exact enum string, e.g. parse_enum(PlatformType, "NES").

    Raises:
        ValueError: If value is not one of the enum's strings.
    """
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(
            f"Unknown {enum_cls.__name__} '{value}' (expected one of: {allowed})"
        ) from e


class Game(Base):
    """Game model - a catalog entry for a video game."""

    __tablename__ = "games"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    platform: Mapped[str] = mapped_column(String(20), nullable=False)
    rating: Mapped[str] = mapped_column(String(20), nullable=False)
    number_of_players: Mapped[int] = mapped_column(Integer, nullable=False)

    def __init__(
        self,
        title: str,
        platform: PlatformType | str,
        rating: ESRBRating | str,
        number_of_players: int = 1,
        id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.title = title
        self.platform = parse_enum(PlatformType, platform).value
        self.rating = parse_enum(ESRBRating, rating).value
        self.number_of_players = number_of_players

    @property
    def platform_type(self) -> PlatformType:
        """Get platform as PlatformType enum."""
        return PlatformType(self.platform)

    @property
    def esrb_rating(self) -> ESRBRating:
        """Get rating as ESRBRating enum."""
        return ESRBRating(self.rating)

    def __repr__(self) -> str:
        return f"<Game(id={self.id!r}, title={self.title!r}, platform={self.platform!r})>"


class Movie(Base):
    """Movie model - a catalog entry for a film."""

    __tablename__ = "movies"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    format: Mapped[str] = mapped_column(String(20), nullable=False)
    rating: Mapped[str] = mapped_column(String(30), nullable=False)

    def __init__(
        self,
        title: str,
        format: MotionPictureFormat | str,
        rating: MPAARating | str,
        id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.title = title
        self.format = parse_enum(MotionPictureFormat, format).value
        self.rating = parse_enum(MPAARating, rating).value

    @property
    def picture_format(self) -> MotionPictureFormat:
        """Get format as MotionPictureFormat enum."""
        return MotionPictureFormat(self.format)

    @property
    def mpaa_rating(self) -> MPAARating:
        """Get rating as MPAARating enum."""
        return MPAARating(self.rating)

    def __repr__(self) -> str:
        return f"<Movie(id={self.id!r}, title={self.title!r}, format={self.format!r})>"
