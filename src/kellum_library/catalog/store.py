"""CatalogStore - CRUD operations for games and movies."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

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
from kellum_library.database import Database

logger = logging.getLogger(__name__)


class CatalogStore:
    """Main API for catalog operations.

    Provides CRUD operations for Games and Movies.
    """

    def __init__(self, db: Database) -> None:
        """Initialize the store on a shared database.

        Creates tables if they don't exist.

        Args:
            db: Database connection manager
        """
        self._db = db
        self._db.create_tables()

    # --- Game Operations ---

    def create_game(
        self,
        title: str,
        platform: PlatformType,
        rating: ESRBRating,
        number_of_players: int = 1,
    ) -> Game:
        """Create a new game.

        Args:
            title: Game title
            platform: Platform the game runs on
            rating: ESRB rating
            number_of_players: Maximum number of players

        Returns:
            Created Game object with generated ID

        Raises:
            CatalogError: On storage fault
        """
        session = self._db.get_session()
        try:
            game = Game(
                title=title,
                platform=platform,
                rating=rating,
                number_of_players=number_of_players,
            )
            session.add(game)
            session.commit()
            session.refresh(game)
            logger.info("Created game %s (%r)", game.id, game.title)
            return game
        except SQLAlchemyError as e:
            session.rollback()
            raise CatalogError("Failed to create game") from e
        finally:
            session.close()

    def get_game(self, game_id: str) -> Game:
        """Get game by ID.

        Raises:
            GameNotFoundError: If game doesn't exist
        """
        session = self._db.get_session()
        try:
            game = session.get(Game, game_id)
            if game is None:
                raise GameNotFoundError(f"Game with id '{game_id}' not found")
            return game
        except SQLAlchemyError as e:
            raise CatalogError("Failed to load game") from e
        finally:
            session.close()

    def list_games(self) -> list[Game]:
        """List all games, ordered by title."""
        session = self._db.get_session()
        try:
            stmt = select(Game).order_by(Game.title)
            return list(session.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            raise CatalogError("Failed to list games") from e
        finally:
            session.close()

    def update_game(
        self,
        game_id: str,
        title: str,
        platform: PlatformType,
        rating: ESRBRating,
        number_of_players: int,
    ) -> Game:
        """Replace every field of an existing game.

        Raises:
            GameNotFoundError: If game doesn't exist
            CatalogError: On storage fault
        """
        session = self._db.get_session()
        try:
            game = session.get(Game, game_id)
            if game is None:
                raise GameNotFoundError(f"Game with id '{game_id}' not found")

            game.title = title
            game.platform = parse_enum(PlatformType, platform).value
            game.rating = parse_enum(ESRBRating, rating).value
            game.number_of_players = number_of_players

            session.commit()
            session.refresh(game)
            return game
        except SQLAlchemyError as e:
            session.rollback()
            raise CatalogError("Failed to update game") from e
        finally:
            session.close()

    def delete_game(self, game_id: str) -> None:
        """Delete a game.

        Raises:
            GameNotFoundError: If game doesn't exist
        """
        session = self._db.get_session()
        try:
            game = session.get(Game, game_id)
            if game is None:
                raise GameNotFoundError(f"Game with id '{game_id}' not found")

            session.delete(game)
            session.commit()
            logger.info("Deleted game %s", game_id)
        except SQLAlchemyError as e:
            session.rollback()
            raise CatalogError("Failed to delete game") from e
        finally:
            session.close()

    def delete_all_games(self) -> int:
        """Delete every game.

        Returns:
            Number of games deleted
        """
        session = self._db.get_session()
        try:
            result = session.execute(delete(Game))
            session.commit()
            logger.warning("Deleted all games (%d rows)", result.rowcount)
            return result.rowcount
        except SQLAlchemyError as e:
            session.rollback()
            raise CatalogError("Failed to delete games") from e
        finally:
            session.close()

    # --- Movie Operations ---

    def create_movie(
        self,
        title: str,
        format: MotionPictureFormat,
        rating: MPAARating,
    ) -> Movie:
        """Create a new movie.

        Args:
            title: Movie title
            format: Physical media format
            rating: MPAA rating

        Returns:
            Created Movie object with generated ID

        Raises:
            CatalogError: On storage fault
        """
        session = self._db.get_session()
        try:
            movie = Movie(title=title, format=format, rating=rating)
            session.add(movie)
            session.commit()
            session.refresh(movie)
            logger.info("Created movie %s (%r)", movie.id, movie.title)
            return movie
        except SQLAlchemyError as e:
            session.rollback()
            raise CatalogError("Failed to create movie") from e
        finally:
            session.close()

    def get_movie(self, movie_id: str) -> Movie:
        """Get movie by ID.

        Raises:
            MovieNotFoundError: If movie doesn't exist
        """
        session = self._db.get_session()
        try:
            movie = session.get(Movie, movie_id)
            if movie is None:
                raise MovieNotFoundError(f"Movie with id '{movie_id}' not found")
            return movie
        except SQLAlchemyError as e:
            raise CatalogError("Failed to load movie") from e
        finally:
            session.close()

    def list_movies(self) -> list[Movie]:
        """List all movies, ordered by title."""
        session = self._db.get_session()
        try:
            stmt = select(Movie).order_by(Movie.title)
            return list(session.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            raise CatalogError("Failed to list movies") from e
        finally:
            session.close()

    def update_movie(
        self,
        movie_id: str,
        title: str,
        format: MotionPictureFormat,
        rating: MPAARating,
    ) -> Movie:
        """Replace every field of an existing movie.

        Raises:
            MovieNotFoundError: If movie doesn't exist
            CatalogError: On storage fault
        """
        session = self._db.get_session()
        try:
            movie = session.get(Movie, movie_id)
            if movie is None:
                raise MovieNotFoundError(f"Movie with id '{movie_id}' not found")

            movie.title = title
            movie.format = parse_enum(MotionPictureFormat, format).value
            movie.rating = parse_enum(MPAARating, rating).value

            session.commit()
            session.refresh(movie)
            return movie
        except SQLAlchemyError as e:
            session.rollback()
            raise CatalogError("Failed to update movie") from e
        finally:
            session.close()

    def delete_movie(self, movie_id: str) -> None:
        """Delete a movie.

        Raises:
            MovieNotFoundError: If movie doesn't exist
        """
        session = self._db.get_session()
        try:
            movie = session.get(Movie, movie_id)
            if movie is None:
                raise MovieNotFoundError(f"Movie with id '{movie_id}' not found")

            session.delete(movie)
            session.commit()
            logger.info("Deleted movie %s", movie_id)
        except SQLAlchemyError as e:
            session.rollback()
            raise CatalogError("Failed to delete movie") from e
        finally:
            session.close()

    def delete_all_movies(self) -> int:
        """Delete every movie.

        Returns:
            Number of movies deleted
        """
        session = self._db.get_session()
        try:
            result = session.execute(delete(Movie))
            session.commit()
            logger.warning("Deleted all movies (%d rows)", result.rowcount)
            return result.rowcount
        except SQLAlchemyError as e:
            session.rollback()
            raise CatalogError("Failed to delete movies") from e
        finally:
            session.close()
