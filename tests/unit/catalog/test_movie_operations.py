"""Unit tests for CatalogStore movie operations."""

import pytest

from kellum_library.catalog import (
    CatalogStore,
    MotionPictureFormat,
    MovieNotFoundError,
    MPAARating,
)


@pytest.mark.unit
class TestMovieOperations:
    """Tests for movie CRUD."""

    def test_create_and_get_movie(self, catalog_store: CatalogStore) -> None:
        """Created movies can be fetched by ID."""
        movie = catalog_store.create_movie(
            "Alien", MotionPictureFormat.BLU_RAY, MPAARating.RESTRICTED
        )

        retrieved = catalog_store.get_movie(movie.id)

        assert retrieved.title == "Alien"
        assert retrieved.picture_format is MotionPictureFormat.BLU_RAY
        assert retrieved.mpaa_rating is MPAARating.RESTRICTED

    def test_get_movie_not_found_raises(self, catalog_store: CatalogStore) -> None:
        """MovieNotFoundError for unknown ID."""
        with pytest.raises(MovieNotFoundError):
            catalog_store.get_movie("nonexistent-id")

    def test_list_movies_ordered_by_title(self, catalog_store: CatalogStore) -> None:
        """Movies come back ordered by title."""
        catalog_store.create_movie("Up", MotionPictureFormat.DVD, MPAARating.PARENTAL_GUIDANCE)
        catalog_store.create_movie("Alien", MotionPictureFormat.VHS, MPAARating.RESTRICTED)

        assert [m.title for m in catalog_store.list_movies()] == ["Alien", "Up"]

    def test_update_movie(self, catalog_store: CatalogStore) -> None:
        """Every field is replaced."""
        movie = catalog_store.create_movie("Alien", MotionPictureFormat.VHS, MPAARating.RESTRICTED)

        updated = catalog_store.update_movie(
            movie.id, "Aliens", MotionPictureFormat.ULTRA_HD, MPAARating.RESTRICTED
        )

        assert updated.title == "Aliens"
        assert updated.picture_format is MotionPictureFormat.ULTRA_HD

    def test_update_movie_not_found_raises(self, catalog_store: CatalogStore) -> None:
        """MovieNotFoundError for unknown ID."""
        with pytest.raises(MovieNotFoundError):
            catalog_store.update_movie(
                "nonexistent-id", "X", MotionPictureFormat.DVD, MPAARating.RESTRICTED
            )

    def test_update_movie_unknown_rating_message(self, catalog_store: CatalogStore) -> None:
        """Update rejects unknown strings with a message listing valid ratings."""
        movie = catalog_store.create_movie("Alien", MotionPictureFormat.VHS, MPAARating.RESTRICTED)

        with pytest.raises(ValueError, match=r"Unknown MPAARating 'X' \(expected one of: "):
            catalog_store.update_movie(movie.id, "Alien", MotionPictureFormat.VHS, "X")

        assert catalog_store.get_movie(movie.id).rating == "Restricted"

    def test_delete_movie(self, catalog_store: CatalogStore) -> None:
        """Deleted movies are gone; unknown IDs raise."""
        movie = catalog_store.create_movie("Alien", MotionPictureFormat.VHS, MPAARating.RESTRICTED)

        catalog_store.delete_movie(movie.id)

        with pytest.raises(MovieNotFoundError):
            catalog_store.delete_movie(movie.id)

    def test_delete_all_movies(self, catalog_store: CatalogStore) -> None:
        """All movies are removed and the count returned."""
        catalog_store.create_movie("Alien", MotionPictureFormat.VHS, MPAARating.RESTRICTED)

        assert catalog_store.delete_all_movies() == 1
        assert catalog_store.list_movies() == []
