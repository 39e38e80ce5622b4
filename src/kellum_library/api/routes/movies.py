"""Movie catalog endpoints. Reads are public; writes need a live session."""

from fastapi import APIRouter, status

from kellum_library.api.dependencies import CatalogStoreDep, CurrentUserDep
from kellum_library.api.models import (
    APIResponse,
    DeleteAllResponse,
    MovieCreate,
    MovieResponse,
    MovieUpdate,
    movie_to_response,
)

router = APIRouter(prefix="/movie", tags=["movies"])


@router.post(
    "/new",
    response_model=APIResponse[MovieResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_movie(
    movie: MovieCreate, store: CatalogStoreDep, _user: CurrentUserDep
) -> APIResponse[MovieResponse]:
    """Add a movie to the catalog."""
    created = store.create_movie(title=movie.title, format=movie.format, rating=movie.rating)
    return APIResponse(data=movie_to_response(created))


@router.get("/all", response_model=APIResponse[list[MovieResponse]])
def list_movies(store: CatalogStoreDep) -> APIResponse[list[MovieResponse]]:
    """List all movies."""
    return APIResponse(data=[movie_to_response(m) for m in store.list_movies()])


@router.get("/{movie_id}", response_model=APIResponse[MovieResponse])
def get_movie(movie_id: str, store: CatalogStoreDep) -> APIResponse[MovieResponse]:
    """Get a movie by ID."""
    return APIResponse(data=movie_to_response(store.get_movie(movie_id)))


@router.put("/update", response_model=APIResponse[MovieResponse])
def update_movie(
    movie: MovieUpdate, store: CatalogStoreDep, _user: CurrentUserDep
) -> APIResponse[MovieResponse]:
    """Replace a movie."""
    updated = store.update_movie(
        movie.id, title=movie.title, format=movie.format, rating=movie.rating
    )
    return APIResponse(data=movie_to_response(updated))


@router.delete("/remove/all", response_model=APIResponse[DeleteAllResponse])
def delete_all_movies(
    store: CatalogStoreDep, _user: CurrentUserDep
) -> APIResponse[DeleteAllResponse]:
    """Delete every movie."""
    return APIResponse(data=DeleteAllResponse(deleted=store.delete_all_movies()))


@router.delete("/remove/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(movie_id: str, store: CatalogStoreDep, _user: CurrentUserDep) -> None:
    """Delete a movie."""
    store.delete_movie(movie_id)
