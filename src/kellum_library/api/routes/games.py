"""Game catalog endpoints. Reads are public; writes need a live session."""

from fastapi import APIRouter, status

from kellum_library.api.dependencies import CatalogStoreDep, CurrentUserDep
from kellum_library.api.models import (
    APIResponse,
    DeleteAllResponse,
    GameCreate,
    GameResponse,
    GameUpdate,
    game_to_response,
)

router = APIRouter(prefix="/game", tags=["games"])


@router.post(
    "/new",
    response_model=APIResponse[GameResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_game(
    game: GameCreate, store: CatalogStoreDep, _user: CurrentUserDep
) -> APIResponse[GameResponse]:
    """Add a game to the catalog."""
    created = store.create_game(
        title=game.title,
        platform=game.platform,
        rating=game.rating,
        number_of_players=game.number_of_players,
    )
    return APIResponse(data=game_to_response(created))


@router.get("/all", response_model=APIResponse[list[GameResponse]])
def list_games(store: CatalogStoreDep) -> APIResponse[list[GameResponse]]:
    """List all games."""
    return APIResponse(data=[game_to_response(g) for g in store.list_games()])


@router.get("/{game_id}", response_model=APIResponse[GameResponse])
def get_game(game_id: str, store: CatalogStoreDep) -> APIResponse[GameResponse]:
    """Get a game by ID."""
    return APIResponse(data=game_to_response(store.get_game(game_id)))


@router.put("/update", response_model=APIResponse[GameResponse])
def update_game(
    game: GameUpdate, store: CatalogStoreDep, _user: CurrentUserDep
) -> APIResponse[GameResponse]:
    """Replace a game."""
    updated = store.update_game(
        game.id,
        title=game.title,
        platform=game.platform,
        rating=game.rating,
        number_of_players=game.number_of_players,
    )
    return APIResponse(data=game_to_response(updated))


# Registered before /remove/{game_id} so "all" is not taken as an ID
@router.delete("/remove/all", response_model=APIResponse[DeleteAllResponse])
def delete_all_games(
    store: CatalogStoreDep, _user: CurrentUserDep
) -> APIResponse[DeleteAllResponse]:
    """Delete every game."""
    return APIResponse(data=DeleteAllResponse(deleted=store.delete_all_games()))


@router.delete("/remove/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(game_id: str, store: CatalogStoreDep, _user: CurrentUserDep) -> None:
    """Delete a game."""
    store.delete_game(game_id)
