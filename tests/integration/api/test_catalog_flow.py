"""Integration tests for the full HTTP flow."""

import tempfile
from datetime import timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from kellum_library.api.app import create_app
from kellum_library.auth import SESSION_HEADER


@pytest.fixture
def temp_db_path() -> str:
    """Create a temporary database path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        return f.name


@pytest.fixture
def client(temp_db_path: str, clock):
    """Create a test client with temporary database."""
    app = create_app(temp_db_path, clock=clock)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
    # Cleanup
    Path(temp_db_path).unlink(missing_ok=True)
    Path(f"{temp_db_path}-wal").unlink(missing_ok=True)
    Path(f"{temp_db_path}-shm").unlink(missing_ok=True)


def register(client: TestClient, username: str = "alice") -> dict[str, str]:
    response = client.post(
        "/auth/register", json={"username": username, "credential_hash": "h1"}
    )
    assert response.status_code == 200
    return {SESSION_HEADER: response.json()["data"]["user_session"]}


@pytest.mark.integration
class TestGameCrudFullFlow:
    """Integration test for full game CRUD flow."""

    def test_game_crud_full_flow(self, client: TestClient) -> None:
        """Register -> Create -> Read -> Update -> Delete flow."""
        headers = register(client)

        # 1. Create
        create_response = client.post(
            "/game/new",
            json={"title": "Tetris", "platform": "NES", "rating": "Everyone"},
            headers=headers,
        )
        assert create_response.status_code == 201
        game_id = create_response.json()["data"]["id"]
        assert create_response.json()["data"]["number_of_players"] == 1

        # 2. Read
        get_response = client.get(f"/game/{game_id}")
        assert get_response.status_code == 200
        assert get_response.json()["data"]["title"] == "Tetris"

        # 3. Update
        update_response = client.put(
            "/game/update",
            json={
                "id": game_id,
                "title": "Tetris DX",
                "platform": "GameCube",
                "rating": "Everyone",
                "number_of_players": 2,
            },
            headers=headers,
        )
        assert update_response.status_code == 200
        assert client.get(f"/game/{game_id}").json()["data"]["platform"] == "GameCube"

        # 4. Delete
        assert client.delete(f"/game/remove/{game_id}", headers=headers).status_code == 204
        assert client.get(f"/game/{game_id}").status_code == 404


@pytest.mark.integration
class TestMovieCrudFullFlow:
    """Integration test for full movie CRUD flow."""

    def test_movie_crud_full_flow(self, client: TestClient) -> None:
        """Create two movies, list them, delete them all."""
        headers = register(client)

        for title in ("Vertigo", "Alien"):
            response = client.post(
                "/movie/new",
                json={"title": title, "format": "DVD", "rating": "ParentalGuidance"},
                headers=headers,
            )
            assert response.status_code == 201

        titles = [m["title"] for m in client.get("/movie/all").json()["data"]]
        assert titles == ["Alien", "Vertigo"]

        delete_response = client.delete("/movie/remove/all", headers=headers)
        assert delete_response.json()["data"] == {"deleted": 2}
        assert client.get("/movie/all").json()["data"] == []


@pytest.mark.integration
class TestSessionLifecycle:
    """Sessions across register, login, expiry and logout."""

    def test_session_expires_after_two_hours(self, client: TestClient, clock) -> None:
        """Writes stop being accepted once the session expires."""
        headers = register(client)
        game = {"title": "Halo", "platform": "Computer", "rating": "Mature"}

        clock.advance(timedelta(hours=1, minutes=59))
        assert client.post("/game/new", json=game, headers=headers).status_code == 201

        clock.advance(timedelta(minutes=1, seconds=1))
        response = client.post("/game/new", json=game, headers=headers)
        assert response.status_code == 401
        assert response.json() == {"data": None, "error": "Invalid session token"}

        # Reads stay public
        assert len(client.get("/game/all").json()["data"]) == 1

    def test_login_after_expiry_gives_new_session(self, client: TestClient, clock) -> None:
        """A fresh login works after the old session expired."""
        old_headers = register(client)
        clock.advance(timedelta(hours=3))

        response = client.post("/auth/login", json={"username": "alice", "credential_hash": "h1"})
        assert response.status_code == 200
        new_headers = {SESSION_HEADER: response.json()["data"]["user_session"]}

        assert client.get("/auth/session", headers=old_headers).status_code == 401
        assert client.get("/auth/session", headers=new_headers).status_code == 200

    def test_logout_only_ends_that_session(self, client: TestClient) -> None:
        """Other sessions of the same user stay live."""
        first = register(client)
        second_response = client.post(
            "/auth/login", json={"username": "alice", "credential_hash": "h1"}
        )
        second = {SESSION_HEADER: second_response.json()["data"]["user_session"]}

        assert client.post("/auth/logout", headers=first).status_code == 204

        assert client.get("/auth/session", headers=first).status_code == 401
        assert client.get("/auth/session", headers=second).json()["data"]["username"] == "alice"

    def test_duplicate_registration_is_412(self, client: TestClient) -> None:
        """Second registration of a name fails; the first login still works."""
        register(client)

        response = client.post(
            "/auth/register", json={"username": "alice", "credential_hash": "other"}
        )
        assert response.status_code == 412

        login = client.post("/auth/login", json={"username": "alice", "credential_hash": "h1"})
        assert login.status_code == 200
