"""
Tests for the users demonstration endpoints.

Exercises the full stack through FastAPI's TestClient and checks
that every failure is translated into the standard error body.
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from error_demo.core.config import settings
from error_demo.main import app

client = TestClient(app)

SEEDED = {
    1: ("Pepe", "Gonzalez"),
    2: ("Maria", "Perez"),
    3: ("Juan", "Castro"),
    4: ("Manuel", "Chinchilla"),
}


def _assert_error_body(response, status: int, error: str) -> dict:
    body = response.json()
    assert response.status_code == status
    assert body["status"] == status
    assert body["error"] == error
    timestamp = datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))
    assert timestamp.tzinfo is not None
    assert set(body) == {"timestamp", "error", "message", "status"}
    return body


class TestDivisionEndpoint:
    """Tests for GET /index."""

    @pytest.mark.parametrize("path", ["/app/index", "/index"])
    def test_division_by_zero(self, path: str) -> None:
        """The endpoint always fails with a division-by-zero error."""
        body = _assert_error_body(client.get(path), 500, "Division by zero")
        assert "zero" in body["message"]


class TestNumberEndpoint:
    """Tests for GET /number."""

    @pytest.mark.parametrize("path", ["/app/number", "/number"])
    def test_number_format_not_valid(self, path: str) -> None:
        """The endpoint always fails parsing its integer literal."""
        body = _assert_error_body(client.get(path), 500, "Number Format not valid")
        assert "'1s'" in body["message"]


class TestShowEndpoint:
    """Tests for GET /show/{id}."""

    @pytest.mark.parametrize("user_id", sorted(SEEDED))
    def test_seeded_user_found(self, user_id: int) -> None:
        """Every seeded user is returned with camelCase name fields."""
        response = client.get(f"/app/show/{user_id}")
        assert response.status_code == 200
        first_name, last_name = SEEDED[user_id]
        assert response.json() == {
            "id": user_id,
            "firstName": first_name,
            "lastName": last_name,
        }

    def test_root_alias(self) -> None:
        """The endpoint is also served without the /app prefix."""
        response = client.get("/show/2")
        assert response.status_code == 200
        assert response.json()["firstName"] == "Maria"

    @pytest.mark.parametrize("user_id", [0, 5, 99, -1])
    def test_unknown_user_returns_500(self, user_id: int) -> None:
        """Unknown ids produce the not-found body with status 500."""
        body = _assert_error_body(
            client.get(f"/show/{user_id}"), 500, "User or role not found"
        )
        assert body["message"] == "Error: User does not exists"

    def test_non_numeric_id(self) -> None:
        """A path id that cannot be coerced to int is a number format error."""
        _assert_error_body(client.get("/app/show/abc"), 500, "Number Format not valid")


class TestListUsersEndpoint:
    """Tests for GET /users."""

    def test_lists_seed_in_order(self) -> None:
        """All four seeded users are listed in id order."""
        response = client.get("/app/users")
        assert response.status_code == 200
        assert [u["id"] for u in response.json()] == [1, 2, 3, 4]
        assert response.json()[3]["lastName"] == "Chinchilla"


class TestUnknownRoutes:
    """Tests for routes that are not registered."""

    @pytest.mark.parametrize("path", ["/nope", "/app", "/app/missing", "/app/show"])
    def test_unregistered_route_returns_404(self, path: str) -> None:
        """Unregistered routes return the Api Rest Not Found body."""
        body = _assert_error_body(client.get(path), 404, "Api Rest Not Found")
        assert path in body["message"]

    def test_wrong_method_keeps_its_status(self) -> None:
        """A method mismatch is reported with its own status and phrase."""
        response = client.post("/app/index")
        _assert_error_body(response, 405, "Method Not Allowed")
        assert "GET" in response.headers["allow"]


class TestErrorMessageExposure:
    """Tests for the expose_error_messages setting."""

    def test_messages_hidden_when_disabled(self, monkeypatch) -> None:
        """With exposure disabled the body keeps its shape but no message."""
        monkeypatch.setattr(settings, "expose_error_messages", False)
        body = _assert_error_body(client.get("/app/show/42"), 500, "User or role not found")
        assert body["message"] is None


class TestRequestIndependence:
    """Failures never affect subsequent requests."""

    def test_success_after_failures(self) -> None:
        """A lookup still succeeds after every failing endpoint was hit."""
        for path in ("/app/index", "/app/number", "/app/show/9", "/nowhere"):
            client.get(path)
        assert client.get("/app/show/3").json()["firstName"] == "Juan"
