"""
Integration tests for auth API endpoints.
Uses TestClient with mocked use cases (no real DB).
Note: Runs full app lifespan (slower). Use: pytest tests/unit/ for fast unit-only runs.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from storefront.application.dto.auth_dto import AuthResponse
from storefront.application.dto.user_dto import UserResponse
from storefront.application.exceptions import (
    AuthenticationError,
    ConflictError,
    PersistenceError,
    ValidationError,
)
from storefront.application.use_cases.auth.login_user import LoginUserUseCase
from storefront.application.use_cases.auth.register_user import RegisterUserUseCase


@pytest.fixture
def mock_register_use_case():
    uc = AsyncMock(spec=RegisterUserUseCase)
    return uc


@pytest.fixture
def mock_login_use_case():
    uc = AsyncMock(spec=LoginUserUseCase)
    return uc


@pytest.fixture
def mock_container(mock_register_use_case, mock_login_use_case):
    container = MagicMock()
    container.get.side_effect = lambda cls: {
        RegisterUserUseCase: mock_register_use_case,
        LoginUserUseCase: mock_login_use_case,
    }.get(cls, None)
    return container


@pytest.fixture
def client(mock_env, mock_container):
    """Create test client with mocked container."""
    from storefront.main import app

    with patch("storefront.api.v1.auth_controller.get_container", return_value=mock_container):
        with TestClient(app) as c:
            yield c


def auth_response(message):
    return AuthResponse(
        message=message,
        token="token_alice_u-1_abc",
        user=UserResponse(id="u-1", username="alice", email="alice@example.com"),
    )


class TestAuthAPI:
    """Tests for /api/signup and /api/login"""

    def test_signup_success(self, client, mock_register_use_case):
        mock_register_use_case.execute.return_value = auth_response("User created successfully")
        response = client.post(
            "/api/signup",
            json={"username": "alice", "email": "alice@example.com", "password": "secret1"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["token"] == "token_alice_u-1_abc"
        assert data["user"] == {"id": "u-1", "username": "alice", "email": "alice@example.com"}

    def test_signup_validation_error_returns_400(self, client, mock_register_use_case):
        mock_register_use_case.execute.side_effect = ValidationError(
            "Username, email, and password are required"
        )
        response = client.post("/api/signup", json={"username": "alice"})
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Username, email, and password are required",
        }

    def test_signup_duplicate_returns_409(self, client, mock_register_use_case):
        mock_register_use_case.execute.side_effect = ConflictError("Email already exists")
        response = client.post(
            "/api/signup",
            json={"username": "bob", "email": "alice@example.com", "password": "secret1"},
        )
        assert response.status_code == 409
        assert response.json()["message"] == "Email already exists"

    def test_signup_store_failure_returns_500(self, client, mock_register_use_case):
        mock_register_use_case.execute.side_effect = PersistenceError(
            "Failed to create user. Please try again."
        )
        response = client.post(
            "/api/signup",
            json={"username": "bob", "email": "bob@example.com", "password": "secret1"},
        )
        assert response.status_code == 500
        assert response.json()["success"] is False

    def test_malformed_body_returns_envelope(self, client):
        response = client.post(
            "/api/signup",
            content="not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_login_success(self, client, mock_login_use_case):
        mock_login_use_case.execute.return_value = auth_response("Login successful")
        response = client.post("/api/login", json={"username": "alice", "password": "secret1"})
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert "profile" not in data["user"]

    def test_login_invalid_returns_401(self, client, mock_login_use_case):
        mock_login_use_case.execute.side_effect = AuthenticationError("Invalid username or password")
        response = client.post("/api/login", json={"username": "alice", "password": "wrongpass"})
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid username or password"}
