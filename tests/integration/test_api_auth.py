"""
Integration tests for auth API endpoints.
Uses TestClient with mocked use cases (no real DB).
Note: Runs full app lifespan (slower). Use: pytest tests/unit/ for fast unit-only runs.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from storefront.application.dto.auth_dto import AuthResponse, TokenResponse
from storefront.application.dto.user_dto import UserResponse
from storefront.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from storefront.application.use_cases.auth.login_user import LoginUserUseCase
from storefront.application.use_cases.auth.register_user import RegisterUserUseCase
from storefront.core.errors import BadRequestError, UnauthorizedError


def _auth_response(email="test@example.com"):
    return AuthResponse(
        user=UserResponse(
            id="64b000000000000000000001",
            name="Test User",
            email=email,
            wallet_money=500,
            address="ADDRESS_NOT_SET",
        ),
        tokens=TokenResponse(access_token="jwt.token.here"),
    )


@pytest.fixture
def mock_register_use_case():
    return AsyncMock(spec=RegisterUserUseCase)


@pytest.fixture
def mock_login_use_case():
    return AsyncMock(spec=LoginUserUseCase)


@pytest.fixture
def mock_get_current_user_use_case():
    return AsyncMock(spec=GetCurrentUserUseCase)


@pytest.fixture
def mock_container(mock_register_use_case, mock_login_use_case, mock_get_current_user_use_case):
    container = MagicMock()
    container.get.side_effect = lambda cls: {
        RegisterUserUseCase: mock_register_use_case,
        LoginUserUseCase: mock_login_use_case,
        GetCurrentUserUseCase: mock_get_current_user_use_case,
    }.get(cls, None)
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container."""
    from storefront.main import app

    with patch("storefront.api.v1.auth_controller.get_container", return_value=mock_container), \
            patch("storefront.api.v1.dependencies.get_container", return_value=mock_container), \
            patch("storefront.main.ensure_indexes", new=AsyncMock()):
        with TestClient(app) as c:
            yield c


class TestAuthAPI:
    """Tests for /v1/auth endpoints"""

    def test_register_success(self, client, mock_register_use_case):
        mock_register_use_case.execute.return_value = _auth_response()

        response = client.post(
            "/v1/auth/register",
            json={"name": "Test User", "email": "test@example.com", "password": "password123"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["user"]["email"] == "test@example.com"
        assert data["user"]["wallet_money"] == 500
        assert "password" not in data["user"]
        assert data["tokens"]["access_token"] == "jwt.token.here"
        assert data["tokens"]["token_type"] == "bearer"

    def test_register_duplicate_returns_400(self, client, mock_register_use_case):
        mock_register_use_case.execute.side_effect = BadRequestError("Email already taken")

        response = client.post(
            "/v1/auth/register",
            json={"name": "Test", "email": "existing@example.com", "password": "password123"},
        )

        assert response.status_code == 400
        assert response.json() == {"code": 400, "message": "Email already taken"}

    def test_register_short_password_returns_400(self, client, mock_register_use_case):
        response = client.post(
            "/v1/auth/register",
            json={"name": "Test", "email": "short@example.com", "password": "abc1"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == 400
        assert any(detail["field"].endswith("password") for detail in body["details"])
        mock_register_use_case.execute.assert_not_called()

    def test_register_invalid_email_returns_400(self, client, mock_register_use_case):
        response = client.post(
            "/v1/auth/register",
            json={"name": "Test", "email": "not-an-email", "password": "password123"},
        )
        assert response.status_code == 400
        mock_register_use_case.execute.assert_not_called()

    def test_login_success(self, client, mock_login_use_case):
        mock_login_use_case.execute.return_value = _auth_response()

        response = client.post(
            "/v1/auth/login",
            json={"email": "test@example.com", "password": "validpass123"},
        )

        assert response.status_code == 200
        assert response.json()["tokens"]["access_token"] == "jwt.token.here"

    def test_login_invalid_returns_401(self, client, mock_login_use_case):
        mock_login_use_case.execute.side_effect = UnauthorizedError("Incorrect email or password")

        response = client.post(
            "/v1/auth/login",
            json={"email": "test@example.com", "password": "wrongpass123"},
        )

        assert response.status_code == 401
        assert response.json() == {"code": 401, "message": "Incorrect email or password"}


class TestBearerAuthentication:
    """The bearer dependency, exercised through a protected route"""

    def test_invalid_token_returns_401(self, client, mock_get_current_user_use_case):
        mock_get_current_user_use_case.execute.side_effect = UnauthorizedError("Please authenticate")

        response = client.get(
            "/v1/users/64b000000000000000000001",
            headers={"Authorization": "Bearer not.a.jwt"},
        )

        assert response.status_code == 401
        assert response.json() == {"code": 401, "message": "Please authenticate"}
        mock_get_current_user_use_case.execute.assert_awaited_once_with("not.a.jwt")


class TestGlobalHandlers:

    def test_unknown_route_keeps_error_shape(self, client):
        response = client.get("/v1/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"code": 404, "message": "Not Found"}

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
