"""
Integration tests for user and product API endpoints.
Uses TestClient with mocked use cases (no real DB).
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from storefront.api.v1.dependencies import get_current_user
from storefront.application.dto.product_dto import ProductResponse
from storefront.application.use_cases.product.get_product import GetProductUseCase
from storefront.application.use_cases.product.list_products import ListProductsUseCase
from storefront.application.use_cases.user.get_user import GetUserUseCase
from storefront.application.use_cases.user.set_address import SetAddressUseCase
from storefront.core.errors import ForbiddenError, NotFoundError
from tests.factories import make_product, make_user

USER_ID = "64b000000000000000000001"
NEW_ADDRESS = "221B Baker Street, London NW1 6XE"


@pytest.fixture
def mock_use_cases():
    return {
        GetUserUseCase: AsyncMock(spec=GetUserUseCase),
        SetAddressUseCase: AsyncMock(spec=SetAddressUseCase),
        ListProductsUseCase: AsyncMock(spec=ListProductsUseCase),
        GetProductUseCase: AsyncMock(spec=GetProductUseCase),
    }


@pytest.fixture
def mock_container(mock_use_cases):
    container = MagicMock()
    container.get.side_effect = lambda cls: mock_use_cases.get(cls, None)
    return container


@pytest.fixture
def current_user():
    return make_user(user_id=USER_ID)


@pytest.fixture
def client(mock_container, current_user):
    """Create test client with mocked container and an authenticated user."""
    from storefront.main import app

    app.dependency_overrides[get_current_user] = lambda: current_user
    with patch("storefront.api.v1.user_controller.get_container", return_value=mock_container), \
            patch("storefront.api.v1.product_controller.get_container", return_value=mock_container), \
            patch("storefront.main.ensure_indexes", new=AsyncMock()):
        with TestClient(app) as c:
            yield c
    app.dependency_overrides.clear()


class TestUserAPI:
    """Tests for /v1/users endpoints"""

    def test_get_own_user(self, client, mock_use_cases, current_user):
        mock_use_cases[GetUserUseCase].execute.return_value = current_user

        response = client.get(f"/v1/users/{USER_ID}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == USER_ID
        assert data["email"] == "buyer@example.com"
        assert "password" not in data
        mock_use_cases[GetUserUseCase].execute.assert_awaited_once_with(
            user_id=USER_ID, current_user=current_user
        )

    def test_get_address_only(self, client, mock_use_cases):
        mock_use_cases[GetUserUseCase].execute.return_value = make_user(user_id=USER_ID, address=NEW_ADDRESS)

        response = client.get(f"/v1/users/{USER_ID}?q=address")

        assert response.status_code == 200
        assert response.json() == {"address": NEW_ADDRESS}

    def test_unsupported_projection_returns_400(self, client, mock_use_cases):
        response = client.get(f"/v1/users/{USER_ID}?q=wallet")
        assert response.status_code == 400
        mock_use_cases[GetUserUseCase].execute.assert_not_called()

    def test_other_user_returns_403(self, client, mock_use_cases):
        mock_use_cases[GetUserUseCase].execute.side_effect = ForbiddenError(
            "User not authorized to access this resource"
        )

        response = client.get("/v1/users/64b0000000000000000000ff")

        assert response.status_code == 403
        assert response.json()["message"] == "User not authorized to access this resource"

    def test_set_address(self, client, mock_use_cases, current_user):
        mock_use_cases[SetAddressUseCase].execute.return_value = NEW_ADDRESS

        response = client.put(f"/v1/users/{USER_ID}", json={"address": NEW_ADDRESS})

        assert response.status_code == 200
        assert response.json() == {"address": NEW_ADDRESS}
        mock_use_cases[SetAddressUseCase].execute.assert_awaited_once_with(
            user_id=USER_ID, address=NEW_ADDRESS, current_user=current_user
        )

    def test_short_address_returns_400(self, client, mock_use_cases):
        response = client.put(f"/v1/users/{USER_ID}", json={"address": "Too short"})
        assert response.status_code == 400
        mock_use_cases[SetAddressUseCase].execute.assert_not_called()


class TestProductAPI:
    """Tests for /v1/products endpoints"""

    def test_list_products(self, client, mock_use_cases):
        mock_use_cases[ListProductsUseCase].execute.return_value = [
            ProductResponse.from_product(make_product("64a000000000000000000001")),
            ProductResponse.from_product(make_product("64a000000000000000000002", name="Chair")),
        ]

        response = client.get("/v1/products")

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Desk Lamp", "Chair"]

    def test_get_product(self, client, mock_use_cases):
        mock_use_cases[GetProductUseCase].execute.return_value = ProductResponse.from_product(make_product())

        response = client.get("/v1/products/64a000000000000000000001")

        assert response.status_code == 200
        assert response.json()["cost"] == 100

    def test_unknown_product_returns_404(self, client, mock_use_cases):
        mock_use_cases[GetProductUseCase].execute.side_effect = NotFoundError("Product not found")

        response = client.get("/v1/products/64a0000000000000000000ff")

        assert response.status_code == 404
        assert response.json() == {"code": 404, "message": "Product not found"}
