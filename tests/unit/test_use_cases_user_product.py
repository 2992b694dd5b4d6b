"""
Unit tests for user use cases (GetUser, SetAddress) and product use cases.
"""
from unittest.mock import AsyncMock

import pytest
from storefront.core.errors import ForbiddenError, NotFoundError
from storefront.application.use_cases.user.get_user import GetUserUseCase
from storefront.application.use_cases.user.set_address import SetAddressUseCase
from storefront.application.use_cases.product.list_products import ListProductsUseCase
from storefront.application.use_cases.product.get_product import GetProductUseCase
from tests.factories import make_product, make_user

OWNER_ID = "64b000000000000000000001"
OTHER_ID = "64b000000000000000000002"


class TestGetUserUseCase:

    @pytest.mark.asyncio
    async def test_returns_own_record(self):
        repo = AsyncMock()
        user = make_user(user_id=OWNER_ID)
        repo.find_by_id.return_value = user
        result = await GetUserUseCase(repo).execute(OWNER_ID, current_user=user)
        assert result is user

    @pytest.mark.asyncio
    async def test_other_user_is_forbidden(self):
        repo = AsyncMock()
        with pytest.raises(ForbiddenError):
            await GetUserUseCase(repo).execute(OTHER_ID, current_user=make_user(user_id=OWNER_ID))
        repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_user_raises(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError, match="User not found"):
            await GetUserUseCase(repo).execute(OWNER_ID, current_user=make_user(user_id=OWNER_ID))


class TestSetAddressUseCase:

    @pytest.mark.asyncio
    async def test_sets_and_saves_address(self):
        repo = AsyncMock()
        user = make_user(user_id=OWNER_ID)
        repo.find_by_id.return_value = user
        repo.save.side_effect = lambda saved: saved

        address = await SetAddressUseCase(repo).execute(
            OWNER_ID, "221B Baker Street, London", current_user=user
        )

        assert address == "221B Baker Street, London"
        saved = repo.save.call_args.args[0]
        assert saved.address == "221B Baker Street, London"
        assert saved.password_modified is False

    @pytest.mark.asyncio
    async def test_other_user_is_forbidden(self):
        repo = AsyncMock()
        with pytest.raises(ForbiddenError):
            await SetAddressUseCase(repo).execute(
                OTHER_ID, "221B Baker Street, London", current_user=make_user(user_id=OWNER_ID)
            )
        repo.save.assert_not_called()


class TestProductUseCases:

    @pytest.mark.asyncio
    async def test_list_products(self):
        repo = AsyncMock()
        repo.list_all.return_value = [
            make_product("64a000000000000000000001", name="Lamp"),
            make_product("64a000000000000000000002", name="Desk"),
        ]
        result = await ListProductsUseCase(repo).execute()
        assert [p.name for p in result] == ["Lamp", "Desk"]

    @pytest.mark.asyncio
    async def test_get_product(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = make_product(cost=42)
        result = await GetProductUseCase(repo).execute("64a000000000000000000001")
        assert result.cost == 42

    @pytest.mark.asyncio
    async def test_get_missing_product_raises(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError, match="Product not found"):
            await GetProductUseCase(repo).execute("64a0000000000000000000ff")
