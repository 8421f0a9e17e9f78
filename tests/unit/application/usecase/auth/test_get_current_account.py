"""Unit tests for GetCurrentAccountUseCase."""

import pytest

from tests.factories import make_account
from tests.harness import create_env_fixture
from wire.application.usecase.auth.get_current_account import (
    GetCurrentAccountRequest,
    GetCurrentAccountUseCase,
)
from wire.domain.error import NotFoundError
from wire.domain.repository import AccountRepository
from wire.domain.service import JWTService
from wire.domain.value import AccessLevel
from wire.util.jwt import JWTError

unit_env = create_env_fixture()


class TestGetCurrentAccountUseCase:
    @pytest.mark.asyncio
    async def test_returns_account_for_valid_token(self, unit_env):
        repository = await unit_env.get(AccountRepository)
        jwt_service = await unit_env.get(JWTService)
        use_case = await unit_env.get(GetCurrentAccountUseCase)
        account = await repository.create(make_account("dara@x.com", "Dara"))

        response = await use_case.execute(
            GetCurrentAccountRequest(token=jwt_service.create_token(account))
        )

        assert response.account_id == str(account.id)
        assert response.contact_address == "dara@x.com"
        assert response.handle.root == "Dara"

    @pytest.mark.asyncio
    async def test_access_level_is_read_from_store(self, unit_env):
        repository = await unit_env.get(AccountRepository)
        jwt_service = await unit_env.get(JWTService)
        use_case = await unit_env.get(GetCurrentAccountUseCase)
        account = await repository.create(make_account("dara@x.com", "Dara"))
        token = jwt_service.create_token(account)
        await repository.save(account.model_copy(update={"access_level": AccessLevel.ADMIN}))

        response = await use_case.execute(GetCurrentAccountRequest(token=token))

        assert response.access_level == AccessLevel.ADMIN

    @pytest.mark.asyncio
    async def test_invalid_token_raises(self, unit_env):
        use_case = await unit_env.get(GetCurrentAccountUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentAccountRequest(token="not-a-jwt"))

    @pytest.mark.asyncio
    async def test_deleted_account_raises(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        use_case = await unit_env.get(GetCurrentAccountUseCase)
        token = jwt_service.create_token(make_account())

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCurrentAccountRequest(token=token))
