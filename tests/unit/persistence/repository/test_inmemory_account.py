"""Unit tests for InMemoryAccountRepository uniqueness."""

import pytest
from sqlalchemy.exc import IntegrityError

from tests.factories import make_account
from wire.domain.repository.account import (
    CONTACT_ADDRESS_CONSTRAINT,
    HANDLE_CONSTRAINT,
    PROVIDER_USER_ID_CONSTRAINT,
)


class TestInMemoryAccountRepository:
    @pytest.mark.asyncio
    async def test_duplicate_address_names_constraint(self, account_repository):
        await account_repository.create(make_account("a@x.com", "A"))

        with pytest.raises(IntegrityError, match=CONTACT_ADDRESS_CONSTRAINT):
            await account_repository.create(make_account("a@x.com", "B"))

    @pytest.mark.asyncio
    async def test_duplicate_handle_names_constraint(self, account_repository):
        await account_repository.create(make_account("a@x.com", "A"))

        with pytest.raises(IntegrityError, match=HANDLE_CONSTRAINT):
            await account_repository.create(make_account("b@x.com", "A"))

    @pytest.mark.asyncio
    async def test_duplicate_provider_id_names_constraint(self, account_repository):
        await account_repository.create(
            make_account("a@x.com", "A", provider_user_id="p1")
        )

        with pytest.raises(IntegrityError, match=PROVIDER_USER_ID_CONSTRAINT):
            await account_repository.create(
                make_account("b@x.com", "B", provider_user_id="p1")
            )

    @pytest.mark.asyncio
    async def test_missing_provider_ids_do_not_collide(self, account_repository):
        await account_repository.create(make_account("a@x.com", "A"))
        await account_repository.create(make_account("b@x.com", "B"))

        assert len(account_repository.all()) == 2
        assert account_repository.writes == 2

    @pytest.mark.asyncio
    async def test_save_replaces_account(self, account_repository):
        account = await account_repository.create(make_account("a@x.com", "A"))

        await account_repository.save(account.model_copy(update={"avatar_url": "u"}))

        stored = await account_repository.find_by_id(account.id)
        assert stored.avatar_url == "u"
