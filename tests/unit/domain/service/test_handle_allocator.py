"""Unit tests for HandleAllocator."""

import pytest

from tests.factories import make_account
from wire.domain.service import HandleAllocator
from wire.domain.service.handle_allocator import normalize_base_handle
from wire.domain.value import AuthProvider, ContactAddress, ProviderProfile


def _profile(display_name, contact_address="new@x.com"):
    return ProviderProfile(
        provider=AuthProvider.GOOGLE,
        provider_user_id="p1",
        contact_address=ContactAddress(contact_address),
        display_name=display_name,
    )


class TestNormalizeBaseHandle:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Sokha Chan", "Sokha_Chan"),
            ("  Dara   Kim  ", "Dara_Kim"),
            ("O'Brien (RazeWire)", "OBrien_RazeWire"),
            ("jean-luc.p", "jean-luc.p"),
            ("សុខា ចាន់", "សុខា_ចាន់"),
            ("!!!", ""),
        ],
    )
    def test_normalises(self, raw, expected):
        assert normalize_base_handle(raw) == expected

    def test_caps_length(self):
        assert len(normalize_base_handle("x" * 80)) == 50


class TestDeriveBaseHandle:
    def setup_method(self):
        self.allocator = HandleAllocator(account_repository=None)

    def test_uses_display_name(self):
        assert self.allocator.derive_base_handle(_profile("Bob")) == "Bob"

    def test_falls_back_to_local_part(self):
        profile = _profile(None, contact_address="dara.kim@x.com")
        assert self.allocator.derive_base_handle(profile) == "dara.kim"

    def test_falls_back_to_local_part_when_name_normalises_empty(self):
        profile = _profile("???", contact_address="dara@x.com")
        assert self.allocator.derive_base_handle(profile) == "dara"

    def test_defaults_to_user(self):
        profile = _profile("???", contact_address="+++@x.com")
        assert self.allocator.derive_base_handle(profile) == "user"


class TestAllocate:
    @pytest.mark.asyncio
    async def test_free_base_is_used_as_is(self, account_repository):
        handle = await HandleAllocator(account_repository).allocate("Bob")
        assert handle.root == "Bob"

    @pytest.mark.asyncio
    async def test_taken_base_gets_first_free_suffix(self, account_repository):
        await account_repository.create(make_account("bob@x.com", "Bob"))
        await account_repository.create(make_account("bob1@x.com", "Bob_1"))

        handle = await HandleAllocator(account_repository).allocate("Bob")

        assert handle.root == "Bob_2"

    @pytest.mark.asyncio
    async def test_long_base_is_truncated_to_fit_suffix(self, account_repository):
        base = "b" * 50
        await account_repository.create(make_account("b@x.com", base))

        handle = await HandleAllocator(account_repository).allocate(base)

        assert handle.root == "b" * 48 + "_1"
        assert len(handle.root) == 50

    @pytest.mark.asyncio
    async def test_allocation_does_not_write(self, account_repository):
        await HandleAllocator(account_repository).allocate("Bob")
        assert account_repository.writes == 0
