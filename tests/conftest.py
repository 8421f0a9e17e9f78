"""Test configuration and fixtures."""

import pytest

from wire.persistence.repository.inmemory import InMemoryAccountRepository


@pytest.fixture
def account_repository() -> InMemoryAccountRepository:
    """Empty in-memory account store."""
    return InMemoryAccountRepository()
