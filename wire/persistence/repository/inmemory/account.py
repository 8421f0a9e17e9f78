"""In-memory account repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from wire.domain.model.account import Account
from wire.domain.repository.account import (
    CONTACT_ADDRESS_CONSTRAINT,
    HANDLE_CONSTRAINT,
    PROVIDER_USER_ID_CONSTRAINT,
    AccountRepository,
)
from wire.domain.value import AccountId, ContactAddress, Handle


def _unique_violation(constraint: str, account: Account) -> IntegrityError:
    """Build the error PostgreSQL would raise, with the name on the driver error."""
    return IntegrityError(
        "INSERT INTO accounts",
        {
            "id": str(account.id),
            "contact_address": account.contact_address.root,
            "handle": account.handle.root,
        },
        Exception(f'duplicate key value violates unique constraint "{constraint}"'),
    )


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    Enforces the same unique constraints as the accounts table. `writes`
    counts successful create/save calls.
    """

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}
        self.writes = 0

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def find_by_contact_address(
        self, contact_address: ContactAddress
    ) -> Optional[Account]:
        """Find an account by contact address."""
        for account in self._accounts.values():
            if account.contact_address == contact_address:
                return account
        return None

    async def find_by_handle(self, handle: Handle) -> Optional[Account]:
        """Find an account by handle."""
        for account in self._accounts.values():
            if account.handle == handle:
                return account
        return None

    def _check_unique(self, account: Account) -> None:
        for other in self._accounts.values():
            if other.id == account.id:
                continue
            if other.contact_address == account.contact_address:
                raise _unique_violation(CONTACT_ADDRESS_CONSTRAINT, account)
            if other.handle == account.handle:
                raise _unique_violation(HANDLE_CONSTRAINT, account)
            if (
                account.provider_user_id is not None
                and other.provider_user_id == account.provider_user_id
            ):
                raise _unique_violation(PROVIDER_USER_ID_CONSTRAINT, account)

    async def create(self, account: Account) -> Account:
        """Insert a new account.

        Raises:
            IntegrityError: If the ID or a unique column is already taken
        """
        if account.id in self._accounts:
            raise _unique_violation("accounts_pkey", account)
        self._check_unique(account)
        self._accounts[account.id] = account
        self.writes += 1
        return account

    async def save(self, account: Account) -> Account:
        """Replace a stored account.

        Raises:
            IntegrityError: If another account holds one of its unique columns
        """
        self._check_unique(account)
        self._accounts[account.id] = account
        self.writes += 1
        return account

    def all(self) -> list[Account]:
        """All stored accounts, in insertion order."""
        return list(self._accounts.values())
