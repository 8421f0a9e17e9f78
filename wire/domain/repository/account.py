"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.exc import IntegrityError

from wire.domain.model.account import Account
from wire.domain.value import AccountId, ContactAddress, Handle

# Unique constraint names shared by every implementation
CONTACT_ADDRESS_CONSTRAINT = "uq_accounts_contact_address"
HANDLE_CONSTRAINT = "uq_accounts_handle"
PROVIDER_USER_ID_CONSTRAINT = "uq_accounts_provider_user_id"


def violated_constraint(error: IntegrityError) -> str:
    """Name of the constraint behind an IntegrityError.

    Only the driver error is inspected. The statement parameters carried
    by the wrapper hold user-supplied values and must not decide the match.
    """
    cause = getattr(error.orig, "__cause__", None)
    constraint_name = getattr(cause, "constraint_name", None)
    if constraint_name:
        return constraint_name
    return str(error.orig)


class AccountRepository(ABC):
    """Repository for the Account aggregate.

    Implementations must enforce uniqueness of `contact_address`, `handle`
    and `provider_user_id` and report violations by raising
    `sqlalchemy.exc.IntegrityError` whose driver error (`orig`) names the
    violated constraint.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_contact_address(
        self, contact_address: ContactAddress
    ) -> Optional[Account]:
        """Find an account by its (normalised) contact address.

        Args:
            contact_address: The contact address to match exactly

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[Account]:
        """Find an account by its handle.

        Args:
            handle: The handle to match exactly

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Insert a new account in a single atomic write.

        Args:
            account: The account to insert

        Returns:
            The stored account

        Raises:
            IntegrityError: If a uniqueness constraint is violated
        """
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Update an existing account.

        Args:
            account: The account snapshot to store

        Returns:
            The stored account

        Raises:
            IntegrityError: If a uniqueness constraint is violated
        """
        pass
