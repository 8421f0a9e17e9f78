"""Account matcher."""

from typing import Optional

import logfire

from wire.domain.model import Account
from wire.domain.repository import AccountRepository
from wire.domain.value import ContactAddress

from .base import Service


class AccountMatcher(Service):
    """Looks up the local account owning a contact address."""

    def __init__(self, account_repository: AccountRepository) -> None:
        """Initialize account matcher.

        Args:
            account_repository: Account repository
        """
        self.account_repository = account_repository

    async def match(self, contact_address: ContactAddress) -> Optional[Account]:
        """Find the account for a contact address.

        "No match" is a normal outcome, not an error.

        Args:
            contact_address: Normalised contact address

        Returns:
            The matching account, or None
        """
        with logfire.span(
            "account_matcher.match", contact_address=contact_address.root
        ):
            account = await self.account_repository.find_by_contact_address(
                contact_address
            )
            if account:
                logfire.info(
                    "Account matched",
                    contact_address=contact_address.root,
                    account_id=str(account.id),
                )
            else:
                logfire.info("No account matched", contact_address=contact_address.root)
            return account
