"""Account provisioner."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from wire.domain.error import (
    AccountStoreError,
    DuplicateContactAddressError,
    DuplicateHandleError,
)
from wire.domain.model import Account
from wire.domain.repository import AccountRepository
from wire.domain.repository.account import (
    CONTACT_ADDRESS_CONSTRAINT,
    HANDLE_CONSTRAINT,
    violated_constraint,
)
from wire.domain.value import AccessLevel, AccountId, Handle, ProviderProfile

from .base import Service


class AccountProvisioner(Service):
    """Creates the local account for a first-time provider sign-in."""

    def __init__(self, account_repository: AccountRepository) -> None:
        """Initialize account provisioner.

        Args:
            account_repository: Account repository
        """
        self.account_repository = account_repository

    async def provision(self, profile: ProviderProfile, handle: Handle) -> Account:
        """Create exactly one ordinary account.

        Uniqueness violations are reported, not retried: a retry would have
        to go back through the matcher.

        Args:
            profile: Validated provider profile
            handle: Allocated handle

        Returns:
            The created account

        Raises:
            DuplicateContactAddressError: If the address was claimed concurrently
            DuplicateHandleError: If the handle was claimed concurrently
            AccountStoreError: If any other constraint is violated
        """
        with logfire.span(
            "account_provisioner.provision",
            contact_address=profile.contact_address.root,
            handle=handle.root,
        ):
            now = datetime.now(timezone.utc)
            account = Account(
                id=AccountId(uuid4()),
                contact_address=profile.contact_address,
                handle=handle,
                provider_user_id=profile.provider_user_id,
                avatar_url=profile.avatar_url,
                access_level=AccessLevel.USER,
                created_at=now,
                updated_at=now,
            )

            try:
                created = await self.account_repository.create(account)
            except IntegrityError as e:
                detail = violated_constraint(e)
                if CONTACT_ADDRESS_CONSTRAINT in detail:
                    logfire.warn(
                        "Contact address claimed concurrently",
                        contact_address=profile.contact_address.root,
                    )
                    raise DuplicateContactAddressError(
                        profile.contact_address.root
                    ) from e
                if HANDLE_CONSTRAINT in detail:
                    logfire.warn("Handle claimed concurrently", handle=handle.root)
                    raise DuplicateHandleError(handle.root) from e
                logfire.error("Account insert rejected", error=detail)
                raise AccountStoreError(f"Account insert rejected: {detail}") from e

            logfire.info(
                "Account provisioned",
                account_id=str(created.id),
                handle=created.handle.root,
                provider=profile.provider.value,
            )
            return created
