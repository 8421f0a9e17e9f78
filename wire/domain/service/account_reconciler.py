"""Account reconciler."""

from datetime import datetime, timezone
from typing import Any

import logfire

from wire.domain.model import Account
from wire.domain.repository import AccountRepository
from wire.domain.value import ProviderProfile

from .base import Service


class AccountReconciler(Service):
    """Backfills provider attributes into a matched account."""

    def __init__(self, account_repository: AccountRepository) -> None:
        """Initialize account reconciler.

        Args:
            account_repository: Account repository
        """
        self.account_repository = account_repository

    async def reconcile(self, account: Account, profile: ProviderProfile) -> Account:
        """Merge provider attributes into an existing account.

        Only fills fields that are currently empty, so applying it twice
        stores the same state as applying it once. Nothing is written when
        nothing changes.

        Args:
            account: Account matched by contact address
            profile: Validated provider profile

        Returns:
            The account, updated if any field was filled in
        """
        with logfire.span(
            "account_reconciler.reconcile",
            account_id=str(account.id),
            provider=profile.provider.value,
        ):
            updates: dict[str, Any] = {}
            if not account.provider_user_id:
                updates["provider_user_id"] = profile.provider_user_id
            if not account.avatar_url and profile.avatar_url:
                updates["avatar_url"] = profile.avatar_url

            if not updates:
                logfire.info("Account already reconciled", account_id=str(account.id))
                return account

            updated = account.model_copy(
                update={**updates, "updated_at": datetime.now(timezone.utc)}
            )
            saved = await self.account_repository.save(updated)
            logfire.info(
                "Account reconciled",
                account_id=str(saved.id),
                fields=sorted(updates),
            )
            return saved
