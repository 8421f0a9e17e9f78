"""Account domain service."""

from datetime import datetime, timezone

import logfire
from sqlalchemy.exc import IntegrityError

from wire.domain.error import HandleUnavailableError, NotAuthorizedError, NotFoundError
from wire.domain.model import Account
from wire.domain.repository import AccountRepository
from wire.domain.repository.account import HANDLE_CONSTRAINT, violated_constraint
from wire.domain.value import AccessLevel, AccountId, Handle

from .base import Service
from .handle_allocator import normalize_base_handle


class AccountService(Service):
    """Domain service for account reads, profile edits and administrative changes."""

    def __init__(self, account_repository: AccountRepository) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
        """
        self.account_repository = account_repository

    async def get_by_id(self, account_id: AccountId) -> Account:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.get_by_id", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                logfire.warn("Account not found", account_id=str(account_id))
                raise NotFoundError("Account", str(account_id))
            return account

    async def get_by_handle(self, handle: Handle) -> Account:
        """Get account by handle.

        Raises:
            NotFoundError: If no account has this handle
        """
        with logfire.span("account_service.get_by_handle", handle=handle.root):
            account = await self.account_repository.find_by_handle(handle)
            if not account:
                logfire.warn("Account not found", handle=handle.root)
                raise NotFoundError("Account", handle.root)
            return account

    async def record_login(self, account: Account) -> Account:
        """Stamp the account's last sign-in time.

        Args:
            account: Account that just signed in

        Returns:
            Updated account
        """
        with logfire.span("account_service.record_login", account_id=str(account.id)):
            now = datetime.now(timezone.utc)
            updated = account.model_copy(
                update={"last_login_at": now, "updated_at": now}
            )
            saved = await self.account_repository.save(updated)
            logfire.info("Sign-in recorded", account_id=str(saved.id))
            return saved

    async def update_profile(
        self,
        account_id: AccountId,
        handle: Handle | None = None,
        avatar_url: str | None = None,
    ) -> Account:
        """Apply an account's own profile changes.

        Fields left as None keep their value. Nothing is written when no
        field changes.

        Args:
            account_id: Account being edited
            handle: New handle, checked for format and uniqueness
            avatar_url: New avatar URL

        Returns:
            The account after the change

        Raises:
            NotFoundError: If the account does not exist
            ValueError: If the handle has characters a derived handle could not
            HandleUnavailableError: If another account holds the handle
        """
        with logfire.span("account_service.update_profile", account_id=str(account_id)):
            account = await self.get_by_id(account_id)

            update: dict = {}
            if handle is not None and handle != account.handle:
                update["handle"] = await self._check_handle_available(handle)
            if avatar_url is not None and avatar_url != account.avatar_url:
                update["avatar_url"] = avatar_url
            if not update:
                return account

            update["updated_at"] = datetime.now(timezone.utc)
            updated = account.model_copy(update=update)
            try:
                saved = await self.account_repository.save(updated)
            except IntegrityError as e:
                # Claimed between the check and the write
                if HANDLE_CONSTRAINT in violated_constraint(e):
                    logfire.warn(
                        "Handle claimed concurrently", handle=updated.handle.root
                    )
                    raise HandleUnavailableError(updated.handle.root) from e
                raise

            logfire.info(
                "Profile updated",
                account_id=str(account_id),
                fields=sorted(k for k in update if k != "updated_at"),
            )
            return saved

    async def _check_handle_available(self, handle: Handle) -> Handle:
        if normalize_base_handle(handle.root) != handle.root:
            raise ValueError("Handle may only contain letters, digits, _ . and -")
        holder = await self.account_repository.find_by_handle(handle)
        if holder is not None:
            logfire.warn("Handle unavailable", handle=handle.root)
            raise HandleUnavailableError(handle.root)
        return handle

    async def change_access_level(
        self,
        actor_id: AccountId,
        target_id: AccountId,
        access_level: AccessLevel,
    ) -> Account:
        """Change another account's access level.

        Only elevated (admin) accounts may do this. Setting the level an
        account already has is a no-op and performs no write.

        Args:
            actor_id: Account performing the change
            target_id: Account being changed
            access_level: New access level

        Returns:
            The target account after the change

        Raises:
            NotFoundError: If the actor or target does not exist
            NotAuthorizedError: If the actor is not an admin
        """
        with logfire.span(
            "account_service.change_access_level",
            actor_id=str(actor_id),
            target_id=str(target_id),
            access_level=access_level.value,
        ):
            actor = await self.get_by_id(actor_id)
            if not actor.access_level.is_elevated:
                logfire.warn(
                    "Access level change refused",
                    actor_id=str(actor_id),
                    actor_level=actor.access_level.value,
                )
                raise NotAuthorizedError("change access levels", str(actor_id))

            target = await self.get_by_id(target_id)
            if target.access_level == access_level:
                return target

            updated = target.model_copy(
                update={
                    "access_level": access_level,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
            saved = await self.account_repository.save(updated)
            logfire.info(
                "Access level changed",
                actor_id=str(actor_id),
                target_id=str(target_id),
                previous=target.access_level.value,
                access_level=access_level.value,
            )
            return saved
