"""Identity resolution domain service.

Runs one provider sign-in from raw callback payload to local account:

    Start -> Validated -> Matched -> Reconciled
                       -> Unmatched -> HandleAllocated -> Provisioned

Any failure ends the attempt; nothing is retried here.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import logfire
from sqlalchemy.exc import SQLAlchemyError

from wire.domain.error import AccountStoreError
from wire.domain.model import Account
from wire.domain.value import AuthProvider

from .account_matcher import AccountMatcher
from .account_provisioner import AccountProvisioner
from .account_reconciler import AccountReconciler
from .base import Service
from .credential_validator import CredentialValidator
from .handle_allocator import HandleAllocator


@dataclass
class ResolvedIdentity:
    """Outcome of a successful identity resolution."""

    account: Account
    created: bool


class IdentityResolutionService(Service):
    """Resolves a provider sign-in to exactly one local account."""

    def __init__(
        self,
        credential_validator: CredentialValidator,
        account_matcher: AccountMatcher,
        account_reconciler: AccountReconciler,
        handle_allocator: HandleAllocator,
        account_provisioner: AccountProvisioner,
    ) -> None:
        """Initialize identity resolution service.

        Args:
            credential_validator: Maps the raw payload to a typed profile
            account_matcher: Finds an existing account by contact address
            account_reconciler: Backfills provider fields on a matched account
            handle_allocator: Picks a unique handle for a new account
            account_provisioner: Creates the new account
        """
        self.credential_validator = credential_validator
        self.account_matcher = account_matcher
        self.account_reconciler = account_reconciler
        self.handle_allocator = handle_allocator
        self.account_provisioner = account_provisioner

    async def resolve(
        self, provider: AuthProvider, payload: Mapping[str, Any]
    ) -> ResolvedIdentity:
        """Resolve a provider payload to a local account.

        Args:
            provider: Provider that authenticated the principal
            payload: Raw profile from the provider callback

        Returns:
            The matched or newly provisioned account

        Raises:
            MissingContactAddressError: If the payload has no verified email
            InvalidProviderPayloadError: If the payload has no provider user id
            DuplicateContactAddressError: If a concurrent sign-in created the account
            DuplicateHandleError: If a concurrent sign-in took the handle
            AccountStoreError: If the store fails
        """
        with logfire.span("identity_resolution.resolve", provider=provider.value):
            profile = self.credential_validator.validate(provider, payload)
            logfire.info(
                "Sign-in validated",
                state="validated",
                contact_address=profile.contact_address.root,
            )

            try:
                account = await self.account_matcher.match(profile.contact_address)
                if account:
                    reconciled = await self.account_reconciler.reconcile(
                        account, profile
                    )
                    logfire.info(
                        "Sign-in resolved",
                        state="reconciled",
                        account_id=str(reconciled.id),
                    )
                    return ResolvedIdentity(account=reconciled, created=False)

                base = self.handle_allocator.derive_base_handle(profile)
                handle = await self.handle_allocator.allocate(base)
                logfire.info(
                    "Sign-in resolved",
                    state="handle_allocated",
                    handle=handle.root,
                )

                created = await self.account_provisioner.provision(profile, handle)
            except (SQLAlchemyError, OSError) as e:
                # Integrity errors from create() are mapped by the provisioner;
                # anything reaching here is a store or connectivity failure.
                logfire.error(
                    "Account store failure during sign-in",
                    provider=provider.value,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise AccountStoreError(str(e)) from e

            logfire.info(
                "Sign-in resolved",
                state="provisioned",
                account_id=str(created.id),
            )
            return ResolvedIdentity(account=created, created=True)
