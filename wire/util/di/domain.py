"""Domain layer DI providers."""

from dishka import Scope, provide

from wire.config import AuthSettings
from wire.domain.repository import AccountRepository
from wire.domain.service import (
    AccountMatcher,
    AccountProvisioner,
    AccountReconciler,
    AccountService,
    AuthService,
    CredentialValidator,
    HandleAllocator,
    IdentityResolutionService,
    JWTService,
    OAuthClient,
)
from wire.domain.value import AuthProvider
from wire.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped to share the request's repository and
    session.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, oauth_clients: dict[AuthProvider, OAuthClient]
    ) -> AuthService:
        """Provide authentication service over all configured providers."""
        return AuthService(oauth_clients=oauth_clients)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_account_service(
        self, account_repository: AccountRepository
    ) -> AccountService:
        return AccountService(account_repository=account_repository)

    # Sign-in pipeline
    @provide
    def get_credential_validator(self) -> CredentialValidator:
        return CredentialValidator()

    @provide
    def get_account_matcher(
        self, account_repository: AccountRepository
    ) -> AccountMatcher:
        return AccountMatcher(account_repository=account_repository)

    @provide
    def get_account_reconciler(
        self, account_repository: AccountRepository
    ) -> AccountReconciler:
        return AccountReconciler(account_repository=account_repository)

    @provide
    def get_handle_allocator(
        self, account_repository: AccountRepository
    ) -> HandleAllocator:
        return HandleAllocator(account_repository=account_repository)

    @provide
    def get_account_provisioner(
        self, account_repository: AccountRepository
    ) -> AccountProvisioner:
        return AccountProvisioner(account_repository=account_repository)

    @provide
    def get_identity_resolution_service(
        self,
        credential_validator: CredentialValidator,
        account_matcher: AccountMatcher,
        account_reconciler: AccountReconciler,
        handle_allocator: HandleAllocator,
        account_provisioner: AccountProvisioner,
    ) -> IdentityResolutionService:
        """Provide the identity resolution orchestrator."""
        return IdentityResolutionService(
            credential_validator=credential_validator,
            account_matcher=account_matcher,
            account_reconciler=account_reconciler,
            handle_allocator=handle_allocator,
            account_provisioner=account_provisioner,
        )
