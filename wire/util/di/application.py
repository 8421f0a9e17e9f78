"""Application layer DI providers."""

from dishka import Scope, provide

from wire.application.usecase.account import (
    ChangeAccessLevelUseCase,
    GetAccountProfileUseCase,
    UpdateAccountProfileUseCase,
)
from wire.application.usecase.auth import GetCurrentAccountUseCase, LoginUseCase
from wire.domain.service import (
    AccountService,
    AuthService,
    IdentityResolutionService,
    JWTService,
)
from wire.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        auth_service: AuthService,
        identity_resolution_service: IdentityResolutionService,
        account_service: AccountService,
        jwt_service: JWTService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            auth_service=auth_service,
            identity_resolution_service=identity_resolution_service,
            account_service=account_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_account_use_case(
        self, jwt_service: JWTService, account_service: AccountService
    ) -> GetCurrentAccountUseCase:
        """Provide get current account use case."""
        return GetCurrentAccountUseCase(
            jwt_service=jwt_service, account_service=account_service
        )

    # Account use cases
    @provide(scope=Scope.REQUEST)
    def get_account_profile_use_case(
        self, account_service: AccountService
    ) -> GetAccountProfileUseCase:
        """Provide get account profile use case."""
        return GetAccountProfileUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_change_access_level_use_case(
        self, account_service: AccountService
    ) -> ChangeAccessLevelUseCase:
        """Provide change access level use case."""
        return ChangeAccessLevelUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_update_account_profile_use_case(
        self, account_service: AccountService
    ) -> UpdateAccountProfileUseCase:
        """Provide update account profile use case."""
        return UpdateAccountProfileUseCase(account_service=account_service)
