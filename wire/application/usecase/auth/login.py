"""Login use case."""

import logfire
from pydantic import BaseModel

from wire.domain.service import (
    AccountService,
    AuthService,
    IdentityResolutionService,
    JWTService,
)
from wire.domain.value import AccessLevel, AuthProvider, Handle


class LoginRequest(BaseModel):
    """Login request from OAuth callback.

    These parameters come from the OAuth provider in the callback URL.
    """

    provider: AuthProvider
    code: str  # OAuth authorization code
    state: str  # State parameter for session verification


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    account_id: str
    handle: Handle
    access_level: AccessLevel
    created: bool  # True on first sign-in


class LoginUseCase:
    """Use case for provider sign-in via OAuth."""

    def __init__(
        self,
        auth_service: AuthService,
        identity_resolution_service: IdentityResolutionService,
        account_service: AccountService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Dispatches the code exchange to the provider client
            identity_resolution_service: Maps the provider profile to an account
            account_service: Records the sign-in
            jwt_service: Issues the session token
        """
        self.auth_service = auth_service
        self.identity_resolution_service = identity_resolution_service
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute the sign-in flow.

        Steps:
        1. Exchange the code for the provider's profile payload
        2. Resolve the payload to a local account (match or provision)
        3. Record last_login_at
        4. Issue the session JWT

        Raises:
            ProviderError: If the provider exchange fails
            IdentityResolutionError: If the payload cannot be resolved
        """
        payload = await self.auth_service.complete_login(
            request.provider, request.code, request.state
        )

        with logfire.span("login_account", provider=request.provider.value):
            resolved = await self.identity_resolution_service.resolve(
                request.provider, payload
            )
            account = await self.account_service.record_login(resolved.account)
            token = self.jwt_service.create_token(account)

            logfire.info(
                "Account signed in",
                account_id=str(account.id),
                provider=request.provider.value,
                created=resolved.created,
            )

            return LoginResponse(
                token=token,
                account_id=str(account.id),
                handle=account.handle,
                access_level=account.access_level,
                created=resolved.created,
            )
