"""Get current account use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from wire.domain.service import AccountService, JWTService
from wire.domain.value import AccessLevel, AccountId, Handle


class GetCurrentAccountRequest(BaseModel):
    """Get current account request."""

    token: str  # JWT token


class GetCurrentAccountResponse(BaseModel):
    """The signed-in account as shown to its owner."""

    account_id: str
    contact_address: str
    handle: Handle
    avatar_url: str | None
    access_level: AccessLevel
    last_login_at: datetime | None
    created_at: datetime


class GetCurrentAccountUseCase:
    """Use case for getting the current authenticated account."""

    def __init__(self, jwt_service: JWTService, account_service: AccountService) -> None:
        self.jwt_service = jwt_service
        self.account_service = account_service

    async def execute(
        self, request: GetCurrentAccountRequest
    ) -> GetCurrentAccountResponse:
        """Load the account named by the session token.

        The access level is read from the store, not the token, so a level
        change takes effect on the next request.

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If the account no longer exists
        """
        payload = self.jwt_service.verify_token(request.token)
        account = await self.account_service.get_by_id(
            AccountId(UUID(payload.account_id))
        )

        return GetCurrentAccountResponse(
            account_id=str(account.id),
            contact_address=account.contact_address.root,
            handle=account.handle,
            avatar_url=account.avatar_url,
            access_level=account.access_level,
            last_login_at=account.last_login_at,
            created_at=account.created_at,
        )
