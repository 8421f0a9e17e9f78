"""Get account profile use case."""

from datetime import datetime

from pydantic import BaseModel

from wire.domain.service import AccountService
from wire.domain.value import AccessLevel, Handle


class GetAccountProfileRequest(BaseModel):
    """Get account profile request."""

    handle: Handle


class GetAccountProfileResponse(BaseModel):
    """Public account profile. The contact address is never exposed."""

    account_id: str
    handle: Handle
    avatar_url: str | None
    access_level: AccessLevel
    created_at: datetime


class GetAccountProfileUseCase:
    """Use case for getting an account's public profile by handle."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(
        self, request: GetAccountProfileRequest
    ) -> GetAccountProfileResponse:
        """Execute get account profile flow.

        Raises:
            NotFoundError: If no account has the handle
        """
        account = await self.account_service.get_by_handle(request.handle)

        return GetAccountProfileResponse(
            account_id=str(account.id),
            handle=account.handle,
            avatar_url=account.avatar_url,
            access_level=account.access_level,
            created_at=account.created_at,
        )
