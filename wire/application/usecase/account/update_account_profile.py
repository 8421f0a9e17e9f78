"""Update account profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from wire.application.usecase.base import BaseUseCase
from wire.domain.service import AccountService
from wire.domain.value import AccountId, Handle


class UpdateAccountProfileRequest(BaseModel):
    """Update account profile request."""

    account_id: str  # From the session cookie
    handle: Handle | None = None
    avatar_url: str | None = Field(default=None, max_length=2048)


class UpdateAccountProfileResponse(BaseModel):
    """Update account profile response."""

    account_id: str
    handle: Handle
    avatar_url: str | None
    updated_at: datetime


class UpdateAccountProfileUseCase(BaseUseCase):
    """Use case for an account editing its own profile.

    The handle and avatar can change. The contact address cannot: it is
    the verified key that links provider sign-ins to the account.
    """

    def __init__(self, account_service: AccountService) -> None:
        """Initialize update account profile use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(
        self, request: UpdateAccountProfileRequest
    ) -> UpdateAccountProfileResponse:
        """Execute update account profile flow.

        Raises:
            NotFoundError: If the account no longer exists
            HandleUnavailableError: If another account holds the handle
            ValueError: If the handle has disallowed characters
        """
        account = await self.account_service.update_profile(
            AccountId(UUID(request.account_id)),
            handle=request.handle,
            avatar_url=request.avatar_url,
        )

        return UpdateAccountProfileResponse(
            account_id=str(account.id),
            handle=account.handle,
            avatar_url=account.avatar_url,
            updated_at=account.updated_at,
        )
