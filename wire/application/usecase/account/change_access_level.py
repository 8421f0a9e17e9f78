"""Change access level use case."""

from uuid import UUID

from pydantic import BaseModel

from wire.application.usecase.base import BaseUseCase
from wire.domain.service import AccountService
from wire.domain.value import AccessLevel, AccountId, Handle


class ChangeAccessLevelRequest(BaseModel):
    """Change access level request."""

    actor_id: str  # Signed-in account making the change
    account_id: str  # Account being changed
    access_level: AccessLevel


class ChangeAccessLevelResponse(BaseModel):
    """Change access level response."""

    account_id: str
    handle: Handle
    access_level: AccessLevel


class ChangeAccessLevelUseCase(BaseUseCase):
    """Use case for an admin promoting or demoting another account."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize change access level use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(
        self, request: ChangeAccessLevelRequest
    ) -> ChangeAccessLevelResponse:
        """Execute the access level change.

        Raises:
            NotAuthorizedError: If the actor is not an admin
            NotFoundError: If the actor or target account does not exist
        """
        account = await self.account_service.change_access_level(
            actor_id=AccountId(UUID(request.actor_id)),
            target_id=AccountId(UUID(request.account_id)),
            access_level=request.access_level,
        )

        return ChangeAccessLevelResponse(
            account_id=str(account.id),
            handle=account.handle,
            access_level=account.access_level,
        )
