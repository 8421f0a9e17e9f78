"""Account routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from wire.application.usecase.account import (
    ChangeAccessLevelUseCase,
    GetAccountProfileUseCase,
    UpdateAccountProfileUseCase,
)
from wire.application.usecase.account.change_access_level import (
    ChangeAccessLevelRequest,
    ChangeAccessLevelResponse,
)
from wire.application.usecase.account.get_account_profile import (
    GetAccountProfileRequest,
    GetAccountProfileResponse,
)
from wire.application.usecase.account.update_account_profile import (
    UpdateAccountProfileRequest,
    UpdateAccountProfileResponse,
)
from wire.config import Settings
from wire.domain.error import (
    HandleUnavailableError,
    NotAuthorizedError,
    NotFoundError,
)
from wire.domain.service import JWTService
from wire.domain.value import AccessLevel, Handle
from wire.interface.error import AuthenticationRequiredError
from wire.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["accounts"], route_class=DishkaRoute)


class AccessLevelUpdate(BaseModel):
    """Body of an access level change."""

    access_level: AccessLevel


class ProfileUpdate(BaseModel):
    """Body of a profile edit. Omitted fields are left unchanged."""

    handle: Handle | None = None
    avatar_url: str | None = None


def _require_account_id(
    request: Request, settings: Settings, jwt_service: JWTService
) -> str:
    """Return the signed-in account ID from the session cookie.

    Raises:
        AuthenticationRequiredError: If the cookie is missing or invalid
    """
    token = request.cookies.get(settings.auth.cookie_name)
    if not token:
        raise AuthenticationRequiredError("Not authenticated")
    try:
        return jwt_service.verify_token(token).account_id
    except JWTError as e:
        raise AuthenticationRequiredError(str(e)) from e


@router.put("/me", response_model=UpdateAccountProfileResponse)
async def update_my_profile(
    body: ProfileUpdate,
    request: Request,
    use_case: FromDishka[UpdateAccountProfileUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> UpdateAccountProfileResponse:
    """Edit the signed-in account's handle or avatar.

    Example:
        PUT /accounts/me
        Cookie: jwt=...
        {"handle": "Sokha_Chan"}
    """
    try:
        account_id = _require_account_id(request, settings, jwt_service)
    except AuthenticationRequiredError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    try:
        return await use_case.execute(
            UpdateAccountProfileRequest(
                account_id=account_id,
                handle=body.handle,
                avatar_url=body.avatar_url,
            )
        )
    except HandleUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except NotFoundError as e:
        # Valid token for a deleted account
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{handle}", response_model=GetAccountProfileResponse)
async def get_account_profile(
    handle: str,
    use_case: FromDishka[GetAccountProfileUseCase],
) -> GetAccountProfileResponse:
    """Get an account's public profile by handle.

    Example:
        GET /accounts/Sokha_Chan
    """
    try:
        return await use_case.execute(GetAccountProfileRequest(handle=Handle(handle)))
    except (NotFoundError, ValueError):
        # ValueError: the path cannot be a handle at all
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Account not found: {handle}",
        )


@router.put("/{account_id}/access-level", response_model=ChangeAccessLevelResponse)
async def change_access_level(
    account_id: str,
    body: AccessLevelUpdate,
    request: Request,
    use_case: FromDishka[ChangeAccessLevelUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> ChangeAccessLevelResponse:
    """Change another account's access level. Admins only.

    Example:
        PUT /accounts/6f1c.../access-level
        Cookie: jwt=...
        {"access_level": "editor"}
    """
    try:
        actor_id = _require_account_id(request, settings, jwt_service)
    except AuthenticationRequiredError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    try:
        request_model = ChangeAccessLevelRequest(
            actor_id=actor_id, account_id=account_id, access_level=body.access_level
        )
        return await use_case.execute(request_model)
    except NotAuthorizedError as e:
        logger.warning(f"Access level change refused: {e}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        # Malformed account ID
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
