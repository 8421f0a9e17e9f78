"""Authentication routes."""

import logging
import secrets
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from wire.adapter.error import ProviderError
from wire.application.usecase.auth import GetCurrentAccountUseCase, LoginUseCase
from wire.application.usecase.auth.get_current_account import (
    GetCurrentAccountRequest,
    GetCurrentAccountResponse,
)
from wire.application.usecase.auth.login import LoginRequest
from wire.config import Settings
from wire.domain.error import (
    AccountStoreError,
    DuplicateContactAddressError,
    DuplicateHandleError,
    InvalidProviderPayloadError,
    MissingContactAddressError,
    NotFoundError,
)
from wire.domain.service import AuthService
from wire.domain.value import AuthProvider
from wire.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class InitiateLoginRequest(BaseModel):
    """Initiate login request."""

    provider: AuthProvider = AuthProvider.GOOGLE


class InitiateLoginResponse(BaseModel):
    """Initiate login response."""

    authorization_url: str


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Authentication status for /auth/me.

    Unauthenticated callers get `authenticated=false` rather than an error.
    """

    authenticated: bool
    account: GetCurrentAccountResponse | None = None


def _cookie_options(settings: Settings) -> dict:
    """Cookie attributes for the session JWT.

    Production serves the frontend and API from sibling subdomains, which
    needs SameSite=None, Secure and a shared domain. Development is
    same-site over plain HTTP.
    """
    is_production = settings.environment == "production"
    return {
        "httponly": True,
        "secure": is_production,
        "samesite": "none" if is_production else "lax",
        "domain": settings.cookie_domain if is_production else None,
        "path": "/",
    }


def _error_redirect(settings: Settings, error: str, message: str) -> RedirectResponse:
    query = urlencode({"error": error, "message": message})
    return RedirectResponse(
        url=f"{settings.api.frontend_url}/auth/error?{query}",
        status_code=status.HTTP_302_FOUND,
    )


@router.post("/login", response_model=InitiateLoginResponse)
async def initiate_login(
    request: InitiateLoginRequest,
    auth_service: FromDishka[AuthService],
) -> InitiateLoginResponse:
    """Start the OAuth flow and return the provider's consent URL.

    Example:
        POST /auth/login
        {"provider": "google"}

        Response:
        {"authorization_url": "https://accounts.google.com/o/oauth2/v2/auth?..."}
    """
    logger.info(f"Initiating {request.provider.value} login")
    state = secrets.token_urlsafe(32)

    try:
        auth_url = await auth_service.initiate_login(request.provider, state)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ProviderError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to initiate login: {e}",
        )

    return InitiateLoginResponse(authorization_url=auth_url)


@router.get("/callback/google")
async def google_callback(
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
):
    """Handle the Google OAuth callback.

    Resolves the Google profile to an account, sets the session cookie and
    redirects to the frontend. Failures redirect to `/auth/error` on the
    frontend with an `error` code.

    Example:
        GET /auth/callback/google?code=4/0Ad...&state=xyz789

        Redirects to: https://razewire.online/
        Sets cookie: jwt
    """
    if error or not code or not state:
        logger.warning(f"Google callback without code: error={error}")
        return _error_redirect(
            settings, "auth_failed", error or "Missing authorization code"
        )

    return await _handle_oauth_callback(
        provider=AuthProvider.GOOGLE,
        code=code,
        state=state,
        login_use_case=login_use_case,
        settings=settings,
    )


async def _handle_oauth_callback(
    provider: AuthProvider,
    code: str,
    state: str,
    login_use_case: LoginUseCase,
    settings: Settings,
) -> RedirectResponse:
    """Complete a provider sign-in and build the callback redirect."""
    logger.info(f"OAuth callback received: provider={provider.value}")

    try:
        login_response = await login_use_case.execute(
            LoginRequest(provider=provider, code=code, state=state)
        )
    except MissingContactAddressError as e:
        logger.warning(f"Sign-in without verified email: {e}")
        return _error_redirect(settings, "missing_email", str(e))
    except InvalidProviderPayloadError as e:
        logger.warning(f"Invalid provider payload: {e}")
        return _error_redirect(settings, "auth_failed", str(e))
    except (DuplicateContactAddressError, DuplicateHandleError) as e:
        # Lost a race with a concurrent first sign-in; the next attempt matches
        logger.warning(f"Concurrent sign-in conflict: {e}")
        return _error_redirect(
            settings, "retry", "Sign-in collided with another request, try again"
        )
    except AccountStoreError as e:
        logger.error(f"Account store failure during sign-in: {e}")
        return _error_redirect(settings, "unexpected", "Sign-in failed")
    except ProviderError as e:
        logger.error(f"{provider.value} OAuth error during callback: {e}")
        return _error_redirect(settings, "auth_failed", str(e))
    except Exception as e:
        logger.exception(f"Unexpected error during OAuth callback: {e}")
        return _error_redirect(settings, "unexpected", "Sign-in failed")

    logger.info(
        f"Sign-in successful: handle={login_response.handle}, "
        f"created={login_response.created}"
    )

    redirect_response = RedirectResponse(
        url=settings.api.frontend_url,
        status_code=status.HTTP_302_FOUND,
    )
    # Cookies must go on the returned response object
    redirect_response.set_cookie(
        key=settings.auth.cookie_name,
        value=login_response.token,
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
        **_cookie_options(settings),
    )
    return redirect_response


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Clear the session cookie."""
    options = _cookie_options(settings)
    response.delete_cookie(
        key=settings.auth.cookie_name,
        domain=options["domain"],
        path=options["path"],
    )
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_account(
    request: Request,
    get_current_account_use_case: FromDishka[GetCurrentAccountUseCase],
    settings: FromDishka[Settings],
) -> AuthStatusResponse:
    """Return the signed-in account, or `authenticated=false`.

    Safe to call without a session so the frontend can check sign-in state.
    """
    token = request.cookies.get(settings.auth.cookie_name)
    if not token:
        return AuthStatusResponse(authenticated=False)

    try:
        account = await get_current_account_use_case.execute(
            GetCurrentAccountRequest(token=token)
        )
    except JWTError:
        return AuthStatusResponse(authenticated=False)
    except NotFoundError:
        # Valid token for a deleted account
        return AuthStatusResponse(authenticated=False)

    return AuthStatusResponse(authenticated=True, account=account)
