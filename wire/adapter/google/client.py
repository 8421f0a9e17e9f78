"""Google OAuth 2.0 / OpenID Connect client.

Authorization code flow with PKCE. The userinfo response is mapped to the
passport profile shape consumed by the credential validator.
"""

import hashlib
import secrets
from base64 import urlsafe_b64encode
from typing import Any
from urllib.parse import urlencode

import httpx
import logfire

from wire.adapter.error import ProviderError
from wire.domain.service.auth_service import OAuthClient


class GoogleOAuthError(ProviderError):
    """Google OAuth error."""

    pass


def _is_verified(claim: Any) -> bool:
    """Only a true boolean or the string "true" counts as verified."""
    if isinstance(claim, str):
        return claim.strip().lower() == "true"
    return claim is True


def userinfo_to_profile(user_info: dict[str, Any]) -> dict[str, Any]:
    """Map an OpenID Connect userinfo response to a passport profile.

    Args:
        user_info: Response from the userinfo endpoint

    Returns:
        Profile dict with id, displayName, emails and photos
    """
    profile: dict[str, Any] = {
        "id": user_info.get("sub"),
        "displayName": user_info.get("name"),
        "emails": [],
        "photos": [],
    }
    if user_info.get("email"):
        profile["emails"].append(
            {
                "value": user_info["email"],
                "verified": _is_verified(user_info.get("email_verified")),
            }
        )
    if user_info.get("picture"):
        profile["photos"].append({"value": user_info["picture"]})
    return profile


class GoogleOAuthClient(OAuthClient):
    """Base class for Google OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClient(GoogleOAuthClient):
    """Google OAuth 2.0 client with PKCE support."""

    authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"
    token_url = "https://oauth2.googleapis.com/token"
    user_info_url = "https://openidconnect.googleapis.com/v1/userinfo"

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        scopes: list[str],
    ) -> None:
        """Initialize Google OAuth client.

        Args:
            client_id: Google OAuth client ID
            client_secret: Google OAuth client secret
            redirect_uri: Callback URL registered with Google
            scopes: Scopes requested at the consent screen
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.scopes = scopes

        # PKCE verifiers keyed by state; single-process only
        self._pkce_verifiers: dict[str, str] = {}

    @staticmethod
    def _generate_pkce_pair() -> tuple[str, str]:
        """Generate PKCE code verifier and S256 challenge."""
        code_verifier = urlsafe_b64encode(secrets.token_bytes(32)).decode().rstrip("=")
        digest = hashlib.sha256(code_verifier.encode()).digest()
        code_challenge = urlsafe_b64encode(digest).decode().rstrip("=")
        return code_verifier, code_challenge

    async def initiate_authorization(self, state: str) -> str:
        """Build the Google consent screen URL.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect the browser to
        """
        code_verifier, code_challenge = self._generate_pkce_pair()
        self._pkce_verifiers[state] = code_verifier

        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": " ".join(self.scopes),
            "state": state,
            "code_challenge": code_challenge,
            "code_challenge_method": "S256",
            "prompt": "select_account",
        }

        logfire.info("Google OAuth authorization initiated", state=state)
        return f"{self.authorize_url}?{urlencode(params)}"

    async def complete_authorization(self, code: str, state: str) -> dict[str, Any]:
        """Exchange the code and fetch the signed-in user's profile.

        Args:
            code: Authorization code from Google callback
            state: State parameter issued by initiate_authorization

        Returns:
            Passport-shaped profile payload

        Raises:
            GoogleOAuthError: If the state is unknown or a Google call fails
        """
        code_verifier = self._pkce_verifiers.pop(state, None)
        if not code_verifier:
            raise GoogleOAuthError("Invalid state or PKCE verifier not found")

        access_token = await self._exchange_code_for_token(code, code_verifier)
        user_info = await self._get_user_info(access_token)

        logfire.info("Google OAuth completed", sub=user_info.get("sub"))
        return userinfo_to_profile(user_info)

    async def _exchange_code_for_token(self, code: str, code_verifier: str) -> str:
        data = {
            "code": code,
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "code_verifier": code_verifier,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(self.token_url, data=data, timeout=30.0)
        except httpx.HTTPError as e:
            logfire.error("Google token exchange HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error during token exchange: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "Google token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GoogleOAuthError(f"Token exchange failed: {response.status_code}")

        return response.json()["access_token"]

    async def _get_user_info(self, access_token: str) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_info_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=30.0,
                )
        except httpx.HTTPError as e:
            logfire.error("Google userinfo HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error fetching user info: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "Google userinfo request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GoogleOAuthError(f"User info request failed: {response.status_code}")

        return response.json()


class MockGoogleOAuthClient(GoogleOAuthClient):
    """Mock Google OAuth client for testing.

    Returns a deterministic profile without calling Google. Tests may
    replace `profile` to drive other sign-in scenarios.
    """

    def __init__(self, profile: dict[str, Any] | None = None) -> None:
        self.profile = profile or {
            "id": "mockgoogle123",
            "displayName": "Mock Reader",
            "emails": [{"value": "mock.reader@example.com", "verified": True}],
            "photos": [{"value": "https://example.com/avatar.jpg"}],
        }

    async def initiate_authorization(self, state: str) -> str:
        return f"https://accounts.google.com/o/oauth2/v2/auth?state={state}&mock=true"

    async def complete_authorization(self, code: str, state: str) -> dict[str, Any]:
        return self.profile
