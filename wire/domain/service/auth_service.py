"""Authentication domain service."""

from typing import Any

from wire.domain.value import AuthProvider

from .base import Service


class OAuthClient:
    """Generic OAuth client interface for all providers."""

    async def initiate_authorization(self, state: str) -> str:
        """Initiate OAuth authorization flow.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect the browser to
        """
        raise NotImplementedError

    async def complete_authorization(self, code: str, state: str) -> dict[str, Any]:
        """Complete OAuth authorization flow.

        Args:
            code: Authorization code from OAuth callback
            state: State parameter for verification

        Returns:
            Raw profile payload (id, displayName, emails, photos)
        """
        raise NotImplementedError


class AuthService(Service):
    """Dispatches OAuth flows to the configured provider clients."""

    def __init__(self, oauth_clients: dict[AuthProvider, OAuthClient]) -> None:
        self.oauth_clients = oauth_clients

    def _client(self, provider: AuthProvider) -> OAuthClient:
        client = self.oauth_clients.get(provider)
        if not client:
            raise ValueError(f"Unsupported provider: {provider}")
        return client

    async def initiate_login(self, provider: AuthProvider, state: str) -> str:
        """Initiate OAuth login flow.

        Raises:
            ValueError: If provider not supported
        """
        return await self._client(provider).initiate_authorization(state)

    async def complete_login(
        self, provider: AuthProvider, code: str, state: str
    ) -> dict[str, Any]:
        """Exchange the callback code for the provider's profile payload.

        Raises:
            ValueError: If provider not supported
        """
        return await self._client(provider).complete_authorization(code, state)
