"""Google infrastructure providers."""

from dishka import Scope, provide

from wire.adapter.google.client import GoogleOAuthClient, RealGoogleOAuthClient
from wire.config import Settings
from wire.util.di.base import ProviderBase
from wire.util.error import ConfigurationError
from wire.util.observability import instrument_httpx

_PLACEHOLDER = "CHANGE_ME_IN_PRODUCTION"


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_oauth_client(self, settings: Settings) -> GoogleOAuthClient:
        """Provide Google OAuth client.

        Raises:
            ConfigurationError: If Google OAuth credentials are not configured
        """
        google = settings.auth.google
        if not google.client_id or google.client_id == _PLACEHOLDER:
            raise ConfigurationError("Google OAuth client ID must be configured")
        if not google.client_secret or google.client_secret == _PLACEHOLDER:
            raise ConfigurationError("Google OAuth client secret must be configured")

        instrument_httpx()
        return RealGoogleOAuthClient(
            client_id=google.client_id,
            client_secret=google.client_secret,
            redirect_uri=settings.auth.google_callback_url,
            scopes=google.scopes,
        )
