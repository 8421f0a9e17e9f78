"""OAuth infrastructure provider."""

from dishka import Scope, provide

from wire.adapter.google.client import GoogleOAuthClient
from wire.domain.service.auth_service import OAuthClient
from wire.domain.value import AuthProvider
from wire.util.di.base import ProviderBase


class OAuthAggregatorProvider(ProviderBase):
    """Collects the provider-specific OAuth clients into one mapping."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_oauth_clients(
        self, google_oauth_client: GoogleOAuthClient
    ) -> dict[AuthProvider, OAuthClient]:
        """Provide OAuth clients keyed by provider for AuthService."""
        return {AuthProvider.GOOGLE: google_oauth_client}
