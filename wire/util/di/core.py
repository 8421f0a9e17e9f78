"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from wire.config import AuthSettings, Settings
from wire.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings provider; values come from the environment and .env."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth
