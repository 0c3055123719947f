"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from prep.config import AuthSettings, LimitsSettings, ParserSettings, Settings
from prep.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_limits_settings(self, settings: Settings) -> LimitsSettings:
        """Provide content limit settings."""
        return settings.limits

    @provide(scope=Scope.APP)
    def provide_parser_settings(self, settings: Settings) -> ParserSettings:
        """Provide question parser settings."""
        return settings.parser
