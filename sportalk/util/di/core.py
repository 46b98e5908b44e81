"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from sportalk.config import AuthSettings, PaginationSettings, PostSettings, Settings
from sportalk.util.di.base import ProviderBase


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
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        """Provide pagination settings."""
        return settings.pagination

    @provide(scope=Scope.APP)
    def provide_post_settings(self, settings: Settings) -> PostSettings:
        """Provide post editing policy."""
        return settings.posts
