"""Configuration providers. Not mockable."""

from dishka import Scope, provide

from board.config import AuthSettings, PostSettings, Settings
from board.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read once per container from the environment and .env."""

    @provide(scope=Scope.APP)
    def settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def auth(self, settings: Settings) -> AuthSettings:
        """Token signing settings for JWTService."""
        return settings.auth

    @provide(scope=Scope.APP)
    def posts(self, settings: Settings) -> PostSettings:
        """Conflict retry count for PostService."""
        return settings.posts
