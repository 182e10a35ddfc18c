"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import AuthSettings, PostSettings
from board.domain.repository import PostRepository, UserRepository
from board.domain.service import JWTService, PostService, UserService
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, REQUEST-scoped to follow the repository session."""

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, post_settings: PostSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            max_retries=post_settings.max_mutation_retries,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
