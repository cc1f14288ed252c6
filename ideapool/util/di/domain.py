"""Domain layer DI providers."""

from dishka import Scope, provide

from ideapool.config import AuthSettings, PaginationSettings
from ideapool.domain.repository import IdeaRepository, UserRepository
from ideapool.domain.service import (
    IdeaService,
    RankingService,
    TokenManagerService,
    UserService,
)
from ideapool.util.di.base import ProviderBase
from ideapool.util.password import PasswordHasher


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_token_manager(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> TokenManagerService:
        """Provide token lifecycle domain service."""
        return TokenManagerService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        idea_repository: IdeaRepository,
        password_hasher: PasswordHasher,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            idea_repository=idea_repository,
            password_hasher=password_hasher,
        )

    @provide
    def get_ranking_service(
        self,
        idea_repository: IdeaRepository,
        pagination_settings: PaginationSettings,
    ) -> RankingService:
        """Provide idea ranking domain service."""
        return RankingService(
            idea_repository=idea_repository, pagination_settings=pagination_settings
        )

    @provide
    def get_idea_service(
        self, idea_repository: IdeaRepository, ranking_service: RankingService
    ) -> IdeaService:
        """Provide idea domain service."""
        return IdeaService(
            idea_repository=idea_repository, ranking_service=ranking_service
        )
