"""Application layer DI providers."""

from dishka import Scope, provide

from ideapool.application.usecase.auth import (
    AuthenticateUseCase,
    RefreshAccessTokenUseCase,
    SignInUseCase,
    SignOutUseCase,
)
from ideapool.application.usecase.idea import (
    CreateIdeaUseCase,
    DeleteIdeaUseCase,
    GetIdeaUseCase,
    ListIdeasUseCase,
    UpdateIdeaUseCase,
)
from ideapool.application.usecase.user import (
    DeleteAccountUseCase,
    GetProfileUseCase,
    SignUpUseCase,
)
from ideapool.domain.service import IdeaService, TokenManagerService, UserService
from ideapool.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_authenticate_use_case(
        self, token_manager: TokenManagerService, user_service: UserService
    ) -> AuthenticateUseCase:
        """Provide authenticate use case."""
        return AuthenticateUseCase(
            token_manager=token_manager, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_sign_in_use_case(
        self, user_service: UserService, token_manager: TokenManagerService
    ) -> SignInUseCase:
        """Provide sign in use case."""
        return SignInUseCase(user_service=user_service, token_manager=token_manager)

    @provide(scope=Scope.REQUEST)
    def get_refresh_access_token_use_case(
        self, token_manager: TokenManagerService
    ) -> RefreshAccessTokenUseCase:
        """Provide refresh access token use case."""
        return RefreshAccessTokenUseCase(token_manager=token_manager)

    @provide(scope=Scope.REQUEST)
    def get_sign_out_use_case(
        self, token_manager: TokenManagerService
    ) -> SignOutUseCase:
        """Provide sign out use case."""
        return SignOutUseCase(token_manager=token_manager)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_sign_up_use_case(
        self, user_service: UserService, token_manager: TokenManagerService
    ) -> SignUpUseCase:
        """Provide sign up use case."""
        return SignUpUseCase(user_service=user_service, token_manager=token_manager)

    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(self) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase()

    @provide(scope=Scope.REQUEST)
    def get_delete_account_use_case(
        self, user_service: UserService
    ) -> DeleteAccountUseCase:
        """Provide delete account use case."""
        return DeleteAccountUseCase(user_service=user_service)

    # Idea use cases
    @provide(scope=Scope.REQUEST)
    def get_create_idea_use_case(self, idea_service: IdeaService) -> CreateIdeaUseCase:
        """Provide create idea use case."""
        return CreateIdeaUseCase(idea_service=idea_service)

    @provide(scope=Scope.REQUEST)
    def get_update_idea_use_case(self, idea_service: IdeaService) -> UpdateIdeaUseCase:
        """Provide update idea use case."""
        return UpdateIdeaUseCase(idea_service=idea_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_idea_use_case(self, idea_service: IdeaService) -> DeleteIdeaUseCase:
        """Provide delete idea use case."""
        return DeleteIdeaUseCase(idea_service=idea_service)

    @provide(scope=Scope.REQUEST)
    def get_get_idea_use_case(self, idea_service: IdeaService) -> GetIdeaUseCase:
        """Provide get idea use case."""
        return GetIdeaUseCase(idea_service=idea_service)

    @provide(scope=Scope.REQUEST)
    def get_list_ideas_use_case(self, idea_service: IdeaService) -> ListIdeasUseCase:
        """Provide list ideas use case."""
        return ListIdeasUseCase(idea_service=idea_service)
