"""Sign out use case."""

from pydantic import BaseModel

from ideapool.application.usecase.base import BaseUseCase
from ideapool.domain.model import User
from ideapool.domain.service import TokenManagerService


class SignOutRequest(BaseModel):
    """Sign out request."""

    user: User  # Authenticated caller
    refresh_token: str


class SignOutUseCase(BaseUseCase):
    """Use case for revoking the caller's token pair."""

    def __init__(self, token_manager: TokenManagerService) -> None:
        """Initialize sign out use case.

        Args:
            token_manager: Token lifecycle domain service
        """
        self.token_manager = token_manager

    async def execute(self, request: SignOutRequest) -> None:
        await self.token_manager.delete(request.user, request.refresh_token)
