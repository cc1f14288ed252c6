"""Refresh access token use case."""

from pydantic import BaseModel

from ideapool.application.usecase.base import BaseUseCase
from ideapool.domain.model import User
from ideapool.domain.service import TokenManagerService


class RefreshAccessTokenRequest(BaseModel):
    """Refresh access token request."""

    user: User  # Authenticated caller
    refresh_token: str


class RefreshAccessTokenResponse(BaseModel):
    """Refresh access token response."""

    jwt: str


class RefreshAccessTokenUseCase(BaseUseCase):
    """Use case for minting a new access token from a refresh token."""

    def __init__(self, token_manager: TokenManagerService) -> None:
        """Initialize refresh access token use case.

        Args:
            token_manager: Token lifecycle domain service
        """
        self.token_manager = token_manager

    async def execute(
        self, request: RefreshAccessTokenRequest
    ) -> RefreshAccessTokenResponse:
        """Execute refresh flow.

        Raises:
            TokenManagerError: REFRESH_TOKEN_MISMATCH or REFRESH_TOKEN_EXPIRED
        """
        jwt = await self.token_manager.refresh(request.user, request.refresh_token)
        return RefreshAccessTokenResponse(jwt=jwt)
