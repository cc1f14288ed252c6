"""Sign in use case."""

import logfire
from pydantic import BaseModel

from ideapool.application.usecase.base import BaseUseCase
from ideapool.domain.service import TokenManagerService, UserService


class SignInRequest(BaseModel):
    """Sign in request."""

    email: str
    password: str


class SignInResponse(BaseModel):
    """Sign in response."""

    jwt: str
    refresh_token: str


class SignInUseCase(BaseUseCase):
    """Use case for exchanging credentials for a token pair."""

    def __init__(
        self, user_service: UserService, token_manager: TokenManagerService
    ) -> None:
        """Initialize sign in use case.

        Args:
            user_service: User domain service
            token_manager: Token lifecycle domain service
        """
        self.user_service = user_service
        self.token_manager = token_manager

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Execute sign in flow.

        Any token pair the user already holds is replaced.

        Raises:
            UserServiceError: USER_NOT_FOUND or INVALID_PASSWORD
            TokenManagerError: If the new tokens cannot be stored
        """
        with logfire.span("sign_in.execute", email=request.email):
            user = await self.user_service.validate_credentials(
                request.email, request.password
            )
            tokens = await self.token_manager.create(user)
            logfire.info("User signed in", email=request.email)
            return SignInResponse(jwt=tokens.jwt, refresh_token=tokens.refresh_token)
