"""Sign up use case."""

import logfire
from pydantic import BaseModel

from ideapool.application.usecase.base import BaseUseCase
from ideapool.domain.service import TokenManagerService, UserService


class SignUpRequest(BaseModel):
    """Sign up request."""

    email: str
    name: str
    password: str


class SignUpResponse(BaseModel):
    """Sign up response, the new user is signed in."""

    jwt: str
    refresh_token: str


class SignUpUseCase(BaseUseCase):
    """Use case for creating an account."""

    def __init__(
        self, user_service: UserService, token_manager: TokenManagerService
    ) -> None:
        """Initialize sign up use case.

        Args:
            user_service: User domain service
            token_manager: Token lifecycle domain service
        """
        self.user_service = user_service
        self.token_manager = token_manager

    async def execute(self, request: SignUpRequest) -> SignUpResponse:
        """Execute sign up flow.

        Steps:
        1. Validate email, name and password policy, hash the password
        2. Mint a token pair for the new user
        3. Store the user together with the tokens

        Raises:
            ModelValidationError: If a field is rejected
            UserServiceError: USER_EXISTS
        """
        with logfire.span("sign_up.execute", email=request.email):
            user = self.user_service.new_user(
                request.email, request.name, request.password
            )
            tokens = self.token_manager.generate_tokens(user)
            await self.user_service.register(
                user.with_tokens(tokens.jwt, tokens.refresh_token)
            )
            return SignUpResponse(jwt=tokens.jwt, refresh_token=tokens.refresh_token)
