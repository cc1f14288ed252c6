"""Authenticate request use case."""

import logfire
from pydantic import BaseModel

from ideapool.application.usecase.base import BaseUseCase
from ideapool.domain.error import ErrorKind, IdeaPoolError, RequestError
from ideapool.domain.model import User
from ideapool.domain.service import TokenManagerService, UserService

BEARER_PREFIX = "Bearer"


class AuthenticateRequest(BaseModel):
    """Authenticate request."""

    access_token: str | None = None  # Raw X-Access-Token header value
    is_refresh_request: bool = False  # Expired tokens may still be refreshed


class AuthenticateResponse(BaseModel):
    """Authenticated caller."""

    user: User
    access_token: str


class AuthenticateUseCase(BaseUseCase):
    """Use case for resolving the caller of an authenticated endpoint."""

    def __init__(
        self, token_manager: TokenManagerService, user_service: UserService
    ) -> None:
        """Initialize authenticate use case.

        Args:
            token_manager: Token lifecycle domain service
            user_service: User domain service
        """
        self.token_manager = token_manager
        self.user_service = user_service

    async def execute(self, request: AuthenticateRequest) -> AuthenticateResponse:
        """Execute authentication flow.

        Steps:
        1. Strip an optional ``Bearer`` prefix from the header value
        2. Verify the access token signature and expiry
        3. Check it is the token currently stored for its user

        Args:
            request: Request with the raw header value

        Returns:
            The stored user and the bare access token

        Raises:
            RequestError: UNAUTHORIZED, with the underlying reason appended
                to the message
        """
        with logfire.span(
            "authenticate.execute", is_refresh_request=request.is_refresh_request
        ):
            try:
                token = _bare_token(request.access_token)
                payload = self.token_manager.verify(
                    token, is_refresh_request=request.is_refresh_request
                )
                user = await self.user_service.verify_user_and_token(
                    payload.email, token
                )
            except IdeaPoolError as e:
                logfire.warn("Authentication failed", kind=e.kind.value)
                raise RequestError(
                    ErrorKind.UNAUTHORIZED,
                    f"{ErrorKind.UNAUTHORIZED.default_message} : {e.message}",
                ) from e

            return AuthenticateResponse(user=user, access_token=token)


def _bare_token(header: str | None) -> str:
    if header is None or not header.strip():
        raise RequestError(ErrorKind.MISSING_ACCESS_TOKEN)
    token = header.strip()
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX) :].strip()
    if not token:
        raise RequestError(ErrorKind.MISSING_ACCESS_TOKEN)
    return token
