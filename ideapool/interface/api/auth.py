"""Access token handling shared by authenticated routes."""

from ideapool.application.usecase.auth import AuthenticateUseCase
from ideapool.application.usecase.auth.authenticate import AuthenticateRequest
from ideapool.domain.model import User

ACCESS_TOKEN_HEADER = "X-Access-Token"


async def authenticate(
    authenticate_use_case: AuthenticateUseCase,
    access_token: str | None,
    is_refresh_request: bool = False,
) -> User:
    """Resolve the caller from the ``X-Access-Token`` header value.

    Args:
        authenticate_use_case: Authenticate use case from DI
        access_token: Raw header value, possibly ``Bearer``-prefixed
        is_refresh_request: Accept an expired token (refresh endpoint only)

    Returns:
        The stored user the token belongs to

    Raises:
        RequestError: UNAUTHORIZED or MISSING_ACCESS_TOKEN
    """
    result = await authenticate_use_case.execute(
        AuthenticateRequest(
            access_token=access_token, is_refresh_request=is_refresh_request
        )
    )
    return result.user
