"""Access token routes: sign in, refresh and sign out."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Response, status
from pydantic import BaseModel

from ideapool.application.usecase.auth import (
    AuthenticateUseCase,
    RefreshAccessTokenUseCase,
    SignInUseCase,
    SignOutUseCase,
)
from ideapool.application.usecase.auth.refresh_access_token import (
    RefreshAccessTokenRequest,
    RefreshAccessTokenResponse,
)
from ideapool.application.usecase.auth.sign_in import SignInRequest, SignInResponse
from ideapool.application.usecase.auth.sign_out import SignOutRequest
from ideapool.interface.api.auth import authenticate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/access-tokens", tags=["access tokens"], route_class=DishkaRoute
)


class SignInAPIRequest(BaseModel):
    """API request for signing in."""

    email: str
    password: str


class RefreshTokenAPIRequest(BaseModel):
    """API request carrying the caller's refresh token."""

    refresh_token: str


@router.post("", response_model=SignInResponse, status_code=status.HTTP_201_CREATED)
async def sign_in(
    request: SignInAPIRequest,
    sign_in_use_case: FromDishka[SignInUseCase],
) -> SignInResponse:
    """Sign in with email and password.

    Any token pair the user already holds stops working.

    Returns:
        A fresh access and refresh token pair
    """
    return await sign_in_use_case.execute(
        SignInRequest(email=request.email, password=request.password)
    )


@router.post("/refresh", response_model=RefreshAccessTokenResponse)
async def refresh_access_token(
    request: RefreshTokenAPIRequest,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    refresh_use_case: FromDishka[RefreshAccessTokenUseCase],
    x_access_token: str | None = Header(default=None),
) -> RefreshAccessTokenResponse:
    """Mint a new access token.

    The presented access token may already be expired, but it must still be
    the one stored for the user.

    Returns:
        The new access token. The refresh token is unchanged.
    """
    user = await authenticate(
        authenticate_use_case, x_access_token, is_refresh_request=True
    )
    logger.info("Refreshing access token")
    return await refresh_use_case.execute(
        RefreshAccessTokenRequest(user=user, refresh_token=request.refresh_token)
    )


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    request: RefreshTokenAPIRequest,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    sign_out_use_case: FromDishka[SignOutUseCase],
    x_access_token: str | None = Header(default=None),
) -> Response:
    """Sign out, revoking both tokens."""
    user = await authenticate(authenticate_use_case, x_access_token)
    await sign_out_use_case.execute(
        SignOutRequest(user=user, refresh_token=request.refresh_token)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
