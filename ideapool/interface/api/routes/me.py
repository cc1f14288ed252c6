"""Current user routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Response, status

from ideapool.application.usecase.auth import AuthenticateUseCase
from ideapool.application.usecase.user import DeleteAccountUseCase, GetProfileUseCase
from ideapool.application.usecase.user.delete_account import DeleteAccountRequest
from ideapool.application.usecase.user.get_profile import (
    GetProfileRequest,
    GetProfileResponse,
)
from ideapool.interface.api.auth import authenticate

router = APIRouter(prefix="/me", tags=["current user"], route_class=DishkaRoute)


@router.get("", response_model=GetProfileResponse)
async def get_profile(
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    get_profile_use_case: FromDishka[GetProfileUseCase],
    x_access_token: str | None = Header(default=None),
) -> GetProfileResponse:
    """Get the caller's email, display name and avatar."""
    user = await authenticate(authenticate_use_case, x_access_token)
    return await get_profile_use_case.execute(GetProfileRequest(user=user))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
    x_access_token: str | None = Header(default=None),
) -> Response:
    """Delete the caller's account together with all their ideas."""
    user = await authenticate(authenticate_use_case, x_access_token)
    await delete_account_use_case.execute(DeleteAccountRequest(user=user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
