"""User routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from ideapool.application.usecase.user import SignUpUseCase
from ideapool.application.usecase.user.sign_up import SignUpRequest, SignUpResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class SignUpAPIRequest(BaseModel):
    """API request for signing up."""

    email: str
    name: str
    password: str


@router.post("", response_model=SignUpResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(
    request: SignUpAPIRequest,
    sign_up_use_case: FromDishka[SignUpUseCase],
) -> SignUpResponse:
    """Create an account and sign it in.

    Args:
        request: Email, display name and password
        sign_up_use_case: Sign up use case from DI

    Returns:
        The new user's access and refresh tokens
    """
    logger.info("Sign up requested")
    return await sign_up_use_case.execute(
        SignUpRequest(email=request.email, name=request.name, password=request.password)
    )
