"""Idea routes."""

import logging
from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Response, status
from pydantic import BaseModel

from ideapool.application.usecase.auth import AuthenticateUseCase
from ideapool.application.usecase.idea import (
    CreateIdeaUseCase,
    DeleteIdeaUseCase,
    GetIdeaUseCase,
    ListIdeasUseCase,
    UpdateIdeaUseCase,
)
from ideapool.application.usecase.idea.common import IdeaResponse
from ideapool.application.usecase.idea.create_idea import CreateIdeaRequest
from ideapool.application.usecase.idea.delete_idea import DeleteIdeaRequest
from ideapool.application.usecase.idea.get_idea import GetIdeaRequest
from ideapool.application.usecase.idea.list_ideas import ListIdeasRequest
from ideapool.application.usecase.idea.update_idea import UpdateIdeaRequest
from ideapool.domain.value import UserId
from ideapool.interface.api.auth import authenticate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ideas", tags=["ideas"], route_class=DishkaRoute)


class IdeaAPIRequest(BaseModel):
    """API request for creating or replacing an idea.

    The four scoring fields must be present. Their values are checked by
    the idea model, so they are accepted here as sent.
    """

    content: Any
    impact: Any
    ease: Any
    confidence: Any
    created_at: Any = None


@router.post("", response_model=IdeaResponse, status_code=status.HTTP_200_OK)
async def create_idea(
    request: IdeaAPIRequest,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    create_idea_use_case: FromDishka[CreateIdeaUseCase],
    x_access_token: str | None = Header(default=None),
) -> IdeaResponse:
    """Add an idea to the caller's pool.

    Returns:
        The stored idea with its id and average score
    """
    user = await authenticate(authenticate_use_case, x_access_token)
    return await create_idea_use_case.execute(
        CreateIdeaRequest(user_id=UserId(user.id), **request.model_dump())
    )


@router.get("", response_model=list[IdeaResponse])
async def list_ideas(
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    list_ideas_use_case: FromDishka[ListIdeasUseCase],
    page: str | None = None,
    last: str | None = None,
    x_access_token: str | None = Header(default=None),
) -> list[IdeaResponse]:
    """List the caller's ideas, highest average score first.

    Args:
        page: 1-based page number, 10 ideas per page
        last: Average score of the last idea already received. Returns the
            ideas scoring below it and takes precedence over ``page``.
    """
    user = await authenticate(authenticate_use_case, x_access_token)
    result = await list_ideas_use_case.execute(
        ListIdeasRequest(user_id=UserId(user.id), page=page, last=last)
    )
    return result.ideas


@router.get("/{idea_id}", response_model=IdeaResponse)
async def get_idea(
    idea_id: str,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    get_idea_use_case: FromDishka[GetIdeaUseCase],
    x_access_token: str | None = Header(default=None),
) -> IdeaResponse:
    """Get one of the caller's ideas."""
    user = await authenticate(authenticate_use_case, x_access_token)
    return await get_idea_use_case.execute(
        GetIdeaRequest(user_id=UserId(user.id), idea_id=idea_id)
    )


@router.put("/{idea_id}", response_model=IdeaResponse)
async def update_idea(
    idea_id: str,
    request: IdeaAPIRequest,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    update_idea_use_case: FromDishka[UpdateIdeaUseCase],
    x_access_token: str | None = Header(default=None),
) -> IdeaResponse:
    """Replace the content and scores of one of the caller's ideas.

    The creation time is kept unless the request sets ``created_at``.
    """
    user = await authenticate(authenticate_use_case, x_access_token)
    logger.info(f"Updating idea {idea_id}")
    return await update_idea_use_case.execute(
        UpdateIdeaRequest(
            user_id=UserId(user.id), idea_id=idea_id, **request.model_dump()
        )
    )


@router.delete("/{idea_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_idea(
    idea_id: str,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    delete_idea_use_case: FromDishka[DeleteIdeaUseCase],
    x_access_token: str | None = Header(default=None),
) -> Response:
    """Delete one of the caller's ideas."""
    user = await authenticate(authenticate_use_case, x_access_token)
    logger.info(f"Deleting idea {idea_id}")
    await delete_idea_use_case.execute(
        DeleteIdeaRequest(user_id=UserId(user.id), idea_id=idea_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
