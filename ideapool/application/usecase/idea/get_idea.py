"""Get idea use case."""

from pydantic import BaseModel

from ideapool.application.usecase.idea.common import IdeaResponse
from ideapool.domain.service import IdeaService
from ideapool.domain.value import UserId


class GetIdeaRequest(BaseModel):
    """Get idea request."""

    user_id: UserId
    idea_id: str | None = None


class GetIdeaUseCase:
    """Use case for reading one of the caller's ideas."""

    def __init__(self, idea_service: IdeaService) -> None:
        self.idea_service = idea_service

    async def execute(self, request: GetIdeaRequest) -> IdeaResponse:
        idea_id = self.idea_service.parse_id(request.idea_id)
        idea = await self.idea_service.get(request.user_id, idea_id)
        return IdeaResponse.from_idea(idea)
