"""Delete idea use case."""

from pydantic import BaseModel

from ideapool.domain.service import IdeaService
from ideapool.domain.value import UserId


class DeleteIdeaRequest(BaseModel):
    """Delete idea request."""

    user_id: UserId
    idea_id: str | None = None


class DeleteIdeaUseCase:
    """Use case for removing one of the caller's ideas."""

    def __init__(self, idea_service: IdeaService) -> None:
        self.idea_service = idea_service

    async def execute(self, request: DeleteIdeaRequest) -> None:
        idea_id = self.idea_service.parse_id(request.idea_id)
        await self.idea_service.delete(request.user_id, idea_id)
