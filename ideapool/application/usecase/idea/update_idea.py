"""Update idea use case."""

from ideapool.application.usecase.idea.common import IdeaFields, IdeaResponse
from ideapool.domain.service import IdeaService
from ideapool.domain.value import UserId


class UpdateIdeaRequest(IdeaFields):
    """Update idea request."""

    user_id: UserId  # Owner, the authenticated caller
    idea_id: str | None = None


class UpdateIdeaUseCase:
    """Use case for replacing an idea's content and scores."""

    def __init__(self, idea_service: IdeaService) -> None:
        """Initialize update idea use case.

        Args:
            idea_service: Idea domain service
        """
        self.idea_service = idea_service

    async def execute(self, request: UpdateIdeaRequest) -> IdeaResponse:
        """Execute update idea flow.

        Raises:
            ModelValidationError: If a field is rejected
            IdeaError: IDEA_ID_MISSING, IDEA_NOT_FOUND or IDEA_UPDATE_ERROR
        """
        idea_id = self.idea_service.parse_id(request.idea_id)
        idea = await self.idea_service.update(
            request.user_id, idea_id, request.to_fields()
        )
        return IdeaResponse.from_idea(idea)
