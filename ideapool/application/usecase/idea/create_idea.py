"""Create idea use case."""

from ideapool.application.usecase.idea.common import IdeaFields, IdeaResponse
from ideapool.domain.service import IdeaService
from ideapool.domain.value import UserId


class CreateIdeaRequest(IdeaFields):
    """Create idea request."""

    user_id: UserId  # Owner, the authenticated caller


class CreateIdeaUseCase:
    """Use case for adding an idea to the caller's pool."""

    def __init__(self, idea_service: IdeaService) -> None:
        """Initialize create idea use case.

        Args:
            idea_service: Idea domain service
        """
        self.idea_service = idea_service

    async def execute(self, request: CreateIdeaRequest) -> IdeaResponse:
        """Execute create idea flow.

        Args:
            request: Idea fields and owner

        Returns:
            The stored idea with its id and average score

        Raises:
            ModelValidationError: If a field is rejected
            IdeaError: IDEA_INSERT_ERROR
        """
        idea = await self.idea_service.create(request.user_id, request.to_fields())
        return IdeaResponse.from_idea(idea)
