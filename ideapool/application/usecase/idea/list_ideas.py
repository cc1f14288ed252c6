"""List ideas use case."""

import logfire
from pydantic import BaseModel

from ideapool.application.usecase.idea.common import IdeaResponse
from ideapool.domain.service import IdeaService
from ideapool.domain.value import IdeaPageQuery, UserId


class ListIdeasRequest(BaseModel):
    """List ideas request.

    ``page`` and ``last`` are the raw query-string values.
    """

    user_id: UserId
    page: str | None = None
    last: str | None = None  # Score of the last idea already seen


class ListIdeasResponse(BaseModel):
    """List ideas response."""

    ideas: list[IdeaResponse]


class ListIdeasUseCase:
    """Use case for paging through the caller's ideas, best first."""

    def __init__(self, idea_service: IdeaService) -> None:
        """Initialize list ideas use case.

        Args:
            idea_service: Idea domain service
        """
        self.idea_service = idea_service

    async def execute(self, request: ListIdeasRequest) -> ListIdeasResponse:
        """Execute list ideas flow.

        ``last`` wins over ``page`` when both are given.

        Raises:
            IdeaError: INVALID_LAST_SCORE, INVALID_PAGE_NUMBER or
                IDEA_RETRIEVAL_ERROR
        """
        with logfire.span(
            "list_ideas.execute",
            user_id=str(request.user_id),
            page=request.page,
            last=request.last,
        ):
            query = IdeaPageQuery.from_query(last=request.last, page=request.page)
            ideas = await self.idea_service.list_ideas(request.user_id, query)
            return ListIdeasResponse(
                ideas=[IdeaResponse.from_idea(idea) for idea in ideas]
            )
