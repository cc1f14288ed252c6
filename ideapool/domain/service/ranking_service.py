"""Idea ranking and pagination domain service."""

import logfire

from ideapool.config import PaginationSettings
from ideapool.domain.error import ErrorKind, IdeaError
from ideapool.domain.model import Idea
from ideapool.domain.repository import IdeaRepository
from ideapool.domain.value import IdeaPageQuery, UserId

from .base import Service


class RankingService(Service):
    """Serves a user's ideas ranked by average score, highest first.

    Pages are resolved to a score cursor: page ``p`` starts right after
    the idea at position ``(p - 1) * size - 1`` and returns the ideas
    scoring strictly below it. Ideas tied with that boundary score are
    skipped, and ties within a page come back in storage order.
    """

    def __init__(
        self,
        idea_repository: IdeaRepository,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize ranking service.

        Args:
            idea_repository: Idea repository
            pagination_settings: Page size configuration
        """
        self.idea_repository = idea_repository
        self.page_size = pagination_settings.page_size

    async def list_ideas(self, user_id: UserId, query: IdeaPageQuery) -> list[Idea]:
        """Return one page of a user's ranked ideas.

        A page past the end returns the last page instead, and a user with
        no ideas gets an empty list.

        Args:
            user_id: Owner of the ideas
            query: Cursor or page to return

        Returns:
            Up to ``page_size`` ideas, highest average score first

        Raises:
            IdeaError: IDEA_RETRIEVAL_ERROR if storage fails
        """
        with logfire.span(
            "ranking_service.list_ideas",
            user_id=str(user_id),
            last=query.last,
            page=query.page,
        ):
            try:
                if query.is_cursor:
                    ideas = await self.idea_repository.find_by_user(
                        user_id, below=query.last, limit=self.page_size
                    )
                else:
                    ideas = await self._page(user_id, query.page)
            except IdeaError:
                raise
            except Exception as e:
                logfire.error(
                    "Idea retrieval failed", user_id=str(user_id), error=str(e)
                )
                raise IdeaError(ErrorKind.IDEA_RETRIEVAL_ERROR, str(e)) from e

            logfire.info("Ideas listed", user_id=str(user_id), count=len(ideas))
            return ideas

    async def _page(self, user_id: UserId, page: int) -> list[Idea]:
        if page == 1:
            return await self.idea_repository.find_by_user(
                user_id, limit=self.page_size
            )

        total = await self.idea_repository.count_by_user(user_id)
        if total == 0:
            return []

        start = self.page_start(page, total)
        if start == 0:
            return await self.idea_repository.find_by_user(
                user_id, limit=self.page_size
            )

        boundary = await self.idea_repository.find_score_at(user_id, start - 1)
        if boundary is None:
            # Ideas were removed between the count and the lookup
            return []
        return await self.idea_repository.find_by_user(
            user_id, below=boundary, limit=self.page_size
        )

    def page_start(self, page: int, total: int) -> int:
        """Offset of the first idea on a page, clamped to the last page.

        Args:
            page: 1-based page number
            total: Number of ideas the user has

        Returns:
            Zero-based offset into the ranking
        """
        start = (page - 1) * self.page_size
        if total > 0 and start >= total:
            start = ((total - 1) // self.page_size) * self.page_size
        return start
