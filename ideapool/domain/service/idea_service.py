"""Idea domain service."""

from typing import Any
from uuid import UUID

import logfire

from ideapool.domain.error import ErrorKind, IdeaError, IdeaPoolError, NotFoundError
from ideapool.domain.model import Idea
from ideapool.domain.repository import IdeaRepository
from ideapool.domain.value import IdeaId, IdeaPageQuery, UserId

from .base import Service
from .ranking_service import RankingService


class IdeaService(Service):
    """Domain service for a user's ideas.

    Model validation errors propagate unchanged. Storage failures are
    reported as the idea error kind of the failing operation.
    """

    def __init__(
        self, idea_repository: IdeaRepository, ranking_service: RankingService
    ) -> None:
        """Initialize idea service.

        Args:
            idea_repository: Idea repository
            ranking_service: Ranked listing of ideas
        """
        self.idea_repository = idea_repository
        self.ranking_service = ranking_service

    @staticmethod
    def parse_id(raw: str | None) -> IdeaId:
        """Parse an idea id taken from a request.

        Raises:
            IdeaError: IDEA_ID_MISSING if empty, IDEA_NOT_FOUND if it cannot
                name any idea
        """
        if raw is None or not raw.strip():
            raise IdeaError(ErrorKind.IDEA_ID_MISSING)
        try:
            return IdeaId(UUID(raw.strip()))
        except ValueError as e:
            raise IdeaError(ErrorKind.IDEA_NOT_FOUND) from e

    async def create(self, user_id: UserId, fields: dict[str, Any]) -> Idea:
        """Validate and store a new idea.

        Args:
            user_id: Owner of the idea
            fields: content, impact, ease, confidence and optionally created_at

        Returns:
            The stored idea

        Raises:
            ModelValidationError: If a field is rejected
            IdeaError: IDEA_INSERT_ERROR if storage fails
        """
        with logfire.span("idea_service.create", user_id=str(user_id)):
            idea = Idea(**fields)
            try:
                stored = await self.idea_repository.insert(user_id, idea)
            except Exception as e:
                logfire.error("Idea insert failed", user_id=str(user_id), error=str(e))
                raise IdeaError(ErrorKind.IDEA_INSERT_ERROR, str(e)) from e
            logfire.info(
                "Idea created",
                user_id=str(user_id),
                idea_id=str(stored.id),
                average_score=stored.average_score,
            )
            return stored

    async def update(
        self, user_id: UserId, idea_id: IdeaId, fields: dict[str, Any]
    ) -> Idea:
        """Replace the content and metrics of an idea.

        The creation time is kept unless ``fields`` sets it.

        Raises:
            ModelValidationError: If a field is rejected
            IdeaError: IDEA_NOT_FOUND or IDEA_UPDATE_ERROR
        """
        with logfire.span(
            "idea_service.update", user_id=str(user_id), idea_id=str(idea_id)
        ):
            existing = await self.get(user_id, idea_id)
            idea = Idea(
                **{"created_at": existing.created_at, **fields, "id": existing.id}
            )
            try:
                stored = await self.idea_repository.update(user_id, idea)
            except NotFoundError as e:
                raise IdeaError(ErrorKind.IDEA_NOT_FOUND) from e
            except Exception as e:
                logfire.error("Idea update failed", idea_id=str(idea_id), error=str(e))
                raise IdeaError(ErrorKind.IDEA_UPDATE_ERROR, str(e)) from e
            logfire.info("Idea updated", user_id=str(user_id), idea_id=str(idea_id))
            return stored

    async def delete(self, user_id: UserId, idea_id: IdeaId) -> None:
        """Delete an idea.

        Raises:
            IdeaError: IDEA_NOT_FOUND or IDEA_DELETE_ERROR
        """
        with logfire.span(
            "idea_service.delete", user_id=str(user_id), idea_id=str(idea_id)
        ):
            try:
                await self.idea_repository.delete(user_id, idea_id)
            except NotFoundError as e:
                logfire.warn("Idea not found", idea_id=str(idea_id))
                raise IdeaError(ErrorKind.IDEA_NOT_FOUND) from e
            except Exception as e:
                logfire.error("Idea delete failed", idea_id=str(idea_id), error=str(e))
                raise IdeaError(ErrorKind.IDEA_DELETE_ERROR, str(e)) from e
            logfire.info("Idea deleted", user_id=str(user_id), idea_id=str(idea_id))

    async def get(self, user_id: UserId, idea_id: IdeaId) -> Idea:
        """Get one idea.

        Raises:
            IdeaError: IDEA_NOT_FOUND or IDEA_RETRIEVAL_ERROR
        """
        try:
            idea = await self.idea_repository.find_by_id(user_id, idea_id)
        except IdeaPoolError:
            raise
        except Exception as e:
            raise IdeaError(ErrorKind.IDEA_RETRIEVAL_ERROR, str(e)) from e
        if idea is None:
            logfire.warn("Idea not found", idea_id=str(idea_id))
            raise IdeaError(ErrorKind.IDEA_NOT_FOUND)
        return idea

    async def list_ideas(
        self, user_id: UserId, query: IdeaPageQuery
    ) -> list[Idea]:
        """List a user's ideas by descending average score.

        Raises:
            IdeaError: IDEA_RETRIEVAL_ERROR if storage fails
        """
        return await self.ranking_service.list_ideas(user_id, query)
