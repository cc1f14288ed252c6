"""In-memory idea repository for testing."""

from typing import Optional
from uuid import uuid4

from ideapool.domain.error import NotFoundError
from ideapool.domain.model.idea import Idea
from ideapool.domain.repository.idea import IdeaRepository
from ideapool.domain.value import IdeaId, UserId


class InMemoryIdeaRepository(IdeaRepository):
    """In-memory implementation of IdeaRepository for testing.

    Each user owns a separate dict of ideas, kept in insertion order.
    """

    def __init__(self) -> None:
        self._partitions: dict[UserId, dict[IdeaId, Idea]] = {}

    def _partition(self, user_id: UserId) -> dict[IdeaId, Idea]:
        return self._partitions.setdefault(user_id, {})

    def _ranked(self, user_id: UserId) -> list[Idea]:
        # sorted() is stable, so ties keep insertion order
        return sorted(
            self._partition(user_id).values(),
            key=lambda idea: idea.average_score,
            reverse=True,
        )

    async def insert(self, user_id: UserId, idea: Idea) -> Idea:
        """Store a new idea under a fresh id."""
        stored = idea.with_id(IdeaId(uuid4()))
        self._partition(user_id)[stored.id] = stored
        return stored

    async def update(self, user_id: UserId, idea: Idea) -> Idea:
        """Replace a stored idea."""
        partition = self._partition(user_id)
        if idea.id is None or idea.id not in partition:
            raise NotFoundError("Idea", str(idea.id))
        partition[idea.id] = idea
        return idea

    async def find_by_id(self, user_id: UserId, idea_id: IdeaId) -> Optional[Idea]:
        """Find an idea in the user's partition."""
        return self._partition(user_id).get(idea_id)

    async def find_by_user(
        self, user_id: UserId, below: float | None = None, limit: int = 10
    ) -> list[Idea]:
        """List ideas by descending average score."""
        ideas = self._ranked(user_id)
        if below is not None:
            ideas = [idea for idea in ideas if idea.average_score < below]
        return ideas[:limit]

    async def count_by_user(self, user_id: UserId) -> int:
        """Count the user's ideas."""
        return len(self._partition(user_id))

    async def find_score_at(self, user_id: UserId, offset: int) -> Optional[float]:
        """Average score at a zero-based position of the ranking."""
        ranked = self._ranked(user_id)
        if offset < 0 or offset >= len(ranked):
            return None
        return ranked[offset].average_score

    async def delete(self, user_id: UserId, idea_id: IdeaId) -> None:
        """Delete an idea from the user's partition."""
        if self._partition(user_id).pop(idea_id, None) is None:
            raise NotFoundError("Idea", str(idea_id))

    async def delete_all_for_user(self, user_id: UserId) -> int:
        """Drop the user's partition."""
        return len(self._partitions.pop(user_id, {}))
