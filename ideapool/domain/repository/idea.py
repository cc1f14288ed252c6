"""Idea repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ideapool.domain.model.idea import Idea
from ideapool.domain.value import IdeaId, UserId


class IdeaRepository(ABC):
    """Repository for Idea entities.

    Ideas are partitioned by owner: every operation takes the owning
    user's id and never sees ideas from another partition. Listings are
    ordered by ``average_score``, highest first.
    """

    @abstractmethod
    async def insert(self, user_id: UserId, idea: Idea) -> Idea:
        """Store a new idea.

        Args:
            user_id: Owner of the idea
            idea: The idea, without an id

        Returns:
            The stored idea with its id assigned
        """
        pass

    @abstractmethod
    async def update(self, user_id: UserId, idea: Idea) -> Idea:
        """Replace a stored idea.

        Args:
            user_id: Owner of the idea
            idea: The idea, with its id set

        Returns:
            The idea as stored

        Raises:
            NotFoundError: If the idea is not in the user's partition
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId, idea_id: IdeaId) -> Optional[Idea]:
        """Find one idea.

        Args:
            user_id: Owner of the idea
            idea_id: The idea's unique identifier

        Returns:
            The idea if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, below: float | None = None, limit: int = 10
    ) -> list[Idea]:
        """List a user's ideas by descending average score.

        Args:
            user_id: Owner of the ideas
            below: Only ideas scoring strictly below this value
            limit: Maximum number of ideas

        Returns:
            Up to ``limit`` ideas, highest score first
        """
        pass

    @abstractmethod
    async def count_by_user(self, user_id: UserId) -> int:
        """Count a user's ideas."""
        pass

    @abstractmethod
    async def find_score_at(self, user_id: UserId, offset: int) -> Optional[float]:
        """Average score of the idea at a position in the ranking.

        Args:
            user_id: Owner of the ideas
            offset: Zero-based position, highest score first

        Returns:
            The score, or None if the position is past the end
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, idea_id: IdeaId) -> None:
        """Delete one idea.

        Raises:
            NotFoundError: If the idea is not in the user's partition
        """
        pass

    @abstractmethod
    async def delete_all_for_user(self, user_id: UserId) -> int:
        """Drop a user's whole partition.

        Returns:
            Number of ideas removed
        """
        pass
