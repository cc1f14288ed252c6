"""PostgreSQL implementation of Idea repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ideapool.domain.error import NotFoundError
from ideapool.domain.model import Idea
from ideapool.domain.repository import IdeaRepository
from ideapool.domain.value import IdeaId, UserId
from ideapool.persistence.mappers import idea_to_dict, row_to_idea
from ideapool.persistence.tables import ideas_table


class PostgresIdeaRepository(IdeaRepository):
    """PostgreSQL implementation of IdeaRepository.

    The ``user_id`` column is the partition key: every statement filters
    on it.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert(self, user_id: UserId, idea: Idea) -> Idea:
        """Insert a new idea and return it with its generated id.

        Args:
            user_id: Owner of the idea
            idea: Idea to insert

        Returns:
            Stored idea
        """
        stmt = (
            ideas_table.insert()
            .values(**idea_to_dict(user_id, idea))
            .returning(*ideas_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_idea(dict(row))

    async def update(self, user_id: UserId, idea: Idea) -> Idea:
        """Replace a stored idea.

        Args:
            user_id: Owner of the idea
            idea: Idea with its id set

        Returns:
            Idea as stored

        Raises:
            NotFoundError: If the idea is not in the user's partition
        """
        values = idea_to_dict(user_id, idea)
        values.pop("id", None)
        stmt = (
            ideas_table.update()
            .where(ideas_table.c.user_id == user_id)
            .where(ideas_table.c.id == idea.id)
            .values(**values)
            .returning(*ideas_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            raise NotFoundError("Idea", str(idea.id))
        await self.session.flush()
        return row_to_idea(dict(row))

    async def find_by_id(self, user_id: UserId, idea_id: IdeaId) -> Optional[Idea]:
        """Find an idea in the user's partition.

        Args:
            user_id: Owner of the idea
            idea_id: Idea ID to look up

        Returns:
            Idea if found, None otherwise
        """
        stmt = (
            select(ideas_table)
            .where(ideas_table.c.user_id == user_id)
            .where(ideas_table.c.id == idea_id)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_idea(dict(row)) if row else None

    async def find_by_user(
        self, user_id: UserId, below: float | None = None, limit: int = 10
    ) -> list[Idea]:
        """List ideas by descending average score.

        Args:
            user_id: Owner of the ideas
            below: Only ideas scoring strictly below this value
            limit: Maximum number of ideas

        Returns:
            Ideas, highest score first
        """
        stmt = select(ideas_table).where(ideas_table.c.user_id == user_id)
        if below is not None:
            stmt = stmt.where(ideas_table.c.average_score < below)
        stmt = stmt.order_by(ideas_table.c.average_score.desc()).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_idea(dict(row)) for row in result.mappings().all()]

    async def count_by_user(self, user_id: UserId) -> int:
        """Count the user's ideas."""
        stmt = (
            select(func.count())
            .select_from(ideas_table)
            .where(ideas_table.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_score_at(self, user_id: UserId, offset: int) -> Optional[float]:
        """Average score at a zero-based position of the ranking."""
        stmt = (
            select(ideas_table.c.average_score)
            .where(ideas_table.c.user_id == user_id)
            .order_by(ideas_table.c.average_score.desc())
            .offset(offset)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete(self, user_id: UserId, idea_id: IdeaId) -> None:
        """Delete an idea from the user's partition.

        Raises:
            NotFoundError: If the idea is not in the user's partition
        """
        stmt = (
            ideas_table.delete()
            .where(ideas_table.c.user_id == user_id)
            .where(ideas_table.c.id == idea_id)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise NotFoundError("Idea", str(idea_id))
        await self.session.flush()

    async def delete_all_for_user(self, user_id: UserId) -> int:
        """Delete every idea in the user's partition."""
        stmt = ideas_table.delete().where(ideas_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
