"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ideapool.domain.error import DuplicateError, NotFoundError
from ideapool.domain.model import User
from ideapool.domain.repository import UserRepository
from ideapool.persistence.mappers import row_to_user, user_to_dict
from ideapool.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def create(self, user: User) -> User:
        """Insert a new user.

        The insert runs in a savepoint so a duplicate email leaves the
        request transaction usable.

        Args:
            user: User to create

        Returns:
            Created user

        Raises:
            DuplicateError: If the email is already registered
        """
        stmt = users_table.insert().values(**user_to_dict(user))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise DuplicateError("User", user.email or "") from e
        return user

    async def update_tokens(
        self, email: str, access_token: str | None, refresh_token: str | None
    ) -> User:
        """Replace both stored tokens of a user.

        Args:
            email: Email of the user to update
            access_token: New access token, or None
            refresh_token: New refresh token, or None

        Returns:
            Updated user

        Raises:
            NotFoundError: If no user has this email
        """
        stmt = (
            users_table.update()
            .where(users_table.c.email == email)
            .values(access_token=access_token, refresh_token=refresh_token)
            .returning(*users_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            raise NotFoundError("User", email)
        await self.session.flush()
        return row_to_user(dict(row))

    async def delete(self, email: str) -> None:
        """Delete a user.

        Ideas go with it through the ``ON DELETE CASCADE`` foreign key.

        Args:
            email: Email of the user to delete

        Raises:
            NotFoundError: If no user has this email
        """
        stmt = users_table.delete().where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise NotFoundError("User", email)
        await self.session.flush()
