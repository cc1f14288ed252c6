"""In-memory user repository for testing."""

from typing import Optional

from ideapool.domain.error import DuplicateError, NotFoundError
from ideapool.domain.model.user import User
from ideapool.domain.repository.user import UserRepository


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        return self._users.get(email)

    async def create(self, user: User) -> User:
        """Store a new user, rejecting duplicate emails."""
        email = user.email or ""
        if email in self._users:
            raise DuplicateError("User", email)
        self._users[email] = user
        return user

    async def update_tokens(
        self, email: str, access_token: str | None, refresh_token: str | None
    ) -> User:
        """Replace both stored tokens of a user."""
        user = self._users.get(email)
        if user is None:
            raise NotFoundError("User", email)
        updated = user.model_copy(
            update={"access_token": access_token, "refresh_token": refresh_token}
        )
        self._users[email] = updated
        return updated

    async def delete(self, email: str) -> None:
        """Delete a user."""
        if self._users.pop(email, None) is None:
            raise NotFoundError("User", email)
