"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ideapool.domain.model.user import User


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Store a new user.

        Args:
            user: The user to create, with its id assigned

        Returns:
            The stored user

        Raises:
            DuplicateError: If a user with the same email exists
        """
        pass

    @abstractmethod
    async def update_tokens(
        self, email: str, access_token: str | None, refresh_token: str | None
    ) -> User:
        """Replace both stored tokens of a user.

        Passing None for both signs the user out.

        Args:
            email: The user's email address
            access_token: New access token, or None
            refresh_token: New refresh token, or None

        Returns:
            The updated user

        Raises:
            NotFoundError: If no user has this email
        """
        pass

    @abstractmethod
    async def delete(self, email: str) -> None:
        """Delete a user.

        Args:
            email: The user's email address

        Raises:
            NotFoundError: If no user has this email
        """
        pass
