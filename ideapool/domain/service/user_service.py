"""User domain service."""

import secrets
from uuid import uuid4

import logfire

from ideapool.domain.error import (
    DuplicateError,
    ErrorKind,
    IdeaPoolError,
    NotFoundError,
    TokenManagerError,
    UserServiceError,
)
from ideapool.domain.model import User
from ideapool.domain.repository import IdeaRepository, UserRepository
from ideapool.domain.value import UserId
from ideapool.util.password import PasswordHasher

from .base import Service


class UserService(Service):
    """Domain service for user accounts and credentials."""

    def __init__(
        self,
        user_repository: UserRepository,
        idea_repository: IdeaRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            idea_repository: Idea repository, for removing a user's ideas
            password_hasher: Password hashing primitive
        """
        self.user_repository = user_repository
        self.idea_repository = idea_repository
        self.password_hasher = password_hasher

    def new_user(self, email: str, name: str, password: str) -> User:
        """Build a validated, unsaved user.

        The avatar defaults to the Gravatar for the email.

        Raises:
            ModelValidationError: If any field is rejected
        """
        return (
            User(id=UserId(uuid4()))
            .with_email(email)
            .with_name(name)
            .with_password(password, self.password_hasher.hash)
            .with_avatar_url()
        )

    async def register(self, user: User) -> User:
        """Store a new user.

        Raises:
            UserServiceError: USER_EXISTS if the email is taken
        """
        with logfire.span("user_service.register", email=user.email):
            try:
                created = await self.user_repository.create(user)
            except DuplicateError as e:
                logfire.warn("User already exists", email=user.email)
                raise UserServiceError(ErrorKind.USER_EXISTS) from e
            except IdeaPoolError:
                raise
            except Exception as e:
                logfire.error("User creation failed", email=user.email, error=str(e))
                raise UserServiceError(ErrorKind.USER_SERVICE_ERROR, str(e)) from e
            logfire.info("User registered", email=user.email, user_id=str(user.id))
            return created

    async def get_by_email(self, email: str) -> User:
        """Get user by email.

        Raises:
            UserServiceError: USER_NOT_FOUND
        """
        with logfire.span("user_service.get_by_email", email=email):
            user = await self.user_repository.find_by_email(email)
            if user is None:
                logfire.warn("User not found", email=email)
                raise UserServiceError(ErrorKind.USER_NOT_FOUND)
            return user

    async def validate_credentials(self, email: str, password: str) -> User:
        """Check an email and password pair.

        Unknown emails are reported with status 401 so sign-in failures
        look alike to the client.

        Raises:
            UserServiceError: USER_NOT_FOUND or INVALID_PASSWORD
        """
        with logfire.span("user_service.validate_credentials", email=email):
            user = await self.user_repository.find_by_email(email)
            if user is None:
                logfire.warn("Sign-in for unknown user", email=email)
                raise UserServiceError(ErrorKind.USER_NOT_FOUND, status_code=401)
            if not self.password_hasher.verify(password, user.password):
                logfire.warn("Wrong password", email=email)
                raise UserServiceError(ErrorKind.INVALID_PASSWORD)
            return user

    async def verify_user_and_token(self, email: str, access_token: str) -> User:
        """Confirm the presented access token is the one stored for the user.

        Raises:
            UserServiceError: USER_NOT_FOUND
            TokenManagerError: USER_LOGGED_OUT if the user holds no token,
                TOKEN_MISMATCH if a different token is stored
        """
        user = await self.get_by_email(email)
        if user.access_token is None:
            logfire.warn("Token presented for signed-out user", email=email)
            raise TokenManagerError(ErrorKind.USER_LOGGED_OUT)
        if not secrets.compare_digest(
            user.access_token.encode("utf-8"), access_token.encode("utf-8")
        ):
            logfire.warn("Access token mismatch", email=email)
            raise TokenManagerError(ErrorKind.TOKEN_MISMATCH)
        return user

    async def delete_account(self, user: User) -> int:
        """Delete a user and then every idea they own.

        The two steps run in order. Inside a database transaction they
        commit together. Stores without transactions may keep orphaned
        ideas if the second step fails.

        Returns:
            Number of ideas removed

        Raises:
            UserServiceError: USER_NOT_FOUND or FAILED_REMOVE_IDEAS
        """
        with logfire.span(
            "user_service.delete_account", email=user.email, user_id=str(user.id)
        ):
            try:
                await self.user_repository.delete(user.email or "")
            except NotFoundError as e:
                raise UserServiceError(ErrorKind.USER_NOT_FOUND) from e

            try:
                removed = await self.idea_repository.delete_all_for_user(
                    UserId(user.id)
                )
            except Exception as e:
                logfire.error(
                    "Failed to remove ideas", user_id=str(user.id), error=str(e)
                )
                raise UserServiceError(ErrorKind.FAILED_REMOVE_IDEAS, str(e)) from e

            logfire.info("Account deleted", email=user.email, ideas_removed=removed)
            return removed
