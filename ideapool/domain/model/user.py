"""User aggregate root.

Users sign up with an email and password and hold at most one active
pair of access and refresh tokens.
"""

from typing import Any, Callable, Optional

from pydantic import field_validator

from ideapool.domain.error import ErrorKind, ModelValidationError
from ideapool.domain.model.common import DomainModel
from ideapool.domain.value import UserId
from ideapool.domain.value.types import (
    gravatar_url,
    validate_access_token,
    validate_email,
    validate_name,
    validate_password,
)


class User(DomainModel):
    """User aggregate root.

    ``password`` always holds a hash, never the plain text. Both tokens
    are set together on sign-in and cleared together on sign-out.
    """

    id: Optional[UserId] = None
    email: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None
    avatar_url: Optional[str] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v: Any) -> Any:
        return v if v is None else validate_email(v)

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v: Any) -> Any:
        return v if v is None else validate_name(v)

    @field_validator("access_token", mode="before")
    @classmethod
    def check_access_token(cls, v: Any) -> Any:
        return v if v is None else validate_access_token(v)

    @property
    def is_signed_in(self) -> bool:
        return self.access_token is not None

    def with_id(self, user_id: UserId) -> "User":
        return self.model_copy(update={"id": user_id})

    def with_email(self, value: Any) -> "User":
        return self.model_copy(update={"email": validate_email(value)})

    def with_name(self, value: Any) -> "User":
        return self.model_copy(update={"name": validate_name(value)})

    def with_password(self, plain: Any, hasher: Callable[[str], str]) -> "User":
        """Check the password policy, then store the hash.

        Args:
            plain: Plain-text password
            hasher: One-way hash function

        Raises:
            ModelValidationError: EMPTY_PASSWORD or WEAK_PASSWORD
        """
        return self.model_copy(update={"password": hasher(validate_password(plain))})

    def with_avatar_url(self, value: Optional[str] = None) -> "User":
        """Set the avatar, falling back to the Gravatar for the email.

        Raises:
            ModelValidationError: EMPTY_AVATAR_URL if no URL and no email
        """
        if value is not None and value.strip():
            return self.model_copy(update={"avatar_url": value})
        if self.email is None:
            raise ModelValidationError(ErrorKind.EMPTY_AVATAR_URL)
        return self.model_copy(update={"avatar_url": gravatar_url(self.email)})

    def with_access_token(self, value: Any) -> "User":
        return self.model_copy(
            update={"access_token": validate_access_token(value)}
        )

    def with_tokens(self, access_token: str, refresh_token: str) -> "User":
        return self.with_access_token(access_token).model_copy(
            update={"refresh_token": refresh_token}
        )

    def without_tokens(self) -> "User":
        return self.model_copy(update={"access_token": None, "refresh_token": None})
