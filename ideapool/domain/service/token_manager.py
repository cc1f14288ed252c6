"""Token lifecycle domain service."""

import secrets

import logfire

from ideapool.config import AuthSettings
from ideapool.domain.error import (
    ErrorKind,
    IdeaPoolError,
    NotFoundError,
    TokenManagerError,
)
from ideapool.domain.model import User
from ideapool.domain.repository import UserRepository
from ideapool.domain.value import TokenPair
from ideapool.util.jwt import (
    TokenPayload,
    create_access_token,
    create_refresh_token,
    has_refresh_token_expired,
    verify_access_token,
)

from .base import Service


class TokenManagerService(Service):
    """Issues, verifies, refreshes and revokes a user's tokens.

    A user holds at most one token pair. The stored refresh token is the
    only credential that can mint a new access token, and it is not
    rotated on refresh.
    """

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize token manager.

        Args:
            user_repository: User repository holding the stored tokens
            auth_settings: Authentication settings
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    def generate_tokens(self, user: User) -> TokenPair:
        """Mint a token pair without persisting it.

        Args:
            user: User the tokens are issued for

        Returns:
            New access and refresh tokens
        """
        return TokenPair(
            jwt=self._access_token_for(user),
            refresh_token=create_refresh_token(
                self.auth_settings.refresh_token_expiry_hours
            ),
        )

    def verify(
        self, access_token: str, is_refresh_request: bool = False
    ) -> TokenPayload:
        """Verify an access token.

        Args:
            access_token: JWT to verify
            is_refresh_request: Accept an expired token, so it can be refreshed

        Returns:
            Token payload

        Raises:
            TokenManagerError: MALFORMED_ACCESS_TOKEN, TOKEN_EXPIRED or
                TOKEN_MANAGER_ERROR
        """
        with logfire.span(
            "token_manager.verify", is_refresh_request=is_refresh_request
        ):
            try:
                return verify_access_token(
                    access_token,
                    self.auth_settings,
                    ignore_expiration=is_refresh_request,
                )
            except TokenManagerError as e:
                logfire.warn("Access token rejected", kind=e.kind.value)
                raise

    async def create(self, user: User) -> TokenPair:
        """Issue and persist a fresh token pair, replacing any existing one.

        Args:
            user: Signed-in user

        Returns:
            New access and refresh tokens

        Raises:
            TokenManagerError: TOKEN_USER_NOT_FOUND if the user is gone,
                TOKEN_MANAGER_ERROR for any other storage failure
        """
        with logfire.span("token_manager.create", email=user.email):
            tokens = self.generate_tokens(user)
            await self._store(user, tokens.jwt, tokens.refresh_token)
            logfire.info("Token pair issued", email=user.email)
            return tokens

    async def refresh(self, user: User, refresh_token: str) -> str:
        """Mint a new access token from the stored refresh token.

        Args:
            user: User as currently stored
            refresh_token: Refresh token presented by the client

        Returns:
            New access token

        Raises:
            TokenManagerError: REFRESH_TOKEN_MISMATCH, REFRESH_TOKEN_EXPIRED,
                TOKEN_USER_NOT_FOUND or TOKEN_MANAGER_ERROR
        """
        with logfire.span("token_manager.refresh", email=user.email):
            self._check_refresh_token(user, refresh_token)
            access_token = self._access_token_for(user)
            await self._store(user, access_token, user.refresh_token)
            logfire.info("Access token refreshed", email=user.email)
            return access_token

    async def delete(self, user: User, refresh_token: str) -> None:
        """Revoke the user's token pair.

        Args:
            user: User as currently stored
            refresh_token: Refresh token presented by the client

        Raises:
            TokenManagerError: REFRESH_TOKEN_MISMATCH, REFRESH_TOKEN_EXPIRED,
                TOKEN_USER_NOT_FOUND or TOKEN_MANAGER_ERROR
        """
        with logfire.span("token_manager.delete", email=user.email):
            self._check_refresh_token(user, refresh_token)
            await self._store(user, None, None)
            logfire.info("Token pair revoked", email=user.email)

    def _check_refresh_token(self, user: User, presented: str) -> None:
        if not _tokens_match(user.refresh_token, presented):
            logfire.warn("Refresh token mismatch", email=user.email)
            raise TokenManagerError(ErrorKind.REFRESH_TOKEN_MISMATCH)
        if has_refresh_token_expired(presented):
            logfire.warn("Refresh token expired", email=user.email)
            raise TokenManagerError(ErrorKind.REFRESH_TOKEN_EXPIRED)

    def _access_token_for(self, user: User) -> str:
        return create_access_token(
            email=user.email or "",
            name=user.name or "",
            user_id=str(user.id),
            settings=self.auth_settings,
        )

    async def _store(
        self, user: User, access_token: str | None, refresh_token: str | None
    ) -> None:
        try:
            await self.user_repository.update_tokens(
                user.email or "", access_token, refresh_token
            )
        except NotFoundError as e:
            logfire.warn("Token owner not found", email=user.email)
            raise TokenManagerError(ErrorKind.TOKEN_USER_NOT_FOUND) from e
        except IdeaPoolError:
            raise
        except Exception as e:
            logfire.error("Token storage failed", email=user.email, error=str(e))
            raise TokenManagerError(ErrorKind.TOKEN_MANAGER_ERROR, str(e)) from e


def _tokens_match(stored: str | None, presented: str | None) -> bool:
    if stored is None or presented is None:
        return False
    return secrets.compare_digest(stored.encode("utf-8"), presented.encode("utf-8"))
