"""Access and refresh token utilities.

Access tokens are signed JWTs carrying the user's email, name and id.
Refresh tokens are opaque: base64 of ``"<uuid>:<expiry epoch ms>"``. They
are not signed, so they only mean something while they match the value
stored for the user.
"""

import base64
import binascii
import time
import uuid

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ideapool.config import AuthSettings
from ideapool.domain.error import ErrorKind, TokenManagerError

_REQUIRED_CLAIMS = ["email", "name", "id", "iat", "exp"]


class TokenPayload(BaseModel):
    """JWT token payload."""

    email: str
    name: str
    id: str
    iat: int
    exp: int


def create_access_token(
    email: str,
    name: str,
    user_id: str,
    settings: AuthSettings,
    now: int | None = None,
) -> str:
    """Create a signed access token.

    Identical inputs issued within the same second produce the same token.

    Args:
        email: User email
        name: User display name
        user_id: User ID
        settings: Authentication settings
        now: Issue time in epoch seconds, defaults to the current time

    Returns:
        Encoded JWT token
    """
    issued_at = int(time.time()) if now is None else now
    payload = {
        "email": email,
        "name": name,
        "id": user_id,
        "iat": issued_at,
        "exp": issued_at + settings.access_token_expiry_seconds,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_access_token(
    token: str, settings: AuthSettings, ignore_expiration: bool = False
) -> TokenPayload:
    """Verify and decode an access token.

    Args:
        token: JWT token to verify
        settings: Authentication settings
        ignore_expiration: Accept tokens past their ``exp`` claim

    Returns:
        Token payload if valid

    Raises:
        TokenManagerError: MALFORMED_ACCESS_TOKEN if the token cannot be
            decoded, TOKEN_EXPIRED if it has expired, TOKEN_MANAGER_ERROR
            for any other verification failure
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"verify_exp": not ignore_expiration, "require": _REQUIRED_CLAIMS},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError as e:
        raise TokenManagerError(ErrorKind.TOKEN_EXPIRED) from e
    # InvalidSignatureError subclasses DecodeError
    except jwt.InvalidSignatureError as e:
        raise TokenManagerError(ErrorKind.TOKEN_MANAGER_ERROR, str(e)) from e
    except jwt.DecodeError as e:
        raise TokenManagerError(ErrorKind.MALFORMED_ACCESS_TOKEN) from e
    except (jwt.InvalidTokenError, PydanticValidationError) as e:
        raise TokenManagerError(ErrorKind.TOKEN_MANAGER_ERROR, str(e)) from e


def create_refresh_token(ttl_hours: int, now_ms: int | None = None) -> str:
    """Mint an opaque refresh token.

    Args:
        ttl_hours: Lifetime in hours
        now_ms: Current time in epoch milliseconds, defaults to the clock

    Returns:
        base64 of ``"<uuid4>:<expiry epoch ms>"``
    """
    issued_ms = _now_ms() if now_ms is None else now_ms
    expiry_ms = issued_ms + ttl_hours * 60 * 60 * 1000
    raw = f"{uuid.uuid4()}:{expiry_ms}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def refresh_token_expiry(token: str | None) -> int:
    """Read the embedded expiry of a refresh token.

    Raises:
        TokenManagerError: If the token is missing or not a refresh token
    """
    if not token:
        raise TokenManagerError(ErrorKind.TOKEN_MANAGER_ERROR, "Missing refresh token")
    try:
        raw = base64.b64decode(token, validate=True).decode("utf-8")
        _, expiry = raw.rsplit(":", 1)
        return int(expiry)
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise TokenManagerError(
            ErrorKind.TOKEN_MANAGER_ERROR, "Invalid refresh token"
        ) from e


def has_refresh_token_expired(token: str | None, now_ms: int | None = None) -> bool:
    """Check whether a refresh token's embedded expiry has passed.

    Raises:
        TokenManagerError: If the token is missing or not a refresh token
    """
    current_ms = _now_ms() if now_ms is None else now_ms
    return refresh_token_expiry(token) < current_ms


def _now_ms() -> int:
    return int(time.time() * 1000)
