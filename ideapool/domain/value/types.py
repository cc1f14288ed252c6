"""Domain value objects and field rules for Idea Pool.

The ``validate_*`` functions hold the rules shared by the domain models.
Each one returns the accepted value or raises ``ModelValidationError``
with the matching ``ErrorKind``.
"""

import hashlib
import math
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ideapool.domain.error import ErrorKind, ModelValidationError
from ideapool.domain.value.common import ValueObject

MAX_CONTENT_LENGTH = 255
METRIC_MIN = 1
METRIC_MAX = 10

_EMAIL_ADAPTER = TypeAdapter(EmailStr)
_JWT_FORMAT = re.compile(
    r"^[A-Za-z0-9_-]+={0,2}\.[A-Za-z0-9_-]+={0,2}\.[A-Za-z0-9_-]+={0,2}$"
)
_GRAVATAR_URL = "https://www.gravatar.com/avatar/{digest}?d=mm&s=200"


class MetricName(str, Enum):
    """Scored dimensions of an idea."""

    IMPACT = "impact"
    EASE = "ease"
    CONFIDENCE = "confidence"


class TokenPair(ValueObject):
    """Access token plus the refresh token that can renew it."""

    jwt: str
    refresh_token: str


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_content(value: Any) -> str:
    if not isinstance(value, str):
        raise ModelValidationError(ErrorKind.CONTENT_NOT_STRING)
    if len(value) > MAX_CONTENT_LENGTH:
        raise ModelValidationError(ErrorKind.CONTENT_TOO_LONG)
    return value


def validate_metric(name: str, value: Any) -> int | float:
    """Check a score is a real number within the allowed range.

    Bools and numeric strings are not numbers. NaN never falls inside
    the range.
    """
    if not _is_number(value):
        raise ModelValidationError(
            ErrorKind.METRIC_NOT_NUMBER,
            f"{name} - {ErrorKind.METRIC_NOT_NUMBER.default_message}",
        )
    if not METRIC_MIN <= value <= METRIC_MAX:
        raise ModelValidationError(
            ErrorKind.METRIC_OUT_OF_RANGE,
            f"{name} - {ErrorKind.METRIC_OUT_OF_RANGE.default_message}",
        )
    return value


def validate_created_at(value: Any) -> int:
    """Check an epoch-seconds timestamp.

    Values that land in 1970 (UTC) are treated as unset clocks and
    rejected. Fractions of a second are dropped.
    """
    if not _is_number(value):
        raise ModelValidationError(ErrorKind.DATE_NOT_NUMBER)
    try:
        moment = datetime.fromtimestamp(value, tz=timezone.utc)
    except (ValueError, OverflowError, OSError) as e:
        raise ModelValidationError(ErrorKind.INVALID_DATE_VALUE) from e
    if moment.year == 1970:
        raise ModelValidationError(ErrorKind.INVALID_DATE_VALUE)
    return math.floor(value)


def validate_email(value: Any) -> str:
    if _is_blank(value):
        raise ModelValidationError(ErrorKind.EMPTY_EMAIL)
    if not isinstance(value, str):
        raise ModelValidationError(ErrorKind.INVALID_EMAIL_FORMAT)
    email = value.strip()
    try:
        _EMAIL_ADAPTER.validate_python(email)
    except PydanticValidationError as e:
        raise ModelValidationError(ErrorKind.INVALID_EMAIL_FORMAT) from e
    return email


def validate_password(value: Any) -> str:
    """Apply the password policy to a plain-text password."""
    if _is_blank(value) or not isinstance(value, str):
        raise ModelValidationError(ErrorKind.EMPTY_PASSWORD)
    if "password" in value.lower():
        raise ModelValidationError(ErrorKind.WEAK_PASSWORD)
    return value


def validate_name(value: Any) -> str:
    if _is_blank(value) or not isinstance(value, str):
        raise ModelValidationError(ErrorKind.EMPTY_NAME)
    return value


def validate_access_token(value: Any) -> str:
    if _is_blank(value) or not isinstance(value, str):
        raise ModelValidationError(ErrorKind.EMPTY_TOKEN)
    if not _JWT_FORMAT.match(value):
        raise ModelValidationError(ErrorKind.INVALID_TOKEN_FORMAT)
    return value


def gravatar_url(email: str) -> str:
    """Default avatar for an email address."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return _GRAVATAR_URL.format(digest=digest)
