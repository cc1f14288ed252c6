"""Domain layer errors.

Every failure that reaches a client is an ``IdeaPoolError`` carrying an
``ErrorKind``. The kind owns the default message, the HTTP status and the
category reported as ``type`` in error responses. The exception subclasses
only group kinds into families so callers can catch a whole category.

``NotFoundError`` and ``DuplicateError`` are storage signals raised by
repositories. Services translate them into their own kinds.
"""

from enum import Enum


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateError(DomainError):
    """Raised when a unique resource already exists."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")


class ErrorCategory(str, Enum):
    """Error family, rendered as ``type`` in error responses."""

    DATA_MODEL = "Data model"
    TOKEN_MANAGER = "Token manager"
    USER_SERVICE = "User service"
    IDEA_SERVICE = "Idea service"
    REQUEST = "Request"


class ErrorKind(str, Enum):
    """Every error the API can report."""

    # Data model
    CONTENT_NOT_STRING = "CONTENT_NOT_STRING"
    CONTENT_TOO_LONG = "CONTENT_TOO_LONG"
    METRIC_NOT_NUMBER = "METRIC_NOT_NUMBER"
    METRIC_OUT_OF_RANGE = "METRIC_OUT_OF_RANGE"
    DATE_NOT_NUMBER = "DATE_NOT_NUMBER"
    INVALID_DATE_VALUE = "INVALID_DATE_VALUE"
    EMPTY_EMAIL = "EMPTY_EMAIL"
    INVALID_EMAIL_FORMAT = "INVALID_EMAIL_FORMAT"
    EMPTY_PASSWORD = "EMPTY_PASSWORD"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    EMPTY_NAME = "EMPTY_NAME"
    EMPTY_AVATAR_URL = "EMPTY_AVATAR_URL"
    EMPTY_TOKEN = "EMPTY_TOKEN"
    INVALID_TOKEN_FORMAT = "INVALID_TOKEN_FORMAT"

    # Token manager
    TOKEN_MANAGER_ERROR = "TOKEN_MANAGER_ERROR"
    TOKEN_MISMATCH = "TOKEN_MISMATCH"
    REFRESH_TOKEN_MISMATCH = "REFRESH_TOKEN_MISMATCH"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    REFRESH_TOKEN_EXPIRED = "REFRESH_TOKEN_EXPIRED"
    MALFORMED_ACCESS_TOKEN = "MALFORMED_ACCESS_TOKEN"
    TOKEN_USER_NOT_FOUND = "TOKEN_USER_NOT_FOUND"
    USER_LOGGED_OUT = "USER_LOGGED_OUT"

    # User service
    USER_SERVICE_ERROR = "USER_SERVICE_ERROR"
    USER_EXISTS = "USER_EXISTS"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    FAILED_REMOVE_IDEAS = "FAILED_REMOVE_IDEAS"

    # Idea service
    IDEA_ERROR = "IDEA_ERROR"
    IDEA_NOT_FOUND = "IDEA_NOT_FOUND"
    IDEA_ID_MISSING = "IDEA_ID_MISSING"
    IDEA_INSERT_ERROR = "IDEA_INSERT_ERROR"
    IDEA_UPDATE_ERROR = "IDEA_UPDATE_ERROR"
    IDEA_DELETE_ERROR = "IDEA_DELETE_ERROR"
    IDEA_RETRIEVAL_ERROR = "IDEA_RETRIEVAL_ERROR"
    INVALID_PAGE_NUMBER = "INVALID_PAGE_NUMBER"
    INVALID_LAST_SCORE = "INVALID_LAST_SCORE"

    # Request
    MISSING_PROPERTY = "MISSING_PROPERTY"
    INVALID_REQUEST = "INVALID_REQUEST"
    MISSING_ACCESS_TOKEN = "MISSING_ACCESS_TOKEN"
    UNAUTHORIZED = "UNAUTHORIZED"
    ENDPOINT_NOT_FOUND = "ENDPOINT_NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    @property
    def category(self) -> ErrorCategory:
        return _KIND_DETAILS[self][0]

    @property
    def status_code(self) -> int:
        return _KIND_DETAILS[self][1]

    @property
    def default_message(self) -> str:
        return _KIND_DETAILS[self][2]


_DM = ErrorCategory.DATA_MODEL
_TM = ErrorCategory.TOKEN_MANAGER
_US = ErrorCategory.USER_SERVICE
_IS = ErrorCategory.IDEA_SERVICE
_RQ = ErrorCategory.REQUEST

_KIND_DETAILS: dict[ErrorKind, tuple[ErrorCategory, int, str]] = {
    ErrorKind.CONTENT_NOT_STRING: (_DM, 400, "The content provided is not a string"),
    ErrorKind.CONTENT_TOO_LONG: (
        _DM,
        400,
        "The content must be less than 255 characters",
    ),
    ErrorKind.METRIC_NOT_NUMBER: (_DM, 400, "The metric provided is not a number"),
    ErrorKind.METRIC_OUT_OF_RANGE: (
        _DM,
        400,
        "The metric must be a number between 1 and 10",
    ),
    ErrorKind.DATE_NOT_NUMBER: (_DM, 400, "Date is not a number"),
    ErrorKind.INVALID_DATE_VALUE: (_DM, 400, "Date is not a valid epoch number"),
    ErrorKind.EMPTY_EMAIL: (_DM, 400, "Missing email, please provide email address"),
    ErrorKind.INVALID_EMAIL_FORMAT: (_DM, 400, "Invalid email address"),
    ErrorKind.EMPTY_PASSWORD: (_DM, 400, "Missing password, please provide"),
    ErrorKind.WEAK_PASSWORD: (_DM, 400, "Password should not contain password"),
    ErrorKind.EMPTY_NAME: (
        _DM,
        400,
        "Missing name, please provide your full display name",
    ),
    ErrorKind.EMPTY_AVATAR_URL: (
        _DM,
        400,
        "Missing avatar url, please provide url.",
    ),
    ErrorKind.EMPTY_TOKEN: (
        _DM,
        400,
        "Missing access token, please provide valid JWT token",
    ),
    ErrorKind.INVALID_TOKEN_FORMAT: (_DM, 400, "Invalid access token"),
    ErrorKind.TOKEN_MANAGER_ERROR: (_TM, 400, "Token manager error"),
    ErrorKind.TOKEN_MISMATCH: (
        _TM,
        401,
        "Access token provided does not match token stored",
    ),
    ErrorKind.REFRESH_TOKEN_MISMATCH: (
        _TM,
        401,
        "Refresh token provided does not match token stored",
    ),
    ErrorKind.TOKEN_EXPIRED: (_TM, 401, "Access token has expired"),
    ErrorKind.REFRESH_TOKEN_EXPIRED: (_TM, 401, "Refresh token has expired"),
    ErrorKind.MALFORMED_ACCESS_TOKEN: (
        _TM,
        401,
        "The access token provided is malformed, please provide a correct token",
    ),
    ErrorKind.TOKEN_USER_NOT_FOUND: (_TM, 401, "The user was not found"),
    ErrorKind.USER_LOGGED_OUT: (_TM, 401, "The user is signed out, please sign in"),
    ErrorKind.USER_SERVICE_ERROR: (_US, 400, "User service error"),
    ErrorKind.USER_EXISTS: (_US, 400, "User already exist"),
    ErrorKind.USER_NOT_FOUND: (_US, 400, "User not found"),
    ErrorKind.INVALID_PASSWORD: (_US, 401, "Wrong password"),
    ErrorKind.FAILED_REMOVE_IDEAS: (_US, 400, "Failed to remove the user's ideas"),
    ErrorKind.IDEA_ERROR: (_IS, 400, "Idea service error"),
    ErrorKind.IDEA_NOT_FOUND: (_IS, 400, "The idea was not found"),
    ErrorKind.IDEA_ID_MISSING: (_IS, 400, "Missing id parameter"),
    ErrorKind.IDEA_INSERT_ERROR: (_IS, 400, "Failed to insert the idea"),
    ErrorKind.IDEA_UPDATE_ERROR: (_IS, 400, "Failed to update the idea"),
    ErrorKind.IDEA_DELETE_ERROR: (_IS, 400, "Failed to delete the idea"),
    ErrorKind.IDEA_RETRIEVAL_ERROR: (_IS, 400, "Failed to retrieve ideas"),
    ErrorKind.INVALID_PAGE_NUMBER: (
        _IS,
        400,
        "Page must be an integer number and greater than 0",
    ),
    ErrorKind.INVALID_LAST_SCORE: (
        _IS,
        400,
        "Last score must be a number and not less than 0",
    ),
    ErrorKind.MISSING_PROPERTY: (_RQ, 400, "Please provide the missing property"),
    ErrorKind.INVALID_REQUEST: (_RQ, 400, "The request could not be read"),
    ErrorKind.MISSING_ACCESS_TOKEN: (
        _RQ,
        401,
        "Missing access token, please provide",
    ),
    ErrorKind.UNAUTHORIZED: (_RQ, 401, "Please authenticate!"),
    ErrorKind.ENDPOINT_NOT_FOUND: (_RQ, 404, "API endpoint not found"),
    ErrorKind.INTERNAL_SERVER_ERROR: (_RQ, 500, "Internal server error"),
}


class IdeaPoolError(DomainError):
    """Base error for everything reported to API clients.

    Args:
        kind: What went wrong. Defaults to the family's generic kind.
        message: Overrides the kind's default message.
        status_code: Overrides the kind's HTTP status.
    """

    category: ErrorCategory | None = None
    default_kind: ErrorKind | None = None

    def __init__(
        self,
        kind: ErrorKind | None = None,
        message: str | None = None,
        status_code: int | None = None,
    ) -> None:
        kind = kind or self.default_kind
        if kind is None:
            raise TypeError(f"{type(self).__name__} requires an error kind")
        if self.category is not None and kind.category is not self.category:
            raise ValueError(f"{kind.value} is not a {self.category.value} error")
        self.kind = kind
        self.message = message or kind.default_message
        self.status_code = status_code or kind.status_code
        super().__init__(self.message)

    @property
    def type(self) -> str:
        return self.kind.category.value

    def to_dict(self) -> dict[str, str | int]:
        """Render the error the way API responses carry it."""
        return {
            "name": self.kind.value,
            "type": self.type,
            "status": self.status_code,
            "message": self.message,
        }


class ModelValidationError(IdeaPoolError):
    """A value was rejected by a domain model."""

    category = ErrorCategory.DATA_MODEL


class TokenManagerError(IdeaPoolError):
    """Token issuance, verification or revocation failed."""

    category = ErrorCategory.TOKEN_MANAGER
    default_kind = ErrorKind.TOKEN_MANAGER_ERROR


class UserServiceError(IdeaPoolError):
    """Account operation failed."""

    category = ErrorCategory.USER_SERVICE
    default_kind = ErrorKind.USER_SERVICE_ERROR


class IdeaError(IdeaPoolError):
    """Idea operation failed."""

    category = ErrorCategory.IDEA_SERVICE
    default_kind = ErrorKind.IDEA_ERROR


class RequestError(IdeaPoolError):
    """The request itself is unusable."""

    category = ErrorCategory.REQUEST
    default_kind = ErrorKind.UNAUTHORIZED
