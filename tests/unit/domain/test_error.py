"""Unit tests for domain errors."""

import pytest

from ideapool.domain.error import (
    ErrorKind,
    IdeaError,
    IdeaPoolError,
    ModelValidationError,
    RequestError,
    TokenManagerError,
    UserServiceError,
)


class TestIdeaPoolError:
    """Tests for error kinds and their rendering."""

    def test_defaults_come_from_kind(self):
        """Should take message and status from the kind."""
        error = TokenManagerError(ErrorKind.REFRESH_TOKEN_EXPIRED)

        assert error.message == "Refresh token has expired"
        assert error.status_code == 401
        assert error.type == "Token manager"

    def test_to_dict(self):
        """Should render name, type, status and message."""
        error = UserServiceError(ErrorKind.USER_EXISTS)

        assert error.to_dict() == {
            "name": "USER_EXISTS",
            "type": "User service",
            "status": 400,
            "message": "User already exist",
        }

    def test_overrides(self):
        """Should let callers replace message and status."""
        error = UserServiceError(
            ErrorKind.USER_NOT_FOUND, "gone", status_code=401
        )

        assert error.message == "gone"
        assert error.status_code == 401
        assert error.kind == ErrorKind.USER_NOT_FOUND

    def test_family_default_kind(self):
        """Should fall back to the generic kind of the family."""
        assert IdeaError().kind == ErrorKind.IDEA_ERROR
        assert TokenManagerError().kind == ErrorKind.TOKEN_MANAGER_ERROR

    def test_kind_required_without_default(self):
        """Should insist on a kind where the family has no generic one."""
        with pytest.raises(TypeError):
            ModelValidationError()

    def test_rejects_kind_from_other_family(self):
        """Should refuse a kind from another category."""
        with pytest.raises(ValueError):
            RequestError(ErrorKind.IDEA_NOT_FOUND)

    def test_families_share_base(self):
        """Should be catchable through the common base."""
        with pytest.raises(IdeaPoolError):
            raise IdeaError(ErrorKind.INVALID_PAGE_NUMBER)

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_every_kind_has_details(self, kind):
        """Should define category, status and message for every kind."""
        assert kind.category is not None
        assert 400 <= kind.status_code < 600
        assert kind.default_message
