"""Delete account use case."""

from pydantic import BaseModel

from ideapool.domain.model import User
from ideapool.domain.service import UserService


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    user: User  # Authenticated caller


class DeleteAccountResponse(BaseModel):
    """Delete account response."""

    ideas_removed: int


class DeleteAccountUseCase:
    """Use case for removing the caller's account and all their ideas."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize delete account use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: DeleteAccountRequest) -> DeleteAccountResponse:
        """Execute account removal.

        Raises:
            UserServiceError: USER_NOT_FOUND or FAILED_REMOVE_IDEAS
        """
        removed = await self.user_service.delete_account(request.user)
        return DeleteAccountResponse(ideas_removed=removed)
