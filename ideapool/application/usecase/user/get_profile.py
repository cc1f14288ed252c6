"""Get profile use case."""

from pydantic import BaseModel

from ideapool.domain.model import User


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user: User  # Authenticated caller


class GetProfileResponse(BaseModel):
    """Public profile of the caller."""

    email: str | None
    name: str | None
    avatar_url: str | None


class GetProfileUseCase:
    """Use case for reading the caller's profile."""

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        user = request.user
        return GetProfileResponse(
            email=user.email, name=user.name, avatar_url=user.avatar_url
        )
