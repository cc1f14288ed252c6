"""Unit tests for the profile and account removal use cases."""

import pytest
from dishka import AsyncContainer

from ideapool.application.usecase.idea import CreateIdeaUseCase
from ideapool.application.usecase.idea.create_idea import CreateIdeaRequest
from ideapool.application.usecase.user import (
    DeleteAccountUseCase,
    GetProfileUseCase,
    SignUpUseCase,
)
from ideapool.application.usecase.user.delete_account import DeleteAccountRequest
from ideapool.application.usecase.user.get_profile import GetProfileRequest
from ideapool.application.usecase.user.sign_up import SignUpRequest
from ideapool.domain.repository import IdeaRepository, UserRepository
from ideapool.domain.value import UserId
from tests.conftest import idea_body, sign_up_body
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _signed_up_user(env: AsyncContainer):
    sign_up = await env.get(SignUpUseCase)
    await sign_up.execute(SignUpRequest(**sign_up_body()))
    user_repo = await env.get(UserRepository)
    return await user_repo.find_by_email("email-1@test.com")


class TestGetProfileUseCase:
    """Tests for GetProfileUseCase."""

    @pytest.mark.asyncio
    async def test_profile(self, unit_env: AsyncContainer):
        """Should expose email, name and avatar only."""
        user = await _signed_up_user(unit_env)
        use_case = await unit_env.get(GetProfileUseCase)

        response = await use_case.execute(GetProfileRequest(user=user))

        assert response.model_dump() == {
            "email": "email-1@test.com",
            "name": "name-1",
            "avatar_url": user.avatar_url,
        }
        assert response.avatar_url.startswith("https://www.gravatar.com/avatar/")


class TestDeleteAccountUseCase:
    """Tests for DeleteAccountUseCase."""

    @pytest.mark.asyncio
    async def test_removes_user_and_ideas(self, unit_env: AsyncContainer):
        """Should remove the account and every idea it owns."""
        # Arrange
        user = await _signed_up_user(unit_env)
        create = await unit_env.get(CreateIdeaUseCase)
        for _ in range(3):
            await create.execute(
                CreateIdeaRequest(user_id=UserId(user.id), **idea_body())
            )
        use_case = await unit_env.get(DeleteAccountUseCase)

        # Act
        response = await use_case.execute(DeleteAccountRequest(user=user))

        # Assert
        user_repo = await unit_env.get(UserRepository)
        idea_repo = await unit_env.get(IdeaRepository)
        assert response.ideas_removed == 3
        assert await user_repo.find_by_email("email-1@test.com") is None
        assert await idea_repo.count_by_user(UserId(user.id)) == 0
