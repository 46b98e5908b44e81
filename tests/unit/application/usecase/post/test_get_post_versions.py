"""Unit tests for GetPostVersionsUseCase."""

import pytest

from sportalk.application.usecase.post import (
    GetPostVersionsRequest,
    GetPostVersionsUseCase,
)
from sportalk.domain.repository import UserRepository
from sportalk.domain.service import PostService
from sportalk.domain.value import PostType
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetPostVersionsUseCase:
    """Tests for GetPostVersionsUseCase."""

    @pytest.mark.asyncio
    async def test_history_survives_deletion(self, unit_env):
        """Versions stay readable after the post is removed."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_service = await unit_env.get(PostService)
        use_case = await unit_env.get(GetPostVersionsUseCase)
        author = await user_repo.save(make_user())
        post = await post_service.create_post(author.id, "a", PostType.ANALYSIS)
        await post_service.update_post(author.id, post.id, content="b")
        await post_service.remove_post(author.id, post.id)

        # Act
        response = await use_case.execute(GetPostVersionsRequest(post_id=str(post.id)))

        # Assert
        assert response.total == 2
        assert [v.version for v in response.versions] == [1, 2]
        assert [v.content for v in response.versions] == ["a", "a"]
