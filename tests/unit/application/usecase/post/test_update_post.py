"""Unit tests for UpdatePostUseCase."""

from uuid import uuid4

import pytest

from sportalk.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostVersionsRequest,
    GetPostVersionsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from sportalk.domain.error import NotFoundError, PermissionDeniedError
from sportalk.domain.repository import UserRepository
from sportalk.domain.value import PostType
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_update_post_by_author(self, unit_env):
        """Updating by the author should return the new state."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        create_use_case = await unit_env.get(CreatePostUseCase)
        use_case = await unit_env.get(UpdatePostUseCase)
        author = await user_repo.save(make_user())
        created = await create_use_case.execute(
            CreatePostRequest(
                author_id=str(author.id), content="Lineup", type=PostType.ANALYSIS
            )
        )

        # Act
        response = await use_case.execute(
            UpdatePostRequest(
                post_id=created.post.post_id,
                user_id=str(author.id),
                content="Lineup (confirmed)",
            )
        )

        # Assert
        assert response.post.content == "Lineup (confirmed)"
        assert response.post.type == PostType.ANALYSIS

    @pytest.mark.asyncio
    async def test_update_post_by_other_user_denied(self, unit_env):
        """A non-author should get PermissionDeniedError and no new version."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        create_use_case = await unit_env.get(CreatePostUseCase)
        versions_use_case = await unit_env.get(GetPostVersionsUseCase)
        use_case = await unit_env.get(UpdatePostUseCase)
        author = await user_repo.save(make_user())
        created = await create_use_case.execute(
            CreatePostRequest(
                author_id=str(author.id), content="Mine", type=PostType.CHEERING
            )
        )

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=created.post.post_id,
                    user_id=str(uuid4()),
                    content="Hijacked",
                )
            )

        history = await versions_use_case.execute(
            GetPostVersionsRequest(post_id=created.post.post_id)
        )
        assert history.total == 1

    @pytest.mark.asyncio
    async def test_update_post_not_found(self, unit_env):
        """Updating an unknown post should raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(UpdatePostUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=str(uuid4()), user_id=str(uuid4()), content="Ghost"
                )
            )

    def test_request_rejects_empty_content(self):
        """An explicit empty content fails request validation."""
        with pytest.raises(ValueError):
            UpdatePostRequest(post_id=str(uuid4()), user_id=str(uuid4()), content="")
