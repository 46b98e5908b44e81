"""Unit tests for ListPostsUseCase."""

import pytest

from sportalk.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from sportalk.config import PaginationSettings
from sportalk.domain.repository import UserRepository
from sportalk.domain.service import PostService
from sportalk.domain.value import PostSort, PostType
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_take_defaults_and_is_capped(self, unit_env):
        """Page size falls back to the default and never exceeds the cap."""
        # Arrange
        post_service = await unit_env.get(PostService)
        use_case = ListPostsUseCase(
            post_service=post_service,
            pagination=PaginationSettings(default_take=2, max_take=3),
        )
        user_repo = await unit_env.get(UserRepository)
        create_use_case = await unit_env.get(CreatePostUseCase)
        author = await user_repo.save(make_user())
        for i in range(5):
            await create_use_case.execute(
                CreatePostRequest(
                    author_id=str(author.id), content=f"p{i}", type=PostType.HIGHLIGHT
                )
            )

        # Act
        default_page = await use_case.execute(ListPostsRequest())
        capped_page = await use_case.execute(ListPostsRequest(take=50))

        # Assert
        assert default_page.take == 2
        assert len(default_page.posts) == 2
        assert capped_page.take == 3
        assert len(capped_page.posts) == 3

    @pytest.mark.asyncio
    async def test_listed_posts_carry_author(self, unit_env):
        """Feed entries should include the author but no versions."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        create_use_case = await unit_env.get(CreatePostUseCase)
        use_case = await unit_env.get(ListPostsUseCase)
        author = await user_repo.save(make_user("keeper1"))
        await create_use_case.execute(
            CreatePostRequest(
                author_id=str(author.id), content="Clean sheet", type=PostType.CHEERING
            )
        )

        # Act
        response = await use_case.execute(ListPostsRequest(author_id=str(author.id)))

        # Assert
        assert len(response.posts) == 1
        assert response.posts[0].author.nickname == "keeper1"
        assert response.posts[0].versions == []

    @pytest.mark.asyncio
    async def test_search_and_sort_are_forwarded(self, unit_env):
        """Keyword search narrows the feed and the chosen sort is echoed back."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        create_use_case = await unit_env.get(CreatePostUseCase)
        use_case = await unit_env.get(ListPostsUseCase)
        author = await user_repo.save(make_user())
        for content in ("Penalty shootout drama", "Transfer rumours"):
            await create_use_case.execute(
                CreatePostRequest(
                    author_id=str(author.id), content=content, type=PostType.ANALYSIS
                )
            )

        # Act
        response = await use_case.execute(
            ListPostsRequest(search="  shootout ", sort=PostSort.POPULAR)
        )

        # Assert
        assert [p.content for p in response.posts] == ["Penalty shootout drama"]
        assert response.sort == PostSort.POPULAR
