"""Unit tests for follow use cases."""

import pytest

from sportalk.application.usecase.follow import (
    FollowUserRequest,
    FollowUserUseCase,
    GetFollowCountsRequest,
    GetFollowCountsUseCase,
    GetFollowersUseCase,
    GetFollowUsersRequest,
)
from sportalk.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestFollowUseCases:
    """Tests for follow, followers and follow counts use cases."""

    @pytest.mark.asyncio
    async def test_counts_and_viewer_flag(self, unit_env):
        """is_following reflects the viewer, counts reflect the graph."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        follow_use_case = await unit_env.get(FollowUserUseCase)
        counts_use_case = await unit_env.get(GetFollowCountsUseCase)
        followers_use_case = await unit_env.get(GetFollowersUseCase)
        fan = await user_repo.save(make_user("fan"))
        star = await user_repo.save(make_user("star"))
        await follow_use_case.execute(
            FollowUserRequest(follower_id=str(fan.id), following_id=str(star.id))
        )

        # Act
        as_fan = await counts_use_case.execute(
            GetFollowCountsRequest(user_id=str(star.id), viewer_id=str(fan.id))
        )
        anonymous = await counts_use_case.execute(
            GetFollowCountsRequest(user_id=str(star.id))
        )
        followers = await followers_use_case.execute(
            GetFollowUsersRequest(user_id=str(star.id))
        )

        # Assert
        assert as_fan.followers == 1
        assert as_fan.following == 0
        assert as_fan.is_following is True
        assert anonymous.is_following is False
        assert [u.nickname for u in followers.users] == ["fan"]
