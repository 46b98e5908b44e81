"""Unit tests for FollowService."""

from uuid import uuid4

import pytest

from sportalk.domain.error import BadRequestError, ConflictError, NotFoundError
from sportalk.domain.repository import UserRepository
from sportalk.domain.service import FollowService
from sportalk.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _two_users(unit_env):
    user_repo = await unit_env.get(UserRepository)
    return await user_repo.save(make_user()), await user_repo.save(make_user())


class TestFollow:
    """Tests for follow and unfollow."""

    @pytest.mark.asyncio
    async def test_follow_creates_relation(self, unit_env):
        """Following should be visible from both sides."""
        # Arrange
        follow_service = await unit_env.get(FollowService)
        alice, bob = await _two_users(unit_env)

        # Act
        follow = await follow_service.follow(alice.id, bob.id)

        # Assert
        assert follow.follower_id == alice.id
        assert await follow_service.is_following(alice.id, bob.id)
        assert not await follow_service.is_following(bob.id, alice.id)
        assert [u.id for u in await follow_service.get_followers(bob.id)] == [alice.id]
        assert [u.id for u in await follow_service.get_following(alice.id)] == [bob.id]

    @pytest.mark.asyncio
    async def test_follow_self_rejected(self, unit_env):
        """A user cannot follow themselves."""
        # Arrange
        follow_service = await unit_env.get(FollowService)
        alice, _ = await _two_users(unit_env)

        # Act & Assert
        with pytest.raises(BadRequestError):
            await follow_service.follow(alice.id, alice.id)
        counts = await follow_service.get_follow_counts(alice.id)
        assert counts.followers == 0
        assert counts.following == 0
        assert not await follow_service.is_following(alice.id, alice.id)

    @pytest.mark.asyncio
    async def test_follow_twice_conflicts(self, unit_env):
        """A second identical follow should raise ConflictError."""
        # Arrange
        follow_service = await unit_env.get(FollowService)
        alice, bob = await _two_users(unit_env)
        await follow_service.follow(alice.id, bob.id)

        # Act & Assert
        with pytest.raises(ConflictError):
            await follow_service.follow(alice.id, bob.id)
        counts = await follow_service.get_follow_counts(bob.id)
        assert counts.followers == 1

    @pytest.mark.asyncio
    async def test_follow_unknown_user_raises_not_found(self, unit_env):
        """Following a user that does not exist should raise NotFoundError."""
        # Arrange
        follow_service = await unit_env.get(FollowService)
        alice, _ = await _two_users(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await follow_service.follow(alice.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_unfollow_removes_relation(self, unit_env):
        """Unfollowing deletes the edge and allows following again."""
        # Arrange
        follow_service = await unit_env.get(FollowService)
        alice, bob = await _two_users(unit_env)
        await follow_service.follow(alice.id, bob.id)

        # Act
        await follow_service.unfollow(alice.id, bob.id)

        # Assert
        assert not await follow_service.is_following(alice.id, bob.id)
        await follow_service.follow(alice.id, bob.id)
        assert await follow_service.is_following(alice.id, bob.id)

    @pytest.mark.asyncio
    async def test_unfollow_without_relation_raises_not_found(self, unit_env):
        """Unfollowing someone you don't follow should raise NotFoundError."""
        # Arrange
        follow_service = await unit_env.get(FollowService)
        alice, bob = await _two_users(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await follow_service.unfollow(alice.id, bob.id)


class TestFollowCounts:
    """Tests for get_follow_counts."""

    @pytest.mark.asyncio
    async def test_counts_both_directions(self, unit_env):
        """Counts should reflect followers and followed users."""
        # Arrange
        follow_service = await unit_env.get(FollowService)
        user_repo = await unit_env.get(UserRepository)
        alice, bob = await _two_users(unit_env)
        carol = await user_repo.save(make_user())
        await follow_service.follow(alice.id, bob.id)
        await follow_service.follow(carol.id, bob.id)
        await follow_service.follow(bob.id, alice.id)

        # Act
        counts = await follow_service.get_follow_counts(bob.id)

        # Assert
        assert counts.followers == 2
        assert counts.following == 1

    @pytest.mark.asyncio
    async def test_counts_for_unknown_user(self, unit_env):
        """Counts for a missing user should raise NotFoundError."""
        # Arrange
        follow_service = await unit_env.get(FollowService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await follow_service.get_follow_counts(UserId(uuid4()))
