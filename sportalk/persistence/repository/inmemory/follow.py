"""In-memory follow repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from sportalk.domain.model.follow import Follow
from sportalk.domain.model.user import User
from sportalk.domain.repository.follow import FollowRepository
from sportalk.domain.value import FollowId, UserId

from .base import InMemoryRepository
from .user import InMemoryUserRepository


class InMemoryFollowRepository(InMemoryRepository, FollowRepository):
    """In-memory implementation of FollowRepository for testing.

    Reads the user repository to join followers and followed users.
    """

    def __init__(self, user_repository: InMemoryUserRepository) -> None:
        self._follows: list[Follow] = []
        self._user_repository = user_repository

    def snapshot(self) -> dict:
        return {"_follows": list(self._follows)}

    async def find_by_pair(
        self, follower_id: UserId, following_id: UserId
    ) -> Optional[Follow]:
        """Find a follow by its two users."""
        for follow in self._follows:
            if follow.follower_id == follower_id and follow.following_id == following_id:
                return follow
        return None

    async def find_followers(self, user_id: UserId) -> list[User]:
        """Users following ``user_id``."""
        return await self._user_repository.find_by_ids(
            [f.follower_id for f in self._follows if f.following_id == user_id]
        )

    async def find_following(self, user_id: UserId) -> list[User]:
        """Users ``user_id`` follows."""
        return await self._user_repository.find_by_ids(
            [f.following_id for f in self._follows if f.follower_id == user_id]
        )

    async def count_followers(self, user_id: UserId) -> int:
        return sum(1 for f in self._follows if f.following_id == user_id)

    async def count_following(self, user_id: UserId) -> int:
        return sum(1 for f in self._follows if f.follower_id == user_id)

    async def save(self, follow: Follow) -> Follow:
        """Insert a follow.

        Raises:
            IntegrityError: If the pair already exists
        """
        if await self.find_by_pair(follow.follower_id, follow.following_id):
            raise IntegrityError("Duplicate follow", None, Exception())

        self._follows.append(follow)
        return follow

    async def delete(self, follow_id: FollowId) -> None:
        """Delete a follow by ID."""
        self._follows = [f for f in self._follows if f.id != follow_id]
