"""Follow repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from sportalk.domain.model.follow import Follow
from sportalk.domain.model.user import User
from sportalk.domain.value import FollowId, UserId


class FollowRepository(ABC):
    """Repository for Follow relations."""

    @abstractmethod
    async def find_by_pair(
        self, follower_id: UserId, following_id: UserId
    ) -> Optional[Follow]:
        """Find the relation where ``follower_id`` follows ``following_id``.

        Args:
            follower_id: The following user
            following_id: The followed user

        Returns:
            The follow if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_followers(self, user_id: UserId) -> List[User]:
        """Users who follow the given user.

        Args:
            user_id: The followed user

        Returns:
            List of follower users
        """
        pass

    @abstractmethod
    async def find_following(self, user_id: UserId) -> List[User]:
        """Users the given user follows.

        Args:
            user_id: The following user

        Returns:
            List of followed users
        """
        pass

    @abstractmethod
    async def count_followers(self, user_id: UserId) -> int:
        pass

    @abstractmethod
    async def count_following(self, user_id: UserId) -> int:
        pass

    @abstractmethod
    async def save(self, follow: Follow) -> Follow:
        """Insert a follow relation.

        Args:
            follow: The follow to insert

        Returns:
            The inserted follow

        Raises:
            IntegrityError: If the pair already exists
        """
        pass

    @abstractmethod
    async def delete(self, follow_id: FollowId) -> None:
        """Hard-delete a follow relation.

        Args:
            follow_id: The follow ID
        """
        pass
