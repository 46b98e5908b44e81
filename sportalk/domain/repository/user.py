"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from sportalk.domain.model.user import User
from sportalk.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, user_id: UserId, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier
            include_deleted: Whether to return soft-deleted users

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find all non-deleted users among the given IDs.

        Used to batch-load authors for list reads. Unknown IDs are skipped.

        Args:
            user_ids: User IDs to load

        Returns:
            The users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
