"""User domain service."""

from typing import Sequence

import logfire

from sportalk.domain.error import NotFoundError
from sportalk.domain.model import User
from sportalk.domain.repository import UserRepository
from sportalk.domain.value import UserId

from .base import Service


class UserService(Service):
    """Read-only user lookups used by the posting workflow."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found or deleted
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Batch-load users keyed by ID.

        Args:
            user_ids: User IDs, duplicates allowed

        Returns:
            Mapping of found user IDs to users
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        with logfire.span("user_service.get_by_ids", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            return {user.id: user for user in users}

    async def exists(self, user_id: UserId) -> bool:
        """Whether a non-deleted user exists."""
        return await self.user_repository.find_by_id(user_id) is not None
