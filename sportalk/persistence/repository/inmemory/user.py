"""In-memory user repository for testing."""

from typing import Optional, Sequence

from sportalk.domain.model.user import User
from sportalk.domain.repository.user import UserRepository
from sportalk.domain.value import UserId

from .base import InMemoryRepository


class InMemoryUserRepository(InMemoryRepository, UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(
        self, user_id: UserId, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by ID."""
        user = self._users.get(user_id)
        if user and user.deleted_at is not None and not include_deleted:
            return None
        return user

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find all non-deleted users among the given IDs."""
        wanted = set(user_ids)
        return [
            u
            for u in self._users.values()
            if u.id in wanted and u.deleted_at is None
        ]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
