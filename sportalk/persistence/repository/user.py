"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from sportalk.domain.model import User
from sportalk.domain.repository import UserRepository
from sportalk.domain.value import UserId
from sportalk.persistence.mappers import row_to_user, user_to_dict
from sportalk.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, user_id: UserId, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        if not include_deleted:
            stmt = stmt.where(users_table.c.deleted_at.is_(None))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find all non-deleted users among the given IDs."""
        if not user_ids:
            return []
        stmt = select(users_table).where(
            users_table.c.id.in_(list(user_ids)),
            users_table.c.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        user_dict = user_to_dict(user)
        exists_stmt = select(users_table.c.id).where(users_table.c.id == user.id)
        existing = (await self.session.execute(exists_stmt)).scalar_one_or_none()

        if existing:
            stmt = (
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = insert(users_table).values(**user_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return user
