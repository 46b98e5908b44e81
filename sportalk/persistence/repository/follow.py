"""PostgreSQL implementation of Follow repository."""

from typing import List, Optional

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from sportalk.domain.model import Follow, User
from sportalk.domain.repository import FollowRepository
from sportalk.domain.value import FollowId, UserId
from sportalk.persistence.mappers import follow_to_dict, row_to_follow, row_to_user
from sportalk.persistence.tables import follows_table, users_table


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_pair(
        self, follower_id: UserId, following_id: UserId
    ) -> Optional[Follow]:
        """Find a follow relation by its two users."""
        stmt = select(follows_table).where(
            follows_table.c.follower_id == follower_id,
            follows_table.c.following_id == following_id,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_follow(row._asdict()) if row else None

    async def find_followers(self, user_id: UserId) -> List[User]:
        """Users following ``user_id``."""
        stmt = (
            select(users_table)
            .join(follows_table, follows_table.c.follower_id == users_table.c.id)
            .where(
                follows_table.c.following_id == user_id,
                users_table.c.deleted_at.is_(None),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_following(self, user_id: UserId) -> List[User]:
        """Users ``user_id`` follows."""
        stmt = (
            select(users_table)
            .join(follows_table, follows_table.c.following_id == users_table.c.id)
            .where(
                follows_table.c.follower_id == user_id,
                users_table.c.deleted_at.is_(None),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def count_followers(self, user_id: UserId) -> int:
        """Number of users following ``user_id``."""
        stmt = (
            select(func.count())
            .select_from(follows_table)
            .where(follows_table.c.following_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_following(self, user_id: UserId) -> int:
        """Number of users ``user_id`` follows."""
        stmt = (
            select(func.count())
            .select_from(follows_table)
            .where(follows_table.c.follower_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, follow: Follow) -> Follow:
        """Insert a follow relation (raises IntegrityError on duplicate)."""
        stmt = insert(follows_table).values(**follow_to_dict(follow))
        await self.session.execute(stmt)
        await self.session.flush()
        return follow

    async def delete(self, follow_id: FollowId) -> None:
        """Hard-delete a follow relation."""
        stmt = delete(follows_table).where(follows_table.c.id == follow_id)
        await self.session.execute(stmt)
        await self.session.flush()
