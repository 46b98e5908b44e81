"""PostgreSQL implementation of PostVersion repository."""

from typing import List

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from sportalk.domain.model import PostVersion
from sportalk.domain.repository import PostVersionRepository
from sportalk.domain.value import PostId
from sportalk.persistence.mappers import post_version_to_dict, row_to_post_version
from sportalk.persistence.tables import post_versions_table


class PostgresPostVersionRepository(PostVersionRepository):
    """PostgreSQL implementation of PostVersionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def max_version(self, post_id: PostId) -> int:
        """Read ``max(version)`` for a post, 0 if there is none."""
        stmt = select(func.max(post_versions_table.c.version)).where(
            post_versions_table.c.post_id == post_id
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_post(self, post_id: PostId) -> List[PostVersion]:
        """All versions of a post ordered by version ascending."""
        stmt = (
            select(post_versions_table)
            .where(post_versions_table.c.post_id == post_id)
            .order_by(post_versions_table.c.version)
        )
        result = await self.session.execute(stmt)
        return [row_to_post_version(row._asdict()) for row in result.fetchall()]

    async def save(self, version: PostVersion) -> PostVersion:
        """Insert a version row (raises IntegrityError on duplicate)."""
        stmt = insert(post_versions_table).values(**post_version_to_dict(version))
        await self.session.execute(stmt)
        await self.session.flush()
        return version
