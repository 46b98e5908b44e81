"""PostgreSQL implementation of Media repository."""

from typing import List, Optional, Sequence

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from sportalk.domain.model import Media
from sportalk.domain.repository import MediaRepository
from sportalk.domain.value import MediaId, PostId
from sportalk.persistence.mappers import media_to_dict, row_to_media
from sportalk.persistence.tables import media_table


class PostgresMediaRepository(MediaRepository):
    """PostgreSQL implementation of MediaRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, media_id: MediaId, include_deleted: bool = False
    ) -> Optional[Media]:
        """Find a media record by ID."""
        stmt = select(media_table).where(media_table.c.id == media_id)
        if not include_deleted:
            stmt = stmt.where(media_table.c.deleted_at.is_(None))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_media(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Media]:
        """Non-deleted media of a post."""
        return await self.find_by_posts([post_id])

    async def find_by_posts(self, post_ids: Sequence[PostId]) -> List[Media]:
        """Non-deleted media of the given posts, oldest first."""
        if not post_ids:
            return []
        stmt = (
            select(media_table)
            .where(
                media_table.c.post_id.in_(list(post_ids)),
                media_table.c.deleted_at.is_(None),
            )
            .order_by(media_table.c.created_at, media_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_media(row._asdict()) for row in result.fetchall()]

    async def save(self, media: Media) -> Media:
        """Save a media record (create or update)."""
        media_dict = media_to_dict(media)
        exists_stmt = select(media_table.c.id).where(media_table.c.id == media.id)
        existing = (await self.session.execute(exists_stmt)).scalar_one_or_none()

        if existing:
            stmt = (
                update(media_table)
                .where(media_table.c.id == media.id)
                .values(**media_dict)
            )
        else:
            stmt = insert(media_table).values(**media_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return media

    async def soft_delete(self, media_id: MediaId) -> None:
        """Set ``deleted_at`` on a media record."""
        stmt = (
            update(media_table)
            .where(media_table.c.id == media_id)
            .values(deleted_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()
