"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from sportalk.domain.model import Comment
from sportalk.domain.repository import CommentRepository
from sportalk.domain.value import CommentId, PostId
from sportalk.persistence.mappers import comment_to_dict, row_to_comment
from sportalk.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        if not include_deleted:
            stmt = stmt.where(comments_table.c.deleted_at.is_(None))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Non-deleted comments on a post, oldest first."""
        return await self.find_by_posts([post_id])

    async def find_by_posts(self, post_ids: Sequence[PostId]) -> List[Comment]:
        """Non-deleted comments on the given posts, oldest first."""
        if not post_ids:
            return []
        stmt = (
            select(comments_table)
            .where(
                comments_table.c.post_id.in_(list(post_ids)),
                comments_table.c.deleted_at.is_(None),
            )
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies(self, parent_comment_id: CommentId) -> List[Comment]:
        """Direct non-deleted replies to a comment, oldest first."""
        stmt = (
            select(comments_table)
            .where(
                comments_table.c.parent_comment_id == parent_comment_id,
                comments_table.c.deleted_at.is_(None),
            )
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        exists_stmt = select(comments_table.c.id).where(
            comments_table.c.id == comment.id
        )
        existing = (await self.session.execute(exists_stmt)).scalar_one_or_none()

        if existing:
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = insert(comments_table).values(**comment_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def soft_delete(self, comment_id: CommentId) -> None:
        """Set ``deleted_at`` on a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(deleted_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()
