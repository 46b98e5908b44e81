"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from sportalk.domain.model import Post
from sportalk.domain.repository import PostRepository
from sportalk.domain.value import PostId, PostSort, UserId
from sportalk.persistence.mappers import post_to_dict, row_to_post
from sportalk.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, post_id: PostId, include_deleted: bool = False
    ) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            if not include_deleted:
                stmt = stmt.where(posts_table.c.deleted_at.is_(None))
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a non-deleted post with ``SELECT ... FOR UPDATE``."""
        with logfire.span(
            "post_repository.find_by_id_for_update", post_id=str(post_id)
        ):
            stmt = (
                select(posts_table)
                .where(
                    posts_table.c.id == post_id,
                    posts_table.c.deleted_at.is_(None),
                )
                .with_for_update()
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def find_all(
        self,
        author_id: Optional[UserId] = None,
        include_deleted: bool = False,
        limit: int = 10,
        offset: int = 0,
        search: Optional[str] = None,
        sort: PostSort = PostSort.NEWEST,
    ) -> List[Post]:
        """Find posts with pagination, optionally searching content."""
        with logfire.span(
            "post_repository.find_all",
            author_id=str(author_id) if author_id else None,
            include_deleted=include_deleted,
            limit=limit,
            offset=offset,
            search=search,
            sort=sort.value,
        ):
            stmt = select(posts_table)

            if author_id:
                stmt = stmt.where(posts_table.c.author_id == author_id)

            if not include_deleted:
                stmt = stmt.where(posts_table.c.deleted_at.is_(None))

            if search:
                pattern = f"%{_escape_like(search)}%"
                stmt = stmt.where(posts_table.c.content.ilike(pattern, escape="\\"))

            ordering = [desc(posts_table.c.created_at), desc(posts_table.c.id)]
            if sort == PostSort.POPULAR:
                ordering.insert(0, desc(posts_table.c.view_count))

            stmt = stmt.order_by(*ordering).limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]
            logfire.info("Found posts", count=len(posts))
            return posts

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)
            exists_stmt = select(posts_table.c.id).where(posts_table.c.id == post.id)
            existing = (await self.session.execute(exists_stmt)).scalar_one_or_none()

            if existing:
                # author_id is immutable after creation
                post_dict.pop("author_id")
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                logfire.info("Inserting new post", post_id=str(post.id))
                stmt = insert(posts_table).values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def soft_delete(self, post_id: PostId) -> None:
        """Set ``deleted_at`` on a post."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(deleted_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_view_count(self, post_id: PostId) -> bool:
        """Atomically increment view count by 1."""
        stmt = (
            update(posts_table)
            .where(
                posts_table.c.id == post_id,
                posts_table.c.deleted_at.is_(None),
            )
            .values(view_count=posts_table.c.view_count + 1)
            .returning(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        updated = result.scalar_one_or_none() is not None
        await self.session.flush()
        return updated


def _escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
