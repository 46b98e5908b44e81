"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from sportalk.domain.model.post import Post
from sportalk.domain.repository.post import PostRepository
from sportalk.domain.value import PostId, PostSort, UserId

from .base import InMemoryRepository


class InMemoryPostRepository(InMemoryRepository, PostRepository):
    """In-memory implementation of PostRepository for testing.

    Row locks are not modelled: the in-memory transaction manager already
    runs one transaction at a time.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(
        self, post_id: PostId, include_deleted: bool = False
    ) -> Optional[Post]:
        """Find a post by ID."""
        post = self._posts.get(post_id)
        if post and post.deleted_at is not None and not include_deleted:
            return None
        return post

    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a non-deleted post by ID."""
        return await self.find_by_id(post_id)

    async def find_all(
        self,
        author_id: Optional[UserId] = None,
        include_deleted: bool = False,
        limit: int = 10,
        offset: int = 0,
        search: Optional[str] = None,
        sort: PostSort = PostSort.NEWEST,
    ) -> list[Post]:
        """Find posts with pagination, optionally searching content."""
        posts = list(self._posts.values())

        if author_id is not None:
            posts = [p for p in posts if p.author_id == author_id]

        if not include_deleted:
            posts = [p for p in posts if p.deleted_at is None]

        if search:
            needle = search.lower()
            posts = [p for p in posts if needle in p.content.lower()]

        if sort == PostSort.POPULAR:
            posts.sort(key=lambda p: (p.view_count, p.created_at, p.id), reverse=True)
        else:
            posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return posts[offset : offset + limit]

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def soft_delete(self, post_id: PostId) -> None:
        """Mark a post as deleted."""
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"deleted_at": datetime.now()}
            )

    async def increment_view_count(self, post_id: PostId) -> bool:
        """Increment the view count of a non-deleted post."""
        post = await self.find_by_id(post_id)
        if not post:
            return False
        self._posts[post_id] = post.model_copy(
            update={"view_count": post.view_count + 1}
        )
        return True
