"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from sportalk.domain.model.comment import Comment
from sportalk.domain.repository.comment import CommentRepository
from sportalk.domain.value import CommentId, PostId

from .base import InMemoryRepository


class InMemoryCommentRepository(InMemoryRepository, CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._comments.get(comment_id)
        if comment and comment.deleted_at is not None and not include_deleted:
            return None
        return comment

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Non-deleted comments on a post, oldest first."""
        return await self.find_by_posts([post_id])

    async def find_by_posts(self, post_ids: Sequence[PostId]) -> list[Comment]:
        """Non-deleted comments on the given posts, oldest first."""
        wanted = set(post_ids)
        return self._sorted(
            c
            for c in self._comments.values()
            if c.post_id in wanted and c.deleted_at is None
        )

    async def find_replies(self, parent_comment_id: CommentId) -> list[Comment]:
        """Direct non-deleted replies to a comment."""
        return self._sorted(
            c
            for c in self._comments.values()
            if c.parent_comment_id == parent_comment_id and c.deleted_at is None
        )

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def soft_delete(self, comment_id: CommentId) -> None:
        """Mark a comment as deleted."""
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"deleted_at": datetime.now()}
            )

    @staticmethod
    def _sorted(comments) -> list[Comment]:
        return sorted(comments, key=lambda c: (c.created_at, c.id))
