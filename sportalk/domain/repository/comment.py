"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from sportalk.domain.model.comment import Comment
from sportalk.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier
            include_deleted: Whether to return a soft-deleted comment

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Non-deleted comments on a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def find_by_posts(self, post_ids: Sequence[PostId]) -> List[Comment]:
        """Non-deleted comments on any of the given posts, oldest first.

        Args:
            post_ids: Post IDs to load comments for

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_comment_id: CommentId) -> List[Comment]:
        """Direct non-deleted replies to a comment, oldest first.

        Args:
            parent_comment_id: The parent comment's ID

        Returns:
            List of replies
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> None:
        """Mark a comment as deleted without removing its row.

        Args:
            comment_id: The comment ID
        """
        pass
