"""Comment domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from sportalk.domain.error import InvalidRelationError, NotFoundError
from sportalk.domain.model import Comment, CommentWithAuthor
from sportalk.domain.repository import CommentRepository
from sportalk.domain.value import CommentId, PostId, UserId

from .authorization import check_ownership
from .base import Service
from .post_service import PostService
from .user_service import UserService


class CommentService(Service):
    """Domain service for comment operations.

    Comments have no edit history: an update overwrites the content.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post domain service (post existence checks)
            user_service: User domain service (author loading)
        """
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.user_service = user_service

    async def create_comment(
        self,
        author_id: UserId,
        post_id: PostId,
        content: str,
        parent_comment_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            author_id: Author user ID
            post_id: Post ID
            content: Comment text
            parent_comment_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post or the parent comment does not exist
            InvalidRelationError: If the parent belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            await self.post_service.get_post_by_id(post_id)

            if parent_comment_id:
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_comment_id=str(parent_comment_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Comment", str(parent_comment_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_comment_id=str(parent_comment_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise InvalidRelationError(
                        f"Parent comment {parent_comment_id} does not belong "
                        f"to post {post_id}"
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_comment_id=parent_comment_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def update_comment(
        self, principal_id: UserId, comment_id: CommentId, content: str
    ) -> Comment:
        """Overwrite a comment's content.

        Raises:
            NotFoundError: If comment not found or deleted
            PermissionDeniedError: If the principal is not the author
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            principal_id=str(principal_id),
        ):
            comment = await self.get_comment_by_id(comment_id)
            check_ownership(principal_id, comment.author_id, "comment", comment_id)

            updated = comment.model_copy(
                update={"content": content, "updated_at": datetime.now()}
            )
            saved = await self.comment_repository.save(updated)
            logfire.info("Comment updated", comment_id=str(comment_id))
            return saved

    async def remove_comment(
        self, principal_id: UserId, comment_id: CommentId
    ) -> Comment:
        """Soft-delete a comment. Replies stay in place.

        Returns:
            The comment as it was before deletion

        Raises:
            NotFoundError: If comment not found or deleted
            PermissionDeniedError: If the principal is not the author
        """
        with logfire.span(
            "comment_service.remove_comment",
            comment_id=str(comment_id),
            principal_id=str(principal_id),
        ):
            comment = await self.get_comment_by_id(comment_id)
            check_ownership(principal_id, comment.author_id, "comment", comment_id)

            await self.comment_repository.soft_delete(comment_id)
            logfire.info("Comment removed", comment_id=str(comment_id))
            return comment

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a non-deleted comment.

        Raises:
            NotFoundError: If comment not found or deleted
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_comments(self, post_id: PostId) -> list[CommentWithAuthor]:
        """All non-deleted comments on a post, oldest first, with authors."""
        with logfire.span("comment_service.list_comments", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(post_id)
            authors = await self.user_service.get_by_ids(
                [c.author_id for c in comments]
            )
            return [
                CommentWithAuthor(comment=c, author=authors.get(c.author_id))
                for c in comments
            ]

    async def list_replies(self, comment_id: CommentId) -> list[Comment]:
        """Direct replies to a comment.

        Raises:
            NotFoundError: If the parent comment is not found or deleted
        """
        with logfire.span("comment_service.list_replies", comment_id=str(comment_id)):
            await self.get_comment_by_id(comment_id)
            return await self.comment_repository.find_replies(comment_id)
