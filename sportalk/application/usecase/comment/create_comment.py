"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from sportalk.application.usecase.common import CommentItem
from sportalk.domain.model.comment import COMMENT_CONTENT_MAX_LENGTH
from sportalk.domain.service import CommentService
from sportalk.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    author_id: str  # Current user ID
    content: str = Field(min_length=1, max_length=COMMENT_CONTENT_MAX_LENGTH)
    parent_comment_id: str | None = None  # UUID string for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post or parent comment does not exist
            InvalidRelationError: If the parent belongs to another post
        """
        parent_id = (
            CommentId(UUID(request.parent_comment_id))
            if request.parent_comment_id
            else None
        )
        comment = await self.comment_service.create_comment(
            author_id=UserId(UUID(request.author_id)),
            post_id=PostId(UUID(request.post_id)),
            content=request.content,
            parent_comment_id=parent_id,
        )
        return CreateCommentResponse(comment=CommentItem.from_comment(comment))
