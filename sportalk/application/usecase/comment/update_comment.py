"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from sportalk.application.usecase.common import CommentItem
from sportalk.domain.model.comment import COMMENT_CONTENT_MAX_LENGTH
from sportalk.domain.service import CommentService
from sportalk.domain.value import CommentId, UserId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str = Field(min_length=1, max_length=COMMENT_CONTENT_MAX_LENGTH)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for overwriting a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If comment not found or deleted
            PermissionDeniedError: If user doesn't own the comment
        """
        comment = await self.comment_service.update_comment(
            principal_id=UserId(UUID(request.user_id)),
            comment_id=CommentId(UUID(request.comment_id)),
            content=request.content,
        )
        return UpdateCommentResponse(comment=CommentItem.from_comment(comment))
