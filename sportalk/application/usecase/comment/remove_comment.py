"""Remove comment use case."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.application.usecase.common import CommentItem
from sportalk.domain.service import CommentService
from sportalk.domain.value import CommentId, UserId


class RemoveCommentRequest(BaseModel):
    """Remove comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class RemoveCommentResponse(BaseModel):
    """The comment as it was before deletion."""

    comment: CommentItem


class RemoveCommentUseCase:
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: RemoveCommentRequest) -> RemoveCommentResponse:
        comment = await self.comment_service.remove_comment(
            principal_id=UserId(UUID(request.user_id)),
            comment_id=CommentId(UUID(request.comment_id)),
        )
        return RemoveCommentResponse(comment=CommentItem.from_comment(comment))
