"""Get replies use case."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.application.usecase.common import CommentItem
from sportalk.domain.service import CommentService
from sportalk.domain.value import CommentId


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: str  # UUID string of the parent comment


class GetRepliesResponse(BaseModel):
    """Direct replies to a comment."""

    comment_id: str
    replies: list[CommentItem]
    total: int


class GetRepliesUseCase:
    """Use case for loading one level of a comment thread."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        replies = await self.comment_service.list_replies(
            CommentId(UUID(request.comment_id))
        )
        return GetRepliesResponse(
            comment_id=request.comment_id,
            replies=[CommentItem.from_comment(r) for r in replies],
            total=len(replies),
        )
