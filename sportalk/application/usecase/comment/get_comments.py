"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.application.usecase.common import CommentItem
from sportalk.domain.service import CommentService
from sportalk.domain.value import PostId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for getting all comments of a post, oldest first."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Comments come back flat; clients thread them by ``parent_comment_id``.
        """
        comments = await self.comment_service.list_comments(
            PostId(UUID(request.post_id))
        )
        items = [CommentItem.from_comment(c.comment, c.author) for c in comments]
        return GetCommentsResponse(
            post_id=request.post_id, comments=items, total=len(items)
        )
