"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.application.usecase.common import PostDetailItem
from sportalk.domain.service import PostService
from sportalk.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostDetailItem


class GetPostUseCase:
    """Use case for reading one post with all its relations."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If post not found or deleted
        """
        detail = await self.post_service.get_post(PostId(UUID(request.post_id)))
        return GetPostResponse(post=PostDetailItem.from_detail(detail))
