"""Remove post use case."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.application.usecase.common import PostItem
from sportalk.domain.service import PostService
from sportalk.domain.value import PostId, UserId


class RemovePostRequest(BaseModel):
    """Remove post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class RemovePostResponse(BaseModel):
    """Remove post response, the post as it was before deletion."""

    post: PostItem


class RemovePostUseCase:
    """Use case for soft-deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize remove post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: RemovePostRequest) -> RemovePostResponse:
        post = await self.post_service.remove_post(
            principal_id=UserId(UUID(request.user_id)),
            post_id=PostId(UUID(request.post_id)),
        )
        return RemovePostResponse(post=PostItem.from_post(post))
