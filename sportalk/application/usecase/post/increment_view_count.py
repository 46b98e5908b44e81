"""Increment view count use case."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.domain.service import PostService
from sportalk.domain.value import PostId


class IncrementViewCountRequest(BaseModel):
    """Increment view count request."""

    post_id: str  # UUID string


class IncrementViewCountResponse(BaseModel):
    """Increment view count response."""

    success: bool


class IncrementViewCountUseCase:
    """Use case for counting a post view."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(
        self, request: IncrementViewCountRequest
    ) -> IncrementViewCountResponse:
        """Execute increment view count flow.

        Raises:
            NotFoundError: If post not found or deleted
        """
        await self.post_service.increment_view_count(PostId(UUID(request.post_id)))
        return IncrementViewCountResponse(success=True)
