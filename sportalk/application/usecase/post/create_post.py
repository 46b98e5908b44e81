"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from sportalk.application.usecase.common import PostItem
from sportalk.domain.model.post import POST_CONTENT_MAX_LENGTH
from sportalk.domain.service import PostService
from sportalk.domain.value import PostType, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # UUID string of the principal
    content: str = Field(min_length=1, max_length=POST_CONTENT_MAX_LENGTH)
    type: PostType


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostItem


class CreatePostUseCase:
    """Use case for creating a post (its first version is written with it)."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            Created post
        """
        post = await self.post_service.create_post(
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            type=request.type,
        )
        return CreatePostResponse(post=PostItem.from_post(post))
