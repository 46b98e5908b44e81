"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from sportalk.application.usecase.common import PostItem
from sportalk.domain.model.post import POST_CONTENT_MAX_LENGTH
from sportalk.domain.service import PostService
from sportalk.domain.value import PostId, PostType, UserId


class UpdatePostRequest(BaseModel):
    """Update post request.

    Omitted fields are left untouched.
    """

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str | None = Field(
        default=None, min_length=1, max_length=POST_CONTENT_MAX_LENGTH
    )
    type: PostType | None = None
    edit_reason: str | None = Field(default=None, max_length=500)


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post: PostItem


class UpdatePostUseCase:
    """Use case for editing a post and recording the replaced content."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request with the fields to change

        Returns:
            Updated post

        Raises:
            NotFoundError: If post not found or deleted
            PermissionDeniedError: If user doesn't own the post
        """
        post = await self.post_service.update_post(
            principal_id=UserId(UUID(request.user_id)),
            post_id=PostId(UUID(request.post_id)),
            content=request.content,
            type=request.type,
            edit_reason=request.edit_reason,
        )
        return UpdatePostResponse(post=PostItem.from_post(post))
