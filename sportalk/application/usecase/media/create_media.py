"""Create media use case."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.application.usecase.common import MediaItem
from sportalk.domain.service import MediaService
from sportalk.domain.value import MediaType, PostId, UserId


class CreateMediaRequest(BaseModel):
    """Create media request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be the post's author)
    type: MediaType


class CreateMediaResponse(BaseModel):
    """Create media response."""

    media: MediaItem


class CreateMediaUseCase:
    """Use case for registering an upload before it starts."""

    def __init__(self, media_service: MediaService) -> None:
        """Initialize create media use case.

        Args:
            media_service: Media domain service
        """
        self.media_service = media_service

    async def execute(self, request: CreateMediaRequest) -> CreateMediaResponse:
        """Execute create media flow.

        Returns:
            Media in UPLOADING status with an empty url

        Raises:
            NotFoundError: If post not found or deleted
            PermissionDeniedError: If user doesn't own the post
        """
        media = await self.media_service.create_media(
            author_id=UserId(UUID(request.user_id)),
            post_id=PostId(UUID(request.post_id)),
            type=request.type,
        )
        return CreateMediaResponse(media=MediaItem.from_media(media))
