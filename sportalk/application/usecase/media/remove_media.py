"""Remove media use case."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.application.usecase.common import MediaItem
from sportalk.domain.service import MediaService
from sportalk.domain.value import MediaId, UserId


class RemoveMediaRequest(BaseModel):
    """Remove media request."""

    media_id: str  # UUID string
    user_id: str  # Current user ID (must be the post's author)


class RemoveMediaResponse(BaseModel):
    """The media as it was before deletion."""

    media: MediaItem


class RemoveMediaUseCase:
    """Use case for soft-deleting media."""

    def __init__(self, media_service: MediaService) -> None:
        self.media_service = media_service

    async def execute(self, request: RemoveMediaRequest) -> RemoveMediaResponse:
        media = await self.media_service.remove_media(
            principal_id=UserId(UUID(request.user_id)),
            media_id=MediaId(UUID(request.media_id)),
        )
        return RemoveMediaResponse(media=MediaItem.from_media(media))
