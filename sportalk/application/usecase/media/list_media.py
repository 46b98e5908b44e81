"""List media use case."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.application.usecase.common import MediaItem
from sportalk.domain.service import MediaService
from sportalk.domain.value import PostId


class ListMediaRequest(BaseModel):
    """List media request."""

    post_id: str  # UUID string


class ListMediaResponse(BaseModel):
    """List media response."""

    post_id: str
    media: list[MediaItem]


class ListMediaUseCase:
    """Use case for listing a post's media."""

    def __init__(self, media_service: MediaService) -> None:
        self.media_service = media_service

    async def execute(self, request: ListMediaRequest) -> ListMediaResponse:
        media = await self.media_service.list_media(PostId(UUID(request.post_id)))
        return ListMediaResponse(
            post_id=request.post_id, media=[MediaItem.from_media(m) for m in media]
        )
