"""Update media status use case."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.application.usecase.common import MediaItem
from sportalk.domain.service import MediaService
from sportalk.domain.value import MediaId, MediaStatus, UserId


class UpdateMediaStatusRequest(BaseModel):
    """Update media status request."""

    media_id: str  # UUID string
    user_id: str  # Current user ID (must be the post's author)
    status: MediaStatus
    url: str | None = None  # Only stored when status is COMPLETED


class UpdateMediaStatusResponse(BaseModel):
    """Update media status response."""

    media: MediaItem


class UpdateMediaStatusUseCase:
    """Use case for reporting upload progress."""

    def __init__(self, media_service: MediaService) -> None:
        """Initialize update media status use case.

        Args:
            media_service: Media domain service
        """
        self.media_service = media_service

    async def execute(
        self, request: UpdateMediaStatusRequest
    ) -> UpdateMediaStatusResponse:
        """Execute update media status flow.

        Raises:
            NotFoundError: If media or its post is not found
            PermissionDeniedError: If user doesn't own the post
            InvalidStatusTransitionError: If the upload already finished
        """
        media = await self.media_service.update_media_status(
            principal_id=UserId(UUID(request.user_id)),
            media_id=MediaId(UUID(request.media_id)),
            status=request.status,
            url=request.url,
        )
        return UpdateMediaStatusResponse(media=MediaItem.from_media(media))
