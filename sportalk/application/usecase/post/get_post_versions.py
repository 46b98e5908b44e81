"""Get post versions use case."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.application.usecase.common import PostVersionItem
from sportalk.domain.service import PostService
from sportalk.domain.value import PostId


class GetPostVersionsRequest(BaseModel):
    """Get post versions request."""

    post_id: str  # UUID string


class GetPostVersionsResponse(BaseModel):
    """Version history, oldest first."""

    post_id: str
    versions: list[PostVersionItem]
    total: int


class GetPostVersionsUseCase:
    """Use case for reading a post's edit history (also after deletion)."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostVersionsRequest) -> GetPostVersionsResponse:
        versions = await self.post_service.get_post_versions(
            PostId(UUID(request.post_id))
        )
        return GetPostVersionsResponse(
            post_id=request.post_id,
            versions=[PostVersionItem.from_version(v) for v in versions],
            total=len(versions),
        )
