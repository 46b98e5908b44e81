"""List posts use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from sportalk.application.usecase.common import PostDetailItem
from sportalk.config import PaginationSettings
from sportalk.domain.service import PostService
from sportalk.domain.value import PostSort, UserId


class ListPostsRequest(BaseModel):
    """List posts request."""

    take: int | None = Field(default=None, ge=1)  # Page size, None for default
    skip: int = Field(default=0, ge=0)
    author_id: str | None = None  # UUID string filter
    search: str | None = Field(default=None, max_length=100)
    sort: PostSort = PostSort.NEWEST


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostDetailItem]
    take: int
    skip: int
    sort: PostSort


class ListPostsUseCase:
    """Use case for the post feed, keyword search and popular posts."""

    def __init__(
        self, post_service: PostService, pagination: PaginationSettings
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            pagination: Page size defaults and limits
        """
        self.post_service = post_service
        self.pagination = pagination

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Page size falls back to the configured default and is capped at the
        configured maximum.
        """
        take = min(
            request.take or self.pagination.default_take, self.pagination.max_take
        )
        author_id = UserId(UUID(request.author_id)) if request.author_id else None

        details = await self.post_service.list_posts(
            take=take,
            skip=request.skip,
            author_id=author_id,
            search=request.search,
            sort=request.sort,
        )
        return ListPostsResponse(
            posts=[PostDetailItem.from_detail(d) for d in details],
            take=take,
            skip=request.skip,
            sort=request.sort,
        )
