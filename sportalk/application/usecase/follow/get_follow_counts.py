"""Get follow counts use case."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.domain.service import FollowService
from sportalk.domain.value import UserId


class GetFollowCountsRequest(BaseModel):
    """Get follow counts request."""

    user_id: str  # UUID string
    viewer_id: str | None = None  # Current user, if authenticated


class GetFollowCountsResponse(BaseModel):
    """Follower totals, plus whether the viewer follows this user."""

    user_id: str
    followers: int
    following: int
    is_following: bool


class GetFollowCountsUseCase:
    """Use case for profile follow statistics."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(
        self, request: GetFollowCountsRequest
    ) -> GetFollowCountsResponse:
        """Execute get follow counts flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        user_id = UserId(UUID(request.user_id))
        counts = await self.follow_service.get_follow_counts(user_id)

        is_following = False
        if request.viewer_id:
            is_following = await self.follow_service.is_following(
                UserId(UUID(request.viewer_id)), user_id
            )

        return GetFollowCountsResponse(
            user_id=request.user_id,
            followers=counts.followers,
            following=counts.following,
            is_following=is_following,
        )
