"""Unfollow user use case."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.domain.service import FollowService
from sportalk.domain.value import UserId


class UnfollowUserRequest(BaseModel):
    """Unfollow user request."""

    follower_id: str  # Current user ID
    following_id: str  # User to stop following


class UnfollowUserResponse(BaseModel):
    """Unfollow user response."""

    follow_id: str
    success: bool


class UnfollowUserUseCase:
    """Use case for removing a follow relation."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: UnfollowUserRequest) -> UnfollowUserResponse:
        """Execute unfollow flow.

        Raises:
            NotFoundError: If the relation does not exist
        """
        follow = await self.follow_service.unfollow(
            follower_id=UserId(UUID(request.follower_id)),
            following_id=UserId(UUID(request.following_id)),
        )
        return UnfollowUserResponse(follow_id=str(follow.id), success=True)
