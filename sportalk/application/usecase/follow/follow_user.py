"""Follow user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from sportalk.domain.service import FollowService
from sportalk.domain.value import UserId


class FollowUserRequest(BaseModel):
    """Follow user request."""

    follower_id: str  # Current user ID
    following_id: str  # User to follow


class FollowUserResponse(BaseModel):
    """Follow user response."""

    follow_id: str
    follower_id: str
    following_id: str
    created_at: datetime


class FollowUserUseCase:
    """Use case for following another user."""

    def __init__(self, follow_service: FollowService) -> None:
        """Initialize follow user use case.

        Args:
            follow_service: Follow domain service
        """
        self.follow_service = follow_service

    async def execute(self, request: FollowUserRequest) -> FollowUserResponse:
        """Execute follow flow.

        Raises:
            BadRequestError: If a user tries to follow themselves
            NotFoundError: If the target user does not exist
            ConflictError: If already following
        """
        follow = await self.follow_service.follow(
            follower_id=UserId(UUID(request.follower_id)),
            following_id=UserId(UUID(request.following_id)),
        )
        return FollowUserResponse(
            follow_id=str(follow.id),
            follower_id=str(follow.follower_id),
            following_id=str(follow.following_id),
            created_at=follow.created_at,
        )
