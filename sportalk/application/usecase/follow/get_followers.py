"""Get followers and following use cases."""

from uuid import UUID

from pydantic import BaseModel

from sportalk.application.usecase.common import UserItem
from sportalk.domain.service import FollowService
from sportalk.domain.value import UserId


class GetFollowUsersRequest(BaseModel):
    """Request for either side of a user's follow graph."""

    user_id: str  # UUID string


class GetFollowUsersResponse(BaseModel):
    """Users on one side of the follow graph."""

    user_id: str
    users: list[UserItem]
    total: int


class GetFollowersUseCase:
    """Use case for listing who follows a user."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: GetFollowUsersRequest) -> GetFollowUsersResponse:
        users = await self.follow_service.get_followers(UserId(UUID(request.user_id)))
        return GetFollowUsersResponse(
            user_id=request.user_id,
            users=[UserItem.from_user(u) for u in users],
            total=len(users),
        )


class GetFollowingUseCase:
    """Use case for listing who a user follows."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: GetFollowUsersRequest) -> GetFollowUsersResponse:
        users = await self.follow_service.get_following(UserId(UUID(request.user_id)))
        return GetFollowUsersResponse(
            user_id=request.user_id,
            users=[UserItem.from_user(u) for u in users],
            total=len(users),
        )
