"""Follow use cases."""

from .follow_user import FollowUserRequest, FollowUserResponse, FollowUserUseCase
from .get_follow_counts import (
    GetFollowCountsRequest,
    GetFollowCountsResponse,
    GetFollowCountsUseCase,
)
from .get_followers import (
    GetFollowersUseCase,
    GetFollowingUseCase,
    GetFollowUsersRequest,
    GetFollowUsersResponse,
)
from .unfollow_user import (
    UnfollowUserRequest,
    UnfollowUserResponse,
    UnfollowUserUseCase,
)

__all__ = [
    "FollowUserRequest",
    "FollowUserResponse",
    "FollowUserUseCase",
    "GetFollowCountsRequest",
    "GetFollowCountsResponse",
    "GetFollowCountsUseCase",
    "GetFollowersUseCase",
    "GetFollowingUseCase",
    "GetFollowUsersRequest",
    "GetFollowUsersResponse",
    "UnfollowUserRequest",
    "UnfollowUserResponse",
    "UnfollowUserUseCase",
]
