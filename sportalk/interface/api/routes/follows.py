"""Follow routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status

from sportalk.application.usecase.follow import (
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
    GetFollowCountsRequest,
    GetFollowCountsResponse,
    GetFollowCountsUseCase,
    GetFollowersUseCase,
    GetFollowingUseCase,
    GetFollowUsersRequest,
    GetFollowUsersResponse,
    UnfollowUserRequest,
    UnfollowUserResponse,
    UnfollowUserUseCase,
)
from sportalk.config import AuthSettings
from sportalk.domain.error import DomainError
from sportalk.interface.api.auth import optional_principal, require_principal
from sportalk.interface.error import domain_error_to_http, unexpected_error_to_http

router = APIRouter(prefix="/users", tags=["follows"], route_class=DishkaRoute)


@router.post(
    "/{user_id}/follow",
    response_model=FollowUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def follow_user(
    user_id: UUID,
    follow_user_use_case: FromDishka[FollowUserUseCase],
    auth_settings: FromDishka[AuthSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> FollowUserResponse:
    """Follow a user. Requires authentication."""
    principal_id = require_principal(authorization, auth_token, auth_settings)

    try:
        return await follow_user_use_case.execute(
            FollowUserRequest(follower_id=principal_id, following_id=str(user_id))
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Follow rejected")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error following user")


@router.delete("/{user_id}/follow", response_model=UnfollowUserResponse)
async def unfollow_user(
    user_id: UUID,
    unfollow_user_use_case: FromDishka[UnfollowUserUseCase],
    auth_settings: FromDishka[AuthSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UnfollowUserResponse:
    """Stop following a user. Requires authentication."""
    principal_id = require_principal(authorization, auth_token, auth_settings)

    try:
        return await unfollow_user_use_case.execute(
            UnfollowUserRequest(follower_id=principal_id, following_id=str(user_id))
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Unfollow rejected")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error unfollowing user")


@router.get("/{user_id}/followers", response_model=GetFollowUsersResponse)
async def get_followers(
    user_id: UUID,
    get_followers_use_case: FromDishka[GetFollowersUseCase],
) -> GetFollowUsersResponse:
    """Users following this user."""
    try:
        return await get_followers_use_case.execute(
            GetFollowUsersRequest(user_id=str(user_id))
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Followers lookup failed")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error getting followers")


@router.get("/{user_id}/following", response_model=GetFollowUsersResponse)
async def get_following(
    user_id: UUID,
    get_following_use_case: FromDishka[GetFollowingUseCase],
) -> GetFollowUsersResponse:
    """Users this user follows."""
    try:
        return await get_following_use_case.execute(
            GetFollowUsersRequest(user_id=str(user_id))
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Following lookup failed")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error getting following")


@router.get("/{user_id}/follow-counts", response_model=GetFollowCountsResponse)
async def get_follow_counts(
    user_id: UUID,
    get_follow_counts_use_case: FromDishka[GetFollowCountsUseCase],
    auth_settings: FromDishka[AuthSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetFollowCountsResponse:
    """Follower totals. ``is_following`` is set for authenticated callers."""
    viewer_id = optional_principal(authorization, auth_token, auth_settings)

    try:
        return await get_follow_counts_use_case.execute(
            GetFollowCountsRequest(user_id=str(user_id), viewer_id=viewer_id)
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Follow counts lookup failed")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error getting follow counts")
