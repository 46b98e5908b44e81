"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from sportalk.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    GetPostVersionsRequest,
    GetPostVersionsResponse,
    GetPostVersionsUseCase,
    IncrementViewCountRequest,
    IncrementViewCountResponse,
    IncrementViewCountUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    RemovePostRequest,
    RemovePostResponse,
    RemovePostUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from sportalk.config import AuthSettings
from sportalk.domain.error import DomainError
from sportalk.domain.model.post import POST_CONTENT_MAX_LENGTH
from sportalk.domain.value import PostSort, PostType
from sportalk.interface.api.auth import require_principal
from sportalk.interface.error import (
    domain_error_to_http,
    unexpected_error_to_http,
    validation_error_to_http,
)

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    content: str = Field(min_length=1, max_length=POST_CONTENT_MAX_LENGTH)
    type: PostType


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    auth_settings: FromDishka[AuthSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Create a new post. Version 1 is recorded with it.

    Requires authentication.
    """
    principal_id = require_principal(authorization, auth_token, auth_settings)

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=principal_id, content=request.content, type=request.type
            )
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Post creation rejected")
    except ValueError as e:
        raise validation_error_to_http(e, "Post creation validation error")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error creating post")


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    take: int | None = Query(default=None, ge=1),
    skip: int = Query(default=0, ge=0),
    author_id: UUID | None = Query(default=None),
    search: str | None = Query(default=None, max_length=100),
    sort: PostSort = Query(default=PostSort.NEWEST),
) -> ListPostsResponse:
    """List posts with authors, comments and media.

    Args:
        take: Page size (defaults and caps come from settings)
        skip: Number of posts to skip
        author_id: Only list this author's posts
        search: Keyword to look for in post content
        sort: ``newest`` for the feed, ``popular`` for most viewed first
    """
    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(
                take=take,
                skip=skip,
                author_id=str(author_id) if author_id else None,
                search=search,
                sort=sort,
            )
        )
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error listing posts")


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a post with its author, comments, media and versions."""
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=str(post_id)))
    except DomainError as e:
        raise domain_error_to_http(e, "Post lookup failed")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error getting post")


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields stay unchanged."""

    content: str | None = Field(
        default=None, min_length=1, max_length=POST_CONTENT_MAX_LENGTH
    )
    type: PostType | None = None
    edit_reason: str | None = Field(default=None, max_length=500)


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    auth_settings: FromDishka[AuthSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UpdatePostResponse:
    """Update a post. The replaced content is kept as a new version.

    Only the post author can edit.
    """
    principal_id = require_principal(authorization, auth_token, auth_settings)

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=str(post_id),
                user_id=principal_id,
                content=request.content,
                type=request.type,
                edit_reason=request.edit_reason,
            )
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Post update rejected")
    except ValueError as e:
        raise validation_error_to_http(e, "Post update validation error")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error updating post")


@router.delete("/{post_id}", response_model=RemovePostResponse)
async def remove_post(
    post_id: UUID,
    remove_post_use_case: FromDishka[RemovePostUseCase],
    auth_settings: FromDishka[AuthSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> RemovePostResponse:
    """Soft-delete a post. Only the post author can delete."""
    principal_id = require_principal(authorization, auth_token, auth_settings)

    try:
        return await remove_post_use_case.execute(
            RemovePostRequest(post_id=str(post_id), user_id=principal_id)
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Post removal rejected")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error removing post")


@router.get("/{post_id}/versions", response_model=GetPostVersionsResponse)
async def get_post_versions(
    post_id: UUID,
    get_post_versions_use_case: FromDishka[GetPostVersionsUseCase],
) -> GetPostVersionsResponse:
    """Edit history of a post, oldest first."""
    try:
        return await get_post_versions_use_case.execute(
            GetPostVersionsRequest(post_id=str(post_id))
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Post versions lookup failed")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error getting post versions")


@router.post("/{post_id}/views", response_model=IncrementViewCountResponse)
async def increment_view_count(
    post_id: UUID,
    increment_view_count_use_case: FromDishka[IncrementViewCountUseCase],
) -> IncrementViewCountResponse:
    """Count one view of a post."""
    try:
        return await increment_view_count_use_case.execute(
            IncrementViewCountRequest(post_id=str(post_id))
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Post view rejected")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error counting post view")
