"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, Field

from sportalk.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    RemoveCommentRequest,
    RemoveCommentResponse,
    RemoveCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from sportalk.config import AuthSettings
from sportalk.domain.error import DomainError
from sportalk.domain.model.comment import COMMENT_CONTENT_MAX_LENGTH
from sportalk.interface.api.auth import require_principal
from sportalk.interface.error import (
    domain_error_to_http,
    unexpected_error_to_http,
    validation_error_to_http,
)

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=COMMENT_CONTENT_MAX_LENGTH)
    parent_comment_id: UUID | None = None


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    auth_settings: FromDishka[AuthSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a post, or reply to a comment of the same post.

    Requires authentication.
    """
    principal_id = require_principal(authorization, auth_token, auth_settings)

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post_id),
                author_id=principal_id,
                content=request.content,
                parent_comment_id=(
                    str(request.parent_comment_id)
                    if request.parent_comment_id
                    else None
                ),
            )
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Comment creation rejected")
    except ValueError as e:
        raise validation_error_to_http(e, "Comment creation validation error")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error creating comment")


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """All comments of a post, oldest first."""
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(post_id=str(post_id))
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Comments lookup failed")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error getting comments")


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1, max_length=COMMENT_CONTENT_MAX_LENGTH)


@router.patch("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    auth_settings: FromDishka[AuthSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Overwrite a comment's content. Only the comment author can edit."""
    principal_id = require_principal(authorization, auth_token, auth_settings)

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=str(comment_id),
                user_id=principal_id,
                content=request.content,
            )
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Comment update rejected")
    except ValueError as e:
        raise validation_error_to_http(e, "Comment update validation error")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error updating comment")


@router.delete("/comments/{comment_id}", response_model=RemoveCommentResponse)
async def remove_comment(
    comment_id: UUID,
    remove_comment_use_case: FromDishka[RemoveCommentUseCase],
    auth_settings: FromDishka[AuthSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> RemoveCommentResponse:
    """Soft-delete a comment. Only the comment author can delete."""
    principal_id = require_principal(authorization, auth_token, auth_settings)

    try:
        return await remove_comment_use_case.execute(
            RemoveCommentRequest(comment_id=str(comment_id), user_id=principal_id)
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Comment removal rejected")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error removing comment")


@router.get("/comments/{comment_id}/replies", response_model=GetRepliesResponse)
async def get_replies(
    comment_id: UUID,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
) -> GetRepliesResponse:
    """Direct replies to a comment."""
    try:
        return await get_replies_use_case.execute(
            GetRepliesRequest(comment_id=str(comment_id))
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Replies lookup failed")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error getting replies")
