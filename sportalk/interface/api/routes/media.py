"""Media routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel

from sportalk.application.usecase.media import (
    CreateMediaRequest,
    CreateMediaResponse,
    CreateMediaUseCase,
    ListMediaRequest,
    ListMediaResponse,
    ListMediaUseCase,
    RemoveMediaRequest,
    RemoveMediaResponse,
    RemoveMediaUseCase,
    UpdateMediaStatusRequest,
    UpdateMediaStatusResponse,
    UpdateMediaStatusUseCase,
)
from sportalk.config import AuthSettings
from sportalk.domain.error import DomainError
from sportalk.domain.value import MediaStatus, MediaType
from sportalk.interface.api.auth import require_principal
from sportalk.interface.error import domain_error_to_http, unexpected_error_to_http

router = APIRouter(tags=["media"], route_class=DishkaRoute)


class CreateMediaAPIRequest(BaseModel):
    """API request for registering an upload."""

    type: MediaType


@router.post(
    "/posts/{post_id}/media",
    response_model=CreateMediaResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_media(
    post_id: UUID,
    request: CreateMediaAPIRequest,
    create_media_use_case: FromDishka[CreateMediaUseCase],
    auth_settings: FromDishka[AuthSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreateMediaResponse:
    """Attach a pending upload to a post. Only the post author can attach."""
    principal_id = require_principal(authorization, auth_token, auth_settings)

    try:
        return await create_media_use_case.execute(
            CreateMediaRequest(
                post_id=str(post_id), user_id=principal_id, type=request.type
            )
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Media creation rejected")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error creating media")


@router.get("/posts/{post_id}/media", response_model=ListMediaResponse)
async def list_media(
    post_id: UUID,
    list_media_use_case: FromDishka[ListMediaUseCase],
) -> ListMediaResponse:
    """Media attached to a post."""
    try:
        return await list_media_use_case.execute(ListMediaRequest(post_id=str(post_id)))
    except DomainError as e:
        raise domain_error_to_http(e, "Media lookup failed")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error listing media")


class UpdateMediaStatusAPIRequest(BaseModel):
    """API request for reporting upload progress."""

    status: MediaStatus
    url: str | None = None


@router.patch("/media/{media_id}/status", response_model=UpdateMediaStatusResponse)
async def update_media_status(
    media_id: UUID,
    request: UpdateMediaStatusAPIRequest,
    update_media_status_use_case: FromDishka[UpdateMediaStatusUseCase],
    auth_settings: FromDishka[AuthSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UpdateMediaStatusResponse:
    """Move an upload to COMPLETED or FAILED. Only the post author can update."""
    principal_id = require_principal(authorization, auth_token, auth_settings)

    try:
        return await update_media_status_use_case.execute(
            UpdateMediaStatusRequest(
                media_id=str(media_id),
                user_id=principal_id,
                status=request.status,
                url=request.url,
            )
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Media status update rejected")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error updating media status")


@router.delete("/media/{media_id}", response_model=RemoveMediaResponse)
async def remove_media(
    media_id: UUID,
    remove_media_use_case: FromDishka[RemoveMediaUseCase],
    auth_settings: FromDishka[AuthSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> RemoveMediaResponse:
    """Soft-delete media. Only the post author can delete."""
    principal_id = require_principal(authorization, auth_token, auth_settings)

    try:
        return await remove_media_use_case.execute(
            RemoveMediaRequest(media_id=str(media_id), user_id=principal_id)
        )
    except DomainError as e:
        raise domain_error_to_http(e, "Media removal rejected")
    except Exception as e:
        raise unexpected_error_to_http(e, "Unexpected error removing media")
