"""Media domain service.

Media has no author of its own. Every mutation is authorized against the
author of the parent post.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from sportalk.domain.error import InvalidStatusTransitionError, NotFoundError
from sportalk.domain.model import Media, Post
from sportalk.domain.repository import MediaRepository, PostRepository
from sportalk.domain.value import MediaId, MediaStatus, MediaType, PostId, UserId

from .authorization import check_ownership
from .base import Service
from .post_service import PostService


class MediaService(Service):
    """Domain service for media operations."""

    def __init__(
        self,
        media_repository: MediaRepository,
        post_repository: PostRepository,
        post_service: PostService,
    ) -> None:
        """Initialize media service.

        Args:
            media_repository: Media repository
            post_repository: Post repository (parent lookups)
            post_service: Post domain service (post existence checks)
        """
        self.media_repository = media_repository
        self.post_repository = post_repository
        self.post_service = post_service

    async def create_media(
        self, author_id: UserId, post_id: PostId, type: MediaType
    ) -> Media:
        """Register a pending upload on a post.

        Args:
            author_id: User attaching the media (must be the post's author)
            post_id: Post ID
            type: Media kind

        Returns:
            Media in UPLOADING status with an empty url

        Raises:
            NotFoundError: If post not found or deleted
            PermissionDeniedError: If the user is not the post's author
        """
        with logfire.span(
            "media_service.create_media", post_id=str(post_id), author_id=str(author_id)
        ):
            post = await self.post_service.get_post_by_id(post_id)
            check_ownership(author_id, post.author_id, "post", post_id)

            media = Media(
                id=MediaId(uuid4()),
                post_id=post_id,
                type=type,
                url="",
                status=MediaStatus.UPLOADING,
                created_at=datetime.now(),
            )
            saved = await self.media_repository.save(media)
            logfire.info("Media created", media_id=str(saved.id))
            return saved

    async def update_media_status(
        self,
        principal_id: UserId,
        media_id: MediaId,
        status: MediaStatus,
        url: Optional[str] = None,
    ) -> Media:
        """Move an upload to a new status.

        The url is only recorded when the upload completes.

        Raises:
            NotFoundError: If media or its post is not found
            PermissionDeniedError: If the principal is not the post's author
            InvalidStatusTransitionError: If the media is already terminal
        """
        with logfire.span(
            "media_service.update_media_status",
            media_id=str(media_id),
            status=status.value,
        ):
            media, _ = await self._load_with_post(principal_id, media_id)

            if not media.status.can_transition_to(status):
                logfire.warn(
                    "Invalid media status transition",
                    media_id=str(media_id),
                    current=media.status.value,
                    requested=status.value,
                )
                raise InvalidStatusTransitionError(
                    str(media_id), media.status.value, status.value
                )

            changes: dict = {"status": status}
            if status == MediaStatus.COMPLETED and url:
                changes["url"] = url

            saved = await self.media_repository.save(media.model_copy(update=changes))
            logfire.info(
                "Media status updated", media_id=str(media_id), status=status.value
            )
            return saved

    async def remove_media(self, principal_id: UserId, media_id: MediaId) -> Media:
        """Soft-delete a media record.

        Returns:
            The media as it was before deletion

        Raises:
            NotFoundError: If media or its post is not found
            PermissionDeniedError: If the principal is not the post's author
        """
        with logfire.span("media_service.remove_media", media_id=str(media_id)):
            media, _ = await self._load_with_post(principal_id, media_id)
            await self.media_repository.soft_delete(media_id)
            logfire.info("Media removed", media_id=str(media_id))
            return media

    async def list_media(self, post_id: PostId) -> list[Media]:
        """Non-deleted media of a non-deleted post."""
        with logfire.span("media_service.list_media", post_id=str(post_id)):
            await self.post_service.get_post_by_id(post_id)
            return await self.media_repository.find_by_post(post_id)

    async def _load_with_post(
        self, principal_id: UserId, media_id: MediaId
    ) -> tuple[Media, Post]:
        """Load media and its parent post, then authorize the principal."""
        media = await self.media_repository.find_by_id(media_id)
        if not media:
            logfire.warn("Media not found", media_id=str(media_id))
            raise NotFoundError("Media", str(media_id))

        # The parent may be soft-deleted; ownership still follows its author
        post = await self.post_repository.find_by_id(
            media.post_id, include_deleted=True
        )
        if not post:
            logfire.warn(
                "Post of media not found",
                media_id=str(media_id),
                post_id=str(media.post_id),
            )
            raise NotFoundError("Post", str(media.post_id))

        check_ownership(principal_id, post.author_id, "media", media_id)
        return media, post
