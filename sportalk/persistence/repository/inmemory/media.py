"""In-memory media repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from sportalk.domain.model.media import Media
from sportalk.domain.repository.media import MediaRepository
from sportalk.domain.value import MediaId, PostId

from .base import InMemoryRepository


class InMemoryMediaRepository(InMemoryRepository, MediaRepository):
    """In-memory implementation of MediaRepository for testing."""

    def __init__(self) -> None:
        self._media: dict[MediaId, Media] = {}

    async def find_by_id(
        self, media_id: MediaId, include_deleted: bool = False
    ) -> Optional[Media]:
        """Find a media record by ID."""
        media = self._media.get(media_id)
        if media and media.deleted_at is not None and not include_deleted:
            return None
        return media

    async def find_by_post(self, post_id: PostId) -> list[Media]:
        """Non-deleted media of a post."""
        return await self.find_by_posts([post_id])

    async def find_by_posts(self, post_ids: Sequence[PostId]) -> list[Media]:
        """Non-deleted media of the given posts, oldest first."""
        wanted = set(post_ids)
        return sorted(
            (
                m
                for m in self._media.values()
                if m.post_id in wanted and m.deleted_at is None
            ),
            key=lambda m: (m.created_at, m.id),
        )

    async def save(self, media: Media) -> Media:
        """Save or update a media record."""
        self._media[media.id] = media
        return media

    async def soft_delete(self, media_id: MediaId) -> None:
        """Mark a media record as deleted."""
        media = self._media.get(media_id)
        if media:
            self._media[media_id] = media.model_copy(
                update={"deleted_at": datetime.now()}
            )
