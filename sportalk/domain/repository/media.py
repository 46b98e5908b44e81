"""Media repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from sportalk.domain.model.media import Media
from sportalk.domain.value import MediaId, PostId


class MediaRepository(ABC):
    """Repository for Media entity."""

    @abstractmethod
    async def find_by_id(
        self, media_id: MediaId, include_deleted: bool = False
    ) -> Optional[Media]:
        """Find a media record by ID.

        Args:
            media_id: The media's unique identifier
            include_deleted: Whether to return soft-deleted media

        Returns:
            The media if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Media]:
        """Non-deleted media of a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            List of media
        """
        pass

    @abstractmethod
    async def find_by_posts(self, post_ids: Sequence[PostId]) -> List[Media]:
        """Non-deleted media of any of the given posts, oldest first.

        Args:
            post_ids: Post IDs to load media for

        Returns:
            List of media
        """
        pass

    @abstractmethod
    async def save(self, media: Media) -> Media:
        """Save a media record (create or update).

        Args:
            media: The media to save

        Returns:
            The saved media
        """
        pass

    @abstractmethod
    async def soft_delete(self, media_id: MediaId) -> None:
        """Mark a media record as deleted without removing its row.

        Args:
            media_id: The media ID
        """
        pass
